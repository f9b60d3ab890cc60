"""
Toolchain install, build and launch for gover.
"""

from .builder import build_toolchain, make_script, detect_bootstrap_goroot
from .installer import (
    Installer,
    InstallResult,
    archive_name,
    archive_url,
    signature_url,
    DEFAULT_DOWNLOAD_URL,
)
from .launcher import launch_environment, run_version

__all__ = [
    "build_toolchain",
    "make_script",
    "detect_bootstrap_goroot",
    "Installer",
    "InstallResult",
    "archive_name",
    "archive_url",
    "signature_url",
    "DEFAULT_DOWNLOAD_URL",
    "launch_environment",
    "run_version",
]
