"""
Bootstrap build invocation.

A Go source release builds itself: src/make.bash (or make.bat / make.rc)
compiles the toolchain using an already-installed Go. This module picks the
right script, runs it with live output, and reports a non-zero exit as
BuildFailedError. Builds are long and are never retried.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from gover.core.exceptions import BootstrapToolchainError, BuildError, BuildFailedError
from gover.core.platform import detect_os

logger = logging.getLogger(__name__)


def make_script() -> str:
    """
    Name of the bootstrap script for the current platform.

    Returns:
        'make.rc' on Plan 9, 'make.bat' on Windows, 'make.bash' elsewhere
    """
    os_name = detect_os()
    if os_name == "plan9":
        return "make.rc"
    elif os_name == "windows":
        return "make.bat"
    return "make.bash"


def detect_bootstrap_goroot() -> str:
    """
    Ask the system go for its GOROOT.

    make.bat does not find a bootstrap toolchain on its own, so on Windows
    the location is passed explicitly as GOROOT_BOOTSTRAP.

    Raises:
        BootstrapToolchainError: If no usable go is on PATH
    """
    try:
        result = subprocess.run(
            ["go", "env", "GOROOT"], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise BootstrapToolchainError(
            f"failed to detect an existing go installation for bootstrap: {e}"
        ) from e

    goroot = result.stdout.strip()
    if not goroot:
        raise BootstrapToolchainError(
            "failed to detect an existing go installation for bootstrap: "
            "'go env GOROOT' printed nothing"
        )
    return goroot


def build_toolchain(version_dir: Path) -> Path:
    """
    Compile the unpacked toolchain in a version directory.

    The script runs from <version_dir>/go/src with inherited stdio so the
    build output streams live.

    Args:
        version_dir: Version directory containing the unpacked go/ tree

    Returns:
        Path to the built GOROOT

    Raises:
        BootstrapToolchainError: If the bootstrap toolchain can't be located
        BuildFailedError: If the script exits with a non-zero status
        BuildError: If the script cannot be started
    """
    goroot = Path(version_dir) / "go"
    src_dir = goroot / "src"
    script = src_dir / make_script()

    env: Optional[dict[str, str]] = None
    if detect_os() == "windows":
        env = dict(os.environ)
        env["GOROOT_BOOTSTRAP"] = detect_bootstrap_goroot()
        logger.debug(f"GOROOT_BOOTSTRAP={env['GOROOT_BOOTSTRAP']}")

    logger.info(f"Building {goroot} with {script.name}")

    try:
        result = subprocess.run([str(script)], cwd=src_dir, env=env)
    except OSError as e:
        raise BuildError(f"failed to build go: cannot run {script}: {e}") from e

    if result.returncode != 0:
        raise BuildFailedError(script, result.returncode)

    return goroot
