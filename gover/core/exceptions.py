"""
Centralized exception hierarchy for gover.

Every failure the install and launch pipeline can produce is one of the
exceptions below, so the CLI can report it with a single handler.
"""

from pathlib import Path


# ============================================================================
# Base Exceptions
# ============================================================================


class GoverError(Exception):
    """Base exception for all gover errors."""

    pass


class ConfigError(GoverError):
    """Raised when the configuration file cannot be used."""

    pass


# ============================================================================
# Directory Exceptions
# ============================================================================


class HomeResolutionError(GoverError):
    """Raised when no usable home directory signal exists."""

    pass


class DirectoryError(GoverError):
    """Base exception for directory-related errors."""

    pass


class DirectoryCreationError(DirectoryError):
    """Raised when directory creation fails."""

    pass


class LockTimeout(GoverError):
    """Raised when a version lock cannot be acquired within timeout."""

    pass


# ============================================================================
# Install Pipeline Exceptions
# ============================================================================


class InvalidVersionError(GoverError):
    """Version identifier cannot be used as a directory name."""

    pass


class FetchError(GoverError):
    """Raised when a URL cannot be fetched to a local file."""

    pass


class SignatureVerificationError(GoverError):
    """Raised when a detached signature does not validate."""

    pass


class ExtractionError(GoverError):
    """Raised when an archive cannot be unpacked."""

    pass


class InsecureArchiveError(ExtractionError):
    """Raised when an archive member would land outside the destination."""

    pass


class BuildError(GoverError):
    """Base exception for bootstrap build errors."""

    pass


class BuildFailedError(BuildError):
    """Raised when the bootstrap script exits with a non-zero status."""

    def __init__(self, script: Path, returncode: int):
        self.script = script
        self.returncode = returncode
        super().__init__(f"failed to build go: {script} exited with status {returncode}")


class BootstrapToolchainError(BuildError):
    """Raised when an existing toolchain for bootstrapping cannot be located."""

    pass


# ============================================================================
# Launch Exceptions
# ============================================================================


class NotInstalledError(GoverError):
    """Raised when launching a version whose binary is absent."""

    def __init__(self, version: str, root: Path):
        self.version = version
        self.root = root
        super().__init__(
            f"go{version} is not downloaded. "
            f"Run 'gover download {version}' to install to {root}"
        )


class LaunchError(GoverError):
    """Raised when the selected go binary cannot be executed at all."""

    pass
