"""
Directory layout management for gover.

This module resolves the per-user install root and the paths of everything
stored beneath it. The root is resolved from the environment only and is
never guessed: if no home directory can be determined the caller gets a
HomeResolutionError instead of a relative path.

Directory Structure:
    Install Root (~/sdk/gover/ or %USERPROFILE%\\sdk\\gover\\):
        <version>/                        : One directory per downloaded version
            go<version>.src.tar.gz        : Downloaded source archive
            go<version>.src.tar.gz.asc    : Detached signature of the archive
            go/                           : Unpacked and built toolchain (GOROOT)
                bin/go                    : The toolchain binary
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from gover.core.exceptions import (
    DirectoryCreationError,
    DirectoryError,
    HomeResolutionError,
    InvalidVersionError,
)
from gover.core.platform import detect_os, exe_suffix

logger = logging.getLogger(__name__)

ROOT_MODE = 0o700


def home_dir() -> Path:
    """
    Get the current user's home directory.

    Plan 9 uses $home and Windows uses %USERPROFILE%. Everywhere else $HOME
    is checked before the user database.

    Returns:
        Path: The home directory.

    Raises:
        HomeResolutionError: If no home directory signal is available.
    """
    os_name = detect_os()

    if os_name == "plan9":
        home = os.environ.get("home")
        if home:
            return Path(home)
        raise HomeResolutionError("can't find user home directory; $home is empty")

    if os_name == "windows":
        user_profile = os.environ.get("USERPROFILE")
        if user_profile:
            return Path(user_profile)
        raise HomeResolutionError(
            "can't find user home directory; %USERPROFILE% is empty"
        )

    home = os.environ.get("HOME")
    if home:
        return Path(home)

    try:
        import pwd

        entry = pwd.getpwuid(os.getuid())
    except (ImportError, KeyError, AttributeError):
        entry = None
    if entry is not None and entry.pw_dir:
        return Path(entry.pw_dir)

    raise HomeResolutionError("can't find user home directory; $HOME is empty")


def get_install_root(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the directory under which all versions are stored.

    Args:
        override: Optional configured root. '~' is expanded.

    Returns:
        Path: Absolute install root (default: <home>/sdk/gover).

    Raises:
        HomeResolutionError: If the home directory is needed and unknown.

    Example:
        >>> get_install_root()
        PosixPath('/home/user/sdk/gover')
    """
    if override:
        root = Path(override).expanduser()
        if not root.is_absolute():
            raise HomeResolutionError(
                f"install root must be an absolute path, got {override!r}"
            )
        return root
    return home_dir() / "sdk" / "gover"


def ensure_install_root(root: Path) -> Path:
    """
    Create the install root with owner-only permissions.

    Args:
        root: Install root directory.

    Returns:
        Path: The created (or already existing) root.

    Raises:
        DirectoryCreationError: If the directory cannot be created.
    """
    try:
        root.mkdir(mode=ROOT_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"failed to create gover directory {root}: {e}"
        ) from e

    if not root.is_dir():
        raise DirectoryCreationError(f"gover root {root} is not a directory")

    logger.debug(f"Install root: {root}")
    return root


def validate_version(version: str) -> str:
    """
    Check that a version identifier is usable as a directory name.

    The version is otherwise opaque; no ordering or format is implied.

    Raises:
        InvalidVersionError: If the version is empty or would escape the root.
    """
    if not version:
        raise InvalidVersionError("version must not be empty")
    if version in (".", "..") or "/" in version or "\\" in version:
        raise InvalidVersionError(f"invalid version: {version!r}")
    return version


def get_version_dir(root: Path, version: str) -> Path:
    """Directory holding everything for one version."""
    return root / validate_version(version)


def get_goroot(root: Path, version: str) -> Path:
    """Unpacked toolchain directory (the GOROOT of the version)."""
    return get_version_dir(root, version) / "go"


def get_go_bin_dir(root: Path, version: str) -> Path:
    """Binary directory of the version."""
    return get_goroot(root, version) / "bin"


def get_go_binary(root: Path, version: str) -> Path:
    """Path of the version's go binary."""
    return get_go_bin_dir(root, version) / f"go{exe_suffix()}"


def list_versions(root: Path) -> list[str]:
    """
    List the names of the immediate children of the install root.

    Args:
        root: Install root directory.

    Returns:
        Sorted list of entry names.

    Raises:
        DirectoryError: If the root cannot be read.
    """
    try:
        return sorted(entry.name for entry in root.iterdir())
    except OSError as e:
        raise DirectoryError(f"failed to read gover directory {root}: {e}") from e
