"""
Toolchain installation: fetch, verify, extract and build one version.

This module orchestrates the complete install workflow for a version:
1. Skip everything if the unpacked toolchain directory already exists
2. Create the version directory and take its install lock
3. Download the source archive and its detached signature
4. Verify the signature against the trusted key
5. Extract the archive
6. Run the bootstrap build

Nothing is rolled back on failure; an archive whose signature did not
validate is never extracted.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from gover.core.directory import get_goroot, get_version_dir
from gover.core.download import fetch
from gover.core.exceptions import (
    DirectoryCreationError,
    SignatureVerificationError,
)
from gover.core.filesystem import extract_tar_gz
from gover.core.locking import version_lock
from gover.core.verification import (
    TrustedKeyring,
    VerificationResult,
    load_trusted_keyring,
    verify_detached_signature,
)
from gover.toolchain.builder import build_toolchain

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_URL = "https://dl.google.com/go"


@dataclass
class InstallResult:
    """Result of an install operation."""

    version: str
    """Version identifier as given"""

    goroot: Path
    """Path to the installed toolchain directory"""

    was_installed: bool
    """Whether the toolchain directory already existed (nothing was done)"""


def archive_name(version: str) -> str:
    """File name of the source release for a version."""
    return f"go{version}.src.tar.gz"


def archive_url(version: str, download_url: str = DEFAULT_DOWNLOAD_URL) -> str:
    """URL of the source release for a version."""
    return f"{download_url.rstrip('/')}/{archive_name(version)}"


def signature_url(version: str, download_url: str = DEFAULT_DOWNLOAD_URL) -> str:
    """URL of the detached signature for a version's source release."""
    return archive_url(version, download_url) + ".asc"


def _log_verified(result: VerificationResult) -> None:
    logger.info(str(result))


class Installer:
    """
    Installs Go versions under an install root.

    Example:
        >>> installer = Installer(Path.home() / "sdk" / "gover")
        >>> result = installer.install("1.22.0")
        >>> print(f"Installed at: {result.goroot}")
    """

    def __init__(
        self,
        root: Path,
        download_url: str = DEFAULT_DOWNLOAD_URL,
        keyring: Optional[TrustedKeyring] = None,
        timeout: Optional[float] = None,
        on_verified: Optional[Callable[[VerificationResult], None]] = _log_verified,
    ):
        """
        Initialize installer.

        Args:
            root: Existing, writable install root
            download_url: Base URL of the distribution server
            keyring: Trusted keyring. If None, the embedded key is loaded on
                first verification.
            timeout: Optional fetch timeout in seconds
            on_verified: Callback for the signature confirmation event
        """
        self.root = Path(root)
        self.download_url = download_url
        self._keyring = keyring
        self.timeout = timeout
        self.on_verified = on_verified

    @property
    def keyring(self) -> TrustedKeyring:
        if self._keyring is None:
            self._keyring = load_trusted_keyring()
        return self._keyring

    def is_installed(self, version: str) -> bool:
        """Whether the unpacked toolchain directory of a version exists."""
        return get_goroot(self.root, version).exists()

    def install(self, version: str) -> InstallResult:
        """
        Install a version, doing nothing if it is already present.

        Presence of <root>/<version>/go is the only signal checked; a build
        that was interrupted earlier still counts as installed.

        Args:
            version: Opaque version identifier (e.g. "1.22.0")

        Returns:
            InstallResult

        Raises:
            InvalidVersionError: If the version can't be used as a directory
            DirectoryCreationError: If the version directory can't be created
            FetchError: If a download fails
            SignatureVerificationError: If the signature does not validate
            ExtractionError: If the archive can't be unpacked
            BuildError: If the bootstrap build fails
        """
        version_dir = get_version_dir(self.root, version)
        goroot = version_dir / "go"

        if goroot.exists():
            logger.info(f"go{version} already downloaded: {goroot}")
            return InstallResult(version=version, goroot=goroot, was_installed=True)

        try:
            version_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"failed to create source directory {version_dir}: {e}"
            ) from e

        with version_lock(version_dir):
            if goroot.exists():
                logger.info(f"go{version} installed by another process: {goroot}")
                return InstallResult(
                    version=version, goroot=goroot, was_installed=True
                )

            self._fetch_verify_extract(version, version_dir)
            build_toolchain(version_dir)

        return InstallResult(version=version, goroot=goroot, was_installed=False)

    def _fetch_verify_extract(self, version: str, version_dir: Path) -> None:
        """Download the release, check its signature, then unpack it."""
        archive_path = version_dir / archive_name(version)
        signature_path = archive_path.with_name(archive_path.name + ".asc")

        with fetch(
            archive_url(version, self.download_url), archive_path, self.timeout
        ) as archive, fetch(
            signature_url(version, self.download_url), signature_path, self.timeout
        ) as signature:
            try:
                verify_detached_signature(
                    self.keyring, archive, signature, self.on_verified
                )
            except SignatureVerificationError as e:
                raise SignatureVerificationError(
                    f"failed to verify go{version}: {e}"
                ) from e

            extract_tar_gz(archive, version_dir)
