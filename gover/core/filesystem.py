"""
Archive extraction for downloaded source releases.

Go source releases are gzip-compressed tarballs whose members all live under
a top-level "go/" directory. Every member path is validated against the
destination before anything is written.
"""

import logging
import tarfile
from pathlib import Path
from typing import BinaryIO, Union

from gover.core.exceptions import ExtractionError, InsecureArchiveError

logger = logging.getLogger(__name__)


def _validate_archive_path(name: str, destination: Path) -> None:
    """
    Ensure an archive member resolves inside the destination directory.

    Raises:
        InsecureArchiveError: On absolute paths or parent traversal
    """
    if name.startswith(("/", "\\")) or (len(name) > 1 and name[1] == ":"):
        raise InsecureArchiveError(f"Archive contains absolute path: {name}")

    target = (destination / name).resolve()
    try:
        target.relative_to(destination.resolve())
    except ValueError:
        raise InsecureArchiveError(
            f"Archive member escapes destination directory: {name}"
        ) from None


def extract_tar_gz(
    source: Union[str, Path, BinaryIO],
    destination: Union[str, Path],
) -> None:
    """
    Extract a .tar.gz archive to a destination directory.

    Args:
        source: Archive path, or an open binary file positioned at its start
        destination: Directory to extract to (created if missing)

    Raises:
        InsecureArchiveError: If the archive contains malicious paths
        ExtractionError: If the archive cannot be read or written out

    Example:
        >>> extract_tar_gz("go1.22.0.src.tar.gz", "/home/user/sdk/gover/1.22.0")
    """
    destination = Path(destination)
    if isinstance(source, (str, Path)):
        label = str(source)
    else:
        label = getattr(source, "name", "<stream>")

    try:
        destination.mkdir(parents=True, exist_ok=True)
        if isinstance(source, (str, Path)):
            tar = tarfile.open(source, "r:gz")
        else:
            tar = tarfile.open(fileobj=source, mode="r:gz")

        with tar:
            members = tar.getmembers()
            total = len(members)

            for member in members:
                _validate_archive_path(member.name, destination)

            if hasattr(tarfile, "data_filter"):
                tar.extractall(destination, filter="data")
            else:
                tar.extractall(destination)
    except InsecureArchiveError:
        raise
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExtractionError(f"failed to extract {label}: {e}") from e

    logger.debug(f"Extracted {total} entries from {label} to {destination}")
