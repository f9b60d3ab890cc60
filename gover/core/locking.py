"""
Advisory locking for version installs.

Two gover processes installing the same version would otherwise interleave
their downloads into the same files. Each install holds a file lock inside
its version directory; launches and listings take no lock.

Usage:
    from gover.core.locking import version_lock

    with version_lock(version_dir):
        # fetch, verify, extract, build
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from filelock import FileLock, Timeout

from gover.core.exceptions import LockTimeout

logger = logging.getLogger(__name__)

LOCK_NAME = ".gover.lock"


@contextmanager
def version_lock(version_dir: Path, timeout: Optional[float] = None):
    """
    Hold the install lock of a version directory.

    Args:
        version_dir: Existing version directory
        timeout: Maximum wait in seconds (default: wait indefinitely)

    Yields:
        None

    Raises:
        LockTimeout: If the lock can't be acquired within timeout
    """
    lock_path = Path(version_dir) / LOCK_NAME
    lock = FileLock(lock_path, timeout=-1 if timeout is None else timeout)

    try:
        with lock:
            logger.debug(f"Acquired install lock: {lock_path}")
            yield
            logger.debug(f"Released install lock: {lock_path}")
    except Timeout as e:
        raise LockTimeout(
            f"Could not acquire install lock {lock_path} after {timeout}s. "
            "Another gover process may be installing this version."
        ) from e
