"""
Unit tests for version install locking.
"""

import threading
import pytest

from gover.core.exceptions import LockTimeout
from gover.core.locking import LOCK_NAME, version_lock


class TestVersionLock:
    """Test version_lock context manager."""

    def test_creates_lock_file(self, tmp_path):
        with version_lock(tmp_path):
            assert (tmp_path / LOCK_NAME).exists()

    def test_reacquire_after_release(self, tmp_path):
        with version_lock(tmp_path):
            pass
        with version_lock(tmp_path, timeout=1):
            pass

    def test_timeout_while_held(self, tmp_path):
        """A second holder gives up after the timeout."""
        holding = threading.Event()
        release = threading.Event()

        def holder():
            with version_lock(tmp_path):
                holding.set()
                release.wait(5)

        thread = threading.Thread(target=holder)
        thread.start()
        try:
            assert holding.wait(5)
            with pytest.raises(LockTimeout, match="Another gover process"):
                with version_lock(tmp_path, timeout=0.1):
                    pass
        finally:
            release.set()
            thread.join()

    def test_exception_releases_lock(self, tmp_path):
        with pytest.raises(RuntimeError):
            with version_lock(tmp_path):
                raise RuntimeError("boom")

        with version_lock(tmp_path, timeout=1):
            pass
