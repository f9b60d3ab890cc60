"""
Unit tests for platform family detection.
"""

from unittest.mock import patch

from gover.core.platform import (
    case_insensitive_env,
    clear_platform_cache,
    detect_os,
    exe_suffix,
    is_plan9,
    is_windows,
)


class TestDetectOS:
    """Test OS family detection."""

    def test_linux(self):
        with patch("platform.system", return_value="Linux"):
            assert detect_os() == "linux"

    def test_windows(self):
        with patch("platform.system", return_value="Windows"):
            assert detect_os() == "windows"
            assert is_windows()

    def test_cygwin_is_windows(self):
        with patch("platform.system", return_value="CYGWIN_NT-10.0"):
            assert detect_os() == "windows"

    def test_macos(self):
        with patch("platform.system", return_value="Darwin"):
            assert detect_os() == "macos"

    def test_plan9(self):
        with patch("platform.system", return_value="Plan9"):
            assert detect_os() == "plan9"
            assert is_plan9()

    def test_openbsd(self):
        with patch("platform.system", return_value="OpenBSD"):
            assert detect_os() == "openbsd"

    def test_cached(self):
        """Detection runs once until the cache is cleared."""
        with patch("platform.system", return_value="Linux") as mock_system:
            detect_os()
            detect_os()
            assert mock_system.call_count == 1

            clear_platform_cache()
            detect_os()
            assert mock_system.call_count == 2


class TestPlatformRules:
    """Test platform-dependent answers."""

    def test_windows_rules(self):
        with patch("platform.system", return_value="Windows"):
            assert exe_suffix() == ".exe"
            assert case_insensitive_env() is True

    def test_posix_rules(self):
        with patch("platform.system", return_value="Linux"):
            assert exe_suffix() == ""
            assert case_insensitive_env() is False
