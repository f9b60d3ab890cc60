"""
Platform family detection for gover.

The install and launch pipeline only cares about three platform families:
Windows, Plan 9 and everything else. This module maps the running system to
one of them and answers the few questions that depend on it.

Usage:
    from gover.core.platform import detect_os, exe_suffix

    if detect_os() == "windows":
        ...
    go_binary = "go" + exe_suffix()
"""

import functools
import platform


@functools.lru_cache(maxsize=1)
def detect_os() -> str:
    """
    Detect the operating system family.

    This function is cached - it only runs detection once per process.

    Returns:
        Normalized OS name: 'windows', 'plan9', 'linux', 'macos', 'openbsd', ...
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys")):
        return "windows"
    elif system == "darwin":
        return "macos"
    return system


def is_windows() -> bool:
    """Return True on the Windows family."""
    return detect_os() == "windows"


def is_plan9() -> bool:
    """Return True on Plan 9."""
    return detect_os() == "plan9"


def exe_suffix() -> str:
    """Executable suffix for the go binary."""
    return ".exe" if is_windows() else ""


def case_insensitive_env() -> bool:
    """Whether environment variable names compare case-insensitively."""
    return is_windows()


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Useful for testing when platform.system() is patched.
    """
    detect_os.cache_clear()


__all__ = [
    "detect_os",
    "is_windows",
    "is_plan9",
    "exe_suffix",
    "case_insensitive_env",
    "clear_platform_cache",
]
