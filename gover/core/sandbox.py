"""
Process capability declaration.

On OpenBSD the process restricts itself once at startup with pledge(2) and
unveil(2): the operation classes it may use, and the only paths it may
touch. The declaration is one-shot and cannot be relaxed later. On every
other system it is a recorded no-op.
"""

import ctypes
import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from gover.core.platform import detect_os

logger = logging.getLogger(__name__)

PROMISES = "stdio tty unveil rpath cpath wpath proc dns inet fattr exec"


class Sandbox:
    """
    One-shot capability declaration for the current process.

    Example:
        >>> sandbox = Sandbox()
        >>> sandbox.declare(root)
    """

    def __init__(self, libc: Optional[ctypes.CDLL] = None):
        self._libc = libc
        self.declared = False
        self.promises: Optional[str] = None
        self.unveiled: list[tuple[str, str]] = []

    def declare(self, root: Path, extra_paths: Sequence[tuple[str, str]] = ()) -> None:
        """
        Declare the process capabilities.

        Args:
            root: Install root, unveiled read/write/exec/create
            extra_paths: Additional (path, permissions) pairs to unveil

        Raises:
            RuntimeError: If capabilities were already declared
        """
        if self.declared:
            raise RuntimeError("process capabilities already declared")
        self.declared = True

        self.promises = PROMISES
        self.unveiled = [("/etc", "r"), (str(root), "rwxc")]
        self.unveiled.extend(_runtime_paths())
        self.unveiled.extend(extra_paths)

        if detect_os() != "openbsd":
            logger.debug("Capability restriction not supported on this system")
            return

        libc = self._libc or ctypes.CDLL(None, use_errno=True)
        if libc.pledge(PROMISES.encode(), None) != 0:
            logger.debug(f"pledge failed: {os.strerror(ctypes.get_errno())}")
        for path, permissions in self.unveiled:
            if libc.unveil(path.encode(), permissions.encode()) != 0:
                logger.debug(
                    f"unveil {path} failed: {os.strerror(ctypes.get_errno())}"
                )
        if libc.unveil(None, None) != 0:
            logger.debug(f"unveil lock failed: {os.strerror(ctypes.get_errno())}")


def _runtime_paths() -> list[tuple[str, str]]:
    """Paths the interpreter and GnuPG still need after restriction."""
    paths = {sys.base_prefix: "rx", sys.prefix: "rx", tempfile.gettempdir(): "rwc"}
    gpg = shutil.which("gpg")
    if gpg:
        paths[str(Path(gpg).parent)] = "rx"
    return sorted(paths.items())
