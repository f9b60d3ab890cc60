"""
Download command implementation.

Fetches, verifies, unpacks and builds one Go version.
"""

import logging

from gover.toolchain.installer import Installer

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the download command.

    Args:
        args: Parsed command-line arguments with root_dir, settings, version

    Returns:
        Exit code (0 for success); failures propagate as GoverError
    """
    installer = Installer(
        args.root_dir,
        download_url=args.settings.download_url,
        timeout=args.settings.timeout,
    )
    installer.install(args.version)

    logger.info(f"Success. You may now run 'gover {args.version}'!")
    return 0
