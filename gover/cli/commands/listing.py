"""
List command implementation.

Prints the entries of the install root, one per line.
"""

import logging

from gover.core.directory import list_versions

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments with root_dir

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Listing {args.root_dir}")
    for name in list_versions(args.root_dir):
        print(name)
    return 0
