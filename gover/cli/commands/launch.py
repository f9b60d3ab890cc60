"""
Launch command implementation.

Runs 'gover <version> [args...]' as if the selected version's go were the
active toolchain.
"""

from gover.toolchain.launcher import run_version


def run(args) -> int:
    """
    Run the selected version's go binary.

    Args:
        args: Parsed command-line arguments with root_dir, version, go_args

    Returns:
        0 if go succeeded, 1 if it failed
    """
    return run_version(args.root_dir, args.version, args.go_args)
