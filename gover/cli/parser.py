"""
gover CLI argument parser and dispatcher.

Three command forms are supported:

    gover download VERSION     fetch, verify and build a version
    gover list                 list the contents of the install root
    gover VERSION [ARGS...]    run that version's go with ARGS

Global options are only recognized before the command; everything after a
version is forwarded to go untouched.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from gover.cli.utils import load_config, prepare_root
from gover.core.directory import validate_version
from gover.core.sandbox import Sandbox

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("gover")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

COMMANDS = ("download", "list")

COMMAND_MODULES = {
    "download": "gover.cli.commands.download",
    "list": "gover.cli.commands.listing",
    "launch": "gover.cli.commands.launch",
}

GLOBAL_FLAGS = ("-v", "--verbose", "-q", "--quiet", "-h", "--help", "--version")


class CLI:
    """gover command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()
        self.sandbox = Sandbox()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with the download and list subcommands.

        The launch form has no subparser; run() routes it before parsing.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="gover",
            usage="gover [OPTIONS] {download VERSION | list | VERSION [ARGS...]}",
            description="gover - download, build and run Go release versions",
            epilog="Run 'gover VERSION ARGS...' to use VERSION as your go command",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"gover {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only; also hides the download "
            "success message)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to YAML configuration file (default: $GOVER_CONFIG)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        download = subparsers.add_parser(
            "download",
            help="Download, verify and build a Go version",
            description="Download, verify and build a Go source release",
        )
        download.add_argument("version", metavar="VERSION", help="e.g. 1.22.0")

        subparsers.add_parser(
            "list",
            help="List downloaded versions",
            description="List the entries of the gover install root",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace; the launch form has command 'launch'
            with version and go_args set
        """
        argv = list(sys.argv[1:] if args is None else args)
        global_args, remainder = _split_global_options(argv)

        if (
            not remainder
            or remainder[0] in COMMANDS
            or remainder[0].startswith("-")
        ):
            return self.parser.parse_args(argv)

        parsed = self.parser.parse_args(global_args)
        parsed.command = "launch"
        parsed.version = remainder[0]
        parsed.go_args = remainder[1:]
        return parsed

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            self._prepare(parsed_args)
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"gover: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _prepare(self, args: argparse.Namespace) -> None:
        """
        Load configuration, create the install root and restrict the process.

        Sets args.settings and args.root_dir.
        """
        if args.command in ("download", "launch"):
            validate_version(args.version)

        args.settings = load_config(args.config)
        args.root_dir = prepare_root(args.settings)

        if not self.sandbox.declared:
            # command modules are imported after the restriction
            package_dir = Path(__file__).resolve().parent.parent
            self.sandbox.declare(args.root_dir, extra_paths=[(str(package_dir), "r")])

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        module_name = COMMAND_MODULES.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def _split_global_options(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split leading global options from the command and its arguments.

    Returns:
        (global options, remaining arguments)
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--config":
            i += 2
        elif token.startswith("--config=") or token in GLOBAL_FLAGS:
            i += 1
        else:
            break
    return argv[:i], argv[i:]


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
