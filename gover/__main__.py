"""
Entry point for running gover as a module.

Usage: python -m gover [command] [options]
"""

from gover.cli.parser import main

if __name__ == "__main__":
    main()
