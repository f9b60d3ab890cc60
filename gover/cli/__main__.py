"""
Entry point for running the gover CLI as a module.

Usage: python -m gover.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
