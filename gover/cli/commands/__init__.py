"""
Command implementations for the gover CLI.

Each module exposes run(args) -> int.
"""
