"""Test fixtures for gover tests.

This package provides reusable pytest fixtures for testing gover components.
Fixtures are organized by type:

- directories: Install roots, with and without versions in them
- archives: In-memory Go source releases and a fake trusted keyring

Import fixtures in your tests using:
    from tests.fixtures.directories import install_root
    from tests.fixtures.archives import go_source_archive
"""

__all__ = [
    "directories",
    "archives",
]
