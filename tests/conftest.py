"""
Pytest configuration and shared fixtures for gover tests.
"""

import logging
import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.directories import (
    install_root,
    install_root_with_versions,
    installed_version,
)
from tests.fixtures.archives import (
    go_source_archive,
    fake_keyring,
)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require GnuPG or network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Create isolated home directory for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("GOVER_CONFIG", raising=False)

    return fake_home


@pytest.fixture
def config_file(tmp_path: Path, install_root: Path) -> Path:
    """Create a gover.yaml pointing at the test root and a test server."""
    config = tmp_path / "gover.yaml"
    config.write_text(
        f"root: {install_root}\n" "download_url: https://dl.test/go\n",
        encoding="utf-8",
    )
    return config


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root logger setup done by CLI.run()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset module-level caches between tests."""
    from gover.core.platform import clear_platform_cache
    from gover.core.verification import load_trusted_keyring

    clear_platform_cache()
    load_trusted_keyring.cache_clear()
    yield
    clear_platform_cache()
    load_trusted_keyring.cache_clear()
