"""
End-to-end tests for the download, list and launch commands.

The distribution server is mocked with responses and the trusted key with
FakeKeyring; extraction and the bootstrap build run for real.
"""

import os
import pytest
import responses
from unittest.mock import patch

from gover.cli.parser import CLI
from tests.mocks.gnupg import FakeKeyring, fake_sign

ARCHIVE_URL = "https://dl.test/go/go1.99.src.tar.gz"
SIGNATURE_URL = ARCHIVE_URL + ".asc"

posix_only = pytest.mark.skipif(os.name == "nt", reason="runs POSIX shell scripts")


@pytest.fixture
def trusted_keyring():
    with patch(
        "gover.toolchain.installer.load_trusted_keyring", return_value=FakeKeyring()
    ):
        yield


class TestDownloadCommand:
    """Test 'gover download VERSION'."""

    @posix_only
    @responses.activate
    def test_download_and_build(
        self, config_file, install_root, go_source_archive, trusted_keyring, capfd
    ):
        responses.add(responses.GET, ARCHIVE_URL, body=go_source_archive)
        responses.add(responses.GET, SIGNATURE_URL, body=fake_sign(go_source_archive))

        code = CLI().run(["--config", str(config_file), "download", "1.99"])

        assert code == 0
        assert (install_root / "1.99" / "go" / "bin" / "go").is_file()
        err = capfd.readouterr().err
        assert f"Fetching {ARCHIVE_URL!r}" in err
        assert "Signature OK." in err
        assert "Success. You may now run 'gover 1.99'!" in err

    @responses.activate
    def test_bad_signature(
        self, config_file, install_root, go_source_archive, trusted_keyring, capsys
    ):
        responses.add(responses.GET, ARCHIVE_URL, body=go_source_archive)
        responses.add(responses.GET, SIGNATURE_URL, body=fake_sign(b"tampered"))

        code = CLI().run(["--config", str(config_file), "download", "1.99"])

        assert code != 0
        assert not (install_root / "1.99" / "go").exists()
        assert "failed to verify go1.99" in capsys.readouterr().err

    def test_already_downloaded(self, config_file, installed_version, capsys):
        """A second download is a no-op that needs no network."""
        with patch("gover.toolchain.installer.fetch") as mock_fetch:
            code = CLI().run(["--config", str(config_file), "download", "1.21.0"])

        assert code == 0
        mock_fetch.assert_not_called()
        assert "Success." in capsys.readouterr().err

    def test_quiet_hides_success(self, config_file, installed_version, capsys):
        code = CLI().run(["-q", "--config", str(config_file), "download", "1.21.0"])

        assert code == 0
        assert "Success." not in capsys.readouterr().err

    @responses.activate
    def test_unknown_version(self, config_file, trusted_keyring, capsys):
        responses.add(responses.GET, ARCHIVE_URL, status=404)

        assert CLI().run(["--config", str(config_file), "download", "1.99"]) == 1
        assert "failed to fetch" in capsys.readouterr().err


class TestListCommand:
    """Test 'gover list'."""

    def test_lists_versions(self, config_file, install_root_with_versions, capsys):
        code = CLI().run(["--config", str(config_file), "list"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["1.20", "1.21"]

    def test_empty(self, config_file, install_root, capsys):
        assert CLI().run(["--config", str(config_file), "list"]) == 0
        assert capsys.readouterr().out == ""


class TestLaunchCommand:
    """Test 'gover VERSION ARGS...'."""

    @posix_only
    def test_runs_selected_go(self, config_file, installed_version, capfd):
        code = CLI().run(["--config", str(config_file), "1.21.0", "env", "-json"])

        out = capfd.readouterr().out
        assert code == 0
        assert f"GOROOT={installed_version / '1.21.0' / 'go'}" in out
        assert "ARGS=env -json" in out

    @posix_only
    def test_child_failure(self, config_file, installed_version, monkeypatch):
        monkeypatch.setenv("FAKE_GO_EXIT", "7")

        assert CLI().run(["--config", str(config_file), "1.21.0", "build"]) == 1

    @posix_only
    @responses.activate
    def test_download_then_launch(
        self, config_file, install_root, go_source_archive, trusted_keyring, capfd
    ):
        responses.add(responses.GET, ARCHIVE_URL, body=go_source_archive)
        responses.add(responses.GET, SIGNATURE_URL, body=fake_sign(go_source_archive))
        cli = CLI()

        assert cli.run(["--config", str(config_file), "download", "1.99"]) == 0
        assert cli.run(["--config", str(config_file), "1.99", "version"]) == 0

        assert "ARGS=version" in capfd.readouterr().out
