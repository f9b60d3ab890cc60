"""
Unit tests for the bootstrap build step.
"""

import io
import os
import subprocess
import pytest
from unittest.mock import MagicMock, patch

from gover.core.exceptions import (
    BootstrapToolchainError,
    BuildError,
    BuildFailedError,
)
from gover.core.filesystem import extract_tar_gz
from gover.toolchain.builder import (
    build_toolchain,
    detect_bootstrap_goroot,
    make_script,
)


@pytest.fixture
def version_dir(tmp_path):
    version_dir = tmp_path / "1.99"
    (version_dir / "go" / "src").mkdir(parents=True)
    return version_dir


class TestMakeScript:
    """Test bootstrap script selection."""

    @pytest.mark.parametrize(
        "os_name,expected",
        [
            ("linux", "make.bash"),
            ("macos", "make.bash"),
            ("openbsd", "make.bash"),
            ("windows", "make.bat"),
            ("plan9", "make.rc"),
        ],
    )
    def test_script_per_platform(self, os_name, expected):
        with patch("gover.toolchain.builder.detect_os", return_value=os_name):
            assert make_script() == expected


class TestDetectBootstrapGoroot:
    """Test locating the bootstrap toolchain."""

    def test_uses_go_env(self):
        completed = subprocess.CompletedProcess(
            ["go", "env", "GOROOT"], 0, stdout="C:\\Go\n", stderr=""
        )
        with patch(
            "gover.toolchain.builder.subprocess.run", return_value=completed
        ) as mock_run:
            assert detect_bootstrap_goroot() == "C:\\Go"

        assert mock_run.call_args[0][0] == ["go", "env", "GOROOT"]

    def test_go_missing(self):
        with patch(
            "gover.toolchain.builder.subprocess.run",
            side_effect=FileNotFoundError("go"),
        ):
            with pytest.raises(BootstrapToolchainError):
                detect_bootstrap_goroot()

    def test_go_fails(self):
        with patch(
            "gover.toolchain.builder.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["go"]),
        ):
            with pytest.raises(BootstrapToolchainError):
                detect_bootstrap_goroot()

    def test_empty_output(self):
        completed = subprocess.CompletedProcess([], 0, stdout="\n", stderr="")
        with patch("gover.toolchain.builder.subprocess.run", return_value=completed):
            with pytest.raises(BootstrapToolchainError, match="printed nothing"):
                detect_bootstrap_goroot()


class TestBuildToolchain:
    """Test build_toolchain function."""

    def test_runs_script_in_src(self, version_dir):
        """make.bash runs from go/src with the inherited environment."""
        completed = subprocess.CompletedProcess([], 0)
        with patch(
            "gover.toolchain.builder.detect_os", return_value="linux"
        ), patch(
            "gover.toolchain.builder.subprocess.run", return_value=completed
        ) as mock_run:
            goroot = build_toolchain(version_dir)

        src = version_dir / "go" / "src"
        assert goroot == version_dir / "go"
        mock_run.assert_called_once_with(
            [str(src / "make.bash")], cwd=src, env=None
        )

    def test_windows_sets_goroot_bootstrap(self, version_dir):
        completed = subprocess.CompletedProcess([], 0)
        with patch(
            "gover.toolchain.builder.detect_os", return_value="windows"
        ), patch(
            "gover.toolchain.builder.detect_bootstrap_goroot", return_value="C:\\Go"
        ), patch(
            "gover.toolchain.builder.subprocess.run", return_value=completed
        ) as mock_run:
            build_toolchain(version_dir)

        args, kwargs = mock_run.call_args
        assert args[0] == [str(version_dir / "go" / "src" / "make.bat")]
        assert kwargs["env"]["GOROOT_BOOTSTRAP"] == "C:\\Go"

    def test_plan9_uses_make_rc(self, version_dir):
        completed = subprocess.CompletedProcess([], 0)
        with patch(
            "gover.toolchain.builder.detect_os", return_value="plan9"
        ), patch(
            "gover.toolchain.builder.subprocess.run", return_value=completed
        ) as mock_run:
            build_toolchain(version_dir)

        assert mock_run.call_args[0][0][0].endswith("make.rc")

    def test_nonzero_exit(self, version_dir):
        """A failing script is reported with its exit status."""
        with patch(
            "gover.toolchain.builder.detect_os", return_value="linux"
        ), patch(
            "gover.toolchain.builder.subprocess.run",
            return_value=subprocess.CompletedProcess([], 2),
        ):
            with pytest.raises(BuildFailedError) as exc_info:
                build_toolchain(version_dir)

        assert exc_info.value.returncode == 2
        assert exc_info.value.script.name == "make.bash"
        assert "failed to build go" in str(exc_info.value)

    def test_script_missing(self, version_dir):
        """A script that can't be started is a BuildError."""
        with patch("gover.toolchain.builder.detect_os", return_value="linux"):
            with pytest.raises(BuildError):
                build_toolchain(version_dir)

    @pytest.mark.skipif(os.name == "nt", reason="runs a POSIX shell script")
    def test_real_script(self, tmp_path, go_source_archive):
        """The release's own make.bash produces go/bin/go."""
        version_dir = tmp_path / "1.99"
        extract_tar_gz(io.BytesIO(go_source_archive), version_dir)

        with patch("gover.toolchain.builder.detect_os", return_value="linux"):
            goroot = build_toolchain(version_dir)

        assert (goroot / "bin" / "go").is_file()
        assert os.access(goroot / "bin" / "go", os.X_OK)
