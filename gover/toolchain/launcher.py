"""
Launching an installed version's go binary.

The binary runs as a child process with inherited stdio and an environment
in which GOROOT points at the selected version and its bin directory comes
first on PATH. gover waits for it and surfaces only success or failure: any
non-zero child status becomes exit status 1.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional, Sequence

from gover.core.directory import get_go_bin_dir, get_go_binary, get_goroot
from gover.core.environment import compose_env, env_to_dict, prepend_path
from gover.core.exceptions import LaunchError, NotInstalledError
from gover.core.platform import case_insensitive_env

logger = logging.getLogger(__name__)


def launch_environment(
    root: Path,
    version: str,
    base_env: Optional[Mapping[str, str]] = None,
    case_insensitive: Optional[bool] = None,
) -> dict[str, str]:
    """
    Compose the environment for running a version.

    Args:
        root: Install root
        version: Version identifier
        base_env: Inherited environment (default: os.environ)
        case_insensitive: Key comparison rule (default: platform rule)

    Returns:
        Mapping for subprocess with GOROOT and PATH overridden
    """
    if base_env is None:
        base_env = os.environ
    if case_insensitive is None:
        case_insensitive = case_insensitive_env()

    inherited = base_env.get("PATH", "")
    if case_insensitive:
        # Windows spells it Path
        for key, value in base_env.items():
            if key.upper() == "PATH":
                inherited = value

    path = prepend_path(str(get_go_bin_dir(root, version)), inherited)
    overrides = {"GOROOT": str(get_goroot(root, version)), "PATH": path}
    return env_to_dict(compose_env(base_env, overrides, case_insensitive))


def run_version(root: Path, version: str, args: Sequence[str]) -> int:
    """
    Run a version's go binary with arguments and wait for it.

    Args:
        root: Install root
        version: Version identifier
        args: Arguments forwarded verbatim to go

    Returns:
        0 if the child succeeded, 1 if it exited with any failure status

    Raises:
        NotInstalledError: If the version's binary does not exist
        LaunchError: If the binary cannot be executed
    """
    gobin = get_go_binary(root, version)
    if not gobin.is_file():
        raise NotInstalledError(version, root)

    env = launch_environment(root, version)
    logger.debug(f"Running {gobin} {' '.join(args)}")

    try:
        result = subprocess.run([str(gobin), *args], env=env)
    except OSError as e:
        raise LaunchError(f"failed to execute {gobin}: {e}") from e

    if result.returncode != 0:
        # TODO: propagate the child's exact exit status instead of 1.
        logger.debug(f"{gobin} exited with status {result.returncode}")
        return 1
    return 0
