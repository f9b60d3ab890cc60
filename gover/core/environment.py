"""
Environment composition for launching a selected toolchain.

A go binary picks its toolchain from exactly one GOROOT and one PATH; a
duplicated or stale entry silently selects the wrong one. The helpers here
build the child environment as ordered "KEY=VALUE" entries with no duplicate
keys, later values overriding earlier ones in place.

Usage:
    from gover.core.environment import compose_env, env_to_dict

    entries = compose_env(os.environ, {"GOROOT": goroot, "PATH": path})
    subprocess.run(cmd, env=env_to_dict(entries))
"""

import logging
import os
from typing import Iterable, Mapping, Optional, Union

from gover.core.platform import case_insensitive_env

logger = logging.getLogger(__name__)

EnvSource = Union[Mapping[str, str], Iterable[str]]


def dedup_env(env: Iterable[str], case_insensitive: bool = False) -> list[str]:
    """
    Remove duplicate keys from environment entries, keeping later values.

    Entries without a key (no '=' or '=' at index 0) pass through untouched.
    A repeated key overwrites the earlier entry in its original position, so
    the order of first appearance is preserved.

    Args:
        env: Entries in "KEY=VALUE" form
        case_insensitive: Compare keys ignoring case

    Returns:
        New list of entries

    Example:
        >>> dedup_env(["A=1", "B=2", "A=3"])
        ['A=3', 'B=2']
    """
    out: list[str] = []
    seen: dict[str, int] = {}  # key -> index in out

    for kv in env:
        eq = kv.find("=")
        if eq < 1:
            out.append(kv)
            continue

        key = kv[:eq]
        if case_insensitive:
            key = key.lower()

        if key in seen:
            out[seen[key]] = kv
        else:
            seen[key] = len(out)
            out.append(kv)

    return out


def env_entries(env: EnvSource) -> list[str]:
    """Convert a mapping (e.g. os.environ) to "KEY=VALUE" entries."""
    if isinstance(env, Mapping):
        return [f"{key}={value}" for key, value in env.items()]
    return list(env)


def compose_env(
    base: EnvSource,
    overrides: Mapping[str, str],
    case_insensitive: Optional[bool] = None,
) -> list[str]:
    """
    Build a child environment from a base environment plus overrides.

    Overrides are appended after the base entries before de-duplication, so
    they always win over a same-named base variable.

    Args:
        base: Base environment, as a mapping or "KEY=VALUE" entries
        overrides: Variables to set
        case_insensitive: Key comparison rule (default: platform rule)

    Returns:
        Ordered, de-duplicated entries
    """
    if case_insensitive is None:
        case_insensitive = case_insensitive_env()

    entries = env_entries(base)
    entries.extend(f"{key}={value}" for key, value in overrides.items())
    return dedup_env(entries, case_insensitive)


def env_to_dict(entries: Iterable[str]) -> dict[str, str]:
    """
    Convert composed entries to a mapping usable by subprocess.

    Entries without a key cannot be represented and are skipped.
    """
    result: dict[str, str] = {}
    for kv in entries:
        eq = kv.find("=")
        if eq < 1:
            logger.debug(f"Skipping malformed environment entry: {kv!r}")
            continue
        result[kv[:eq]] = kv[eq + 1 :]
    return result


def prepend_path(directory: str, path: Optional[str] = None) -> str:
    """
    Prepend a directory to a search path value.

    Args:
        directory: Directory to put first
        path: Existing search path (default: inherited PATH)

    Returns:
        New search path value
    """
    if path is None:
        path = os.environ.get("PATH", "")
    if path:
        return f"{directory}{os.pathsep}{path}"
    return directory
