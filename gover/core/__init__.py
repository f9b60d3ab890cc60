"""
Core functionality for gover.

This package contains the foundational modules that the install and launch
pipeline depends on.
"""

from .directory import (
    home_dir,
    get_install_root,
    ensure_install_root,
    validate_version,
    get_version_dir,
    get_goroot,
    get_go_bin_dir,
    get_go_binary,
    list_versions,
)

from .environment import (
    dedup_env,
    compose_env,
    env_to_dict,
    prepend_path,
)

from .platform import (
    detect_os,
    exe_suffix,
    case_insensitive_env,
    clear_platform_cache,
)

from .exceptions import (
    GoverError,
    ConfigError,
    HomeResolutionError,
    DirectoryError,
    DirectoryCreationError,
    LockTimeout,
    InvalidVersionError,
    FetchError,
    SignatureVerificationError,
    ExtractionError,
    InsecureArchiveError,
    BuildError,
    BuildFailedError,
    BootstrapToolchainError,
    NotInstalledError,
    LaunchError,
)

__all__ = [
    "home_dir",
    "get_install_root",
    "ensure_install_root",
    "validate_version",
    "get_version_dir",
    "get_goroot",
    "get_go_bin_dir",
    "get_go_binary",
    "list_versions",
    "dedup_env",
    "compose_env",
    "env_to_dict",
    "prepend_path",
    "detect_os",
    "exe_suffix",
    "case_insensitive_env",
    "clear_platform_cache",
    "GoverError",
    "ConfigError",
    "HomeResolutionError",
    "DirectoryError",
    "DirectoryCreationError",
    "LockTimeout",
    "InvalidVersionError",
    "FetchError",
    "SignatureVerificationError",
    "ExtractionError",
    "InsecureArchiveError",
    "BuildError",
    "BuildFailedError",
    "BootstrapToolchainError",
    "NotInstalledError",
    "LaunchError",
]
