"""
Constants for the shortcut-dirs package.

This module contains all named constants used throughout the package
to avoid magic numbers and strings.
"""

from typing import Final

__all__ = [
    "LINUX_SYSTEM_SHORTCUTS_DIR",
    "MACOS_SYSTEM_SHORTCUTS_DIR",
    "LINUX_LOCAL_SHORTCUTS_SUFFIX",
    "MACOS_LOCAL_SHORTCUTS_SUFFIX",
    "HOME_ENV_VAR",
    "FOLDERID_PROGRAMS",
    "FOLDERID_PROGRAMS_NAME",
    "KF_FLAG_DEFAULT",
    "ENV_PLATFORM",
    "ENV_HOME",
    "ENV_LOG_LEVEL",
    "LOG_FILENAME",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
    "UNAVAILABLE_LABEL",
    "EXIT_OK",
    "EXIT_ABSENT",
    "EXIT_ERROR",
]

# System-wide shortcut folders (trailing separator is part of the value)
LINUX_SYSTEM_SHORTCUTS_DIR: Final = "/usr/share/applications/"
MACOS_SYSTEM_SHORTCUTS_DIR: Final = "/Applications/"

# Per-user shortcut folders, relative to $HOME
LINUX_LOCAL_SHORTCUTS_SUFFIX: Final = ".local/share/applications"
MACOS_LOCAL_SHORTCUTS_SUFFIX: Final = "Applications"

HOME_ENV_VAR: Final = "HOME"

# Windows known folder for the Start Menu "Programs" folder
# See: https://learn.microsoft.com/en-us/windows/win32/shell/knownfolderid
FOLDERID_PROGRAMS: Final = "{A77F5D77-2E2B-44C3-A6A2-ABA601054A51}"
FOLDERID_PROGRAMS_NAME: Final = "Programs"
# See: https://learn.microsoft.com/en-us/windows/win32/api/shlobj_core/ne-shlobj_core-known_folder_flag
KF_FLAG_DEFAULT: Final = 0x00000000

# Environment overrides
ENV_PLATFORM: Final = "SHORTCUT_DIRS_PLATFORM"
ENV_HOME: Final = "SHORTCUT_DIRS_HOME"
ENV_LOG_LEVEL: Final = "SHORTCUT_DIRS_LOG_LEVEL"

# Logging
LOG_FILENAME: Final = "shortcut_dirs.log"
LOG_MAX_BYTES: Final = 1_000_000
LOG_BACKUP_COUNT: Final = 3

# Command line output
UNAVAILABLE_LABEL: Final = "<unavailable>"
EXIT_OK: Final = 0
EXIT_ABSENT: Final = 1  # requested directory not available on this platform
EXIT_ERROR: Final = 2  # known-folder query or configuration failed
