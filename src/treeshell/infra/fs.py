from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides user data directory resolution and the path rules applied to
names typed by the user. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Tuple

from treeshell.domain.errors import InvalidName

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeShell"
UNIX_APP_DIR_NAME = ".treeshell"

_RESERVED_NAMES = (".", "..")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeShell
    - Linux/Mac: ~/.treeshell

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation; a read-only home only disables file logging
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# ENTRY NAME VALIDATION API
# -----------------------------------------------------------------------------

def separators() -> Tuple[str, ...]:
    """Return the path separators recognized by the host."""
    seps = [os.sep]
    if os.altsep:
        seps.append(os.altsep)
    return tuple(seps)


def validate_entry_name(name: str) -> str:
    """
    Ensure a user-supplied name denotes a single entry directly under the root.

    Args:
        name: Raw name typed by the user.

    Returns:
        str: The unchanged name when valid.

    Raises:
        InvalidName: If the name is empty, reserved ('.', '..'), contains a
                     path separator or a NUL character.
    """
    if not name:
        raise InvalidName(name, "empty name")
    if name in _RESERVED_NAMES:
        raise InvalidName(name, "reserved name")
    if "\x00" in name:
        raise InvalidName(name, "NUL character")
    if any(sep in name for sep in separators()):
        raise InvalidName(name, "path separators are not allowed")
    return name


def resolve_entry_path(root_path: str, name: str) -> str:
    """
    Join the session root and a validated entry name with the host separator.

    Raises:
        InvalidName: Propagated from validate_entry_name.
    """
    return os.path.join(root_path, validate_entry_name(name))


def entry_exists(path: str) -> bool:
    """Existence check that also sees dangling symlinks."""
    return os.path.lexists(path)
