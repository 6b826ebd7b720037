from __future__ import annotations

"""
Disk Mutation Service.

Applies create/delete operations to entries located directly under the
session root. Only the disk side is handled here; refreshing the snapshot
afterwards is the responsibility of the session.
"""

import logging
import os
import shutil

from treeshell.domain.errors import AlreadyExists, HostIOError, NotFound
from treeshell.infra.fs import entry_exists, resolve_entry_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_directory(root_path: str, name: str) -> str:
    """
    Create an empty directory 'name' under the root.

    Returns:
        str: Full path of the created directory.

    Raises:
        InvalidName: If 'name' is not a single path component.
        AlreadyExists: If the target already exists.
        HostIOError: On any other filesystem failure.
    """
    target = resolve_entry_path(root_path, name)
    if entry_exists(target):
        raise AlreadyExists(name)

    try:
        os.mkdir(target)
    except FileExistsError as e:
        raise AlreadyExists(name) from e
    except OSError as e:
        raise HostIOError(name, e.strerror or str(e)) from e

    logger.info(f"Directory created: {target}")
    return target


def create_file(root_path: str, name: str) -> str:
    """
    Create an empty regular file 'name' under the root.

    Returns:
        str: Full path of the created file.

    Raises:
        InvalidName: If 'name' is not a single path component.
        AlreadyExists: If the target already exists.
        HostIOError: On any other filesystem failure.
    """
    target = resolve_entry_path(root_path, name)
    if entry_exists(target):
        raise AlreadyExists(name)

    # Exclusive mode never truncates an entry created in the meantime
    try:
        with open(target, "x", encoding="utf-8"):
            pass
    except FileExistsError as e:
        raise AlreadyExists(name) from e
    except OSError as e:
        raise HostIOError(name, e.strerror or str(e)) from e

    logger.info(f"File created: {target}")
    return target


def delete_entry(root_path: str, name: str) -> str:
    """
    Remove 'name' from under the root. Directories are removed recursively.

    Symlinks are unlinked without touching their target.

    Returns:
        str: Full path of the removed entry.

    Raises:
        InvalidName: If 'name' is not a single path component.
        NotFound: If the target does not exist.
        HostIOError: On any other filesystem failure.
    """
    target = resolve_entry_path(root_path, name)
    if not entry_exists(target):
        raise NotFound(name)

    try:
        if os.path.isdir(target) and not os.path.islink(target):
            shutil.rmtree(target)
        else:
            os.remove(target)
    except FileNotFoundError as e:
        raise NotFound(name) from e
    except OSError as e:
        raise HostIOError(name, e.strerror or str(e)) from e

    logger.info(f"Deleted: {target}")
    return target
