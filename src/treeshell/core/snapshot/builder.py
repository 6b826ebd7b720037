from __future__ import annotations

"""
Snapshot Builder.

Walks a directory on disk and produces the in-memory Node tree. The root
node keeps the path exactly as supplied; nested entries are named after
the configured naming policy. Symlinked directories are only descended
into when requested, with cycle detection based on inode identity.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from treeshell.domain.errors import EnumerationFailed, NotADirectory
from treeshell.domain.tree_models import Node, NodeKind, add_child, count_nodes, make_node

logger = logging.getLogger(__name__)

_Identity = Tuple[int, int]

# -----------------------------------------------------------------------------
# BUILD OPTIONS
# -----------------------------------------------------------------------------

class NamingPolicy(str, Enum):
    """
    How nested directory nodes are named.

    BASENAME: entry name everywhere except the root.
    FULL_PATH: nested directories carry their full path; files keep basenames.
    """
    BASENAME = "basename"
    FULL_PATH = "full_path"


@dataclass(frozen=True)
class SnapshotOptions:
    """
    Immutable knobs for a snapshot build.

    Attributes:
        naming_policy: Naming of nested directory nodes.
        follow_symlinks: Descend into symlinked directories.
        sort_entries: Sort entries by name instead of host enumeration order.
    """
    naming_policy: NamingPolicy = NamingPolicy.BASENAME
    follow_symlinks: bool = False
    sort_entries: bool = False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_snapshot(path: str, options: Optional[SnapshotOptions] = None) -> Node:
    """
    Build a Directory node mirroring the subtree rooted at 'path'.

    Args:
        path: Directory to capture. Used verbatim as the root node name.
        options: Build options; defaults to SnapshotOptions().

    Returns:
        Node: The snapshot root.

    Raises:
        NotADirectory: If 'path' does not exist or is not a directory.
        EnumerationFailed: If a directory cannot be listed during the walk.
    """
    opts = options or SnapshotOptions()

    if not path or not os.path.isdir(path):
        raise NotADirectory(path)

    logger.debug(f"Building snapshot for: {path}")
    root = make_node(path, NodeKind.DIRECTORY)

    root_identity = _identity(path) if opts.follow_symlinks else None
    ancestry: FrozenSet[_Identity] = frozenset([root_identity]) if root_identity else frozenset()

    # Explicit work stack instead of recursion
    pending: List[Tuple[Node, str, FrozenSet[_Identity]]] = [(root, path, ancestry)]
    while pending:
        node, dir_path, seen = pending.pop()
        for entry in _list_entries(dir_path, opts.sort_entries):
            if _is_directory(entry, opts.follow_symlinks):
                child = make_node(_directory_name(entry, opts.naming_policy), NodeKind.DIRECTORY)
                add_child(node, child)

                child_seen = seen
                if opts.follow_symlinks:
                    identity = _identity(entry.path)
                    if identity is not None and identity in seen:
                        logger.warning(f"Symlink cycle detected at '{entry.path}'. Not descending.")
                        continue
                    if identity is not None:
                        child_seen = seen | {identity}

                pending.append((child, entry.path, child_seen))
            else:
                add_child(node, make_node(entry.name, NodeKind.FILE))

    if logger.isEnabledFor(logging.DEBUG):
        dirs, files = count_nodes(root)
        logger.debug(f"Snapshot ready for '{path}': {dirs} directories, {files} files")
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _list_entries(dir_path: str, sort_entries: bool) -> List[os.DirEntry]:
    """List direct entries, releasing the directory handle on every path."""
    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        logger.debug(f"Enumeration failed for '{dir_path}': {e}")
        raise EnumerationFailed(dir_path, str(e)) from e

    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries


def _is_directory(entry: os.DirEntry, follow_symlinks: bool) -> bool:
    """Classify an entry; unreadable entries are captured as leaves."""
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError as e:
        logger.debug(f"Cannot classify '{entry.path}', treating as file: {e}")
        return False


def _directory_name(entry: os.DirEntry, policy: NamingPolicy) -> str:
    if NamingPolicy(policy) is NamingPolicy.FULL_PATH:
        return entry.path
    return entry.name


def _identity(path: str) -> Optional[_Identity]:
    """Return the (device, inode) pair of the resolved path, if reachable."""
    try:
        st = os.stat(path)
    except OSError:
        return None
    return st.st_dev, st.st_ino
