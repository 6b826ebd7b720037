from __future__ import annotations

"""
Snapshot Session.

Owns the root path and the current snapshot for the lifetime of one
interactive session. Mutators change the disk first and then replace the
whole snapshot with a fresh build; on any failure the previous snapshot
is kept as is.
"""

import logging
from typing import Callable, List, Optional, TextIO

from treeshell.core.analysis.tree_renderer import display, render_tree
from treeshell.core.services import mutators
from treeshell.core.services.search import search_files
from treeshell.core.snapshot.builder import SnapshotOptions, build_snapshot
from treeshell.domain.errors import RebuildFailed, TreeShellError
from treeshell.domain.tree_models import Node

logger = logging.getLogger(__name__)


class TreeSession:
    """
    Single-threaded holder of the active snapshot.

    Use TreeSession.open() to build the initial snapshot; a failure there
    (NotADirectory, EnumerationFailed) is fatal for the caller.
    """

    def __init__(self, root_path: str, root: Node, options: Optional[SnapshotOptions] = None):
        self._root_path = root_path
        self._root = root
        self._options = options or SnapshotOptions()

    @classmethod
    def open(cls, root_path: str, options: Optional[SnapshotOptions] = None) -> "TreeSession":
        opts = options or SnapshotOptions()
        root = build_snapshot(root_path, opts)
        logger.info(f"Session opened at: {root_path}")
        return cls(root_path, root, opts)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def root_path(self) -> str:
        return self._root_path

    @property
    def root(self) -> Node:
        return self._root

    @property
    def options(self) -> SnapshotOptions:
        return self._options

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def render(self) -> List[str]:
        return render_tree(self._root)

    def display(self, stream: Optional[TextIO] = None) -> None:
        display(self._root, stream)

    def search(self, query: str) -> List[str]:
        return search_files(self._root, query)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def create_directory(self, name: str) -> str:
        return self._mutate(mutators.create_directory, name)

    def create_file(self, name: str) -> str:
        return self._mutate(mutators.create_file, name)

    def delete_entry(self, name: str) -> str:
        return self._mutate(mutators.delete_entry, name)

    def rebuild(self) -> Node:
        """
        Replace the snapshot with a fresh build of the root path.

        Raises:
            RebuildFailed: If the build fails; the previous snapshot is kept.
        """
        try:
            new_root = build_snapshot(self._root_path, self._options)
        except TreeShellError as e:
            logger.debug(f"Rebuild failed, keeping previous snapshot: {e}")
            raise RebuildFailed(self._root_path, str(e)) from e
        self._root = new_root
        return new_root

    def _mutate(self, action: Callable[[str, str], str], name: str) -> str:
        """Run a disk mutator and refresh the snapshot after its success."""
        target = action(self._root_path, name)
        self.rebuild()
        return target
