from __future__ import annotations

"""
Unit tests for the Snapshot Session.

Verifies that successful mutators refresh the snapshot, that failures keep
both disk and snapshot unchanged, and that rebuild errors are wrapped.
"""

import io
import os
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from treeshell.core.session import TreeSession
from treeshell.core.snapshot.builder import NamingPolicy, SnapshotOptions
from treeshell.domain.errors import AlreadyExists, InvalidName, NotADirectory, NotFound, RebuildFailed


def _top_names(session: TreeSession):
    return sorted(os.path.basename(c.name) for c in session.root.children)


@pytest.fixture(params=[NamingPolicy.BASENAME, NamingPolicy.FULL_PATH])
def session(request, simple_root: Path) -> TreeSession:
    return TreeSession.open(str(simple_root), SnapshotOptions(naming_policy=request.param))


def test_open_builds_initial_snapshot(session: TreeSession, simple_root: Path) -> None:
    """TC-01: The root node carries the session path."""
    assert session.root_path == str(simple_root)
    assert session.root.name == str(simple_root)
    assert _top_names(session) == ["a.txt", "d"]


def test_open_invalid_root(tmp_path: Path) -> None:
    """TC-02: Startup fails on a missing path."""
    with pytest.raises(NotADirectory):
        TreeSession.open(str(tmp_path / "missing"))


def test_create_file_is_visible_in_search(session: TreeSession) -> None:
    """TC-03: A created file is found right away."""
    session.create_file("b.txt")
    assert session.search("b") == ["b.txt"]


def test_create_directory_refreshes_snapshot(session: TreeSession) -> None:
    """TC-04: A created directory appears in the new snapshot."""
    old_root = session.root
    session.create_directory("new_dir")

    assert session.root is not old_root
    assert "new_dir" in _top_names(session)


def test_create_existing_directory_keeps_snapshot(session: TreeSession) -> None:
    """TC-05: A failed mutator leaves the snapshot object untouched."""
    old_root = session.root
    with pytest.raises(AlreadyExists):
        session.create_directory("d")
    assert session.root is old_root


def test_delete_directory_refreshes_snapshot(session: TreeSession, simple_root: Path) -> None:
    """TC-06: Deleted entries disappear from the snapshot."""
    session.delete_entry("d")

    assert _top_names(session) == ["a.txt"]
    assert not (simple_root / "d").exists()


def test_failed_mutators_keep_snapshot(session: TreeSession) -> None:
    """TC-07: NotFound and InvalidName do not touch the snapshot."""
    old_root = session.root
    with pytest.raises(NotFound):
        session.delete_entry("ghost")
    with pytest.raises(InvalidName):
        session.create_file("../escape.txt")
    assert session.root is old_root


def test_rebuild_failure_keeps_disk_change(session: TreeSession, simple_root: Path) -> None:
    """TC-08: Rebuild errors are wrapped and the previous snapshot is kept."""
    old_root = session.root

    with patch("treeshell.core.session.build_snapshot", side_effect=NotADirectory(str(simple_root))):
        with pytest.raises(RebuildFailed) as exc_info:
            session.create_file("c.txt")

    assert exc_info.value.target == str(simple_root)
    assert (simple_root / "c.txt").exists()
    assert session.root is old_root


def test_root_removed_between_actions(tmp_path: Path) -> None:
    """TC-09: Deleting the session root from outside makes the next rebuild fail."""
    root = tmp_path / "gone"
    root.mkdir()
    session = TreeSession.open(str(root))
    shutil.rmtree(root)

    with pytest.raises(RebuildFailed):
        session.rebuild()


def test_display_and_render(session: TreeSession, simple_root: Path) -> None:
    """TC-10: Session rendering delegates to the renderer."""
    buf = io.StringIO()
    session.display(buf)

    assert buf.getvalue().splitlines() == session.render()
    assert session.render()[0] == f"+ {simple_root}"


def test_external_changes_seen_after_rebuild(session: TreeSession, simple_root: Path) -> None:
    """TC-11: The snapshot is point-in-time until the next rebuild."""
    (simple_root / "external.txt").write_text("", encoding="utf-8")
    assert session.search("external") == []

    session.rebuild()
    assert session.search("external") == ["external.txt"]
