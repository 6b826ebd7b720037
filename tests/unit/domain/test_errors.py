from __future__ import annotations

"""
Unit tests for the error taxonomy.
"""

import pytest

from treeshell.domain.errors import (
    AlreadyExists,
    EnumerationFailed,
    HostIOError,
    InvalidName,
    NotADirectory,
    NotFound,
    RebuildFailed,
    TreeShellError,
)


@pytest.mark.parametrize("cls", [
    NotADirectory, EnumerationFailed, InvalidName,
    AlreadyExists, NotFound, HostIOError, RebuildFailed,
])
def test_all_errors_share_base(cls: type) -> None:
    """TC-01: Every failure can be caught at the menu boundary."""
    err = cls("target")
    assert isinstance(err, TreeShellError)
    assert err.message_key.startswith("cli.errors.")


def test_message_includes_target_and_detail() -> None:
    """TC-02: The plain message is a single readable line."""
    err = HostIOError("foo", "Permission denied")

    assert str(err) == "Filesystem error on 'foo': Permission denied"
    assert "\n" not in str(err)
    assert err.format_args() == {"target": "foo", "detail": "Permission denied"}


def test_message_without_detail() -> None:
    """TC-03: Detail is optional."""
    assert str(NotFound("ghost")) == "Does not exist: 'ghost'"
