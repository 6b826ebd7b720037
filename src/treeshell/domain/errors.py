from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure that can reach the user during a session is expressed as a
TreeShellError subclass. Each error carries the offending target and a
locale key so the interface layer can render a single translated line.
"""

from typing import Dict


class TreeShellError(Exception):
    """
    Base class for user-facing failures.

    Attributes:
        target: Path or entry name the failure refers to.
        detail: Optional host-provided detail (e.g. the OSError text).
    """
    message_key = "cli.errors.generic"
    template = "Operation failed for '{target}'"

    def __init__(self, target: str, detail: str = "") -> None:
        self.target = target
        self.detail = detail
        message = self.template.format(target=target)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def format_args(self) -> Dict[str, str]:
        """Interpolation arguments for the localized message."""
        return {"target": self.target, "detail": self.detail}


class NotADirectory(TreeShellError):
    """The snapshot root is missing or is not a directory."""
    message_key = "cli.errors.not_a_directory"
    template = "Not a directory: '{target}'"


class EnumerationFailed(TreeShellError):
    """The host failed while listing a directory during a build."""
    message_key = "cli.errors.enumeration_failed"
    template = "Cannot read directory '{target}'"


class InvalidName(TreeShellError):
    """A user-supplied entry name is empty or is not a single component."""
    message_key = "cli.errors.invalid_name"
    template = "Invalid name: '{target}'"


class AlreadyExists(TreeShellError):
    message_key = "cli.errors.already_exists"
    template = "Already exists: '{target}'"


class NotFound(TreeShellError):
    message_key = "cli.errors.not_found"
    template = "Does not exist: '{target}'"


class HostIOError(TreeShellError):
    """Any other filesystem failure (permissions, devices...)."""
    message_key = "cli.errors.host_io"
    template = "Filesystem error on '{target}'"


class RebuildFailed(TreeShellError):
    """The disk change succeeded but the snapshot could not be rebuilt."""
    message_key = "cli.errors.rebuild_failed"
    template = "Snapshot rebuild failed for '{target}'"
