from __future__ import annotations

"""
Snapshot Tree Data Models.

Provides the node type used to hold an in-memory, point-in-time picture of
a directory subtree. Each node owns its children exclusively; the snapshot
builder is the only component expected to attach children.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Kind of filesystem entry captured by a Node."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Node:
    """
    Represents one filesystem entry captured at snapshot time.

    Attributes:
        name: Verbatim input path for the root, entry name for descendants
              (nested directories may carry full paths, see NamingPolicy).
        kind: Directory or File.
    """
    name: str
    kind: NodeKind
    _children: List["Node"] = field(default_factory=list, init=False, repr=False, hash=False)

    @property
    def children(self) -> Tuple["Node", ...]:
        """Read-only view of the children in stored order."""
        return tuple(self._children)

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def make_node(name: str, kind: NodeKind) -> Node:
    """Construct a node with no children."""
    return Node(name=name, kind=NodeKind(kind))


def add_child(parent: Node, child: Node) -> None:
    """
    Append a child to a directory node.

    Args:
        parent: Directory node receiving the child.
        child: Node to attach. Must not be the parent itself.

    Raises:
        ValueError: If the parent is a file node or the child is the parent.
    """
    if not parent.is_directory:
        raise ValueError(f"Cannot add children to file node '{parent.name}'.")
    if child is parent:
        raise ValueError(f"Node '{parent.name}' cannot be its own child.")
    parent._children.append(child)


def iter_preorder(root: Node) -> Iterator[Tuple[int, Node]]:
    """
    Yield (depth, node) pairs in pre-order, root first at depth 0.

    Iterative, so tree depth is not bounded by the recursion limit.
    """
    stack: List[Tuple[int, Node]] = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        for child in reversed(node._children):
            stack.append((depth + 1, child))


def count_nodes(root: Node) -> Tuple[int, int]:
    """
    Count directories and files in a snapshot, root included.

    Returns:
        Tuple[int, int]: (directories, files).
    """
    dirs = files = 0
    for _, node in iter_preorder(root):
        if node.is_directory:
            dirs += 1
        else:
            files += 1
    return dirs, files
