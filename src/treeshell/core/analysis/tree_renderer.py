from __future__ import annotations

"""
Tree Renderer.

Converts a snapshot into indented text lines: two spaces per depth level,
'+ ' for directories and '- ' for files, visited in pre-order.
"""

import sys
from typing import List, Optional, TextIO

from treeshell.domain.tree_models import Node, iter_preorder

INDENT_UNIT = "  "
DIRECTORY_MARKER = "+ "
FILE_MARKER = "- "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node) -> List[str]:
    """
    Transform the snapshot into display lines.

    Args:
        root: Snapshot root (depth 0, no indentation).

    Returns:
        List[str]: One line per node, without line terminators.
    """
    lines: List[str] = []
    for depth, node in iter_preorder(root):
        marker = DIRECTORY_MARKER if node.is_directory else FILE_MARKER
        lines.append(f"{INDENT_UNIT * depth}{marker}{node.name}")
    return lines


def display(root: Node, stream: Optional[TextIO] = None) -> None:
    """Write the rendered tree to 'stream' (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    for line in render_tree(root):
        print(line, file=out)
