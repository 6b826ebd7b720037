from __future__ import annotations

"""
File Search Service.

Case-sensitive substring search over file names held in a snapshot.
Directories are never reported but are always descended into.
"""

import logging
from typing import List

from treeshell.domain.tree_models import Node, iter_preorder

logger = logging.getLogger(__name__)


def search_files(root: Node, query: str) -> List[str]:
    """
    Collect the names of every file node containing 'query'.

    Args:
        root: Snapshot to search.
        query: Non-empty substring, matched case-sensitively.

    Returns:
        List[str]: Matching file names in pre-order, one entry per occurrence.

    Raises:
        ValueError: If the query is empty.
    """
    if not query:
        raise ValueError("Search query must not be empty.")

    matches = [
        node.name
        for _, node in iter_preorder(root)
        if not node.is_directory and query in node.name
    ]
    logger.debug(f"Search '{query}' matched {len(matches)} file(s)")
    return matches
