from __future__ import annotations

"""
Directory Tree Generator.

Folds a flat list of absolute file paths into a nested TreeNode structure
rooted at the project root. Construction is a plain trie insertion: each
path walks a cursor down from the root, creating directory nodes on the way
and registering its file name at the end. An optional depth limit prunes
anything deeper than the requested number of path segments.
"""

import logging
from pathlib import PurePath
from typing import Iterable, List, Optional

from tree4ai.domain.tree_models import TreeNode
from tree4ai.infra.fs import root_display_name

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        paths: Iterable[str],
        root: str,
        max_depth: Optional[int] = None,
) -> TreeNode:
    """
    Assemble the project tree from absolute file paths.

    Depth counts path segments from the root, so a direct child file of the
    root has depth 1. With ``max_depth`` set, directories deeper than the
    limit are never created and files deeper than the limit are dropped.
    No sorting happens here; ordering is the renderer's job.

    Args:
        paths: Absolute file paths (normally filtered and sorted).
        root: Project root the paths are expressed against.
        max_depth: Optional maximum depth in path segments.

    Returns:
        TreeNode: The synthetic root node named after the project root.
    """
    tree = TreeNode(root_display_name(root))
    inserted = 0

    for path in paths:
        parts = relative_parts(path, root)
        if not parts:
            continue
        if _insert(tree, parts, max_depth):
            inserted += 1

    logger.debug(f"Tree built with {inserted} file entries (max_depth={max_depth}).")
    return tree


def relative_parts(path: str, root: str) -> List[str]:
    """
    Split ``path`` into components relative to ``root``.

    Paths outside the root keep all of their own components.
    """
    p = PurePath(path)
    try:
        return list(p.relative_to(root).parts)
    except ValueError:
        return list(p.parts)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _insert(tree: TreeNode, parts: List[str], max_depth: Optional[int]) -> bool:
    """Insert one path into the tree. Return True if its file name was kept."""
    cursor = tree
    *dir_parts, file_name = parts

    for depth, name in enumerate(dir_parts, start=1):
        if max_depth is not None and depth > max_depth:
            return False
        cursor = cursor.child(name)

    if max_depth is not None and len(parts) > max_depth:
        return False

    cursor.files.append(file_name)
    return True
