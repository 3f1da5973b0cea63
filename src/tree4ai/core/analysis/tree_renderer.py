from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode structures into the two output forms of the tool: an
indented plain-text listing tuned for language models, and a nested
dictionary ready for JSON serialization. Both forms are deterministic:
directories are ordered by raw name, files case-insensitively.
"""

import json
from typing import Any, Dict, List, Optional

from tree4ai.domain.constants import HEADER_RULES, HEADER_TITLE, INDENT_SPACES
from tree4ai.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# TEXT RENDERING
# -----------------------------------------------------------------------------

def render_tree_text(
        tree: TreeNode,
        indent: int = INDENT_SPACES,
        max_depth: Optional[int] = None,
) -> str:
    """
    Render the tree as indented text.

    The first line is ``<root>/``. Each level lists its directories first
    (suffixed with ``/``), then its files, indented by ``indent`` spaces per
    level. With ``max_depth`` set, a directory at the depth limit is listed
    but its contents are not.

    Sorts each node's file list in place.

    Args:
        tree: Root node to render.
        indent: Spaces per level.
        max_depth: Optional maximum depth in path segments.

    Returns:
        str: Rendered lines joined by newlines, without a trailing newline.
    """
    lines: List[str] = [f"{tree.name}/"]
    _render_level(tree, 0, indent, max_depth, lines)
    return "\n".join(lines)


def render_header(root: str, mode: str) -> str:
    """Build the LLM helper preamble that precedes the text tree."""
    lines = [
        HEADER_TITLE,
        f"root: {root}",
        f"mode: {mode}",
        "rules:",
        *HEADER_RULES,
    ]
    return "\n".join(lines) + "\n\n"


def render_text_document(
        tree: TreeNode,
        root: str,
        mode: str,
        *,
        include_header: bool = True,
        max_depth: Optional[int] = None,
) -> str:
    """
    Produce the full text output: optional header plus tree.

    Returns:
        str: Document guaranteed to end with exactly one newline.
    """
    out = render_header(root, mode) if include_header else ""
    out += render_tree_text(tree, INDENT_SPACES, max_depth)
    return out.rstrip("\n") + "\n"

# -----------------------------------------------------------------------------
# STRUCTURED RENDERING
# -----------------------------------------------------------------------------

def tree_to_dict(tree: TreeNode) -> Dict[str, Any]:
    """
    Convert the tree into plain containers for serialization.

    Empty ``dirs`` and ``files`` collections are omitted. Sorts each node's
    file list in place so the structured form matches the text form.
    """
    out: Dict[str, Any] = {"name": tree.name}
    if tree.dirs:
        out["dirs"] = {name: tree_to_dict(tree.dirs[name]) for name in sorted(tree.dirs)}
    if tree.files:
        sort_files(tree)
        out["files"] = list(tree.files)
    return out


def build_json_payload(tree: TreeNode, root: str, mode: str, files_count: int) -> Dict[str, Any]:
    """Wrap the structured tree with run metadata."""
    return {
        "root": root,
        "mode": mode,
        "indent": INDENT_SPACES,
        "files_count": files_count,
        "tree": tree_to_dict(tree),
    }


def render_json_document(tree: TreeNode, root: str, mode: str, files_count: int) -> str:
    """Serialize the structured payload as a newline-terminated JSON document."""
    payload = build_json_payload(tree, root, mode, files_count)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def sort_files(node: TreeNode) -> None:
    """Sort a node's files case-insensitively, ties broken by raw name."""
    node.files.sort(key=lambda f: (f.lower(), f))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(
        node: TreeNode,
        level: int,
        indent: int,
        max_depth: Optional[int],
        lines: List[str],
) -> None:
    """Append the children of ``node`` (at ``level``) to ``lines``."""
    pad = " " * (indent * (level + 1))

    for name in sorted(node.dirs):
        child = node.dirs[name]
        lines.append(f"{pad}{child.name}/")
        if max_depth is None or level + 1 < max_depth:
            _render_level(child, level + 1, indent, max_depth, lines)

    sort_files(node)
    for file_name in node.files:
        lines.append(f"{pad}{file_name}")
