from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type used to assemble the project map and the
tag describing which discovery strategy produced the candidate paths.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

# -----------------------------------------------------------------------------
# DISCOVERY METADATA
# -----------------------------------------------------------------------------

class DiscoveryMode(str, Enum):
    """Strategy that produced the flat path list."""
    GIT_AWARE = "git-aware"
    FS_HEURISTIC = "fs-heuristic"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    One directory level of the project tree.

    Directories and files live in separate namespaces, so a child directory
    and a file may share the same literal name.

    Attributes:
        name: Directory name (the root carries the project root's base name).
        dirs: Child directories keyed by name.
        files: Names of the files directly contained in this directory.
    """
    name: str
    dirs: Dict[str, "TreeNode"] = field(default_factory=dict)
    files: List[str] = field(default_factory=list)

    def child(self, name: str) -> "TreeNode":
        """Return the child directory called ``name``, creating it if needed."""
        node = self.dirs.get(name)
        if node is None:
            node = TreeNode(name)
            self.dirs[name] = node
        return node
