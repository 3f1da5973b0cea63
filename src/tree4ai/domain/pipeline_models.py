from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tree4ai.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root: Resolved project root.
        mode: Discovery mode actually used (empty on early failure).
        files_count: Number of files kept after filtering and truncation.
        files: Absolute paths kept after filtering and truncation, sorted.
        tree: Assembled project tree.
        output: Rendered document (text or JSON), newline-terminated.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    root: str
    mode: str = ""

    files_count: int = 0
    files: List[str] = field(default_factory=list)
    tree: Optional[TreeNode] = None
    output: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root: str,
        mode: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Carries no tree and no output so callers never emit partial documents.

    Args:
        error: Detailed error description.
        root: The root directory the run targeted.
        mode: Discovery mode, if discovery had been reached.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        root=root,
        mode=mode,
        summary=summary_extra or {},
    )


def create_success_result(
        root: str,
        mode: str,
        files: List[str],
        tree: TreeNode,
        output: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        root: Resolved project root.
        mode: Discovery mode actually used.
        files: Final sorted file list fed to the tree builder.
        tree: Assembled project tree.
        output: Rendered document.
        summary_extra: Execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        root=root,
        mode=mode,
        files_count=len(files),
        files=list(files),
        tree=tree,
        output=output,
        summary=summary_extra or {},
    )
