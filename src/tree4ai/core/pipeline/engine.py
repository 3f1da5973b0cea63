from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole tree workflow:
1. Validates configuration and resolves the project root.
2. Verifies the root is readable (the only fatal condition).
3. Discovers candidate files (git index or filesystem walk).
4. Applies the relevance filter.
5. Sorts, optionally truncates, and builds the tree.
6. Renders the text or JSON document.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from tree4ai.core.analysis.tree_generator import build_tree
from tree4ai.core.analysis.tree_renderer import render_json_document, render_text_document
from tree4ai.core.pipeline.components.filters import is_relevant_path
from tree4ai.core.pipeline.stages.validator import validate_config
from tree4ai.core.services.scanner import discover_files, resolve_project_root
from tree4ai.domain.config import FilterConfig
from tree4ai.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from tree4ai.infra.fs import canonicalize_path, check_readable_dir, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]]) -> PipelineResult:
    """
    Execute the full tree pipeline.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        PipelineResult: Object containing status, tree, rendered output and summary.
    """
    logger.debug("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Root Resolution
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    start = canonicalize_path(normalize_path(cfg["root"], os.getcwd()))

    if not os.path.isdir(start):
        msg = f"Invalid root directory: {start}"
        logger.error(msg)
        return create_error_result(msg, start)

    root, is_git_root = resolve_project_root(start, bool(cfg["use_git"]))

    # -------------------------------------------------------------------------
    # 2) Root Accessibility
    # -------------------------------------------------------------------------
    readable, err = check_readable_dir(root)
    if not readable:
        msg = f"Cannot read root directory {root}: {err}"
        logger.error(msg)
        return create_error_result(msg, root)

    # -------------------------------------------------------------------------
    # 3) Discovery
    # -------------------------------------------------------------------------
    options = FilterConfig.from_config(cfg)

    candidates, mode = discover_files(
        root,
        use_git=is_git_root,
        include_ignored=options.include_ignored,
        include_secret_names=not options.hide_secrets,
    )
    logger.info(f"Discovered {len(candidates)} candidate files ({mode.value}) under {root}")

    # -------------------------------------------------------------------------
    # 4) Relevance Filter, Ordering & Truncation
    # -------------------------------------------------------------------------
    files = [p for p in candidates if is_relevant_path(p, options)]
    filtered_out = len(candidates) - len(files)

    files = sort_paths(files)

    truncated = 0
    max_files = cfg["max_files"]
    if max_files is not None and len(files) > max_files:
        truncated = len(files) - max_files
        files = files[:max_files]
        logger.info(f"File list truncated to {max_files} entries ({truncated} dropped).")

    # -------------------------------------------------------------------------
    # 5) Tree Construction & Rendering
    # -------------------------------------------------------------------------
    max_depth = cfg["max_depth"]
    tree = build_tree(files, root, max_depth)

    if cfg["json_output"]:
        output = render_json_document(tree, root, mode.value, len(files))
    else:
        output = render_text_document(
            tree, root, mode.value,
            include_header=bool(cfg["include_header"]),
            max_depth=max_depth,
        )

    summary = {
        "discovered": len(candidates),
        "filtered_out": filtered_out,
        "truncated": truncated,
        "files_count": len(files),
        "max_depth": max_depth,
        "json": bool(cfg["json_output"]),
    }

    logger.debug("Pipeline completed successfully.")
    return create_success_result(root, mode.value, files, tree, output, summary)


def sort_paths(paths: List[str]) -> List[str]:
    """Order paths component by component, by raw (codepoint) name."""
    return sorted(paths, key=lambda p: p.split(os.sep))
