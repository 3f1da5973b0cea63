from __future__ import annotations

"""
File Discovery Service.

Resolves the project root and collects candidate file paths, preferring the
git index (fast, honors .gitignore) and falling back to a pruned filesystem
walk whenever git is disabled, absent, or fails. The fallback is silent:
callers always receive a path list and the discovery mode actually used.
"""

import logging
import os
import stat
from typing import List, Tuple

from tree4ai.core.pipeline.components.filters import is_secret_path
from tree4ai.domain.constants import DENY_DIRS
from tree4ai.domain.tree_models import DiscoveryMode
from tree4ai.infra.vcs import VcsQueryError, detect_git_root, list_git_paths

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (ROOT RESOLUTION)
# ==============================================================================

def resolve_project_root(start: str, use_git: bool) -> Tuple[str, bool]:
    """
    Choose the directory the tree is rooted at.

    Args:
        start: Canonical starting directory (``--root`` or the CWD).
        use_git: Whether git may be consulted.

    Returns:
        Tuple[str, bool]: (Project root, True if it is a git working tree).
    """
    if not use_git:
        return start, False

    git_root = detect_git_root(start)
    if git_root is None:
        return start, False

    logger.debug(f"Git working tree detected at: {git_root}")
    return git_root, True


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def discover_files(
        root: str,
        *,
        use_git: bool,
        include_ignored: bool = False,
        include_secret_names: bool = True,
) -> Tuple[List[str], DiscoveryMode]:
    """
    Collect absolute candidate paths under ``root``.

    Args:
        root: Project root directory.
        use_git: True if ``root`` is a git working tree and git is allowed.
        include_ignored: Also list git-ignored paths.
        include_secret_names: List git-ignored paths that look like secrets.

    Returns:
        Tuple[List[str], DiscoveryMode]: Deduplicated, unsorted paths and the
                                         strategy that produced them.
    """
    if use_git:
        try:
            paths = list_files_git(root, include_ignored, include_secret_names)
            logger.debug(f"Git discovery returned {len(paths)} paths.")
            return paths, DiscoveryMode.GIT_AWARE
        except VcsQueryError as e:
            logger.info(f"Git discovery unavailable, walking the filesystem instead: {e}")

    paths = walk_filesystem(root)
    logger.debug(f"Filesystem walk returned {len(paths)} paths.")
    return paths, DiscoveryMode.FS_HEURISTIC


def list_files_git(
        root: str,
        include_ignored: bool,
        include_secret_names: bool,
) -> List[str]:
    """
    List tracked and untracked files from git, optionally adding ignored ones.

    When only secret names are requested, ignored paths are admitted solely
    if they look like secrets (names only, contents are never read).

    Raises:
        VcsQueryError: If any git query fails.
    """
    seen = set()
    paths: List[str] = []

    def _add(rel: str) -> None:
        full = os.path.normpath(os.path.join(root, rel))
        if full not in seen:
            seen.add(full)
            paths.append(full)

    for rel in list_git_paths(root):
        _add(rel)

    if include_ignored or include_secret_names:
        for rel in list_git_paths(root, ignored=True):
            if include_ignored or is_secret_path(rel):
                _add(rel)

    return paths


def walk_filesystem(root: str) -> List[str]:
    """
    Recursively list regular files below ``root`` without following links.

    Directories named in the deny-list are pruned in place during the walk
    (the root itself is never pruned). Unreadable entries are skipped.

    Args:
        root: Project root directory.

    Returns:
        List[str]: Absolute file paths in traversal order.
    """
    paths: List[str] = []

    for current, dirs, files in os.walk(root, followlinks=False, onerror=_log_walk_error):
        # In-place directory pruning to optimize traversal
        dirs[:] = [d for d in dirs if not is_denied_dir(d)]

        for file_name in files:
            full = os.path.join(current, file_name)
            try:
                st = os.lstat(full)
            except OSError:
                continue
            # Regular files only: symlinks, sockets and FIFOs are skipped
            if stat.S_ISREG(st.st_mode):
                paths.append(full)

    return paths


def is_denied_dir(name: str) -> bool:
    """Check a directory name against the noisy-directory deny-list."""
    return name.lower() in DENY_DIRS


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _log_walk_error(error: OSError) -> None:
    """Record an unreadable directory and let the walk continue."""
    logger.debug(f"Skipping unreadable entry '{error.filename}': {error.strerror}")
