from __future__ import annotations

"""
Version Control Infrastructure Layer.

Thin adapter over the ``git`` executable. Every query either returns a
complete result or raises :class:`VcsQueryError`; callers decide how to
recover. Output is decoded leniently so unusual filenames never abort a run.
"""

import logging
import os
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class VcsQueryError(RuntimeError):
    """Raised when a git invocation cannot be executed or exits non-zero."""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def detect_git_root(start: str) -> Optional[str]:
    """
    Return the top-level directory of the working tree containing ``start``.

    Args:
        start: Directory from which to run the query.

    Returns:
        Optional[str]: Absolute path of the git root, or None outside a repo.
    """
    try:
        out = _run_git(["rev-parse", "--show-toplevel"], cwd=start)
    except VcsQueryError as e:
        logger.debug(f"Git root detection failed for '{start}': {e}")
        return None

    top = out.strip()
    if not top:
        return None
    return os.path.normpath(top)


def list_git_paths(root: str, *, ignored: bool = False) -> List[str]:
    """
    List file paths known to git, relative to ``root``.

    Args:
        root: Working tree root.
        ignored: If True, list untracked paths excluded by ignore rules.
                 Otherwise list tracked plus untracked, non-ignored paths.

    Returns:
        List[str]: Relative paths as printed by git, blank lines removed.

    Raises:
        VcsQueryError: If git is missing or the query fails.
    """
    if ignored:
        args = ["ls-files", "--others", "--ignored", "--exclude-standard"]
    else:
        args = ["ls-files", "--cached", "--others", "--exclude-standard"]

    out = _run_git(args, cwd=root)
    return [line for line in out.splitlines() if line.strip()]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _run_git(args: List[str], cwd: str) -> str:
    """Execute a git subcommand and return its decoded stdout."""
    cmd = [GIT_EXECUTABLE, "-c", "core.quotepath=off"] + args
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise VcsQueryError(f"Unable to execute {' '.join(cmd)}: {e}") from e

    if proc.returncode != 0:
        stderr = (proc.stderr or "").strip()
        raise VcsQueryError(
            f"{' '.join(cmd)} exited with status {proc.returncode}: {stderr}"
        )

    return proc.stdout or ""
