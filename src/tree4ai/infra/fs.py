from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, canonicalization with graceful degradation,
and the pre-flight check that decides whether a project root is usable.
"""

import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def canonicalize_path(path: str) -> str:
    """
    Resolve symbolic links and relative segments of an existing path.

    Falls back to the unresolved input when the path cannot be
    canonicalized (missing, permission denied, symlink loop).

    Args:
        path: Absolute path to resolve.

    Returns:
        str: Canonical path, or ``path`` unchanged on failure.
    """
    try:
        return os.path.realpath(path, strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug(f"Could not canonicalize '{path}': {e}. Using it as given.")
        return path


def root_display_name(root: str) -> str:
    """
    Return the name used for the synthetic tree root.

    Filesystem roots have no base name, so the full path is used instead.
    """
    return os.path.basename(os.path.normpath(root)) or root

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_readable_dir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Verify that a directory exists and its entries can be listed.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        with os.scandir(path) as it:
            next(it, None)
        return True, None
    except OSError as e:
        return False, str(e)
