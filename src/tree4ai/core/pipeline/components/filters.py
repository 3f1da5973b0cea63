from __future__ import annotations

"""
File Relevance and Secret Detection Engine.

Implements the priority chain that decides whether a discovered path is
worth listing in an AI-oriented project tree, and the name-only heuristic
that recognizes credential and environment files. Neither predicate ever
opens a file.
"""

import os
import re

from tree4ai.domain.config import FilterConfig
from tree4ai.domain.constants import (
    ASSET_EXTENSIONS,
    JUNK_FILES,
    LOCK_FILES,
    LOCK_SUFFIX,
    RELEVANT_EXTENSIONS,
    SPECIAL_FILENAMES,
)

# -----------------------------------------------------------------------------
# REGEX AND FILENAME CONSTANTS
# -----------------------------------------------------------------------------

_DOTENV_NAME = ".env"

# "secret" / "secrets" as a standalone token, evaluated on lowercased names
_SECRET_TOKEN_RX = re.compile(r"(?:^|[^a-z])secrets?(?:$|[^a-z])")

# -----------------------------------------------------------------------------
# SECRET DETECTION
# -----------------------------------------------------------------------------

def is_secret_path(path: str) -> bool:
    """
    Classify a path as secret-like based on its base name only.

    Matches dotenv files (``.env``, ``.env.local``, ``.env.*``) and names that
    contain ``secret`` or ``secrets`` bounded by non-letters, so
    ``my-secret.txt`` matches while ``secretary.txt`` does not.

    Args:
        path: Filesystem path or bare filename.

    Returns:
        bool: True if the name looks like a credential or environment file.
    """
    name = os.path.basename(path).lower()

    if name == _DOTENV_NAME or name.startswith(_DOTENV_NAME + "."):
        return True

    return _SECRET_TOKEN_RX.search(name) is not None

# -----------------------------------------------------------------------------
# RELEVANCE FILTER
# -----------------------------------------------------------------------------

def is_relevant_path(path: str, options: FilterConfig) -> bool:
    """
    Decide whether a path belongs in the project tree.

    Rules are evaluated in a fixed priority order and the first match wins:
    junk files and lockfiles are always rejected, secret-like names are
    accepted unless hidden, binaries are accepted on request, and otherwise
    the decision falls to well-known build files and extension whitelists.

    Args:
        path: Absolute filesystem path.
        options: Filter options for the current run.

    Returns:
        bool: True if the path should be kept.
    """
    name = os.path.basename(path)
    lower = name.lower()

    if lower in JUNK_FILES:
        return False

    if lower.endswith(LOCK_SUFFIX) or lower in LOCK_FILES:
        return False

    if not options.hide_secrets and is_secret_path(path):
        return True

    if options.include_binaries:
        return True

    if name in SPECIAL_FILENAMES:
        return True

    ext = file_extension(name)
    if not ext:
        return False

    if ext in RELEVANT_EXTENSIONS:
        return True

    return options.include_assets and ext in ASSET_EXTENSIONS


def file_extension(name: str) -> str:
    """
    Return the lowercased extension of a filename, without the dot.

    Bare dotfiles such as ``.gitignore`` have no extension.
    """
    _, ext = os.path.splitext(name)
    return ext[1:].lower()
