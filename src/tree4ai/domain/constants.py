from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the closed enumerations that drive discovery and relevance
filtering (noisy directories, junk files, lockfiles, relevant and asset
extensions) together with rendering constants and the LLM helper header.
"""

from typing import FrozenSet, List

APP_NAME = "Tree for AI"
APP_VERSION = "0.1.0"

# Spaces per tree level, shared by every level of the text renderer
INDENT_SPACES = 5

# -----------------------------------------------------------------------------
# DISCOVERY (FILESYSTEM WALK)
# -----------------------------------------------------------------------------

# Compared against lowercased directory names, exact match only
DENY_DIRS: FrozenSet[str] = frozenset({
    # Version control metadata
    ".git", ".hg", ".svn",
    # Language and package caches
    "__pycache__", ".cache", ".mypy_cache", ".pytest_cache", ".ruff_cache",
    ".tox", ".venv", "venv", "env", "node_modules", ".pnpm-store",
    # Build outputs
    "dist", "build", "out", ".next", ".nuxt", ".angular", ".parcel-cache",
    "target", "bin", "obj", ".gradle",
    # Editors and IDEs
    ".idea", ".vscode",
    # Infrastructure-as-code and site generators
    ".terraform", ".serverless", ".docusaurus",
})

# -----------------------------------------------------------------------------
# RELEVANCE FILTER
# -----------------------------------------------------------------------------

# OS metadata artifacts, compared lowercased
JUNK_FILES: FrozenSet[str] = frozenset({".ds_store", "thumbs.db"})

LOCK_SUFFIX = ".lock"

LOCK_FILES: FrozenSet[str] = frozenset({
    "yarn.lock",
    "package-lock.json",
    "pnpm-lock.yaml",
    "pipfile.lock",
    "poetry.lock",
})

# Extensionless build files, exact case match
SPECIAL_FILENAMES: FrozenSet[str] = frozenset({
    "Dockerfile", "Makefile", "dockerfile", "Dockerfile.dev",
})

RELEVANT_EXTENSIONS: FrozenSet[str] = frozenset({
    # Docs and config
    "md", "rst", "adoc", "txt", "json", "jsonc", "yaml", "yml", "toml", "ini",
    "cfg", "conf", "env", "properties",
    # Web
    "html", "htm", "css", "scss", "less",
    # Code
    "rs", "py", "pyi", "ipynb",
    "js", "cjs", "mjs", "jsx", "ts", "tsx",
    "sh", "bash", "zsh", "ps1", "bat", "cmd",
    "go", "java", "kt", "kts",
    "c", "h", "cpp", "hpp", "cc", "hh",
    "cs", "vb", "php", "rb", "swift", "scala", "erl", "ex", "exs",
    "sql", "prisma", "graphql", "gql",
    "gradle", "groovy", "tf", "sln", "csproj", "fsproj", "vbproj", "vcxproj",
    "editorconfig", "gitattributes", "gitignore", "eslintignore", "prettierignore",
})

ASSET_EXTENSIONS: FrozenSet[str] = frozenset({
    # Images
    "png", "jpg", "jpeg", "gif", "svg", "webp", "ico", "bmp", "tiff",
    # Audio and video
    "mp3", "wav", "flac", "mp4", "mov", "mkv", "avi",
    # Fonts and documents
    "woff", "woff2", "eot", "ttf", "otf", "pdf",
    # Archives
    "zip", "tar", "gz", "tgz", "bz2", "7z", "rar",
})

# -----------------------------------------------------------------------------
# TEXT OUTPUT
# -----------------------------------------------------------------------------

HEADER_TITLE = "# Tree for AI"

HEADER_RULES: List[str] = [
    "- Work only with files/paths listed below unless explicitly asked to create new ones.",
    "- All paths are relative to the root above.",
    "- File contents are not included; ask if more context is needed.",
]
