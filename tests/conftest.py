from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample projects.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure defined in 'tree4ai.domain.config' with git
    disabled so runs are independent of the surrounding checkout.
    """
    return {
        "root": "",
        "use_git": False,
        "include_ignored": False,
        "hide_secrets": False,
        "include_assets": False,
        "include_binaries": False,
        "max_depth": None,
        "max_files": None,
        "include_header": True,
        "json_output": False,
        "output_path": "",
    }


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small polyglot project.

    Structure:
    /proj
      /src
        main.rs
      /node_modules
        x.js
      README.md
      .env
    """
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "node_modules").mkdir()

    (root / "src" / "main.rs").write_text("fn main() {}", encoding="utf-8")
    (root / "node_modules" / "x.js").write_text("module.exports = 1;", encoding="utf-8")
    (root / "README.md").write_text("# Demo", encoding="utf-8")
    (root / ".env").write_text("TOKEN=abc", encoding="utf-8")

    return root
