from __future__ import annotations

"""
Integration tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

import pytest

from tree4ai.infra.fs import (
    canonicalize_path,
    check_readable_dir,
    normalize_path,
    root_display_name,
)


def test_normalize_path_fallback_and_expansion(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("TREE4AI_TEST_DIR", str(tmp_path))

    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)
    assert normalize_path("$TREE4AI_TEST_DIR", "/unused") == str(tmp_path)
    assert os.path.isabs(normalize_path("relative/dir", "/unused"))


def test_canonicalize_path_resolves_dot_segments(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    messy = os.path.join(str(tmp_path), "a", "..", "a")

    assert canonicalize_path(messy) == os.path.realpath(tmp_path / "a")


def test_canonicalize_path_missing_returns_input(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing")
    assert canonicalize_path(missing) == missing


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_canonicalize_path_follows_symlink(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(real, link, target_is_directory=True)
    except OSError:
        pytest.skip("Cannot create symlinks in this environment")

    assert canonicalize_path(str(link)) == os.path.realpath(real)


def test_root_display_name() -> None:
    assert root_display_name(os.path.join(os.sep, "work", "proj")) == "proj"
    assert root_display_name(os.path.join(os.sep, "work", "proj") + os.sep) == "proj"
    assert root_display_name(os.sep) == os.sep


def test_check_readable_dir(tmp_path: Path) -> None:
    assert check_readable_dir(str(tmp_path)) == (True, None)

    ok, err = check_readable_dir(str(tmp_path / "missing"))
    assert ok is False
    assert err
