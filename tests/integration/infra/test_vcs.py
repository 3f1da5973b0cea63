from __future__ import annotations

"""
Integration tests for the git adapter.

Runs against throwaway repositories created with the real git executable;
skipped entirely when git is not installed.
"""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from tree4ai.core.services.scanner import discover_files
from tree4ai.domain.tree_models import DiscoveryMode
from tree4ai.infra.vcs import VcsQueryError, detect_git_root, list_git_paths

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """
    Create a repository with one tracked, one untracked and two ignored files.

    Structure:
    /repo
      .gitignore      (ignores .env and dist/)
      /src
        app.py        (tracked)
      notes.md        (untracked)
      .env            (ignored)
      /dist
        bundle.js     (ignored)
    """
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    (repo / "dist").mkdir()

    _git(repo, "init", "-q")
    (repo / ".gitignore").write_text(".env\ndist/\n", encoding="utf-8")
    (repo / "src" / "app.py").write_text("print('hi')", encoding="utf-8")
    (repo / "notes.md").write_text("# Notes", encoding="utf-8")
    (repo / ".env").write_text("TOKEN=1", encoding="utf-8")
    (repo / "dist" / "bundle.js").write_text("", encoding="utf-8")
    _git(repo, "add", ".gitignore", "src/app.py")

    return repo


def test_detect_git_root_from_subdirectory(git_repo: Path) -> None:
    top = detect_git_root(str(git_repo / "src"))
    assert top is not None
    assert os.path.realpath(top) == os.path.realpath(git_repo)


def test_detect_git_root_outside_repo(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    # Guard against a tmp directory that itself lives inside a checkout
    if detect_git_root(str(tmp_path)) is not None:
        pytest.skip("Temporary directory is inside a git work tree")

    assert detect_git_root(str(plain)) is None


def test_list_git_paths_tracked_and_untracked(git_repo: Path) -> None:
    paths = sorted(list_git_paths(str(git_repo)))
    assert paths == [".gitignore", "notes.md", "src/app.py"]


def test_list_git_paths_ignored(git_repo: Path) -> None:
    paths = list_git_paths(str(git_repo), ignored=True)

    assert ".env" in paths
    assert any(p.startswith("dist/") for p in paths)
    assert "notes.md" not in paths


def test_list_git_paths_outside_repo_raises(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    if detect_git_root(str(tmp_path)) is not None:
        pytest.skip("Temporary directory is inside a git work tree")

    with pytest.raises(VcsQueryError):
        list_git_paths(str(plain))


def test_discover_files_git_mode_adds_ignored_secrets(git_repo: Path) -> None:
    paths, mode = discover_files(str(git_repo), use_git=True)
    rel = sorted(os.path.relpath(p, git_repo).replace(os.sep, "/") for p in paths)

    assert mode is DiscoveryMode.GIT_AWARE
    assert rel == [".env", ".gitignore", "notes.md", "src/app.py"]


def test_discover_files_git_mode_hides_secrets(git_repo: Path) -> None:
    paths, _ = discover_files(str(git_repo), use_git=True, include_secret_names=False)
    rel = sorted(os.path.relpath(p, git_repo).replace(os.sep, "/") for p in paths)

    assert rel == [".gitignore", "notes.md", "src/app.py"]


def test_discover_files_git_mode_include_ignored(git_repo: Path) -> None:
    paths, _ = discover_files(str(git_repo), use_git=True, include_ignored=True)
    rel = {os.path.relpath(p, git_repo).replace(os.sep, "/") for p in paths}

    assert "dist/bundle.js" in rel
    assert ".env" in rel
