from __future__ import annotations

"""
Unit tests for the Relevance Filter and Secret Detector.

Verifies:
1. Secret-like name detection (dotenv files and standalone 'secret' tokens).
2. The priority chain of the relevance filter (deny before allow).
3. Opt-in widening for assets and binaries.
"""

import pytest

from tree4ai.core.pipeline.components.filters import (
    file_extension,
    is_relevant_path,
    is_secret_path,
)
from tree4ai.domain.config import FilterConfig

DEFAULTS = FilterConfig()
HIDE = FilterConfig(hide_secrets=True)


@pytest.mark.parametrize("name", [
    ".env",
    ".env.local",
    ".ENV.production",
    "config.secrets.yaml",
    "secret.txt",
    "my-secret.txt",
    "secrets.json",
    "db_secret",
    "/abs/path/to/client_secrets.json",
])
def test_is_secret_path_matches(name):
    assert is_secret_path(name) is True, f"{name} should look like a secret"


@pytest.mark.parametrize("name", [
    "secretary.txt",
    "presecret.md",
    "main.py",
    ".envrc",
    "environment.yml",
    "/secrets/readme.md",
])
def test_is_secret_path_rejects(name):
    assert is_secret_path(name) is False, f"{name} should NOT look like a secret"


def test_junk_files_always_rejected():
    """OS metadata artifacts lose even against include_binaries."""
    opts = FilterConfig(include_binaries=True)
    assert is_relevant_path("/p/.DS_Store", opts) is False
    assert is_relevant_path("/p/Thumbs.db", opts) is False


def test_lockfiles_rejected_before_secrets():
    opts = FilterConfig(include_binaries=True)
    for name in ["yarn.lock", "Cargo.lock", "package-lock.json", "pnpm-lock.yaml", "Pipfile.lock"]:
        assert is_relevant_path(f"/p/{name}", opts) is False, name

    # A secret-like lockfile is still a lockfile
    assert is_relevant_path("/p/secrets.lock", DEFAULTS) is False


def test_secrets_shown_regardless_of_extension():
    for name in [".env", ".env.local", "api-secret.bin", "secrets"]:
        assert is_relevant_path(f"/p/{name}", DEFAULTS) is True, name


def test_hide_secrets_falls_through_to_extension_rules():
    assert is_relevant_path("/p/.env", HIDE) is False
    assert is_relevant_path("/p/api-secret.bin", HIDE) is False
    # Still relevant by extension
    assert is_relevant_path("/p/secrets.json", HIDE) is True


def test_include_binaries_accepts_everything_else():
    opts = FilterConfig(include_binaries=True)
    assert is_relevant_path("/p/app.exe", opts) is True
    assert is_relevant_path("/p/libfoo.so", opts) is True
    assert is_relevant_path("/p/app.exe", DEFAULTS) is False


def test_special_build_files_exact_case():
    for name in ["Dockerfile", "Makefile", "dockerfile", "Dockerfile.dev"]:
        assert is_relevant_path(f"/p/{name}", DEFAULTS) is True, name
    assert is_relevant_path("/p/MAKEFILE", DEFAULTS) is False


def test_relevant_extensions_case_insensitive():
    for name in ["main.rs", "README.md", "App.TSX", "setup.CFG", "schema.graphql", "infra.tf"]:
        assert is_relevant_path(f"/p/{name}", DEFAULTS) is True, name


def test_bare_dotfiles_have_no_extension():
    assert file_extension(".gitignore") == ""
    assert file_extension("archive.tar.gz") == "gz"
    assert is_relevant_path("/p/.gitignore", DEFAULTS) is False
    assert is_relevant_path("/p/root.gitignore", DEFAULTS) is True


def test_assets_are_opt_in():
    opts = FilterConfig(include_assets=True)
    for name in ["logo.png", "font.woff2", "manual.pdf", "bundle.tar.gz", "clip.MP4"]:
        assert is_relevant_path(f"/p/{name}", DEFAULTS) is False, name
        assert is_relevant_path(f"/p/{name}", opts) is True, name


def test_unknown_extension_rejected():
    opts = FilterConfig(include_assets=True)
    assert is_relevant_path("/p/data.bin", opts) is False
    assert is_relevant_path("/p/LICENSE", opts) is False
