from __future__ import annotations

"""
Unit tests for the domain models: configuration defaults, filter options,
tree nodes and pipeline result factories.
"""

import dataclasses

import pytest

from tree4ai.domain.config import FilterConfig, get_default_config
from tree4ai.domain.pipeline_models import create_error_result, create_success_result
from tree4ai.domain.tree_models import DiscoveryMode, TreeNode


def test_default_config_returns_fresh_copies():
    a = get_default_config()
    b = get_default_config()
    a["root"] = "/changed"

    assert b["root"] == ""
    assert b["use_git"] is True
    assert b["max_depth"] is None


def test_filter_config_from_config():
    cfg = get_default_config()
    cfg.update({"include_assets": 1, "hide_secrets": True})

    opts = FilterConfig.from_config(cfg)
    assert opts == FilterConfig(include_assets=True, hide_secrets=True)


def test_filter_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FilterConfig().hide_secrets = True  # type: ignore[misc]


def test_tree_node_child_is_get_or_create():
    node = TreeNode("root")
    first = node.child("src")
    second = node.child("src")

    assert first is second
    assert first.name == "src"
    assert list(node.dirs) == ["src"]


def test_discovery_mode_values():
    assert DiscoveryMode.GIT_AWARE.value == "git-aware"
    assert DiscoveryMode.FS_HEURISTIC == "fs-heuristic"


def test_success_result_counts_files():
    tree = TreeNode("proj")
    files = ["/p/a.py", "/p/b.py"]
    result = create_success_result("/p", "git-aware", files, tree, "proj/\n", {"truncated": 0})

    assert result.ok is True
    assert result.files_count == 2
    assert result.files == files
    assert result.files is not files
    assert result.summary == {"truncated": 0}


def test_error_result_has_no_output():
    result = create_error_result("boom", "/p")

    assert result.ok is False
    assert result.error == "boom"
    assert result.output == ""
    assert result.tree is None
    assert result.summary == {}
