from __future__ import annotations

"""
Configuration Domain Management.

Defines the session configuration that drives a single run of the tree
pipeline and the immutable filter options derived from it.
"""

from dataclasses import dataclass
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the Pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Discovery
        "root": "",
        "use_git": True,
        "include_ignored": False,

        # Relevance Filter
        "hide_secrets": False,
        "include_assets": False,
        "include_binaries": False,

        # Tree Limits
        "max_depth": None,
        "max_files": None,

        # Output
        "include_header": True,
        "json_output": False,
        "output_path": "",
    }


@dataclass(frozen=True)
class FilterConfig:
    """
    Options controlling the relevance filter.

    Attributes:
        include_assets: Accept images, media, fonts and archives.
        include_binaries: Accept every file that survives the deny rules.
        hide_secrets: Drop secret-like names instead of force-including them.
        include_ignored: Also list paths ignored by version control.
    """
    include_assets: bool = False
    include_binaries: bool = False
    hide_secrets: bool = False
    include_ignored: bool = False

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "FilterConfig":
        """Derive filter options from a validated session configuration."""
        return cls(
            include_assets=bool(cfg.get("include_assets")),
            include_binaries=bool(cfg.get("include_binaries")),
            hide_secrets=bool(cfg.get("hide_secrets")),
            include_ignored=bool(cfg.get("include_ignored")),
        )
