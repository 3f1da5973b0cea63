from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from tree4ai.domain.constants import APP_NAME, APP_VERSION
from tree4ai.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree4ai CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree4ai",
        description=i18n.t("app.description"),
    )

    # --- Discovery ---
    p.add_argument(
        "--root",
        dest="root",
        default=None,
        help=i18n.t("cli.args.root"),
    )
    p.add_argument(
        "--no-git",
        action="store_true",
        help=i18n.t("cli.args.no_git"),
    )
    p.add_argument(
        "--include-ignored",
        action="store_true",
        help=i18n.t("cli.args.include_ignored"),
    )

    # --- Relevance Filter ---
    p.add_argument(
        "--hide-secrets",
        action="store_true",
        help=i18n.t("cli.args.hide_secrets"),
    )
    p.add_argument(
        "--include-assets",
        action="store_true",
        help=i18n.t("cli.args.include_assets"),
    )
    p.add_argument(
        "--include-binaries",
        action="store_true",
        help=i18n.t("cli.args.include_binaries"),
    )

    # --- Tree Limits ---
    p.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.max_depth"),
    )
    p.add_argument(
        "--max-files",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.max_files"),
    )

    # --- Output ---
    p.add_argument(
        "--no-header",
        action="store_true",
        help=i18n.t("cli.args.no_header"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        metavar="FILE",
        help=i18n.t("cli.args.output"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        metavar="FILE",
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root"] = args.root
    overrides["output_path"] = args.output_path
    overrides["max_depth"] = args.max_depth
    overrides["max_files"] = args.max_files

    # Discovery overrides
    if args.no_git:
        overrides["use_git"] = False
    if args.include_ignored:
        overrides["include_ignored"] = True

    # Filter overrides
    if args.hide_secrets:
        overrides["hide_secrets"] = True
    if args.include_assets:
        overrides["include_assets"] = True
    if args.include_binaries:
        overrides["include_binaries"] = True

    # Output overrides
    if args.no_header:
        overrides["include_header"] = False
    if args.json_output:
        overrides["json_output"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    """Argparse type for depth and count limits."""
    try:
        n = int(value)
    except ValueError:
        n = -1
    if n < 0:
        raise argparse.ArgumentTypeError(i18n.t("cli.args.non_negative", value=value))
    return n
