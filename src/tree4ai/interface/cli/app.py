from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of the
default configuration with command-line overrides, pipeline execution, and
delivery of the rendered document to stdout or a file. Output is
all-or-nothing: nothing is written unless the whole pipeline succeeded.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from tree4ai.core.pipeline.engine import run_pipeline
from tree4ai.core.pipeline.stages.validator import validate_config
from tree4ai.domain.config import get_default_config
from tree4ai.domain.pipeline_models import PipelineResult
from tree4ai.infra.fs import normalize_path
from tree4ai.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from tree4ai.interface.cli import args as cli_args
from tree4ai.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    """Resolve configuration, execute the pipeline and deliver the output."""
    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides into the defaults
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pre-flight root verification
    root = clean_conf.get("root", "")
    if root and not os.path.isdir(normalize_path(root, os.getcwd())):
        msg = i18n.t("cli.errors.path_not_exist", path=root)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_ROOT

    # 6. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output delivery phase
    output_path = clean_conf.get("output_path", "")
    if output_path:
        return _write_output(output_path, result)

    sys.stdout.write(result.output)
    sys.stdout.flush()
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys already known to the base configuration are merged and
    ``None`` overrides leave the base value untouched.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# OUTPUT DELIVERY
# -----------------------------------------------------------------------------

def _write_output(path: str, result: PipelineResult) -> int:
    """Persist the rendered document to ``path``."""
    target = os.path.abspath(os.path.expanduser(path))
    try:
        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(result.output)
    except OSError as e:
        msg = i18n.t("cli.errors.write_fail", path=target, error=e)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(i18n.t("cli.status.saved", path=target, count=result.files_count))
    return EXIT_OK

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
