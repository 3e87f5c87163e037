from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, optional JSON file, command-line overrides), solver execution,
and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from devicespace.core.pipeline.engine import SUPPORTED_PARTS, run_solver
from devicespace.core.pipeline.validator import validate_config
from devicespace.domain.config import load_config
from devicespace.domain.result_models import SolveResult
from devicespace.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from devicespace.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on solver failure, 2 when the input file is missing.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    log_file = get_default_log_path() if args.log_file == "" else args.log_file
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    base_conf = load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    input_path = clean_conf["input_path"]
    if not os.path.exists(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    parts = (args.part,) if args.part else SUPPORTED_PARTS
    results = run_solver(clean_conf, parts=parts)

    if args.json_output:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results)

    return 0 if all(r.ok for r in results) else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(results: List[SolveResult]) -> None:
    """Print one line per part, preceded by the tree when it was rendered."""
    if results and results[0].tree_lines:
        print("\n".join(results[0].tree_lines))

    for result in results:
        if not result.ok:
            print(f"ERROR (part {result.part}): {result.error}", file=sys.stderr)
            continue
        if result.answer is None:
            print(f"Result for part {result.part}: no qualifying directory")
            continue
        print(f"Result for part {result.part} = {result.answer}")


if __name__ == "__main__":
    sys.exit(main())
