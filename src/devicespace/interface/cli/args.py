from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the devicespace CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="devicespace",
        description=(
            "Rebuild a drive's directory tree from a terminal transcript and "
            "report directory size statistics."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to replay.",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    p.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=None,
        help="Solve only this part (default: both).",
    )

    # --- Device constants ---
    p.add_argument(
        "--threshold",
        dest="size_threshold",
        type=int,
        default=None,
        help="Part 1: count directories smaller than this size.",
    )
    p.add_argument(
        "--total-space",
        dest="total_space",
        type=int,
        default=None,
        help="Part 2: total device capacity.",
    )
    p.add_argument(
        "--space-required",
        dest="space_required",
        type=int,
        default=None,
        help="Part 2: free space needed for the update.",
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the reconstructed tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit results as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (default location when no path is given).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None so the merge keeps the base value.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "size_threshold": args.size_threshold,
        "total_space": args.total_space,
        "space_required": args.space_required,
    }

    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
