from __future__ import annotations

"""
Solver Engine.

Runs the whole flow for one transcript: load the input file, parse it,
replay it into a device tree, then answer the requested parts.

Part 1: sum of every directory size below the configured threshold.
Part 2: size of the smallest directory whose deletion frees enough space
        for the update.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from devicespace.core.analysis.tree_renderer import render_tree
from devicespace.core.interpreter import replay
from devicespace.core.parsing.command_parser import parse_commands
from devicespace.core.queries import (
    required_deletion_size,
    smallest_size_at_least,
    sum_sizes_under,
)
from devicespace.domain.errors import DeviceSpaceError
from devicespace.domain.result_models import (
    SolveResult,
    create_error_result,
    create_success_result,
)
from devicespace.domain.tree_models import TreeNode
from devicespace.infra.fs import read_input_text

logger = logging.getLogger(__name__)

SUPPORTED_PARTS = (1, 2)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(transcript: str) -> TreeNode:
    """
    Parse and replay a transcript into a device tree.

    Raises:
        DeviceSpaceError: On any syntax or navigation failure.
    """
    return replay(parse_commands(transcript))


def answer_part(root: TreeNode, part: int, config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Compute the answer of one part against an already built tree.

    Returns:
        Dict[str, Any]: "answer" plus part-specific statistics.
    """
    if part == 1:
        threshold = config["size_threshold"]
        return {
            "answer": sum_sizes_under(root, threshold),
            "size_threshold": threshold,
        }

    if part == 2:
        used = root.total_size()
        to_free = required_deletion_size(used, config["total_space"], config["space_required"])
        if to_free <= 0:
            logger.info("Enough free space already available; every directory qualifies.")
        return {
            "answer": smallest_size_at_least(root, to_free),
            "free_space": config["total_space"] - used,
            "deletion_target": to_free,
        }

    raise ValueError(f"Unsupported part: {part}. Expected one of {SUPPORTED_PARTS}.")


def run_solver(
        config: Dict[str, Any],
        parts: Sequence[int] = SUPPORTED_PARTS,
        transcript: Optional[str] = None,
) -> List[SolveResult]:
    """
    Execute the solver for the requested parts.

    The tree is built once and shared by every part. A failure while
    loading or replaying produces one error result per requested part.

    Args:
        config: Validated configuration (see validate_config).
        parts: Parts to answer, in order.
        transcript: Input text; read from config["input_path"] when omitted.

    Returns:
        List[SolveResult]: One result per requested part.
    """
    input_path = config.get("input_path", "")

    try:
        if transcript is None:
            logger.info(f"Reading transcript from {input_path}")
            transcript = read_input_text(input_path)
        root = build_tree(transcript)

        directory_sizes = root.all_subtree_sizes()
        base_summary = {
            "root_size": directory_sizes[-1],
            "directory_count": len(directory_sizes),
        }
        tree_lines = render_tree(root) if config.get("print_tree") else []
    except (OSError, DeviceSpaceError) as e:
        logger.error(f"Replay aborted: {e}")
        return [create_error_result(str(e), part, input_path) for part in parts]

    results: List[SolveResult] = []
    for part in parts:
        try:
            stats = answer_part(root, part, config)
        except ValueError as e:
            logger.error(str(e))
            results.append(create_error_result(str(e), part, input_path, base_summary))
            continue

        answer = stats.pop("answer")
        if answer is None:
            logger.warning(f"Part {part}: no directory qualifies.")
        else:
            logger.debug(f"Part {part} answer: {answer}")

        results.append(create_success_result(
            part=part,
            answer=answer,
            input_path=input_path,
            tree_lines=tree_lines,
            summary_extra={**base_summary, **stats},
        ))

    return results
