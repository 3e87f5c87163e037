from __future__ import annotations

"""
Solver Result Data Models.

The result object passed from the solver engine to the CLI, plus the
factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of solving one part against one transcript.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        part: Puzzle part (1 or 2).
        answer: Integer answer, or None on failure or when no directory qualifies.
        input_path: Transcript file that was solved.
        tree_lines: Rendered tree, when requested.
        summary: Statistics (root size, directory count, free space, ...).
    """
    ok: bool
    error: str
    part: int
    answer: Optional[int]
    input_path: str
    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        part: int,
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SolveResult:
    """Create a failed result instance."""
    return SolveResult(
        ok=False,
        error=error,
        part=part,
        answer=None,
        input_path=input_path,
        summary=summary_extra or {},
    )


def create_success_result(
        part: int,
        answer: Optional[int],
        input_path: str,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SolveResult:
    """Create a successful result instance."""
    return SolveResult(
        ok=True,
        error="",
        part=part,
        answer=answer,
        input_path=input_path,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
