from __future__ import annotations

"""
Parsed Instruction Models.

The closed set of navigation and listing instructions produced by the
command parser and consumed by the interpreter.
"""

from dataclasses import dataclass
from typing import Tuple, Union

# -----------------------------------------------------------------------------
# INSTRUCTION VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EnterChild:
    """`cd <name>`: move the cursor into the named subdirectory."""
    name: str


@dataclass(frozen=True)
class ExitToParent:
    """`cd ..`: move the cursor to the parent directory."""


@dataclass(frozen=True)
class GoToRoot:
    """`cd /`: move the cursor back to the root directory."""


@dataclass(frozen=True)
class ListEntries:
    """
    `ls` and its output.

    Attributes:
        entries: Raw entry lines (`dir <name>` or `<size> <name>`).
    """
    entries: Tuple[str, ...] = ()


ParsedInstruction = Union[EnterChild, ExitToParent, GoToRoot, ListEntries]
