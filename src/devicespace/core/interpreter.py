from __future__ import annotations

"""
Command Interpreter.

Replays parsed instructions against a cursor into the device tree. Each
instruction is applied completely (tree populated or cursor moved) before
the next one is processed. The cursor always rests on a directory.
"""

import logging
from typing import Iterable, Optional

from devicespace.core.parsing.command_parser import parse_entry_line
from devicespace.domain.commands import (
    EnterChild,
    ExitToParent,
    GoToRoot,
    ListEntries,
    ParsedInstruction,
)
from devicespace.domain.errors import EntryTypeError
from devicespace.domain.tree_models import EntryKind, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def apply(cursor: TreeNode, instruction: ParsedInstruction) -> TreeNode:
    """
    Apply one instruction at the cursor and return the new cursor.

    Args:
        cursor: Current directory.
        instruction: Instruction to execute.

    Returns:
        TreeNode: The directory the cursor rests on afterwards.

    Raises:
        EntryNotFoundError: `cd <name>` targets a missing child.
        EntryTypeError: `cd <name>` targets a file.
        CommandSyntaxError: A listing line is malformed.
    """
    if isinstance(instruction, EnterChild):
        child = cursor.get_child(instruction.name)
        if not child.is_directory:
            raise EntryTypeError(f"cd {instruction.name}")
        return child

    if isinstance(instruction, ExitToParent):
        parent = cursor.get_parent()
        return parent if parent is not None else cursor

    if isinstance(instruction, GoToRoot):
        return cursor.get_root()

    if isinstance(instruction, ListEntries):
        for line in instruction.entries:
            populate_from_entry(cursor, line)
        return cursor

    raise TypeError(f"Unsupported instruction: {instruction!r}")


def populate_from_entry(directory: TreeNode, line: str) -> None:
    """Parse one listing line and add the described entry under directory."""
    kind, name, size = parse_entry_line(line)
    if kind is EntryKind.DIRECTORY:
        directory.add_subdirectory(name)
    else:
        directory.add_file(name, size or 0)


def replay(
        instructions: Iterable[ParsedInstruction],
        root: Optional[TreeNode] = None,
) -> TreeNode:
    """
    Build a tree by replaying every instruction in order.

    The returned root is held here for the whole replay so weak parent
    references stay resolvable.

    Args:
        instructions: Ordered instruction stream.
        root: Existing root to extend; a fresh one is created if omitted.

    Returns:
        TreeNode: The root of the populated tree.
    """
    if root is None:
        root = TreeNode.new_root()

    cursor = root
    count = 0
    for instruction in instructions:
        cursor = apply(cursor, instruction)
        count += 1

    logger.debug(f"Replayed {count} instructions.")
    return root
