from __future__ import annotations

"""
Command Transcript Parser.

Converts the raw terminal transcript into structured instructions. The
transcript is split on the '$' prompt marker into command blocks; each
block holds one command and, for `ls`, the listing lines that follow it.
"""

import logging
import re
from typing import List, Optional, Tuple

from devicespace.domain.commands import (
    EnterChild,
    ExitToParent,
    GoToRoot,
    ListEntries,
    ParsedInstruction,
)
from devicespace.domain.errors import CommandSyntaxError
from devicespace.domain.tree_models import EntryKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GRAMMARS
# -----------------------------------------------------------------------------

PROMPT_MARKER = "$"

# Checked in this order; the first match wins
_RX_CD_ROOT = re.compile(r"^cd /")
_RX_CD_PARENT = re.compile(r"^cd \.\.")
_RX_CD_INTO = re.compile(r"^cd\s(\w+)")
_RX_LS = re.compile(r"^ls")

_RX_ENTRY_DIR = re.compile(r"^dir\s([\w.]+)$")
_RX_ENTRY_FILE = re.compile(r"^(\d+)\s([\w.]+)$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_commands(transcript: str) -> List[str]:
    """
    Split a full transcript into command blocks along the prompt marker.

    Args:
        transcript: Raw input text, newlines kept.

    Returns:
        List[str]: Non-empty command blocks in input order.
    """
    return [block for block in transcript.strip().split(PROMPT_MARKER) if block]


def parse_command(text: str) -> ParsedInstruction:
    """
    Convert one command block into a ParsedInstruction.

    Recognized forms:
        cd /
        cd ..
        cd <name>
        ls            (optionally followed by newline-separated entries)

    Args:
        text: A single command block.

    Returns:
        ParsedInstruction: The matching instruction.

    Raises:
        CommandSyntaxError: If the block matches none of the grammars.
    """
    line = text.strip()

    if _RX_CD_ROOT.match(line):
        return GoToRoot()

    if _RX_CD_PARENT.match(line):
        return ExitToParent()

    if _RX_CD_INTO.match(line):
        return EnterChild(name=line[3:].strip())

    if _RX_LS.match(line):
        entries = [entry.strip() for entry in line[2:].split("\n")]
        return ListEntries(entries=tuple(entry for entry in entries if entry))

    raise CommandSyntaxError("could not match command to any known syntax", line)


def parse_commands(transcript: str) -> List[ParsedInstruction]:
    """
    Parse a full transcript into an ordered instruction stream.

    Raises:
        CommandSyntaxError: On the first unrecognized command block.
    """
    instructions = [parse_command(block) for block in split_commands(transcript)]
    logger.debug(f"Parsed {len(instructions)} instructions from transcript.")
    return instructions


def parse_entry_line(line: str) -> Tuple[EntryKind, str, Optional[int]]:
    """
    Parse one `ls` output line.

    Formats:
        dir <name>       -> (EntryKind.DIRECTORY, name, None)
        <size> <name>    -> (EntryKind.FILE, name, size)

    Raises:
        CommandSyntaxError: If the line matches neither format.
    """
    line = line.strip()

    match = _RX_ENTRY_DIR.match(line)
    if match:
        return EntryKind.DIRECTORY, match.group(1), None

    match = _RX_ENTRY_FILE.match(line)
    if match:
        return EntryKind.FILE, match.group(2), int(match.group(1))

    raise CommandSyntaxError("could not match directory entry to any known syntax", line)
