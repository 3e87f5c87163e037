from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a sample transcript, a hand-built sample tree and a
   configuration dictionary.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from devicespace.domain.tree_models import TreeNode  # noqa: E402

# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------

# Worked example from the puzzle statement.
# Part 1 = 95437, part 2 = 24933642, root size = 48381165.
SAMPLE_TRANSCRIPT = """$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# Single chain of directories d0..d{N-1}, each level also holding one
# 1-unit file, so directory sizes run 0 (deepest) up to N (root).
DEEP_TREE_DEPTH = 1200


def build_deep_transcript(depth: int = DEEP_TREE_DEPTH) -> str:
    blocks = ["$ cd /\n"]
    for i in range(depth):
        blocks.append(f"$ ls\ndir d{i}\n1 f{i}\n$ cd d{i}\n")
    return "".join(blocks)


@pytest.fixture
def sample_transcript() -> str:
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def sample_input_file(tmp_path: Path) -> Path:
    """Write the sample transcript to a temporary input file."""
    path = tmp_path / "day7input.txt"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf-8")
    return path


@pytest.fixture
def sample_tree() -> TreeNode:
    """
    Build a small tree by hand.

    Structure:
    /
      file_1 500
      file_2 250
      /folder_1
        file_1_1 100
        file_1_2 350
        /folder_2
          file_2_1 425
          file_2_2 600
        /folder_3
          file_3_1 5
          file_3_2 5
    """
    root = TreeNode.new_root()
    root.add_file("file_1", 500)
    root.add_file("file_2", 250)
    root.add_subdirectory("folder_1")

    folder_1 = root.get_child("folder_1")
    folder_1.add_file("file_1_1", 100)
    folder_1.add_file("file_1_2", 350)
    folder_1.add_subdirectory("folder_2")
    folder_1.add_subdirectory("folder_3")

    folder_2 = folder_1.get_child("folder_2")
    folder_2.add_file("file_2_1", 425)
    folder_2.add_file("file_2_2", 600)

    folder_3 = folder_1.get_child("folder_3")
    folder_3.add_file("file_3_1", 5)
    folder_3.add_file("file_3_2", 5)

    return root


@pytest.fixture
def mock_config_dict(sample_input_file: Path) -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary."""
    return {
        "input_path": str(sample_input_file),
        "size_threshold": 100000,
        "total_space": 70000000,
        "space_required": 30000000,
        "print_tree": False,
    }


@pytest.fixture
def deep_transcript() -> str:
    return build_deep_transcript()


@pytest.fixture
def deep_tree() -> TreeNode:
    """Same shape as deep_transcript, built directly on the node API."""
    root = TreeNode.new_root()
    node = root
    for i in range(DEEP_TREE_DEPTH):
        node.add_subdirectory(f"d{i}")
        node.add_file(f"f{i}", 1)
        node = node.get_child(f"d{i}")
    return root
