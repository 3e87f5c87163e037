from __future__ import annotations

"""
Aggregate Queries.

Read-only scalar queries over every directory size in a device tree.
Nested directories are counted independently: a directory and its
subdirectory both contribute when both qualify.
"""

from typing import Optional

from devicespace.domain.tree_models import TreeNode


def sum_sizes_under(root: TreeNode, threshold: int) -> int:
    """Sum of every directory size strictly below threshold."""
    return sum(size for size in root.all_subtree_sizes() if size < threshold)


def smallest_size_at_least(root: TreeNode, minimum: int) -> Optional[int]:
    """
    Smallest directory size strictly greater than minimum.

    Returns:
        Optional[int]: The size, or None when no directory qualifies.
    """
    candidates = [size for size in root.all_subtree_sizes() if size > minimum]
    return min(candidates) if candidates else None


def required_deletion_size(used: int, total_space: int, space_required: int) -> int:
    """
    Space that must be freed so that space_required units are available.

    A result of zero or less means enough space is already free.
    """
    free_space = total_space - used
    return space_required - free_space
