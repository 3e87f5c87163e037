from __future__ import annotations

"""
Tree Renderer.

Converts a reconstructed device tree into a visual ASCII listing with
per-entry sizes.
"""

from typing import Dict, List, Optional

from devicespace.domain.tree_models import TreeNode

ROOT_LABEL = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: TreeNode) -> List[str]:
    """
    Render the whole tree, root first.

    Returns:
        List[str]: Visual lines of the tree.
    """
    sizes = _directory_sizes(root)
    lines: List[str] = [f"{ROOT_LABEL} (dir, size={sizes[id(root)]})"]
    render_tree_structure(root, lines, sizes=sizes)
    return lines


def render_tree_structure(
        node: TreeNode,
        lines: List[str],
        prefix: str = "",
        sizes: Optional[Dict[int, int]] = None,
) -> None:
    """
    Append one line per descendant of node to lines, in pre-order.

    Uses standard ASCII connectors (├──, └──). Entries are sorted by name.
    Walks with an explicit stack, so arbitrarily deep trees render.

    Args:
        node: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for node's children.
        sizes: Directory sizes keyed by id(node); computed when omitted.
    """
    if sizes is None:
        sizes = _directory_sizes(node)

    # Frames of (name, entry, prefix, is_last), last sibling pushed first
    stack = _child_frames(node, prefix)
    while stack:
        name, child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{_describe(name, child, sizes)}")

        if child.is_directory:
            stack.extend(_child_frames(child, child_prefix + ("    " if is_last else "│   ")))


def _child_frames(node: TreeNode, prefix: str) -> list:
    entries = sorted(node.children.keys())
    total = len(entries)
    frames = [
        (name, node.children[name], prefix, i == total - 1)
        for i, name in enumerate(entries)
    ]
    frames.reverse()
    return frames


def _directory_sizes(node: TreeNode) -> Dict[int, int]:
    return {id(directory): size for directory, size in node.iter_directory_sizes()}


def _describe(name: str, node: TreeNode, sizes: Dict[int, int]) -> str:
    if node.is_directory:
        return f"{name}/ (dir, size={sizes[id(node)]})"
    return f"{name} (file, size={node.size})"
