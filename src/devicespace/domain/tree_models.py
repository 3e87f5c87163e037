from __future__ import annotations

"""
Device Tree Structure Data Models.

Provides the node type used to rebuild a drive's directory layout from a
replayed command transcript. A node is a tagged variant (directory or file)
that owns its children and observes its parent through a weak reference,
so the tree never forms a reference cycle. Keep the root referenced for as
long as upward navigation is needed.
"""

import weakref
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from devicespace.domain.errors import EntryNotFoundError, EntryTypeError

# -----------------------------------------------------------------------------
# NODE KIND
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    DIRECTORY = "dir"
    FILE = "file"


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class TreeNode:
    """
    One entry of the reconstructed drive.

    Attributes:
        kind: EntryKind tag selecting the directory or file variant.
        children: Child nodes by name (directories only, empty for files).
        size: Literal size in units (files only, 0 for directories).
    """

    __slots__ = ("kind", "children", "size", "_parent", "__weakref__")

    def __init__(
            self,
            kind: EntryKind,
            parent: Optional[TreeNode] = None,
            size: int = 0,
    ) -> None:
        self.kind = kind
        self.children: Dict[str, TreeNode] = {}
        self.size = size
        self._parent: Optional[weakref.ref] = weakref.ref(parent) if parent is not None else None

    @classmethod
    def new_root(cls) -> TreeNode:
        """Create an empty, parentless root directory."""
        return cls(EntryKind.DIRECTORY)

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def __repr__(self) -> str:
        if self.is_directory:
            return f"TreeNode(dir, children={len(self.children)})"
        return f"TreeNode(file, size={self.size})"

    # -------------------------------------------------------------------------
    # POPULATION
    # -------------------------------------------------------------------------

    def add_file(self, name: str, size: int) -> None:
        """
        Insert a file child unless an entry with that name already exists.

        Args:
            name: Entry name, unique within this directory.
            size: Non-negative file size.

        Raises:
            EntryTypeError: If this node is a file.
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError(f"File size must be non-negative, got {size} for '{name}'.")
        self._insert_child("add_file", name, TreeNode(EntryKind.FILE, parent=self, size=size))

    def add_subdirectory(self, name: str) -> None:
        """
        Insert an empty directory child unless an entry with that name already exists.

        Raises:
            EntryTypeError: If this node is a file.
        """
        self._insert_child("add_subdirectory", name, TreeNode(EntryKind.DIRECTORY, parent=self))

    def _insert_child(self, operation: str, name: str, child: TreeNode) -> None:
        if not self.is_directory:
            raise EntryTypeError(operation)
        # First write wins
        self.children.setdefault(name, child)

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    def get_child(self, name: str) -> TreeNode:
        """
        Look up a direct child by name.

        Raises:
            EntryTypeError: If this node is a file.
            EntryNotFoundError: If no child carries that name.
        """
        if not self.is_directory:
            raise EntryTypeError("get_child")
        try:
            return self.children[name]
        except KeyError:
            raise EntryNotFoundError(name) from None

    def get_parent(self) -> Optional[TreeNode]:
        """Return the parent node, or None at the root or once the parent is gone."""
        if self._parent is None:
            return None
        return self._parent()

    def get_root(self) -> TreeNode:
        node = self
        parent = node.get_parent()
        while parent is not None:
            node = parent
            parent = node.get_parent()
        return node

    # -------------------------------------------------------------------------
    # SIZE AGGREGATION
    # -------------------------------------------------------------------------

    def total_size(self) -> int:
        """Size of a file, or the recursive sum of every file beneath a directory."""
        _, size = self._collect_directory_sizes()
        return size

    def all_subtree_sizes(self) -> List[int]:
        """
        Sizes of every directory strictly beneath this node, followed by this
        node's own size when it is a directory.

        Files never appear as elements; their sizes are folded into every
        ancestor directory.
        """
        sizes, _ = self._collect_directory_sizes()
        return sizes

    def iter_directory_sizes(self) -> Iterator[Tuple[TreeNode, int]]:
        """
        Yield (directory, size) for every directory at or below this node in
        post-order: children before their parent, this node last.

        Walks with an explicit stack, so depth is bounded only by memory.
        """
        if not self.is_directory:
            return

        # Frames of [directory, child iterator, size accumulated so far]
        stack: List[list] = [[self, iter(self.children.values()), 0]]
        while stack:
            frame = stack[-1]
            child = next(frame[1], None)

            if child is None:
                stack.pop()
                if stack:
                    stack[-1][2] += frame[2]
                yield frame[0], frame[2]
            elif child.is_directory:
                stack.append([child, iter(child.children.values()), 0])
            else:
                frame[2] += child.size

    def _collect_directory_sizes(self) -> Tuple[List[int], int]:
        """Post-order walk returning (directory sizes, own size)."""
        if not self.is_directory:
            return [], self.size

        sizes = [size for _, size in self.iter_directory_sizes()]
        return sizes, sizes[-1]
