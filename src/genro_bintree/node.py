# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTreeStore node classes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Hashable

from .exceptions import InvalidArgumentError


class ChildSide(str, Enum):
    """The slot of a parent a child is attached to."""

    LEFT = 'left'
    RIGHT = 'right'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, side: ChildSide | str) -> ChildSide:
        """Return the ChildSide for a member or a case-insensitive token.

        Raises:
            InvalidArgumentError: If side is neither 'left' nor 'right'.
        """
        if isinstance(side, cls):
            return side
        if isinstance(side, str):
            try:
                return cls(side.lower())
            except ValueError:
                pass
        raise InvalidArgumentError("Side must be left or right")


class BinaryTreeNode:
    """A node in a BinaryTreeStore.

    Nodes live in the store's arena (an identifier-indexed table), so
    children are held by identifier rather than by reference and the
    parent relation is kept by the store, not by the node.

    Each node has:
    - id: Opaque identifier, generated at creation and never reused
    - value: Integer payload, mutable through BinaryTreeStore.update
    - left_id: Identifier of the left child, or None
    - right_id: Identifier of the right child, or None

    Example:
        >>> node = BinaryTreeNode('a', 10)
        >>> node.value
        10
        >>> node.is_leaf
        True
    """

    __slots__ = ('id', 'value', 'left_id', 'right_id')

    def __init__(
        self,
        node_id: Hashable,
        value: int,
        left_id: Hashable | None = None,
        right_id: Hashable | None = None,
    ) -> None:
        self.id = node_id
        self.value = value
        self.left_id = left_id
        self.right_id = right_id

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.id!r}, value={self.value!r})"

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.left_id is None and self.right_id is None

    def child_id(self, side: ChildSide) -> Hashable | None:
        """Return the identifier held in the given slot."""
        return self.left_id if side is ChildSide.LEFT else self.right_id

    def set_child_id(self, side: ChildSide, child_id: Hashable | None) -> None:
        """Store child_id in the given slot."""
        if side is ChildSide.LEFT:
            self.left_id = child_id
        else:
            self.right_id = child_id

    def child_ids(self) -> list[Hashable]:
        """Return the present child identifiers, left before right."""
        return [cid for cid in (self.left_id, self.right_id) if cid is not None]

    def as_dict(self, parent_id: Hashable | None = None) -> dict[str, Any]:
        """Return the flattened representation of this node.

        Children and parent appear as identifiers only, so the result never
        embeds a subtree.

        Args:
            parent_id: Identifier of the parent node, None for the root.
        """
        return {
            'id': self.id,
            'value': self.value,
            'left_id': self.left_id,
            'right_id': self.right_id,
            'parent_id': parent_id,
        }
