# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal orders over a BinaryTreeStore arena.

The generators in this module walk an identifier-indexed mapping of
BinaryTreeNode instances starting from a root identifier. They hold no
lock themselves: BinaryTreeStore calls them while holding its own.

All walks use an explicit stack or queue, so a degenerate (list-shaped)
tree of any depth is walked without touching the recursion limit. The
visit order is the classic recursive one:

    - preorder:  node, left, right
    - inorder:   left, node, right
    - postorder: left, right, node
    - breadth-first: level by level, left to right
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Hashable, Iterator, Mapping

from ..exceptions import InvalidArgumentError
from ..node import BinaryTreeNode

Arena = Mapping[Hashable, BinaryTreeNode]


class TraversalOrder(str, Enum):
    """Depth-first traversal orders accepted by BinaryTreeStore.traverse."""

    PREORDER = 'preorder'
    INORDER = 'inorder'
    POSTORDER = 'postorder'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, order: TraversalOrder | str) -> TraversalOrder:
        """Return the TraversalOrder for a member or a case-insensitive token.

        Raises:
            InvalidArgumentError: If order is not preorder, inorder or postorder.
        """
        if isinstance(order, cls):
            return order
        if isinstance(order, str):
            try:
                return cls(order.lower())
            except ValueError:
                pass
        raise InvalidArgumentError("Order must be preorder, inorder or postorder")


def iter_preorder(nodes: Arena, root_id: Hashable | None) -> Iterator[BinaryTreeNode]:
    """Yield nodes in preorder."""
    stack = [root_id] if root_id is not None else []
    while stack:
        node = nodes[stack.pop()]
        yield node
        # right first, so left is popped first
        if node.right_id is not None:
            stack.append(node.right_id)
        if node.left_id is not None:
            stack.append(node.left_id)


def iter_inorder(nodes: Arena, root_id: Hashable | None) -> Iterator[BinaryTreeNode]:
    """Yield nodes in inorder."""
    stack: list[BinaryTreeNode] = []
    current = root_id
    while stack or current is not None:
        while current is not None:
            node = nodes[current]
            stack.append(node)
            current = node.left_id
        node = stack.pop()
        yield node
        current = node.right_id


def iter_postorder(nodes: Arena, root_id: Hashable | None) -> Iterator[BinaryTreeNode]:
    """Yield nodes in postorder."""
    if root_id is None:
        return
    stack: list[tuple[BinaryTreeNode, bool]] = [(nodes[root_id], False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right_id is not None:
            stack.append((nodes[node.right_id], False))
        if node.left_id is not None:
            stack.append((nodes[node.left_id], False))


def iter_breadth_first(nodes: Arena, root_id: Hashable | None) -> Iterator[BinaryTreeNode]:
    """Yield nodes level by level, each level left to right."""
    queue = deque([root_id] if root_id is not None else [])
    while queue:
        node = nodes[queue.popleft()]
        yield node
        queue.extend(node.child_ids())


_WALKERS: dict[TraversalOrder, Callable[[Arena, Hashable | None], Iterator[BinaryTreeNode]]] = {
    TraversalOrder.PREORDER: iter_preorder,
    TraversalOrder.INORDER: iter_inorder,
    TraversalOrder.POSTORDER: iter_postorder,
}


def iter_order(
    nodes: Arena, root_id: Hashable | None, order: TraversalOrder | str
) -> Iterator[BinaryTreeNode]:
    """Return an iterator over nodes in the given depth-first order.

    The order is validated before anything is walked, so an invalid token
    fails even on an empty tree.

    Raises:
        InvalidArgumentError: If order is not a valid traversal order.
    """
    walker = _WALKERS[TraversalOrder.parse(order)]
    return walker(nodes, root_id)
