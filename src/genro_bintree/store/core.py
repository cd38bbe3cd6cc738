# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTreeStore - A thread-safe in-memory binary tree.

This module provides the BinaryTreeStore class, the container for a single
binary tree whose nodes are placed explicitly on the left or right slot of
their parent. It is not a search tree: no key ordering or rebalancing is
performed.

Key Features:
    - **Arena storage**: Nodes live in a dict keyed by identifier, children
      are linked by identifier, so there are no reference cycles
    - **O(1) lookup**: Node and parent lookups are dict accesses
    - **Subtree delete**: Deleting a node removes its whole subtree
    - **Traversals**: preorder, inorder, postorder and breadth-first
    - **Coarse locking**: One reentrant lock serializes every operation,
      traversals included, so each call sees a consistent tree

Example:
    Basic usage::

        store = BinaryTreeStore()
        root = store.create_root(10)
        left = store.create_child(root.id, 'left', 5)
        store.create_child(root.id, ChildSide.RIGHT, 15)

        [n.value for n in store.traverse('inorder')]  # [5, 10, 15]

        store.delete(root.id)
        store.get_node(left.id)  # None
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, Callable, Hashable, Iterable, Iterator

from ..exceptions import (
    AlreadyExistsError,
    NodeNotFoundError,
    SlotOccupiedError,
    TreeStoreError,
)
from ..node import BinaryTreeNode, ChildSide
from .traversal import TraversalOrder, iter_breadth_first, iter_order, iter_preorder

logger = logging.getLogger(__name__)


class BinaryTreeStore:
    """A single binary tree with an identifier index and a parent index.

    BinaryTreeStore provides:
    - create_root(value) / create_child(parent_id, side, value): Build the tree
    - get_node(id) / get_parent_and_node(id) / root: Lookups
    - update(id, value): Change a value in place
    - delete(id): Remove a node and its whole subtree
    - traverse(order) / get_all_nodes_breadth_first(): Ordered node lists
    - describe(id) / describe_all(nodes): Flattened node representations

    Internally the store keeps:
    - _nodes: identifier -> BinaryTreeNode, every node reachable from the root
    - _parents: identifier -> parent identifier, None for the root

    A missing key in _parents means "unknown node", a None value means
    "root, no parent". Both maps and the root reference only ever change
    together under _lock.

    Nodes returned by the store are the live arena entries. Treat them as
    read-only and go through update() to change a value.

    Example:
        >>> store = BinaryTreeStore()
        >>> root = store.create_root(1)
        >>> store.get_parent_and_node(root.id) == (None, root)
        True
    """

    __slots__ = ('_nodes', '_parents', '_root_id', '_lock', '_id_factory')

    def __init__(self, id_factory: Callable[[], Hashable] | None = None) -> None:
        """Initialize an empty BinaryTreeStore.

        Args:
            id_factory: Optional callable producing a fresh identifier for
                every created node. Defaults to uuid.uuid4. It must never
                return an identifier already in the store.
        """
        self._nodes: dict[Hashable, BinaryTreeNode] = {}
        self._parents: dict[Hashable, Hashable | None] = {}
        self._root_id: Hashable | None = None
        self._lock = threading.RLock()
        self._id_factory = id_factory or uuid.uuid4

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        with self._lock:
            return f"BinaryTreeStore(root={self._root_id!r}, nodes={len(self._nodes)})"

    def __len__(self) -> int:
        """Return the number of nodes in the tree."""
        with self._lock:
            return len(self._nodes)

    def __contains__(self, node_id: Hashable) -> bool:
        """Check if node_id identifies a node in the tree."""
        with self._lock:
            return node_id in self._nodes

    def __iter__(self) -> Iterator[BinaryTreeNode]:
        """Iterate over a preorder snapshot of the tree."""
        return iter(self.traverse(TraversalOrder.PREORDER))

    # ==================== Creation ====================

    def _new_node(self, value: int) -> BinaryTreeNode:
        node_id = self._id_factory()
        if node_id in self._nodes:
            raise TreeStoreError(f"Identifier factory reused identifier: {node_id}")
        return BinaryTreeNode(node_id, value)

    def create_root(self, value: int) -> BinaryTreeNode:
        """Create the root node.

        Args:
            value: Value of the new root.

        Returns:
            The new root BinaryTreeNode.

        Raises:
            AlreadyExistsError: If the store already has a root.
        """
        with self._lock:
            if self._root_id is not None:
                raise AlreadyExistsError(self._root_id)
            node = self._new_node(value)
            self._root_id = node.id
            self._nodes[node.id] = node
            self._parents[node.id] = None
        logger.debug("Created root %s with value %r", node.id, value)
        return node

    def create_child(
        self, parent_id: Hashable, side: ChildSide | str, value: int
    ) -> BinaryTreeNode:
        """Create a node on the given side of an existing parent.

        Args:
            parent_id: Identifier of the parent node.
            side: ChildSide member, or 'left'/'right' in any case.
            value: Value of the new node.

        Returns:
            The new BinaryTreeNode.

        Raises:
            InvalidArgumentError: If side is not left or right.
            NodeNotFoundError: If parent_id is not in the store.
            SlotOccupiedError: If the parent already has a child on that side.
        """
        side = ChildSide.parse(side)
        with self._lock:
            parent = self._nodes.get(parent_id)
            if parent is None:
                raise NodeNotFoundError(parent_id, what="Parent")
            if parent.child_id(side) is not None:
                raise SlotOccupiedError(parent_id, side)
            node = self._new_node(value)
            parent.set_child_id(side, node.id)
            self._nodes[node.id] = node
            self._parents[node.id] = parent_id
        logger.debug("Created %s child %s under %s with value %r", side, node.id, parent_id, value)
        return node

    # ==================== Access ====================

    @property
    def root(self) -> BinaryTreeNode | None:
        """The root node, or None if the tree is empty."""
        with self._lock:
            if self._root_id is None:
                return None
            return self._nodes[self._root_id]

    @property
    def is_empty(self) -> bool:
        """True if the tree has no root."""
        with self._lock:
            return self._root_id is None

    def get_node(self, node_id: Hashable) -> BinaryTreeNode | None:
        """Return the node with the given identifier, or None."""
        with self._lock:
            return self._nodes.get(node_id)

    def get_parent_and_node(
        self, node_id: Hashable
    ) -> tuple[BinaryTreeNode | None, BinaryTreeNode | None]:
        """Return (parent, node) for the given identifier.

        The three cases are:
        - unknown identifier: (None, None)
        - root: (None, node)
        - any other node: (parent, node)

        Args:
            node_id: Identifier of the node.
        """
        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return None, None
            parent_id = self._parents[node_id]
            parent = self._nodes[parent_id] if parent_id is not None else None
            return parent, node

    # ==================== Mutation ====================

    def update(self, node_id: Hashable, value: int) -> bool:
        """Set the value of a node in place.

        Returns:
            True if the node exists and was updated, False otherwise.
        """
        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return False
            node.value = value
        logger.debug("Updated %s to value %r", node_id, value)
        return True

    def delete(self, node_id: Hashable) -> bool:
        """Delete a node together with its whole subtree.

        The node is detached from its parent's slot (or the root is cleared),
        then every node of the subtree is dropped from both indexes.
        Children are removed, never promoted.

        Returns:
            True if the node existed and was deleted, False otherwise.
        """
        with self._lock:
            if node_id not in self._nodes:
                return False
            parent_id = self._parents[node_id]
            if parent_id is None:
                self._root_id = None
            else:
                parent = self._nodes[parent_id]
                if parent.left_id == node_id:
                    parent.left_id = None
                if parent.right_id == node_id:
                    parent.right_id = None
            # materialize first: the walk reads the indexes being emptied
            removed = [n.id for n in iter_preorder(self._nodes, node_id)]
            for rid in removed:
                del self._nodes[rid]
                del self._parents[rid]
        logger.debug("Deleted subtree %s (%d nodes)", node_id, len(removed))
        return True

    def clear(self) -> None:
        """Remove every node, leaving an empty store."""
        with self._lock:
            self._nodes.clear()
            self._parents.clear()
            self._root_id = None
        logger.debug("Cleared store")

    # ==================== Traversal ====================

    def traverse(self, order: TraversalOrder | str) -> list[BinaryTreeNode]:
        """Return all nodes in a depth-first order.

        Args:
            order: TraversalOrder member, or 'preorder', 'inorder' or
                'postorder' in any case.

        Returns:
            List of nodes, empty if the tree has no root.

        Raises:
            InvalidArgumentError: If order is not a valid traversal order.
        """
        with self._lock:
            return list(iter_order(self._nodes, self._root_id, order))

    def get_all_nodes_breadth_first(self) -> list[BinaryTreeNode]:
        """Return all nodes in level order, empty if the tree has no root."""
        with self._lock:
            return list(iter_breadth_first(self._nodes, self._root_id))

    # ==================== Representation ====================

    def describe(self, node_id: Hashable) -> dict[str, Any] | None:
        """Return the flattened representation of a node, or None.

        The result has keys id, value, left_id, right_id and parent_id.
        """
        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return None
            return node.as_dict(self._parents[node_id])

    def describe_all(self, nodes: Iterable[BinaryTreeNode]) -> list[dict[str, Any]]:
        """Return flattened representations for nodes, in the given order.

        Nodes that are no longer in the store are skipped.

        Example:
            >>> store.describe_all(store.traverse('inorder'))
        """
        with self._lock:
            result = []
            for node in nodes:
                info = self.describe(node.id)
                if info is not None:
                    result.append(info)
            return result

    # ==================== Validation ====================

    def check_consistency(self) -> None:
        """Verify that the root, the node index and the parent index agree.

        Raises:
            TreeStoreError: Describing the first inconsistency found.
        """
        with self._lock:
            if self._root_id is None:
                if self._nodes or self._parents:
                    raise TreeStoreError("Empty tree with non-empty indexes")
                return
            if self._root_id not in self._parents or self._parents[self._root_id] is not None:
                raise TreeStoreError(f"Root {self._root_id} is not marked as parentless")
            seen: set[Hashable] = set()
            for node in iter_preorder(self._nodes, self._root_id):
                if node.id in seen:
                    raise TreeStoreError(f"Node {node.id} reachable twice")
                seen.add(node.id)
                for child_id in node.child_ids():
                    if child_id not in self._nodes:
                        raise TreeStoreError(f"Node {node.id} links to unknown child {child_id}")
                    if self._parents.get(child_id) != node.id:
                        raise TreeStoreError(
                            f"Parent index of {child_id} does not point to {node.id}"
                        )
                if node.left_id is not None and node.left_id == node.right_id:
                    raise TreeStoreError(f"Node {node.id} holds the same child twice")
            if seen != set(self._nodes) or seen != set(self._parents):
                raise TreeStoreError("Indexes hold nodes unreachable from the root")
