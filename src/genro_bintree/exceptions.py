# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTreeStore exceptions."""

from __future__ import annotations

from typing import Any, Hashable


class TreeStoreError(Exception):
    """Base exception for BinaryTreeStore errors."""

    pass


class AlreadyExistsError(TreeStoreError):
    """Raised when a root is created while the store already has one."""

    def __init__(self, root_id: Hashable) -> None:
        super().__init__("Root already exists")
        self.root_id = root_id


class NodeNotFoundError(TreeStoreError, KeyError):
    """Raised when an operation references an unknown node identifier."""

    def __init__(self, node_id: Hashable, what: str = "Node") -> None:
        super().__init__(f"{what} not found: {node_id}")
        self.node_id = node_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class SlotOccupiedError(TreeStoreError):
    """Raised when a child is attached to a side that already holds one."""

    def __init__(self, parent_id: Hashable, side: Any) -> None:
        super().__init__(f"Parent already has a {side} child")
        self.parent_id = parent_id
        self.side = side


class InvalidArgumentError(TreeStoreError, ValueError):
    """Raised for an unrecognized traversal order or child side token."""

    pass
