# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-BinTree - A thread-safe in-memory binary tree store.

A lightweight, zero-dependency library keeping a single binary tree with
explicit left/right placement, subtree deletion and the classic traversals.
"""

__version__ = "0.1.0"

from .exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    NodeNotFoundError,
    SlotOccupiedError,
    TreeStoreError,
)
from .node import BinaryTreeNode, ChildSide
from .store import BinaryTreeStore, TraversalOrder

__all__ = [
    # Core classes
    "BinaryTreeStore",
    "BinaryTreeNode",
    # Enums
    "ChildSide",
    "TraversalOrder",
    # Exceptions
    "TreeStoreError",
    "AlreadyExistsError",
    "NodeNotFoundError",
    "SlotOccupiedError",
    "InvalidArgumentError",
]
