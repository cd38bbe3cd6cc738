# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTreeStore package - Thread-safe binary tree container.

This package provides the BinaryTreeStore class, a single binary tree kept
in an identifier-indexed arena with O(1) node and parent lookup.

The package is organized into:
- core: Main BinaryTreeStore class with creation, access, mutation and delete
- traversal: Traversal orders and the walks behind them

Example:
    >>> from genro_bintree import BinaryTreeStore
    >>> store = BinaryTreeStore()
    >>> root = store.create_root(10)
    >>> store.create_child(root.id, 'left', 5).value
    5
"""

from .core import BinaryTreeStore
from .traversal import TraversalOrder

__all__ = ["BinaryTreeStore", "TraversalOrder"]
