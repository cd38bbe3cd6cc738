# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for traversal orders."""

import itertools

import pytest

from genro_bintree import BinaryTreeStore, ChildSide, InvalidArgumentError, TraversalOrder
from genro_bintree.store.traversal import iter_breadth_first, iter_order, iter_postorder


def values(nodes):
    return [n.value for n in nodes]


@pytest.fixture
def store():
    """Store holding the tree

            4
          /   \\
         2     6
        / \\     \\
       1   3     7
    """
    store = BinaryTreeStore(id_factory=itertools.count(1).__next__)
    root = store.create_root(4)
    two = store.create_child(root.id, ChildSide.LEFT, 2)
    six = store.create_child(root.id, ChildSide.RIGHT, 6)
    store.create_child(two.id, ChildSide.LEFT, 1)
    store.create_child(two.id, ChildSide.RIGHT, 3)
    store.create_child(six.id, ChildSide.RIGHT, 7)
    return store


class TestTraversalOrder:
    """Tests for order token parsing."""

    @pytest.mark.parametrize('token', ['inorder', 'INORDER', 'InOrder'])
    def test_parse_any_case(self, token):
        """Test order tokens are case-insensitive."""
        assert TraversalOrder.parse(token) is TraversalOrder.INORDER

    def test_parse_member(self):
        """Test members parse to themselves."""
        assert TraversalOrder.parse(TraversalOrder.POSTORDER) is TraversalOrder.POSTORDER

    @pytest.mark.parametrize('token', ['levelorder', 'pre-order', '', None])
    def test_parse_invalid_raises(self, token):
        """Test unknown tokens raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="preorder, inorder or postorder"):
            TraversalOrder.parse(token)

    def test_invalid_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            TraversalOrder.parse('sideways')


class TestStoreTraverse:
    """Tests for BinaryTreeStore.traverse."""

    def test_three_node_laws(self):
        """Test the orders on a root with two leaves."""
        store = BinaryTreeStore()
        r = store.create_root(0)
        l = store.create_child(r.id, ChildSide.LEFT, 1)
        q = store.create_child(r.id, ChildSide.RIGHT, 2)
        assert store.traverse('preorder') == [r, l, q]
        assert store.traverse('inorder') == [l, r, q]
        assert store.traverse('postorder') == [l, q, r]

    def test_preorder(self, store):
        """Test preorder on a deeper tree."""
        assert values(store.traverse('preorder')) == [4, 2, 1, 3, 6, 7]

    def test_inorder(self, store):
        """Test inorder on a deeper tree."""
        assert values(store.traverse('inorder')) == [1, 2, 3, 4, 6, 7]

    def test_postorder(self, store):
        """Test postorder on a deeper tree."""
        assert values(store.traverse('postorder')) == [1, 3, 2, 7, 6, 4]

    def test_enum_argument(self, store):
        """Test traverse accepts TraversalOrder members."""
        assert store.traverse(TraversalOrder.INORDER) == store.traverse('inorder')

    def test_mixed_case_token(self, store):
        """Test traverse accepts tokens in any case."""
        assert store.traverse('PostOrder') == store.traverse('postorder')

    def test_invalid_order_raises(self, store):
        """Test traverse rejects unknown tokens."""
        with pytest.raises(InvalidArgumentError):
            store.traverse('random')

    def test_invalid_order_on_empty_store_raises(self):
        """Test the token is validated even without a root."""
        with pytest.raises(InvalidArgumentError):
            BinaryTreeStore().traverse('random')

    @pytest.mark.parametrize('order', ['preorder', 'inorder', 'postorder'])
    def test_empty_store(self, order):
        """Test every order of an empty store is empty."""
        assert BinaryTreeStore().traverse(order) == []

    def test_single_node(self):
        """Test every order of a lone root is the root."""
        store = BinaryTreeStore()
        root = store.create_root(1)
        for order in TraversalOrder:
            assert store.traverse(order) == [root]


class TestBreadthFirst:
    """Tests for level-order enumeration."""

    def test_level_order(self):
        """Test root, its children, then grandchildren."""
        store = BinaryTreeStore()
        r = store.create_root(0)
        l = store.create_child(r.id, ChildSide.LEFT, 1)
        q = store.create_child(r.id, ChildSide.RIGHT, 2)
        g = store.create_child(l.id, ChildSide.LEFT, 3)
        assert store.get_all_nodes_breadth_first() == [r, l, q, g]

    def test_deeper_tree(self, store):
        """Test level order on a deeper tree."""
        assert values(store.get_all_nodes_breadth_first()) == [4, 2, 6, 1, 3, 7]

    def test_empty_store(self):
        """Test an empty store enumerates nothing."""
        assert BinaryTreeStore().get_all_nodes_breadth_first() == []

    def test_right_only_child(self):
        """Test a missing left child does not shift the order."""
        store = BinaryTreeStore()
        r = store.create_root(0)
        q = store.create_child(r.id, ChildSide.RIGHT, 1)
        g = store.create_child(q.id, ChildSide.LEFT, 2)
        assert store.get_all_nodes_breadth_first() == [r, q, g]


class TestDeepTrees:
    """Tests for degenerate trees deeper than the recursion limit."""

    DEPTH = 5000

    @pytest.fixture
    def chain(self):
        store = BinaryTreeStore(id_factory=itertools.count().__next__)
        node = store.create_root(0)
        for i in range(1, self.DEPTH):
            node = store.create_child(node.id, ChildSide.LEFT, i)
        return store

    def test_traversals(self, chain):
        """Test all walks complete on a left-leaning chain."""
        assert values(chain.traverse('preorder')) == list(range(self.DEPTH))
        assert values(chain.traverse('inorder')) == list(reversed(range(self.DEPTH)))
        assert values(chain.traverse('postorder')) == list(reversed(range(self.DEPTH)))
        assert len(chain.get_all_nodes_breadth_first()) == self.DEPTH

    def test_delete(self, chain):
        """Test deleting the head of a long chain removes it all."""
        assert chain.delete(chain.root.id) is True
        assert len(chain) == 0


class TestWalkers:
    """Tests for the module-level walks over a plain mapping."""

    def test_walk_plain_mapping(self, store):
        """Test the walks only need an id to node mapping."""
        nodes = {n.id: n for n in store}
        root_id = store.root.id
        assert values(iter_postorder(nodes, root_id)) == [1, 3, 2, 7, 6, 4]
        assert values(iter_breadth_first(nodes, root_id)) == [4, 2, 6, 1, 3, 7]

    def test_no_root(self):
        """Test walks from no root yield nothing."""
        assert list(iter_breadth_first({}, None)) == []
        assert list(iter_order({}, None, 'inorder')) == []

    def test_iter_order_validates_eagerly(self):
        """Test an invalid order fails before iteration starts."""
        with pytest.raises(InvalidArgumentError):
            iter_order({}, None, 'bogus')
