import logging
from collections.abc import Iterable, Iterator
from typing import Self

from search_tree.src.base.key import Comparable
from search_tree.src.node import Node, insert_node
from search_tree.src.traversal import TraversalOrder, iter_nodes


class BinarySearchTree[K: Comparable]:
    """
    Unbalanced binary search tree.

    Keys strictly less than a node live in its left subtree, everything else
    (duplicates included) in its right subtree. Nothing is ever rebalanced, so
    inserting a sorted run gives a chain as tall as the number of keys. Every
    walk over the nodes keeps its own stack, so a chain like that is fine to
    traverse and tear down no matter how deep it gets.

    Not thread safe, callers have to serialize access themselves.
    """

    def __init__(self) -> None:
        self._root: Node[K] | None = None
        self._size = 0

    @classmethod
    def from_keys(cls, keys: Iterable[K]) -> Self:
        tree = cls()
        for key in keys:
            tree.insert(key)
        logging.debug(f"built tree from {len(tree)} keys, {tree.height = }")
        return tree

    @property
    def root(self) -> Node[K] | None:
        return self._root

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, key: K) -> None:
        self._root = insert_node(self._root, key)
        self._size += 1

    def iter_keys(self, order: TraversalOrder) -> Iterator[K]:
        """Lazily walk the keys. Don't insert or clear until the walk is done."""
        # iter_nodes is called here so a bad order raises before the first next()
        return self._walk_keys(iter_nodes(self._root, order))

    def _walk_keys(self, nodes: Iterator[Node[K]]) -> Iterator[K]:
        # the generator frame holds self, so a temporary tree can't be torn
        # down underneath the walk
        for node in nodes:
            yield node.key

    def traverse(self, order: TraversalOrder) -> list[K]:
        return list(self.iter_keys(order))

    def __iter__(self) -> Iterator[K]:
        return self.iter_keys(TraversalOrder.INORDER)

    @property
    def height(self) -> int:
        tallest = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            if node.is_leaf():
                tallest = max(tallest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return tallest

    def clear(self) -> None:
        released = self._release_nodes()
        logging.debug(f"cleared tree, released {released} nodes")

    def _release_nodes(self) -> int:
        # children get unlinked before their parent is dropped, so every node
        # is let go of exactly once and nothing hangs on to a subtree
        stack = [self._root] if self._root is not None else []
        self._root = None
        self._size = 0

        released = 0
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = None
            node.right = None
            released += 1
        return released

    def __del__(self) -> None:
        # no logging here, the logging module may already be gone at shutdown
        self._release_nodes()

    def __repr__(self) -> str:
        root_key = self._root.key if self._root is not None else None
        return f"BinarySearchTree<size={self._size}, root_key={root_key!r}>"
