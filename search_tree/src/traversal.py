import enum
from collections.abc import Iterator

from search_tree.src.base.key import Comparable
from search_tree.src.node import Node


class TraversalOrder(enum.Enum):
    label: str  # for type checker, this exists

    PREORDER = ("preorder", "Preorder")
    INORDER = ("inorder", "Inorder")
    POSTORDER = ("postorder", "Postorder")

    def __new__(cls, order_name: str, label: str):
        obj = object.__new__(cls)
        obj._value_ = order_name
        obj.label = label
        return obj


def _preorder[K: Comparable](head: Node[K] | None) -> Iterator[Node[K]]:
    stack = [head] if head is not None else []
    while stack:
        curr = stack.pop()
        yield curr
        # right goes on first so left comes off first
        if curr.right is not None:
            stack.append(curr.right)
        if curr.left is not None:
            stack.append(curr.left)


def _inorder[K: Comparable](head: Node[K] | None) -> Iterator[Node[K]]:
    stack: list[Node[K]] = []
    curr = head
    while stack or curr is not None:
        while curr is not None:
            stack.append(curr)
            curr = curr.left
        curr = stack.pop()
        yield curr
        curr = curr.right


def _postorder[K: Comparable](head: Node[K] | None) -> Iterator[Node[K]]:
    stack: list[Node[K]] = []
    curr = head
    last_visited = None
    while stack or curr is not None:
        if curr is not None:
            stack.append(curr)
            curr = curr.left
            continue

        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            # right subtree not done yet, come back to top afterwards
            curr = top.right
        else:
            yield top
            last_visited = stack.pop()


def iter_nodes[K: Comparable](
    head: Node[K] | None, order: TraversalOrder
) -> Iterator[Node[K]]:
    match order:
        case TraversalOrder.PREORDER:
            return _preorder(head)
        case TraversalOrder.INORDER:
            return _inorder(head)
        case TraversalOrder.POSTORDER:
            return _postorder(head)
        case _:
            raise ValueError(f"Unknown traversal order: {order!r}")
