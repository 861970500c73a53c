from dataclasses import dataclass

from search_tree.src.base.key import Comparable


@dataclass(eq=False)
class Node[K: Comparable]:
    key: K
    left: "Node[K] | None" = None
    right: "Node[K] | None" = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def insert_node[K: Comparable](head: Node[K] | None, key: K) -> Node[K]:
    # duplicates go right, so only a strict less than sends us left
    if head is None:
        return Node(key)

    curr = head
    while True:
        if key < curr.key:
            if curr.left is None:
                curr.left = Node(key)
                return head
            curr = curr.left
        else:
            if curr.right is None:
                curr.right = Node(key)
                return head
            curr = curr.right
