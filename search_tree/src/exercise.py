import logging
from dataclasses import dataclass
from typing import override

from search_tree.src.base.scenario import Scenario
from search_tree.src.traversal import TraversalOrder
from search_tree.src.tree import BinarySearchTree

# "Postorder: " is the longest label, the others get padded to line up with it
LABEL_WIDTH = max(len(order.label) for order in TraversalOrder) + 2


@dataclass(frozen=True)
class ExerciseReport:
    title: str
    traversals: dict[TraversalOrder, list[int]]

    def format_traversal(self, order: TraversalOrder) -> str:
        keys = " ".join(map(str, self.traversals[order]))
        return f"{order.label + ':':<{LABEL_WIDTH}}{keys}".rstrip()

    @override
    def __str__(self) -> str:
        return "\n".join(
            [f"=== {self.title} ===", *map(self.format_traversal, TraversalOrder)]
        )


def run_exercise(scenario: Scenario) -> ExerciseReport:
    # fresh tree per scenario so keys never leak from one run into the next
    tree = BinarySearchTree.from_keys(scenario.keys)
    logging.info(
        f"running `{scenario.title}`: {len(tree)} keys, height {tree.height}"
    )
    traversals = {order: tree.traverse(order) for order in TraversalOrder}
    tree.clear()
    return ExerciseReport(scenario.title, traversals)
