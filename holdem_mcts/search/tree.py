"""Search tree with arena-owned nodes.

Nodes live in a single list owned by the tree. A node refers to its parent
and children by index, so the parent link never owns anything and the
whole tree is released when the tree object is dropped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

ROOT = 0


@dataclass(slots=True)
class SearchNode:
    index: int
    parent: int | None = None
    children: list[int] = field(default_factory=list)  # creation order
    visits: int = 0
    wins: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def losses(self) -> int:
        return self.visits - self.wins


class SearchTree:
    """UCB1 bookkeeping for one decision.

    Children carry no game state: every child of a node is structurally
    identical and only its win/visit statistics tell them apart. Expansion
    adds exactly one node per iteration and nodes are never pruned.
    """

    def __init__(self, exploration: float = math.sqrt(2)) -> None:
        self.exploration = exploration
        self.nodes: list[SearchNode] = [SearchNode(index=ROOT)]

    @property
    def root(self) -> SearchNode:
        return self.nodes[ROOT]

    def __len__(self) -> int:
        return len(self.nodes)

    def ucb1(self, index: int) -> float:
        """UCB1 score of a non-root node; unvisited nodes score +inf."""
        node = self.nodes[index]
        if node.visits == 0:
            return math.inf
        parent = self.nodes[node.parent]
        exploit = node.wins / node.visits
        explore = math.sqrt(math.log(parent.visits) / node.visits)
        return exploit + self.exploration * explore

    def best_child(self, index: int) -> int:
        """Child with the highest UCB1 score; the oldest child wins ties."""
        children = self.nodes[index].children
        if len(children) == 1:
            return children[0]
        return max(children, key=self.ucb1)

    def select(self) -> int:
        """Descend from the root through best children to a leaf."""
        index = ROOT
        while self.nodes[index].children:
            index = self.best_child(index)
        return index

    def expand(self, index: int) -> int:
        """Append one new child to ``index`` and return the child's index."""
        child = SearchNode(index=len(self.nodes), parent=index)
        self.nodes.append(child)
        self.nodes[index].children.append(child.index)
        return child.index

    def backpropagate(self, index: int | None, win: bool) -> None:
        """Credit one rollout to ``index`` and every ancestor up to the root."""
        while index is not None:
            node = self.nodes[index]
            node.visits += 1
            if win:
                node.wins += 1
            index = node.parent

    def depth(self, index: int) -> int:
        depth = 0
        parent = self.nodes[index].parent
        while parent is not None:
            depth += 1
            parent = self.nodes[parent].parent
        return depth
