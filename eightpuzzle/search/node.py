from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from eightpuzzle.domains.board import Board


@dataclass(frozen=True, eq=False)
class Node:
    """Search node. `parent` is an index into the owning NodeArena."""
    board: Board
    g: int
    h: int
    parent: Optional[int] = None

    @classmethod
    def root(cls, board: Board) -> "Node":
        return cls(board=board, g=0, h=board.heuristic(), parent=None)

    @classmethod
    def child(cls, board: Board, parent: "Node", parent_index: int) -> "Node":
        return cls(board=board, g=parent.g + 1, h=board.heuristic(), parent=parent_index)

    @property
    def f(self) -> int:
        return self.g + self.h

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.board == other.board

    def __hash__(self):
        return hash(self.board)


class NodeArena:
    """Index-addressed storage for every node kept during a search."""

    def __init__(self):
        self._nodes: List[Node] = []

    def add(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def path_to(self, index: int) -> List[Node]:
        """Nodes from the root down to `index`."""
        path: List[Node] = []
        cur: Optional[int] = index
        while cur is not None:
            node = self._nodes[cur]
            path.append(node)
            cur = node.parent
        path.reverse()
        return path
