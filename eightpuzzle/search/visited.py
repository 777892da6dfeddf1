from __future__ import annotations
from collections import defaultdict
from typing import Callable, Dict, Iterator, List, Optional

from eightpuzzle.domains.board import Board
from eightpuzzle.search.node import Node, NodeArena


class VisitedSet:
    """Closed list: append-only sequence of expanded arena indices."""

    def __init__(self, arena: NodeArena):
        self._arena = arena
        self._order: List[int] = []
        self._by_board: Dict[Board, List[int]] = defaultdict(list)

    def add(self, index: int) -> None:
        self._order.append(index)
        self._by_board[self._arena[index].board].append(index)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Node]:
        return (self._arena[i] for i in self._order)

    def find(self, board: Board, predicate: Callable[[Node], bool]) -> Optional[Node]:
        for index in self._by_board.get(board, ()):
            node = self._arena[index]
            if predicate(node):
                return node
        return None
