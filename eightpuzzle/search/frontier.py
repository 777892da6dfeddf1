from __future__ import annotations
from collections import defaultdict
import heapq
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from eightpuzzle.domains.board import Board
from eightpuzzle.search.node import Node, NodeArena

# (f, h, insertion counter, arena index)
Entry = Tuple[int, int, int, int]


class Frontier:
    """Open set: heapq list on (f, h, insertion order) over arena indices.

    A side index by board lets `find` scan only the entries holding an equal board.
    """

    def __init__(self, arena: NodeArena):
        self._arena = arena
        self._heap: List[Entry] = []
        self._by_board: Dict[Board, List[int]] = defaultdict(list)
        self._counter = 0
        self.peak = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Node]:
        for entry in self._heap:
            yield self._arena[entry[3]]

    def push(self, index: int) -> None:
        node = self._arena[index]
        heapq.heappush(self._heap, (node.f, node.h, self._counter, index))
        self._counter += 1
        self._by_board[node.board].append(index)
        self.peak = max(self.peak, len(self._heap))

    def pop_min(self) -> int:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        index = heapq.heappop(self._heap)[3]
        board = self._arena[index].board
        held = self._by_board[board]
        held.remove(index)
        if not held:
            del self._by_board[board]
        return index

    def find(self, board: Board, predicate: Callable[[Node], bool]) -> Optional[Node]:
        """First held node with an equal board satisfying `predicate`, else None."""
        for index in self._by_board.get(board, ()):
            node = self._arena[index]
            if predicate(node):
                return node
        return None
