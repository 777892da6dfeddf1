from __future__ import annotations
from enum import Enum
from time import perf_counter
from typing import Any, Dict, List, Optional

from eightpuzzle.domains.board import MOVES, Board, as_board
from eightpuzzle.errors import InvalidMoveError, SearchExhausted, UnsolvableBoardError
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.node import Node, NodeArena
from eightpuzzle.search.visited import VisitedSet


class SolverState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


def reconstruct_path(arena: NodeArena, goal_index: int) -> List[Board]:
    return [node.board for node in arena.path_to(goal_index)]


class Solver:
    """A* over eight-puzzle boards with the Manhattan heuristic.

    Candidates are rejected when the frontier already holds the same board
    with g <= candidate.g, or the visited set holds it with f <= candidate.f.
    Existing entries are never evicted.
    """

    algorithm = "A*"

    def __init__(self, start, check_solvable: bool = True, timeout_sec: float | None = None):
        self.start = as_board(start)
        if check_solvable and not self.start.is_solvable():
            raise UnsolvableBoardError(f"odd inversion parity, goal unreachable from\n{self.start}")
        self.timeout_sec = timeout_sec
        self.arena = NodeArena()
        self.frontier = Frontier(self.arena)
        self.visited = VisitedSet(self.arena)
        self.state = SolverState.RUNNING
        self.goal_index: Optional[int] = None
        self.generated = 0
        self.duplicates = 0
        self._result: Optional[Dict[str, Any]] = None
        self.frontier.push(self.arena.add(Node.root(self.start)))

    def _is_dominated(self, cand: Node) -> bool:
        if self.frontier.find(cand.board, lambda n: n.g <= cand.g) is not None:
            return True
        return self.visited.find(cand.board, lambda n: n.f <= cand.f) is not None

    def _expand(self, index: int) -> None:
        curr = self.arena[index]
        for _, (dr, dc) in MOVES:
            try:
                board = curr.board.apply_move(dr, dc)
            except InvalidMoveError:
                continue
            cand = Node.child(board, curr, index)
            self.generated += 1
            if self._is_dominated(cand):
                self.duplicates += 1
                continue
            self.frontier.push(self.arena.add(cand))

    def _finish(self, termination: str, t0: float) -> Dict[str, Any]:
        self.state = SolverState.TERMINATED
        goal = self.arena[self.goal_index] if self.goal_index is not None else None
        self._result = {
            "path": reconstruct_path(self.arena, self.goal_index) if goal is not None else None,
            "g": goal.g if goal is not None else None,
            "expanded": len(self.visited),
            "generated": self.generated,
            "duplicates": self.duplicates,
            "peak_open": self.frontier.peak,
            "peak_closed": len(self.visited),
            "time": perf_counter() - t0,
            "algorithm": self.algorithm,
            "termination": termination,
        }
        return self._result

    def solve(self) -> Dict[str, Any]:
        """Run the search to termination. Later calls return the same result."""
        if self._result is not None:
            return self._result
        t0 = perf_counter()
        while self.state is SolverState.RUNNING:
            if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
                return self._finish("timeout", t0)
            if not self.frontier:
                return self._finish("exhausted", t0)

            index = self.frontier.pop_min()
            if self.arena[index].h == 0:
                self.goal_index = index
                return self._finish("ok", t0)

            self._expand(index)
            self.visited.add(index)
        return self._result

    def solution(self) -> List[Board]:
        """Board path start -> goal. Raises SearchExhausted if none was found."""
        res = self.solve()
        if res["path"] is None:
            raise SearchExhausted(res["termination"], res["expanded"])
        return res["path"]


def a_star(
    start,
    check_solvable: bool = True,
    return_path: bool = True,
    timeout_sec: float | None = None,
) -> Dict[str, Any]:
    """
    Solve `start` with A*, returning the instrumentation dict.
    start: Board, 3x3 nested sequence, or flat sequence of 9 ints.
    """
    res = dict(Solver(start, check_solvable=check_solvable, timeout_sec=timeout_sec).solve())
    if not return_path:
        res["path"] = None
    return res
