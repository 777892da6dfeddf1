#!/usr/bin/env python3
"""Solve one board and print every step plus search statistics."""
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

from eightpuzzle.domains.board import Board, scramble
from eightpuzzle.errors import MalformedBoardError, SearchExhausted, UnsolvableBoardError
from eightpuzzle.search.a_star import Solver

DEFAULT_BOARD = "7 2 4 5 0 6 8 3 1"

def format_solution(solver: Solver) -> str:
    nodes = solver.arena.path_to(solver.goal_index)
    last = len(nodes)
    lines: List[str] = ["Solution: "]
    for i, node in enumerate(nodes, start=1):
        if i == 1:
            label = "Start state"
        elif i == last:
            label = "Goal state"
        else:
            label = "Next state"
        lines.append("")
        lines.append(f"{i}. {label}")
        lines.append(f"g: {node.g}")
        lines.append(f"h: {node.h}")
        lines.append(f"f: {node.f}")
        lines.append(str(node.board))
    return "\n".join(lines)

def format_stats(res) -> str:
    return "\n".join([
        "",
        "Statistics: ",
        f"CPU Time: {res['time'] * 1000:.0f}ms",
        f"Total Nodes Visited: {res['expanded']}",
    ])

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve an eight-puzzle board with A* (Manhattan).")
    p.add_argument("--board", default=None,
                   help=f"Nine tiles row-major, 0 is blank (default: '{DEFAULT_BOARD}')")
    p.add_argument("--depth", type=int, default=None, help="Scramble the goal this many moves instead of --board")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--no_check_solvable", action="store_true",
                   help="Skip the parity check and let the search run until exhausted")
    p.add_argument("--timeout_sec", type=float, default=None)
    p.add_argument("--images", type=Path, default=None, help="Also save one PNG per step here")
    args = p.parse_args(argv)

    try:
        if args.depth is not None:
            start = scramble(args.depth, args.seed)
        else:
            start = Board.parse(args.board or DEFAULT_BOARD)
        solver = Solver(start, check_solvable=not args.no_check_solvable, timeout_sec=args.timeout_sec)
        path = solver.solution()
    except (MalformedBoardError, UnsolvableBoardError, SearchExhausted) as exc:
        print(f"error: {exc}")
        return 1

    res = solver.solve()
    print(format_solution(solver))
    print(format_stats(res))

    if args.images is not None:
        # matplotlib is only needed here
        from eightpuzzle.experiments.visualize_path import save_path
        saved = save_path(path, args.images)
        print(f"Saved {len(saved)} frames to {args.images}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
