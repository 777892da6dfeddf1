from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from eightpuzzle.domains.board import Board, scramble
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.bfs import bfs

HEADER = [
    "algorithm", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "termination",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            b = scramble(d, seed)
            attempts += 1
            if b.is_solvable():
                out.append(Instance(seed=seed, depth=d, board=b))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def result_row(res, inst: Instance) -> list:
    return [
        res.get("algorithm", ""), inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""), res.get("g", ""),
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""), res.get("termination", "ok"),
    ]

def run(insts: List[Instance], out: Path, check_bfs: bool = False, timeout_sec: float | None = None) -> int:
    """Solve every instance and write one CSV row per algorithm run. Returns the number of
    A* results whose g disagreed with BFS (always 0 unless something is broken)."""
    out.parent.mkdir(parents=True, exist_ok=True)
    mismatches = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            r = a_star(inst.board, return_path=False, timeout_sec=timeout_sec)
            w.writerow(result_row(r, inst))
            if check_bfs:
                b = bfs(inst.board, timeout_sec=timeout_sec)
                w.writerow(result_row(b, inst))
                if r["termination"] == b["termination"] == "ok" and r["g"] != b["g"]:
                    print(f"  mismatch depth={inst.depth} seed={inst.seed}: A* g={r['g']} BFS g={b['g']}")
                    mismatches += 1
    return mismatches

def main(argv=None):
    ap = argparse.ArgumentParser(description="Eight-puzzle A* experiment runner")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--check_bfs", action="store_true", help="Also run BFS and compare solution lengths")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    insts = generate_instances(args.depths, args.per_depth, args.start_seed)
    mismatches = run(insts, args.out, check_bfs=args.check_bfs, timeout_sec=args.timeout_sec)
    print(f"Wrote {args.out} ({len(insts)} instances)")
    if mismatches:
        print(f"{mismatches} A*/BFS length mismatches")
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
