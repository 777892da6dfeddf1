#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.board import SIDE, Board, scramble
from eightpuzzle.search.a_star import a_star

def draw_board(board: Board, out_path: Path, title: str | None = None):
    n = SIDE
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(board.cells):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_path(path: List[Board], outdir: Path) -> List[Path]:
    last = len(path) - 1
    saved = []
    for i, b in enumerate(path):
        label = "Start state" if i == 0 else ("Goal state" if i == last else f"Step {i}")
        p = outdir / f"step_{i:03d}.png"
        draw_board(b, p, title=label)
        saved.append(p)
    return saved

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    start = scramble(args.depth, args.seed)
    res = a_star(start, return_path=True)

    if not res.get("path"):
        print("No path (timeout or exhausted). Try smaller depth.")
        return 1

    outdir = Path(args.outdir)
    save_path(res["path"], outdir)
    print(f"Saved {len(res['path'])} frames to {outdir}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
