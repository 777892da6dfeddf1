#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("A* vs BFS", "python -m eightpuzzle.experiments.runner --depths 4 8 12 16 --per_depth 10 --check_bfs --out results/astar_vs_bfs.csv")
    run("A* deep", "python -m eightpuzzle.experiments.runner --depths 6 10 14 18 22 26 --per_depth 20 --out results/astar.csv")
    run("Plots", "python -m eightpuzzle.experiments.plot results/astar_vs_bfs.csv results/astar.csv --save results/plots")
    run("Example path", "python -m eightpuzzle.experiments.solve --images results/example_path")

if __name__ == "__main__":
    main()
