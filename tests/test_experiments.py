import csv

import pandas as pd

from eightpuzzle.experiments import plot, runner, solve
from eightpuzzle.experiments.runner import HEADER, generate_instances


def test_solve_prints_steps_and_statistics(capsys):
    assert solve.main(["--board", "1 0 2 3 4 5 6 7 8"]) == 0
    out = capsys.readouterr().out
    assert "1. Start state" in out
    assert "2. Goal state" in out
    assert "| _ | 1 | 2 |" in out
    assert "CPU Time:" in out
    assert "Total Nodes Visited: 1" in out


def test_solve_default_board(capsys):
    assert solve.main([]) == 0
    out = capsys.readouterr().out
    assert "27. Goal state" in out
    assert "Next state" in out


def test_solve_rejects_bad_input(capsys):
    assert solve.main(["--board", "1 1 2 3 4 5 6 7 8"]) == 1
    assert "error:" in capsys.readouterr().out
    assert solve.main(["--board", "0 2 1 3 4 5 6 7 8"]) == 1
    assert "parity" in capsys.readouterr().out


def test_solve_saves_images(tmp_path, capsys):
    assert solve.main(["--depth", "1", "--seed", "2", "--images", str(tmp_path)]) == 0
    frames = sorted(tmp_path.glob("step_*.png"))
    assert len(frames) == 2
    assert "Saved 2 frames" in capsys.readouterr().out


def test_generate_instances_is_deterministic():
    a = generate_instances([2, 4], 3)
    b = generate_instances([2, 4], 3)
    assert [(i.seed, i.depth, i.board) for i in a] == [(i.seed, i.depth, i.board) for i in b]
    assert [i.depth for i in a] == [2, 2, 2, 4, 4, 4]
    assert len({i.seed for i in a}) == 6


def test_runner_writes_csv_and_agrees_with_bfs(tmp_path):
    out = tmp_path / "res.csv"
    assert runner.main(["--depths", "2", "6", "--per_depth", "2", "--check_bfs", "--out", str(out)]) == 0
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == HEADER
    assert len(rows) == 8
    assert {r["algorithm"] for r in rows} == {"A*", "BFS"}
    assert all(r["termination"] == "ok" for r in rows)


def test_plot_summarizes_and_saves(tmp_path):
    out = tmp_path / "res.csv"
    runner.run(generate_instances([4, 8], 3), out)
    df = plot.load([out])
    assert len(df) == 6
    table = plot.summarize(df, "expanded")
    assert list(table["depth"]) == [4, 8]
    assert {"mean", "se", "count"} <= set(table.columns)
    saved = plot.plot_all(df, tmp_path / "plots", "res")
    assert len(saved) == len(plot.METRICS)
    assert all(p.exists() for p in saved)


def test_plot_main_handles_empty_csv(tmp_path, capsys):
    out = tmp_path / "empty.csv"
    pd.DataFrame(columns=HEADER).to_csv(out, index=False)
    assert plot.main([str(out), "--save", str(tmp_path / "plots")]) == 0
    assert "No rows to plot" in capsys.readouterr().out
