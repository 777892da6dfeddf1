#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "generated", "duplicates", "time_sec"]

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)

def load(paths) -> pd.DataFrame:
    frames = [pd.read_csv(p) for p in paths]
    df = pd.concat(frames, ignore_index=True)
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    return df

def summarize(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    """Mean and standard error of `metric` per (algorithm, depth)."""
    vals = pd.to_numeric(df[metric], errors="coerce")
    g = vals.groupby([df["algorithm"], df["depth"]])
    out = g.agg(["mean", sem, "count"]).reset_index()
    return out.rename(columns={"sem": "se"}).sort_values(["algorithm", "depth"])

def plot_metric(ax, df: pd.DataFrame, metric: str):
    table = summarize(df, metric)
    for algo, sub in table.groupby("algorithm"):
        ax.errorbar(sub["depth"], sub["mean"], yerr=sub["se"], marker="o", capsize=3, label=algo)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± s.e.)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def plot_all(df: pd.DataFrame, outdir: Path, base: str) -> List[Path]:
    saved = []
    for metric in METRICS:
        if metric not in df.columns:
            continue
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        plt.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    plot_all(df, Path(args.save), base)
    for algo, sub in summarize(df, "expanded").groupby("algorithm"):
        print(f"{algo}: " + ", ".join(f"d={d}: {m:.1f}" for d, m in zip(sub["depth"], sub["mean"])))

    if args.show:
        plt.show()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
