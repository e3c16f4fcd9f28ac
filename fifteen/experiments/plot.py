#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fifteen.experiments.summarize import load_results, summarize

METRICS = [("expanded", "nodes expanded"), ("time", "seconds")]


def plot_metric(ax, table, metric, label, log=False):
    for heur, grp in table.groupby("heuristic"):
        grp = grp.sort_values("depth")
        ax.errorbar(grp["depth"], grp[f"{metric}_mean"], yerr=grp[f"{metric}_std"],
                    marker="o", capsize=3, label=heur)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(label)
    ax.set_title(f"{label} vs depth (mean ± std)")
    if log:
        ax.set_yscale("log")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0
    table = summarize(df)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, len(METRICS), figsize=(12, 5))
    for ax, (metric, label) in zip(axes, METRICS):
        plot_metric(ax, table, metric, label, log=args.log)
    plt.tight_layout()
    save_fig(fig, Path(args.save), f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
