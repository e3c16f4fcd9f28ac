#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

NUMERIC = ("depth", "seed", "path_length", "expanded", "generated", "replaced", "peak_open", "time_sec")


def load_results(patterns: Iterable[str], only_ok: bool = True) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(str(pat))) or [str(pat)]:
            df = pd.read_csv(fn)
            df["__src__"] = Path(fn).name
            dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=list(NUMERIC) + ["heuristic", "termination"])
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if only_ok and "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    return df.reset_index(drop=True)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of expansions, path length and time per (heuristic, depth)."""
    out = (
        df.groupby(["heuristic", "depth"])
        .agg(
            n=("seed", "count"),
            path_length_mean=("path_length", "mean"),
            expanded_mean=("expanded", "mean"),
            expanded_std=("expanded", "std"),
            time_mean=("time_sec", "mean"),
            time_std=("time_sec", "std"),
        )
        .reset_index()
    )
    return out.fillna({"expanded_std": 0.0, "time_std": 0.0})


def expansion_ratio(df: pd.DataFrame) -> pd.DataFrame:
    """Per depth, mean of manhattan/misplaced expansions over instances run with both."""
    wide = df.pivot_table(index=["depth", "seed"], columns="heuristic", values="expanded", aggfunc="first")
    if "manhattan" not in wide.columns or "misplaced" not in wide.columns:
        return pd.DataFrame(columns=["depth", "ratio_mean", "n"])
    wide = wide.dropna(subset=["manhattan", "misplaced"])
    wide["ratio"] = wide["manhattan"] / wide["misplaced"]
    return (
        wide.groupby(level="depth")["ratio"]
        .agg(ratio_mean="mean", n="count")
        .reset_index()
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per heuristic and depth.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files (globs allowed)")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No solved rows to summarize.")
        return 0

    table = summarize(df)
    print(table.to_string(index=False, float_format=lambda x: f"{x:.2f}"))
    ratio = expansion_ratio(df)
    if not ratio.empty:
        print("\nManhattan / misplaced expansions:")
        print(ratio.to_string(index=False, float_format=lambda x: f"{x:.3f}"))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
