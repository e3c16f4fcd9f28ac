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
    run("A* both heuristics", "python -m fifteen.experiments.runner --depths 6 10 14 18 --per-depth 10 --heuristic both --out results/astar.csv")
    run("Summary", "python -m fifteen.experiments.summarize results/astar.csv --out results/astar_summary.csv")
    run("Plots", "python -m fifteen.experiments.plot results/astar.csv --save results/plots --log")

if __name__ == "__main__":
    main()
