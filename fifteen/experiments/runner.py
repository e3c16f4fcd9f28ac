from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from fifteen.domains.puzzle15 import State, flip_parity, is_solvable, scramble
from fifteen.search.a_star import AStarEngine, HeuristicKind, NoSolution, SearchStatus

logger = logging.getLogger(__name__)

HEADER = [
    "heuristic", "depth", "seed", "path_length", "expanded", "generated",
    "replaced", "peak_open", "time_sec", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


def generate_instances(depths: Sequence[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            attempts += 1
            if is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def run_instance(engine: AStarEngine, state: State,
                 max_expansions: Optional[int] = None,
                 timeout_sec: Optional[float] = None) -> Dict[str, object]:
    try:
        res = engine.search(state, max_expansions=max_expansions, timeout_sec=timeout_sec)
    except NoSolution as e:
        st = e.stats
        return {"path_length": "", "expanded": st.expanded, "generated": st.generated,
                "replaced": st.replaced, "peak_open": st.peak_open,
                "time_sec": f"{st.time_sec:.6f}", "termination": "exhausted"}
    st = res.stats
    return {
        "path_length": res.path_length if res.solved else "",
        "expanded": st.expanded, "generated": st.generated,
        "replaced": st.replaced, "peak_open": st.peak_open,
        "time_sec": f"{st.time_sec:.6f}",
        "termination": "ok" if res.status is SearchStatus.SOLVED else "stopped",
    }


def heuristic_kinds(name: str) -> List[HeuristicKind]:
    if name == "both":
        return [HeuristicKind.MANHATTAN_DISTANCE, HeuristicKind.MISPLACED_TILES]
    return [HeuristicKind.from_name(name)]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A* 15-puzzle experiment runner")
    ap.add_argument("--heuristic", choices=["manhattan", "misplaced", "both"], default="both")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per-depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--max-expansions", type=int, default=None, help="Per-instance expansion budget")
    ap.add_argument("--timeout-sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include-unsolvable", action="store_true",
                    help="Also emit parity-flipped variants of each instance")
    ap.add_argument("--search-unsolvable", action="store_true",
                    help="Actually search the unsolvable variants (requires a budget)")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.search_unsolvable and args.max_expansions is None and args.timeout_sec is None:
        ap.error("--search-unsolvable needs --max-expansions or --timeout-sec")

    kinds = heuristic_kinds(args.heuristic)
    engines = {k: AStarEngine(heuristic_kind=k) for k in kinds}
    insts = generate_instances(args.depths, args.per_depth, start_seed=args.seed)
    logger.info("Generated %d instances at depths %s", len(insts), args.depths)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            for kind, engine in engines.items():
                row = run_instance(engine, inst.state, args.max_expansions, args.timeout_sec)
                row.update(heuristic=kind.value, depth=inst.depth, seed=inst.seed, solvable=1)
                w.writerow(row)
                logger.debug("depth=%d seed=%d %s: %s", inst.depth, inst.seed, kind.value, row["termination"])

            if args.include_unsolvable:
                u = flip_parity(inst.state)
                for kind, engine in engines.items():
                    if args.search_unsolvable:
                        row = run_instance(engine, u, args.max_expansions, args.timeout_sec)
                    else:
                        row = {"path_length": "", "expanded": 0, "generated": 0, "replaced": 0,
                               "peak_open": 0, "time_sec": f"{0.0:.6f}", "termination": "unsolvable"}
                    row.update(heuristic=kind.value, depth=inst.depth, seed=inst.seed, solvable=0)
                    w.writerow(row)

    logger.info("Wrote %s (%d instances)", args.out, len(insts))
    print(f"Wrote {args.out} ({len(insts)} instances)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
