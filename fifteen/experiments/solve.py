#!/usr/bin/env python3
"""Solve one 15-puzzle configuration and print the blank's moves."""
from __future__ import annotations
import argparse, logging, re
from typing import Optional, Sequence

from fifteen.domains.puzzle15 import InvalidInput, State
from fifteen.search.a_star import HeuristicKind, NoSolution, new_engine

logger = logging.getLogger(__name__)


def parse_tiles(tokens: Sequence[str]) -> State:
    """Accept "1 2 3 ...", "1,2,3,..." or one token per tile."""
    parts = [p for p in re.split(r"[\s,]+", " ".join(tokens)) if p]
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise InvalidInput(f"non-integer tile in {' '.join(tokens)!r}") from None
    return State.parse(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve a 15-puzzle with A*.")
    p.add_argument("tiles", nargs="+", help="16 tiles row-major, 0 is the blank")
    p.add_argument("--heuristic", choices=["manhattan", "misplaced"], default="manhattan")
    p.add_argument("--max-expansions", type=int, default=None)
    p.add_argument("--timeout-sec", type=float, default=None)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        start = parse_tiles(args.tiles)
    except InvalidInput as e:
        p.error(str(e))

    logger.info("Solving with %s:\n%s", args.heuristic, start)
    engine = new_engine(heuristic_kind=HeuristicKind.from_name(args.heuristic))
    try:
        res = engine.search(start, max_expansions=args.max_expansions, timeout_sec=args.timeout_sec)
    except NoSolution as e:
        logger.warning("%s", e)
        print(f"No solution ({e.nodes_expanded} nodes expanded)")
        return 1

    logger.info("Search finished: status=%s expanded=%d replaced=%d",
                res.status.value, res.nodes_expanded, res.stats.replaced)
    if not res.solved:
        print(f"Stopped before a solution was found ({res.nodes_expanded} nodes expanded)")
        return 1

    print(f"Moves: {res.move_string}")
    print(f"Number of Nodes expanded: {res.nodes_expanded}")
    print(f"Path length: {res.path_length}")
    print(f"Time Taken: {res.stats.time_sec:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
