from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Set, Tuple

from fifteen.domains.puzzle15 import GOAL, Move, State, neighbors


def bfs(start: State, goal: State = GOAL,
        max_depth: Optional[int] = None,
        timeout_sec: Optional[float] = None):
    """Plain breadth-first search; shortest move list under unit costs."""
    t0 = perf_counter()
    q = deque([(start, 0)])
    parent: Dict[State, Optional[Tuple[State, Move]]] = {start: None}
    expanded = generated = 0
    seen: Set[State] = {start}
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"moves": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "timeout"}
        s, d = q.popleft()
        if s == goal:
            moves: List[Move] = []
            link = parent[s]
            while link is not None:
                s, m = link
                moves.append(m)
                link = parent[s]
            moves.reverse()
            return {"moves": moves, "g": len(moves), "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        if max_depth is not None and d >= max_depth:
            continue
        for m, s2 in neighbors(s):
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = (s, m); q.append((s2, d + 1))
    return {"moves": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}


def bfs_distance(start: State, goal: State = GOAL, max_depth: Optional[int] = None) -> Optional[int]:
    return bfs(start, goal, max_depth=max_depth)["g"]
