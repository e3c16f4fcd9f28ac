from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple, Union
import heapq
import itertools
import logging
from time import perf_counter

from fifteen.domains.puzzle15 import GOAL, Move, PuzzleError, State, neighbors as default_neighbors
from fifteen.heuristics.manhattan import manhattan
from fifteen.heuristics.misplaced import misplaced_tiles

logger = logging.getLogger(__name__)

NeighborsFn = Callable[[State], List[Tuple[Move, State]]]


class HeuristicKind(Enum):
    MISPLACED_TILES = "misplaced"
    MANHATTAN_DISTANCE = "manhattan"

    @classmethod
    def from_name(cls, name: str) -> "HeuristicKind":
        n = name.strip().lower().replace("-", "_")
        if n in ("manhattan", "manhattan_distance", "m"):
            return cls.MANHATTAN_DISTANCE
        if n in ("misplaced", "misplaced_tiles", "hamming", "h"):
            return cls.MISPLACED_TILES
        raise ValueError(f"unknown heuristic: {name!r}")

    def evaluator(self, goal: State = GOAL) -> Callable[[State], int]:
        fn = manhattan if self is HeuristicKind.MANHATTAN_DISTANCE else misplaced_tiles
        return partial(fn, goal=goal)


class SearchStatus(Enum):
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    STOPPED = "stopped"


@dataclass(eq=False)
class Node:
    """Search-tree node. Never mutated once created; a cheaper path makes a new node."""
    state: State
    path_cost: int
    priority: int
    parent: Optional["Node"] = None
    move: Optional[Move] = None


def reconstruct(node: Node) -> List[Move]:
    moves: List[Move] = []
    while node.parent is not None:
        moves.append(node.move)  # type: ignore[arg-type]
        node = node.parent
    moves.reverse()
    return moves


def reconstruct_states(node: Optional[Node]) -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return path


class Frontier:
    """Min-priority queue of nodes with at most one live entry per state.

    Entries are ``[priority, insertion_no, node]`` so equal priorities pop
    first-in first-out. Removal blanks the entry's node slot; dead entries
    are skipped when popped.
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[State, list] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, state: State) -> bool:
        return state in self._entries

    def get(self, state: State) -> Optional[Node]:
        entry = self._entries.get(state)
        return entry[2] if entry is not None else None

    def push(self, node: Node) -> None:
        if node.state in self._entries:
            raise ValueError("state already in frontier; use replace()")
        entry = [node.priority, next(self._counter), node]
        self._entries[node.state] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, state: State) -> Node:
        entry = self._entries.pop(state)
        node = entry[2]
        entry[2] = None
        return node

    def replace(self, node: Node) -> Node:
        """Drop the entry for node.state and insert node behind its new equals."""
        old = self.remove(node.state)
        self.push(node)
        return old

    def pop(self) -> Node:
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not None:
                del self._entries[node.state]
                return node
        raise IndexError("pop from an empty frontier")


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    replaced: int = 0
    peak_open: int = 0
    explored: int = 0
    time_sec: float = 0.0


@dataclass
class SearchResult:
    status: SearchStatus
    moves: Optional[List[Move]]
    path_length: Optional[int]
    nodes_expanded: int
    stats: SearchStats = field(default_factory=SearchStats)
    node: Optional[Node] = field(default=None, repr=False)

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def move_string(self) -> str:
        return "".join(m.value for m in self.moves or [])


class NoSolution(PuzzleError):
    """Frontier emptied without reaching the goal."""

    def __init__(self, stats: SearchStats):
        self.stats = stats
        self.nodes_expanded = stats.expanded
        super().__init__(f"no solution after expanding {stats.expanded} nodes")


class AStarEngine:
    """A* over 15-puzzle states with one heuristic fixed for the engine's lifetime.

    Every call to :meth:`search` builds its own frontier and explored set, so
    an engine can be reused sequentially but must not be shared across threads.
    """

    def __init__(
        self,
        goal: State = GOAL,
        heuristic_kind: Union[HeuristicKind, str] = HeuristicKind.MANHATTAN_DISTANCE,
        neighbors_fn: Optional[NeighborsFn] = None,
    ):
        if isinstance(heuristic_kind, str):
            heuristic_kind = HeuristicKind.from_name(heuristic_kind)
        self.goal = goal
        self.heuristic_kind = heuristic_kind
        self.heuristic = heuristic_kind.evaluator(goal)
        self._neighbors = neighbors_fn or default_neighbors
        self.status = SearchStatus.READY
        self.stats = SearchStats()

    @property
    def nodes_expanded(self) -> int:
        return self.stats.expanded

    def search(
        self,
        initial: Union[State, Sequence[int]],
        should_continue: Optional[Callable[[SearchStats], bool]] = None,
        max_expansions: Optional[int] = None,
        timeout_sec: Optional[float] = None,
    ) -> SearchResult:
        """Run A* from `initial` to the engine's goal.

        should_continue is consulted before every expansion; returning False
        ends the search with status STOPPED and no moves. max_expansions and
        timeout_sec are budgets checked at the same point.

        Raises InvalidInput for a malformed board and NoSolution when the
        frontier empties.
        """
        initial = State.parse(initial.cells if isinstance(initial, State) else initial)
        t0 = perf_counter()
        stats = SearchStats()
        self.stats = stats
        self.status = SearchStatus.RUNNING

        frontier = Frontier()
        explored: Set[State] = set()
        h0 = self.heuristic(initial)
        frontier.push(Node(state=initial, path_cost=0, priority=h0))
        stats.peak_open = 1
        logger.debug("A* start: heuristic=%s h0=%d", self.heuristic_kind.value, h0)

        while True:
            stats.time_sec = perf_counter() - t0
            if (
                (should_continue is not None and not should_continue(stats))
                or (max_expansions is not None and stats.expanded >= max_expansions)
                or (timeout_sec is not None and stats.time_sec > timeout_sec)
            ):
                stats.explored = len(explored)
                self.status = SearchStatus.STOPPED
                logger.debug("A* stopped after %d expansions", stats.expanded)
                return SearchResult(SearchStatus.STOPPED, None, None, stats.expanded, stats)

            if not frontier:
                stats.explored = len(explored)
                self.status = SearchStatus.EXHAUSTED
                logger.debug("A* exhausted after %d expansions", stats.expanded)
                raise NoSolution(stats)

            node = frontier.pop()
            stats.expanded += 1

            if node.state == self.goal:
                stats.explored = len(explored)
                stats.time_sec = perf_counter() - t0
                self.status = SearchStatus.SOLVED
                logger.debug("A* solved: length=%d expanded=%d replaced=%d",
                             node.path_cost, stats.expanded, stats.replaced)
                return SearchResult(SearchStatus.SOLVED, reconstruct(node), node.path_cost,
                                    stats.expanded, stats, node)

            explored.add(node.state)

            for move, s2 in self._neighbors(node.state):
                stats.generated += 1
                if s2 in explored:
                    continue
                g2 = node.path_cost + 1
                child = Node(state=s2, path_cost=g2, priority=g2 + self.heuristic(s2),
                             parent=node, move=move)
                existing = frontier.get(s2)
                if existing is None:
                    frontier.push(child)
                elif child.priority < existing.priority:
                    frontier.replace(child)
                    stats.replaced += 1
                # else: frontier already holds an equal or better path

            stats.peak_open = max(stats.peak_open, len(frontier))


def new_engine(
    goal: State = GOAL,
    heuristic_kind: Union[HeuristicKind, str] = HeuristicKind.MANHATTAN_DISTANCE,
) -> AStarEngine:
    return AStarEngine(goal=goal, heuristic_kind=heuristic_kind)
