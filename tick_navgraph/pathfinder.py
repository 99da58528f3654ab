"""Pathfinder - steppable A* search over a Graph."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from tick_navgraph.path import Path
from tick_navgraph.queue import PriorityQueue
from tick_navgraph.types import Coord, NodeCosts, SearchState

if TYPE_CHECKING:
    from tick_navgraph.graph import Graph
    from tick_navgraph.types import Cell

logger = logging.getLogger(__name__)

SQRT2 = math.sqrt(2.0)


def step_distance(a: Coord, b: Coord) -> float:
    """Length of the move from ``a`` to ``b``: 1 orthogonal, sqrt(2) diagonal."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if dx + dy == 1:
        return 1.0
    if dx == 1 and dy == 1:
        return SQRT2
    return math.hypot(dx, dy)


def heuristic(a: Coord, goal: Coord | None) -> float:
    """Straight-line distance to the goal, 0 without one."""
    if goal is None:
        return 0.0
    return math.hypot(a[0] - goal[0], a[1] - goal[1])


class Pathfinder:
    """A* search from ``start`` to ``goal`` that advances one expansion per ``step()``.

    All search bookkeeping (open set, closed set, predecessors and G/H
    costs) belongs to this instance, so several pathfinders may search the
    same graph independently. Between steps the open set, closed set and
    per-node costs can be read for display; reads never change the search.

    The open set is ordered by F-cost, then H-cost, then insertion order.
    """

    def __init__(self, graph: Graph, start: Cell, goal: Cell) -> None:
        self._graph = graph
        self._start = graph.node_for(start)
        self._goal = graph.node_for(goal)

        self._open: PriorityQueue[Coord] = PriorityQueue()
        self._closed: set[Coord] = set()
        self._came_from: dict[Coord, Coord] = {}
        self._costs: dict[Coord, NodeCosts] = {}

        self._state = SearchState.INITIALIZED
        self._path: Path | None = None
        self._steps = 0

        origin = self._start.coord
        self._costs[origin] = NodeCosts(0.0, heuristic(origin, self._goal.coord))
        self._open.enqueue(origin, (0.0, 0.0))

    # --- Properties ---

    @property
    def start(self) -> Cell:
        return self._start.cell

    @property
    def goal(self) -> Cell:
        return self._goal.cell

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state.is_terminal

    @property
    def has_found_path(self) -> bool:
        return self._path is not None

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def steps(self) -> int:
        """Number of expansions performed so far."""
        return self._steps

    # --- Execution ---

    def step(self) -> SearchState:
        """Expand the most promising open node and return the new state.

        Does nothing once the search is FOUND or EXHAUSTED.
        """
        if self._state.is_terminal:
            return self._state

        current = self._open.dequeue()
        self._steps += 1
        self._state = SearchState.STEPPING

        if current == self._goal.coord:
            self._path = self._construct_path()
            self._state = SearchState.FOUND
            logger.debug(
                "Found path %s -> %s in %d steps (length %d, cost %.3f)",
                self._start.coord, current, self._steps,
                len(self._path), self._path.cost,
            )
            return self._state

        self._closed.add(current)
        current_g = self._costs[current].g
        node = self._graph.node_at(current)
        for edge in node.edges or ():
            neighbour = edge.target
            if neighbour in self._closed:
                continue

            tentative_g = current_g + edge.cost * step_distance(current, neighbour)
            if neighbour in self._open and tentative_g >= self._costs[neighbour].g:
                continue

            self._came_from[neighbour] = current
            costs = NodeCosts(tentative_g, heuristic(neighbour, self._goal.coord))
            self._costs[neighbour] = costs
            self._open.enqueue_or_update(neighbour, (costs.f, costs.h))

        if not self._open:
            self._state = SearchState.EXHAUSTED
            logger.debug(
                "No path %s -> %s: frontier exhausted after %d steps",
                self._start.coord, self._goal.coord, self._steps,
            )
        return self._state

    def run(self, max_steps: int | None = None) -> Path | None:
        """Step until the search completes and return the path, if any.

        With ``max_steps`` at most that many steps are taken; if the search
        is still running afterwards, None is returned and a later call
        resumes where this one stopped.
        """
        taken = 0
        while not self._state.is_terminal:
            if max_steps is not None and taken >= max_steps:
                break
            self.step()
            taken += 1
        return self._path

    def _construct_path(self) -> Path:
        # Walk predecessors back from the goal; Path reverses into start->goal.
        current = self._goal.coord
        chain = [current]
        while current in self._came_from:
            current = self._came_from[current]
            chain.append(current)
        cells = [self._graph.node_at(coord).cell for coord in chain]
        return Path.from_predecessors(cells, self._costs[self._goal.coord].g)

    # --- Introspection ---

    def open_set(self) -> list[Coord]:
        """Coordinates of discovered, unexpanded nodes in expansion order."""
        return list(self._open)

    def closed_set(self) -> frozenset[Coord]:
        return frozenset(self._closed)

    def in_open_set(self, coord: Coord) -> bool:
        return coord in self._open

    def in_closed_set(self, coord: Coord) -> bool:
        return coord in self._closed

    def costs_of(self, coord: Coord) -> NodeCosts | None:
        """G/H/F costs recorded for ``coord`` by this search, None if undiscovered."""
        return self._costs.get(coord)
