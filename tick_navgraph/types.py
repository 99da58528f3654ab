"""Shared types, protocols and errors for tick-navgraph."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

Coord = tuple[int, int]

# N, E, S, W then NE, SE, SW, NW. North is +y.
CARDINAL_OFFSETS: tuple[Coord, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_OFFSETS: tuple[Coord, ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))


class Cell(Protocol):
    """Anything that occupies one grid coordinate and has a movement cost.

    ``movement_cost`` is the weight for entering the cell; 0 means impassable.
    """

    @property
    def position(self) -> Coord: ...

    @property
    def movement_cost(self) -> float: ...


class GridSource(Protocol):
    """Supplies cells to a Graph. ``cell_at`` returns None outside the grid."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def cell_at(self, x: int, y: int) -> Cell | None: ...


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge of a Node.

    Attributes:
        cost: Movement cost of the *target* cell when the edge was generated.
        target: Coordinate key of the target node in the graph's node arena.
    """

    cost: float
    target: Coord


@dataclass(eq=False)
class Node:
    """One graph vertex per cell. Edges are None until first generated."""

    cell: Cell
    edges: tuple[Edge, ...] | None = field(default=None)

    @property
    def coord(self) -> Coord:
        return self.cell.position


@dataclass(frozen=True, slots=True)
class NodeCosts:
    """Search bookkeeping for one node inside one Pathfinder."""

    g: float
    h: float

    @property
    def f(self) -> float:
        return self.g + self.h


class SearchState(enum.Enum):
    INITIALIZED = "initialized"
    STEPPING = "stepping"
    FOUND = "found"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchState.FOUND, SearchState.EXHAUSTED)


class UnknownCellError(KeyError):
    """Raised when a cell or coordinate has no node in the graph."""

    def __init__(self, coord: Coord | None, message: str) -> None:
        self.coord = coord
        super().__init__(message)


class EmptyQueueError(IndexError):
    """Raised when dequeuing from an empty PriorityQueue."""
