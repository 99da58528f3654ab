"""tick-navgraph - Steppable A* pathfinding over tile grids."""
from __future__ import annotations

from tick_navgraph.config import GraphConfig
from tick_navgraph.graph import Graph
from tick_navgraph.path import Path
from tick_navgraph.pathfinder import Pathfinder, heuristic, step_distance
from tick_navgraph.queue import PriorityQueue
from tick_navgraph.tiles import FLOOR, WALL, Tile, TileGrid, TileType
from tick_navgraph.types import (
    Cell,
    Coord,
    Edge,
    EmptyQueueError,
    GridSource,
    Node,
    NodeCosts,
    SearchState,
    UnknownCellError,
)

__all__ = [
    "Cell",
    "Coord",
    "Edge",
    "EmptyQueueError",
    "FLOOR",
    "Graph",
    "GraphConfig",
    "GridSource",
    "Node",
    "NodeCosts",
    "Path",
    "Pathfinder",
    "PriorityQueue",
    "SearchState",
    "Tile",
    "TileGrid",
    "TileType",
    "UnknownCellError",
    "WALL",
    "heuristic",
    "step_distance",
]
