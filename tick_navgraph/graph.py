"""Graph - costed adjacency over the cells of a GridSource."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from tick_navgraph.config import GraphConfig
from tick_navgraph.pathfinder import Pathfinder
from tick_navgraph.types import (
    CARDINAL_OFFSETS,
    DIAGONAL_OFFSETS,
    Coord,
    Edge,
    Node,
    UnknownCellError,
)

if TYPE_CHECKING:
    from tick_navgraph.path import Path
    from tick_navgraph.types import Cell, GridSource

logger = logging.getLogger(__name__)


class Graph:
    """One Node per cell of ``source``, each with edges to its enterable neighbours.

    Nodes are stored in an arena keyed by coordinate and edges refer to
    their targets by coordinate. Edge costs are read from the source when
    edges are generated; after changing a cell call ``regenerate(cell)``.
    """

    def __init__(self, source: GridSource, config: GraphConfig | None = None) -> None:
        self._source = source
        self._config = config if config is not None else GraphConfig()
        self._nodes: dict[Coord, Node] = {}

        for x in range(source.width):
            for y in range(source.height):
                cell = source.cell_at(x, y)
                if cell is not None:
                    self._nodes[cell.position] = Node(cell)

        for node in self._nodes.values():
            self._generate_edges(node)

        logger.debug(
            "Built graph over %dx%d source: %d nodes",
            source.width, source.height, len(self._nodes),
        )

    # --- Properties ---

    @property
    def source(self) -> GridSource:
        return self._source

    @property
    def config(self) -> GraphConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, coord: object) -> bool:
        return coord in self._nodes

    # --- Lookup ---

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def node_at(self, coord: Coord) -> Node:
        """Return the node at ``coord``. Raises UnknownCellError if absent."""
        node = self._nodes.get(coord)
        if node is None:
            raise UnknownCellError(coord, f"No node at {coord} in graph")
        return node

    def node_for(self, cell: Cell) -> Node:
        """Return the node at ``cell``'s position.

        Cells are matched by coordinate, so a source may hand out a fresh
        cell object on every ``cell_at`` call.
        """
        node = self._nodes.get(cell.position)
        if node is None:
            raise UnknownCellError(
                cell.position, f"Cell {cell!r} is not part of this graph"
            )
        return node

    def neighbours(self, cell: Cell, diagonal: bool = True) -> list[Cell]:
        """Cells around ``cell`` as reported by the source, absent ones omitted."""
        x, y = cell.position
        offsets = CARDINAL_OFFSETS + DIAGONAL_OFFSETS if diagonal else CARDINAL_OFFSETS
        result: list[Cell] = []
        for dx, dy in offsets:
            neighbour = self._source.cell_at(x + dx, y + dy)
            if neighbour is not None:
                result.append(neighbour)
        return result

    # --- Edge generation ---

    def regenerate(self, cell: Cell | None) -> None:
        """Recompute edges of ``cell``'s node and of all 8 surrounding nodes.

        Unknown cells are ignored.
        """
        if cell is None:
            return
        node = self._nodes.get(cell.position)
        if node is None:
            logger.debug("Ignoring regenerate for unknown cell %r", cell)
            return

        self._generate_edges(node)
        x, y = node.coord
        for dx, dy in CARDINAL_OFFSETS + DIAGONAL_OFFSETS:
            neighbour = self._nodes.get((x + dx, y + dy))
            if neighbour is not None:
                self._generate_edges(neighbour)
        logger.debug("Regenerated edges around %s", node.coord)

    def rebuild(self) -> None:
        """Regenerate the edges of every node."""
        for node in self._nodes.values():
            self._generate_edges(node)
        logger.debug("Rebuilt edges for %d nodes", len(self._nodes))

    def _generate_edges(self, node: Node) -> None:
        edges: list[Edge] = []
        for neighbour in self.neighbours(node.cell, self._config.diagonal):
            if neighbour.position not in self._nodes:
                continue
            cost = neighbour.movement_cost
            if cost <= 0:
                continue
            if not self._config.corner_clipping and self._clips_corner(node.cell, neighbour):
                continue
            edges.append(Edge(cost, neighbour.position))
        node.edges = tuple(edges)

    def _clips_corner(self, current: Cell, neighbour: Cell) -> bool:
        cx, cy = current.position
        nx, ny = neighbour.position
        if abs(cx - nx) + abs(cy - ny) != 2 or cx == nx or cy == ny:
            return False
        # The two orthogonal cells shared by both endpoints.
        for x, y in ((nx, cy), (cx, ny)):
            between = self._source.cell_at(x, y)
            if between is None or between.movement_cost == 0:
                return True
        return False

    # --- Search ---

    def pathfinder(self, start: Cell, goal: Cell) -> Pathfinder:
        """Return a fresh, steppable search from ``start`` to ``goal``."""
        return Pathfinder(self, start, goal)

    def find_path(self, start: Cell | None, goal: Cell | None) -> Path | None:
        """Run a complete search. Returns None if there is no path.

        Unknown endpoints are logged as errors and also return None.
        """
        if start is None or goal is None:
            logger.error("find_path: start and goal are required (got %r, %r)", start, goal)
            return None
        try:
            finder = self.pathfinder(start, goal)
        except UnknownCellError as exc:
            logger.error("find_path: %s", exc.args[0])
            return None
        return finder.run()
