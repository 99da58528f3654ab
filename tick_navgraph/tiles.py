"""TileGrid - a rectangular grid of typed tiles usable as a GridSource."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tick_navgraph.types import CARDINAL_OFFSETS, DIAGONAL_OFFSETS, Coord


@dataclass(frozen=True)
class TileType:
    """Immutable tile type definition.

    Attributes:
        name: Unique identifier for this tile type.
        movement_cost: Cost of entering a tile of this type (0 = impassable).
    """

    name: str
    movement_cost: float = 1.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TileType name must be non-empty")
        if self.movement_cost < 0:
            raise ValueError(
                f"movement_cost must be >= 0, got {self.movement_cost}"
            )

    @property
    def passable(self) -> bool:
        return self.movement_cost > 0


FLOOR = TileType(name="floor", movement_cost=1.0)
WALL = TileType(name="wall", movement_cost=0.0)

DEFAULT_LEGEND: dict[str, TileType] = {".": FLOOR, "#": WALL}


@dataclass(eq=False)
class Tile:
    """A single grid cell. Identity is the tile object; position never changes."""

    x: int
    y: int
    type: TileType = FLOOR

    @property
    def position(self) -> Coord:
        return (self.x, self.y)

    @property
    def movement_cost(self) -> float:
        return self.type.movement_cost

    def __repr__(self) -> str:
        return f"Tile({self.x}, {self.y}, {self.type.name})"


class TileGrid:
    """Rectangular grid of mutable tiles, the reference GridSource.

    Coordinates run from (0, 0) at the south-west corner to
    (width - 1, height - 1). Every in-bounds coordinate holds a tile.
    """

    def __init__(self, width: int, height: int, default: TileType = FLOOR) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be >= 0, got {width}x{height}")
        self._width = width
        self._height = height
        self._tiles: dict[Coord, Tile] = {
            (x, y): Tile(x, y, default)
            for x in range(width)
            for y in range(height)
        }

    @classmethod
    def from_rows(
        cls,
        rows: list[str],
        legend: dict[str, TileType] | None = None,
    ) -> TileGrid:
        """Build a grid from ASCII rows, top row first.

        The first row is the northernmost (highest y). With the default
        legend ``.`` is floor and ``#`` is wall.
        """
        legend = DEFAULT_LEGEND if legend is None else legend
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"row {i} has length {len(row)}, expected {width}"
                )
            y = height - 1 - i
            for x, char in enumerate(row):
                if char not in legend:
                    raise ValueError(f"unknown tile character {char!r} at row {i}")
                grid._tiles[(x, y)].type = legend[char]
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid"
            )

    def tile_at(self, x: int, y: int) -> Tile | None:
        return self._tiles.get((x, y))

    def cell_at(self, x: int, y: int) -> Tile | None:
        return self.tile_at(x, y)

    def set_type(self, x: int, y: int, tile_type: TileType) -> Tile:
        """Change a tile's type in place and return the tile.

        Graphs built over this grid only see the change after
        ``Graph.regenerate(tile)``.
        """
        self._check_bounds(x, y)
        tile = self._tiles[(x, y)]
        tile.type = tile_type
        return tile

    def neighbours(self, tile: Tile, diagonal: bool = False) -> list[Tile]:
        """Return in-bounds neighbours: cardinal first, then diagonal."""
        offsets = CARDINAL_OFFSETS + DIAGONAL_OFFSETS if diagonal else CARDINAL_OFFSETS
        result: list[Tile] = []
        for dx, dy in offsets:
            neighbour = self._tiles.get((tile.x + dx, tile.y + dy))
            if neighbour is not None:
                result.append(neighbour)
        return result

    def tiles(self) -> Iterator[Tile]:
        """Iterate tiles column by column (x outer, y inner)."""
        for x in range(self._width):
            for y in range(self._height):
                yield self._tiles[(x, y)]

    def render(self, legend: dict[str, TileType] | None = None) -> list[str]:
        """Inverse of ``from_rows``: ASCII rows, top row first."""
        legend = DEFAULT_LEGEND if legend is None else legend
        chars = {tile_type: char for char, tile_type in legend.items()}
        rows: list[str] = []
        for y in range(self._height - 1, -1, -1):
            rows.append(
                "".join(chars.get(self._tiles[(x, y)].type, "?") for x in range(self._width))
            )
        return rows
