"""Path - an immutable route of cells with a single-pass cursor."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from tick_navgraph.types import Cell


class Path:
    """Cells from start to destination, plus the total movement cost.

    Iteration, ``reversed()`` and membership never touch the cursor.
    ``next_cell()`` hands out cells from the destination back to the start,
    each exactly once, and returns None afterwards. Membership compares
    cells by position.
    """

    def __init__(self, cells: Iterable[Cell], cost: float = 0.0) -> None:
        self._cells: tuple[Cell, ...] = tuple(cells)
        self._cost = cost
        self._cursor = len(self._cells) - 1

    @classmethod
    def from_predecessors(cls, chain: Iterable[Cell], cost: float = 0.0) -> Path:
        """Build from a goal-to-start chain, as produced by walking predecessors."""
        return cls(reversed(list(chain)), cost)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    @property
    def cost(self) -> float:
        return self._cost

    @property
    def start(self) -> Cell | None:
        return self._cells[0] if self._cells else None

    @property
    def destination(self) -> Cell | None:
        return self._cells[-1] if self._cells else None

    @property
    def remaining(self) -> int:
        """Cells not yet handed out by ``next_cell()``."""
        return self._cursor + 1

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __reversed__(self) -> Iterator[Cell]:
        return reversed(self._cells)

    def __contains__(self, cell: object) -> bool:
        position = getattr(cell, "position", None)
        return any(c.position == position for c in self._cells)

    def next_cell(self) -> Cell | None:
        """Hand out the next unconsumed cell, destination first."""
        if self._cursor < 0:
            return None
        cell = self._cells[self._cursor]
        self._cursor -= 1
        return cell

    def __repr__(self) -> str:
        coords = " -> ".join(str(c.position) for c in self._cells)
        return f"Path({coords}, cost={self._cost:.3f})"
