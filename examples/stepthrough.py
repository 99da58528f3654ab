"""Step-through A* -- watch the search frontier grow one expansion at a time.

Demonstrates:
- Building a TileGrid from ASCII rows
- Creating a Pathfinder and advancing it with step()
- Reading the open and closed sets between steps
- Walling off a cell, regenerating its edges, and searching again
- Consuming the finished path with the next_cell() cursor, goal first

Run: python -m examples.stepthrough
"""

import logging

from tick_navgraph import WALL, Graph, TileGrid
from tick_navgraph.pathfinder import Pathfinder

ROWS = [
    "##########",
    "#S...#...#",
    "#.##.#.#.#",
    "#..#...#.#",
    "##.#####.#",
    "#.......G#",
    "##########",
]


def draw(grid: TileGrid, finder: Pathfinder) -> None:
    # o = open, x = closed, * = path
    marks: dict[tuple[int, int], str] = {}
    for coord in finder.closed_set():
        marks[coord] = "x"
    for coord in finder.open_set():
        marks[coord] = "o"
    if finder.path is not None:
        for cell in finder.path:
            marks[cell.position] = "*"
    marks[finder.start.position] = "S"
    marks[finder.goal.position] = "G"

    for y, row in zip(range(grid.height - 1, -1, -1), grid.render()):
        print("  " + "".join(marks.get((x, y), ch) for x, ch in enumerate(row)))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    print("=== Step-through A* ===\n")

    grid = TileGrid.from_rows([row.replace("S", ".").replace("G", ".") for row in ROWS])
    graph = Graph(grid)
    start, goal = grid.tile_at(1, 5), grid.tile_at(8, 1)

    finder = graph.pathfinder(start, goal)
    while not finder.is_complete:
        finder.step()
        print(f"step {finder.steps}  state={finder.state.name}  open={len(finder.open_set())}")
        draw(grid, finder)
        print()

    print(f"Found: {finder.path}\n")

    # Block the corridor on the left and search again.
    graph.regenerate(grid.set_type(2, 2, WALL))
    detour = graph.find_path(start, goal)
    print(f"After walling (2, 2): {detour}\n")

    if detour is not None:
        print("Walking the path back from the goal:")
        cell = detour.next_cell()
        while cell is not None:
            print(f"  -> {cell.position}")
            cell = detour.next_cell()


if __name__ == "__main__":
    main()
