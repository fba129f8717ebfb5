"""
Example: Maze - Compare Strategies on One Grid
==============================================

WHAT THIS SHOWS:
- Building a grid from ASCII and editing it with brush strokes
- Moving the single Start/End cells
- Running BFS and both DFS disciplines on the same grid
- Switching from 4-way to 8-way moves
- A* being reported as not implemented (not as "no path")

RUN:
    python examples/maze/run.py
"""

from pathgrid import (
    CellType,
    Direction,
    GridEditor,
    ReachabilityPolicy,
    SearchType,
    StrategyNotImplementedError,
    render_ascii,
)


MAZE = [
    "S.....#.........",
    "####..#..#####..",
    "......#..#......",
    ".######..#.####.",
    "......#..#....#.",
    "#####.#..####.#.",
    "......#.......#E",
]


def main():
    # ========================================
    # STEP 1: Build the grid
    # ========================================
    editor = GridEditor(len(MAZE), len(MAZE[0]), policy=ReachabilityPolicy.four_way())
    changes = []
    for row, line in enumerate(MAZE):
        for col, symbol in enumerate(line):
            cell = {"#": CellType.BLOCK, "S": CellType.START, "E": CellType.END}.get(symbol, CellType.FLOOR)
            changes.append((row, col, cell))
    editor.grid.set_many(changes)

    # A 3x3 block stroke (2 layers) in the open area on the right
    editor.paint(2, 12, CellType.BLOCK, layers=2)

    print("Initial grid:\n")
    print(render_ascii(editor.grid))
    print()

    # ========================================
    # STEP 2: Compare strategies
    # ========================================
    for strategy in (SearchType.BFS, SearchType.DFS_RECURSIVE, SearchType.DFS_ITERATIVE):
        report = editor.find_path(strategy)
        print(render_ascii(editor.grid))
        print()
        if report.path is not None:
            print(f"  {strategy.value}: {len(report.path)} cells\n")

    # ========================================
    # STEP 3: Allow diagonal moves
    # ========================================
    for direction in (Direction.NORTH_WEST, Direction.NORTH_EAST, Direction.SOUTH_WEST, Direction.SOUTH_EAST):
        editor.toggle_direction(direction)
    report = editor.find_path(SearchType.BFS, mark=CellType.PATH2)
    print(render_ascii(editor.grid))
    print(f"\n  8-way bfs: {report.steps} step(s)\n")

    # ========================================
    # STEP 4: Move the end cell and try A*
    # ========================================
    editor.paint(0, 15, CellType.END)
    try:
        editor.find_path(SearchType.ASTAR)
    except StrategyNotImplementedError as exc:
        print(str(exc).splitlines()[0])


if __name__ == "__main__":
    main()
