from typing import Dict, Sequence

from ..verifiers.models import Grid, Position, PositionLike, to_position


def render_grid(grid: Grid) -> str:
    """Render the grid as space-separated letters, one row per line."""
    return '\n'.join(' '.join(row) for row in grid.cells)


def render_path(grid: Grid, path: Sequence[PositionLike]) -> str:
    """
    Render the grid with the cells of ``path`` numbered in visiting order.

    Cells on the path show ``<letter><step>`` (e.g. ``C1``), the rest show
    the letter followed by ``.``. Positions outside the grid are ignored.
    """
    steps: Dict[Position, int] = {}
    for i, raw in enumerate(path, start=1):
        position = to_position(raw)
        if grid.in_bounds(position) and position not in steps:
            steps[position] = i

    width = len(str(len(path))) + 1
    lines = []
    for r, row in enumerate(grid.cells):
        cells = []
        for c, letter in enumerate(row):
            step = steps.get(Position(r, c))
            marker = str(step) if step is not None else '.'
            cells.append(f"{letter}{marker}".ljust(width + 1))
        lines.append(' '.join(cells).rstrip())
    return '\n'.join(lines)


if __name__ == '__main__':
    example = Grid.from_rows(["CATS", "REIN", "OPLU", "DMGE"])
    path = [(0, 0), (0, 1), (0, 2), (0, 3)]

    print("Grid:")
    print(render_grid(example))
    print("\nPath CATS:")
    print(render_path(example, path))
