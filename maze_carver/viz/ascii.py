from typing import List
from maze_carver.core.grid import Grid

CORNER = "+"
H_WALL = "---"
H_OPEN = "   "
V_WALL = "|"
V_OPEN = " "


def render_ascii(grid: Grid) -> str:
    """
    Draws the maze as text. Each cell is three characters wide; corners are '+'.
    Open boundary sides (entry/exit) show up as gaps in the frame.
    """
    lines: List[str] = []

    top = [CORNER]
    for x in range(grid.width):
        top.append(H_WALL if grid.has_wall(x, 0, Grid.NORTH) else H_OPEN)
        top.append(CORNER)
    lines.append("".join(top))

    for y in range(grid.height):
        row = []
        bottom = [CORNER]
        for x in range(grid.width):
            row.append(V_WALL if grid.has_wall(x, y, Grid.WEST) else V_OPEN)
            row.append(H_OPEN)
            bottom.append(H_WALL if grid.has_wall(x, y, Grid.SOUTH) else H_OPEN)
            bottom.append(CORNER)
        row.append(V_WALL if grid.has_wall(grid.width - 1, y, Grid.EAST) else V_OPEN)
        lines.append("".join(row))
        lines.append("".join(bottom))

    return "\n".join(lines)
