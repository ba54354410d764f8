from array import array
from typing import Iterator, NamedTuple, Tuple


class Cell(NamedTuple):
    """Read-only snapshot of one cell. walls is ordered (N, E, S, W)."""
    x: int
    y: int
    visited: bool
    walls: Tuple[bool, bool, bool, bool]


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED = 0b00010000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Neighbor scan order
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = 0
        self.height = 0
        self.cells = array('B')
        self.reset(width, height)

    def reset(self, width: int, height: int):
        """
        Replaces the whole grid with a fully walled, unvisited one.
        width is the number of columns, height the number of rows.
        """
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def remove_walls(self, current: Tuple[int, int], nxt: Tuple[int, int]):
        """
        Opens the wall between two 4-adjacent cells on both sides.
        """
        cx, cy = current
        nx, ny = nxt
        dx = cx - nx
        dy = cy - ny
        assert abs(dx) + abs(dy) == 1, f"Cells {current} and {nxt} are not adjacent"

        if dx == 1:
            dir_bit = self.WEST
        elif dx == -1:
            dir_bit = self.EAST
        elif dy == 1:
            dir_bit = self.NORTH
        else:
            dir_bit = self.SOUTH

        idx1 = self.get_index(cx, cy)
        idx2 = self.get_index(nx, ny)

        # Remove wall from current
        self.cells[idx1] &= ~dir_bit
        # Remove opposite wall from next
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def open_boundary(self, x: int, y: int, dir_bit: int):
        """
        Opens an outer wall of the grid. Only sides facing out of the grid
        are accepted, interior walls go through remove_walls.
        """
        idx = self.get_index(x, y)
        if self.is_in_bounds(x + self.DX[dir_bit], y + self.DY[dir_bit]):
            raise ValueError(f"Side {dir_bit} of ({x}, {y}) is not on the boundary")
        self.cells[idx] &= ~dir_bit

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def walls(self, x: int, y: int) -> Tuple[bool, bool, bool, bool]:
        val = self.cells[self.get_index(x, y)]
        return tuple((val & d) != 0 for d in self.DIRECTIONS)

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(x, y, (val & self.VISITED) != 0,
                    tuple((val & d) != 0 for d in self.DIRECTIONS))

    def __iter__(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.cell(x, y)

    def unvisited_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for in-bounds neighbors not yet visited, in N, E, S, W order.
        """
        for dir_bit in self.DIRECTIONS:
            nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
            if self.is_in_bounds(nx, ny) and not self.is_visited(nx, ny):
                yield (nx, ny)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        Open boundary sides lead nowhere and are skipped.
        """
        val = self.cells[y * self.width + x]

        if not (val & self.NORTH) and y > 0:
            yield (x, y - 1)
        if not (val & self.EAST) and x < self.width - 1:
            yield (x + 1, y)
        if not (val & self.SOUTH) and y < self.height - 1:
            yield (x, y + 1)
        if not (val & self.WEST) and x > 0:
            yield (x - 1, y)
