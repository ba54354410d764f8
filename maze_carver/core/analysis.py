from collections import deque
from maze_carver.core.grid import Grid


class MazeAnalyzer:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Number of open interior walls, each adjacent pair counted once.
        Only East and South sides are inspected so every pair is seen once;
        boundary openings (entry/exit) never count.
        """
        count = 0
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1 and not grid.has_wall(x, y, Grid.EAST):
                    count += 1
                if y < grid.height - 1 and not grid.has_wall(x, y, Grid.SOUTH):
                    count += 1
        return count

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1:
                    if grid.has_wall(x, y, Grid.EAST) != grid.has_wall(x + 1, y, Grid.WEST):
                        return False
                if y < grid.height - 1:
                    if grid.has_wall(x, y, Grid.SOUTH) != grid.has_wall(x, y + 1, Grid.NORTH):
                        return False
        return True

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        """BFS from (0,0) over open interior walls must reach every cell."""
        seen = bytearray(grid.width * grid.height)
        seen[0] = 1
        reached = 1
        queue = deque([(0, 0)])

        while queue:
            cx, cy = queue.popleft()
            for nx, ny in grid.get_open_neighbors(cx, cy):
                idx = ny * grid.width + nx
                if not seen[idx]:
                    seen[idx] = 1
                    reached += 1
                    queue.append((nx, ny))

        return reached == grid.width * grid.height

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # Connected with exactly n-1 edges <=> spanning tree
        return (MazeAnalyzer.is_symmetric(grid)
                and MazeAnalyzer.count_passages(grid) == grid.width * grid.height - 1
                and MazeAnalyzer.is_connected(grid))

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0
        junctions = 0

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: junctions += 1

        total = grid.width * grid.height
        return {
            "passages": MazeAnalyzer.count_passages(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
