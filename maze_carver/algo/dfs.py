from typing import List, Tuple
from maze_carver.algo.base import Generator


class RecursiveBacktracker(Generator):
    def carve(self):
        rng = self.rng
        grid = self.grid

        # Random start cell
        start_x = rng.randrange(grid.width)
        start_y = rng.randrange(grid.height)
        grid.set_visited(start_x, start_y)

        # Stack of (x, y)
        stack: List[Tuple[int, int]] = [(start_x, start_y)]
        self.max_depth = 1

        while stack:
            current = stack[-1]

            neighbors = list(grid.unvisited_neighbors(*current))

            if not neighbors:
                # Backtrack
                stack.pop()
                continue

            # Choose random neighbor
            nxt = rng.choice(neighbors)

            # Carve
            grid.set_visited(*nxt)
            grid.remove_walls(current, nxt)

            stack.append(nxt)
            self.step_count += 1
            if len(stack) > self.max_depth:
                self.max_depth = len(stack)
