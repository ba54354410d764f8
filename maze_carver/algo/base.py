import logging
import random
from abc import ABC, abstractmethod
from maze_carver.core.grid import Grid

logger = logging.getLogger(__name__)


class Generator(ABC):
    def __init__(self, grid: Grid, rng: random.Random = None, seed: int = None):
        self.grid = grid
        self.seed = seed
        # Explicit source wins, otherwise seed a private one (None -> OS entropy)
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.max_depth = 0

    @abstractmethod
    def carve(self):
        """
        Carves passages in place on self.grid until every cell is connected.
        """
        pass

    def generate(self) -> Grid:
        """Runs the algorithm to completion on a freshly reset grid and opens entry/exit."""
        if any(c & Grid.VISITED for c in self.grid.cells):
            raise ValueError("Grid has visited cells; reset it before generating")

        self.step_count = 0
        self.max_depth = 0
        self.carve()
        self.open_entry_exit()

        logger.debug(f"{type(self).__name__} carved {self.step_count} passages "
                     f"on {self.grid.width}x{self.grid.height}")
        return self.grid

    def open_entry_exit(self):
        # Entry (0,0) opens West, exit (w-1,h-1) opens East
        self.grid.open_boundary(0, 0, Grid.WEST)
        self.grid.open_boundary(self.grid.width - 1, self.grid.height - 1, Grid.EAST)
