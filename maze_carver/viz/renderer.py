import logging
from typing import Callable, List, Tuple
import pygame
from maze_carver import config
from maze_carver.algo.base import Generator
from maze_carver.core.grid import Cell, Grid
from maze_carver.viz.recorder import VideoRecorder, default_output_file

logger = logging.getLogger(__name__)

Segment = Tuple[Tuple[int, int], Tuple[int, int]]


def wall_segments(cell: Cell, cell_size: int) -> List[Segment]:
    """
    Line segments (pixel coordinates) for every closed side of a cell.
    """
    x = cell.x * cell_size
    y = cell.y * cell_size
    north, east, south, west = cell.walls

    segments = []
    if north:
        segments.append(((x, y), (x + cell_size, y)))
    if east:
        segments.append(((x + cell_size, y), (x + cell_size, y + cell_size)))
    if south:
        segments.append(((x, y + cell_size), (x + cell_size, y + cell_size)))
    if west:
        segments.append(((x, y), (x, y + cell_size)))
    return segments


class MazeViewer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (220, 220, 220)
    COLOR_TEXT = (150, 150, 150)

    def __init__(self, grid: Grid, generator_factory: Callable[[Grid], Generator],
                 width=config.WINDOW_WIDTH, height=config.WINDOW_HEIGHT,
                 cell_size=config.CELL_SIZE, record=False, output_file=None):
        self.grid = grid
        self.generator_factory = generator_factory
        self.screen_width = width
        self.screen_height = height
        self.cell_size = cell_size

        if record and output_file is None:
            output_file = default_output_file(grid.width, grid.height)
        self.recorder = VideoRecorder(output_file if record else None, fps=config.FPS)

        self.font = None
        self.instructions = None
        self.running = True
        self.regenerate_requested = False
        self.generations = 0
        self.clock = None
        self.surface = None

    def regenerate(self):
        """Reset the grid and carve a new maze before anything reads it again."""
        self.grid.reset(self.grid.width, self.grid.height)
        self.generator_factory(self.grid).generate()
        self.generations += 1
        logger.info(f"Generated maze #{self.generations} ({self.grid.width}x{self.grid.height})")

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        # SysFont falls back to pygame's default font when Arial is missing
        self.font = pygame.font.SysFont("Arial", config.FONT_SIZE)
        self.instructions = self.font.render(config.INSTRUCTIONS, True, self.COLOR_TEXT)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.regenerate_requested = True
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        for cell in self.grid:
            for start, end in wall_segments(cell, self.cell_size):
                pygame.draw.line(self.surface, self.COLOR_WALL, start, end, 1)

    def draw_hud(self):
        self.surface.blit(self.instructions, (10, self.screen_height - 25))

    def run_loop(self):
        while self.running:
            self.handle_input()

            # Regenerate fully before the next draw
            if self.regenerate_requested:
                self.regenerate()
                self.regenerate_requested = False

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(config.FPS)

        self.recorder.stop()
        pygame.quit()
