import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.core.analysis import MazeAnalyzer
from maze_carver.algo.dfs import RecursiveBacktracker

class TestAnalysis(unittest.TestCase):
    def test_fresh_grid(self):
        grid = Grid(3, 3)
        self.assertEqual(MazeAnalyzer.count_passages(grid), 0)
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))
        self.assertFalse(MazeAnalyzer.is_connected(grid))
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_cycle_is_not_perfect(self):
        grid = Grid(2, 2)
        grid.remove_walls((0, 0), (1, 0))
        grid.remove_walls((1, 0), (1, 1))
        grid.remove_walls((1, 1), (0, 1))
        grid.remove_walls((0, 1), (0, 0))

        self.assertEqual(MazeAnalyzer.count_passages(grid), 4)
        self.assertTrue(MazeAnalyzer.is_connected(grid))
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_boundary_openings_not_counted(self):
        grid = Grid(2, 1)
        grid.remove_walls((0, 0), (1, 0))
        grid.open_boundary(0, 0, Grid.WEST)
        grid.open_boundary(1, 0, Grid.EAST)
        self.assertEqual(MazeAnalyzer.count_passages(grid), 1)
        self.assertTrue(MazeAnalyzer.is_perfect(grid))

    def test_asymmetric_walls_detected(self):
        grid = Grid(2, 2)
        # Bypass remove_walls to break the invariant
        grid.cells[grid.get_index(0, 0)] &= ~Grid.EAST
        self.assertFalse(MazeAnalyzer.is_symmetric(grid))
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_corridor_stats(self):
        grid = Grid(3, 1)
        grid.remove_walls((0, 0), (1, 0))
        grid.remove_walls((1, 0), (2, 0))

        stats = MazeAnalyzer.calculate_stats(grid)
        self.assertEqual(stats["passages"], 2)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 1)
        self.assertEqual(stats["junctions"], 0)

    def test_generated_stats(self):
        w, h = 20, 20
        grid = Grid(w, h)
        RecursiveBacktracker(grid, seed=42).generate()

        stats = MazeAnalyzer.calculate_stats(grid)
        self.assertEqual(stats["passages"], w * h - 1)
        self.assertGreater(stats["dead_ends"], 0)
        # Tree of n cells: every cell has at least one exit
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)

if __name__ == '__main__':
    unittest.main()
