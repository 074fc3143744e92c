import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from walls_engine.core.grid import WallGrid
from walls_engine.core.stats import PuzzleStats
from walls_engine.algo.puzzle import PuzzleGenerator

class TestStats(unittest.TestCase):
    def test_full_layout(self):
        grid = WallGrid(2, 2)
        walls = [True] * 12
        for i in (0, 1, 3, 4, 9):
            walls[i] = False
        stats = PuzzleStats.calculate_stats(grid, walls)
        self.assertEqual(stats["clues"], 7)
        self.assertEqual(stats["boundary_clues"], 6)
        self.assertEqual(stats["interior_clues"], 1)
        # Every cell of a full layout is pinned
        self.assertEqual(stats["pinned_cells"], 4)
        self.assertAlmostEqual(stats["clue_percent"], 700 / 12)

    def test_no_clues(self):
        grid = WallGrid(3, 3)
        stats = PuzzleStats.calculate_stats(grid, [False] * grid.wall_count)
        self.assertEqual(stats["clues"], 0)
        self.assertEqual(stats["pinned_cells"], 0)

    def test_pruning_reduces_clues(self):
        grid = WallGrid(6, 6)
        gen = PuzzleGenerator(grid, seed=8)
        gen.run_all()
        full = PuzzleStats.calculate_stats(grid, gen.full_walls)
        pruned = PuzzleStats.calculate_stats(grid, gen.walls)
        self.assertLess(pruned["clues"], full["clues"])
        self.assertEqual(full["clues"], grid.wall_count - (grid.cell_count + 1))

if __name__ == '__main__':
    unittest.main()
