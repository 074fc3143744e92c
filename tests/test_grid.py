import unittest
import sys
import os

# Add project root to path so we can import walls_engine
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from walls_engine.core.grid import WallGrid

L, R, U, D = WallGrid.LEFT, WallGrid.RIGHT, WallGrid.UP, WallGrid.DOWN

class TestWallGrid(unittest.TestCase):
    def test_wall_count(self):
        grid = WallGrid(2, 2)
        # 3 vertical per row * 2 rows + 2 horizontal per row * 3 rows
        self.assertEqual(grid.wall_count, 12)
        self.assertEqual(WallGrid(5, 4).wall_count, 6 * 4 + 5 * 5)

    def test_known_indices(self):
        grid = WallGrid(2, 2)
        self.assertEqual(grid.cell_to_wall(0, L), 0)
        self.assertEqual(grid.cell_to_wall(0, R), 1)
        self.assertEqual(grid.cell_to_wall(1, R), 2)
        self.assertEqual(grid.cell_to_wall(2, L), 3)
        self.assertEqual(grid.cell_to_wall(0, U), 6)
        self.assertEqual(grid.cell_to_wall(0, D), 8)
        self.assertEqual(grid.cell_to_wall(3, D), 11)

    def test_mutual_inverse(self):
        for w, h in [(2, 2), (3, 2), (2, 5), (4, 4), (7, 3)]:
            grid = WallGrid(w, h)
            for cell in range(grid.cell_count):
                for d in WallGrid.DIRECTIONS:
                    wall = grid.cell_to_wall(cell, d)
                    self.assertEqual(grid.wall_to_cell(wall, d), cell,
                                     f"{w}x{h} cell {cell} dir {d}")

    def test_neighbours_share_walls(self):
        grid = WallGrid(4, 3)
        for cell in range(grid.cell_count):
            for d in WallGrid.DIRECTIONS:
                other = grid.neighbor(cell, d)
                if other is None:
                    continue
                self.assertEqual(grid.cell_to_wall(cell, d),
                                 grid.cell_to_wall(other, WallGrid.OPPOSITE[d]))

    def test_boundary_sides_are_none(self):
        grid = WallGrid(3, 3)
        left_edge = grid.cell_to_wall(grid.get_index(0, 1), L)
        self.assertIsNone(grid.wall_to_cell(left_edge, R))
        bottom_edge = grid.cell_to_wall(grid.get_index(2, 2), D)
        self.assertIsNone(grid.wall_to_cell(bottom_edge, U))
        # Vertical walls do not answer UP/DOWN
        self.assertIsNone(grid.wall_to_cell(left_edge, U))

    def test_wall_sides(self):
        w, h = 4, 3
        grid = WallGrid(w, h)
        boundary = [i for i in range(grid.wall_count) if grid.is_boundary_wall(i)]
        self.assertEqual(len(boundary), 2 * w + 2 * h)
        for wall in range(grid.wall_count):
            a, b = grid.wall_cells(wall)
            self.assertFalse(a is None and b is None)

        # Vertical walls come first and split left from right
        self.assertTrue(grid.is_vertical(grid.vertical_count - 1))
        self.assertFalse(grid.is_vertical(grid.vertical_count))
        self.assertEqual(grid.wall_cells(1), (0, 1))
        self.assertEqual(grid.wall_cells(grid.cell_to_wall(0, D)), (0, w))
        self.assertEqual(grid.wall_cells(0), (None, 0))

    def test_out_of_bounds(self):
        grid = WallGrid(3, 3)
        with self.assertRaises(IndexError):
            grid.cell_to_wall(9, L)
        with self.assertRaises(IndexError):
            grid.wall_to_cell(grid.wall_count, L)
        with self.assertRaises(IndexError):
            grid.get_index(3, 0)
        with self.assertRaises(ValueError):
            grid.cell_to_wall(0, 0x10)

    def test_exit_direction(self):
        grid = WallGrid(3, 3)
        self.assertEqual(grid.exit_direction(0, 0), L)
        self.assertEqual(grid.exit_direction(2, 0), R)
        self.assertEqual(grid.exit_direction(1, 0), U)
        self.assertEqual(grid.exit_direction(1, 2), D)
        with self.assertRaises(ValueError):
            grid.exit_direction(1, 1)

    def test_pairs(self):
        self.assertEqual(len(WallGrid.PAIRS), 6)
        for mask in WallGrid.PAIRS:
            self.assertEqual(WallGrid.popcount(mask), 2)
        self.assertEqual(WallGrid.direction_between(1, 1, 1, 0), U)

if __name__ == '__main__':
    unittest.main()
