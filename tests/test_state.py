import unittest
from unittest import mock
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from walls_engine.core.grid import WallGrid
from walls_engine.core.params import GameParams
from walls_engine.core.state import PuzzleState
from walls_engine.algo.checker import Verdict
from walls_engine.algo.puzzle import generate, path_masks, PuzzleGenerator
from walls_engine.algo.solver import solve_grid
from walls_engine.io.descriptor import encode_walls, DescriptorError

L, R, U, D = WallGrid.LEFT, WallGrid.RIGHT, WallGrid.UP, WallGrid.DOWN

class TestPuzzleState(unittest.TestCase):
    def snake_state(self):
        walls = [True] * 12
        for i in (0, 1, 3, 4, 9):
            walls[i] = False
        return PuzzleState.from_descriptor(GameParams(2, 2), encode_walls(walls))

    def test_from_descriptor(self):
        state = self.snake_state()
        self.assertEqual(sum(state.clues.fixed), 7)
        self.assertEqual(list(state.walls), [1 if f else 0 for f in state.clues.fixed])
        self.assertFalse(state.completed)

        with self.assertRaises(DescriptorError):
            PuzzleState.from_descriptor(GameParams(2, 2), "3")

    def test_dup_shares_clues(self):
        state = self.snake_state()
        copy = state.dup()
        self.assertIs(copy.clues, state.clues)
        copy.toggle_line(0, R)
        self.assertEqual(state.lines[0], WallGrid.BLANK)
        self.assertEqual(copy.lines[0], R)

    def test_toggle_wall(self):
        state = self.snake_state()
        with self.assertRaises(ValueError):
            state.toggle_wall(2)  # fixed clue
        state.toggle_wall(1)
        self.assertEqual(state.walls[1], 1)
        state.toggle_wall(1)
        self.assertEqual(state.walls[1], 0)

    def test_toggle_line(self):
        state = self.snake_state()
        state.toggle_line(0, R)
        self.assertEqual(state.lines[0], R)
        self.assertEqual(state.lines[1], L)
        with self.assertRaises(ValueError):
            state.toggle_line(0, U)  # walled off

    def test_player_solution(self):
        state = self.snake_state()
        state.toggle_line(0, L)
        state.toggle_line(0, R)
        self.assertEqual(state.verify(), Verdict.UNSOLVABLE)
        self.assertEqual(state.errors[1], 1)  # one-ended cell

        state.toggle_line(1, D)
        state.toggle_line(3, L)
        state.toggle_line(2, L)
        self.assertEqual(state.verify(), Verdict.SOLVABLE)
        self.assertTrue(state.completed)
        self.assertEqual(list(state.errors), [0, 0, 0, 0])

    def test_solved(self):
        grid = WallGrid(5, 4)
        gen = PuzzleGenerator(grid, seed=11)
        gen.run_all()
        state = PuzzleState.from_descriptor(GameParams(5, 4), gen.descriptor)
        solved = state.solved()
        self.assertTrue(solved.used_solve)
        self.assertFalse(state.used_solve)
        self.assertEqual(list(solved.lines), path_masks(grid, gen.path))
        self.assertEqual(solved.verify(), Verdict.SOLVABLE)

    def test_solved_reuses_result(self):
        state = self.snake_state()
        result = solve_grid(state.grid, state.clues.fixed)
        with mock.patch('walls_engine.core.state.solve_grid') as patched:
            solved = state.solved(result)
        patched.assert_not_called()
        self.assertEqual(list(solved.lines), result.masks)
        self.assertTrue(solved.used_solve)

    def test_format_text(self):
        text = self.snake_state().format_text()
        self.assertEqual(text, (
            "+---+---+\n"
            "        |\n"
            "+---+   +\n"
            "        |\n"
            "+---+---+\n"
        ))

    def test_format_text_shape(self):
        _, desc = generate(4, 3, seed=5)
        state = PuzzleState.from_descriptor(GameParams(4, 3), desc).solved()
        rows = state.format_text().splitlines()
        self.assertEqual(len(rows), 2 * 3 + 1)
        for row in rows:
            self.assertEqual(len(row), 4 * 4 + 1)
        self.assertIn("*", state.format_text())

if __name__ == '__main__':
    unittest.main()
