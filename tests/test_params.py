import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from walls_engine.core.params import Difficulty, GameParams, default_params, preset_names

class TestParams(unittest.TestCase):
    def test_decode(self):
        self.assertEqual(GameParams.decode("5x4dt"), GameParams(5, 4, Difficulty.TRICKY))
        self.assertEqual(GameParams.decode("6x3"), GameParams(6, 3, Difficulty.EASY))
        # A single number means a square board
        self.assertEqual(GameParams.decode("7"), GameParams(7, 7, Difficulty.EASY))
        # Unknown difficulty letters fall back to easy
        self.assertEqual(GameParams.decode("4x4dq").difficulty, Difficulty.EASY)
        self.assertEqual(GameParams.decode("4x4d").difficulty, Difficulty.EASY)
        for diff in Difficulty:
            self.assertIs(GameParams.decode(f"3x3d{diff.char}").difficulty, diff)

    def test_encode(self):
        p = GameParams(8, 6, Difficulty.HARD)
        self.assertEqual(p.encode(), "8x6dh")
        self.assertEqual(p.encode(full=False), "8x6")
        self.assertEqual(GameParams.decode(p.encode()), p)

    def test_validate(self):
        GameParams(2, 2).validate()
        with self.assertRaisesRegex(ValueError, "Width"):
            GameParams(1, 4).validate()
        with self.assertRaisesRegex(ValueError, "Height"):
            GameParams.decode("4x1").validate()

    def test_presets(self):
        self.assertEqual(default_params(), GameParams(5, 4, Difficulty.EASY))
        self.assertEqual(preset_names(), ["5x4 Easy", "4x5 Easy"])

    def test_difficulty_lookup(self):
        self.assertIs(Difficulty.from_char("t"), Difficulty.TRICKY)
        self.assertIs(Difficulty.from_name("Hard"), Difficulty.HARD)
        self.assertEqual(Difficulty.EASY.title, "Easy")
        with self.assertRaises(ValueError):
            Difficulty.from_char("x")

if __name__ == '__main__':
    unittest.main()
