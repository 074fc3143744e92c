from typing import Sequence
from walls_engine.core.grid import WallGrid

class PuzzleStats:
    @staticmethod
    def calculate_stats(grid: WallGrid, walls: Sequence[bool]):
        """
        Clue statistics for a wall layout.
        A cell with two clue walls around it is already pinned: its line
        must use the other two sides.
        """
        if len(walls) != grid.wall_count:
            raise ValueError(f"Expected {grid.wall_count} walls, got {len(walls)}")

        clues = 0
        boundary = 0
        for i, present in enumerate(walls):
            if present:
                clues += 1
                if grid.is_boundary_wall(i):
                    boundary += 1

        pinned = 0
        for cell in range(grid.cell_count):
            around = sum(1 for wall in grid.cell_walls(cell) if walls[wall])
            if around == 2:
                pinned += 1

        total = grid.wall_count
        return {
            "walls": total,
            "clues": clues,
            "boundary_clues": boundary,
            "interior_clues": clues - boundary,
            "pinned_cells": pinned,
            "clue_percent": (clues / total) * 100 if total > 0 else 0
        }
