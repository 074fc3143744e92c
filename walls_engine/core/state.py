from array import array
from dataclasses import dataclass, field
from typing import Optional, Tuple

from walls_engine.algo.checker import Verdict, check_grid
from walls_engine.algo.solver import SolveResult, solve_grid
from walls_engine.core.grid import WallGrid
from walls_engine.core.params import Difficulty, GameParams
from walls_engine.io.descriptor import decode_walls

@dataclass(frozen=True)
class SharedClues:
    """Immutable per-puzzle data, shared by every snapshot of a game."""
    width: int
    height: int
    difficulty: Difficulty
    fixed: Tuple[bool, ...]
    grid: WallGrid = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'grid', WallGrid(self.width, self.height))
        if len(self.fixed) != self.grid.wall_count:
            raise ValueError(
                f"Expected {self.grid.wall_count} walls, got {len(self.fixed)}"
            )

class PuzzleState:
    """
    One snapshot of a game in progress. The clues are shared; lines,
    player walls and error marks belong to the snapshot.
    """
    __slots__ = ('clues', 'lines', 'errors', 'walls', 'completed', 'used_solve')

    def __init__(self, clues: SharedClues):
        grid = clues.grid
        self.clues = clues
        self.lines = array('B', [WallGrid.BLANK] * grid.cell_count)
        self.errors = array('B', [0] * grid.cell_count)
        self.walls = array('B', [1 if f else 0 for f in clues.fixed])
        self.completed = False
        self.used_solve = False

    @classmethod
    def from_descriptor(cls, params: GameParams, desc: str) -> "PuzzleState":
        params.validate()
        grid = WallGrid(params.width, params.height)
        fixed = decode_walls(desc, grid.wall_count)
        return cls(SharedClues(params.width, params.height, params.difficulty, tuple(fixed)))

    @property
    def grid(self) -> WallGrid:
        return self.clues.grid

    def dup(self) -> "PuzzleState":
        ret = PuzzleState.__new__(PuzzleState)
        ret.clues = self.clues
        ret.lines = array('B', self.lines)
        ret.errors = array('B', self.errors)
        ret.walls = array('B', self.walls)
        ret.completed = self.completed
        ret.used_solve = self.used_solve
        return ret

    def toggle_wall(self, wall: int):
        if not 0 <= wall < self.grid.wall_count:
            raise IndexError(f"Wall {wall} out of bounds")
        if self.clues.fixed[wall]:
            raise ValueError(f"Wall {wall} is a fixed clue")
        self.walls[wall] ^= 1

    def toggle_line(self, cell: int, direction: int):
        """
        Flips the line from `cell` through its `direction` side, and the
        matching half on the neighbouring cell when there is one.
        """
        grid = self.grid
        if self.walls[grid.cell_to_wall(cell, direction)]:
            raise ValueError(f"Cell {cell} is walled off on side {WallGrid.NAMES[direction]}")
        self.lines[cell] ^= direction
        other = grid.neighbor(cell, direction)
        if other is not None:
            self.lines[other] ^= WallGrid.OPPOSITE[direction]

    def solved(self, result: Optional[SolveResult] = None) -> "PuzzleState":
        """
        Copy with every line filled in from the solver. A result already
        computed for these clues can be passed in instead of solving again.
        """
        ret = self.dup()
        if result is None:
            result = solve_grid(self.grid, self.clues.fixed)
        for i, mask in enumerate(result.masks):
            ret.lines[i] = mask
        ret.used_solve = True
        return ret

    def verify(self) -> Verdict:
        """Checks the player's lines; flags cells that are not two-way."""
        for i, mask in enumerate(self.lines):
            self.errors[i] = 1 if mask and mask not in WallGrid.PAIRS else 0
        verdict = check_grid(self.grid, self.lines)
        self.completed = verdict == Verdict.SOLVABLE
        return verdict

    def format_text(self) -> str:
        grid = self.grid
        w, h = grid.width, grid.height
        walls, lines = self.walls, self.lines
        rows = []

        def horizontal(y: int, line_bit: int, line_row: int) -> str:
            s = []
            for x in range(w):
                wall = walls[grid.vertical_count + y * w + x]
                has_line = line_row >= 0 and lines[line_row * w + x] & line_bit
                s.append('+')
                s.append('-' if wall else ' ')
                s.append('*' if has_line else '-' if wall else ' ')
                s.append('-' if wall else ' ')
            s.append('+')
            return ''.join(s)

        for y in range(h):
            rows.append(horizontal(y, WallGrid.UP, y))
            s = []
            for x in range(w):
                wall = walls[y * (w + 1) + x]
                line = lines[y * w + x]
                left = line & WallGrid.LEFT
                s.append('*' if left else '|' if wall else ' ')
                s.append('*' if left else ' ')
                s.append('*' if line != WallGrid.BLANK else ' ')
                s.append('*' if line & WallGrid.RIGHT else ' ')
            right = lines[y * w + w - 1] & WallGrid.RIGHT
            s.append('*' if right else '|' if walls[y * (w + 1) + w] else ' ')
            rows.append(''.join(s))
        rows.append(horizontal(h, WallGrid.DOWN, h - 1))
        return '\n'.join(rows) + '\n'
