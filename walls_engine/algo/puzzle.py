import logging
import random
from typing import Iterator, List, Optional, Sequence, Tuple

from walls_engine.algo.backbite import BackbitePath
from walls_engine.algo.base import Generator
from walls_engine.algo.checker import Verdict
from walls_engine.algo.solver import PropagationSolver
from walls_engine.core.grid import WallGrid
from walls_engine.core.params import Difficulty
from walls_engine.io.descriptor import encode_walls

logger = logging.getLogger(__name__)

def walls_from_path(grid: WallGrid, path: Sequence[Tuple[int, int]]) -> List[bool]:
    """
    Full wall layout for a Hamiltonian path: every wall present except
    those between consecutive cells and the two boundary exits.
    """
    walls = [True] * grid.wall_count

    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        d = grid.direction_between(x1, y1, x2, y2)
        walls[grid.cell_to_wall(grid.get_index(x1, y1), d)] = False

    for x, y in (path[0], path[-1]):
        walls[grid.cell_to_wall(grid.get_index(x, y), grid.exit_direction(x, y))] = False

    return walls

def path_masks(grid: WallGrid, path: Sequence[Tuple[int, int]]) -> List[int]:
    """Direction mask per cell for the line that follows `path` out both ends."""
    masks = [WallGrid.BLANK] * grid.cell_count
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        d = grid.direction_between(x1, y1, x2, y2)
        masks[grid.get_index(x1, y1)] |= d
        masks[grid.get_index(x2, y2)] |= WallGrid.OPPOSITE[d]
    for x, y in (path[0], path[-1]):
        masks[grid.get_index(x, y)] |= grid.exit_direction(x, y)
    return masks

class PuzzleGenerator(Generator):
    """
    Builds a puzzle: random Hamiltonian path, its full wall layout, then
    greedy removal of every wall the solver can do without.

    Difficulty is recorded but does not yet steer which walls survive.
    """
    def __init__(self, grid: WallGrid, seed: int = None, rng: Optional[random.Random] = None,
                 max_steps: Optional[int] = None, difficulty: Difficulty = Difficulty.EASY):
        super().__init__(grid, seed=seed, rng=rng, max_steps=max_steps)
        self.difficulty = difficulty
        self.path: List[Tuple[int, int]] = []
        self.full_walls: List[bool] = []
        self.walls: List[bool] = []
        self.descriptor: Optional[str] = None

    def run(self) -> Iterator[str]:
        grid = self.grid
        logger.debug("Generating %dx%d puzzle (difficulty %s)",
                     grid.width, grid.height, self.difficulty.title)

        builder = BackbitePath(grid, rng=self.rng, max_steps=self.max_steps)
        yield from builder.run()
        self.path = builder.path
        self.step_count = builder.step_count

        self.full_walls = walls_from_path(grid, self.path)
        walls = list(self.full_walls)

        candidates = [i for i, present in enumerate(walls) if present]
        self.rng.shuffle(candidates)

        solver = PropagationSolver(grid)
        removed = 0
        for n, index in enumerate(candidates, 1):
            walls[index] = False
            if solver.solve(walls).verdict != Verdict.SOLVABLE:
                walls[index] = True
            else:
                removed += 1
            if n % 50 == 0:
                yield f"Pruning: {n}/{len(candidates)}"

        self.walls = walls
        self.descriptor = encode_walls(walls)
        logger.debug("Kept %d of %d walls as clues", len(candidates) - removed, grid.wall_count)
        yield "Done"

def generate(width: int, height: int, rng: Optional[random.Random] = None, seed: int = None,
             difficulty: Difficulty = Difficulty.EASY,
             max_steps: Optional[int] = None) -> Tuple[List[bool], str]:
    """Returns the fixed clue walls and their descriptor string."""
    gen = PuzzleGenerator(WallGrid(width, height), seed=seed, rng=rng,
                          max_steps=max_steps, difficulty=difficulty)
    gen.run_all()
    return gen.walls, gen.descriptor
