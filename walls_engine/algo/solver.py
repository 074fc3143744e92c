import logging
from array import array
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from walls_engine.algo.checker import Verdict, check_grid
from walls_engine.core.grid import WallGrid

logger = logging.getLogger(__name__)

class Contradiction(Exception):
    """Raised mid-sweep when the clues admit no assignment at all."""

@dataclass
class SolveResult:
    verdict: Verdict
    masks: List[int] = field(default_factory=list)
    sweeps: int = 0

class PropagationSolver:
    """
    Local constraint propagation between wall states and per-cell
    candidate masks, swept to a fixpoint. No case splitting: clue sets
    that need a global guess come back AMBIGUOUS.
    """
    # Tri-state wall values
    CONNECTED = 1
    DISCONNECTED = 2
    UNKNOWN = 3

    def __init__(self, grid: WallGrid):
        self.grid = grid
        # Wall indices per cell, computed once per board size
        self.cell_walls: List[Tuple[int, int, int, int]] = [
            grid.cell_walls(i) for i in range(grid.cell_count)
        ]
        self.result: Optional[SolveResult] = None

    def run(self, clues: Sequence[bool]) -> Iterator[str]:
        """
        Yields after every sweep. The outcome is left in self.result.
        `clues` holds one truthy entry per wall segment that is present.
        """
        grid = self.grid
        if len(clues) != grid.wall_count:
            raise ValueError(f"Expected {grid.wall_count} walls, got {len(clues)}")

        masks = array('B', [WallGrid.ALL_DIRECTIONS] * grid.cell_count)
        tc = array('B', [self.DISCONNECTED if c else self.UNKNOWN for c in clues])
        sweeps = 0

        try:
            while True:
                sweeps += 1
                changed = self._sweep(masks, tc)
                yield f"Sweep {sweeps}"
                if not changed:
                    break
        except Contradiction as e:
            logger.debug("Contradiction after %d sweeps: %s", sweeps, e)
            self.result = SolveResult(Verdict.UNSOLVABLE, list(masks), sweeps)
            yield "Unsolvable"
            return

        if any(m not in WallGrid.PAIRS for m in masks):
            verdict = Verdict.AMBIGUOUS
        else:
            verdict = check_grid(grid, masks)

        self.result = SolveResult(verdict, list(masks), sweeps)
        yield verdict.name.title()

    def solve(self, clues: Sequence[bool]) -> SolveResult:
        for _ in self.run(clues):
            pass
        return self.result

    def _sweep(self, masks, tc) -> bool:
        CON, DIS, UNK = self.CONNECTED, self.DISCONNECTED, self.UNKNOWN
        directions = WallGrid.DIRECTIONS
        pairs = WallGrid.PAIRS
        popcount = WallGrid.popcount
        changed = False

        for cell, walls in enumerate(self.cell_walls):
            mask = masks[cell]
            connected = 0

            for d, wall in zip(directions, walls):
                state = tc[wall]
                if state == DIS:
                    # Wall -> cell
                    if mask & d:
                        mask &= ~d
                        changed = True
                elif not mask & d:
                    # Cell -> wall
                    if state == UNK:
                        tc[wall] = DIS
                        changed = True
                    else:
                        # Guard only: a cleared bit closes its wall in the same visit
                        raise Contradiction(f"cell {cell} crosses wall {wall} it ruled out")
                elif state == CON:
                    connected |= d

            # Two crossings pin the cell
            if connected:
                n = popcount(connected)
                if n > 2:
                    raise Contradiction(f"cell {cell} has {n} connected walls")
                if n == 2 and mask != connected:
                    mask = connected
                    changed = True

            if popcount(mask) < 2:
                raise Contradiction(f"cell {cell} left with mask {mask:#x}")

            # A settled cell settles its four walls
            if mask in pairs:
                for d, wall in zip(directions, walls):
                    if tc[wall] == UNK:
                        tc[wall] = CON if mask & d else DIS
                        changed = True

            masks[cell] = mask

        return changed

def solve_grid(grid: WallGrid, walls: Sequence[bool]) -> SolveResult:
    return PropagationSolver(grid).solve(walls)

def solve(width: int, height: int, walls: Sequence[bool]) -> Tuple[Verdict, List[int]]:
    """Solves a clue layout; returns the verdict and the final cell masks."""
    result = solve_grid(WallGrid(width, height), walls)
    return result.verdict, result.masks
