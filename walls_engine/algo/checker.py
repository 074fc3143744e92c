import logging
from enum import IntEnum
from typing import Sequence

from walls_engine.core.dsf import DisjointSet
from walls_engine.core.grid import WallGrid

logger = logging.getLogger(__name__)

class Verdict(IntEnum):
    SOLVABLE = 1
    UNSOLVABLE = 2
    AMBIGUOUS = 3

def check_grid(grid: WallGrid, masks: Sequence[int]) -> Verdict:
    """
    Decides whether a fully assigned direction mask per cell traces one
    path through every cell with exactly two exits on the boundary.
    """
    if len(masks) != grid.cell_count:
        raise ValueError(f"Expected {grid.cell_count} masks, got {len(masks)}")

    dsf = DisjointSet(grid.cell_count)
    exits = 0

    for i, r in enumerate(masks):
        if r not in WallGrid.PAIRS:
            logger.debug("Cell %d has mask %#x, not a two-way cell", i, r)
            return Verdict.UNSOLVABLE

        for d in WallGrid.DIRECTIONS:
            if not r & d:
                continue
            n = grid.neighbor(i, d)
            if n is None:
                exits += 1
                if exits > 2:
                    return Verdict.UNSOLVABLE
                continue
            # Links must be seen from both sides
            if not masks[n] & WallGrid.OPPOSITE[d]:
                return Verdict.UNSOLVABLE
            dsf.merge(i, n)

    if exits != 2:
        return Verdict.UNSOLVABLE

    first = dsf.find(0)
    for i in range(1, grid.cell_count):
        if dsf.find(i) != first:
            return Verdict.UNSOLVABLE

    return Verdict.SOLVABLE

def check_assignment(width: int, height: int, masks: Sequence[int]) -> Verdict:
    return check_grid(WallGrid(width, height), masks)
