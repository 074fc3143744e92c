import logging
from typing import Iterator, List, Set, Tuple
from walls_engine.core.grid import WallGrid
from walls_engine.algo.base import Generator

logger = logging.getLogger(__name__)

class BackbitePath(Generator):
    """
    Random Hamiltonian path by backbite moves.

    The walk grows or folds one end at a time. On a full board every
    neighbour of an end is already on the path, so further moves only
    fold; that is how the ends get pushed out to the boundary.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.path: List[Tuple[int, int]] = []
        self.on_path: Set[Tuple[int, int]] = set()

    def run(self) -> Iterator[str]:
        w, h = self.grid.width, self.grid.height
        total = w * h
        rng = self.rng

        start = (rng.randrange(w), rng.randrange(h))
        self.path = [start]
        self.on_path = {start}

        while len(self.path) < total:
            self._tick()
            if rng.randrange(2) == 0:
                self.bite_head(self.random_step())
            else:
                self.bite_tail(self.random_step())

            if self.step_count % 1000 == 0:
                yield f"Path: {len(self.path)}/{total}"

        logger.debug("Path covers %d cells after %d steps", total, self.step_count)

        # Anchor both ends on the boundary
        while not self.grid.is_boundary(*self.path[0]):
            self._tick()
            self.bite_head(self.random_step())
        while not self.grid.is_boundary(*self.path[-1]):
            self._tick()
            self.bite_tail(self.random_step())

        yield "Done"

    def random_step(self) -> int:
        return WallGrid.DIRECTIONS[self.rng.randrange(4)]

    def _neighbour(self, end: Tuple[int, int], step: int):
        nx, ny = end[0] + WallGrid.DX[step], end[1] + WallGrid.DY[step]
        if self.grid.in_bounds(nx, ny):
            return (nx, ny)
        return None

    def bite_head(self, step: int) -> bool:
        """One backbite at path[0]. Returns False when the step leaves the grid."""
        neigh = self._neighbour(self.path[0], step)
        if neigh is None:
            return False
        path = self.path

        if neigh in self.on_path:
            # Cells adjacent to the head always sit at odd indices
            i = path.index(neigh)
            path[:i] = path[i - 1::-1]
        else:
            path.reverse()
            path.append(neigh)
            self.on_path.add(neigh)
        return True

    def bite_tail(self, step: int) -> bool:
        """One backbite at path[-1]. Returns False when the step leaves the grid."""
        neigh = self._neighbour(self.path[-1], step)
        if neigh is None:
            return False
        path = self.path

        if neigh in self.on_path:
            i = path.index(neigh)
            path[i + 1:] = path[:i:-1]
        else:
            path.append(neigh)
            self.on_path.add(neigh)
        return True
