import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from walls_engine.core.grid import WallGrid

class GenerationStalled(RuntimeError):
    """Raised when a randomized generator exceeds its step budget."""

class Generator(ABC):
    def __init__(self, grid: WallGrid, seed: int = None, rng: Optional[random.Random] = None,
                 max_steps: Optional[int] = None):
        self.grid = grid
        self.seed = seed
        # Injected source wins over the seed so nested generators share one stream
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_steps = max_steps
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        Results are left on the generator instance.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self

    def _tick(self):
        self.step_count += 1
        if self.max_steps is not None and self.step_count > self.max_steps:
            raise GenerationStalled(
                f"{type(self).__name__} gave up after {self.max_steps} steps "
                f"on a {self.grid.width}x{self.grid.height} grid"
            )
