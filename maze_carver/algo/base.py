import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from maze_carver.core.grid import Grid

class Generator(ABC):
    # Carving steps between progress yields
    progress_interval = 100

    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        self.seed = seed
        # Owned stream; never the module-level random state
        self.rng = random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
