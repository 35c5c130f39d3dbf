import logging
from typing import Iterator, List, Tuple
from maze_carver.core.grid import Grid, OutOfBounds
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

# (x, y, shuffled directions, index of next direction to try)
Frame = Tuple[int, int, List[int], int]

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving. A cell with no passage bits is unvisited;
    there is no separate visited set.

    The depth-first descent is kept on an explicit stack so large grids do not
    hit the interpreter recursion limit. Directions are shuffled when a cell
    is entered, which consumes random draws in the same order as the
    recursive formulation.
    """

    def shuffled_directions(self) -> List[int]:
        directions = list(Grid.DIRECTIONS)
        for i in range(3):
            r = self.rng.randint(i, 3)
            directions[i], directions[r] = directions[r], directions[i]
        return directions

    def carve_from(self, x: int, y: int) -> Iterator[str]:
        grid = self.grid
        if not grid.in_bounds(x, y):
            raise OutOfBounds(f"Start cell ({x}, {y}) out of bounds")

        stack: List[Frame] = [(x, y, self.shuffled_directions(), 0)]

        while stack:
            cx, cy, directions, i = stack[-1]

            if i == 4:
                # Backtrack
                stack.pop()
                continue

            stack[-1] = (cx, cy, directions, i + 1)
            direction = directions[i]
            nx, ny = grid.neighbor(cx, cy, direction)

            if grid.in_bounds(nx, ny) and grid.get(nx, ny) == 0:
                grid.set_passage(cx, cy, direction)
                grid.set_passage(nx, ny, Grid.OPPOSITE[direction])
                stack.append((nx, ny, self.shuffled_directions(), 0))
                self.step_count += 1

                if self.step_count % self.progress_interval == 0:
                    yield f"Carving... Stack: {len(stack)}"

    def run(self, start: Tuple[int, int] = (0, 0)) -> Iterator[str]:
        logger.debug(f"Carving {self.grid.width}x{self.grid.height} from {start} (seed={self.seed})")
        yield from self.carve_from(*start)
        logger.debug(f"Carved {self.step_count} passages")
        yield "Done"
