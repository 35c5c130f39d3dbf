import sys
import time
from typing import List, Optional, TextIO
from maze_carver.core.grid import Grid
from maze_carver.algo.base import Generator

# Moves the cursor to the top-left corner without clearing
CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"

class AsciiRenderer:
    """
    Draws a carved grid as text:

         ___
        |   |
        |_|_|
        width: 2, height: 2, seed: 7

    The floor of a cell and the ceiling of the row below share one
    underscore, so an open East passage is drawn as '_' only when neither
    side of it has a South opening.
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        self.seed = seed

    def top_line(self) -> str:
        return " " + "_" * (2 * self.grid.width - 1)

    def row_line(self, y: int) -> str:
        grid = self.grid
        out = ["|"]
        for x in range(grid.width):
            val = grid.get(x, y)
            out.append(" " if val & Grid.SOUTH else "_")

            if val & Grid.EAST:
                if (val | grid.get(x + 1, y)) & Grid.SOUTH:
                    out.append(" ")
                else:
                    out.append("_")
            else:
                out.append("|")
        return "".join(out)

    def metadata_line(self) -> str:
        return f"width: {self.grid.width}, height: {self.grid.height}, seed: {self.seed}"

    def lines(self) -> List[str]:
        lines = [self.top_line()]
        lines.extend(self.row_line(y) for y in range(self.grid.height))
        lines.append(self.metadata_line())
        return lines

    def draw(self) -> str:
        return "\n".join(self.lines()) + "\n"


def animate(generator: Generator, seed: Optional[int] = None, delay: float = 0.04,
            stream: Optional[TextIO] = None):
    """
    Redraws the diagram in place after every carving step, then once more
    when the generator is done.
    """
    if stream is None:
        stream = sys.stdout

    renderer = AsciiRenderer(generator.grid, seed=seed)
    generator.progress_interval = 1

    stream.write(CLEAR_SCREEN)
    for _ in generator.run():
        stream.write(CURSOR_HOME + renderer.draw())
        stream.flush()
        if delay > 0:
            time.sleep(delay)
