from array import array
from typing import Iterator, Tuple

import numpy as np


class MazeError(Exception):
    """Base class for errors raised by the maze core."""


class InvalidDimension(MazeError, ValueError):
    pass


class OutOfBounds(MazeError, IndexError):
    pass


class Grid:
    # Passage bits: a set bit means the wall in that direction is carved open
    NORTH = 0b0001
    SOUTH = 0b0010
    EAST  = 0b0100
    WEST  = 0b1000

    ALL_PASSAGES = NORTH | SOUTH | EAST | WEST

    # Direction Helpers
    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimension(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidDimension(f"{name} must be at least 1, got {value}")

        self.width = width
        self.height = height
        # No passages anywhere (value 0), 1 byte per cell
        self.cells = array('B', [0] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise OutOfBounds(f"Coordinate ({x}, {y}) out of bounds for {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def set_passage(self, x: int, y: int, direction: int):
        """
        Opens the passage bit for 'direction' on cell (x, y) only.
        The neighbor's opposite bit is the caller's responsibility.
        """
        if direction not in self.OPPOSITE:
            raise ValueError(f"Unknown direction bit {direction!r}")
        self.cells[self.get_index(x, y)] |= direction

    def has_passage(self, x: int, y: int, direction: int) -> bool:
        return (self.get(x, y) & direction) != 0

    def neighbor(self, x: int, y: int, direction: int) -> Tuple[int, int]:
        return x + self.DX[direction], y + self.DY[direction]

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for every neighbor reachable through an open passage.
        """
        val = self.get(x, y)
        for direction in self.DIRECTIONS:
            if val & direction:
                nx, ny = self.neighbor(x, y, direction)
                if self.in_bounds(nx, ny):
                    yield (nx, ny)

    def to_numpy(self) -> np.ndarray:
        return np.frombuffer(self.cells.tobytes(), dtype=np.uint8).reshape(self.height, self.width).copy()

    def inspect(self) -> str:
        """Dumps raw cell values row by row, mainly for debugging."""
        rows = []
        for y in range(self.height):
            start = y * self.width
            rows.append(" ".join(str(v) for v in self.cells[start:start + self.width]))
        return "\n".join(rows)
