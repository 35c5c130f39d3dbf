from collections import deque
from typing import Dict, Any

import numpy as np

from maze_carver.core.grid import Grid

class MazeStats:
    @staticmethod
    def exit_counts(grid: Grid) -> np.ndarray:
        """Number of open passages per cell, shaped (height, width)."""
        cells = grid.to_numpy()
        counts = np.zeros(cells.shape, dtype=np.int32)
        for direction in Grid.DIRECTIONS:
            counts += (cells & direction) != 0
        return counts

    @staticmethod
    def edge_count(grid: Grid) -> int:
        # Every passage is stored on both of its cells
        return int(MazeStats.exit_counts(grid).sum()) // 2

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """
        True when every open bit is mirrored by the opposite bit on its
        neighbor and no passage leads off the edge of the grid.
        """
        cells = grid.to_numpy()
        north = (cells & Grid.NORTH) != 0
        south = (cells & Grid.SOUTH) != 0
        east = (cells & Grid.EAST) != 0
        west = (cells & Grid.WEST) != 0

        if north[0, :].any() or south[-1, :].any():
            return False
        if west[:, 0].any() or east[:, -1].any():
            return False

        return bool(np.array_equal(south[:-1, :], north[1:, :])
                    and np.array_equal(east[:, :-1], west[:, 1:]))

    @staticmethod
    def reachable_count(grid: Grid, start=(0, 0)) -> int:
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for nxt in grid.get_open_neighbors(x, y):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Spanning tree check: symmetric, connected, exactly n-1 passages."""
        total = grid.width * grid.height
        if not MazeStats.is_symmetric(grid):
            return False
        if MazeStats.edge_count(grid) != total - 1:
            return False
        return MazeStats.reachable_count(grid) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        counts = MazeStats.exit_counts(grid)
        total = grid.width * grid.height

        dead_ends = int(np.count_nonzero(counts == 1))
        return {
            "dead_ends": dead_ends,
            "corridors": int(np.count_nonzero(counts == 2)),
            "junctions": int(np.count_nonzero(counts >= 3)),
            "isolated": int(np.count_nonzero(counts == 0)),
            "edges": int(counts.sum()) // 2,
            "dead_end_percent": (dead_ends / total) * 100,
        }
