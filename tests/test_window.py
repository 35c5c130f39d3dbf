import unittest
import sys
import os

# No display needed: nothing here opens a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.core.complexity import MazeStats
from maze_carver.algo.backtracker import RecursiveBacktracker
from maze_carver.viz.window import MazeWindow

class TestMazeWindow(unittest.TestCase):
    def test_fit_to_screen(self):
        window = MazeWindow(Grid(20, 10), width=840, height=480)
        window.fit_to_screen()
        # min((840-80)/20, (480-80)/10) = 38
        self.assertAlmostEqual(window.cell_size, 38.0)
        self.assertAlmostEqual(window.offset_x, (840 - 20 * 38) / 2)
        self.assertAlmostEqual(window.offset_y, (480 - 10 * 38) / 2)

    def test_screen_world_round_trip(self):
        window = MazeWindow(Grid(10, 10))
        window.fit_to_screen()
        sx, sy = window.world_to_screen(3.5, 7.5)
        self.assertEqual(window.screen_to_world(sx, sy), (3, 7))

    def test_wall_segments_closed_cell(self):
        window = MazeWindow(Grid(1, 1))
        segments = window.wall_segments(0, 0)
        self.assertEqual(len(segments), 4)

    def test_wall_segments_follow_passages(self):
        grid = Grid(2, 1)
        RecursiveBacktracker(grid, seed=1).run_all()
        window = MazeWindow(grid)

        left = window.wall_segments(0, 0)
        # East side of the left cell is open
        self.assertNotIn(((1, 0), (1, 1)), left)
        self.assertIn(((0, 0), (0, 1)), left)

        right = window.wall_segments(1, 0)
        # Interior West walls are owned by the neighbor, never drawn twice
        self.assertNotIn(((1, 0), (1, 1)), right)
        self.assertIn(((2, 0), (2, 1)), right)

    def test_step_and_finish_generation(self):
        grid = Grid(6, 6)
        algo = RecursiveBacktracker(grid, seed=9)
        algo.progress_interval = 1
        window = MazeWindow(grid, generator=algo, seed=9)
        window.gen_iter = algo.run()

        window.step_generator(3)
        self.assertEqual(algo.step_count, 3)
        self.assertFalse(window.gen_finished)

        window.finish_generation()
        self.assertTrue(window.gen_finished)
        self.assertTrue(MazeStats.is_perfect(grid))

if __name__ == '__main__':
    unittest.main()
