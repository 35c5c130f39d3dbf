import unittest
import io
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.main import main, build_parser, DEFAULT_WIDTH, DEFAULT_HEIGHT

def run_cli(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue()

class TestCLI(unittest.TestCase):
    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.width, DEFAULT_WIDTH)
        self.assertEqual(args.height, DEFAULT_HEIGHT)
        self.assertIsNone(args.seed)

    def test_short_and_long_flags(self):
        args = build_parser().parse_args(["-w", "4", "-h", "3", "-s", "9"])
        self.assertEqual((args.width, args.height, args.seed), (4, 3, 9))
        args = build_parser().parse_args(["--width", "6", "--height", "2", "--seed", "-5"])
        self.assertEqual((args.width, args.height, args.seed), (6, 2, -5))

    def test_prints_diagram(self):
        code, out = run_cli(["-w", "5", "-h", "3", "-s", "12"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], " _________")
        self.assertEqual(lines[-1], "width: 5, height: 3, seed: 12")

    def test_reproducible(self):
        _, first = run_cli(["-w", "8", "-h", "8", "-s", "31337"])
        _, second = run_cli(["-w", "8", "-h", "8", "-s", "31337"])
        self.assertEqual(first, second)

    def test_default_seed_is_reported(self):
        _, out = run_cli(["-w", "2", "-h", "2"])
        seed = out.splitlines()[-1].split("seed: ")[1]
        int(seed)

    def test_inspect(self):
        _, out = run_cli(["-w", "1", "-h", "1", "-s", "0", "--inspect"])
        self.assertEqual(out, " _\n|_|\nwidth: 1, height: 1, seed: 0\n\n0\n")

    def test_stats_keep_stdout_clean(self):
        _, out = run_cli(["-w", "3", "-h", "3", "-s", "1", "--stats"])
        self.assertEqual(len(out.splitlines()), 5)

    def test_rejects_non_positive_size(self):
        err = io.StringIO()
        for argv in (["-w", "0"], ["-h", "-3"], ["-w", "abc"]):
            with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                main(argv)
            self.assertEqual(ctx.exception.code, 2)

if __name__ == '__main__':
    unittest.main()
