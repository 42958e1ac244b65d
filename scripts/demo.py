"""
Demo script for the sequential solver.

Solves small "fill the row with 1..N" puzzles with different algorithm sets
and prints how each one fares.
"""
import logging
import sys

import numpy as np

from sequential_solver import (
    Arena,
    FaultyAlgorithmError,
    PuzzleSolver,
    SolverConfig,
    SolvingAlgorithm,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


class RowPuzzle:
    """
    Row of N cells holding the values 1..N once each. 0 = empty.
    """

    def __init__(self, cells):
        self.grid = np.array(cells, dtype=np.int8)

    def is_solved(self) -> bool:
        return bool(np.all(self.grid != 0))

    def contains_mistakes(self) -> bool:
        filled = self.grid[self.grid != 0]
        if np.any(filled > len(self.grid)):
            return True
        return len(np.unique(filled)) != len(filled)

    def missing(self):
        return sorted(set(range(1, len(self.grid) + 1)) - set(self.grid.tolist()))

    def empty(self):
        return np.where(self.grid == 0)[0].tolist()

    def __str__(self) -> str:
        return "[" + " ".join(str(v) if v else "." for v in self.grid) + "]"


def fill_smallest(puzzle: RowPuzzle):
    puzzle.grid[puzzle.empty()[0]] = puzzle.missing()[0]


def fill_largest_twice(puzzle: RowPuzzle):
    value = len(puzzle.grid)
    for idx in puzzle.empty()[:2]:
        puzzle.grid[idx] = value


FILL_LAST = SolvingAlgorithm("FillLast", fill_smallest, lambda p: len(p.empty()) == 1)
FILL_SMALLEST = SolvingAlgorithm("FillSmallest", fill_smallest, lambda p: len(p.empty()) > 0)
SLOPPY = SolvingAlgorithm("Sloppy", fill_largest_twice, lambda p: len(p.empty()) >= 2)


def random_puzzles(count: int, size: int = 6, seed: int = 42):
    """Generate valid, partially filled rows."""
    rng = np.random.default_rng(seed)
    puzzles = []
    for _ in range(count):
        cells = rng.permutation(size) + 1
        cells[rng.random(size) < 0.5] = 0
        puzzles.append(RowPuzzle(cells.tolist()))
    return puzzles


def demo_single():
    """Solve one puzzle step by step."""
    print("=" * 60)
    print("SINGLE PUZZLE")
    print("=" * 60)

    puzzle = RowPuzzle([0, 3, 0, 1])
    print(f"Start:  {puzzle}")

    report = PuzzleSolver(FILL_LAST, FILL_SMALLEST).solve_with_report(puzzle)

    print(f"Solved: {puzzle}")
    print(f"Applied: {' -> '.join(report.applied)}")


def demo_faulty():
    """Show how a faulty algorithm is reported."""
    print("\n" + "=" * 60)
    print("FAULTY ALGORITHM")
    print("=" * 60)

    solver = PuzzleSolver(SLOPPY, FILL_SMALLEST)
    puzzle = RowPuzzle([0, 0, 0, 4])

    try:
        solver.solve(puzzle)
    except FaultyAlgorithmError as exc:
        print(f"{exc} (puzzle left as {exc.puzzle})")


def demo_arena(count: int = 50):
    """Compare algorithm sets on the same batch."""
    print("\n" + "=" * 60)
    print(f"ARENA ({count} puzzles)")
    print("=" * 60)

    solvers = {
        "fill_last only": PuzzleSolver(FILL_LAST),
        "fill_last + smallest": PuzzleSolver(FILL_LAST, FILL_SMALLEST),
        "sloppy first": PuzzleSolver(SLOPPY, FILL_LAST, FILL_SMALLEST),
        "capped": PuzzleSolver(FILL_SMALLEST, config=SolverConfig(max_iterations=2)),
    }

    print(f"{'Solvers':<24} {'Solved':>8} {'Avg':>8} {'Std':>8} {'Max':>8}")
    print("=" * 60)

    for label, solver in solvers.items():
        stats = Arena(solver).run_all(random_puzzles(count))
        print(f"{label:<24} {stats.solve_rate:>8.0%} {stats.avg_steps:>8.2f} "
              f"{stats.steps_std:>8.2f} {stats.max_steps:>8}")
        logger.debug("%s: %s", label, stats.to_dict())


if __name__ == "__main__":
    if "-v" in sys.argv:
        logging.getLogger().setLevel(logging.DEBUG)

    demo_single()
    demo_faulty()
    demo_arena()
