"""
Toy puzzles used by the unit tests.
"""
from typing import List, Optional

import numpy as np
import pytest

from sequential_solver import SolvingAlgorithm


class GridPuzzle:
    """
    Row of cells to be filled with the values 1..N, each used once.

    0 = empty cell. A repeated value or a value outside 1..N is a mistake.
    """

    def __init__(self, cells: List[int]):
        self.grid = np.array(cells, dtype=np.int8)
        self.size = len(cells)
        self.queries = 0

    def is_solved(self) -> bool:
        self.queries += 1
        return bool(np.all(self.grid != 0))

    def contains_mistakes(self) -> bool:
        self.queries += 1
        filled = self.grid[self.grid != 0]
        if np.any((filled < 0) | (filled > self.size)):
            return True
        return len(np.unique(filled)) != len(filled)

    def empty_cells(self) -> List[int]:
        return np.where(self.grid == 0)[0].tolist()

    def missing_values(self) -> List[int]:
        present = set(self.grid.tolist())
        return [v for v in range(1, self.size + 1) if v not in present]

    def obvious_cell(self) -> Optional[int]:
        """The single empty cell, if exactly one is left."""
        empty = self.empty_cells()
        return empty[0] if len(empty) == 1 else None


class StaticPuzzle:
    """Puzzle whose status never changes."""

    def __init__(self, solved: bool = False, mistaken: bool = False):
        self.solved = solved
        self.mistaken = mistaken

    def is_solved(self) -> bool:
        return self.solved

    def contains_mistakes(self) -> bool:
        return self.mistaken


def fill_if_obvious(puzzle: GridPuzzle):
    puzzle.grid[puzzle.obvious_cell()] = puzzle.missing_values()[0]


def fill_first_empty(puzzle: GridPuzzle):
    puzzle.grid[puzzle.empty_cells()[0]] = puzzle.missing_values()[0]


def write_duplicate(puzzle: GridPuzzle):
    puzzle.grid[puzzle.empty_cells()[0]] = puzzle.grid[puzzle.grid != 0][0]


class Recorder:
    """Wraps actions and predicates to count their calls."""

    def __init__(self):
        self.applied: List[str] = []
        self.checked: List[str] = []

    def algorithm(self, name, action, predicate) -> SolvingAlgorithm:
        def recorded_action(puzzle):
            self.applied.append(name)
            action(puzzle)

        def recorded_predicate(puzzle):
            self.checked.append(name)
            return predicate(puzzle)

        return SolvingAlgorithm(name, recorded_action, recorded_predicate)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def fill_obvious(recorder):
    return recorder.algorithm(
        "FillIfObvious",
        fill_if_obvious,
        lambda p: p.obvious_cell() is not None,
    )


@pytest.fixture
def guess_and_check(recorder):
    return recorder.algorithm(
        "GuessAndCheck",
        fill_first_empty,
        lambda p: len(p.empty_cells()) > 0,
    )


@pytest.fixture
def duplicator(recorder):
    return recorder.algorithm(
        "Duplicator",
        write_duplicate,
        lambda p: len(p.empty_cells()) > 0 and len(p.empty_cells()) < p.size,
    )


@pytest.fixture
def no_op(recorder):
    return recorder.algorithm("NoOp", lambda p: None, lambda p: True)


@pytest.fixture
def make_grid():
    return GridPuzzle


@pytest.fixture
def make_static():
    return StaticPuzzle
