"""
Sequential puzzle solver.

The solver keeps an ordered list of algorithms and repeatedly fires the first
applicable one until the puzzle is solved, no algorithm applies, or a mistake
shows up.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional

from .algorithm import SolvingAlgorithm
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import (
    FaultyAlgorithmError,
    FaultyPuzzleError,
    IterationLimitError,
    PuzzleNotSolvedError,
)
from .puzzle import PuzzleT

logger = logging.getLogger(__name__)


@dataclass
class SolveReport(Generic[PuzzleT]):
    """Result of a successful solve, with the algorithms fired in order."""
    puzzle: PuzzleT
    applied: List[str] = field(default_factory=list)

    @property
    def steps(self) -> int:
        return len(self.applied)

    def counts(self) -> Dict[str, int]:
        """Firings per algorithm name, in order of first firing."""
        return dict(Counter(self.applied))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'steps': self.steps,
            'applied': list(self.applied),
            'counts': self.counts(),
        }


class PuzzleSolver(Generic[PuzzleT]):
    """
    A solver for puzzles of one kind.

    Algorithms are tried in insertion order and the first applicable one is
    fired; there is no scoring among algorithms. The solver holds no state
    between calls, so one instance can solve independent puzzles concurrently
    as long as `algorithms` is not modified at the same time.

    With the default config there is no iteration cap: an algorithm that is
    always applicable but never makes progress keeps the loop running forever.
    Set `SolverConfig.max_iterations` to bound it.
    """

    def __init__(self, *algorithms: SolvingAlgorithm[PuzzleT], config: Optional[SolverConfig] = None):
        """
        Initialize the solver.

        Args:
            *algorithms: Initial algorithms, in firing priority order
            config: Solve loop configuration. Uses defaults if None.
        """
        self.config = config or DEFAULT_CONFIG
        self.algorithms: List[SolvingAlgorithm[PuzzleT]] = []
        for algorithm in algorithms:
            self.add(algorithm)

    def add(self, algorithm: SolvingAlgorithm[PuzzleT]) -> PuzzleSolver[PuzzleT]:
        """
        Append an algorithm with the lowest priority so far.

        Returns:
            self, for chaining
        """
        if not isinstance(algorithm, SolvingAlgorithm):
            raise TypeError(f"Expected a SolvingAlgorithm, got {type(algorithm).__name__}")
        self.algorithms.append(algorithm)
        return self

    def select(self, puzzle: PuzzleT) -> Optional[SolvingAlgorithm[PuzzleT]]:
        """
        Return the first applicable algorithm, or None if none applies.
        """
        return self._first_applicable(self.algorithms, puzzle)

    def solve(self, puzzle: PuzzleT) -> PuzzleT:
        """
        Solve a puzzle in place.

        Args:
            puzzle: The puzzle to solve

        Returns:
            The same puzzle, now solved

        Raises:
            FaultyPuzzleError: The puzzle already contains mistakes
            PuzzleNotSolvedError: The algorithms are not enough to solve it
            FaultyAlgorithmError: An algorithm produced a mistake in the puzzle
        """
        return self._run(puzzle, []).puzzle

    def solve_with_report(self, puzzle: PuzzleT) -> SolveReport[PuzzleT]:
        """
        Solve a puzzle like `solve`, also returning the algorithms fired.

        Raises the same errors as `solve`.
        """
        return self._run(puzzle, [])

    def try_solve(self, puzzle: PuzzleT) -> bool:
        """
        Try to solve a puzzle.

        Returns:
            True if it was solved, False if the algorithms were not enough

        Raises:
            FaultyPuzzleError: The puzzle already contains mistakes
            FaultyAlgorithmError: An algorithm produced a mistake in the puzzle
        """
        try:
            self.solve(puzzle)
        except PuzzleNotSolvedError:
            return False
        return True

    def _run(self, puzzle: PuzzleT, applied: List[str]) -> SolveReport[PuzzleT]:
        if puzzle.contains_mistakes():
            raise FaultyPuzzleError("Puzzle already contains mistakes", puzzle=puzzle)

        algorithms = tuple(self.algorithms)
        limit = self.config.max_iterations

        while not puzzle.is_solved():
            algorithm = self._first_applicable(algorithms, puzzle)
            if algorithm is None:
                logger.debug("No applicable algorithm after %d steps", len(applied))
                raise PuzzleNotSolvedError(puzzle=puzzle, applied=applied)

            if limit is not None and len(applied) >= limit:
                raise IterationLimitError(limit, puzzle=puzzle, applied=applied)

            logger.debug("Step %d: applying %s", len(applied) + 1, algorithm.name)
            algorithm.apply(puzzle)
            applied.append(algorithm.name)

            if puzzle.contains_mistakes():
                raise FaultyAlgorithmError(algorithm, puzzle=puzzle, applied=applied)

        logger.debug("Puzzle solved after %d steps", len(applied))
        return SolveReport(puzzle=puzzle, applied=applied)

    @staticmethod
    def _first_applicable(algorithms, puzzle):
        for algorithm in algorithms:
            if algorithm.is_applicable(puzzle):
                return algorithm
        return None

    def __len__(self) -> int:
        return len(self.algorithms)

    def __repr__(self) -> str:
        names = ", ".join(a.name for a in self.algorithms)
        return f"PuzzleSolver([{names}])"
