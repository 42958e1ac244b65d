"""
Failures raised by the solver.

Every error carries the puzzle as it was when the failure was detected and
the names of the algorithms applied before it, in order.
"""
from typing import Any, Iterable, Optional, Tuple


class SolverError(Exception):
    """Base class for all solver failures."""

    def __init__(self, message: str, puzzle: Any = None, applied: Iterable[str] = ()):
        super().__init__(message)
        self.puzzle = puzzle
        self.applied: Tuple[str, ...] = tuple(applied)

    @property
    def steps(self) -> int:
        """Number of algorithm applications before the failure."""
        return len(self.applied)


class FaultyPuzzleError(SolverError):
    """The puzzle already contained mistakes when it was supplied."""


class FaultyAlgorithmError(SolverError):
    """An algorithm produced a mistake within a previously valid puzzle."""

    def __init__(self, algorithm, puzzle: Any = None, applied: Iterable[str] = ()):
        super().__init__(
            f"Algorithm {algorithm.name} produced a mistake in the puzzle",
            puzzle=puzzle,
            applied=applied,
        )
        self.algorithm = algorithm

    @property
    def algorithm_name(self) -> str:
        return self.algorithm.name


class PuzzleNotSolvedError(SolverError):
    """The supplied algorithms were not enough to solve the puzzle."""

    def __init__(
        self,
        message: Optional[str] = None,
        puzzle: Any = None,
        applied: Iterable[str] = (),
    ):
        super().__init__(
            message or "No applicable algorithm left for the puzzle",
            puzzle=puzzle,
            applied=applied,
        )


class IterationLimitError(PuzzleNotSolvedError):
    """The configured iteration cap was reached before the puzzle was solved."""

    def __init__(self, limit: int, puzzle: Any = None, applied: Iterable[str] = ()):
        super().__init__(
            f"Puzzle not solved within {limit} algorithm applications",
            puzzle=puzzle,
            applied=applied,
        )
        self.limit = limit
