"""
Arena for running a solver over many puzzles.

Collects outcome counts, step statistics and algorithm firing totals,
e.g. to compare algorithm sets against the same batch of puzzles.
"""
from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from .core.errors import (
    FaultyAlgorithmError,
    FaultyPuzzleError,
    PuzzleNotSolvedError,
    SolverError,
)
from .core.solver import PuzzleSolver

SOLVED = "solved"
NOT_SOLVED = "not_solved"
FAULTY_PUZZLE = "faulty_puzzle"
FAULTY_ALGORITHM = "faulty_algorithm"

OUTCOMES = (SOLVED, NOT_SOLVED, FAULTY_PUZZLE, FAULTY_ALGORITHM)


@dataclass
class RunResult:
    """Result of solving a single puzzle."""
    outcome: str
    steps: int
    applied: List[str]
    faulty_algorithm: Optional[str] = None
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.outcome == SOLVED

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ArenaStats:
    """Accumulated statistics over all runs."""
    runs: int = 0
    outcomes: Dict[str, int] = field(default_factory=lambda: {o: 0 for o in OUTCOMES})
    steps: List[int] = field(default_factory=list)
    firings: Counter = field(default_factory=Counter)
    faulty_algorithms: Counter = field(default_factory=Counter)

    @property
    def solve_rate(self) -> float:
        return self.outcomes[SOLVED] / self.runs if self.runs else 0

    @property
    def avg_steps(self) -> float:
        return float(np.mean(self.steps)) if self.steps else 0

    @property
    def steps_std(self) -> float:
        return float(np.std(self.steps)) if self.steps else 0

    @property
    def max_steps(self) -> int:
        return int(np.max(self.steps)) if self.steps else 0

    def record(self, result: RunResult):
        self.runs += 1
        self.outcomes[result.outcome] += 1
        self.steps.append(result.steps)
        self.firings.update(result.applied)
        if result.faulty_algorithm is not None:
            self.faulty_algorithms[result.faulty_algorithm] += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'runs': self.runs,
            'outcomes': dict(self.outcomes),
            'solve_rate': self.solve_rate,
            'avg_steps': self.avg_steps,
            'steps_std': self.steps_std,
            'max_steps': self.max_steps,
            'firings': dict(self.firings),
            'faulty_algorithms': dict(self.faulty_algorithms),
        }


class Arena:
    """
    Runs a solver over batches of puzzles and keeps statistics.

    Solver failures are recorded as outcomes instead of being raised.
    Anything else (e.g. an exception from a puzzle query) propagates.
    """

    def __init__(self, solver: PuzzleSolver):
        self.solver = solver
        self.stats = ArenaStats()
        self.history: List[RunResult] = []

    def run(self, puzzle) -> RunResult:
        """
        Solve a single puzzle and record the outcome.

        Args:
            puzzle: The puzzle to solve (mutated in place)

        Returns:
            RunResult describing the outcome
        """
        try:
            report = self.solver.solve_with_report(puzzle)
            result = RunResult(outcome=SOLVED, steps=report.steps, applied=list(report.applied))
        except SolverError as exc:
            result = self._failed(exc)

        self.stats.record(result)
        self.history.append(result)
        return result

    def run_all(
        self,
        puzzles: Iterable,
        callback: Optional[Callable[[int, int, RunResult], None]] = None
    ) -> ArenaStats:
        """
        Solve every puzzle in the batch.

        Args:
            puzzles: Puzzles to solve
            callback: Optional callback(index, total, result) after each run

        Returns:
            The accumulated ArenaStats
        """
        puzzles = list(puzzles)
        total = len(puzzles)

        for i, puzzle in enumerate(puzzles):
            result = self.run(puzzle)
            if callback:
                callback(i + 1, total, result)

        return self.stats

    def reset(self):
        """Forget all recorded runs."""
        self.stats = ArenaStats()
        self.history = []

    @staticmethod
    def _failed(exc: SolverError) -> RunResult:
        faulty = None
        if isinstance(exc, FaultyPuzzleError):
            outcome = FAULTY_PUZZLE
        elif isinstance(exc, FaultyAlgorithmError):
            outcome = FAULTY_ALGORITHM
            faulty = exc.algorithm_name
        elif isinstance(exc, PuzzleNotSolvedError):
            outcome = NOT_SOLVED
        else:
            raise exc

        return RunResult(
            outcome=outcome,
            steps=exc.steps,
            applied=list(exc.applied),
            faulty_algorithm=faulty,
            message=str(exc),
        )
