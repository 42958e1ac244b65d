"""
Sequential puzzle solver.

Fires the first applicable algorithm from an ordered list, again and again,
until the puzzle is solved, no algorithm applies, or a mistake shows up.

Usage:
    from sequential_solver import PuzzleSolver, SolvingAlgorithm

    fill = SolvingAlgorithm("FillObvious", fill_obvious, has_obvious)
    solver = PuzzleSolver(fill)
    solver.solve(puzzle)
"""
from .core import (
    Puzzle,
    SolvingAlgorithm,
    SolverConfig,
    DEFAULT_CONFIG,
    SolverError,
    FaultyPuzzleError,
    FaultyAlgorithmError,
    PuzzleNotSolvedError,
    IterationLimitError,
    PuzzleSolver,
    SolveReport,
)
from .arena import Arena, ArenaStats, RunResult

__version__ = "0.1.0"

__all__ = [
    "Puzzle",
    "SolvingAlgorithm",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "SolverError",
    "FaultyPuzzleError",
    "FaultyAlgorithmError",
    "PuzzleNotSolvedError",
    "IterationLimitError",
    "PuzzleSolver",
    "SolveReport",
    "Arena",
    "ArenaStats",
    "RunResult",
]
