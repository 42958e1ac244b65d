from .puzzle import Puzzle, PuzzleT
from .algorithm import SolvingAlgorithm
from .config import SolverConfig, DEFAULT_CONFIG
from .errors import (
    SolverError,
    FaultyPuzzleError,
    FaultyAlgorithmError,
    PuzzleNotSolvedError,
    IterationLimitError,
)
from .solver import PuzzleSolver, SolveReport

__all__ = [
    "Puzzle",
    "PuzzleT",
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
]
