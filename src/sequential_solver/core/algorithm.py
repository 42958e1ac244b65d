"""
Named, predicate-gated algorithms applied by the solver.
"""
from dataclasses import dataclass
from typing import Callable, Generic

from .puzzle import PuzzleT


@dataclass(frozen=True)
class SolvingAlgorithm(Generic[PuzzleT]):
    """
    An algorithm to apply on a puzzle.

    Attributes:
        name: User-defined name, used verbatim in failure messages.
            Not required to be unique.
        action: Mutates the puzzle in place. May fire several puzzle-specific
            rules at once; the solver treats it as one step.
        predicate: Pure query telling whether the action would change the
            puzzle at all.
    """
    name: str
    action: Callable[[PuzzleT], None]
    predicate: Callable[[PuzzleT], bool]

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Algorithm name must be a string, got {type(self.name).__name__}")
        if not callable(self.action):
            raise TypeError(f"Action of algorithm {self.name!r} is not callable")
        if not callable(self.predicate):
            raise TypeError(f"Predicate of algorithm {self.name!r} is not callable")

    def is_applicable(self, puzzle: PuzzleT) -> bool:
        """Return True if this algorithm would change the puzzle state."""
        return bool(self.predicate(puzzle))

    def apply(self, puzzle: PuzzleT) -> None:
        """Apply the algorithm to the puzzle."""
        self.action(puzzle)

    def __repr__(self) -> str:
        return f"SolvingAlgorithm(name={self.name!r})"
