"""
Puzzle capability required by the solver.
"""
from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Puzzle(Protocol):
    """
    Minimal query surface the solver needs from a puzzle.

    Any object with these two methods can be solved; no base class is needed.
    Both queries must be side-effect free. They are independent of each other:
    - not solved, no mistakes: normal mid-solve state
    - solved, no mistakes: success
    - contains mistakes: failure, regardless of whether it is solved
    """

    def is_solved(self) -> bool:
        """Return True if no further algorithm application is needed."""
        ...

    def contains_mistakes(self) -> bool:
        """Return True if the state breaks the puzzle's own rules (not just missing information)."""
        ...


PuzzleT = TypeVar("PuzzleT", bound=Puzzle)
