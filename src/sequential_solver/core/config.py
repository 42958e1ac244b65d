"""
Solver configuration.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the solve loop."""
    # Cap on algorithm applications per solve call (None = unbounded)
    max_iterations: Optional[int] = None

    def __post_init__(self):
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")


DEFAULT_CONFIG = SolverConfig()
