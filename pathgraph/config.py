"""Configuration classes for pathgraph searches."""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional


def validate_coefficient(coefficient: Any) -> float:
    """Return `coefficient` as float if it is a real number within [0, 1].

    Raises:
        ValueError: If the coefficient is not a real number (booleans
            included), lies outside [0, 1], or is NaN.
    """
    if isinstance(coefficient, bool) or not isinstance(coefficient, Real):
        raise ValueError(f"Coefficient must be a real number, got {coefficient!r}.")
    value = float(coefficient)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Coefficient must be within [0, 1], got {coefficient!r}.")
    return value


@dataclass
class SearchConfig:
    """Defaults applied by `PathFinder` when the caller does not override them."""

    # Blend between accumulated weight (1.0) and heuristic estimate (0.0)
    default_coefficient: float = 1.0

    # Upper bound on expanded tracks per search; None means unbounded
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        self.default_coefficient = validate_coefficient(self.default_coefficient)
        if self.max_expansions is not None and (
            isinstance(self.max_expansions, bool)
            or not isinstance(self.max_expansions, int)
            or self.max_expansions < 0
        ):
            raise ValueError(
                f"max_expansions must be a non-negative int or None, got {self.max_expansions!r}."
            )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
