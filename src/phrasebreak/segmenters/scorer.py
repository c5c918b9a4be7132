"""Boundary scoring against a weight table."""

from typing import Iterable

from ..model.table import WeightTable

# A position is cut only when its score is strictly greater.
BOUNDARY_THRESHOLD = 0


def score(feature_keys: Iterable[str], table: WeightTable) -> int:
    """Bias plus the weight of every feature key."""
    return table.bias() + sum(table.lookup(key) for key in feature_keys)


def decide(value: int) -> bool:
    """Whether a score accepts the boundary. Ties reject."""
    return value > BOUNDARY_THRESHOLD
