"""Immutable feature weight table."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..core.errors import ModelFormatError


@dataclass(frozen=True)
class WeightTable:
    """
    Read-only mapping from feature key to integer weight, plus a bias.

    Feature keys are the class tag followed by the observed characters,
    e.g. ``"UW3は"`` or ``"BW2日は"``. Unknown keys weigh zero.
    """
    weights: Mapping[str, int]
    base_score: int
    _tags: Tuple[str, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.weights, Mapping):
            raise ModelFormatError(
                f"Weights must be a mapping of feature keys to integers, got {type(self.weights).__name__}")
        if isinstance(self.base_score, bool) or not isinstance(self.base_score, int):
            raise ModelFormatError(f"Bias must be an integer, got {self.base_score!r}")

        frozen: Dict[str, int] = {}
        for key, value in self.weights.items():
            if not isinstance(key, str):
                raise ModelFormatError(f"Feature key must be a string, got {key!r}")
            if isinstance(value, bool) or not isinstance(value, int):
                raise ModelFormatError(f"Weight for '{key}' must be an integer, got {value!r}")
            frozen[key] = value

        object.__setattr__(self, "weights", MappingProxyType(frozen))
        tags = sorted({key[:3] for key in frozen})
        object.__setattr__(self, "_tags", tuple(tags))

    @classmethod
    def from_groups(cls, groups: Mapping[str, Mapping[str, int]],
                    bias: Optional[int] = None) -> "WeightTable":
        """
        Build a table from the grouped representation ``{tag: {ngram: weight}}``.

        Args:
            groups: Feature class tag -> n-gram -> weight
            bias: Explicit bias. When omitted it is ``-(total // 2)`` where
                ``total`` is the sum of all weights, which with a zero
                threshold cuts exactly when matched weights exceed half the total.

        Returns:
            WeightTable: Flattened, immutable table

        Raises:
            ModelFormatError: If any group is not a mapping of strings to integers
        """
        weights: Dict[str, int] = {}
        total = 0
        for tag, group in groups.items():
            if not isinstance(group, Mapping):
                raise ModelFormatError(f"Feature group '{tag}' must be a mapping, got {type(group).__name__}")
            for ngram, value in group.items():
                if not isinstance(ngram, str):
                    raise ModelFormatError(f"Feature '{tag}' has a non-string key {ngram!r}")
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ModelFormatError(f"Weight for '{tag}:{ngram}' must be an integer, got {value!r}")
                weights[tag + ngram] = value
                total += value

        if bias is None:
            bias = -(total // 2)
        return cls(weights=weights, base_score=bias)

    def lookup(self, feature_key: str) -> int:
        """Weight for ``feature_key``, or 0 when the model has never seen it."""
        return self.weights.get(feature_key, 0)

    def bias(self) -> int:
        """Score of a position before any feature weight is added."""
        return self.base_score

    def feature_classes(self) -> Tuple[str, ...]:
        """Tags of the feature classes that carry at least one weight."""
        return self._tags

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, feature_key: object) -> bool:
        return feature_key in self.weights

    def __iter__(self) -> Iterator[str]:
        return iter(self.weights)
