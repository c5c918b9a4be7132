"""Data types shared by the feature extractor, scorer and segmenter."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FeatureClass:
    """A feature template: a tag plus the character offsets it reads."""
    tag: str                     # "UW1" .. "TW4"
    offsets: Tuple[int, ...]     # relative to the candidate position

    @property
    def width(self) -> int:
        """Number of characters in the n-gram."""
        return len(self.offsets)


@dataclass(frozen=True)
class BoundaryDecision:
    """Score and verdict for one candidate position."""
    position: int                # gap between text[position - 1] and text[position]
    score: int
    accepted: bool
    features: Tuple[str, ...] = ()
