"""Local-context feature keys for a candidate boundary."""

from typing import Sequence, Tuple

from ..core.types import FeatureClass

# Placeholder for characters beyond either end of the text. Published models
# hold no keys containing it, so edge features weigh zero.
OUT_OF_RANGE = "▔"

FEATURE_CLASSES: Tuple[FeatureClass, ...] = (
    FeatureClass("UW1", (-3,)),
    FeatureClass("UW2", (-2,)),
    FeatureClass("UW3", (-1,)),
    FeatureClass("UW4", (0,)),
    FeatureClass("UW5", (1,)),
    FeatureClass("UW6", (2,)),
    FeatureClass("BW1", (-2, -1)),
    FeatureClass("BW2", (-1, 0)),
    FeatureClass("BW3", (0, 1)),
    FeatureClass("TW1", (-3, -2, -1)),
    FeatureClass("TW2", (-2, -1, 0)),
    FeatureClass("TW3", (-1, 0, 1)),
    FeatureClass("TW4", (0, 1, 2)),
)


def char_at(chars: Sequence[str], index: int) -> str:
    """Character at ``index``, or ``OUT_OF_RANGE`` outside the sequence."""
    if 0 <= index < len(chars):
        return chars[index]
    return OUT_OF_RANGE


def extract_features(chars: Sequence[str], position: int) -> Tuple[str, ...]:
    """
    Build the feature keys describing the context of one candidate boundary.

    Args:
        chars: Text as a sequence of single characters (a ``str`` works)
        position: Candidate position, the gap before ``chars[position]``

    Returns:
        Tuple[str, ...]: One key per entry of ``FEATURE_CLASSES``, in that order

    Raises:
        ValueError: If ``position`` is not in ``[1, len(chars) - 1]``
    """
    if not 1 <= position < len(chars):
        raise ValueError(f"Position {position} is not a candidate boundary for length {len(chars)}")

    return tuple(
        feature.tag + "".join(char_at(chars, position + offset) for offset in feature.offsets)
        for feature in FEATURE_CLASSES
    )
