"""Phrase segmenter driven by a learned boundary model."""

from pathlib import Path
from typing import List, Optional, Union

from ..core.abc import Logger, Meter
from ..core.errors import ConfigurationError
from ..core.types import BoundaryDecision
from ..model.default import DEFAULT_LANGUAGE, default_table
from ..model.loader import load_model
from ..model.table import WeightTable
from .features import extract_features
from .scorer import decide, score


class PhraseSegmenter:
    """
    Splits text into phrases at positions the weight table scores as boundaries.

    Each gap between two characters is scored independently from the 13
    feature keys around it; the text is cut wherever the score is positive.
    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, table: WeightTable, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter with a weight table and optional observers.

        Args:
            table: Weight table to score boundaries with
            logger: Optional structured logger
            meter: Optional metrics collector

        Raises:
            ConfigurationError: If ``table`` is not a WeightTable
        """
        if not isinstance(table, WeightTable):
            raise ConfigurationError(
                f"PhraseSegmenter requires a WeightTable, got {type(table).__name__}")
        self.table = table
        self.log = logger
        self.meter = meter

    def parse_boundaries(self, text: str) -> List[int]:
        """
        Find the accepted boundaries of ``text``.

        Args:
            text: Input text

        Returns:
            List[int]: Increasing candidate positions where a new phrase starts
        """
        return [
            position for position in range(1, len(text))
            if decide(score(extract_features(text, position), self.table))
        ]

    def segment(self, text: str) -> List[str]:
        """
        Segment text into phrases.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Phrases in order; ``"".join(result) == text``
        """
        if not text:
            return []

        boundaries = self.parse_boundaries(text)
        phrases = []
        start = 0
        for boundary in boundaries:
            phrases.append(text[start:boundary])
            start = boundary
        phrases.append(text[start:])

        if self.meter:
            self.meter.inc("phrasebreak.segment_calls")
            self.meter.inc("phrasebreak.boundaries", amount=len(boundaries))
        if self.log:
            self.log.info("segmented", chars=len(text), phrases=len(phrases))

        return phrases

    def explain(self, text: str) -> List[BoundaryDecision]:
        """Score and verdict for every candidate position of ``text``."""
        decisions = []
        for position in range(1, len(text)):
            features = extract_features(text, position)
            value = score(features, self.table)
            decisions.append(BoundaryDecision(
                position=position,
                score=value,
                accepted=decide(value),
                features=features,
            ))
        return decisions


def load_default_japanese_parser(**kwargs) -> PhraseSegmenter:
    """Create a segmenter over the pretrained Japanese table."""
    return PhraseSegmenter(default_table(DEFAULT_LANGUAGE), **kwargs)


def load_parser_from_file(path: Union[str, Path], **kwargs) -> PhraseSegmenter:
    """Create a segmenter over a model file (JSON or YAML)."""
    return PhraseSegmenter(load_model(path), **kwargs)


def segment(text: str, table: Optional[WeightTable] = None) -> List[str]:
    """
    Segment text with ``table``, or with the pretrained Japanese table when omitted.

    Raises:
        ConfigurationError: If no table is supplied and the default cannot be loaded
    """
    if table is None:
        table = default_table(DEFAULT_LANGUAGE)
    return PhraseSegmenter(table).segment(text)
