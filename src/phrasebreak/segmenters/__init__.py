"""Boundary feature extraction, scoring and phrase segmentation."""

from .features import FEATURE_CLASSES, OUT_OF_RANGE, extract_features
from .scorer import BOUNDARY_THRESHOLD, score, decide
from .phrase import (
    PhraseSegmenter,
    load_default_japanese_parser,
    load_parser_from_file,
    segment,
)

__all__ = [
    'FEATURE_CLASSES',
    'OUT_OF_RANGE',
    'extract_features',
    'BOUNDARY_THRESHOLD',
    'score',
    'decide',
    'PhraseSegmenter',
    'load_default_japanese_parser',
    'load_parser_from_file',
    'segment',
]
