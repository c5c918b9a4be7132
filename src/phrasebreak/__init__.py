"""
phrasebreak - Phrase segmentation for line breaking.

Splits text without inter-word spacing (Japanese, Chinese, Thai) into
phrases using a pretrained boundary model, so renderers can wrap lines
between phrases instead of inside them.
"""

from .core.errors import PhraseBreakError, ModelFormatError, ConfigurationError
from .model import WeightTable, default_table, load_model, load_model_from_string
from .segmenters import (
    PhraseSegmenter,
    load_default_japanese_parser,
    load_parser_from_file,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    'PhraseBreakError',
    'ModelFormatError',
    'ConfigurationError',
    'WeightTable',
    'default_table',
    'load_model',
    'load_model_from_string',
    'PhraseSegmenter',
    'load_default_japanese_parser',
    'load_parser_from_file',
    'segment',
]
