"""Core types, protocols and errors."""

from .errors import PhraseBreakError, ModelFormatError, ConfigurationError
from .types import FeatureClass, BoundaryDecision

__all__ = [
    'PhraseBreakError',
    'ModelFormatError',
    'ConfigurationError',
    'FeatureClass',
    'BoundaryDecision',
]
