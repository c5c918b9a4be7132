"""Weight tables and the loaders that build them."""

from .table import WeightTable
from .loader import load_model, load_model_from_string, model_from_dict
from .default import default_table, DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

__all__ = [
    'WeightTable',
    'load_model',
    'load_model_from_string',
    'model_from_dict',
    'default_table',
    'DEFAULT_LANGUAGE',
    'SUPPORTED_LANGUAGES',
]
