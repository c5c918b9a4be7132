"""Process-wide pretrained tables published with the budoux package."""

import threading
from importlib import resources
from typing import Dict

from ..core.errors import ConfigurationError
from .loader import load_model_from_string
from .table import WeightTable

DEFAULT_LANGUAGE = "ja"
SUPPORTED_LANGUAGES = ("ja", "zh-hans", "zh-hant", "th")

_tables: Dict[str, WeightTable] = {}
_lock = threading.Lock()


def _read_bundled(lang: str) -> str:
    try:
        resource = resources.files("budoux") / "models" / f"{lang}.json"
        return resource.read_text(encoding="utf-8")
    except (ModuleNotFoundError, FileNotFoundError) as e:
        raise ConfigurationError(f"Pretrained model for '{lang}' is not available: {e}") from e


def default_table(lang: str = DEFAULT_LANGUAGE) -> WeightTable:
    """
    Return the shared pretrained table for ``lang``, building it on first use.

    Args:
        lang: One of ``SUPPORTED_LANGUAGES``

    Returns:
        WeightTable: The same immutable instance on every call

    Raises:
        ConfigurationError: If the language is unknown or its model cannot be located
        ModelFormatError: If the bundled model is malformed
    """
    if lang not in SUPPORTED_LANGUAGES:
        raise ConfigurationError(
            f"Unsupported language '{lang}', expected one of: {', '.join(SUPPORTED_LANGUAGES)}")

    table = _tables.get(lang)
    if table is None:
        with _lock:
            table = _tables.get(lang)
            if table is None:
                table = load_model_from_string(_read_bundled(lang))
                _tables[lang] = table
    return table
