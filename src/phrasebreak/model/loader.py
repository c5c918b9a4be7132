"""JSON / YAML model loading and validation."""

import json
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..core.errors import ModelFormatError
from .schema import ModelSpec
from .table import WeightTable

YAML_SUFFIXES = (".yaml", ".yml")


def model_from_dict(data: Any) -> WeightTable:
    """
    Validate a decoded model document and build its weight table.

    Args:
        data: Decoded JSON/YAML document

    Returns:
        WeightTable: Immutable table ready for segmentation

    Raises:
        ModelFormatError: If the document is not a mapping of feature groups to integer weights
    """
    if not isinstance(data, dict):
        raise ModelFormatError(f"Model must be a mapping of feature groups, got {type(data).__name__}")

    try:
        spec = ModelSpec.model_validate(data)
    except ValidationError as e:
        raise ModelFormatError(f"Model validation failed: {e}") from e

    return WeightTable.from_groups(spec.groups(), bias=spec.bias)


def load_model(path: Union[str, Path]) -> WeightTable:
    """
    Load and validate a model from a JSON or YAML file.

    Args:
        path: Path to the model file; ``.yaml``/``.yml`` files are read as YAML, anything else as JSON

    Returns:
        WeightTable: Validated weight table

    Raises:
        ModelFormatError: If the file cannot be read or the model is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ModelFormatError(f"Model file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelFormatError(f"Cannot read model file {path}: {e}") from e

    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    return load_model_from_string(content, fmt=fmt)


def load_model_from_string(content: str, fmt: str = "json") -> WeightTable:
    """
    Load and validate a model from its textual representation.

    Args:
        content: Model document
        fmt: ``"json"`` or ``"yaml"``

    Returns:
        WeightTable: Validated weight table

    Raises:
        ModelFormatError: If the content does not parse or the model is invalid
    """
    if fmt == "json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ModelFormatError(f"Invalid JSON model: {e}") from e
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ModelFormatError(f"Invalid YAML model: {e}") from e
    else:
        raise ValueError(f"Unsupported model format: {fmt}")

    return model_from_dict(data)
