"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from phrasebreak.model.loader import load_model_from_string
from phrasebreak.segmenters.phrase import PhraseSegmenter


@pytest.fixture
def sample_model_json():
    """Provide a small model that cuts before 天 when it follows は."""
    return """
{
  "UW4": {"天": 10},
  "BW2": {"は天": 5},
  "bias": -8
}
"""


@pytest.fixture
def sample_model_yaml():
    """Provide the sample model as YAML."""
    return """
UW4:
  天: 10
BW2:
  は天: 5
bias: -8
"""


@pytest.fixture
def sample_table(sample_model_json):
    """Provide a loaded weight table for testing."""
    return load_model_from_string(sample_model_json)


@pytest.fixture
def sample_segmenter(sample_table):
    """Provide a segmenter over the sample table."""
    return PhraseSegmenter(sample_table)


@pytest.fixture
def temp_model_file(sample_model_json):
    """Provide a temporary JSON model file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', encoding='utf-8', delete=False) as f:
        f.write(sample_model_json)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_yaml_model_file(sample_model_yaml, tmp_path):
    """Provide a temporary YAML model file for testing."""
    path = tmp_path / "model.yaml"
    path.write_text(sample_model_yaml, encoding="utf-8")
    return path


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that accumulates counters."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures counters."""
    return SimpleTestMeter()
