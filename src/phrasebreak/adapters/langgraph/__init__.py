"""LangGraph adapter; requires the ``langgraph`` extra."""

from .nodes import make_segment_node
from .state_keys import TEXT_INPUT, PHRASES

__all__ = ['make_segment_node', 'TEXT_INPUT', 'PHRASES']
