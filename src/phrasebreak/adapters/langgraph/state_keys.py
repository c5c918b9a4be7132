"""Default state key names for LangGraph integration."""

# Standard state keys used by phrasebreak nodes
TEXT_INPUT = "text"
PHRASES = "phrases"
