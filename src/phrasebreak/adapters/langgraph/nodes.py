"""LangGraph node factories for phrasebreak integration."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import TEXT_INPUT, PHRASES

def make_segment_node(segmenter: Segmenter,
                      text_key: str = TEXT_INPUT,
                      output_key: str = PHRASES):
    """
    Create a LangGraph node that splits the state's text into phrases.

    Args:
        segmenter: Configured segmenter, e.g. a PhraseSegmenter
        text_key: State key containing the text to segment
        output_key: State key the phrase list is written to

    Returns:
        RunnableLambda: Node that adds the phrase list to state
    """
    def _segment_text(state):
        text = state.get(text_key, "")
        return {output_key: segmenter.segment(text)}

    return RunnableLambda(_segment_text)
