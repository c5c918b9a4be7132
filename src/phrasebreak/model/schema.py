"""Pydantic schema for the persisted boundary model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import Dict, Optional

# Ordered as the feature templates are evaluated
FEATURE_TAGS = (
    "UW1", "UW2", "UW3", "UW4", "UW5", "UW6",
    "BW1", "BW2", "BW3",
    "TW1", "TW2", "TW3", "TW4",
)

Weights = Dict[str, StrictInt]


class ModelSpec(BaseModel):
    """Grouped model: one n-gram -> weight table per feature class."""
    model_config = ConfigDict(extra="forbid")  # Strict validation

    UW1: Weights = Field(default_factory=dict, description="Character three before the boundary")
    UW2: Weights = Field(default_factory=dict, description="Character two before the boundary")
    UW3: Weights = Field(default_factory=dict, description="Character just before the boundary")
    UW4: Weights = Field(default_factory=dict, description="Character just after the boundary")
    UW5: Weights = Field(default_factory=dict, description="Character two after the boundary")
    UW6: Weights = Field(default_factory=dict, description="Character three after the boundary")
    BW1: Weights = Field(default_factory=dict, description="Bigram ending one before the boundary")
    BW2: Weights = Field(default_factory=dict, description="Bigram straddling the boundary")
    BW3: Weights = Field(default_factory=dict, description="Bigram starting after the boundary")
    TW1: Weights = Field(default_factory=dict, description="Trigram ending at the boundary")
    TW2: Weights = Field(default_factory=dict, description="Trigram with one character after")
    TW3: Weights = Field(default_factory=dict, description="Trigram with two characters after")
    TW4: Weights = Field(default_factory=dict, description="Trigram starting at the boundary")
    bias: Optional[StrictInt] = Field(default=None,
                                      description="Explicit bias; derived from the weights when omitted")

    def groups(self) -> Dict[str, Dict[str, int]]:
        """Return the feature groups keyed by tag, in evaluation order."""
        return {tag: getattr(self, tag) for tag in FEATURE_TAGS}

    def total_weight(self) -> int:
        """Sum of every weight in every group."""
        return sum(sum(group.values()) for group in self.groups().values())
