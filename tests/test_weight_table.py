"""Test the immutable weight table."""

import dataclasses

import pytest

from phrasebreak.core.errors import ModelFormatError
from phrasebreak.model.table import WeightTable


class TestWeightTable:
    """Test lookups, bias handling and immutability."""

    def test_lookup_known_and_unknown(self):
        """Test that unknown features weigh zero."""
        table = WeightTable(weights={"UW3は": 42}, base_score=-3)

        assert table.lookup("UW3は") == 42
        assert table.lookup("UW3が") == 0
        assert table.bias() == -3
        assert "UW3は" in table
        assert "UW3が" not in table

    def test_weights_are_read_only(self):
        """Test that the weight mapping cannot be modified."""
        table = WeightTable(weights={"UW1a": 1}, base_score=0)

        with pytest.raises(TypeError):
            table.weights["UW1b"] = 2

    def test_table_is_frozen(self):
        """Test that attributes cannot be reassigned."""
        table = WeightTable(weights={}, base_score=0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            table.base_score = 10

    def test_source_mapping_is_copied(self):
        """Test that mutating the source dict does not leak into the table."""
        source = {"UW1a": 1}
        table = WeightTable(weights=source, base_score=0)
        source["UW1a"] = 100
        source["UW1b"] = 5

        assert table.lookup("UW1a") == 1
        assert table.lookup("UW1b") == 0

    @pytest.mark.parametrize("weights", [
        {1: 2},
        {"UW1a": 1.5},
        {"UW1a": "3"},
        {"UW1a": True},
    ])
    def test_invalid_weights(self, weights):
        """Test that non key->integer mappings are rejected."""
        with pytest.raises(ModelFormatError):
            WeightTable(weights=weights, base_score=0)

    def test_invalid_bias(self):
        """Test that the bias must be a plain integer."""
        with pytest.raises(ModelFormatError, match="Bias"):
            WeightTable(weights={}, base_score=True)

    def test_not_a_mapping(self):
        """Test that a list of pairs is rejected."""
        with pytest.raises(ModelFormatError, match="mapping"):
            WeightTable(weights=[("UW1a", 1)], base_score=0)


class TestFromGroups:
    """Test building tables from the grouped representation."""

    def test_keys_are_prefixed_with_tag(self):
        """Test that n-grams are flattened into tagged feature keys."""
        table = WeightTable.from_groups({"UW4": {"天": 10}, "TW1": {"今日は": -2}}, bias=0)

        assert dict(table.weights) == {"UW4天": 10, "TW1今日は": -2}
        assert table.feature_classes() == ("TW1", "UW4")

    def test_derived_bias_even_total(self):
        """Test that the bias is minus half the total weight."""
        table = WeightTable.from_groups({"UW1": {"a": 6}, "UW2": {"b": 4}})

        assert table.bias() == -5

    def test_derived_bias_odd_total(self):
        """Test that an odd total rounds the half down."""
        table = WeightTable.from_groups({"UW3": {"b": 4}, "UW4": {"a": 3}})

        assert table.bias() == -3

    def test_derived_bias_negative_total(self):
        """Test the derived bias when weights are mostly negative."""
        table = WeightTable.from_groups({"UW3": {"b": -7}, "UW4": {"a": 2}})

        assert table.bias() == 3

    def test_explicit_bias_wins(self):
        """Test that an explicit bias overrides the derived one."""
        table = WeightTable.from_groups({"UW1": {"a": 100}}, bias=-1)

        assert table.bias() == -1

    def test_group_not_mapping(self):
        """Test that each group must be a mapping."""
        with pytest.raises(ModelFormatError, match="UW1"):
            WeightTable.from_groups({"UW1": [("a", 1)]})

    def test_non_integer_weight_in_group(self):
        """Test that group weights must be integers."""
        with pytest.raises(ModelFormatError, match="UW2:x"):
            WeightTable.from_groups({"UW2": {"x": 0.5}})
