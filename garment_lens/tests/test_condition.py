"""
Tests for the condition classifier.
"""
import pytest

from garment_lens.models import ConditionLevel
from garment_lens.pipeline.condition import classify_condition, ebay_condition_code


class TestConditionScoring:
    """Tests for keyword and hint scoring."""

    def test_no_evidence_defaults_to_good(self):
        """Test the GOOD default at confidence 0."""
        result = classify_condition("")
        assert result.condition == ConditionLevel.GOOD
        assert result.confidence == 0
        assert all(score == 0 for score in result.scores.values())

    def test_good_with_fading(self):
        """Test the fading worked example."""
        result = classify_condition("good used condition, some fading")
        assert result.condition == ConditionLevel.GOOD
        assert result.confidence == pytest.approx(0.6)
        assert result.description.endswith(" Some color fading from wear.")
        assert result.description.startswith("Good used condition")

    def test_new_with_tags_capped(self):
        """Test that confidence is capped at 1.0."""
        result = classify_condition("BNWT brand new with tags, never worn")
        assert result.condition == ConditionLevel.NEW
        assert result.scores[ConditionLevel.NEW] > 1.0
        assert result.confidence == 1.0
        assert result.ebay_condition_code == 1000

    def test_keyword_counted_once(self):
        """Test that repeating a keyword does not add more."""
        once = classify_condition("vintage jacket")
        twice = classify_condition("vintage vintage vintage jacket")
        assert once.scores == twice.scores
        assert once.condition == ConditionLevel.FAIR

    def test_earlier_level_wins_ties(self):
        """Test tie-breaking toward the better condition."""
        result = classify_condition("excellent, very good")
        assert result.scores[ConditionLevel.EXCELLENT] == pytest.approx(0.3)
        assert result.scores[ConditionLevel.VERY_GOOD] == pytest.approx(0.3)
        assert result.condition == ConditionLevel.EXCELLENT

    def test_words_inside_words_ignored(self):
        """Test that 'unworn' does not count as 'worn'."""
        result = classify_condition("unworn")
        assert result.condition == ConditionLevel.NEW
        assert result.scores[ConditionLevel.FAIR] == 0


class TestVisualHint:
    """Tests for the external visual-condition hint."""

    def test_hint_naming_a_level(self):
        """Test a hint that names a level directly."""
        result = classify_condition("", visual_hint="EXCELLENT")
        assert result.condition == ConditionLevel.EXCELLENT
        assert result.confidence == pytest.approx(0.5)

    def test_hint_with_underscore_name(self):
        """Test level names written with underscores or spaces."""
        assert classify_condition("", visual_hint="very_good").condition == ConditionLevel.VERY_GOOD
        assert classify_condition("", visual_hint="Very Good").condition == ConditionLevel.VERY_GOOD

    def test_hint_visual_phrase(self):
        """Test a hint that uses one of a level's visual phrases."""
        result = classify_condition("", visual_hint="heavy wear on cuffs")
        assert result.condition == ConditionLevel.FAIR

    def test_hint_outweighs_single_keyword(self):
        """Test that a hint (0.5) beats one keyword (0.3)."""
        result = classify_condition("good", visual_hint="excellent")
        assert result.condition == ConditionLevel.EXCELLENT

    def test_unknown_hint_ignored(self):
        """Test a hint that names nothing."""
        result = classify_condition("", visual_hint="sparkly")
        assert result.condition == ConditionLevel.GOOD
        assert result.confidence == 0


class TestConditionDescription:
    """Tests for description notes and codes."""

    def test_damage_notes(self):
        """Test stain and hole notes, in order."""
        result = classify_condition("fair, small stain and a tiny hole")
        assert result.condition == ConditionLevel.FAIR
        assert result.description == (
            "Fair condition with visible wear and some flaws. Still wearable."
            " Note: Minor staining present."
            " Note: Small repair needed."
        )

    def test_ebay_codes(self):
        """Test eBay condition ids."""
        assert ebay_condition_code(ConditionLevel.NEW) == 1000
        for level in (ConditionLevel.EXCELLENT, ConditionLevel.VERY_GOOD, ConditionLevel.GOOD, ConditionLevel.FAIR):
            assert ebay_condition_code(level) == 3000
