"""
Tests for Pydantic models and the brand registry.
"""
import dataclasses
import re

import pytest
from pydantic import ValidationError

from garment_lens.models import (
    BrandCandidate,
    ClassificationResult,
    ConditionLevel,
    ItemInput,
    LabelData,
    LabelSize,
    ListingItem,
    Measurement,
    PriceRange,
    Tier,
)
from garment_lens.registry import DEFAULT_REGISTRY


class TestBrandRegistry:
    """Tests for the read-only brand registry."""

    def test_registry_is_frozen(self):
        """Test that the registry cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REGISTRY.brands = ()

    def test_brand_definition_is_frozen(self):
        """Test that brand definitions cannot be mutated."""
        oska = DEFAULT_REGISTRY.get("OSKA")
        with pytest.raises(ValidationError):
            oska.base_confidence = 0.1

    def test_names_are_unique_and_upper_case(self):
        """Test canonical brand names."""
        names = [b.name for b in DEFAULT_REGISTRY]
        assert len(names) == len(set(names))
        assert all(name == name.upper() for name in names)

    def test_every_pattern_compiles(self):
        """Test that all brand patterns and label aliases are valid regexes."""
        for definition in DEFAULT_REGISTRY:
            for pattern in definition.patterns + definition.label_aliases:
                re.compile(pattern)
            assert 0 <= definition.base_confidence <= 1
            assert definition.total_patterns > 0

    def test_lookup_is_case_insensitive(self):
        """Test get() and order_of()."""
        assert DEFAULT_REGISTRY.get("oska").name == "OSKA"
        assert DEFAULT_REGISTRY.get("nope") is None
        assert DEFAULT_REGISTRY.order_of("OSKA") == 0
        assert DEFAULT_REGISTRY.order_of("nope") == len(DEFAULT_REGISTRY)


class TestCandidateModels:
    """Tests for brand candidates and classification results."""

    def test_candidate_confidence_bounds(self):
        """Test that confidence outside [0, 1] is rejected."""
        with pytest.raises(ValidationError):
            BrandCandidate(brand="OSKA", confidence=1.5, tier=Tier.PREMIUM, raw_score=0.5)

    def test_candidate_accepts_aliases(self):
        """Test that camelCase input is accepted."""
        candidate = BrandCandidate(
            brand="COS",
            confidence=0.3,
            matchedPatterns=2,
            totalPatterns=6,
            tier="premium",
            rawScore=0.3,
        )
        assert candidate.matched_patterns == 2
        assert candidate.tier == Tier.PREMIUM

    def test_classification_serializes_with_aliases(self):
        """Test the stable camelCase output names."""
        data = ClassificationResult().model_dump(by_alias=True)
        for key in ("detectedBrands", "primaryBrand", "sizingClues", "materialSignatures",
                    "visualPatterns", "advisoryBrands", "labelData"):
            assert key in data
        assert data["confidence"] == "low"


class TestInputModels:
    """Tests for item input parsing."""

    def test_photos_accept_strings(self):
        """Test that bare strings become photo descriptions."""
        item = ItemInput(text="dress", photos=["front view", {"description": "care label", "filename": "3.jpg"}])
        assert item.photos[0].description == "front view"
        assert item.photos[1].text == "care label 3.jpg"

    def test_text_none_becomes_empty(self):
        """Test that a null text is treated as empty."""
        item = ItemInput(text=None)
        assert item.text == ""

    def test_measurement_unit_normalization(self):
        """Test unit spellings and cm conversion."""
        assert Measurement(value=36, unit="IN").unit == "inches"
        cm = Measurement(value=254, unit="CM")
        assert cm.unit == "cm"
        assert cm.inches == pytest.approx(100)

    def test_measurement_must_be_positive(self):
        """Test that zero measurements are rejected."""
        with pytest.raises(ValidationError):
            Measurement(value=0)


class TestLabelData:
    """Tests for label data helpers."""

    def test_populated_categories(self):
        """Test category counting."""
        assert LabelData().populated_categories == 0

        data = LabelData(
            brand="BURBERRY",
            sizes=[LabelSize(type="uk", values=["12"])],
            materials={"cotton": 100},
            country_of_origin="uk",
        )
        assert data.populated_categories == 4


class TestListingItem:
    """Tests for the terminal listing artifact."""

    def _listing(self, **overrides) -> ListingItem:
        fields = dict(
            sku="OSK-2403-XX-001",
            ebay_title="OSKA Dress",
            description="desc",
            keywords=["OSKA", "oska", "Dress", " dress ", "linen"],
            condition=ConditionLevel.GOOD,
            condition_code=3000,
            condition_confidence=0.6,
            brand="OSKA",
            tier="premium",
            suggested_price=61,
            price_range=PriceRange(min=30, max=80, average=55),
            category="Clothing > Dress",
        )
        fields.update(overrides)
        return ListingItem(**fields)

    def test_keywords_deduplicated(self):
        """Test case-insensitive keyword dedup keeping first spelling."""
        listing = self._listing()
        assert listing.keywords == ["OSKA", "Dress", "linen"]

    def test_title_length_enforced(self):
        """Test that titles over 80 characters are rejected."""
        with pytest.raises(ValidationError):
            self._listing(ebay_title="x" * 81)

    def test_listing_is_frozen(self):
        """Test that the listing cannot be mutated."""
        listing = self._listing()
        with pytest.raises(ValidationError):
            listing.sku = "other"
