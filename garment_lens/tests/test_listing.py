"""
Tests for pricing and listing artifact generation.
"""
import random
import re
from datetime import date

import pytest

from garment_lens.errors import InvalidInput
from garment_lens.models import ConditionLevel, ItemDetails, LabelData, Tier
from garment_lens.pipeline.condition import classify_condition
from garment_lens.pipeline.fusion import resolve
from garment_lens.pipeline.listing import (
    CLOSING_LINES,
    CONDITION_KEYWORDS,
    build_listing,
    current_season,
    generate_description,
    generate_keywords,
    generate_sku,
    generate_title,
    select_title_template,
)
from garment_lens.pipeline.pricing import PRICE_TABLE, estimate_price


class TestPricing:
    """Tests for the tier x condition price table."""

    @pytest.mark.parametrize("tier", list(PRICE_TABLE.keys()))
    def test_monotone_within_tier(self, tier):
        """Test NEW >= EXCELLENT >= VERY_GOOD >= GOOD >= FAIR."""
        prices = [estimate_price(tier, level)[0] for level in ConditionLevel]
        assert prices == sorted(prices, reverse=True)

    def test_range_and_suggested(self):
        """Test the price range shape."""
        suggested, price_range = estimate_price(Tier.PREMIUM, ConditionLevel.GOOD)
        assert price_range.min == 30
        assert price_range.max == 80
        assert price_range.average == pytest.approx(55)
        assert suggested == pytest.approx(price_range.average * 1.1, abs=0.5)
        assert suggested == int(suggested)

    def test_unknown_tier_uses_default_row(self):
        """Test the default row fallback."""
        assert estimate_price("space-age", ConditionLevel.NEW) == estimate_price(None, ConditionLevel.NEW)
        assert estimate_price(None, ConditionLevel.NEW) == estimate_price("default", ConditionLevel.NEW)

    def test_unknown_condition_uses_good_column(self):
        """Test the GOOD column fallback."""
        assert estimate_price(Tier.LUXURY, "MINT") == estimate_price(Tier.LUXURY, ConditionLevel.GOOD)
        assert estimate_price(Tier.LUXURY, None) == estimate_price(Tier.LUXURY, ConditionLevel.GOOD)

    def test_string_keys_accepted(self):
        """Test tier and condition given as strings."""
        assert estimate_price("luxury", "very good") == estimate_price(Tier.LUXURY, ConditionLevel.VERY_GOOD)


class TestSku:
    """Tests for SKU generation."""

    def test_format(self):
        """Test PPP-YYMM-BATCH-NNN."""
        assert generate_sku("OSKA", 1, "B7", date(2024, 3, 15)) == "OSK-2403-B7-001"

    def test_unknown_brand_and_default_batch(self):
        """Test ITM prefix and XX batch id."""
        assert generate_sku(None, 12, None, date(2024, 11, 2)) == "ITM-2411-XX-012"

    def test_short_brand_padded(self):
        """Test that prefixes use letters only and are padded with X."""
        assert generate_sku("H&M", 3, "A", date(2025, 1, 1)) == "HMX-2501-A-003"
        assert generate_sku("& OTHER STORIES", 3, "A", date(2025, 1, 1)).startswith("OTH-")

    def test_index_must_be_one_based(self):
        """Test that index 0 is rejected."""
        with pytest.raises(InvalidInput):
            generate_sku("OSKA", 0)


class TestTitle:
    """Tests for eBay title generation."""

    def test_season(self):
        """Test season codes."""
        assert current_season(date(2024, 4, 1)) == "SS24"
        assert current_season(date(2024, 10, 1)) == "FW24"
        assert current_season(date(2024, 1, 1)) == ""

    def test_template_selection(self):
        """Test (category, tier) lookup with defaults."""
        assert select_title_template("bags", Tier.LUXURY).endswith("Authentic")
        assert select_title_template("bags", Tier.WORKWEAR) == select_title_template("bags", None)
        assert select_title_template("spaceships", None) == select_title_template("clothing", None)

    def test_short_title_padded_with_keywords(self):
        """Test that short titles get up to three fitting keywords."""
        details = ItemDetails(item_type="dress")
        title = generate_title(details, "OSKA", Tier.PREMIUM, ConditionLevel.GOOD, random.Random(7), date(2024, 1, 10))

        assert title.startswith("OSKA Dress Size One Size Good")
        added = [k for k in CONDITION_KEYWORDS[ConditionLevel.GOOD] if k in title]
        assert 1 <= len(added) <= 3
        assert len(title) <= 80

    def test_unbranded(self):
        """Test the placeholder for a missing brand."""
        title = generate_title(ItemDetails(item_type="top"), None, None, ConditionLevel.FAIR, random.Random(1))
        assert "Unbranded" in title

    def test_long_title_truncated(self):
        """Test the 80-character limit with truncation marker."""
        details = ItemDetails(
            item_type="double breasted trench coat",
            gender="womens",
            color="honey beige with contrast check lining",
            material="cotton gabardine",
            size="UK 12 / EU 40",
        )
        for seed in range(10):
            title = generate_title(details, "BURBERRY", Tier.LUXURY, ConditionLevel.EXCELLENT, random.Random(seed))
            assert len(title) <= 80
            assert title.endswith("...")

    def test_whitespace_collapsed(self):
        """Test that empty placeholders leave no double spaces."""
        title = generate_title(ItemDetails(), "COS", None, ConditionLevel.GOOD, random.Random(3))
        assert "  " not in title
        assert title == title.strip()


class TestKeywordsAndDescription:
    """Tests for keywords and description text."""

    def test_keywords_unique_and_long_enough(self):
        """Test dedup and minimum length."""
        details = ItemDetails(item_type="dress", color="Blue", size="M", gender="women")
        keywords = generate_keywords(details, "OSKA", ConditionLevel.GOOD)

        lowered = [k.lower() for k in keywords]
        assert len(lowered) == len(set(lowered))
        assert all(len(k) > 2 for k in keywords)
        assert "OSKA" in keywords
        assert "size M" in keywords
        assert "M" not in keywords

    def test_description_unknown_brand(self):
        """Test description fallbacks and closing lines."""
        condition = classify_condition("")
        description = generate_description(ItemDetails(item_type="shirt"), None, condition)

        assert description.startswith("Unknown Brand Shirt")
        assert condition.description in description
        for line in CLOSING_LINES:
            assert line in description

    def test_description_label_facts(self):
        """Test that label facts are listed."""
        label = LabelData(materials={"cotton": 95, "elastane": 5}, care_instructions=["machine wash"],
                          country_of_origin="uk")
        description = generate_description(ItemDetails(), "BURBERRY", classify_condition("good"), label)

        assert "Composition: 95% Cotton, 5% Elastane" in description
        assert "Care: machine wash" in description
        assert "Made in: UK" in description


class TestBuildListing:
    """Tests for the assembled listing."""

    def test_listing_from_classification(self):
        """Test the full listing for a classified item."""
        label = LabelData(brand="BURBERRY", brand_confidence=0.15)
        classification = resolve([], label_data=label)
        condition = classify_condition("excellent")

        listing = build_listing(
            classification,
            condition,
            ItemDetails(item_type="trench coat", size="12"),
            index=4,
            batch_id="b2",
            today=date(2024, 6, 1),
            rng=random.Random(0),
        )

        assert listing.sku == "BUR-2406-B2-004"
        assert listing.brand == "BURBERRY"
        assert listing.tier == "luxury"
        assert listing.condition == ConditionLevel.EXCELLENT
        assert listing.condition_code == 3000
        assert listing.suggested_price == estimate_price(Tier.LUXURY, ConditionLevel.EXCELLENT)[0]
        assert len(listing.ebay_title) <= 80
        assert listing.category == "Clothing > Trench coat"
        assert re.match(r"^[A-Z]{3}-\d{4}-[A-Z0-9]+-\d{3}$", listing.sku)

    def test_listing_without_brand(self):
        """Test the Unbranded fallback and default price row."""
        listing = build_listing(resolve([]), classify_condition(""), ItemDetails(), index=1, today=date(2024, 6, 1))

        assert listing.brand == "Unbranded"
        assert listing.tier is None
        assert listing.sku.startswith("ITM-")
        assert listing.suggested_price == estimate_price("default", ConditionLevel.GOOD)[0]

        dumped = listing.model_dump(by_alias=True)
        for key in ("sku", "ebayTitle", "description", "condition", "conditionConfidence",
                    "suggestedPrice", "priceRange", "keywords"):
            assert key in dumped
