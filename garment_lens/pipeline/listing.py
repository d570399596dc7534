"""
Listing artifact generator - eBay-style title, keywords, description and SKU.
"""
import logging
import random
import re
from datetime import date
from types import MappingProxyType
from typing import Optional

from ..config import get_config
from ..errors import InvalidInput
from ..models.brand import Tier
from ..models.classification import ClassificationResult, ItemDetails
from ..models.condition import ConditionLevel, ConditionResult
from ..models.evidence import LabelData
from ..models.listing import EBAY_TITLE_MAX_LENGTH, ListingItem
from .pricing import estimate_price


logger = logging.getLogger(__name__)

UNBRANDED = "Unbranded"
UNKNOWN_BRAND = "Unknown Brand"
UNKNOWN_SKU_PREFIX = "ITM"
TRUNCATION_MARKER = "..."
DEFAULT_SIZE = "One Size"

# Keyed by category, then tier value; "default" is the fallback template.
TITLE_TEMPLATES = MappingProxyType({
    "clothing": MappingProxyType({
        Tier.LUXURY.value: "{BRAND} {GENDER} {TYPE} {COLOR} {MATERIAL} Size {SIZE} {CONDITION}",
        Tier.PREMIUM.value: "{BRAND} {GENDER} {TYPE} {COLOR} Size {SIZE} {CONDITION} {SEASON}",
        Tier.HIGH_STREET.value: "{GENDER} {BRAND} {TYPE} {COLOR} Size {SIZE} {CONDITION} {STYLE}",
        "default": "{GENDER} {TYPE} {BRAND} {COLOR} Size {SIZE} {CONDITION}",
    }),
    "bags": MappingProxyType({
        Tier.LUXURY.value: "{BRAND} {MODEL} {TYPE} Bag {COLOR} {MATERIAL} {CONDITION} Authentic",
        Tier.PREMIUM.value: "{BRAND} {GENDER} {TYPE} Bag {COLOR} {SIZE_DESC} {CONDITION}",
        "default": "{GENDER} {BRAND} {TYPE} Bag {COLOR} {CONDITION}",
    }),
    "shoes": MappingProxyType({
        Tier.LUXURY.value: "{BRAND} {GENDER} {TYPE} {COLOR} {MATERIAL} Size {SIZE} {CONDITION}",
        "default": "{GENDER} {BRAND} {TYPE} Shoes {COLOR} Size {SIZE} {CONDITION}",
    }),
    "accessories": MappingProxyType({
        Tier.LUXURY.value: "{BRAND} {TYPE} {MATERIAL} {COLOR} {CONDITION} Authentic",
        Tier.PREMIUM.value: "{BRAND} {GENDER} {TYPE} {COLOR} {CONDITION}",
        "default": "{BRAND} {TYPE} {COLOR} {CONDITION}",
    }),
})

CONDITION_TITLE_KEYWORDS = MappingProxyType({
    ConditionLevel.NEW: "BNWT",
    ConditionLevel.EXCELLENT: "Excellent",
    ConditionLevel.VERY_GOOD: "VGC",
    ConditionLevel.GOOD: "Good",
    ConditionLevel.FAIR: "Used",
})

CONDITION_KEYWORDS = MappingProxyType({
    ConditionLevel.NEW: ("BNWT", "Tags", "Unworn", "Brand New"),
    ConditionLevel.EXCELLENT: ("Mint", "Pristine", "Like New", "Barely Worn"),
    ConditionLevel.VERY_GOOD: ("Great Condition", "Well Maintained", "Light Wear"),
    ConditionLevel.GOOD: ("Good Used", "Some Wear", "Pre-loved"),
    ConditionLevel.FAIR: ("Vintage", "Distressed", "Well Worn", "Signs of Wear"),
})

MATERIAL_KEYWORDS = MappingProxyType({
    "LEATHER": ("Genuine Leather", "Soft Leather", "Premium Leather"),
    "COTTON": ("100% Cotton", "Pure Cotton", "Cotton Blend"),
    "WOOL": ("Pure Wool", "Merino Wool", "Wool Blend"),
    "SILK": ("100% Silk", "Pure Silk", "Silk Blend"),
    "DENIM": ("Denim", "Jean", "Raw Denim"),
    "CASHMERE": ("Cashmere", "Cashmere Blend", "Luxury Cashmere"),
})

STYLE_KEYWORDS = MappingProxyType({
    "VINTAGE": ("Vintage", "Retro", "Y2K", "90s", "80s", "Classic"),
    "MODERN": ("Contemporary", "Current Season", "Trendy", "Fashion Forward"),
    "CASUAL": ("Casual", "Everyday", "Relaxed", "Comfortable"),
    "FORMAL": ("Formal", "Business", "Office", "Smart", "Professional"),
    "STREETWEAR": ("Street Style", "Urban", "Hip Hop", "Skate"),
})

DEFAULT_STYLES = MappingProxyType({
    "dress": "Cocktail",
    "jeans": "Straight",
    "jacket": "Bomber",
    "shirt": "Button-up",
    "shoes": "Casual",
    "bag": "Shoulder",
})

SIZE_DESCRIPTIONS = MappingProxyType({
    "XS": "Extra Small",
    "S": "Small",
    "M": "Medium",
    "L": "Large",
    "XL": "Extra Large",
    "XXL": "2XL",
})

CLOSING_LINES = (
    "Please see photos for full details.",
    "From smoke-free home.",
    "Happy to answer any questions.",
)

_PLACEHOLDER = re.compile(r"\{([A-Z_]+)\}")


def _capitalize(value: Optional[str]) -> str:
    if not value:
        return ""
    value = value.strip()
    return value[:1].upper() + value[1:]


def current_season(today: Optional[date] = None) -> str:
    """'SS' + year for March to June, 'FW' + year for September to December, else empty."""
    today = today or date.today()
    year = today.strftime("%y")
    if 3 <= today.month <= 6:
        return f"SS{year}"
    if 9 <= today.month <= 12:
        return f"FW{year}"
    return ""


def _size_description(size: Optional[str]) -> str:
    if not size:
        return ""
    if "-" in size:
        return size
    return SIZE_DESCRIPTIONS.get(size.upper(), size)


def _tier_value(tier: Optional[Tier]) -> Optional[str]:
    if tier is None:
        return None
    return tier.value if isinstance(tier, Tier) else str(tier)


def select_title_template(category: Optional[str], tier: Optional[Tier]) -> str:
    """Template for (category, tier), falling back to the category default, then clothing."""
    templates = TITLE_TEMPLATES.get((category or "").lower(), TITLE_TEMPLATES["clothing"])
    return templates.get(_tier_value(tier) or "", templates["default"])


def supplementary_keywords(condition: ConditionLevel, details: ItemDetails) -> list[str]:
    """Keyword pool for padding short titles: condition, material and style tables."""
    pool = list(CONDITION_KEYWORDS.get(condition, ()))
    if details.material:
        pool.extend(MATERIAL_KEYWORDS.get(details.material.upper(), ()))
    if details.style:
        pool.extend(STYLE_KEYWORDS.get(details.style.upper(), ()))
    return pool


def generate_title(
    details: ItemDetails,
    brand: Optional[str],
    tier: Optional[Tier],
    condition: ConditionLevel,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> str:
    """
    Build an eBay title of at most 80 characters.

    Short titles are padded with up to three sampled supplementary keywords
    that fit and are not already present. The sample is random; pass a
    seeded rng for repeatable output.
    """
    config = get_config().listing
    rng = rng or random.Random()
    item_type = details.item_type or ""

    components = {
        "BRAND": brand or UNBRANDED,
        "GENDER": _capitalize(details.gender),
        "TYPE": _capitalize(item_type),
        "COLOR": _capitalize(details.color),
        "SIZE": details.size or DEFAULT_SIZE,
        "SIZE_DESC": _size_description(details.size),
        "MATERIAL": _capitalize(details.material),
        "CONDITION": CONDITION_TITLE_KEYWORDS.get(condition, "Pre-owned"),
        "MODEL": details.model or "",
        "SEASON": details.season or current_season(today),
        "STYLE": details.style or DEFAULT_STYLES.get(item_type.lower(), ""),
    }

    title = _PLACEHOLDER.sub(lambda m: components.get(m.group(1), ""), select_title_template(details.category, tier))
    title = " ".join(title.split())

    if len(title) < config.keyword_append_threshold:
        pool = supplementary_keywords(condition, details)
        picked = rng.sample(pool, min(config.keyword_sample_size, len(pool)))
        for keyword in picked:
            if keyword.lower() in title.lower():
                continue
            if len(title) + len(keyword) + 1 <= EBAY_TITLE_MAX_LENGTH:
                title = f"{title} {keyword}"

    if len(title) > EBAY_TITLE_MAX_LENGTH:
        title = title[:EBAY_TITLE_MAX_LENGTH - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER

    return title


def _plural(word: str) -> str:
    if word.endswith(("ss", "x", "ch", "sh")):
        return f"{word}es"
    if word.endswith("s"):
        return word
    return f"{word}s"


def generate_keywords(
    details: ItemDetails,
    brand: Optional[str],
    condition: ConditionLevel,
) -> list[str]:
    """Search keywords, unique case-insensitively, each longer than two characters."""
    candidates: list[str] = []
    if brand:
        candidates.extend([brand, brand.lower()])
    if details.item_type:
        candidates.extend([details.item_type, _plural(details.item_type)])
    candidates.extend(k.lower() for k in CONDITION_KEYWORDS.get(condition, ()))
    if details.color:
        candidates.append(details.color)
    if details.material:
        candidates.append(details.material)
    if details.size:
        candidates.extend([f"size {details.size}", details.size])
    if details.gender:
        candidates.extend([details.gender, f"{details.gender}s"])

    keywords: list[str] = []
    seen = set()
    for keyword in candidates:
        key = keyword.strip().lower()
        if len(key) <= 2 or key in seen:
            continue
        seen.add(key)
        keywords.append(keyword.strip())
    return keywords


def _label_lines(label_data: Optional[LabelData]) -> list[str]:
    if label_data is None:
        return []

    lines = []
    if label_data.materials:
        composition = sorted(label_data.materials.items(), key=lambda kv: (-kv[1], kv[0]))
        lines.append("Composition: " + ", ".join(f"{pct}% {fabric.title()}" for fabric, pct in composition))
    if label_data.care_instructions:
        lines.append("Care: " + ", ".join(label_data.care_instructions))
    if label_data.country_of_origin:
        country = label_data.country_of_origin
        lines.append("Made in: " + (country.upper() if len(country) <= 3 else country.title()))
    return lines


def generate_description(
    details: ItemDetails,
    brand: Optional[str],
    condition: ConditionResult,
    label_data: Optional[LabelData] = None,
    measurement_block: str = "",
) -> str:
    """Listing description: headline, condition, label facts, measurements, closing lines."""
    headline = " ".join(
        p for p in [
            brand or UNKNOWN_BRAND,
            _capitalize(details.color),
            _capitalize(details.material),
            _capitalize(details.item_type) or "Item",
        ] if p
    )
    if details.size:
        headline += f" - Size {details.size}"

    blocks = [headline, condition.description]
    label_lines = _label_lines(label_data)
    if label_lines:
        blocks.append("\n".join(label_lines))
    if measurement_block:
        blocks.append(measurement_block)
    blocks.extend(CLOSING_LINES)
    return "\n\n".join(blocks)


def generate_sku(
    brand: Optional[str],
    index: int,
    batch_id: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """
    SKU in the form PPP-YYMM-BATCH-NNN.

    PPP is the first three letters of the brand padded with X (ITM when
    the brand is unknown), NNN the 1-based item index.
    """
    if index < 1:
        raise InvalidInput(f"SKU index must be 1-based, got {index}")

    today = today or date.today()
    letters = re.sub(r"[^A-Z]", "", (brand or "").upper())
    prefix = letters[:3].ljust(3, "X") if letters else UNKNOWN_SKU_PREFIX
    batch = (batch_id or get_config().listing.default_batch_id).strip().upper()
    return f"{prefix}-{today:%y%m}-{batch}-{index:03d}"


def category_path(details: ItemDetails) -> str:
    """Marketplace category string, e.g. 'Clothing > Dress'."""
    parts = [_capitalize(details.category or "clothing")]
    if details.item_type:
        parts.append(_capitalize(details.item_type))
    return " > ".join(parts)


def build_listing(
    classification: ClassificationResult,
    condition: ConditionResult,
    details: ItemDetails,
    index: int,
    batch_id: Optional[str] = None,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
    measurement_block: str = "",
) -> ListingItem:
    """Assemble the terminal listing artifact for one classified item."""
    primary = classification.primary_brand
    brand = primary.brand if primary else None
    tier = primary.tier if primary else None

    suggested, price_range = estimate_price(tier, condition.condition)

    listing = ListingItem(
        sku=generate_sku(brand, index, batch_id, today),
        ebay_title=generate_title(details, brand, tier, condition.condition, rng, today),
        description=generate_description(
            details, brand, condition, classification.label_data, measurement_block
        ),
        keywords=generate_keywords(details, brand, condition.condition),
        condition=condition.condition,
        condition_code=condition.ebay_condition_code,
        condition_confidence=condition.confidence,
        brand=brand or UNBRANDED,
        tier=_tier_value(tier),
        suggested_price=suggested,
        price_range=price_range,
        currency=get_config().listing.currency,
        category=category_path(details),
    )

    logger.debug(f"Built listing {listing.sku}: {listing.ebay_title}")
    return listing
