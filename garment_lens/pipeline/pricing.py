"""
Price estimation - fixed tier x condition lookup.
"""
import logging
from types import MappingProxyType
from typing import Union

from ..models.brand import Tier
from ..models.condition import ConditionLevel
from ..models.listing import PriceRange


logger = logging.getLogger(__name__)

DEFAULT_TIER_KEY = "default"
DEFAULT_CONDITION_KEY = ConditionLevel.GOOD
SUGGESTED_PRICE_MARKUP = 1.1


def _row(new, excellent, very_good, good, fair):
    return MappingProxyType({
        ConditionLevel.NEW: new,
        ConditionLevel.EXCELLENT: excellent,
        ConditionLevel.VERY_GOOD: very_good,
        ConditionLevel.GOOD: good,
        ConditionLevel.FAIR: fair,
    })


# (min, max) in the listing currency. Each row is non-increasing from NEW to FAIR.
PRICE_TABLE = MappingProxyType({
    Tier.LUXURY.value: _row((250, 600), (200, 500), (160, 400), (120, 300), (70, 180)),
    Tier.PREMIUM.value: _row((60, 150), (50, 125), (40, 100), (30, 80), (18, 45)),
    Tier.MID_RANGE.value: _row((30, 70), (25, 55), (20, 45), (15, 35), (8, 20)),
    Tier.HIGH_STREET.value: _row((15, 40), (12, 32), (10, 26), (8, 20), (4, 12)),
    Tier.WORKWEAR.value: _row((40, 90), (34, 76), (30, 68), (25, 58), (15, 40)),
    DEFAULT_TIER_KEY: _row((20, 50), (16, 40), (14, 34), (10, 28), (6, 16)),
})


def _tier_key(tier: Union[Tier, str, None]) -> str:
    if isinstance(tier, Tier):
        return tier.value
    if isinstance(tier, str) and tier.strip().lower() in PRICE_TABLE:
        return tier.strip().lower()
    return DEFAULT_TIER_KEY


def _condition_key(condition: Union[ConditionLevel, str, None]) -> ConditionLevel:
    if isinstance(condition, ConditionLevel):
        return condition
    if isinstance(condition, str):
        try:
            return ConditionLevel(condition.strip().upper().replace(" ", "_"))
        except ValueError:
            pass
    return DEFAULT_CONDITION_KEY


def estimate_price(
    tier: Union[Tier, str, None],
    condition: Union[ConditionLevel, str, None],
) -> tuple[float, PriceRange]:
    """
    Look up the price band for a tier and condition.

    Unknown tiers use the default row; unknown conditions use the GOOD column.

    Returns:
        Tuple of (suggested_price, price_range)
    """
    tier_key = _tier_key(tier)
    condition_key = _condition_key(condition)
    if tier_key == DEFAULT_TIER_KEY and tier is not None:
        logger.debug(f"No price row for tier {tier!r}, using default")

    low, high = PRICE_TABLE[tier_key][condition_key]
    average = (low + high) / 2
    suggested = float(round(average * SUGGESTED_PRICE_MARKUP))

    return suggested, PriceRange(min=float(low), max=float(high), average=average)
