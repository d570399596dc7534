"""
Listing models - the marketplace-ready artifact produced for each item.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .condition import ConditionLevel


EBAY_TITLE_MAX_LENGTH = 80


class PriceRange(BaseModel):
    """Expected selling price band."""
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    average: float = Field(ge=0)


class ListingItem(BaseModel):
    """
    Terminal artifact of the pipeline.
    Created once per item and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sku: str
    ebay_title: str = Field(alias="ebayTitle", max_length=EBAY_TITLE_MAX_LENGTH)
    description: str
    keywords: list[str] = Field(default_factory=list)
    condition: ConditionLevel
    condition_code: int = Field(alias="conditionCode")
    condition_confidence: float = Field(ge=0, le=1, alias="conditionConfidence")
    brand: str
    tier: Optional[str] = None
    suggested_price: float = Field(ge=0, alias="suggestedPrice")
    price_range: PriceRange = Field(alias="priceRange")
    currency: str = "GBP"
    category: str

    @field_validator("keywords", mode="before")
    @classmethod
    def dedupe_keywords(cls, v: Any) -> Any:
        """Drop case-insensitive duplicates, keeping the first spelling."""
        if not isinstance(v, list):
            return v
        seen = set()
        unique = []
        for keyword in v:
            key = str(keyword).strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            unique.append(str(keyword).strip())
        return unique
