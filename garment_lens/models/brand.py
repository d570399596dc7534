"""
Brand models - registry definitions and scored brand candidates.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Market price bracket of a brand."""
    LUXURY = "luxury"
    PREMIUM = "premium"
    MID_RANGE = "mid-range"
    HIGH_STREET = "high-street"
    WORKWEAR = "workwear"


class EvidenceSource(str, Enum):
    """Detector that proposed a candidate fact."""
    PATTERN = "pattern"
    LABEL = "label"
    MATERIAL = "material"
    VISUAL = "visual"
    SIZING = "sizing"


class BrandDefinition(BaseModel):
    """A known brand with its text patterns. Loaded once, never mutated."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Canonical brand id, upper case")
    patterns: tuple[str, ...] = Field(description="Regexes matched against lower-cased text")
    base_confidence: float = Field(ge=0, le=1)
    indicators: tuple[str, ...] = ()
    tier: Tier
    label_aliases: tuple[str, ...] = Field(
        default=(),
        description="Printed name forms that make the brand eligible on label text",
    )

    @property
    def total_patterns(self) -> int:
        return len(self.patterns)


@dataclass(frozen=True)
class BrandRegistry:
    """
    Ordered, read-only table of known brands.
    Declaration order is significant: it breaks confidence ties.
    """
    brands: tuple[BrandDefinition, ...]

    def __iter__(self) -> Iterator[BrandDefinition]:
        return iter(self.brands)

    def __len__(self) -> int:
        return len(self.brands)

    def get(self, name: str) -> Optional[BrandDefinition]:
        """Look up a brand by canonical name (case-insensitive)."""
        wanted = name.upper()
        for definition in self.brands:
            if definition.name == wanted:
                return definition
        return None

    def order_of(self, name: str) -> int:
        """Declaration index of a brand; unknown brands sort last."""
        wanted = name.upper()
        for index, definition in enumerate(self.brands):
            if definition.name == wanted:
                return index
        return len(self.brands)


class BrandCandidate(BaseModel):
    """A proposed brand identification, before or after fusion."""
    model_config = ConfigDict(populate_by_name=True)

    brand: str
    confidence: float = Field(ge=0, le=1)
    matched_patterns: int = Field(default=0, alias="matchedPatterns")
    total_patterns: int = Field(default=0, alias="totalPatterns")
    indicators: list[str] = Field(default_factory=list)
    tier: Tier
    raw_score: float = Field(ge=0, le=1, alias="rawScore", description="Score used for ranking")
    source: EvidenceSource = EvidenceSource.PATTERN
    supporting_sources: list[EvidenceSource] = Field(
        default_factory=list,
        alias="supportingSources",
        description="Advisory detectors that suggested the same brand",
    )
