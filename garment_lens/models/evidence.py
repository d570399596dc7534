"""
Evidence models - weak cues from the sizing, material and visual matchers,
and the structured data read off a care/size label.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .brand import EvidenceSource


class ConfidenceBucket(str, Enum):
    """Coarse summary of a numeric confidence."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SizingClue(BaseModel):
    """Sizing-system tokens found in the text."""
    model_config = ConfigDict(populate_by_name=True)

    system: str = Field(description="'roman', 'european', 'uk', 'letter' or 'numeric'")
    values: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0, le=1)
    suggested_brands: list[str] = Field(default_factory=list, alias="suggestedBrands")


class MaterialSignature(BaseModel):
    """A fabric phrase that is characteristic of some brands."""
    model_config = ConfigDict(populate_by_name=True)

    material: str
    confidence: float = Field(ge=0, le=1)
    suggested_brands: list[str] = Field(default_factory=list, alias="suggestedBrands")
    description: str = ""
    percentage: Optional[int] = Field(default=None, ge=0, le=100)


class VisualPatternHit(BaseModel):
    """A named visual pattern (check, monogram, stripe...) mentioned in the text."""
    model_config = ConfigDict(populate_by_name=True)

    pattern: str
    confidence: float = Field(ge=0, le=1)
    suggested_brands: list[str] = Field(default_factory=list, alias="suggestedBrands")
    description: str = ""


class AdvisoryBrand(BaseModel):
    """A brand suggested by weak evidence. Kept for explanation, never primary."""
    brand: str
    confidence: float = Field(ge=0, le=1)
    source: EvidenceSource


class ItemPhoto(BaseModel):
    """One item photo, described by text only (caption, alt text, OCR output)."""
    description: str = ""
    filename: Optional[str] = None

    @property
    def text(self) -> str:
        parts = [self.description or ""]
        if self.filename:
            parts.append(self.filename)
        return " ".join(p for p in parts if p)


class LabelImageScore(BaseModel):
    """How likely one photo is to show the care/size label."""
    index: int = Field(ge=0)
    confidence: float = Field(ge=0, le=1)
    indicators: list[str] = Field(default_factory=list)


class LabelSelection(BaseModel):
    """The photo chosen as the label, with every photo's score."""
    index: int = Field(ge=0)
    confidence: float = Field(ge=0, le=1)
    forced: bool = Field(default=False, description="Last photo used because nothing looked like a label")
    scores: list[LabelImageScore] = Field(default_factory=list)


class LabelSize(BaseModel):
    """Size tokens of one sizing system read off a label."""
    type: str
    values: list[str] = Field(default_factory=list)


class LabelData(BaseModel):
    """Structured data extracted from label text."""
    model_config = ConfigDict(populate_by_name=True)

    brand: Optional[str] = None
    brand_confidence: float = Field(default=0.0, ge=0, le=1, alias="brandConfidence")
    sizes: list[LabelSize] = Field(default_factory=list)
    materials: dict[str, int] = Field(default_factory=dict, description="Fabric -> percentage")
    care_instructions: list[str] = Field(default_factory=list, alias="careInstructions")
    country_of_origin: Optional[str] = Field(default=None, alias="countryOfOrigin")
    codes: dict[str, list[str]] = Field(default_factory=dict, description="Code type -> raw codes")
    extraction_confidence: ConfidenceBucket = Field(
        default=ConfidenceBucket.LOW,
        alias="extractionConfidence",
    )
    raw_text: str = Field(default="", alias="rawText")

    @property
    def populated_categories(self) -> int:
        """Number of the six field categories that carry data."""
        return sum([
            self.brand is not None,
            bool(self.sizes),
            bool(self.materials),
            bool(self.care_instructions),
            self.country_of_origin is not None,
            bool(self.codes),
        ])
