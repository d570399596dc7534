"""
Classification models - the per-item input contract and the fused result.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .brand import BrandCandidate
from .evidence import (
    AdvisoryBrand,
    ConfidenceBucket,
    ItemPhoto,
    LabelData,
    LabelSelection,
    MaterialSignature,
    SizingClue,
    VisualPatternHit,
)
from .measurement import Measurement


class ItemDetails(BaseModel):
    """Descriptive attributes used to fill the listing templates."""
    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(default="clothing", description="'clothing', 'bags', 'shoes' or 'accessories'")
    item_type: Optional[str] = Field(default=None, alias="itemType")
    gender: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    material: Optional[str] = None
    season: Optional[str] = None
    style: Optional[str] = None
    model: Optional[str] = None


class ItemInput(BaseModel):
    """Everything known about one item, as text."""
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(default="", description="Combined filenames, alt text and user notes")
    label_text: Optional[str] = Field(
        default=None,
        alias="labelText",
        description="OCR output of the label photo, if an upstream step produced one",
    )
    photos: list[ItemPhoto] = Field(default_factory=list)
    visual_condition_hint: Optional[str] = Field(default=None, alias="visualConditionHint")
    size_override: Optional[str] = Field(default=None, alias="sizeOverride")
    gender_override: Optional[str] = Field(default=None, alias="genderOverride")
    details: ItemDetails = Field(default_factory=ItemDetails)
    measurements: dict[str, Measurement] = Field(default_factory=dict)

    @field_validator("photos", mode="before")
    @classmethod
    def parse_photos(cls, v: Any) -> Any:
        """Accept bare strings as photo descriptions."""
        if v is None:
            return []
        if isinstance(v, list):
            return [{"description": p} if isinstance(p, str) else p for p in v]
        return v

    @field_validator("text", mode="before")
    @classmethod
    def parse_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v


class ClassificationResult(BaseModel):
    """
    Fused classification for one item.
    Owned by the fusion resolver and handed to the listing generator.
    """
    model_config = ConfigDict(populate_by_name=True)

    detected_brands: list[BrandCandidate] = Field(default_factory=list, alias="detectedBrands")
    primary_brand: Optional[BrandCandidate] = Field(default=None, alias="primaryBrand")
    confidence: ConfidenceBucket = ConfidenceBucket.LOW
    sizing_clues: list[SizingClue] = Field(default_factory=list, alias="sizingClues")
    material_signatures: list[MaterialSignature] = Field(default_factory=list, alias="materialSignatures")
    visual_patterns: list[VisualPatternHit] = Field(default_factory=list, alias="visualPatterns")
    advisory_brands: list[AdvisoryBrand] = Field(default_factory=list, alias="advisoryBrands")
    label_data: Optional[LabelData] = Field(default=None, alias="labelData")
    label_selection: Optional[LabelSelection] = Field(default=None, alias="labelSelection")

    @property
    def has_brand(self) -> bool:
        return self.primary_brand is not None

    def get_sizing_clue(self, system: str) -> Optional[SizingClue]:
        """Get the clue for a sizing system by name."""
        for clue in self.sizing_clues:
            if clue.system == system:
                return clue
        return None
