"""
Pydantic models for garment_lens.
All data contracts are defined here for strict validation.
"""

from .brand import BrandCandidate, BrandDefinition, BrandRegistry, EvidenceSource, Tier
from .evidence import (
    AdvisoryBrand,
    ConfidenceBucket,
    ItemPhoto,
    LabelData,
    LabelImageScore,
    LabelSelection,
    LabelSize,
    MaterialSignature,
    SizingClue,
    VisualPatternHit,
)
from .condition import ConditionLevel, ConditionResult
from .measurement import Measurement, MeasurementReport, SizeEstimate
from .classification import ClassificationResult, ItemDetails, ItemInput
from .listing import EBAY_TITLE_MAX_LENGTH, ListingItem, PriceRange
from .export import BatchExport, ItemReport, RunMetadata

__all__ = [
    # Brand
    "BrandCandidate",
    "BrandDefinition",
    "BrandRegistry",
    "EvidenceSource",
    "Tier",
    # Evidence
    "AdvisoryBrand",
    "ConfidenceBucket",
    "ItemPhoto",
    "LabelData",
    "LabelImageScore",
    "LabelSelection",
    "LabelSize",
    "MaterialSignature",
    "SizingClue",
    "VisualPatternHit",
    # Condition
    "ConditionLevel",
    "ConditionResult",
    # Measurement
    "Measurement",
    "MeasurementReport",
    "SizeEstimate",
    # Classification
    "ClassificationResult",
    "ItemDetails",
    "ItemInput",
    # Listing
    "EBAY_TITLE_MAX_LENGTH",
    "ListingItem",
    "PriceRange",
    # Export
    "BatchExport",
    "ItemReport",
    "RunMetadata",
]
