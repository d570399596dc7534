"""Read-only brand registry and detector vocabularies."""

from .brands import BRAND_DEFINITIONS, DEFAULT_REGISTRY
from .vocabulary import (
    CONDITION_INDICATORS,
    MATERIAL_SIGNATURES,
    ROMAN_NUMERAL_BRAND,
    ROMAN_NUMERAL_CONFIDENCE,
    SIZING_SYSTEMS,
    VISUAL_PATTERNS,
)

__all__ = [
    "BRAND_DEFINITIONS",
    "DEFAULT_REGISTRY",
    "CONDITION_INDICATORS",
    "MATERIAL_SIGNATURES",
    "ROMAN_NUMERAL_BRAND",
    "ROMAN_NUMERAL_CONFIDENCE",
    "SIZING_SYSTEMS",
    "VISUAL_PATTERNS",
]
