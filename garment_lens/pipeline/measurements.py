"""
Measurement contract - expected measurements per garment, range checks,
size estimation and listing formatting.

Values always come from the caller (a measurement provider or the seller).
Nothing here invents a measurement.
"""
import logging
import math
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..models.measurement import Measurement, MeasurementReport, SizeEstimate


logger = logging.getLogger(__name__)

MEASUREMENT_TYPES = MappingProxyType({
    "clothing": MappingProxyType({
        "dress": ("bust", "waist", "hips", "length", "sleeve"),
        "shirt": ("chest", "length", "sleeve", "shoulder"),
        "jacket": ("chest", "length", "sleeve", "shoulder"),
        "jeans": ("waist", "inseam", "rise", "thigh", "leg_opening"),
        "skirt": ("waist", "hips", "length"),
        "coat": ("chest", "length", "sleeve", "shoulder"),
        "blazer": ("chest", "waist", "length", "sleeve", "shoulder"),
    }),
    "accessories": MappingProxyType({
        "bag": ("height", "width", "depth", "strap_drop"),
        "shoes": ("insole_length", "width", "heel_height"),
        "belt": ("length", "width"),
    }),
})

# Plausible flat measurements, inches
MEASUREMENT_RANGES = MappingProxyType({
    "bust": (28, 60),
    "chest": (30, 60),
    "waist": (22, 50),
    "hips": (30, 60),
    "length": (10, 60),
    "sleeve": (15, 30),
    "shoulder": (12, 22),
    "inseam": (20, 36),
    "rise": (6, 14),
    "thigh": (8, 16),
    "leg_opening": (5, 12),
})

REQUIRED_MEASUREMENTS = MappingProxyType({
    "dress": ("bust", "waist", "length"),
    "shirt": ("chest", "length"),
    "jacket": ("chest", "length"),
    "jeans": ("waist", "inseam"),
    "skirt": ("waist", "length"),
    "coat": ("chest", "length"),
    "bag": ("height", "width"),
    "shoes": ("insole_length",),
})

DISPLAY_ORDER = MappingProxyType({
    "dress": ("bust", "waist", "hips", "length", "sleeve"),
    "shirt": ("chest", "shoulder", "sleeve", "length"),
    "jacket": ("chest", "shoulder", "sleeve", "length"),
    "jeans": ("waist", "rise", "inseam", "thigh", "leg_opening"),
    "skirt": ("waist", "hips", "length"),
    "coat": ("chest", "shoulder", "sleeve", "length"),
    "bag": ("height", "width", "depth", "strap_drop"),
    "shoes": ("insole_length", "width", "heel_height"),
})
DEFAULT_DISPLAY_ORDER = ("length", "width")

LABELS = MappingProxyType({
    "sleeve": "Sleeve Length",
    "shoulder": "Shoulder to Shoulder",
    "leg_opening": "Leg Opening",
    "strap_drop": "Strap Drop",
    "insole_length": "Insole Length",
    "heel_height": "Heel Height",
})

SIZE_ORDER = ("XXS", "XS", "S", "M", "L", "XL", "XXL", "XXXL")

# Upper bounds (exclusive) of bust/chest in inches for each letter size
BUST_SIZES = ((34, "XS"), (36, "S"), (38, "M"), (40, "L"), (42, "XL"))

DISPLAY_HEADER = "Actual Measurements:"
DISPLAY_FOOTER = 'All measurements taken flat. Please allow 1" variance.'
MEASUREMENT_TIP = "Lay the item flat and measure seam to seam for the most accurate listing"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def item_category(item_type: Optional[str]) -> str:
    """'clothing' or 'accessories'; unknown types count as clothing."""
    if item_type and item_type.lower() in MEASUREMENT_TYPES["accessories"]:
        return "accessories"
    return "clothing"


def measurement_types(item_type: Optional[str]) -> tuple[str, ...]:
    if not item_type:
        return ()
    key = item_type.lower()
    return MEASUREMENT_TYPES[item_category(key)].get(key, ())


def required_measurements(item_type: Optional[str]) -> tuple[str, ...]:
    if not item_type:
        return ()
    return REQUIRED_MEASUREMENTS.get(item_type.lower(), ())


def suggested_measurements(item_type: Optional[str]) -> dict[str, Any]:
    """Which measurements a seller should take for this item type."""
    types = measurement_types(item_type)
    return {
        "recommended": list(types[:3]),
        "optional": list(types[3:]),
        "tip": MEASUREMENT_TIP,
    }


def validate_measurements(measurements: Mapping[str, Measurement], item_type: Optional[str]) -> dict[str, Any]:
    """
    Range-check supplied measurements and look for missing required ones.

    Returns:
        Dict with is_valid, issues, confidence (mean of measurement
        confidences) and completeness (checked / required, capped at 1)
    """
    issues = []
    total_confidence = 0.0
    checked = 0

    for name, measurement in measurements.items():
        bounds = MEASUREMENT_RANGES.get(name)
        if bounds is None:
            continue
        checked += 1
        total_confidence += measurement.confidence

        low, high = bounds
        if not low <= measurement.inches <= high:
            issues.append(f"{name} measurement seems unusual: {measurement.value:g}{measurement.unit}")

    required = required_measurements(item_type)
    for name in required:
        if name not in measurements:
            issues.append(f"Missing {name} measurement")

    if required:
        completeness = min(1.0, checked / len(required))
    else:
        completeness = 1.0 if checked else 0.0

    return {
        "is_valid": not issues,
        "issues": issues,
        "confidence": total_confidence / checked if checked else 0.0,
        "completeness": completeness,
    }


def _alternative_sizes(size: str) -> list[str]:
    if size not in SIZE_ORDER:
        return []
    index = SIZE_ORDER.index(size)
    alternatives = []
    if index > 0:
        alternatives.append(SIZE_ORDER[index - 1])
    if index < len(SIZE_ORDER) - 1:
        alternatives.append(SIZE_ORDER[index + 1])
    return alternatives


def estimate_size_from_measurements(
    measurements: Mapping[str, Measurement],
    item_type: Optional[str],
) -> SizeEstimate:
    """
    Letter size from bust/chest for dresses and shirts, waist size for jeans.

    Any other combination gives size 'Unknown' at confidence 0.
    """
    kind = (item_type or "").lower()

    if kind in ("dress", "shirt"):
        bust = measurements.get("bust") or measurements.get("chest")
        if bust is not None:
            size = "XXL"
            for upper, letter in BUST_SIZES:
                if bust.inches < upper:
                    size = letter
                    break
            return SizeEstimate(size=size, confidence=0.85, alternative_sizes=_alternative_sizes(size))

    if kind in ("jeans", "trousers"):
        waist = measurements.get("waist")
        if waist is not None:
            return SizeEstimate(size=str(_round_half_up(waist.inches)), confidence=0.9)

    return SizeEstimate()


def _label(name: str) -> str:
    return LABELS.get(name) or name.replace("_", " ").title()


def _format_value(measurement: Measurement) -> str:
    if measurement.unit == "cm":
        return f'{measurement.value:g}cm ({_round_half_up(measurement.value / 2.54)}")'
    return f'{measurement.value:g}"'


def format_measurements_for_listing(measurements: Mapping[str, Measurement], item_type: Optional[str]) -> str:
    """Measurement block for the listing description; empty when nothing to show."""
    if not measurements:
        return ""

    order = DISPLAY_ORDER.get((item_type or "").lower(), DEFAULT_DISPLAY_ORDER)
    lines = [DISPLAY_HEADER]
    for name in order:
        measurement = measurements.get(name)
        if measurement is not None:
            lines.append(f"{_label(name)}: {_format_value(measurement)}")

    if len(lines) == 1:
        return ""

    lines.extend(["", DISPLAY_FOOTER])
    return "\n".join(lines)


def analyze_measurements(measurements: Mapping[str, Measurement], item_type: Optional[str]) -> MeasurementReport:
    """Validate, size and format one item's supplied measurements."""
    if not measurements:
        return MeasurementReport(has_measurements=False)

    validation = validate_measurements(measurements, item_type)
    if validation["issues"]:
        logger.debug(f"Measurement issues: {validation['issues']}")

    return MeasurementReport(
        has_measurements=True,
        is_valid=validation["is_valid"],
        issues=validation["issues"],
        confidence=validation["confidence"],
        completeness=validation["completeness"],
        estimated_size=estimate_size_from_measurements(measurements, item_type),
        display_format=format_measurements_for_listing(measurements, item_type),
    )
