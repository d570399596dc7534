"""
Label handling - pick the photo most likely to show the care/size label,
and read structured facts out of label text.
"""
import logging
import re
from typing import Optional, Sequence

from ..models.brand import BrandRegistry
from ..models.evidence import (
    ConfidenceBucket,
    ItemPhoto,
    LabelData,
    LabelImageScore,
    LabelSelection,
    LabelSize,
)
from ..registry import DEFAULT_REGISTRY
from ..registry.vocabulary import (
    CARE_PATTERNS,
    CODE_PATTERNS,
    COUNTRY_PATTERNS,
    LABEL_FABRICS,
    LABEL_INDICATORS,
    MAX_CODES_PER_TYPE,
    NUMERIC_LABEL_SIZING,
    ROMAN_NUMERAL_BRAND,
    SIZING_SYSTEMS,
    TEXT_INDICATOR_PATTERN,
)
from .cues import find_sizing_values, has_roman_numeral_size


logger = logging.getLogger(__name__)

# Photo scores
LABEL_PHRASE_SCORE = 0.9
LAST_PHOTO_TEXT_SCORE = 0.7
TEXT_PHRASE_SCORE = 0.5
FLOOR_SCORE = 0.1

_TEXT_INDICATOR = re.compile(TEXT_INDICATOR_PATTERN)
_CARE = {tag: re.compile(p) for tag, p in CARE_PATTERNS.items()}
_COUNTRIES = [(country, re.compile(p)) for country, p in COUNTRY_PATTERNS]
_CODES = {code_type: re.compile(p, re.IGNORECASE) for code_type, p in CODE_PATTERNS.items()}
_COMPOSITION_TOKEN = re.compile(
    r"(?<!\d)(?P<percent>\d{1,3})\s*%|\b(?P<fabric>" + "|".join(LABEL_FABRICS) + r")\b"
)
_COMPOSITION_GAP = re.compile(r"\s*:?\s*")


# === Label photo selection ===

def score_label_image(photo_text: str, index: int, total: int) -> LabelImageScore:
    """
    Score how likely a photo shows the label, from its text alone.

    Args:
        photo_text: Description and/or filename of the photo
        index: 0-based position of the photo
        total: Number of photos for the item
    """
    text = (photo_text or "").lower()

    found = [indicator for indicator in LABEL_INDICATORS if indicator in text]
    if found:
        return LabelImageScore(index=index, confidence=LABEL_PHRASE_SCORE, indicators=found)

    if _TEXT_INDICATOR.search(text):
        if index == total - 1:
            return LabelImageScore(
                index=index,
                confidence=LAST_PHOTO_TEXT_SCORE,
                indicators=["last_image_with_text"],
            )
        return LabelImageScore(index=index, confidence=TEXT_PHRASE_SCORE, indicators=["text_indicator"])

    return LabelImageScore(index=index, confidence=FLOOR_SCORE)


def select_label_image(photos: Sequence[ItemPhoto]) -> Optional[LabelSelection]:
    """
    Choose the label photo: best score, lowest index on ties.

    When no photo scores above the floor, the last photo is used
    (forced=True) without raising its confidence.
    """
    if not photos:
        return None

    total = len(photos)
    scores = [score_label_image(photo.text, i, total) for i, photo in enumerate(photos)]

    best = scores[0]
    for score in scores[1:]:
        if score.confidence > best.confidence:
            best = score

    if best.confidence <= FLOOR_SCORE:
        last = scores[-1]
        logger.debug("No photo looks like a label, using the last one")
        return LabelSelection(index=last.index, confidence=last.confidence, forced=True, scores=scores)

    return LabelSelection(index=best.index, confidence=best.confidence, forced=False, scores=scores)


# === Label text extraction ===

def _extract_brand(text: str, lower: str, registry: BrandRegistry) -> tuple[Optional[str], float]:
    """Best-scoring brand among those whose name is printed on the label."""
    roman_size = has_roman_numeral_size(text)

    best_name, best_score = None, 0.0
    for definition in registry:
        printed = any(re.search(alias, lower) for alias in definition.label_aliases)
        if not printed and not (definition.name == ROMAN_NUMERAL_BRAND and roman_size):
            continue

        matched = sum(1 for pattern in definition.patterns if re.search(pattern, lower))
        # The printed name counts as a match even if no pattern spells it that way
        matched = max(matched, 1)
        score = definition.base_confidence * matched / definition.total_patterns
        if score > best_score:
            best_name, best_score = definition.name, score

    return best_name, min(best_score, 1.0)


def _extract_sizes(text: str) -> list[LabelSize]:
    sizes = []
    for system in (*SIZING_SYSTEMS, NUMERIC_LABEL_SIZING):
        values = find_sizing_values(text, system)
        if values:
            sizes.append(LabelSize(type=system.name, values=values))
    return sizes


def _extract_materials(lower: str) -> dict[str, int]:
    """
    Pair each percentage with the fabric written directly next to it.

    Handles both "95% cotton 5% elastane" and "cotton 95% elastane 5%":
    tokens are paired left to right, so a percentage is never shared by
    the fabric before and the fabric after it.
    """
    tokens = list(_COMPOSITION_TOKEN.finditer(lower))
    materials: dict[str, int] = {}
    i = 0
    while i < len(tokens) - 1:
        first, second = tokens[i], tokens[i + 1]
        gap = lower[first.end():second.start()]
        if (first.group("fabric") is None) == (second.group("fabric") is None) \
                or not _COMPOSITION_GAP.fullmatch(gap):
            i += 1
            continue
        fabric = first.group("fabric") or second.group("fabric")
        value = int(first.group("percent") or second.group("percent"))
        if value <= 100:
            materials[fabric] = max(materials.get(fabric, 0), value)
        i += 2
    return materials


def _extract_codes(text: str) -> dict[str, list[str]]:
    codes: dict[str, list[str]] = {}
    for code_type, pattern in _CODES.items():
        found: list[str] = []
        for match in pattern.finditer(text):
            code = match.group(1).upper()
            if code not in found:
                found.append(code)
            if len(found) >= MAX_CODES_PER_TYPE:
                break
        if found:
            codes[code_type] = found
    return codes


def _bucket(populated: int) -> ConfidenceBucket:
    if populated >= 4:
        return ConfidenceBucket.HIGH
    if populated >= 2:
        return ConfidenceBucket.MEDIUM
    return ConfidenceBucket.LOW


def extract_label_data(label_text: str, registry: BrandRegistry = DEFAULT_REGISTRY) -> LabelData:
    """
    Read brand, sizes, composition, care, origin and product codes off label text.

    Only the label text is consulted. Every field is optional; the
    extraction confidence reflects how many of the six categories were found.
    """
    text = label_text or ""
    lower = text.lower()

    brand, brand_confidence = _extract_brand(text, lower, registry)
    country = next((country for country, pattern in _COUNTRIES if pattern.search(lower)), None)

    data = LabelData(
        brand=brand,
        brand_confidence=brand_confidence,
        sizes=_extract_sizes(text),
        materials=_extract_materials(lower),
        care_instructions=[tag for tag, pattern in _CARE.items() if pattern.search(lower)],
        country_of_origin=country,
        codes=_extract_codes(text),
        raw_text=text,
    )
    data = data.model_copy(update={"extraction_confidence": _bucket(data.populated_categories)})

    logger.debug(
        f"Label extraction: brand={data.brand} categories={data.populated_categories} "
        f"confidence={data.extraction_confidence.value}"
    )
    return data
