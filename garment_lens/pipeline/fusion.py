"""
Evidence fusion - merge detector outputs into one ranked brand result.

Priority, strongest first: label brand, pattern candidates, then material,
visual and sizing suggestions. The weak suggestions are kept as evidence
but never create or promote the primary brand.
"""
import logging
from typing import Iterable, Optional, Sequence

from ..models.brand import BrandCandidate, BrandRegistry, EvidenceSource
from ..models.classification import ClassificationResult
from ..models.evidence import (
    AdvisoryBrand,
    ConfidenceBucket,
    LabelData,
    MaterialSignature,
    SizingClue,
    VisualPatternHit,
)
from ..registry import DEFAULT_REGISTRY
from .cues import apply_roman_numeral_rule


logger = logging.getLogger(__name__)

LABEL_BASE_CONFIDENCE = 0.95
LABEL_BRAND_WEIGHT = 0.05
LABEL_RAW_SCORE = 1.0
LABEL_INDICATORS = ["sku_label", "brand_text"]


def confidence_bucket(confidence: Optional[float]) -> ConfidenceBucket:
    """Map a numeric confidence to low / medium / high."""
    if confidence is None:
        return ConfidenceBucket.LOW
    if confidence > 0.9:
        return ConfidenceBucket.HIGH
    if confidence > 0.8:
        return ConfidenceBucket.MEDIUM
    return ConfidenceBucket.LOW


def _dedupe(candidates: Iterable[BrandCandidate]) -> list[BrandCandidate]:
    """Keep one candidate per brand, the one with the higher raw score."""
    best: dict[str, BrandCandidate] = {}
    for candidate in candidates:
        current = best.get(candidate.brand)
        if current is None or candidate.raw_score > current.raw_score:
            best[candidate.brand] = candidate
    return list(best.values())


def _apply_label(
    candidates: list[BrandCandidate],
    label_data: LabelData,
    registry: BrandRegistry,
) -> list[BrandCandidate]:
    """Put the label brand at the head of the ranking."""
    definition = registry.get(label_data.brand)
    if definition is None:
        logger.warning(f"Label brand {label_data.brand} is not in the registry, ignoring")
        return candidates

    confidence = min(1.0, LABEL_BASE_CONFIDENCE + label_data.brand_confidence * LABEL_BRAND_WEIGHT)
    existing = next((c for c in candidates if c.brand == definition.name), None)
    if existing is not None:
        confidence = max(confidence, existing.confidence)

    label_candidate = BrandCandidate(
        brand=definition.name,
        confidence=confidence,
        matched_patterns=existing.matched_patterns if existing else 0,
        total_patterns=definition.total_patterns,
        indicators=list(LABEL_INDICATORS),
        tier=definition.tier,
        raw_score=LABEL_RAW_SCORE,
        source=EvidenceSource.LABEL,
    )

    if existing is not None:
        merged = [label_candidate if c is existing else c for c in candidates]
    else:
        merged = [label_candidate] + candidates

    # Stable: equal raw scores keep their current order
    merged.sort(key=lambda c: -c.raw_score)
    return merged


def _collect_advisory(
    materials: Sequence[MaterialSignature],
    visuals: Sequence[VisualPatternHit],
    sizing: Sequence[SizingClue],
) -> list[AdvisoryBrand]:
    """Suggested brands in priority order, first occurrence wins."""
    advisory: list[AdvisoryBrand] = []
    seen = set()

    suggestions = (
        [(m.suggested_brands, m.confidence, EvidenceSource.MATERIAL) for m in materials]
        + [(v.suggested_brands, v.confidence, EvidenceSource.VISUAL) for v in visuals]
        + [(s.suggested_brands, s.confidence, EvidenceSource.SIZING) for s in sizing]
    )
    for brands, confidence, source in suggestions:
        for brand in brands:
            if brand in seen:
                continue
            seen.add(brand)
            advisory.append(AdvisoryBrand(brand=brand, confidence=confidence, source=source))
    return advisory


def _with_supporting_sources(
    candidates: list[BrandCandidate],
    materials: Sequence[MaterialSignature],
    visuals: Sequence[VisualPatternHit],
    sizing: Sequence[SizingClue],
) -> list[BrandCandidate]:
    suggested_by: dict[str, list[EvidenceSource]] = {}
    for items, source in (
        (materials, EvidenceSource.MATERIAL),
        (visuals, EvidenceSource.VISUAL),
        (sizing, EvidenceSource.SIZING),
    ):
        for item in items:
            for brand in item.suggested_brands:
                sources = suggested_by.setdefault(brand, [])
                if source not in sources:
                    sources.append(source)

    return [
        c.model_copy(update={"supporting_sources": suggested_by[c.brand]}) if c.brand in suggested_by else c
        for c in candidates
    ]


def resolve(
    pattern_candidates: Sequence[BrandCandidate],
    registry: BrandRegistry = DEFAULT_REGISTRY,
    label_data: Optional[LabelData] = None,
    sizing: Sequence[SizingClue] = (),
    materials: Sequence[MaterialSignature] = (),
    visuals: Sequence[VisualPatternHit] = (),
) -> ClassificationResult:
    """
    Fuse all evidence for one item.

    Args:
        pattern_candidates: Output of the brand pattern matcher
        registry: Registry the candidates were scored against
        label_data: Facts read off the label, if any
        sizing: Sizing clues
        materials: Material signatures
        visuals: Visual pattern hits

    Returns:
        ClassificationResult with candidates sorted by raw score
        (ties in registry order) and the head as primary brand
    """
    candidates = apply_roman_numeral_rule(list(pattern_candidates), sizing, registry)
    candidates = _dedupe(candidates)
    candidates.sort(key=lambda c: (-c.raw_score, registry.order_of(c.brand)))

    if label_data is not None and label_data.brand:
        candidates = _apply_label(candidates, label_data, registry)

    candidates = _with_supporting_sources(candidates, materials, visuals, sizing)
    primary = candidates[0] if candidates else None

    result = ClassificationResult(
        detected_brands=candidates,
        primary_brand=primary,
        confidence=confidence_bucket(primary.confidence if primary else None),
        sizing_clues=list(sizing),
        material_signatures=list(materials),
        visual_patterns=list(visuals),
        advisory_brands=_collect_advisory(materials, visuals, sizing),
        label_data=label_data,
    )

    logger.debug(
        f"Fused {len(candidates)} candidates, primary={primary.brand if primary else None} "
        f"({result.confidence.value})"
    )
    return result
