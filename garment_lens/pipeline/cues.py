"""
Weak-evidence matchers: sizing systems, material signatures and visual patterns.

These only ever suggest brands. The one exception is the roman-numeral rule,
which pins a single brand's confidence (see apply_roman_numeral_rule).
"""
import logging
import re
from typing import Iterable, Optional, Sequence

from ..models.brand import BrandCandidate, BrandRegistry, EvidenceSource
from ..models.evidence import MaterialSignature, SizingClue, VisualPatternHit
from ..registry import DEFAULT_REGISTRY
from ..registry.vocabulary import (
    MATERIAL_SIGNATURES,
    MAX_SIZING_VALUES,
    ROMAN_NUMERAL_BRAND,
    ROMAN_NUMERAL_CONFIDENCE,
    ROMAN_SIZING,
    SIZING_SYSTEMS,
    VALID_ROMAN_NUMERAL,
    VISUAL_PATTERNS,
    SizingSystem,
)


logger = logging.getLogger(__name__)

_VALID_ROMAN = re.compile(VALID_ROMAN_NUMERAL)


def _compile_all(patterns: Iterable[str]) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p) for p in patterns)


_SIZING_PATTERNS = {system.name: _compile_all(system.patterns) for system in SIZING_SYSTEMS}
_MATERIAL_PATTERNS = {cue.key: _compile_all(cue.patterns) for cue in MATERIAL_SIGNATURES}
_VISUAL_PATTERNS = {cue.key: _compile_all(cue.patterns) for cue in VISUAL_PATTERNS}


def find_sizing_values(text: str, system: SizingSystem, patterns: Optional[Sequence[re.Pattern]] = None) -> list[str]:
    """
    Distinct size tokens of one system, in order of discovery.

    Roman numerals are validated (IIII or VX are not sizes) and letter
    sizes are upper-cased.
    """
    if patterns is None:
        patterns = _SIZING_PATTERNS.get(system.name) or _compile_all(system.patterns)
    haystack = text if system.raw_text else text.lower()

    values: list[str] = []
    for pattern in patterns:
        for match in pattern.finditer(haystack):
            value = match.group(1).upper()
            if system is ROMAN_SIZING and not _VALID_ROMAN.match(value):
                continue
            if value not in values:
                values.append(value)
    return values[:MAX_SIZING_VALUES]


def match_sizing(text: str) -> list[SizingClue]:
    """Sizing clues for every system with at least one token, in fixed system order."""
    if not text:
        return []

    clues = []
    for system in SIZING_SYSTEMS:
        values = find_sizing_values(text, system, _SIZING_PATTERNS[system.name])
        if not values:
            continue
        clues.append(SizingClue(
            system=system.name,
            values=values,
            confidence=system.confidence,
            suggested_brands=list(system.brands),
        ))

    logger.debug(f"Sizing clues: {[c.system for c in clues]}")
    return clues


def _first_match(patterns: Sequence[re.Pattern], blob: str) -> Optional[re.Match]:
    for pattern in patterns:
        match = pattern.search(blob)
        if match:
            return match
    return None


def _percentage(match: re.Match) -> Optional[int]:
    """Leading 'NN%' captured by a material pattern, if any."""
    if match.re.groups < 1 or match.group(1) is None:
        return None
    value = int(match.group(1))
    return value if value <= 100 else None


def match_materials(text: str) -> list[MaterialSignature]:
    """Material signatures present in the text, in vocabulary order."""
    blob = (text or "").lower()
    signatures = []
    for cue in MATERIAL_SIGNATURES:
        match = _first_match(_MATERIAL_PATTERNS[cue.key], blob)
        if not match:
            continue
        signatures.append(MaterialSignature(
            material=cue.display_name,
            confidence=cue.confidence,
            suggested_brands=list(cue.brands),
            description=cue.description,
            percentage=_percentage(match),
        ))
    return signatures


def match_visual_patterns(text: str) -> list[VisualPatternHit]:
    """Named visual patterns present in the text, in vocabulary order."""
    blob = (text or "").lower()
    hits = []
    for cue in VISUAL_PATTERNS:
        if not _first_match(_VISUAL_PATTERNS[cue.key], blob):
            continue
        hits.append(VisualPatternHit(
            pattern=cue.display_name,
            confidence=cue.confidence,
            suggested_brands=list(cue.brands),
            description=cue.description,
        ))
    return hits


def has_roman_numeral_size(text: str) -> bool:
    return bool(find_sizing_values(text or "", ROMAN_SIZING))


def apply_roman_numeral_rule(
    candidates: list[BrandCandidate],
    sizing: Iterable[SizingClue],
    registry: BrandRegistry = DEFAULT_REGISTRY,
) -> list[BrandCandidate]:
    """
    Pin the roman-numeral brand at ROMAN_NUMERAL_CONFIDENCE when a roman size was seen.

    The brand's existing candidate is updated (confidence and raw score),
    otherwise a sizing-sourced candidate is appended. Returns a new list.
    """
    if not any(clue.system == ROMAN_SIZING.name and clue.values for clue in sizing):
        return list(candidates)

    result = []
    found = False
    for candidate in candidates:
        if candidate.brand == ROMAN_NUMERAL_BRAND:
            candidate = candidate.model_copy(update={
                "confidence": ROMAN_NUMERAL_CONFIDENCE,
                "raw_score": ROMAN_NUMERAL_CONFIDENCE,
            })
            found = True
        result.append(candidate)

    if not found:
        definition = registry.get(ROMAN_NUMERAL_BRAND)
        if definition is None:
            logger.warning(f"Roman-numeral brand {ROMAN_NUMERAL_BRAND} missing from registry")
            return result
        result.append(BrandCandidate(
            brand=definition.name,
            confidence=ROMAN_NUMERAL_CONFIDENCE,
            matched_patterns=0,
            total_patterns=definition.total_patterns,
            indicators=list(definition.indicators),
            tier=definition.tier,
            raw_score=ROMAN_NUMERAL_CONFIDENCE,
            source=EvidenceSource.SIZING,
        ))

    logger.debug(f"Roman numeral size seen, {ROMAN_NUMERAL_BRAND} pinned at {ROMAN_NUMERAL_CONFIDENCE}")
    return result
