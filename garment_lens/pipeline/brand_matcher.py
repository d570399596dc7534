"""
Brand pattern matcher - score every registry brand against a text blob.
"""
import logging
import re
from typing import Iterable, Optional

from ..models.brand import BrandCandidate, BrandRegistry, EvidenceSource
from ..models.evidence import ItemPhoto
from ..registry import DEFAULT_REGISTRY


logger = logging.getLogger(__name__)


class BrandMatcher:
    """
    Counts how many of each brand's patterns occur in a text.
    Patterns are compiled once per registry.
    """

    def __init__(self, registry: BrandRegistry = DEFAULT_REGISTRY):
        self.registry = registry
        self._compiled = [
            (definition, [re.compile(p) for p in definition.patterns])
            for definition in registry
        ]

    def match(self, text: str) -> list[BrandCandidate]:
        """
        Score text against every brand.

        Returns:
            One candidate per brand with at least one matching pattern,
            in registry declaration order.
        """
        blob = (text or "").lower()
        if not blob.strip():
            return []

        candidates = []
        for definition, patterns in self._compiled:
            matched = sum(1 for pattern in patterns if pattern.search(blob))
            if matched == 0:
                continue

            score = definition.base_confidence * matched / definition.total_patterns
            candidates.append(BrandCandidate(
                brand=definition.name,
                confidence=score,
                matched_patterns=matched,
                total_patterns=definition.total_patterns,
                indicators=list(definition.indicators),
                tier=definition.tier,
                raw_score=score,
                source=EvidenceSource.PATTERN,
            ))

        logger.debug(f"Pattern matcher found {len(candidates)} brands")
        return candidates


_default_matcher: Optional[BrandMatcher] = None


def match_brands(text: str, registry: Optional[BrandRegistry] = None) -> list[BrandCandidate]:
    """Score text against the registry (the default one when none is given)."""
    global _default_matcher
    if registry is None or registry is DEFAULT_REGISTRY:
        if _default_matcher is None:
            _default_matcher = BrandMatcher(DEFAULT_REGISTRY)
        return _default_matcher.match(text)
    return BrandMatcher(registry).match(text)


def build_combined_text(text: str, photos: Iterable[ItemPhoto] = ()) -> str:
    """Join the item text with every photo's description and filename."""
    parts = [text or ""]
    for photo in photos:
        parts.append(photo.text)
    return " ".join(p.strip() for p in parts if p and p.strip())
