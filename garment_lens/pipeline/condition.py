"""
Condition classifier - keyword scoring over five ordered condition levels.
"""
import logging
import re
from typing import Optional

from ..models.condition import ConditionLevel, ConditionResult
from ..registry.vocabulary import (
    CONDITION_INDICATORS,
    DAMAGE_NOTES,
    DEFAULT_CONDITION,
    KEYWORD_INCREMENT,
    VISUAL_HINT_INCREMENT,
)


logger = logging.getLogger(__name__)

EBAY_CODE_NEW = 1000
EBAY_CODE_USED = 3000

_KEYWORDS = {
    level: [re.compile(rf"\b{re.escape(keyword)}\b") for keyword in indicators.keywords]
    for level, indicators in CONDITION_INDICATORS.items()
}
_DAMAGE = [(re.compile(pattern), note) for pattern, note in DAMAGE_NOTES]


def ebay_condition_code(condition: ConditionLevel) -> int:
    """eBay condition id: 1000 for new items, 3000 (used) for everything else."""
    return EBAY_CODE_NEW if condition == ConditionLevel.NEW else EBAY_CODE_USED


def _level_named_by_hint(hint: str) -> Optional[ConditionLevel]:
    """The level a visual hint refers to, by level name first, then by visual phrase."""
    cleaned = " ".join(hint.lower().replace("_", " ").split())
    if not cleaned:
        return None

    for level in ConditionLevel:
        if cleaned == level.value.lower().replace("_", " "):
            return level

    for level, indicators in CONDITION_INDICATORS.items():
        if any(phrase in cleaned for phrase in indicators.visual):
            return level
    return None


def describe_condition(condition: ConditionLevel, text: str = "") -> str:
    """Template description for a level plus any damage notes found in the text."""
    description = CONDITION_INDICATORS[condition].template
    lower = (text or "").lower()
    for pattern, note in _DAMAGE:
        if pattern.search(lower):
            description += note
    return description


def classify_condition(text: str, visual_hint: Optional[str] = None) -> ConditionResult:
    """
    Score every condition level and pick the best.

    Each keyword of a level that appears in the text adds 0.3 to that
    level; a visual hint naming a level adds 0.5 to that level only.
    The highest score wins, earlier levels winning ties. With no evidence
    at all the result is GOOD at confidence 0.
    """
    lower = (text or "").lower()

    scores: dict[ConditionLevel, float] = {}
    for level in ConditionLevel:
        hits = sum(1 for pattern in _KEYWORDS[level] if pattern.search(lower))
        scores[level] = round(hits * KEYWORD_INCREMENT, 6)

    if visual_hint:
        hinted = _level_named_by_hint(visual_hint)
        if hinted is not None:
            scores[hinted] = round(scores[hinted] + VISUAL_HINT_INCREMENT, 6)
        else:
            logger.debug(f"Visual hint '{visual_hint}' names no condition level")

    best, best_score = DEFAULT_CONDITION, 0.0
    for level in ConditionLevel:
        if scores[level] > best_score:
            best, best_score = level, scores[level]

    return ConditionResult(
        condition=best,
        confidence=min(best_score, 1.0),
        scores=scores,
        description=describe_condition(best, text),
        ebay_condition_code=ebay_condition_code(best),
    )
