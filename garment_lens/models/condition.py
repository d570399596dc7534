"""
Condition models.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConditionLevel(str, Enum):
    """Garment condition, best first."""
    NEW = "NEW"
    EXCELLENT = "EXCELLENT"
    VERY_GOOD = "VERY_GOOD"
    GOOD = "GOOD"
    FAIR = "FAIR"


class ConditionResult(BaseModel):
    """Outcome of condition scoring."""
    model_config = ConfigDict(populate_by_name=True)

    condition: ConditionLevel
    confidence: float = Field(ge=0, le=1)
    scores: dict[ConditionLevel, float] = Field(default_factory=dict)
    description: str
    ebay_condition_code: int = Field(alias="ebayConditionCode")
