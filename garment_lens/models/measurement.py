"""
Measurement models - values supplied by a measurement provider and their validation.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Measurement(BaseModel):
    """A single garment measurement taken flat."""
    value: float = Field(gt=0)
    unit: str = Field(default="inches", description="'inches' or 'cm'")
    confidence: float = Field(default=1.0, ge=0, le=1)

    @field_validator("unit", mode="before")
    @classmethod
    def parse_unit(cls, v: object) -> object:
        """Normalize common unit spellings."""
        if isinstance(v, str):
            cleaned = v.strip().lower()
            if cleaned in ("in", "inch", "inches", '"'):
                return "inches"
            if cleaned in ("cm", "cms", "centimetre", "centimetres", "centimeter", "centimeters"):
                return "cm"
        return v

    @property
    def inches(self) -> float:
        if self.unit == "cm":
            return self.value / 2.54
        return self.value


class SizeEstimate(BaseModel):
    """Letter or numeric size inferred from measurements."""
    model_config = ConfigDict(populate_by_name=True)

    size: str = "Unknown"
    confidence: float = Field(default=0.0, ge=0, le=1)
    alternative_sizes: list[str] = Field(default_factory=list, alias="alternativeSizes")


class MeasurementReport(BaseModel):
    """Validation result for a set of supplied measurements."""
    model_config = ConfigDict(populate_by_name=True)

    has_measurements: bool = Field(alias="hasMeasurements")
    is_valid: bool = Field(default=False, alias="isValid")
    issues: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0, le=1)
    completeness: float = Field(default=0.0, ge=0, le=1)
    estimated_size: Optional[SizeEstimate] = Field(default=None, alias="estimatedSize")
    display_format: str = Field(default="", alias="displayFormat")
