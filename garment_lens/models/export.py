"""
Export models - per-item reports, run metadata and the full batch export.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .classification import ClassificationResult
from .condition import ConditionResult
from .listing import ListingItem
from .measurement import MeasurementReport


class ItemReport(BaseModel):
    """Everything produced for one input item."""
    model_config = ConfigDict(populate_by_name=True)

    index: int = Field(ge=1, description="1-based position in the batch")
    classification: ClassificationResult
    condition: ConditionResult
    listing: ListingItem
    measurements: Optional[MeasurementReport] = None


class RunMetadata(BaseModel):
    """Metadata for a batch run."""
    model_config = ConfigDict(populate_by_name=True)

    run_id: str = Field(alias="runId", description="Unique run identifier")
    batch_id: str = Field(alias="batchId")
    started_at: datetime = Field(alias="startedAt")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")

    # Processing stats
    total_items: int = Field(default=0, alias="totalItems")
    items_processed: int = Field(default=0, alias="itemsProcessed")
    items_with_brand: int = Field(default=0, alias="itemsWithBrand")

    # Schema version
    schema_version: str = Field(default="1.0.0", alias="schemaVersion")

    # Error tracking
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class BatchExport(BaseModel):
    """
    Complete export of a batch run.
    Items are ordered by their original index.
    """
    model_config = ConfigDict(populate_by_name=True)

    metadata: RunMetadata
    items: list[ItemReport] = Field(default_factory=list)

    # Price summary
    price_summary: dict[str, Any] = Field(
        default_factory=dict,
        alias="priceSummary",
        description="Aggregate suggested-price statistics",
    )

    def to_minimal_export(self) -> dict[str, Any]:
        """Export minimal version without evidence traces."""
        return {
            "metadata": {
                "runId": self.metadata.run_id,
                "batchId": self.metadata.batch_id,
                "exportedAt": datetime.now().isoformat(),
            },
            "results": [
                {
                    "index": r.index,
                    "sku": r.listing.sku,
                    "title": r.listing.ebay_title,
                    "brand": r.listing.brand,
                    "condition": r.listing.condition.value,
                    "suggestedPrice": r.listing.suggested_price,
                }
                for r in self.items
            ],
        }
