"""
Pipeline orchestrator - classify single items and run batches.
"""
import logging
import random
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Any, Optional, Sequence, Union

import numpy as np
from pydantic import ValidationError

from ..config import get_config
from ..errors import InvalidInput
from ..models.brand import BrandRegistry
from ..models.classification import ClassificationResult, ItemInput
from ..models.export import BatchExport, ItemReport, RunMetadata
from ..registry import DEFAULT_REGISTRY

from .brand_matcher import build_combined_text, match_brands
from .condition import classify_condition
from .cues import match_materials, match_sizing, match_visual_patterns
from .fusion import resolve
from .label import extract_label_data, select_label_image
from .listing import build_listing
from .measurements import analyze_measurements


logger = logging.getLogger(__name__)

ItemLike = Union[ItemInput, dict]


def coerce_item(item: Any) -> ItemInput:
    """Accept an ItemInput or a plain dict; anything else is a caller error."""
    if isinstance(item, ItemInput):
        return item
    if isinstance(item, dict):
        try:
            return ItemInput.model_validate(item)
        except ValidationError as e:
            raise InvalidInput(f"Invalid item: {e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
    raise InvalidInput(f"Expected an item object, got {type(item).__name__}")


def _combined_text(item: ItemInput) -> str:
    combined = build_combined_text(item.text, item.photos)
    if not combined.strip():
        raise InvalidInput("Item has no text: supply text or photo descriptions")
    return combined


def classify_item(item: ItemLike, registry: BrandRegistry = DEFAULT_REGISTRY) -> ClassificationResult:
    """
    Run every detector over one item and fuse the evidence.

    Label text is taken from item.label_text when given, otherwise from the
    photo that looks most like a label (a forced fallback pick is not read).
    """
    item = coerce_item(item)
    combined = _combined_text(item)

    selection = select_label_image(item.photos)
    label_text = item.label_text
    if not label_text and selection is not None and not selection.forced:
        label_text = item.photos[selection.index].text
    label_data = extract_label_data(label_text, registry) if label_text else None

    result = resolve(
        match_brands(combined, registry),
        registry,
        label_data=label_data,
        sizing=match_sizing(combined),
        materials=match_materials(combined),
        visuals=match_visual_patterns(combined),
    )
    return result.model_copy(update={"label_selection": selection})


def _resolve_size(item: ItemInput, classification: ClassificationResult) -> Optional[str]:
    """Size for the listing: override, caller detail, label, then text clues."""
    if item.size_override:
        return item.size_override
    if item.details.size:
        return item.details.size
    label = classification.label_data
    if label is not None and label.sizes:
        return label.sizes[0].values[0]
    if classification.sizing_clues:
        return classification.sizing_clues[0].values[0]
    return None


def process_item(
    item: ItemLike,
    index: int,
    batch_id: Optional[str] = None,
    registry: BrandRegistry = DEFAULT_REGISTRY,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> ItemReport:
    """
    Classify one item and build its listing.

    Args:
        item: ItemInput or dict in the same shape
        index: 1-based position, used in the SKU
        batch_id: Batch id for the SKU (config default when None)
        registry: Brand registry
        today: Date used for SKU and season (today when None)
        rng: Random source for title keyword sampling
    """
    item = coerce_item(item)
    classification = classify_item(item, registry)
    condition = classify_condition(_combined_text(item), item.visual_condition_hint)

    report = analyze_measurements(item.measurements, item.details.item_type) if item.measurements else None

    size = _resolve_size(item, classification)
    if size is None and report is not None and report.estimated_size and report.estimated_size.size != "Unknown":
        size = report.estimated_size.size

    details = item.details.model_copy(update={
        "size": size,
        "gender": item.gender_override or item.details.gender,
    })

    listing = build_listing(
        classification,
        condition,
        details,
        index=index,
        batch_id=batch_id,
        today=today,
        rng=rng,
        measurement_block=report.display_format if report else "",
    )

    return ItemReport(
        index=index,
        classification=classification,
        condition=condition,
        listing=listing,
        measurements=report,
    )


def _price_summary(reports: Sequence[ItemReport]) -> dict[str, Any]:
    prices = [r.listing.suggested_price for r in reports if r.listing.suggested_price > 0]
    if not prices:
        return {}

    prices_array = np.array(prices)
    return {
        "total_items": len(reports),
        "with_price": len(prices),
        "median_price": float(np.median(prices_array)),
        "mean_price": float(np.mean(prices_array)),
        "min_price": float(np.min(prices_array)),
        "max_price": float(np.max(prices_array)),
        "total_value": float(np.sum(prices_array)),
    }


def process_batch(
    items: Sequence[ItemLike],
    batch_id: Optional[str] = None,
    max_workers: Optional[int] = None,
    registry: BrandRegistry = DEFAULT_REGISTRY,
    today: Optional[date] = None,
    seed: Optional[int] = None,
) -> BatchExport:
    """
    Process a batch of items on a thread pool.

    Reports come back in input order. Items that fail with InvalidInput
    are recorded in metadata.errors and skipped; other exceptions propagate.

    Args:
        items: Items to process
        batch_id: Batch id used in every SKU
        max_workers: Thread pool size (config default when None)
        registry: Brand registry, shared read-only by all workers
        today: Date used for SKUs and seasons
        seed: Seed for per-item keyword sampling; None for unseeded
    """
    config = get_config()
    run_id = str(uuid.uuid4())[:8]
    started_at = datetime.now()
    batch_id = batch_id or config.listing.default_batch_id
    workers = max_workers or config.batch.max_workers

    logger.info(f"Starting batch run {run_id} with {len(items)} items ({workers} workers)")

    def work(position: int, item: ItemLike) -> ItemReport:
        rng = random.Random(seed + position) if seed is not None else None
        return process_item(item, position, batch_id, registry, today, rng)

    reports: list[ItemReport] = []
    errors: list[str] = []
    warnings: list[str] = []

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(work, position, item) for position, item in enumerate(items, start=1)]
        for position, future in enumerate(futures, start=1):
            try:
                report = future.result()
            except InvalidInput as e:
                logger.warning(f"Skipping item {position}: {e}")
                errors.append(f"Item {position}: {e}")
                continue
            if not report.classification.has_brand:
                warnings.append(f"Item {position}: no brand evidence")
            reports.append(report)

    metadata = RunMetadata(
        run_id=run_id,
        batch_id=batch_id,
        started_at=started_at,
        completed_at=datetime.now(),
        total_items=len(items),
        items_processed=len(reports),
        items_with_brand=sum(1 for r in reports if r.classification.has_brand),
        errors=errors,
        warnings=warnings,
    )

    logger.info(f"Batch {run_id} completed: {len(reports)}/{len(items)} items processed")
    return BatchExport(metadata=metadata, items=reports, price_summary=_price_summary(reports))
