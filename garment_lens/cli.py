"""
Command line entry point.

Usage:
    garment-lens items.json                    # Write export to exports/<run id>.json
    garment-lens items.json -o out.json        # Write export to a given file
    garment-lens items.json --minimal          # SKU / title / price only
    garment-lens items.json --batch-id B7 --workers 8
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_config
from .pipeline import process_batch


logger = logging.getLogger(__name__)


def load_items(path: Path) -> list:
    """Read a JSON array of items (a single object is treated as one item)."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of items")
    return data


def main(argv: Optional[list[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Classify secondhand fashion items and build listings")
    parser.add_argument("items", type=Path, help="JSON file with an array of items")
    parser.add_argument("--output", "-o", type=Path, help="Output file (default: exports/<run id>.json)")
    parser.add_argument("--batch-id", "-b", help=f"Batch id used in SKUs (default: {config.listing.default_batch_id})")
    parser.add_argument("--workers", "-w", type=int, help=f"Worker threads (default: {config.batch.max_workers})")
    parser.add_argument("--seed", type=int, help="Seed for title keyword sampling")
    parser.add_argument("--minimal", action="store_true", help="Write the minimal export")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        items = load_items(args.items)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read items: {e}")
        return 1

    export = process_batch(items, batch_id=args.batch_id, max_workers=args.workers, seed=args.seed)

    if args.minimal:
        payload = export.to_minimal_export()
    else:
        payload = export.model_dump(mode="json", by_alias=True)

    output = args.output or config.exports_dir / f"{export.metadata.run_id}.json"
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Wrote {len(export.items)} item(s) to {output}")
    for error in export.metadata.errors:
        logger.warning(error)
    return 0 if not export.metadata.errors else 2


if __name__ == "__main__":
    sys.exit(main())
