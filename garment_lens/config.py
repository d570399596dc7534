"""
Configuration and environment handling for garment_lens.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class ListingConfig(BaseModel):
    """Listing artifact generation configuration."""
    currency: str = Field(default_factory=lambda: os.getenv("GARMENT_LENS_CURRENCY", "GBP"))
    default_batch_id: str = Field(default="XX", description="Batch id used in SKUs when none is given")
    keyword_sample_size: int = Field(default=3, description="Max supplementary keywords appended to titles")
    keyword_append_threshold: int = Field(
        default=60,
        description="Titles shorter than this get supplementary keywords",
    )


class BatchConfig(BaseModel):
    """Batch processing configuration."""
    max_workers: int = Field(
        default_factory=lambda: int(os.getenv("GARMENT_LENS_MAX_WORKERS", "4")),
        description="Thread pool size for batch classification",
    )


class Config(BaseModel):
    """Main configuration."""
    listing: ListingConfig = Field(default_factory=ListingConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)

    log_level: str = Field(default_factory=lambda: os.getenv("GARMENT_LENS_LOG_LEVEL", "INFO"))

    # Paths
    exports_dir: Path = Field(default=Path("exports"))


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
