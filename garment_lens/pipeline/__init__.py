"""Pipeline modules for classification and listing generation."""

from .brand_matcher import BrandMatcher, build_combined_text, match_brands
from .cues import match_materials, match_sizing, match_visual_patterns
from .label import extract_label_data, score_label_image, select_label_image
from .fusion import confidence_bucket, resolve
from .condition import classify_condition, ebay_condition_code
from .pricing import estimate_price
from .listing import build_listing, generate_keywords, generate_sku, generate_title
from .measurements import analyze_measurements
from .orchestrator import classify_item, process_batch, process_item

__all__ = [
    "BrandMatcher",
    "build_combined_text",
    "match_brands",
    "match_materials",
    "match_sizing",
    "match_visual_patterns",
    "extract_label_data",
    "score_label_image",
    "select_label_image",
    "confidence_bucket",
    "resolve",
    "classify_condition",
    "ebay_condition_code",
    "estimate_price",
    "build_listing",
    "generate_keywords",
    "generate_sku",
    "generate_title",
    "analyze_measurements",
    "classify_item",
    "process_batch",
    "process_item",
]
