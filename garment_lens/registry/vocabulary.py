"""
Fixed vocabularies used by the detectors.

Everything here is read-only: tuples, frozen dataclasses and MappingProxyType
views. Order matters wherever a tuple is used (first match wins).
"""
from dataclasses import dataclass
from types import MappingProxyType

from ..models.condition import ConditionLevel


# === Sizing systems ===

@dataclass(frozen=True)
class SizingSystem:
    """A sizing vocabulary and the brands it hints at."""
    name: str
    patterns: tuple[str, ...]
    confidence: float
    brands: tuple[str, ...]
    # Match against the original-case text instead of the lower-cased blob
    raw_text: bool = False


# Hard-coded business rule: a roman-numeral size pins this brand at this confidence.
ROMAN_NUMERAL_BRAND = "OSKA"
ROMAN_NUMERAL_CONFIDENCE = 0.99

VALID_ROMAN_NUMERAL = r"^X{0,3}(?:IX|IV|V?I{0,3})$"

ROMAN_SIZING = SizingSystem(
    name="roman",
    patterns=(
        r"\b([IVX]{2,4})\b",
        r"(?i:\bsize\b\s*:?\s*)([IVX])\b",
    ),
    confidence=ROMAN_NUMERAL_CONFIDENCE,
    brands=(ROMAN_NUMERAL_BRAND,),
    raw_text=True,
)

SIZING_SYSTEMS: tuple[SizingSystem, ...] = (
    ROMAN_SIZING,
    SizingSystem(
        name="european",
        patterns=(r"\b(3[0-9]|4[0-8])\b",),
        confidence=0.80,
        brands=("COS", "GANNI", "ACNE STUDIOS", "ZARA", "MANGO"),
    ),
    SizingSystem(
        name="uk",
        patterns=(r"\b(6|8|10|12|14|16|18|20)\b",),
        confidence=0.75,
        brands=("WHISTLES", "REISS", "H&M"),
    ),
    SizingSystem(
        name="letter",
        patterns=(
            r"(?<![&'\w])(XXS|XS|S|M|L|XL|XXL|XXXL)\b",
            r"(?i)\bsize\b\s*:?\s*(xxs|xs|s|m|l|xl|xxl|xxxl)\b",
        ),
        confidence=0.70,
        brands=("UNIQLO", "CARHARTT", "DICKIES"),
        raw_text=True,
    ),
)

# Only read off labels: "Size: 12", "SIZE 40"
NUMERIC_LABEL_SIZING = SizingSystem(
    name="numeric",
    patterns=(r"(?i)\bsize\b\s*:?\s*(\d{1,3})\b",),
    confidence=0.60,
    brands=(),
    raw_text=True,
)

MAX_SIZING_VALUES = 3


# === Material signatures and visual patterns ===

@dataclass(frozen=True)
class CueDefinition:
    """A phrase family that suggests brands without naming them."""
    key: str
    patterns: tuple[str, ...]
    confidence: float
    brands: tuple[str, ...]
    description: str

    @property
    def display_name(self) -> str:
        return self.key.replace("_", " ")


# A leading "NN%" is captured as group 1 where present.
MATERIAL_SIGNATURES: tuple[CueDefinition, ...] = (
    CueDefinition(
        key="saffiano_leather",
        patterns=(r"(?:(\d{1,3})\s*%\s*)?saffiano leather\b",),
        confidence=0.95,
        brands=("PRADA",),
        description="Cross-hatch textured leather",
    ),
    CueDefinition(
        key="gabardine",
        patterns=(r"(?:(\d{1,3})\s*%\s*)?(?:cotton\s+)?gabardine\b",),
        confidence=0.90,
        brands=("BURBERRY",),
        description="Tightly woven waterproof fabric",
    ),
    CueDefinition(
        key="canvas_monogram",
        patterns=(r"\bcanvas monogram\b", r"\bmonogram(?:med)? canvas\b"),
        confidence=0.92,
        brands=("LOUIS VUITTON",),
        description="Coated canvas with monogram pattern",
    ),
    CueDefinition(
        key="cotton_duck",
        patterns=(r"(?:(\d{1,3})\s*%\s*)?cotton duck\b", r"\bduck canvas\b"),
        confidence=0.88,
        brands=("CARHARTT",),
        description="Heavy cotton canvas fabric",
    ),
    CueDefinition(
        key="natural_linen",
        patterns=(r"(?:(\d{1,3})\s*%\s*)?(?:natural|pure) linen\b", r"(\d{1,3})\s*%\s*linen\b"),
        confidence=0.85,
        brands=("OSKA", "COS"),
        description="Breathable natural fiber fabric",
    ),
    CueDefinition(
        key="tweed",
        patterns=(r"(?:(\d{1,3})\s*%\s*)?(?:wool\s+)?tweed\b",),
        confidence=0.87,
        brands=("CHANEL",),
        description="Woven wool fabric with texture",
    ),
)

VISUAL_PATTERNS: tuple[CueDefinition, ...] = (
    CueDefinition(
        key="quilted_pattern",
        patterns=(r"\bquilted\b", r"\bdiamond quilt",),
        confidence=0.90,
        brands=("CHANEL",),
        description="Diamond quilted pattern",
    ),
    CueDefinition(
        key="gg_monogram",
        patterns=(r"\bgg monogram\b", r"\binterlocking g\b"),
        confidence=0.95,
        brands=("GUCCI",),
        description="Interlocking G pattern",
    ),
    CueDefinition(
        key="nova_check",
        patterns=(r"\bnova check\b",),
        confidence=0.93,
        brands=("BURBERRY",),
        description="Tan, black, white, red check pattern",
    ),
    CueDefinition(
        key="green_red_stripe",
        patterns=(r"green.red.green", r"\bgreen red stripe\b", r"\bweb stripe\b"),
        confidence=0.88,
        brands=("GUCCI",),
        description="Green-red-green web stripe",
    ),
)


# === Label vocabulary ===

LABEL_INDICATORS: tuple[str, ...] = (
    "care label", "size tag", "brand label", "washing instructions",
    "composition", "fabric content", "made in", "size:", "style:",
    "material:", "%", "machine wash", "dry clean", "°c",
)

TEXT_INDICATOR_PATTERN = r"\b(?:tag|label|text|writing|print)"

LABEL_FABRICS: tuple[str, ...] = (
    "cotton", "polyester", "wool", "linen", "silk", "cashmere",
    "viscose", "modal", "elastane", "spandex", "nylon", "acrylic",
)

CARE_PATTERNS = MappingProxyType({
    "machine wash": r"\bmachine wash",
    "hand wash": r"\bhand wash",
    "dry clean": r"(?<!not )\bdry clean",
    "do not dry clean": r"\bdo not dry clean",
    "do not wash": r"\bdo not wash\b",
    "cold wash": r"\b30\s*°|\b30c\b|\bcold wash\b|\bwash cold\b",
    "warm wash": r"\b40\s*°|\b40c\b|\bwarm wash\b|\bwash warm\b",
    "hot wash": r"\b60\s*°|\b60c\b|\bhot wash\b",
    "tumble dry": r"(?<!not )\btumble dry",
    "do not tumble dry": r"\bdo not tumble dry\b",
    "hang dry": r"\b(?:hang|line) dry\b",
    "iron low": r"\biron low\b|\bcool iron\b",
    "iron medium": r"\biron medium\b|\bwarm iron\b",
    "iron high": r"\biron high\b|\bhot iron\b",
    "do not iron": r"\bdo not iron\b",
    "do not bleach": r"\bdo not bleach\b",
})

_ORIGIN = r"\b(?:made in|product of)\s+(?:the\s+)?"

# Priority order: the first country that matches wins.
COUNTRY_PATTERNS: tuple[tuple[str, str], ...] = (
    ("italy", _ORIGIN + r"ital(?:y|ia)\b"),
    ("france", _ORIGIN + r"france\b"),
    ("uk", _ORIGIN + r"(?:uk|u\.k|england|great britain|britain|scotland|united kingdom)\b"),
    ("germany", _ORIGIN + r"germany\b"),
    ("spain", _ORIGIN + r"spain\b"),
    ("portugal", _ORIGIN + r"portugal\b"),
    ("turkey", _ORIGIN + r"turk(?:ey|iye)\b"),
    ("romania", _ORIGIN + r"romania\b"),
    ("morocco", _ORIGIN + r"morocco\b"),
    ("usa", _ORIGIN + r"(?:usa|u\.s\.a|united states)\b"),
    ("japan", _ORIGIN + r"japan\b"),
    ("india", _ORIGIN + r"india\b"),
    ("china", _ORIGIN + r"(?:p\.?r\.?c?\.?\s*)?china\b"),
    ("bangladesh", _ORIGIN + r"bangladesh\b"),
    ("vietnam", _ORIGIN + r"viet\s?nam\b"),
)

CODE_PATTERNS = MappingProxyType({
    "style_number": r"\bstyle\s*(?:no\.?|number|#)?\s*:?\s*([a-z0-9][a-z0-9\-]*\d[a-z0-9\-]*)",
    "item_number": r"\bitem\s*(?:no\.?|number|#)?\s*:?\s*([a-z0-9][a-z0-9\-]*\d[a-z0-9\-]*)",
    "sku": r"\bsku\s*:?\s*([a-z0-9][a-z0-9\-]*)",
    "model": r"\bmodel\s*(?:no\.?|number|#)?\s*:?\s*([a-z0-9][a-z0-9\-]*\d[a-z0-9\-]*)",
    "product_code": r"\bproduct code\s*:?\s*([a-z0-9][a-z0-9\-]*)",
})

MAX_CODES_PER_TYPE = 2


# === Condition vocabulary ===

@dataclass(frozen=True)
class ConditionIndicators:
    """Keywords and visual phrases that point at one condition level."""
    keywords: tuple[str, ...]
    visual: tuple[str, ...]
    template: str


CONDITION_INDICATORS = MappingProxyType({
    ConditionLevel.NEW: ConditionIndicators(
        keywords=("new", "unworn", "tags", "bnwt", "nwt", "brand new", "sealed", "unopened"),
        visual=("tags visible", "packaging", "pristine", "no wear"),
        template="Brand new with tags attached. Never worn or used. In original packaging.",
    ),
    ConditionLevel.EXCELLENT: ConditionIndicators(
        keywords=("excellent", "mint", "pristine", "like new", "barely worn", "near perfect"),
        visual=("minimal wear", "no damage", "clean", "well maintained"),
        template="In excellent condition with minimal signs of wear. Very well maintained.",
    ),
    ConditionLevel.VERY_GOOD: ConditionIndicators(
        keywords=("very good", "great", "light wear", "gently used", "well kept"),
        visual=("slight wear", "minor signs", "good shape"),
        template="Very good condition with light wear consistent with gentle use.",
    ),
    ConditionLevel.GOOD: ConditionIndicators(
        keywords=("good", "used", "worn", "pre-loved", "some wear"),
        visual=("visible wear", "some fading", "minor issues"),
        template="Good used condition with some signs of wear but no major flaws.",
    ),
    ConditionLevel.FAIR: ConditionIndicators(
        keywords=("fair", "worn", "vintage", "distressed", "flaws", "damage"),
        visual=("heavy wear", "stains", "holes", "repairs needed"),
        template="Fair condition with visible wear and some flaws. Still wearable.",
    ),
})

# Damage notes appended to the condition description, in this order.
DAMAGE_NOTES: tuple[tuple[str, str], ...] = (
    (r"\bstain", " Note: Minor staining present."),
    (r"\bholes?\b|\btears?\b|\btorn\b", " Note: Small repair needed."),
    (r"\bfad(?:ing|ed)\b", " Some color fading from wear."),
)

DEFAULT_CONDITION = ConditionLevel.GOOD
KEYWORD_INCREMENT = 0.3
VISUAL_HINT_INCREMENT = 0.5
