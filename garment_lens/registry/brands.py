"""
Known brands, in declaration order.

Patterns are regexes matched against lower-cased text. Declaration order
breaks confidence ties, so keep new brands appended rather than inserted.
"""
from ..models.brand import BrandDefinition, BrandRegistry, Tier


BRAND_DEFINITIONS: tuple[BrandDefinition, ...] = (
    BrandDefinition(
        name="OSKA",
        patterns=(r"\boska\b", r"\broman numerals?\b", r"\blinen\b", r"\bnatural\b", r"\bsustainable\b"),
        base_confidence=0.99,
        indicators=("roman_numerals", "natural_linen", "layered_styling", "sustainable"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\boska\b",),
    ),

    # Luxury
    BrandDefinition(
        name="CHANEL",
        patterns=(r"\bchanel\b", r"\bcc\b", r"\bquilted\b", r"\bchain strap", r"\btweed\b", r"\bcamellia\b"),
        base_confidence=0.95,
        indicators=("interlocking_cc", "quilted_pattern", "chain_straps", "tweed_fabric"),
        tier=Tier.LUXURY,
        label_aliases=(r"\bchanel\b",),
    ),
    BrandDefinition(
        name="GUCCI",
        patterns=(r"\bgucci\b", r"\bgg\b", r"green.red.green", r"\bhorsebit\b", r"\bbamboo\b", r"\bweb stripe\b"),
        base_confidence=0.95,
        indicators=("gg_monogram", "green_red_stripe", "horsebit_hardware", "bamboo_handle"),
        tier=Tier.LUXURY,
        label_aliases=(r"\bgucci\b",),
    ),
    BrandDefinition(
        name="PRADA",
        patterns=(r"\bprada\b", r"\bsaffiano\b", r"\bnylon\b", r"\btriangular logo\b", r"\bmilano\b"),
        base_confidence=0.92,
        indicators=("saffiano_leather", "triangular_logo", "nylon_fabric", "minimal_hardware"),
        tier=Tier.LUXURY,
        label_aliases=(r"\bprada\b",),
    ),
    BrandDefinition(
        name="LOUIS VUITTON",
        patterns=(r"\blouis vuitton\b", r"\blv\b", r"\bmonogram\b", r"\bdamier\b", r"\bepi leather\b", r"\bvuitton\b"),
        base_confidence=0.94,
        indicators=("lv_monogram", "damier_pattern", "epi_leather", "vachetta_leather"),
        tier=Tier.LUXURY,
        label_aliases=(r"\blouis vuitton\b", r"\bvuitton\b"),
    ),
    BrandDefinition(
        name="BURBERRY",
        patterns=(r"\bburberry", r"\bnova check\b", r"\bgabardine\b", r"\btrench\b", r"\bbeige check\b", r"\btartan\b"),
        base_confidence=0.90,
        indicators=("nova_check", "gabardine_fabric", "trench_style", "british_heritage"),
        tier=Tier.LUXURY,
        label_aliases=(r"\bburberrys?\b",),
    ),

    # Premium
    BrandDefinition(
        name="COS",
        patterns=(r"\bcos\b", r"\bminimalist\b", r"\beuropean\b", r"\bscandinavian\b", r"\bclean lines\b", r"\barket\b"),
        base_confidence=0.85,
        indicators=("minimalist_design", "european_sizing", "clean_lines", "modern_cut"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\bcos\b",),
    ),
    BrandDefinition(
        name="GANNI",
        patterns=(r"\bganni\b", r"\bdanish\b", r"\bplayful\b", r"\bsustainable\b", r"\bcopenhagen\b", r"\bfeminine\b"),
        base_confidence=0.88,
        indicators=("danish_design", "playful_prints", "sustainable", "feminine_cuts"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\bganni\b",),
    ),
    BrandDefinition(
        name="ACNE STUDIOS",
        patterns=(r"\bacne studios\b", r"\bacne\b", r"\bswedish\b", r"\bavant garde\b", r"\bstockholm\b", r"\bface logo\b"),
        base_confidence=0.87,
        indicators=("swedish_design", "avant_garde", "minimal_branding", "contemporary"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\bacne studios\b", r"\bacne\b"),
    ),
    BrandDefinition(
        name="WHISTLES",
        patterns=(r"\bwhistles\b", r"\bcontemporary\b", r"\blondon\b", r"\bmodern british\b", r"\btailored\b"),
        base_confidence=0.82,
        indicators=("british_design", "contemporary_cut", "modern_tailoring"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\bwhistles\b",),
    ),
    BrandDefinition(
        name="REISS",
        patterns=(r"\breiss\b", r"\btailored\b", r"\bbritish\b", r"\bpremium\b", r"\bmodern\b"),
        base_confidence=0.81,
        indicators=("british_tailoring", "premium_fabric", "modern_cut"),
        tier=Tier.PREMIUM,
        label_aliases=(r"\breiss\b",),
    ),

    # Mid-range
    BrandDefinition(
        name="ZARA",
        patterns=(r"\bzara\b", r"\bbasic\b", r"\bfast fashion\b", r"\bspanish\b", r"\binditex\b"),
        base_confidence=0.80,
        indicators=("basic_label", "fast_fashion", "european_cut", "trend_focused"),
        tier=Tier.MID_RANGE,
        label_aliases=(r"\bzara\b",),
    ),
    BrandDefinition(
        name="MANGO",
        patterns=(r"\bmango\b", r"\bspanish\b", r"\bmediterranean\b", r"\bcasual\b", r"\bsuit\b"),
        base_confidence=0.78,
        indicators=("spanish_design", "casual_chic", "mediterranean_style"),
        tier=Tier.MID_RANGE,
        label_aliases=(r"\bmango\b", r"\bmng\b"),
    ),
    BrandDefinition(
        name="& OTHER STORIES",
        patterns=(r"& other stories", r"\bother stories\b", r"\bstockholm\b", r"\bplayful\b", r"\bfeminine\b"),
        base_confidence=0.79,
        indicators=("stockholm_design", "playful_feminine", "trend_focused"),
        tier=Tier.MID_RANGE,
        label_aliases=(r"\bother stories\b",),
    ),
    BrandDefinition(
        name="ARKET",
        patterns=(r"\barket\b", r"\bsustainable\b", r"\bessentials\b", r"\bscandinavian\b", r"h&m group"),
        base_confidence=0.76,
        indicators=("sustainable_focus", "essential_pieces", "scandinavian_minimal"),
        tier=Tier.MID_RANGE,
        label_aliases=(r"\barket\b",),
    ),

    # High street
    BrandDefinition(
        name="H&M",
        patterns=(r"\bh&m\b", r"\bhennes\s*(?:&\s*)?mauritz\b", r"\bbasic\b", r"\baffordable\b", r"\bconscious\b"),
        base_confidence=0.75,
        indicators=("affordable_fashion", "basic_pieces", "trend_driven"),
        tier=Tier.HIGH_STREET,
        label_aliases=(r"\bh&m\b", r"\bh & m\b", r"\bhennes\b"),
    ),
    BrandDefinition(
        name="UNIQLO",
        patterns=(r"\buniqlo\b", r"\bjapanese\b", r"\bbasics\b", r"\bfunctional\b", r"\bheattech\b", r"\bairism\b"),
        base_confidence=0.77,
        indicators=("japanese_design", "functional_basics", "innovative_fabric"),
        tier=Tier.HIGH_STREET,
        label_aliases=(r"\buniqlo\b",),
    ),

    # Workwear
    BrandDefinition(
        name="CARHARTT",
        patterns=(r"\bcarhartt\b", r"\bworkwear\b", r"\bduck canvas\b", r"\bdetroit\b", r"\brugged\b", r"\bwip\b"),
        base_confidence=0.90,
        indicators=("duck_canvas", "workwear_heritage", "rugged_construction"),
        tier=Tier.WORKWEAR,
        label_aliases=(r"\bcarhartt\b",),
    ),
    BrandDefinition(
        name="DICKIES",
        patterns=(r"\bdickies\b", r"\bwork pants\b", r"\butility\b", r"\bdurable\b", r"\b874\b"),
        base_confidence=0.85,
        indicators=("work_utility", "durable_construction", "functional_design"),
        tier=Tier.WORKWEAR,
        label_aliases=(r"\bdickies\b",),
    ),
)


DEFAULT_REGISTRY = BrandRegistry(brands=BRAND_DEFINITIONS)
