"""Descriptive clause tables for categorical request options.

Every categorical field in :mod:`adforge.core.schemas` has a table here that
maps each enumeration member to the natural-language fragment the prompt
compiler splices into its sentences.  Tables are plain dictionaries keyed by
enum members and are registered in :data:`TABLES` together with the enum they
cover, so :func:`missing_entries` can audit them.

The compiler never indexes a table directly; it goes through :func:`describe`,
which falls back to a named clause (and logs a warning) if an entry has gone
missing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from adforge.core import schemas as s

logger = logging.getLogger(__name__)


def describe(table: Mapping[Enum, str], value: Enum, fallback: str) -> str:
    """Return the clause for ``value``, or ``fallback`` if the table lacks it."""
    clause = table.get(value)
    if clause is None:
        logger.warning(
            "No clause for %s.%s; using fallback %r",
            type(value).__name__,
            value.name,
            fallback,
        )
        return fallback
    return clause


# ---------------------------------------------------------------------------
# Marketing
# ---------------------------------------------------------------------------

SHOT_TYPES = {
    s.AspectRatio.WIDE: "wide cinematic shot",
    s.AspectRatio.SQUARE: "square composition",
    s.AspectRatio.VERTICAL: "vertical portrait shot",
    s.AspectRatio.STANDARD: "classic landscape shot",
}

BUSINESS_ENVIRONMENTS = {
    s.BusinessType.RESTAURANT: "an elegant dining environment",
    s.BusinessType.CAFE: "a cozy, sunlit cafe interior",
    s.BusinessType.RETAIL: "a bright, well-merchandised retail space",
    s.BusinessType.SERVICE: "a welcoming, professional service setting",
    s.BusinessType.TECH: "a modern, clean workspace",
    s.BusinessType.HEALTHCARE: "a calm, spotless healthcare setting",
}

MARKETING_LIGHTING = {
    s.MarketingLighting.NATURAL: "soft, even natural lighting",
    s.MarketingLighting.STUDIO: "professional three-point studio lighting setup",
    s.MarketingLighting.GOLDEN_HOUR: "warm golden hour sunlight streaming naturally",
    s.MarketingLighting.DRAMATIC: "dramatic side lighting with deep shadows",
    s.MarketingLighting.SOFT: "soft, diffused light with gentle shadows",
}

MARKETING_LENSES = {
    s.MarketingLighting.NATURAL: "50mm standard lens",
    s.MarketingLighting.STUDIO: "50mm standard lens",
    s.MarketingLighting.GOLDEN_HOUR: "85mm portrait lens",
    s.MarketingLighting.DRAMATIC: "50mm standard lens",
    s.MarketingLighting.SOFT: "50mm standard lens",
}

AUDIENCE_TONES = {
    s.Audience.PROFESSIONAL: "credible",
    s.Audience.FAMILIES: "warm",
    s.Audience.MILLENNIALS: "authentic",
    s.Audience.GEN_Z: "vibrant",
    s.Audience.LUXURY: "sophisticated",
    s.Audience.BUDGET_CONSCIOUS: "approachable",
}

MARKETING_PURPOSES = {
    s.MarketingPurpose.HERO_IMAGE: "a website hero image",
    s.MarketingPurpose.SOCIAL_MEDIA: "social media posts",
    s.MarketingPurpose.WEBSITE: "website content",
    s.MarketingPurpose.ADVERTISING: "paid advertising",
    s.MarketingPurpose.EMAIL: "email campaigns",
}

# ---------------------------------------------------------------------------
# Logo
# ---------------------------------------------------------------------------

LOGO_TYPEFACES = {
    s.LogoType.MODERN: "clean sans-serif font with geometric proportions",
    s.LogoType.CLASSIC: "traditional serif font with elegant letterforms",
    s.LogoType.MINIMALIST: "ultra-clean, lightweight font with perfect spacing",
    s.LogoType.CREATIVE: "artistic font that maintains excellent readability",
    s.LogoType.CORPORATE: "professional corporate font with strong character definition",
}

INDUSTRY_NAMES = {
    s.Industry.TECH: "technology",
    s.Industry.FOOD: "food and hospitality",
    s.Industry.HEALTHCARE: "healthcare",
    s.Industry.FINANCE: "finance",
    s.Industry.CREATIVE: "creative",
    s.Industry.RETAIL: "retail",
    s.Industry.OTHER: "business",
}

LOGO_BACKGROUNDS = {
    s.LogoBackground.TRANSPARENT: "transparent background",
    s.LogoBackground.WHITE: "white background",
    s.LogoBackground.BLACK: "black background",
    s.LogoBackground.COLORED: "solid brand-colored background",
}

LOGO_ORIENTATIONS = {
    s.LogoOrientation.HORIZONTAL: "horizontal orientation",
    s.LogoOrientation.VERTICAL: "vertical, stacked orientation",
    s.LogoOrientation.SQUARE: "square, badge-style orientation",
}

# ---------------------------------------------------------------------------
# Mockup
# ---------------------------------------------------------------------------

MOCKUP_PRODUCT_TYPES = {
    s.MockupProductType.BOTTLE: "bottle",
    s.MockupProductType.BOX: "box",
    s.MockupProductType.BAG: "bag",
    s.MockupProductType.DEVICE: "device",
    s.MockupProductType.CLOTHING: "clothing item",
    s.MockupProductType.BOOK: "book",
    s.MockupProductType.COSMETICS: "cosmetics product",
}

MOCKUP_ENVIRONMENTS = {
    s.MockupEnvironment.STUDIO: "a controlled studio environment",
    s.MockupEnvironment.LIFESTYLE: "a natural lifestyle environment",
    s.MockupEnvironment.CONTEXTUAL: "a contextual setting where the product is used",
    s.MockupEnvironment.MINIMALIST: "a minimalist, uncluttered environment",
}

MOCKUP_BACKGROUNDS = {
    s.MockupBackground.WHITE: "a seamless white background",
    s.MockupBackground.GRADIENT: "a soft gradient background",
    s.MockupBackground.NATURAL: "a natural, textured background",
    s.MockupBackground.BRANDED: "a branded background in the product's colors",
}

MOCKUP_ANGLES = {
    s.MockupAngle.FRONT: "a straight-on front view",
    s.MockupAngle.ANGLE: "an angled three-quarter view",
    s.MockupAngle.OVERHEAD: "an overhead view",
    s.MockupAngle.LIFESTYLE_SCENE: "a lifestyle scene view",
}

MOCKUP_LIGHTING = {
    s.MockupLighting.STUDIO_PROFESSIONAL: "professional studio lighting with controlled reflections",
    s.MockupLighting.NATURAL_SOFT: "soft natural light with gentle shadows",
    s.MockupLighting.DRAMATIC: "dramatic directional lighting with rich contrast",
    s.MockupLighting.EVEN_FLAT: "even, flat lighting that shows every surface clearly",
}

# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

FOOD_STYLES = {
    s.FoodStyle.OVERHEAD: "overhead flat-lay",
    s.FoodStyle.ANGLE_45: "45-degree angle",
    s.FoodStyle.CLOSE_UP_MACRO: "close-up macro",
    s.FoodStyle.LIFESTYLE_SCENE: "lifestyle scene",
}

FOOD_LIGHTING = {
    s.FoodLighting.NATURAL_WINDOW: "soft natural window light",
    s.FoodLighting.STUDIO_3POINT: "studio three-point lighting",
    s.FoodLighting.GOLDEN_HOUR: "warm golden hour light",
    s.FoodLighting.DRAMATIC_MOODY: "dramatic, moody low-key lighting",
}

CUISINE_STYLES = {
    s.Cuisine.ITALIAN: "rustic Italian",
    s.Cuisine.ASIAN: "refined Asian",
    s.Cuisine.AMERICAN: "classic American",
    s.Cuisine.FRENCH: "elegant French",
    s.Cuisine.MEDITERRANEAN: "sun-drenched Mediterranean",
    s.Cuisine.FUSION: "contemporary fusion",
    s.Cuisine.OTHER: "thoughtfully plated",
}

FOOD_LENSES = {
    s.FoodLens.MACRO_100MM: "100mm macro lens for extreme detail",
    s.FoodLens.PORTRAIT_85MM: "85mm portrait lens with beautiful bokeh",
    s.FoodLens.WIDE_35MM: "35mm wide-angle lens for environmental context",
    s.FoodLens.STANDARD_50MM: "50mm standard lens for natural perspective",
}

FOOD_APERTURES = {
    s.FoodAperture.SHALLOW: "shallow depth of field (f/1.8) with creamy background blur",
    s.FoodAperture.MEDIUM: "moderate depth of field (f/4) balancing subject and context",
    s.FoodAperture.DEEP: "deep depth of field (f/8) keeping entire scene in focus",
}

FOOD_PURPOSES = {
    s.FoodPurpose.MENU: "menu",
    s.FoodPurpose.SOCIAL_MEDIA: "social media",
    s.FoodPurpose.WEBSITE_HERO: "website hero",
    s.FoodPurpose.ADVERTISING: "advertising",
    s.FoodPurpose.PACKAGING: "packaging",
}

FOOD_BRANDS = {
    s.FoodBrand.FINE_DINING: "elegant, sophisticated presentation with premium styling",
    s.FoodBrand.CASUAL: "approachable, warm presentation with comfortable styling",
    s.FoodBrand.FAST_CASUAL: "clean, efficient presentation highlighting freshness",
    s.FoodBrand.FAMILY: "generous, welcoming presentation emphasizing sharing",
    s.FoodBrand.TRENDY: "Instagram-worthy presentation with modern styling",
}

FOOD_AUDIENCE_MOODS = {
    s.FoodAudience.FOOD_ENTHUSIASTS: "indulgent",
    s.FoodAudience.FAMILIES: "comforting",
    s.FoodAudience.HEALTH_CONSCIOUS: "wholesome",
    s.FoodAudience.LUXURY: "sophisticated",
    s.FoodAudience.BUDGET_FRIENDLY: "generous",
}

# ---------------------------------------------------------------------------
# Portrait
# ---------------------------------------------------------------------------

ATTIRE = {
    s.Attire.FORMAL_SUIT: "a tailored formal suit",
    s.Attire.BUSINESS_CASUAL: "polished business casual clothing",
    s.Attire.CREATIVE_PROFESSIONAL: "stylish creative-professional attire",
    s.Attire.MEDICAL_SCRUBS: "clean medical scrubs",
    s.Attire.CHEF_UNIFORM: "a crisp chef's uniform",
}

EXPRESSIONS = {
    s.Expression.CONFIDENT_SMILE: "confident smile",
    s.Expression.SERIOUS_PROFESSIONAL: "serious, professional",
    s.Expression.APPROACHABLE_WARM: "approachable, warm",
    s.Expression.THOUGHTFUL_FOCUSED: "thoughtful, focused",
}

PORTRAIT_STYLES = {
    s.PortraitStyle.CORPORATE_HEADSHOT: "corporate headshot",
    s.PortraitStyle.ENVIRONMENTAL_PORTRAIT: "environmental portrait",
    s.PortraitStyle.CREATIVE_PORTRAIT: "creative portrait",
    s.PortraitStyle.LINKEDIN_STYLE: "LinkedIn-style profile portrait",
}

PORTRAIT_LIGHTING = {
    s.PortraitLighting.CLASSIC_3POINT: (
        "classic three-point studio lighting with key light, fill light, "
        "and background separation"
    ),
    s.PortraitLighting.SOFT_NATURAL: (
        "soft, diffused natural light from a large window creating gentle shadows"
    ),
    s.PortraitLighting.DRAMATIC_SIDE: "dramatic side lighting creating depth and professional gravitas",
    s.PortraitLighting.EVEN_CORPORATE: "even, flattering corporate lighting minimizing shadows",
}

# Entries are format templates; ``{profession}`` is filled in by the compiler.
PORTRAIT_BACKGROUNDS = {
    s.PortraitBackground.NEUTRAL_GRAY: "neutral gray seamless background for versatile use",
    s.PortraitBackground.OFFICE_ENVIRONMENT: "modern office environment with subtle blur",
    s.PortraitBackground.INDUSTRY_RELEVANT: "{profession} workplace environment with appropriate context",
    s.PortraitBackground.PURE_WHITE: "clean pure white background for maximum versatility",
    s.PortraitBackground.SUBTLE_TEXTURE: "subtle textured background adding visual interest without distraction",
}

PORTRAIT_LENSES = {
    s.PortraitLens.PORTRAIT_85MM: (
        "85mm portrait lens creating natural perspective and beautiful background separation"
    ),
    s.PortraitLens.TELEPHOTO_135MM: "135mm telephoto lens for compressed perspective and exceptional bokeh",
    s.PortraitLens.NATURAL_50MM: "50mm standard lens for natural perspective matching human vision",
}

PORTRAIT_APERTURES = {
    s.PortraitAperture.SHALLOW: "f/2.8 for shallow depth of field with smooth background blur",
    s.PortraitAperture.MODERATE: "f/4 for balanced sharpness and background separation",
    s.PortraitAperture.SHARP: "f/5.6 for maximum facial sharpness and detail",
}

PORTRAIT_CROPS = {
    s.PortraitCrop.TIGHT_HEADSHOT: "Tight headshot crop from shoulders up, focusing on facial expression",
    s.PortraitCrop.HEAD_SHOULDERS: "Classic head and shoulders business portrait crop",
    s.PortraitCrop.THREE_QUARTER: "Three-quarter length portrait showing professional attire and posture",
    s.PortraitCrop.FULL_ENVIRONMENTAL: "Full-length environmental portrait showing workplace context",
}

PORTRAIT_PURPOSES = {
    s.PortraitPurpose.LINKEDIN: "a LinkedIn profile",
    s.PortraitPurpose.WEBSITE_TEAM: "a website team page",
    s.PortraitPurpose.MARKETING_MATERIALS: "marketing materials",
    s.PortraitPurpose.PRESS_RELEASE: "press releases",
    s.PortraitPurpose.SPEAKER_BIO: "a speaker biography",
}

PORTRAIT_BRANDS = {
    s.PortraitBrand.CONSERVATIVE_CORPORATE: "traditional, trustworthy corporate styling",
    s.PortraitBrand.MODERN_PROGRESSIVE: "contemporary, forward-thinking business styling",
    s.PortraitBrand.CREATIVE_AGENCY: "dynamic, innovative creative professional styling",
    s.PortraitBrand.HEALTHCARE_TRUSTWORTHY: "caring, competent healthcare professional styling",
    s.PortraitBrand.TECH_INNOVATIVE: "modern, tech-savvy professional styling",
}

# ---------------------------------------------------------------------------
# Commercial product
# ---------------------------------------------------------------------------

PRODUCT_CATEGORIES = {
    s.ProductCategory.ELECTRONICS: "consumer electronics",
    s.ProductCategory.COSMETICS: "cosmetics",
    s.ProductCategory.FASHION: "fashion",
    s.ProductCategory.FOOD_PACKAGING: "packaged food",
    s.ProductCategory.LUXURY_GOODS: "luxury goods",
    s.ProductCategory.HOME_DECOR: "home decor",
}

PRODUCT_STYLES = {
    s.ProductStyle.CLEAN_ECOMMERCE: "clean e-commerce",
    s.ProductStyle.LIFESTYLE_CONTEXT: "lifestyle",
    s.ProductStyle.LUXURY_DRAMATIC: "dramatic luxury",
    s.ProductStyle.TECHNICAL_DETAILED: "technical detail",
}

PRODUCT_LIGHTING = {
    s.ProductLighting.STUDIO_3POINT: (
        "studio three-point lighting setup with key, fill, and background lights "
        "for dimensional depth"
    ),
    s.ProductLighting.SOFT_BOX_EVEN: (
        "large soft-box lighting for even, shadow-free illumination perfect for e-commerce"
    ),
    s.ProductLighting.DRAMATIC_SIDE: "dramatic side lighting creating depth and premium product appeal",
    s.ProductLighting.NATURAL_BRIGHT: (
        "bright, natural lighting with soft shadows for authentic product representation"
    ),
}

PRODUCT_BACKGROUNDS = {
    s.ProductBackground.PURE_WHITE: "seamless pure white background for clean e-commerce presentation",
    s.ProductBackground.GRADIENT_NEUTRAL: "subtle neutral gradient background adding visual interest",
    s.ProductBackground.TEXTURED_SURFACE: "textured surface providing context while maintaining product focus",
    s.ProductBackground.LIFESTYLE_ENVIRONMENT: (
        "lifestyle environment showing product in realistic use context"
    ),
}

PRODUCT_ANGLES = {
    s.ProductAngle.STRAIGHT_ON: "straight-on frontal view showing the product's primary face clearly",
    s.ProductAngle.THREE_QUARTER: "three-quarter angle view providing dimensional perspective and depth",
    s.ProductAngle.OVERHEAD_FLAT: "overhead flat lay perspective perfect for social media and catalogs",
    s.ProductAngle.DYNAMIC_ANGLE: "dynamic angled view creating visual interest and premium appeal",
}

PRODUCT_LENSES = {
    s.ProductLens.MACRO_DETAIL: "macro lens capturing extreme detail and texture with precision sharpness",
    s.ProductLens.STANDARD_50MM: "standard 50mm lens providing natural perspective without distortion",
    s.ProductLens.WIDE_CONTEXT: "wide-angle lens showing product in environmental context",
}

PRODUCT_APERTURES = {
    s.ProductAperture.F8_SHARP: "f/8 aperture for optimal sharpness across the entire product",
    s.ProductAperture.F11_MAXIMUM: "f/11 aperture for maximum depth of field and detail",
    s.ProductAperture.F56_BALANCED: "f/5.6 aperture balancing sharpness with background separation",
}

PRODUCT_PLATFORMS = {
    s.ProductPlatform.ECOMMERCE_LISTING: "e-commerce listings",
    s.ProductPlatform.SOCIAL_MEDIA: "social media",
    s.ProductPlatform.PRINT_CATALOG: "print catalogs",
    s.ProductPlatform.WEBSITE_HERO: "website hero placement",
    s.ProductPlatform.ADVERTISING: "advertising",
}

PRODUCT_BRANDS = {
    s.ProductBrand.PREMIUM_LUXURY: "premium luxury presentation with sophisticated styling and perfect details",
    s.ProductBrand.ACCESSIBLE_QUALITY: "accessible quality presentation emphasizing value and reliability",
    s.ProductBrand.INNOVATIVE_TECH: "cutting-edge tech presentation highlighting innovation and modernity",
    s.ProductBrand.NATURAL_ORGANIC: (
        "natural, organic presentation emphasizing authenticity and sustainability"
    ),
    s.ProductBrand.BOLD_TRENDY: "bold, trendy presentation with contemporary appeal and style",
}

CONVERSION_STRATEGIES = {
    s.ConversionStrategy.DETAIL_FOCUSED: "detailed close-ups showing craftsmanship and quality construction",
    s.ConversionStrategy.LIFESTYLE_ASPIRATION: (
        "aspirational lifestyle context showing product benefits and appeal"
    ),
    s.ConversionStrategy.VALUE_PROPOSITION: "clear value demonstration highlighting features and benefits",
    s.ConversionStrategy.FEATURE_HIGHLIGHT: "specific feature highlighting with callout-ready composition",
}


# Registry of (enumeration, table) pairs audited by missing_entries().
TABLES: dict[str, tuple[type[Enum], Mapping[Enum, str]]] = {
    "SHOT_TYPES": (s.AspectRatio, SHOT_TYPES),
    "BUSINESS_ENVIRONMENTS": (s.BusinessType, BUSINESS_ENVIRONMENTS),
    "MARKETING_LIGHTING": (s.MarketingLighting, MARKETING_LIGHTING),
    "MARKETING_LENSES": (s.MarketingLighting, MARKETING_LENSES),
    "AUDIENCE_TONES": (s.Audience, AUDIENCE_TONES),
    "MARKETING_PURPOSES": (s.MarketingPurpose, MARKETING_PURPOSES),
    "LOGO_TYPEFACES": (s.LogoType, LOGO_TYPEFACES),
    "INDUSTRY_NAMES": (s.Industry, INDUSTRY_NAMES),
    "LOGO_BACKGROUNDS": (s.LogoBackground, LOGO_BACKGROUNDS),
    "LOGO_ORIENTATIONS": (s.LogoOrientation, LOGO_ORIENTATIONS),
    "MOCKUP_PRODUCT_TYPES": (s.MockupProductType, MOCKUP_PRODUCT_TYPES),
    "MOCKUP_ENVIRONMENTS": (s.MockupEnvironment, MOCKUP_ENVIRONMENTS),
    "MOCKUP_BACKGROUNDS": (s.MockupBackground, MOCKUP_BACKGROUNDS),
    "MOCKUP_ANGLES": (s.MockupAngle, MOCKUP_ANGLES),
    "MOCKUP_LIGHTING": (s.MockupLighting, MOCKUP_LIGHTING),
    "FOOD_STYLES": (s.FoodStyle, FOOD_STYLES),
    "FOOD_LIGHTING": (s.FoodLighting, FOOD_LIGHTING),
    "CUISINE_STYLES": (s.Cuisine, CUISINE_STYLES),
    "FOOD_LENSES": (s.FoodLens, FOOD_LENSES),
    "FOOD_APERTURES": (s.FoodAperture, FOOD_APERTURES),
    "FOOD_PURPOSES": (s.FoodPurpose, FOOD_PURPOSES),
    "FOOD_BRANDS": (s.FoodBrand, FOOD_BRANDS),
    "FOOD_AUDIENCE_MOODS": (s.FoodAudience, FOOD_AUDIENCE_MOODS),
    "ATTIRE": (s.Attire, ATTIRE),
    "EXPRESSIONS": (s.Expression, EXPRESSIONS),
    "PORTRAIT_STYLES": (s.PortraitStyle, PORTRAIT_STYLES),
    "PORTRAIT_LIGHTING": (s.PortraitLighting, PORTRAIT_LIGHTING),
    "PORTRAIT_BACKGROUNDS": (s.PortraitBackground, PORTRAIT_BACKGROUNDS),
    "PORTRAIT_LENSES": (s.PortraitLens, PORTRAIT_LENSES),
    "PORTRAIT_APERTURES": (s.PortraitAperture, PORTRAIT_APERTURES),
    "PORTRAIT_CROPS": (s.PortraitCrop, PORTRAIT_CROPS),
    "PORTRAIT_PURPOSES": (s.PortraitPurpose, PORTRAIT_PURPOSES),
    "PORTRAIT_BRANDS": (s.PortraitBrand, PORTRAIT_BRANDS),
    "PRODUCT_CATEGORIES": (s.ProductCategory, PRODUCT_CATEGORIES),
    "PRODUCT_STYLES": (s.ProductStyle, PRODUCT_STYLES),
    "PRODUCT_LIGHTING": (s.ProductLighting, PRODUCT_LIGHTING),
    "PRODUCT_BACKGROUNDS": (s.ProductBackground, PRODUCT_BACKGROUNDS),
    "PRODUCT_ANGLES": (s.ProductAngle, PRODUCT_ANGLES),
    "PRODUCT_LENSES": (s.ProductLens, PRODUCT_LENSES),
    "PRODUCT_APERTURES": (s.ProductAperture, PRODUCT_APERTURES),
    "PRODUCT_PLATFORMS": (s.ProductPlatform, PRODUCT_PLATFORMS),
    "PRODUCT_BRANDS": (s.ProductBrand, PRODUCT_BRANDS),
    "CONVERSION_STRATEGIES": (s.ConversionStrategy, CONVERSION_STRATEGIES),
}


def missing_entries() -> list[tuple[str, str]]:
    """List every enumeration value that has no clause in its table.

    Returns:
        ``(table_name, value)`` pairs; empty when every table is complete.
    """
    missing = []
    for name, (enum_cls, table) in TABLES.items():
        for member in enum_cls:
            if member not in table:
                missing.append((name, member.value))
    return missing
