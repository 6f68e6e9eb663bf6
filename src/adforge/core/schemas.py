"""Request schemas for every content domain.

Each content domain (marketing image, logo, product mockup, food photo,
business portrait, commercial product shot) has its own Pydantic model
carrying only its own field set.  Together they form a tagged union keyed on
``domain``; the prompt compiler dispatches on the concrete class.

Categorical options are closed enumerations.  Their member values are the
wire strings callers send (``"golden-hour"``, ``"f2.8-shallow"``), and the
lookup tables in :mod:`adforge.core.lookup` are keyed by the members, so a
value that validates always has a table entry to look for.

Wire Format
-----------
Keys are camelCase on the wire (``businessName``, ``aspectRatio``,
``keyFeatures``); snake_case field names are accepted as well.  Unknown keys
are ignored.  Models are frozen once validated.

Example
-------
    >>> LogoRequest.model_validate({
    ...     "businessName": "Blue Fern Studio",
    ...     "style": {"type": "minimalist"},
    ... }).format.orientation
    <LogoOrientation.HORIZONTAL: 'horizontal'>
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class Domain(str, Enum):
    """Supported content domains."""

    MARKETING = "marketing"
    LOGO = "logo"
    MOCKUP = "mockup"
    FOOD = "food"
    PORTRAIT = "portrait"
    PRODUCT = "product"


# ---------------------------------------------------------------------------
# Marketing options.
# ---------------------------------------------------------------------------


class BusinessType(str, Enum):
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    RETAIL = "retail"
    SERVICE = "service"
    TECH = "tech"
    HEALTHCARE = "healthcare"


class Audience(str, Enum):
    PROFESSIONAL = "professional"
    FAMILIES = "families"
    MILLENNIALS = "millennials"
    GEN_Z = "gen-z"
    LUXURY = "luxury"
    BUDGET_CONSCIOUS = "budget-conscious"


class MarketingPurpose(str, Enum):
    HERO_IMAGE = "hero-image"
    SOCIAL_MEDIA = "social-media"
    WEBSITE = "website"
    ADVERTISING = "advertising"
    EMAIL = "email"


class MarketingLighting(str, Enum):
    NATURAL = "natural"
    STUDIO = "studio"
    GOLDEN_HOUR = "golden-hour"
    DRAMATIC = "dramatic"
    SOFT = "soft"


class MarketingMood(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    PREMIUM = "premium"
    ENERGETIC = "energetic"
    CALMING = "calming"


class AspectRatio(str, Enum):
    WIDE = "16:9"
    SQUARE = "1:1"
    VERTICAL = "9:16"
    STANDARD = "4:3"


# ---------------------------------------------------------------------------
# Logo options.
# ---------------------------------------------------------------------------


class LogoType(str, Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMALIST = "minimalist"
    CREATIVE = "creative"
    CORPORATE = "corporate"


class Industry(str, Enum):
    TECH = "tech"
    FOOD = "food"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    CREATIVE = "creative"
    RETAIL = "retail"
    OTHER = "other"


class LogoBackground(str, Enum):
    TRANSPARENT = "transparent"
    WHITE = "white"
    BLACK = "black"
    COLORED = "colored"


class LogoOrientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    SQUARE = "square"


# ---------------------------------------------------------------------------
# Mockup options.
# ---------------------------------------------------------------------------


class MockupProductType(str, Enum):
    BOTTLE = "bottle"
    BOX = "box"
    BAG = "bag"
    DEVICE = "device"
    CLOTHING = "clothing"
    BOOK = "book"
    COSMETICS = "cosmetics"


class MockupEnvironment(str, Enum):
    STUDIO = "studio"
    LIFESTYLE = "lifestyle"
    CONTEXTUAL = "contextual"
    MINIMALIST = "minimalist"


class MockupBackground(str, Enum):
    WHITE = "white"
    GRADIENT = "gradient"
    NATURAL = "natural"
    BRANDED = "branded"


class MockupAngle(str, Enum):
    FRONT = "front"
    ANGLE = "angle"
    OVERHEAD = "overhead"
    LIFESTYLE_SCENE = "lifestyle-scene"


class MockupLighting(str, Enum):
    STUDIO_PROFESSIONAL = "studio-professional"
    NATURAL_SOFT = "natural-soft"
    DRAMATIC = "dramatic"
    EVEN_FLAT = "even-flat"


# ---------------------------------------------------------------------------
# Food options.
# ---------------------------------------------------------------------------


class Cuisine(str, Enum):
    ITALIAN = "italian"
    ASIAN = "asian"
    AMERICAN = "american"
    FRENCH = "french"
    MEDITERRANEAN = "mediterranean"
    FUSION = "fusion"
    OTHER = "other"


class DishCategory(str, Enum):
    APPETIZER = "appetizer"
    MAIN = "main"
    DESSERT = "dessert"
    BEVERAGE = "beverage"
    SNACK = "snack"


class FoodStyle(str, Enum):
    OVERHEAD = "overhead"
    ANGLE_45 = "45-degree"
    CLOSE_UP_MACRO = "close-up-macro"
    LIFESTYLE_SCENE = "lifestyle-scene"


class FoodLighting(str, Enum):
    NATURAL_WINDOW = "natural-window"
    STUDIO_3POINT = "studio-3point"
    GOLDEN_HOUR = "golden-hour"
    DRAMATIC_MOODY = "dramatic-moody"


class FoodLens(str, Enum):
    MACRO_100MM = "macro-100mm"
    PORTRAIT_85MM = "portrait-85mm"
    WIDE_35MM = "wide-35mm"
    STANDARD_50MM = "standard-50mm"


class FoodAperture(str, Enum):
    SHALLOW = "shallow-f1.8"
    MEDIUM = "medium-f4"
    DEEP = "deep-f8"


class FoodPurpose(str, Enum):
    MENU = "menu"
    SOCIAL_MEDIA = "social-media"
    WEBSITE_HERO = "website-hero"
    ADVERTISING = "advertising"
    PACKAGING = "packaging"


class FoodBrand(str, Enum):
    FINE_DINING = "fine-dining"
    CASUAL = "casual"
    FAST_CASUAL = "fast-casual"
    FAMILY = "family"
    TRENDY = "trendy"


class FoodAudience(str, Enum):
    FOOD_ENTHUSIASTS = "food-enthusiasts"
    FAMILIES = "families"
    HEALTH_CONSCIOUS = "health-conscious"
    LUXURY = "luxury"
    BUDGET_FRIENDLY = "budget-friendly"


# ---------------------------------------------------------------------------
# Portrait options.
# ---------------------------------------------------------------------------


class Attire(str, Enum):
    FORMAL_SUIT = "formal-suit"
    BUSINESS_CASUAL = "business-casual"
    CREATIVE_PROFESSIONAL = "creative-professional"
    MEDICAL_SCRUBS = "medical-scrubs"
    CHEF_UNIFORM = "chef-uniform"


class Expression(str, Enum):
    CONFIDENT_SMILE = "confident-smile"
    SERIOUS_PROFESSIONAL = "serious-professional"
    APPROACHABLE_WARM = "approachable-warm"
    THOUGHTFUL_FOCUSED = "thoughtful-focused"


class PortraitStyle(str, Enum):
    CORPORATE_HEADSHOT = "corporate-headshot"
    ENVIRONMENTAL_PORTRAIT = "environmental-portrait"
    CREATIVE_PORTRAIT = "creative-portrait"
    LINKEDIN_STYLE = "linkedin-style"


class PortraitBackground(str, Enum):
    NEUTRAL_GRAY = "neutral-gray"
    OFFICE_ENVIRONMENT = "office-environment"
    INDUSTRY_RELEVANT = "industry-relevant"
    PURE_WHITE = "pure-white"
    SUBTLE_TEXTURE = "subtle-texture"


class PortraitLighting(str, Enum):
    CLASSIC_3POINT = "classic-3point"
    SOFT_NATURAL = "soft-natural"
    DRAMATIC_SIDE = "dramatic-side"
    EVEN_CORPORATE = "even-corporate"


class PortraitLens(str, Enum):
    PORTRAIT_85MM = "85mm-portrait"
    TELEPHOTO_135MM = "135mm-telephoto"
    NATURAL_50MM = "50mm-natural"


class PortraitAperture(str, Enum):
    SHALLOW = "f2.8-shallow"
    MODERATE = "f4-moderate"
    SHARP = "f5.6-sharp"


class PortraitCrop(str, Enum):
    TIGHT_HEADSHOT = "tight-headshot"
    HEAD_SHOULDERS = "head-shoulders"
    THREE_QUARTER = "three-quarter"
    FULL_ENVIRONMENTAL = "full-environmental"


class PortraitPurpose(str, Enum):
    LINKEDIN = "linkedin"
    WEBSITE_TEAM = "website-team"
    MARKETING_MATERIALS = "marketing-materials"
    PRESS_RELEASE = "press-release"
    SPEAKER_BIO = "speaker-bio"


class PortraitBrand(str, Enum):
    CONSERVATIVE_CORPORATE = "conservative-corporate"
    MODERN_PROGRESSIVE = "modern-progressive"
    CREATIVE_AGENCY = "creative-agency"
    HEALTHCARE_TRUSTWORTHY = "healthcare-trustworthy"
    TECH_INNOVATIVE = "tech-innovative"


# ---------------------------------------------------------------------------
# Commercial product options.
# ---------------------------------------------------------------------------


class ProductCategory(str, Enum):
    ELECTRONICS = "electronics"
    COSMETICS = "cosmetics"
    FASHION = "fashion"
    FOOD_PACKAGING = "food-packaging"
    LUXURY_GOODS = "luxury-goods"
    HOME_DECOR = "home-decor"


class ProductStyle(str, Enum):
    CLEAN_ECOMMERCE = "clean-ecommerce"
    LIFESTYLE_CONTEXT = "lifestyle-context"
    LUXURY_DRAMATIC = "luxury-dramatic"
    TECHNICAL_DETAILED = "technical-detailed"


class ProductAngle(str, Enum):
    STRAIGHT_ON = "straight-on"
    THREE_QUARTER = "three-quarter"
    OVERHEAD_FLAT = "overhead-flat"
    DYNAMIC_ANGLE = "dynamic-angle"


class ProductBackground(str, Enum):
    PURE_WHITE = "pure-white"
    GRADIENT_NEUTRAL = "gradient-neutral"
    TEXTURED_SURFACE = "textured-surface"
    LIFESTYLE_ENVIRONMENT = "lifestyle-environment"


class ProductLighting(str, Enum):
    STUDIO_3POINT = "studio-3point"
    SOFT_BOX_EVEN = "soft-box-even"
    DRAMATIC_SIDE = "dramatic-side"
    NATURAL_BRIGHT = "natural-bright"


class ProductLens(str, Enum):
    MACRO_DETAIL = "macro-detail"
    STANDARD_50MM = "standard-50mm"
    WIDE_CONTEXT = "wide-context"


class ProductAperture(str, Enum):
    F8_SHARP = "f8-sharp"
    F11_MAXIMUM = "f11-maximum"
    F56_BALANCED = "f5.6-balanced"


class ProductPlatform(str, Enum):
    ECOMMERCE_LISTING = "ecommerce-listing"
    SOCIAL_MEDIA = "social-media"
    PRINT_CATALOG = "print-catalog"
    WEBSITE_HERO = "website-hero"
    ADVERTISING = "advertising"


class ProductBrand(str, Enum):
    PREMIUM_LUXURY = "premium-luxury"
    ACCESSIBLE_QUALITY = "accessible-quality"
    INNOVATIVE_TECH = "innovative-tech"
    NATURAL_ORGANIC = "natural-organic"
    BOLD_TRENDY = "bold-trendy"


class ConversionStrategy(str, Enum):
    DETAIL_FOCUSED = "detail-focused"
    LIFESTYLE_ASPIRATION = "lifestyle-aspiration"
    VALUE_PROPOSITION = "value-proposition"
    FEATURE_HIGHLIGHT = "feature-highlight"


# ---------------------------------------------------------------------------
# Option groups.
# ---------------------------------------------------------------------------


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional free text; empty or whitespace-only values count as absent.
OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]


class OptionGroup(BaseModel):
    """Base for every nested option group and request model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class BusinessContext(OptionGroup):
    type: BusinessType
    audience: Audience
    purpose: MarketingPurpose


class MarketingStyle(OptionGroup):
    lighting: MarketingLighting | None = None
    mood: MarketingMood = MarketingMood.PROFESSIONAL
    colors: list[str] | None = None


class LogoStyle(OptionGroup):
    type: LogoType
    industry: Industry | None = None
    colors: list[str] | None = None
    include_icon: StrictBool = False
    icon_description: OptionalText = None


class LogoFormat(OptionGroup):
    background: LogoBackground = LogoBackground.WHITE
    orientation: LogoOrientation = LogoOrientation.HORIZONTAL


class MockupProduct(OptionGroup):
    name: str
    type: MockupProductType
    description: str
    branding: OptionalText = None


class MockupSetting(OptionGroup):
    environment: MockupEnvironment
    background: MockupBackground
    angle: MockupAngle


class MockupStyle(OptionGroup):
    lighting: MockupLighting = MockupLighting.STUDIO_PROFESSIONAL
    colors: list[str] | None = None


class Dish(OptionGroup):
    name: str
    description: str
    cuisine: Cuisine = Cuisine.OTHER
    category: DishCategory | None = None


class FoodPhotography(OptionGroup):
    style: FoodStyle
    lighting: FoodLighting
    props: list[str] | None = None
    steam: StrictBool = False
    garnish: OptionalText = None


class FoodTechnical(OptionGroup):
    lens: FoodLens = FoodLens.MACRO_100MM
    aperture: FoodAperture = FoodAperture.SHALLOW
    focus: OptionalText = None


class FoodBusiness(OptionGroup):
    purpose: FoodPurpose
    brand: FoodBrand
    audience: FoodAudience


class PortraitSubject(OptionGroup):
    description: str
    profession: str
    attire: Attire
    expression: Expression


class PortraitPhotography(OptionGroup):
    style: PortraitStyle
    background: PortraitBackground
    lighting: PortraitLighting


class PortraitTechnical(OptionGroup):
    lens: PortraitLens = PortraitLens.PORTRAIT_85MM
    aperture: PortraitAperture = PortraitAperture.SHALLOW
    crop: PortraitCrop = PortraitCrop.HEAD_SHOULDERS


class PortraitBusiness(OptionGroup):
    purpose: PortraitPurpose
    brand: PortraitBrand


class CommercialProduct(OptionGroup):
    name: str
    category: ProductCategory
    description: str
    key_features: list[str] | None = None


class ProductPhotography(OptionGroup):
    style: ProductStyle
    angle: ProductAngle
    background: ProductBackground
    lighting: ProductLighting


class ProductTechnical(OptionGroup):
    lens: ProductLens = ProductLens.STANDARD_50MM
    aperture: ProductAperture = ProductAperture.F8_SHARP
    focus: OptionalText = None


class ProductBusiness(OptionGroup):
    platform: ProductPlatform
    brand: ProductBrand
    conversion: ConversionStrategy


# ---------------------------------------------------------------------------
# Domain requests.
# ---------------------------------------------------------------------------


class MarketingRequest(OptionGroup):
    """Marketing visual or hero image."""

    file_prefix: ClassVar[str] = "marketing"

    domain: Literal[Domain.MARKETING] = Domain.MARKETING
    prompt: str
    business_context: BusinessContext | None = None
    style: MarketingStyle = Field(default_factory=MarketingStyle)
    aspect_ratio: AspectRatio = AspectRatio.WIDE

    @property
    def slug_source(self) -> str | None:
        return None


class LogoRequest(OptionGroup):
    """Business logo with exact text rendering."""

    file_prefix: ClassVar[str] = "logo"

    domain: Literal[Domain.LOGO] = Domain.LOGO
    business_name: str
    tagline: OptionalText = None
    style: LogoStyle
    format: LogoFormat = Field(default_factory=LogoFormat)

    @property
    def slug_source(self) -> str | None:
        return self.business_name


class MockupRequest(OptionGroup):
    """Packaging-style product mockup."""

    file_prefix: ClassVar[str] = "product"

    domain: Literal[Domain.MOCKUP] = Domain.MOCKUP
    product: MockupProduct
    setting: MockupSetting
    style: MockupStyle = Field(default_factory=MockupStyle)

    @property
    def slug_source(self) -> str | None:
        return self.product.name


class FoodRequest(OptionGroup):
    """Appetite-appeal food photograph."""

    file_prefix: ClassVar[str] = "food"

    domain: Literal[Domain.FOOD] = Domain.FOOD
    dish: Dish
    photography: FoodPhotography
    technical: FoodTechnical = Field(default_factory=FoodTechnical)
    business: FoodBusiness | None = None

    @property
    def slug_source(self) -> str | None:
        return self.dish.name


class PortraitRequest(OptionGroup):
    """Business headshot or portrait."""

    file_prefix: ClassVar[str] = "portrait"

    domain: Literal[Domain.PORTRAIT] = Domain.PORTRAIT
    subject: PortraitSubject
    photography: PortraitPhotography
    technical: PortraitTechnical = Field(default_factory=PortraitTechnical)
    business: PortraitBusiness | None = None

    @property
    def slug_source(self) -> str | None:
        return self.subject.profession


class ProductRequest(OptionGroup):
    """Studio-quality commercial product photograph."""

    file_prefix: ClassVar[str] = "commercial"

    domain: Literal[Domain.PRODUCT] = Domain.PRODUCT
    product: CommercialProduct
    photography: ProductPhotography
    technical: ProductTechnical = Field(default_factory=ProductTechnical)
    business: ProductBusiness | None = None

    @property
    def slug_source(self) -> str | None:
        return self.product.name


DomainRequest = Annotated[
    Union[
        MarketingRequest,
        LogoRequest,
        MockupRequest,
        FoodRequest,
        PortraitRequest,
        ProductRequest,
    ],
    Field(discriminator="domain"),
]

DOMAIN_SCHEMAS: dict[Domain, type[OptionGroup]] = {
    Domain.MARKETING: MarketingRequest,
    Domain.LOGO: LogoRequest,
    Domain.MOCKUP: MockupRequest,
    Domain.FOOD: FoodRequest,
    Domain.PORTRAIT: PortraitRequest,
    Domain.PRODUCT: ProductRequest,
}
