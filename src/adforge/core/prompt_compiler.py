"""Per-domain prompt compilation.

A validated request is turned into one natural-language prompt by the
routine for its content domain.  All routines share the same shape:

1. An opening sentence naming the shot or document type and the caller's
   subject text.
2. Scene and environment clauses resolved from categorical options.
3. An illumination clause, combined with a mood where the domain has one.
4. A camera clause from lens and aperture, optionally narrowed by a focus
   instruction.
5. Domain-specific clauses: exact text to render (always quoted verbatim),
   iconography, colour palettes, feature callouts.
6. A closing commercial-quality sentence, plus business framing.

Every optional option that is absent contributes its default clause, so the
prompt always reads as complete English.  Compilation is a pure function of
the request: same request, byte-identical prompt.

Usage
-----
::

    request = validate_request("marketing", {"prompt": "a red bicycle"})
    prompt = compile_prompt(request)
"""

from __future__ import annotations

from typing import assert_never

from adforge.core import lookup
from adforge.core.lookup import describe
from adforge.core.schemas import (
    DishCategory,
    DomainRequest,
    FoodAperture,
    FoodRequest,
    LogoRequest,
    MarketingRequest,
    MockupRequest,
    PortraitRequest,
    ProductRequest,
)

# ---------------------------------------------------------------------------
# Default clauses used when an optional option is absent.
# ---------------------------------------------------------------------------

_DEFAULT_ENVIRONMENT = "a professional business environment"
_DEFAULT_MARKETING_LIGHTING = "soft, even natural lighting"
_DEFAULT_MARKETING_LENS = "50mm standard lens"
_DEFAULT_TONE = "approachable"
_DEFAULT_MARKETING_PALETTE = "balanced, true-to-life commercial colors"
_DEFAULT_MARKETING_PURPOSE = "general marketing use"

_DEFAULT_LOGO_PALETTE = "professional brand colors with strong contrast"
_DEFAULT_INDUSTRY = "business"

_DEFAULT_FOOD_MOOD = "inviting"
_DEFAULT_FOOD_FOCUS = "the hero portion of the dish"

# Shared fallback for any categorical value missing from its table.
_FALLBACK = "a professional, well-balanced setup"

_MARKETING_CLOSING = (
    "Commercial photography quality with perfect color accuracy and professional composition."
)
_LOGO_CLOSING = (
    "The design should be vector-style with crisp, clean edges and professional typography "
    "suitable for business cards, website headers, signage, and corporate materials. "
    "High-resolution execution with perfect text clarity at all sizes, following "
    "{industry} industry standards for professional branding."
)
_MOCKUP_CLOSING = (
    "Ultra-realistic commercial product photography with sharp focus and professional "
    "presentation. High-resolution quality suitable for e-commerce listings and marketing "
    "materials."
)
_FOOD_CLOSING = (
    "Ultra-high resolution with perfect color accuracy, suitable for menu printing and "
    "digital marketing."
)
_PORTRAIT_CLOSING = (
    "Sharp focus on the eyes, perfect skin tone reproduction, commercial headshot "
    "photography quality suitable for executive use and professional marketing."
)
_PRODUCT_CLOSING = (
    "Ultra-high resolution with perfect color accuracy, commercial studio quality suitable "
    "for all marketing applications."
)


def _sentence(text: str) -> str:
    """Terminate caller text with a full stop unless it already ends a sentence."""
    text = text.strip()
    if text.endswith((".", "!", "?")):
        return text
    return f"{text}."


def _join(items: list[str] | None) -> str | None:
    """Render a list option as ``a, b, c``; empty lists count as absent."""
    items = [item.strip() for item in items or [] if item.strip()]
    if not items:
        return None
    return ", ".join(items)


def compile_prompt(request: DomainRequest) -> str:
    """Compile a validated request into the prompt for its domain.

    Args:
        request: Any validated domain request model.

    Returns:
        The compiled prompt, sentences separated by single spaces.
    """
    match request:
        case MarketingRequest():
            parts = _compile_marketing(request)
        case LogoRequest():
            parts = _compile_logo(request)
        case MockupRequest():
            parts = _compile_mockup(request)
        case FoodRequest():
            parts = _compile_food(request)
        case PortraitRequest():
            parts = _compile_portrait(request)
        case ProductRequest():
            parts = _compile_product(request)
        case _:
            assert_never(request)
    return " ".join(parts)


def _compile_marketing(request: MarketingRequest) -> list[str]:
    context = request.business_context
    style = request.style
    parts: list[str] = []

    # --- Shot type and subject ---------------------------------------------
    shot = describe(lookup.SHOT_TYPES, request.aspect_ratio, "professional shot")
    opening = f"A photorealistic {shot} of {request.prompt.strip()}"
    if context is not None:
        opening += f" for {context.type.value} business targeting {context.audience.value}"
    parts.append(f"{opening}.")

    # --- Environment --------------------------------------------------------
    if context is not None:
        environment = describe(lookup.BUSINESS_ENVIRONMENTS, context.type, _DEFAULT_ENVIRONMENT)
    else:
        environment = _DEFAULT_ENVIRONMENT
    parts.append(f"The scene is set in {environment}.")

    # --- Lighting and mood --------------------------------------------------
    if style.lighting is not None:
        lighting = describe(lookup.MARKETING_LIGHTING, style.lighting, _DEFAULT_MARKETING_LIGHTING)
        lens = describe(lookup.MARKETING_LENSES, style.lighting, _DEFAULT_MARKETING_LENS)
    else:
        lighting = _DEFAULT_MARKETING_LIGHTING
        lens = _DEFAULT_MARKETING_LENS
    if context is not None:
        tone = describe(lookup.AUDIENCE_TONES, context.audience, _DEFAULT_TONE)
    else:
        tone = _DEFAULT_TONE
    parts.append(
        f"The scene is illuminated by {lighting}, creating a {style.mood.value} and {tone} "
        "atmosphere."
    )

    # --- Camera -------------------------------------------------------------
    parts.append(
        f"Captured with a {lens}, emphasizing sharp focus with {request.aspect_ratio.value} "
        "aspect ratio, ultra-high resolution commercial quality."
    )

    # --- Palette, quality, purpose -----------------------------------------
    palette = _join(style.colors) or _DEFAULT_MARKETING_PALETTE
    parts.append(f"Color palette: {palette}.")
    parts.append(_MARKETING_CLOSING)
    if context is not None:
        purpose = describe(lookup.MARKETING_PURPOSES, context.purpose, _DEFAULT_MARKETING_PURPOSE)
    else:
        purpose = _DEFAULT_MARKETING_PURPOSE
    parts.append(f"Optimized for {purpose}.")
    return parts


def _compile_logo(request: LogoRequest) -> list[str]:
    style = request.style
    fmt = request.format
    parts: list[str] = []

    if style.industry is not None:
        industry = describe(lookup.INDUSTRY_NAMES, style.industry, _DEFAULT_INDUSTRY)
    else:
        industry = _DEFAULT_INDUSTRY

    # --- Opening and exact text rendering ----------------------------------
    typeface = describe(lookup.LOGO_TYPEFACES, style.type, "clean, highly legible font")
    parts.append(
        f"Create a professional {style.type.value} logo design with exceptional typography "
        "quality."
    )
    parts.append(
        f'The primary text "{request.business_name}" must be rendered with crystal-clear '
        f"legibility using a {style.type.value} {typeface}."
    )
    if request.tagline is not None:
        parts.append(
            f'Include the tagline "{request.tagline}" in smaller, complementary typography '
            "that harmonizes perfectly with the main text."
        )
    else:
        parts.append("No tagline is included, so the primary text carries the design on its own.")

    # --- Iconography --------------------------------------------------------
    if style.include_icon:
        icon = style.icon_description or f"a {industry}-related symbol"
        parts.append(
            f"Integrate {icon} as a sophisticated icon that complements the typography "
            "without overwhelming it."
        )
    else:
        parts.append("The logo is purely typographic, with no icon or symbol.")

    # --- Palette and layout -------------------------------------------------
    palette = _join(style.colors) or _DEFAULT_LOGO_PALETTE
    parts.append(f"Color palette: {palette}.")
    orientation = describe(lookup.LOGO_ORIENTATIONS, fmt.orientation, "horizontal orientation")
    parts.append(f"Layout: {orientation} with perfect balance and spacing.")
    background = describe(lookup.LOGO_BACKGROUNDS, fmt.background, "white background")
    parts.append(f"Background: {background} for maximum versatility across applications.")

    parts.append(_LOGO_CLOSING.format(industry=industry))
    return parts


def _compile_mockup(request: MockupRequest) -> list[str]:
    product = request.product
    setting = request.setting
    style = request.style
    parts: list[str] = []

    product_type = describe(lookup.MOCKUP_PRODUCT_TYPES, product.type, "product")
    parts.append(f"Create a professional product mockup of {product.name}, a {product_type}.")
    parts.append(f"Product details: {_sentence(product.description)}")

    # --- Branding text ------------------------------------------------------
    if product.branding is not None:
        parts.append(
            f'Display the text "{product.branding}" prominently on the product, rendered '
            "exactly as written."
        )
    else:
        parts.append("Keep the product surfaces clean and unbranded, with no added text or logos.")

    # --- Setting, angle, lighting ------------------------------------------
    environment = describe(lookup.MOCKUP_ENVIRONMENTS, setting.environment, _FALLBACK)
    background = describe(lookup.MOCKUP_BACKGROUNDS, setting.background, "a neutral background")
    parts.append(f"Setting: {environment} with {background}.")
    angle = describe(lookup.MOCKUP_ANGLES, setting.angle, "a flattering product view")
    parts.append(f"Camera angle: {angle}.")
    lighting = describe(lookup.MOCKUP_LIGHTING, style.lighting, _FALLBACK)
    parts.append(f"Lighting: {lighting}.")

    # --- Colours ------------------------------------------------------------
    colors = _join(style.colors)
    if colors is not None:
        parts.append(f"Brand colors: {colors}.")
    else:
        parts.append("Show the product in its natural colors with accurate color reproduction.")

    parts.append(_MOCKUP_CLOSING)
    return parts


def _compile_food(request: FoodRequest) -> list[str]:
    dish = request.dish
    photo = request.photography
    technical = request.technical
    business = request.business
    parts: list[str] = []

    # --- Opening and appetite appeal ---------------------------------------
    style = describe(lookup.FOOD_STYLES, photo.style, "professional")
    cuisine = describe(lookup.CUISINE_STYLES, dish.cuisine, "thoughtfully plated")
    parts.append(f"A photorealistic {style} food photograph of {dish.name}, {cuisine} cuisine.")
    steam = "rising steam and " if photo.steam else ""
    texture = "decadent" if dish.category is DishCategory.DESSERT else "fresh"
    description = dish.description.strip().rstrip(".")
    parts.append(
        f"{description}, showcasing {steam}glistening, {texture} textures that emphasize "
        "appetite appeal."
    )
    if photo.garnish is not None:
        parts.append(f"Artfully garnished with {_sentence(photo.garnish)}")
    else:
        parts.append("Presented without extra garnish so the dish speaks for itself.")

    # --- Lighting and mood --------------------------------------------------
    lighting = describe(lookup.FOOD_LIGHTING, photo.lighting, _FALLBACK)
    if business is not None:
        mood = describe(lookup.FOOD_AUDIENCE_MOODS, business.audience, _DEFAULT_FOOD_MOOD)
    else:
        mood = _DEFAULT_FOOD_MOOD
    parts.append(
        f"Illuminated by {lighting} with soft shadows that enhance the food's natural textures "
        f"and colors, so the scene feels {mood}."
    )

    # --- Camera -------------------------------------------------------------
    lens = describe(lookup.FOOD_LENSES, technical.lens, "professional food photography lens")
    aperture = describe(lookup.FOOD_APERTURES, technical.aperture, "balanced depth of field")
    parts.append(f"Shot with {lens} using {aperture}.")
    focus = technical.focus or _DEFAULT_FOOD_FOCUS
    falloff = (
        "artistic blur on secondary elements"
        if technical.aperture is FoodAperture.SHALLOW
        else "overall sharpness"
    )
    parts.append(f"Sharp focus on {focus} with {falloff}.")

    # --- Props --------------------------------------------------------------
    props = _join(photo.props)
    if props is not None:
        parts.append(f"Styled with {props} to create an inviting scene.")
    else:
        parts.append("Styled simply with minimal props to keep attention on the food.")

    # --- Business framing ---------------------------------------------------
    if business is not None:
        purpose = describe(lookup.FOOD_PURPOSES, business.purpose, "marketing")
        brand = describe(lookup.FOOD_BRANDS, business.brand, "polished, appetizing presentation")
        parts.append(
            f"Optimized for {purpose} use in a {business.brand.value} restaurant targeting "
            f"{business.audience.value}."
        )
        parts.append(f"The styling should convey {brand}.")
    else:
        parts.append("Optimized for menu and marketing use.")

    parts.append(_FOOD_CLOSING)
    return parts


def _compile_portrait(request: PortraitRequest) -> list[str]:
    subject = request.subject
    photo = request.photography
    technical = request.technical
    business = request.business
    parts: list[str] = []

    # --- Subject ------------------------------------------------------------
    style = describe(lookup.PORTRAIT_STYLES, photo.style, "professional portrait")
    parts.append(
        f"A photorealistic {style} of a {subject.description.strip()} professional working in "
        f"{subject.profession.strip()}."
    )
    attire = describe(lookup.ATTIRE, subject.attire, "professional attire")
    expression = describe(lookup.EXPRESSIONS, subject.expression, "composed, professional")
    parts.append(
        f"The subject is wearing {attire} and displays a {expression} expression that conveys "
        "competence and approachability."
    )

    # --- Lighting and background -------------------------------------------
    lighting = describe(lookup.PORTRAIT_LIGHTING, photo.lighting, _FALLBACK)
    parts.append(
        f"Illuminated by {lighting}, creating professional, flattering light that enhances "
        "facial features naturally."
    )
    background = describe(
        lookup.PORTRAIT_BACKGROUNDS, photo.background, "a clean, uncluttered background"
    ).format(profession=subject.profession.strip())
    parts.append(f"Set against {background}.")

    # --- Camera and framing -------------------------------------------------
    lens = describe(lookup.PORTRAIT_LENSES, technical.lens, "portrait lens")
    aperture = describe(lookup.PORTRAIT_APERTURES, technical.aperture, "a balanced aperture")
    parts.append(f"Captured with {lens} at {aperture}.")
    crop = describe(lookup.PORTRAIT_CROPS, technical.crop, "Classic business portrait crop")
    parts.append(f"{crop}.")

    # --- Business framing ---------------------------------------------------
    if business is not None:
        brand = describe(lookup.PORTRAIT_BRANDS, business.brand, "polished professional styling")
        purpose = describe(lookup.PORTRAIT_PURPOSES, business.purpose, "professional use")
        parts.append(
            f"The overall styling conveys {brand}, optimized for {purpose} with professional "
            "quality that builds trust and credibility."
        )
    else:
        parts.append(
            "The overall styling is polished and versatile, suitable for LinkedIn and business "
            "marketing."
        )

    parts.append(_PORTRAIT_CLOSING)
    return parts


def _compile_product(request: ProductRequest) -> list[str]:
    product = request.product
    photo = request.photography
    technical = request.technical
    business = request.business
    parts: list[str] = []

    # --- Product ------------------------------------------------------------
    style = describe(lookup.PRODUCT_STYLES, photo.style, "commercial")
    category = describe(lookup.PRODUCT_CATEGORIES, product.category, "consumer")
    parts.append(
        f"A professional {style} commercial product photograph of {product.name}, a "
        f"{category} item."
    )
    parts.append(_sentence(product.description))
    features = _join(product.key_features)
    if features is not None:
        parts.append(f"The image should prominently showcase these key features: {features}.")
    else:
        parts.append("The composition presents the product as a whole rather than single features.")

    # --- Lighting, background, angle ---------------------------------------
    lighting = describe(lookup.PRODUCT_LIGHTING, photo.lighting, _FALLBACK)
    parts.append(
        f"Illuminated by {lighting}, creating professional product presentation that highlights "
        "materials, textures, and craftsmanship."
    )
    background = describe(lookup.PRODUCT_BACKGROUNDS, photo.background, "a neutral background")
    parts.append(f"Set against {background}.")

    # --- Camera -------------------------------------------------------------
    angle = describe(lookup.PRODUCT_ANGLES, photo.angle, "flattering product view")
    lens = describe(lookup.PRODUCT_LENSES, technical.lens, "standard product lens")
    aperture = describe(lookup.PRODUCT_APERTURES, technical.aperture, "a sharp aperture")
    parts.append(f"Shot from a {angle}, using {lens} with {aperture}.")
    if technical.focus is not None:
        parts.append(
            f"Sharp focus specifically on {technical.focus} while maintaining overall product "
            "clarity."
        )
    else:
        parts.append("Sharp focus across the whole product with consistent clarity.")

    # --- Business framing ---------------------------------------------------
    if business is not None:
        brand = describe(lookup.PRODUCT_BRANDS, business.brand, "polished commercial presentation")
        conversion = describe(
            lookup.CONVERSION_STRATEGIES, business.conversion, "clear product presentation"
        )
        platform = describe(lookup.PRODUCT_PLATFORMS, business.platform, "marketing")
        parts.append(f"The presentation style conveys {brand} with {conversion}.")
        parts.append(f"Optimized for {platform} with commercial photography quality.")
    else:
        parts.append("Optimized for e-commerce and marketing use.")

    parts.append(_PRODUCT_CLOSING)
    return parts
