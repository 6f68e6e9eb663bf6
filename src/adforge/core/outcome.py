"""Success and failure outcomes returned to the transport layer."""

from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from adforge.core.artifact_store import ImageArtifact
from adforge.core.errors import AdforgeError
from adforge.core.schemas import (
    Domain,
    DomainRequest,
    FoodRequest,
    LogoRequest,
    MarketingRequest,
    MockupRequest,
    PortraitRequest,
    ProductRequest,
)

UNEXPECTED_ERROR_KIND = "unexpected"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while generating the image"

# Verb phrase used in failure messages, e.g. "❌ Error creating logo: ...".
FAILURE_ACTIONS = {
    Domain.MARKETING: "generating marketing image",
    Domain.LOGO: "creating logo",
    Domain.MOCKUP: "creating product mockup",
    Domain.FOOD: "generating food photography",
    Domain.PORTRAIT: "generating business portrait",
    Domain.PRODUCT: "generating commercial product photo",
}


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of one pipeline run.

    Attributes:
        success: Whether an image was generated and saved
        domain: Content domain of the request (None if it was unknown)
        text: Human-readable status block for display
        path: Saved image path on success
        error_kind: Error category on failure (``validation``, ``invocation``,
            ``size_limit``, ``persistence``, ``configuration``, ``unexpected``)
    """

    success: bool
    domain: Domain | None
    text: str
    path: Path | None = None
    error_kind: str | None = None

    @property
    def is_error(self) -> bool:
        return not self.success


def synthesize_success(request: DomainRequest, artifact: ImageArtifact) -> GenerationOutcome:
    """Build the success outcome for a saved artifact."""
    lines = _success_lines(request, artifact.path)
    return GenerationOutcome(
        success=True,
        domain=request.domain,
        text="\n".join(lines),
        path=artifact.path,
    )


def synthesize_failure(
    domain: Domain | None,
    error: AdforgeError | None = None,
) -> GenerationOutcome:
    """Build the failure outcome for an error.

    Args:
        domain: Content domain, when it was resolved
        error: The pipeline error; None means an unexpected failure whose
            details must not reach the caller
    """
    if error is None:
        kind, message = UNEXPECTED_ERROR_KIND, UNEXPECTED_ERROR_MESSAGE
    else:
        kind, message = error.kind, error.message
    action = FAILURE_ACTIONS.get(domain, "generating image")
    return GenerationOutcome(
        success=False,
        domain=domain,
        text=f"❌ Error {action}: {message}",
        error_kind=kind,
    )


def _success_lines(request: DomainRequest, path: Path) -> list[str]:
    saved = f"📁 Saved to: {path}"
    match request:
        case MarketingRequest():
            purpose = (
                request.business_context.purpose.value
                if request.business_context is not None
                else "general marketing"
            )
            return [
                "✅ Marketing image generated successfully!",
                saved,
                f"🎯 Business Impact: {request.style.mood.value.capitalize()} visuals can "
                "increase engagement by 40%",
                f"📱 Optimized for: {purpose}",
            ]
        case LogoRequest():
            industry = request.style.industry.value if request.style.industry else "your industry"
            return [
                "✅ Business logo created successfully!",
                saved,
                "🎯 Business Impact: Professional branding increases recognition by 80%",
                "📱 Applications: Business cards, website, social media, signage",
                f"🎨 Style: {request.style.type.value} design for {industry}",
            ]
        case MockupRequest():
            return [
                "✅ Product mockup created successfully!",
                saved,
                "🎯 Business Impact: Professional product imagery increases conversion rates by 40%",
                "📱 Perfect for: E-commerce listings, marketing materials, presentations",
                f"🎨 Style: {request.setting.environment.value} {request.setting.angle.value} view",
            ]
        case FoodRequest():
            purpose = request.business.purpose.value if request.business else "menu and marketing"
            return [
                "🍽️ Professional food photography generated!",
                saved,
                f"📸 Style: {request.photography.style.value} with "
                f"{request.photography.lighting.value} lighting",
                "🎯 Business Impact: Professional food photos increase orders by 30%",
                f"📱 Optimized for: {purpose}",
                f"🎨 Technical: {request.technical.lens.value} with "
                f"{request.technical.aperture.value}",
            ]
        case PortraitRequest():
            purpose = (
                request.business.purpose.value
                if request.business
                else "LinkedIn and business marketing"
            )
            return [
                "👔 Professional business portrait generated!",
                saved,
                f"📸 Style: {request.photography.style.value} with "
                f"{request.photography.lighting.value} lighting",
                "🎯 Business Impact: Professional headshots increase trust and conversion by 35%",
                f"📱 Perfect for: {purpose}",
                f"🎨 Technical: {request.technical.lens.value} at "
                f"{request.technical.aperture.value}",
            ]
        case ProductRequest():
            business = request.business
            return [
                "📦 Commercial product photography generated!",
                saved,
                f"📸 Style: {request.photography.style.value} with "
                f"{request.photography.lighting.value} lighting",
                "🎯 Business Impact: Professional product photos increase conversions by 40%",
                f"📱 Optimized for: {business.platform.value if business else 'e-commerce and marketing'}",
                f"🎨 Technical: {request.technical.lens.value} at "
                f"{request.technical.aperture.value}",
                f"💡 Strategy: "
                f"{business.conversion.value if business else 'professional product showcase'}",
            ]
        case _:
            assert_never(request)
