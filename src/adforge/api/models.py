"""Pydantic request and response models for the Adforge API.

Generation requests themselves are validated by the per-domain schemas in
:mod:`adforge.core.schemas`; the models here cover the envelope returned by
the generation endpoint and the endpoints that are not tied to a domain.

Models
------
GenerationEnvelope
    Response body for ``POST /api/generate/{domain}``, on success and on
    failure alike.
CompiledPromptResponse
    Response body for ``POST /api/prompt/compile/{domain}``.
StrategyRequest
    Payload for ``POST /api/strategy`` — the business details a visual
    content strategy is written for.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from adforge.core.outcome import GenerationOutcome


class GenerationEnvelope(BaseModel):
    """Response body for the ``POST /api/generate/{domain}`` endpoint.

    Attributes:
        success: ``True`` when an image was generated and saved.
        is_error: Inverse of ``success``, for callers that check errors.
        domain: Content domain of the request, or ``None`` if unknown.
        message: Multi-line status text (saved path and business framing on
            success, the error summary on failure).
        path: Absolute path of the saved PNG on success.
        error_kind: Error category on failure.
    """

    success: bool = Field(..., description="Whether an image was generated and saved.")
    is_error: bool = Field(..., description="True when the request failed.")
    domain: str | None = Field(default=None, description="Content domain of the request.")
    message: str = Field(..., description="Human-readable status text.")
    path: str | None = Field(default=None, description="Saved image path on success.")
    error_kind: str | None = Field(default=None, description="Error category on failure.")

    @classmethod
    def from_outcome(cls, outcome: GenerationOutcome) -> GenerationEnvelope:
        return cls(
            success=outcome.success,
            is_error=outcome.is_error,
            domain=outcome.domain.value if outcome.domain else None,
            message=outcome.text,
            path=str(outcome.path) if outcome.path else None,
            error_kind=outcome.error_kind,
        )


class CompiledPromptResponse(BaseModel):
    """Response body for the ``POST /api/prompt/compile/{domain}`` endpoint.

    Attributes:
        domain: Content domain the request was compiled for.
        compiled_prompt: The exact prompt that generation would send.
        request: The validated request with every default filled in.
    """

    domain: str
    compiled_prompt: str
    request: dict


class StrategyRequest(BaseModel):
    """Request body for the ``POST /api/strategy`` endpoint.

    Keys are accepted in camelCase (``businessType``) or snake_case.

    Attributes:
        business_type: Kind of business (e.g. "restaurant", "tech startup").
        goals: Primary business goals, comma-separated.
        target_audience: Description of the target audience.
        budget: Optional budget category.
        timeline: Optional project timeline or urgency.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_type: str = Field(
        ...,
        min_length=1,
        description="Type of business (e.g. restaurant, tech startup, retail).",
    )
    goals: str = Field(
        ...,
        min_length=1,
        description="Primary business goals (comma-separated).",
    )
    target_audience: str = Field(
        ...,
        min_length=1,
        description="Target audience description.",
    )
    budget: Literal["startup", "small-business", "enterprise"] | None = Field(
        default=None,
        description="Budget category.",
    )
    timeline: str | None = Field(
        default=None,
        description="Project timeline or urgency.",
    )
