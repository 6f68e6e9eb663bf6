"""Tests for adforge.api.models — Pydantic request/response models.

Tests cover:
- GenerationEnvelope built from success and failure outcomes.
- StrategyRequest required fields, aliases and the budget choices.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from adforge.api.models import GenerationEnvelope, StrategyRequest
from adforge.core.outcome import GenerationOutcome
from adforge.core.schemas import Domain


class TestGenerationEnvelope:
    """Test GenerationEnvelope.from_outcome()."""

    def test_success_envelope(self):
        outcome = GenerationOutcome(
            success=True,
            domain=Domain.LOGO,
            text="✅ Business logo created successfully!",
            path=Path("/tmp/logo-acme-1.png"),
        )
        envelope = GenerationEnvelope.from_outcome(outcome)
        assert envelope.success is True
        assert envelope.is_error is False
        assert envelope.domain == "logo"
        assert envelope.path == "/tmp/logo-acme-1.png"
        assert envelope.error_kind is None

    def test_failure_envelope(self):
        outcome = GenerationOutcome(
            success=False,
            domain=None,
            text="❌ Error generating image: Invalid request: domain: unknown",
            error_kind="validation",
        )
        envelope = GenerationEnvelope.from_outcome(outcome)
        assert envelope.is_error is True
        assert envelope.domain is None
        assert envelope.path is None
        assert envelope.error_kind == "validation"
        assert envelope.message.startswith("❌")


class TestStrategyRequest:
    """Test StrategyRequest Pydantic model."""

    def test_camel_case_keys(self):
        req = StrategyRequest.model_validate(
            {"businessType": "bakery", "goals": "footfall", "targetAudience": "families"}
        )
        assert req.business_type == "bakery"
        assert req.target_audience == "families"
        assert req.budget is None
        assert req.timeline is None

    def test_snake_case_keys(self):
        req = StrategyRequest(business_type="bakery", goals="footfall", target_audience="families")
        assert req.goals == "footfall"

    def test_missing_required_field_raises(self):
        with pytest.raises(ValidationError):
            StrategyRequest.model_validate({"businessType": "bakery", "goals": "footfall"})

    def test_empty_required_field_raises(self):
        with pytest.raises(ValidationError):
            StrategyRequest(business_type="", goals="footfall", target_audience="families")

    @pytest.mark.parametrize("budget", ["startup", "small-business", "enterprise"])
    def test_budget_choices(self, budget):
        req = StrategyRequest(
            business_type="bakery", goals="footfall", target_audience="families", budget=budget
        )
        assert req.budget == budget

    def test_unknown_budget_rejected(self):
        with pytest.raises(ValidationError):
            StrategyRequest(
                business_type="bakery",
                goals="footfall",
                target_audience="families",
                budget="unlimited",
            )
