"""Tests for adforge.api.strategy — consultation prompt text."""

from adforge.api.strategy import build_strategy_prompt


class TestBuildStrategyPrompt:
    """Test build_strategy_prompt()."""

    def test_required_details(self):
        text = build_strategy_prompt("Neighbourhood bakery", "catering orders", "office workers")
        assert text.startswith("Create a comprehensive visual content strategy for:")
        assert "- Type: Neighbourhood bakery" in text
        assert "- Goals: catering orders" in text
        assert "- Target Audience: office workers" in text

    def test_optional_details_omitted(self):
        text = build_strategy_prompt("bakery", "footfall", "families")
        assert "Budget Category" not in text
        assert "Timeline" not in text

    def test_optional_details_included(self):
        text = build_strategy_prompt(
            "bakery", "footfall", "families", budget="startup", timeline="before the summer"
        )
        assert "- Budget Category: startup" in text
        assert "- Timeline: before the summer" in text

    def test_deliverables_listed(self):
        text = build_strategy_prompt("bakery", "footfall", "families")
        for number in range(1, 8):
            assert f"\n{number}. **" in text
        assert text.endswith("expected business impact and ROI estimates.")

    def test_details_inserted_verbatim(self):
        text = build_strategy_prompt("{braces} & <tags>", "a, b, c", "everyone")
        assert "- Type: {braces} & <tags>" in text
