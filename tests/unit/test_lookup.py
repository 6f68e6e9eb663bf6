"""Tests for adforge.core.lookup — categorical clause tables."""

import logging

from adforge.core import lookup
from adforge.core.schemas import AspectRatio, MarketingLighting, PortraitBackground


class TestTableCompleteness:
    """Every enumeration value has a clause."""

    def test_no_missing_entries(self):
        assert lookup.missing_entries() == []

    def test_clauses_are_non_empty(self):
        for name, (_, table) in lookup.TABLES.items():
            for value, clause in table.items():
                assert clause.strip(), f"{name}[{value}] is empty"

    def test_missing_entries_detects_gap(self, monkeypatch):
        trimmed = dict(lookup.SHOT_TYPES)
        del trimmed[AspectRatio.STANDARD]
        monkeypatch.setitem(lookup.TABLES, "SHOT_TYPES", (AspectRatio, trimmed))
        assert lookup.missing_entries() == [("SHOT_TYPES", "4:3")]


class TestDescribe:
    """Test clause resolution with fallback."""

    def test_returns_table_entry(self):
        clause = lookup.describe(lookup.MARKETING_LIGHTING, MarketingLighting.GOLDEN_HOUR, "x")
        assert clause == "warm golden hour sunlight streaming naturally"

    def test_fallback_on_missing_entry(self, caplog):
        with caplog.at_level(logging.WARNING, logger="adforge.core.lookup"):
            clause = lookup.describe({}, AspectRatio.SQUARE, "a balanced frame")
        assert clause == "a balanced frame"
        assert "AspectRatio.SQUARE" in caplog.text

    def test_square_shot_type(self):
        assert lookup.SHOT_TYPES[AspectRatio.SQUARE] == "square composition"

    def test_industry_background_is_template(self):
        template = lookup.PORTRAIT_BACKGROUNDS[PortraitBackground.INDUSTRY_RELEVANT]
        assert "{profession}" in template
        assert template.format(profession="dentistry").startswith("dentistry workplace")
