"""Tests for trade-specific bullet rewriting."""

import pytest

from resume_studio.services.trades_enhancer import TradesEnhancer, enhance_trade_text, resolve_trade
from resume_studio.utils.errors import InputError


@pytest.fixture
def enhancer() -> TradesEnhancer:
    return TradesEnhancer()


class TestResolveTrade:
    @pytest.mark.parametrize(
        ("trade", "expected"),
        [("Plumber", "plumbing"), ("hvac", "hvac"), ("electrician", "electrical"),
         ("underwater welding", "construction"), (None, "construction")],
    )
    def test_resolve(self, trade, expected):
        assert resolve_trade(trade) == expected


class TestEnhanceTradeDescription:
    """Verb swaps, client wording and metric suggestions."""

    def test_trade_verb_and_metrics(self, enhancer):
        result = enhancer.enhance_trade_description("I fixed leaking pipes every day", "plumbing")

        assert result.enhanced == "I repaired leaking pipes every day."
        assert result.improvements == ['Changed "fixed" to "repaired"']
        assert result.metrics == [
            "completed 8-12 service calls daily",
            "maintained 95%+ customer satisfaction rating",
            "specialized in residential and commercial plumbing systems",
        ]

    def test_hvac_verb(self, enhancer):
        result = enhancer.enhance_trade_description("Fixed the furnace", "hvac")
        assert result.enhanced == "Serviced the furnace."
        assert result.metrics == []

    def test_tone_cleanup(self, enhancer):
        result = enhancer.enhance_trade_description("did a lot of stuff on site", "construction")
        assert result.enhanced == "Constructed numerous equipment on site."

    def test_customers_become_clients(self, enhancer):
        result = enhancer.enhance_trade_description("helped customers fix leaks", "plumbing")
        assert result.enhanced == "Provided professional service to clients fix leaks."
        assert "Added professional service context" in result.improvements

    def test_client_rewrite_is_not_repeated(self, enhancer):
        first = enhancer.enhance_trade_description("helped customers fix leaks", "plumbing").enhanced
        second = enhancer.enhance_trade_description(first, "plumbing").enhanced
        third = enhancer.enhance_trade_description(second, "plumbing").enhanced

        assert second == first
        assert third.count("Provided professional service to clients") == 1

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("helped a customer with a leak", "Provided professional service to a client with a leak."),
            ("helped the customers on site", "Provided professional service to the clients on site."),
        ],
    )
    def test_helped_customer_with_article(self, enhancer, text, expected):
        result = enhancer.enhance_trade_description(text, "plumbing")
        assert result.enhanced == expected
        assert enhancer.enhance_trade_description(result.enhanced, "plumbing").enhanced == expected

    def test_customers_without_helped(self, enhancer):
        result = enhancer.enhance_trade_description("Installed water heaters for customers", "plumbing")
        assert result.enhanced == "Installed water heaters for clients."
        again = enhancer.enhance_trade_description(result.enhanced, "plumbing")
        assert again.enhanced == result.enhanced

    def test_unknown_trade_matches_construction(self, enhancer):
        text = "Worked on framing and made repairs for customers"
        unknown = enhancer.enhance_trade_description(text, "underwater_welding")
        construction = enhancer.enhance_trade_description(text, "construction")

        assert unknown.enhanced == construction.enhanced
        assert unknown.improvements == construction.improvements
        assert unknown.metrics == construction.metrics

    def test_blank_text_raises(self, enhancer):
        with pytest.raises(InputError):
            enhancer.enhance_trade_description("  ", "plumbing")


class TestTradeSuggestions:
    def test_metric_options_are_filled(self, enhancer):
        assert enhancer.generate_metrics_options("hvac") == [
            "improved efficiency by 15-25%",
            "reduced energy costs by $300-800",
            "maintained 50+ units",
        ]
        assert enhancer.generate_metrics_options("electrical") == [
            "completed 5-8 installations",
            "passed 98% of inspections",
            "reduced downtime by 4-6 hours",
        ]

    def test_metric_already_in_text_is_skipped(self, enhancer):
        options = enhancer.generate_metrics_options("hvac", "Maintained 50+ units across two sites")
        assert "maintained 50+ units" not in options
        assert len(options) == 2

    def test_skills_and_certifications(self, enhancer):
        suggestions = enhancer.get_trade_specific_suggestions("electrician")
        assert "licensed electrician" in suggestions["certifications"]
        assert "circuit analysis" in suggestions["skills"]

    def test_enhance_trade_text(self, enhancer):
        response = enhance_trade_text("I fixed leaking pipes every day", "plumber", enhancer)

        assert response.success is True
        assert response.original == "I fixed leaking pipes every day"
        assert response.enhanced == "I repaired leaking pipes every day."
        assert response.suggestions.metrics[0] == "completed 8-12 service calls daily"
        assert "reduced service calls by 95%" in response.suggestions.metrics
        assert "licensed plumber" in response.suggestions.certifications
