"""Tests for lolalytics page text extraction."""
import pytest
from counterpick.exceptions import MalformedPayloadError
from counterpick.services.extraction import (
    DEFAULT_RECIPE,
    ExtractionRecipe,
    extract_game_count,
    extract_record,
    extract_summary,
    parse_document,
    parse_metrics,
)

SUMMARY = (
    "Aatrox wins against Darius 62.34% of the time which is 4.10% different "
    "than Aatrox's average. After normalising both champions win rates Aatrox "
    "wins -1.20% different than expected."
)


def make_page(summary: str = SUMMARY, games: str | None = "12,345") -> str:
    games_block = ""
    if games is not None:
        games_block = (
            '<div class="w-44"><div>'
            "<div>Win Rate</div>"
            f"<div><div>{games}</div><div>Games</div></div>"
            "</div></div>"
        )
    return (
        "<html><head><script>document.write('boom')</script></head><body>"
        f'<div class="lolx-links"><span>{summary}</span><span>Other link</span></div>'
        f"{games_block}"
        "</body></html>"
    )


class TestParseMetrics:
    def test_parses_three_signals(self):
        metrics = parse_metrics(
            "62.34% of the time which is 4.10% different ... "
            "After normalising ... -1.20% different"
        )
        assert metrics.win_rate == pytest.approx(62.34)
        assert metrics.vs_average_diff == pytest.approx(4.10)
        assert metrics.normalized_diff == pytest.approx(-1.20)

    def test_parses_full_sentence(self):
        metrics = parse_metrics(SUMMARY)
        assert metrics.win_rate == pytest.approx(62.34)
        assert metrics.normalized_diff == pytest.approx(-1.20)

    def test_case_insensitive(self):
        metrics = parse_metrics("50% OF THE TIME WHICH IS -2.5% DIFFERENT, after NORMALISING 0.3% Different")
        assert metrics.win_rate == 50.0
        assert metrics.vs_average_diff == -2.5
        assert metrics.normalized_diff == pytest.approx(0.3)

    def test_whitespace_is_collapsed_before_matching(self):
        metrics = parse_metrics("48.1% of the\n  time which is\t-1.9% different.\nAfter normalising\n 2.0% different")
        assert metrics.win_rate == pytest.approx(48.1)
        assert metrics.normalized_diff == pytest.approx(2.0)

    @pytest.mark.parametrize("summary", ["", None, "No data for this matchup", "55% of the time"])
    def test_non_match_yields_no_metrics(self, summary):
        metrics = parse_metrics(summary)
        assert metrics.win_rate is None
        assert metrics.vs_average_diff is None
        assert metrics.normalized_diff is None
        assert not metrics.has_any

    def test_values_are_not_clamped(self):
        metrics = parse_metrics("120% of the time which is 70% different After normalising -150% different")
        assert metrics.win_rate == 120.0
        assert metrics.normalized_diff == -150.0


class TestDocumentLookups:
    def test_extract_summary(self):
        document = parse_document(make_page(summary="  Aatrox   wins\n against Darius  "))
        assert extract_summary(document) == "Aatrox wins against Darius"

    def test_extract_summary_missing_node(self):
        document = parse_document("<html><body><p>Rate limited</p></body></html>")
        assert extract_summary(document) == ""

    def test_extract_game_count_strips_commas(self):
        document = parse_document(make_page(games="12,345"))
        assert extract_game_count(document) == 12345

    def test_extract_game_count_strips_whitespace(self):
        document = parse_document(make_page(games=" 1 024 "))
        assert extract_game_count(document) == 1024

    @pytest.mark.parametrize("games", ["N/A", "", "inf", "nan"])
    def test_extract_game_count_not_a_number(self, games):
        document = parse_document(make_page(games=games))
        assert extract_game_count(document) is None

    def test_extract_game_count_missing_node(self):
        document = parse_document(make_page(games=None))
        assert extract_game_count(document) is None

    def test_custom_recipe(self):
        recipe = ExtractionRecipe(summary_selector="#summary", games_selector="#games")
        document = parse_document('<p id="summary">Hello</p><b id="games">7</b>')
        assert extract_summary(document, recipe) == "Hello"
        assert extract_game_count(document, recipe) == 7


class TestExtractRecord:
    def test_builds_record(self):
        record = extract_record(make_page())
        assert record.summary == SUMMARY
        assert record.games == 12345

    def test_script_content_is_not_part_of_summary(self):
        record = extract_record(make_page())
        assert "boom" not in record.summary

    def test_unmatched_summary_is_still_a_record(self):
        record = extract_record(make_page(summary="Not enough data", games=None))
        assert record.summary == "Not enough data"
        assert record.games is None
        assert not parse_metrics(record.summary).has_any

    def test_missing_summary_node_is_malformed(self):
        with pytest.raises(MalformedPayloadError):
            extract_record("<html><body>Too many requests</body></html>")

    def test_default_recipe_selectors(self):
        assert DEFAULT_RECIPE.summary_selector == ".lolx-links > span:nth-child(1)"
