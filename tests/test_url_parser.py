"""Tests for the chart URL parser."""

import pytest

from standfinder.core.errors import InvalidFormatError, StandFinderError
from standfinder.core.models import RawScoreVector
from standfinder.core.url_parser import ChartUrl, parse, parse_chart_url
from tests.helpers import EXAMPLE_SCORES, EXAMPLE_URL, build_url

SCORES = (0, 7, 42, 100, 999, 5, 60, 300, 1, 88)


class TestParseAccepts:
    """URLs the grammar accepts."""

    def test_example_url(self):
        """The documented example parses to its ten scores."""
        assert parse(EXAMPLE_URL) == EXAMPLE_SCORES

    def test_returns_raw_score_vector(self):
        result = parse(EXAMPLE_URL)
        assert isinstance(result, RawScoreVector)
        assert len(result) == 10

    def test_idrlabs_host(self):
        url = "https://charts.idrlabs.com/graphic/autism-spectrum?&p=1,2,3,4,5,6,7,8,9,10"
        assert parse(url) == (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)

    @pytest.mark.parametrize("scheme", ["https://", "http://", None])
    @pytest.mark.parametrize("flag", [None, 0, 1, 9])
    @pytest.mark.parametrize(
        "locale,locale_first",
        [(None, False), ("EN", False), ("EN", True), ("DE", True)],
    )
    def test_round_trip_all_placements(self, scheme, flag, locale, locale_first):
        """Every legal placement of scheme, flag and locale yields the same scores."""
        url = build_url(SCORES, scheme=scheme, flag=flag, locale=locale, locale_first=locale_first)
        assert parse(url) == SCORES

    def test_extreme_values(self):
        assert parse(build_url([0] * 10)) == (0,) * 10
        assert parse(build_url([999] * 10)) == (999,) * 10

    def test_leading_zeros_are_digits(self):
        """Scores like "007" are three digits and read as 7."""
        assert parse(build_url(["007"] + [1] * 9)) == (7,) + (1,) * 9

    def test_surrounding_whitespace_ignored(self):
        assert parse(f"  {EXAMPLE_URL}\n") == EXAMPLE_SCORES


class TestParseChartUrl:
    """parse_chart_url exposes flag and locale as well."""

    def test_flag_and_locale(self):
        result = parse_chart_url(EXAMPLE_URL)
        assert result == ChartUrl(scores=RawScoreVector(EXAMPLE_SCORES), flag=1, locale="EN")

    def test_locale_before_scores(self):
        result = parse_chart_url(build_url(SCORES, locale="FR", locale_first=True))
        assert result.locale == "FR"
        assert result.flag is None

    def test_no_optional_components(self):
        result = parse_chart_url(build_url(SCORES))
        assert result.flag is None
        assert result.locale is None

    def test_locale_on_both_sides(self):
        """l= may appear before and after p=; the later one is reported."""
        url = build_url(SCORES, locale="EN", locale_first=True) + "&l=FR"
        result = parse_chart_url(url)
        assert result.scores == SCORES
        assert result.locale == "FR"

    def test_locale_on_both_sides_with_flag(self):
        url = build_url(SCORES, flag=3, locale="EN", locale_first=True) + "&l=EN"
        assert parse(url) == SCORES

    def test_third_locale_rejected(self):
        url = build_url(SCORES, locale="EN", locale_first=True) + "&l=FR&l=DE"
        with pytest.raises(InvalidFormatError):
            parse(url)


class TestParseRejects:
    """Anything off-grammar fails as a whole."""

    @pytest.mark.parametrize("count", [0, 1, 9, 11])
    def test_wrong_score_count(self, count):
        with pytest.raises(InvalidFormatError):
            parse(build_url([1] * count))

    def test_four_digit_score(self):
        with pytest.raises(InvalidFormatError):
            parse(build_url([1000] + [1] * 9))

    @pytest.mark.parametrize("bad", ["a", "-1", "1.5", "", " 1", "+1"])
    def test_non_digit_score(self, bad):
        with pytest.raises(InvalidFormatError):
            parse(build_url([bad] + [1] * 9))

    def test_non_ascii_digits(self):
        """Unicode digits are not decimal digits for the grammar."""
        with pytest.raises(InvalidFormatError):
            parse(build_url(["١"] + [1] * 9))

    def test_wrong_separator(self):
        url = build_url(SCORES).replace(",", ";")
        with pytest.raises(InvalidFormatError):
            parse(url)

    def test_trailing_comma(self):
        with pytest.raises(InvalidFormatError):
            parse(build_url(SCORES) + ",")

    @pytest.mark.parametrize(
        "url",
        [
            "https://charts.idrlabs.com/graphic/?p=1,2,3,4,5,6,7,8,9,10",
            "https://charts.idrlabs.com/autism-spectrum?p=1,2,3,4,5,6,7,8,9,10",
            "https://idrlabs.com/graphic/autism-spectrum?p=1,2,3,4,5,6,7,8,9,10",
            "https://evil.com/charts.idrlabs.com/graphic/autism-spectrum?p=1,2,3,4,5,6,7,8,9,10",
            "ftp://charts.idrlabs.com/graphic/autism-spectrum?p=1,2,3,4,5,6,7,8,9,10",
            "charts.idrlabs.com/graphic/autism-spectrum&p=1,2,3,4,5,6,7,8,9,10",
        ],
    )
    def test_missing_or_wrong_prefix(self, url):
        with pytest.raises(InvalidFormatError):
            parse(url)

    def test_two_digit_flag(self):
        with pytest.raises(InvalidFormatError):
            parse(build_url(SCORES, flag=12))

    @pytest.mark.parametrize("locale", ["en", "E", "ENG", "E1"])
    def test_bad_locale(self, locale):
        with pytest.raises(InvalidFormatError):
            parse(build_url(SCORES, locale=locale))

    def test_extra_parameter(self):
        with pytest.raises(InvalidFormatError):
            parse(build_url(SCORES) + "&x=1")

    def test_empty_string(self):
        with pytest.raises(InvalidFormatError):
            parse("")

    def test_non_string(self):
        with pytest.raises(InvalidFormatError):
            parse(None)  # type: ignore[arg-type]


class TestInvalidFormatError:
    """Error carries a user message and the offending URL."""

    def test_error_details(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse("not a url")
        err = exc_info.value
        assert err.user_message == "Invalid URL"
        assert err.context["url"] == "not a url"

    def test_is_value_error_and_base_error(self):
        with pytest.raises(ValueError):
            parse("nope")
        with pytest.raises(StandFinderError):
            parse("nope")

    def test_long_url_truncated_in_context(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse("x" * 1000)
        assert len(exc_info.value.context["url"]) == 200
