from datetime import date

import pytest

from pubtimeline.services.dates import MissingDateError, day_distance, month_year, parse_full


def test_month_year_day_month_year() -> None:
    assert month_year("15 March 2021") == ("March", "2021")


def test_month_year_month_year() -> None:
    assert month_year("March 2021") == ("March", "2021")


@pytest.mark.parametrize("raw", ["", "2021", "Tuesday 15 March 2021", None])
def test_month_year_other_token_counts_are_empty(raw) -> None:
    assert month_year(raw) == ("", "")


def test_month_year_ignores_validity() -> None:
    assert month_year("99 Smarch 20x1") == ("Smarch", "20x1")


def test_parse_full_day_month_year() -> None:
    assert parse_full("01 January 2020") == date(2020, 1, 1)


def test_parse_full_month_only_resolves_to_first_day() -> None:
    assert parse_full("March 2020") == date(2020, 3, 1)


@pytest.mark.parametrize("raw", ["", "   ", None, "pending", "2020", "15 March", "31 February 2020"])
def test_parse_full_returns_none_when_unresolvable(raw) -> None:
    assert parse_full(raw) is None


def test_day_distance_counts_days() -> None:
    assert day_distance(date(2021, 1, 1), date(2021, 1, 31)) == 30


def test_day_distance_collapses_negative_spans() -> None:
    assert day_distance(date(2021, 3, 15), date(2021, 3, 1)) == 0


def test_day_distance_rejects_missing_dates() -> None:
    with pytest.raises(MissingDateError):
        day_distance(None, date(2021, 3, 1))
