from datetime import UTC, datetime, timedelta, timezone

import pytest

from payment_queries.domain.exceptions import InvalidYearMonthError
from payment_queries.domain.value_objects import YearMonth


class TestYearMonthCreation:
    def test_accepts_valid_year_and_month(self) -> None:
        year_month = YearMonth(2024, 3)

        assert year_month.year == 2024
        assert year_month.month == 3

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_rejects_month_out_of_range(self, month: int) -> None:
        with pytest.raises(InvalidYearMonthError, match="Month"):
            YearMonth(2024, month)

    @pytest.mark.parametrize("year", [0, 10000])
    def test_rejects_year_out_of_range(self, year: int) -> None:
        with pytest.raises(InvalidYearMonthError, match="Year"):
            YearMonth(year, 1)


class TestYearMonthFromDatetime:
    def test_uses_datetime_year_and_month(self) -> None:
        assert YearMonth.from_datetime(datetime(2024, 3, 10, tzinfo=UTC)) == YearMonth(2024, 3)

    def test_does_not_convert_to_utc(self) -> None:
        # 2024-03-31 23:30 at UTC-5 is already April in UTC
        minus_five = timezone(timedelta(hours=-5))
        late_march = datetime(2024, 3, 31, 23, 30, tzinfo=minus_five)

        assert YearMonth.from_datetime(late_march) == YearMonth(2024, 3)


class TestYearMonthParse:
    def test_parses_canonical_form(self) -> None:
        assert YearMonth.parse("2024-03") == YearMonth(2024, 3)

    def test_strips_surrounding_whitespace(self) -> None:
        assert YearMonth.parse("  2024-12 ") == YearMonth(2024, 12)

    @pytest.mark.parametrize("text", ["2024-3", "2024/03", "", "march", "2024-13"])
    def test_rejects_malformed_text(self, text: str) -> None:
        with pytest.raises(InvalidYearMonthError):
            YearMonth.parse(text)

    def test_str_round_trips_through_parse(self) -> None:
        assert str(YearMonth(987, 7)) == "0987-07"
        assert YearMonth.parse(str(YearMonth(2024, 3))) == YearMonth(2024, 3)


class TestYearMonthContains:
    def test_matches_any_day_and_time_in_month(self) -> None:
        march = YearMonth(2024, 3)

        assert march.contains(datetime(2024, 3, 1, 0, 0, tzinfo=UTC))
        assert march.contains(datetime(2024, 3, 31, 23, 59, 59, tzinfo=UTC))

    def test_rejects_same_month_in_other_year(self) -> None:
        assert not YearMonth(2024, 3).contains(datetime(2023, 3, 10, tzinfo=UTC))

    def test_rejects_neighbouring_months(self) -> None:
        march = YearMonth(2024, 3)

        assert not march.contains(datetime(2024, 2, 29, 23, 59, tzinfo=UTC))
        assert not march.contains(datetime(2024, 4, 1, 0, 0, tzinfo=UTC))


class TestYearMonthOrdering:
    def test_orders_by_calendar(self) -> None:
        months = [YearMonth(2025, 1), YearMonth(2024, 12), YearMonth(2024, 2)]

        assert sorted(months) == [YearMonth(2024, 2), YearMonth(2024, 12), YearMonth(2025, 1)]
