"""
Unit tests for bill display helpers.

Tests cover:
- format_date() - ISO date to "D Mon. YY" in the fixed French locale
- format_status() - raw status code to French label
"""
import pytest

from src.bills.exceptions import MalformedRecordError
from src.bills.formatting import format_date, format_status


class TestFormatDate:
    """Tests for format_date() function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2021-04-01", "1 Avr. 21"),
            ("2021-03-01", "1 Mar. 21"),
            ("2004-04-04", "4 Avr. 04"),
            ("2025-03-19", "19 Mar. 25"),
            ("2022-01-31", "31 Jan. 22"),
            ("2022-02-10", "10 Fév. 22"),
            ("2022-08-15", "15 Aoû. 22"),
            ("2022-12-25", "25 Déc. 22"),
            # June and July share the same three-letter label
            ("2022-06-01", "1 Jui. 22"),
            ("2022-07-01", "1 Jui. 22"),
            # Full ISO datetimes keep their calendar date
            ("2021-04-01T10:30:00", "1 Avr. 21"),
            (" 2021-04-01 ", "1 Avr. 21"),
        ],
    )
    @pytest.mark.unit
    def test_format_date(self, value, expected):
        assert format_date(value) == expected

    @pytest.mark.parametrize("value", ["invalid-date", "", "2021-13-01", "2021-02-30", "01/04/2021"])
    @pytest.mark.unit
    def test_format_date_rejects_unparsable_strings(self, value):
        with pytest.raises(MalformedRecordError) as exc_info:
            format_date(value)
        assert exc_info.value.record == value

    @pytest.mark.parametrize("value", [None, 20210401, ["2021-04-01"]])
    @pytest.mark.unit
    def test_format_date_rejects_non_strings(self, value):
        with pytest.raises(MalformedRecordError):
            format_date(value)


class TestFormatStatus:
    """Tests for format_status() function."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("pending", "En attente"),
            ("accepted", "Accepté"),
            ("refused", "Refusé"),
            # Unknown codes pass through
            ("archived", "archived"),
            ("", ""),
            (None, None),
            (3, 3),
        ],
    )
    @pytest.mark.unit
    def test_format_status(self, status, expected):
        assert format_status(status) == expected
