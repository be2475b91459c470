# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the compact date codec."""

import datetime

import pytest

from linkdb.parser.dates import parse_compact_date

# ###############
# Valid Dates
# ###############


def test_parses_compact_date() -> None:
    assert parse_compact_date("20230115") == datetime.date(2023, 1, 15)


def test_valid_leap_day() -> None:
    assert parse_compact_date("20240229") == datetime.date(2024, 2, 29)


def test_surrounding_whitespace_is_ignored() -> None:
    assert parse_compact_date("  20231231\t") == datetime.date(2023, 12, 31)


def test_earliest_date_is_distinct_from_invalid() -> None:
    """Year 1 is a real date, not the invalid result."""
    value = parse_compact_date("00010101")
    assert value is not None
    assert value == datetime.date(1, 1, 1)


# ###############
# Invalid Dates
# ###############


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "   ",
        "2023011",
        "202301150",
        "2023-01-15",
        "20230229",
        "20231301",
        "20230132",
        "20230230",
        "00000101",
        "2023ab15",
        "abcdefgh",
        "2023-101",
    ],
)
def test_invalid_inputs_return_none(text: str | None) -> None:
    assert parse_compact_date(text) is None


def test_non_digit_field_counts_as_zero() -> None:
    """A garbled month becomes 0 and the calendar rejects it."""
    assert parse_compact_date("2023xx15") is None



def test_space_inside_field_counts_as_zero() -> None:
    """Fields must be all digits; " 1" is not read as month 1."""
    assert parse_compact_date("2023 115") is None
