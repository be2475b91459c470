# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compact ``YYYYMMDD`` date codec used by the ``.added`` and ``.published`` commands."""

import datetime

# ###############
# Public Interface
# ###############

COMPACT_DATE_LENGTH = 8


def parse_compact_date(text: str | None) -> datetime.date | None:
    """Parse a compact ``YYYYMMDD`` date string.

    Surrounding whitespace is ignored. Each of the year, month and day fields
    is read as a non-negative integer; a field that is not made of digits
    counts as 0, which then fails calendar construction.

    Args:
        text: The raw command argument, possibly ``None``.

    Returns:
        The calendar date, or ``None`` if the text is empty, does not have
        exactly eight characters, or does not name an existing calendar day.
    """
    if text is None or not text.strip():
        return None

    text = text.strip()
    if len(text) != COMPACT_DATE_LENGTH:
        return None

    year = _to_int(text[0:4])
    month = _to_int(text[4:6])
    day = _to_int(text[6:8])

    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


# ################
# Implementation
# ################


def _to_int(text: str, default: int = 0) -> int:
    if text.isascii() and text.isdigit():
        return int(text)
    return default
