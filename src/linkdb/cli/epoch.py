# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unix epoch helpers for the ``epoch`` subcommand."""

import argparse
import datetime

from linkdb.parser.dates import parse_compact_date

# ###############
# Public Interface
# ###############

EPOCH = datetime.date(1970, 1, 1)


def epoch_seconds(value: datetime.date) -> int:
    """Return the seconds between the Unix epoch and midnight of ``value``."""
    return (value - EPOCH).days * 86400


def parse_date_argument(text: str) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` or compact ``YYYYMMDD`` command-line date.

    Raises:
        argparse.ArgumentTypeError: If the text is not a valid date.
    """
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    value = parse_compact_date(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid date: '{text}' (expected YYYY-MM-DD or YYYYMMDD)")
    return value
