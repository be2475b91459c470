# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line scanner, date codec and command parser for linkdb files."""

from linkdb.parser.parser import (
    LinkDbFileError,
    LinkDbParser,
    ParseResult,
    parse,
    parse_file,
    parse_text,
)

__all__ = [
    "LinkDbFileError",
    "LinkDbParser",
    "ParseResult",
    "parse",
    "parse_file",
    "parse_text",
]
