# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line scanner for linkdb files.

Joins continued physical lines into logical lines, classifies each logical
line and splits command lines into a keyword and an optional argument.
"""

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

COMMENT_MARKER = "%%"
COMMAND_PREFIX = "."
CONTINUATION_MARKER = " \\"


class LineKind(enum.Enum):
    """Classification of a logical line."""

    BLANK = "blank"
    COMMENT = "comment"
    COMMAND = "command"
    STRAY = "stray"


class CommandType(enum.Enum):
    """All dot-commands understood by the linkdb parser."""

    TAG = ".tag"
    LINK = ".link"
    ADDED = ".added"
    PUBLISHED = ".published"
    TITLE = ".title"
    TAGS = ".tags"
    QUOTE = ".quote"
    REDDIT = ".reddit"
    RELATED = ".related"
    READ_REQUEST = ".read-request"


@dataclass(frozen=True)
class LogicalLine:
    """One or more physical lines joined through the continuation marker.

    Attributes:
        text: The joined text, without line terminators.
        line: 1-based number of the first physical line.
    """

    text: str
    line: int


@dataclass(frozen=True)
class Command:
    """A tokenized command line.

    Attributes:
        keyword: The raw keyword as written, including the leading dot.
        argument: Everything after the first space, or ``None`` when the line
            has no space at all.
        type: The recognized command, or ``None`` for an unknown keyword.
    """

    keyword: str
    argument: str | None
    type: CommandType | None


def iter_logical_lines(stream: Iterable[str]) -> Iterator[LogicalLine]:
    """Yield logical lines from an iterable of physical lines.

    A non-comment physical line ending in ``" \\"`` is continued by the lines
    that follow it. Fragments are concatenated verbatim after their trailing
    backslash is removed; joining stops at the first line without the marker
    or at end of input.

    Args:
        stream: Physical lines, with or without line terminators (an open
            text file works).

    Yields:
        LogicalLine objects in source order.
    """
    lines = iter(stream)
    line_number = 0
    for raw in lines:
        line_number += 1
        start = line_number
        text = _strip_terminator(raw)
        if not _is_continued(text) or text.lstrip().startswith(COMMENT_MARKER):
            yield LogicalLine(text, start)
            continue

        fragments = [_strip_marker(text)]
        for raw_next in lines:
            line_number += 1
            following = _strip_terminator(raw_next)
            if _is_continued(following):
                fragments.append(_strip_marker(following))
                continue
            fragments.append(following)
            break
        yield LogicalLine("".join(fragments), start)


def classify_line(text: str) -> LineKind:
    """Classify a logical line.

    Empty lines and lines starting with ``%%`` are ignored, lines starting
    with ``.`` are commands and anything else is stray text.
    """
    if not text:
        return LineKind.BLANK
    if text.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    if text.startswith(COMMAND_PREFIX):
        return LineKind.COMMAND
    return LineKind.STRAY


def split_command(text: str) -> Command:
    """Split a command line into its keyword and argument.

    The keyword ends at the first space; the argument is the unmodified
    remainder and may be empty. Without any space the whole trimmed line is
    the keyword and the argument is ``None``.
    """
    pos = text.find(" ")
    if pos > -1:
        keyword = text[:pos]
        argument: str | None = text[pos + 1 :]
    else:
        keyword = text.strip()
        argument = None
    return Command(keyword, argument, _COMMANDS.get(keyword.lower()))


# ################
# Implementation
# ################

_COMMANDS: dict[str, CommandType] = {command.value: command for command in CommandType}


def _strip_terminator(raw: str) -> str:
    """Remove a trailing newline (``\\n``, ``\\r\\n`` or ``\\r``)."""
    return raw.rstrip("\r\n")


def _is_continued(text: str) -> bool:
    return text.rstrip().endswith(CONTINUATION_MARKER)


def _strip_marker(text: str) -> str:
    """Drop the trailing backslash, keeping the space in front of it."""
    return text.rstrip()[:-1]
