# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command parser for linkdb files.

Feeds logical lines through a small state machine that keeps the current link
record, fills in the :class:`~linkdb.model.entities.LinkStore` and reports
every anomaly to a :class:`~linkdb.validation.diagnostics.DiagnosticSink`
without stopping.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from linkdb.model.entities import LinkRecord, LinkStore
from linkdb.parser.dates import parse_compact_date
from linkdb.parser.lexer import (
    Command,
    CommandType,
    LineKind,
    LogicalLine,
    classify_line,
    iter_logical_lines,
    split_command,
)
from linkdb.validation.diagnostics import DiagnosticSink, Severity

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class LinkDbFileError(Exception):
    """Raised when a linkdb file cannot be opened or read."""


@dataclass
class ParseResult:
    """Final state of one parse pass.

    Attributes:
        tag_count: Number of distinct tags.
        link_count: Number of distinct link identifiers.
        records: Link records in declaration order.
        tags: The distinct tag names.
        links: The distinct link identifiers.
    """

    tag_count: int
    link_count: int
    records: list[LinkRecord] = field(default_factory=list)
    tags: frozenset[str] = frozenset()
    links: frozenset[str] = frozenset()


class LinkDbParser:
    """Single-pass parser over the logical lines of one linkdb file.

    Counts are readable at any time, including between calls to :meth:`feed`.
    """

    def __init__(self, sink: DiagnosticSink | None = None, *, report_stray_lines: bool = False) -> None:
        self._sink = sink if sink is not None else DiagnosticSink()
        self._report_stray_lines = report_stray_lines
        self._store = LinkStore()
        self._current: LinkRecord | None = None
        self._handlers: dict[CommandType, Callable[[Command, int], None]] = {
            CommandType.TAG: self._on_tag,
            CommandType.LINK: self._on_link,
            CommandType.ADDED: self._on_added,
            CommandType.PUBLISHED: self._on_published,
            CommandType.TITLE: self._on_title,
            CommandType.TAGS: self._on_tags,
            CommandType.QUOTE: self._on_quote,
            CommandType.REDDIT: self._on_related,
            CommandType.RELATED: self._on_related,
            CommandType.READ_REQUEST: self._on_read_request,
        }

    @property
    def tag_count(self) -> int:
        return self._store.tag_count

    @property
    def link_count(self) -> int:
        return self._store.link_count

    @property
    def current(self) -> LinkRecord | None:
        """The record that detail commands currently attach to, if any."""
        return self._current

    def feed(self, logical_line: LogicalLine) -> None:
        """Process one logical line."""
        kind = classify_line(logical_line.text)
        if kind is LineKind.COMMAND:
            self._dispatch(split_command(logical_line.text), logical_line.line)
        elif kind is LineKind.STRAY and self._report_stray_lines:
            self._sink.on_message(f"Ignored line: {logical_line.text}", Severity.WARNING, logical_line.line)

    def parse(self, stream: Iterable[str]) -> ParseResult:
        """Process every logical line of ``stream`` and return the final state."""
        for logical_line in iter_logical_lines(stream):
            self.feed(logical_line)
        return self.result()

    def result(self) -> ParseResult:
        """Snapshot the accumulated state."""
        return ParseResult(
            tag_count=self._store.tag_count,
            link_count=self._store.link_count,
            records=list(self._store.records),
            tags=frozenset(self._store.tags),
            links=frozenset(self._store.links),
        )

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, command: Command, line: int) -> None:
        if command.type is None:
            self._error(f"Unknown command type: {command.keyword}", line)
            return
        self._handlers[command.type](command, line)

    def _on_tag(self, command: Command, line: int) -> None:
        name = self._require_argument(command, line)
        if name is None:
            return
        if not self._store.add_tag(name):
            self._sink.on_duplicate_tag(name, line)

    def _on_link(self, command: Command, line: int) -> None:
        link = self._require_argument(command, line)
        if link is None:
            # Details that follow belong to no record.
            self._current = None
            return
        # Compared against the tag set, not the link set.
        if link in self._store.tags:
            self._sink.on_duplicate_link(link, line)
        self._current = self._store.add_link(link, line)

    def _on_added(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        value = parse_compact_date(command.argument)
        if value is None:
            self._error(f"Added command contained invalid date: {command.argument or ''}", line)
            return
        record.added = value

    def _on_published(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        value = parse_compact_date(command.argument)
        if value is None:
            self._error(f"Published command contained invalid date: {command.argument or ''}", line)
            return
        record.published = value

    def _on_title(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        title = self._require_argument(command, line)
        if title is not None:
            record.title = title

    def _on_tags(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        names = self._require_argument(command, line)
        if names is not None:
            record.tags.extend(names.split())

    def _on_quote(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        quote = self._require_argument(command, line)
        if quote is not None:
            record.quotes.append(quote)

    def _on_related(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        related = self._require_argument(command, line)
        if related is not None:
            record.related.append(related)

    def _on_read_request(self, command: Command, line: int) -> None:
        record = self._require_current(command, line)
        if record is None:
            return
        record.read_request = True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_current(self, command: Command, line: int) -> LinkRecord | None:
        """Return the current record, reporting the command if there is none."""
        if self._current is None:
            self._error(f"{_label(command)} command appears before any link declaration", line)
        return self._current

    def _require_argument(self, command: Command, line: int) -> str | None:
        """Return the argument, reporting the command if it has none."""
        if command.argument is None:
            self._error(f"{_label(command)} command is missing its argument", line)
        return command.argument

    def _error(self, message: str, line: int) -> None:
        self._sink.on_message(message, Severity.ERROR, line)


def parse(
    stream: Iterable[str],
    sink: DiagnosticSink | None = None,
    *,
    report_stray_lines: bool = False,
) -> ParseResult:
    """Parse linkdb content from an iterable of physical lines.

    Args:
        stream: Physical lines, typically an open text file.
        sink: Receiver for diagnostics. Diagnostics are dropped when omitted.
        report_stray_lines: Emit a warning for lines that are neither blank,
            comments nor commands.

    Returns:
        A ParseResult with the final counts and records.
    """
    return LinkDbParser(sink, report_stray_lines=report_stray_lines).parse(stream)


def parse_text(
    text: str,
    sink: DiagnosticSink | None = None,
    *,
    report_stray_lines: bool = False,
) -> ParseResult:
    """Parse linkdb content held in a string."""
    return parse(io.StringIO(text), sink, report_stray_lines=report_stray_lines)


def parse_file(
    path: Path | str,
    sink: DiagnosticSink | None = None,
    *,
    report_stray_lines: bool = False,
) -> ParseResult:
    """Parse a linkdb file from disk.

    The file is read as UTF-8 and never written.

    Args:
        path: Path to the linkdb file.
        sink: Receiver for diagnostics.
        report_stray_lines: Emit a warning for stray text lines.

    Returns:
        A ParseResult with the final counts and records.

    Raises:
        LinkDbFileError: If the file cannot be opened, read or decoded.
    """
    path = Path(path)
    logger.debug("Parsing linkdb file %s", path)
    try:
        stream = path.open(encoding="utf-8")
    except FileNotFoundError:
        raise LinkDbFileError(f"Linkdb file not found: {path}") from None
    except OSError as exc:
        raise LinkDbFileError(f"Cannot read linkdb file '{path}': {exc}") from exc

    with stream:
        result = parse(_read_lines(stream, path), sink, report_stray_lines=report_stray_lines)
    logger.debug("Parsed %s: %d tags, %d links", path, result.tag_count, result.link_count)
    return result


# ################
# Implementation
# ################


def _label(command: Command) -> str:
    """Return the keyword without its dot, capitalized (``.title`` -> ``Title``)."""
    return command.keyword.lstrip(".").capitalize()


def _read_lines(stream: TextIO, path: Path) -> Iterator[str]:
    """Yield physical lines, turning read and decode failures into LinkDbFileError."""
    while True:
        try:
            raw = stream.readline()
        except UnicodeDecodeError as exc:
            raise LinkDbFileError(f"Linkdb file '{path}' is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise LinkDbFileError(f"Cannot read linkdb file '{path}': {exc}") from exc
        if not raw:
            return
        yield raw
