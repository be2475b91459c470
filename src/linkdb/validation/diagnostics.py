# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics raised while scanning a linkdb file.

The parser never stops on a diagnostic. It calls into a :class:`DiagnosticSink`
in the order the offending commands are processed and carries on.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class Severity(enum.Enum):
    """Severity of a generic diagnostic message."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticKind(enum.Enum):
    """The notification that produced a :class:`Diagnostic`."""

    DUPLICATE_TAG = "duplicate-tag"
    DUPLICATE_LINK = "duplicate-link"
    MESSAGE = "message"


@dataclass(frozen=True)
class Diagnostic:
    """A single recorded notification.

    Attributes:
        kind: Which notification fired.
        message: Human-readable description.
        severity: Severity of the notification. Duplicates are errors.
        line: 1-based line of the triggering command.
        subject: The duplicated tag or link, or ``None`` for generic messages.
    """

    kind: DiagnosticKind
    message: str
    severity: Severity
    line: int
    subject: str | None = None


class DiagnosticSink:
    """Receiver for parser notifications.

    Every hook is a no-op, so subclasses override only what they observe.
    """

    def on_duplicate_tag(self, name: str, line: int) -> None:
        """Called when a tag is declared more than once."""

    def on_duplicate_link(self, link: str, line: int) -> None:
        """Called when a link declaration collides with a known name."""

    def on_message(self, message: str, severity: Severity, line: int) -> None:
        """Called for every other diagnostic."""


@dataclass
class DiagnosticCollector(DiagnosticSink):
    """A sink that records every notification in order.

    Attributes:
        diagnostics: All notifications received so far.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def on_duplicate_tag(self, name: str, line: int) -> None:
        self.diagnostics.append(
            Diagnostic(DiagnosticKind.DUPLICATE_TAG, f"Duplicate tag: {name}", Severity.ERROR, line, name)
        )

    def on_duplicate_link(self, link: str, line: int) -> None:
        self.diagnostics.append(
            Diagnostic(DiagnosticKind.DUPLICATE_LINK, f"Duplicate link: {link}", Severity.ERROR, line, link)
        )

    def on_message(self, message: str, severity: Severity, line: int) -> None:
        self.diagnostics.append(Diagnostic(DiagnosticKind.MESSAGE, message, severity, line))

    @property
    def messages(self) -> list[str]:
        """The text of every recorded diagnostic."""
        return [d.message for d in self.diagnostics]

    @property
    def has_errors(self) -> bool:
        """Return True if any error-severity diagnostic was recorded."""
        return any(d.severity is Severity.ERROR for d in self.diagnostics)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the recorded diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind is kind]
