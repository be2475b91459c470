# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Console sink that prints parser diagnostics with coloured severity prefixes."""

import sys
from collections.abc import Callable

from yachalk import chalk

from linkdb.validation.diagnostics import DiagnosticSink, Severity

# ###############
# Public Interface
# ###############


class ConsoleSink(DiagnosticSink):
    """Print diagnostics as they arrive.

    Errors go to stderr, everything else to stdout. Duplicate notifications can
    be switched off individually; switched-off duplicates are neither printed
    nor counted.
    """

    def __init__(
        self,
        *,
        report_duplicate_tags: bool = True,
        report_duplicate_links: bool = True,
        color: bool = False,
    ) -> None:
        self._report_duplicate_tags = report_duplicate_tags
        self._report_duplicate_links = report_duplicate_links
        self._color = color
        self.error_count = 0

    def on_duplicate_tag(self, name: str, line: int) -> None:
        if self._report_duplicate_tags:
            self.on_message(f"Duplicate tag: {name}", Severity.ERROR, line)

    def on_duplicate_link(self, link: str, line: int) -> None:
        if self._report_duplicate_links:
            self.on_message(f"Duplicate link: {link}", Severity.ERROR, line)

    def on_message(self, message: str, severity: Severity, line: int) -> None:
        prefix, style = _STYLES[severity]
        text = f"{prefix}line {line}: {message}"
        if self._color:
            text = style(text)
        if severity is Severity.ERROR:
            self.error_count += 1
            print(text, file=sys.stderr)
        else:
            print(text)


# ################
# Implementation
# ################

_STYLES: dict[Severity, tuple[str, Callable[[str], str]]] = {
    Severity.INFORMATION: ("INFO: ", chalk.cyan),
    Severity.WARNING: ("WARN: ", chalk.yellow),
    Severity.ERROR: ("ERROR: ", chalk.red),
}
