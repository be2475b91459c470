# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic notifications emitted while checking linkdb files."""

from linkdb.validation.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    DiagnosticSink,
    Severity,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
    "Severity",
]
