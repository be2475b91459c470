# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for linkdb files (link records and the record store)."""

from linkdb.model.entities import LinkRecord, LinkStore

__all__ = [
    "LinkRecord",
    "LinkStore",
]
