# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Link records and the store that accumulates them during a parse pass."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class LinkRecord(BaseModel):
    """A bookmarked link and the details attached to it.

    Tag references in ``tags`` are kept as written; they are not checked
    against the top-level tag declarations.
    """

    link: str
    title: str | None = None
    added: datetime.date | None = None
    published: datetime.date | None = None
    tags: list[str] = _Field(default_factory=list)
    quotes: list[str] = _Field(default_factory=list)
    related: list[str] = _Field(default_factory=list)
    read_request: bool = False
    line: int = 0


@dataclass
class LinkStore:
    """Tags, link identifiers and link records collected from one file.

    Attributes:
        tags: Unique top-level tag names.
        links: Unique link identifiers.
        records: Link records in declaration order.
    """

    tags: set[str] = field(default_factory=set)
    links: set[str] = field(default_factory=set)
    records: list[LinkRecord] = field(default_factory=list)

    @property
    def tag_count(self) -> int:
        """Number of distinct tags declared so far."""
        return len(self.tags)

    @property
    def link_count(self) -> int:
        """Number of distinct link identifiers declared so far."""
        return len(self.links)

    def add_tag(self, name: str) -> bool:
        """Insert a tag name, returning False if it was already present."""
        is_new = name not in self.tags
        self.tags.add(name)
        return is_new

    def add_link(self, link: str, line: int = 0) -> LinkRecord:
        """Register a link identifier and append a new record for it."""
        self.links.add(link)
        record = LinkRecord(link=link, line=line)
        self.records.append(record)
        return record
