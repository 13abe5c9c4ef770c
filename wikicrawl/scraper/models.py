"""Data models for the scraper pipeline."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Tuple


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    content: bytes
    status_code: int
    content_type: str = ""

    @property
    def is_html(self) -> bool:
        return "html" in self.content_type.lower()


@dataclass(frozen=True)
class PageRecord:
    """Structured fields extracted from one page; one line of the output file."""

    url: str
    title: str
    text: str
    tags: Tuple[str, ...] = ()

    def to_json(self) -> str:
        """Serialize to compact, single-line JSON (no trailing newline)."""
        data = asdict(self)
        data["tags"] = list(self.tags)
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, line: str) -> PageRecord:
        raw = json.loads(line)
        return cls(
            url=raw["url"],
            title=raw["title"],
            text=raw["text"],
            tags=tuple(raw.get("tags") or ()),
        )
