"""Content extraction: turns a :class:`RawPage` into a :class:`PageRecord`."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from wikicrawl.scraper.models import PageRecord, RawPage

_NON_LETTER = re.compile(r"[^a-zA-Z]")


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

def extract_tags(segments: Sequence[str]) -> List[str]:
    """Derive topic tags from the slash-split segments of a URL path.

    Segments 1 and 2 are kept verbatim.  Segment 3 is split on ``_`` and each
    piece is lowercased with every non-ASCII-letter removed; pieces that end
    up empty are kept as empty tags.
    """
    tags: List[str] = []
    if len(segments) > 1:
        tags.append(segments[1])
    if len(segments) > 2:
        tags.append(segments[2])
    if len(segments) > 3:
        for piece in segments[3].split("_"):
            tags.append(_NON_LETTER.sub("", piece.lower()))
    return tags


def tags_for_url(url: str) -> List[str]:
    """Return :func:`extract_tags` over the percent-decoded path of *url*."""
    return extract_tags(unquote(urlsplit(url).path).split("/"))


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def clean_text(region: Optional[Tag]) -> str:
    """Join the text of every ``<p>`` and ``<li>`` in *region*, one per line."""
    if region is None:
        return ""
    parts = [el.get_text() + "\n" for el in region.select("p, li")]
    return "".join(parts).strip()


def extract_title(body: Tag) -> str:
    """Return the text of the first ``<h1>`` in *body*, or empty string."""
    heading = body.select_one("h1")
    if heading is None:
        return ""
    return heading.get_text()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_record(raw: RawPage, content_selector: str) -> Optional[PageRecord]:
    """Build the :class:`PageRecord` for *raw*.

    Returns ``None`` when the document has no ``<body>``; such pages produce
    no record.  Empty titles and texts are recorded as-is.
    """
    soup = BeautifulSoup(raw.content, "html.parser")
    body = soup.body
    if body is None:
        return None

    return PageRecord(
        url=raw.url,
        title=extract_title(body),
        text=clean_text(body.select_one(content_selector)),
        tags=tuple(tags_for_url(raw.url)),
    )
