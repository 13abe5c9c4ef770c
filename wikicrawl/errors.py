"""Exception hierarchy for the crawl pipeline.

Two kinds matter to the driver:

``OutputError``
    An output artifact could not be created, encoded or written.  The whole
    run is aborted.
``PageError``
    A single page cannot be processed.  The driver logs it and moves on.

Network failures are not wrapped; they surface as ``httpx.HTTPError`` and are
handled like ``PageError``.
"""

from __future__ import annotations


class CrawlError(Exception):
    """Base class for every error raised by wikicrawl."""


class OutputError(CrawlError):
    """Writing the record file or a raw page failed."""


class PageError(CrawlError):
    """A page was skipped; carries the offending *url*."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class DisallowedDomainError(PageError):
    def __init__(self, url: str, host: str) -> None:
        super().__init__(url, f"host {host!r} is not in the allowed domains")
        self.host = host


class PagePathError(PageError):
    def __init__(self, url: str) -> None:
        super().__init__(url, f"URL path of {url!r} is too short to name a page file")


class InvalidPageURLError(PageError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"invalid URL {url!r}: {reason}")
