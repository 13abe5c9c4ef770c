"""Scraper package — web fetch & page extraction."""

from wikicrawl.scraper.extractor import build_record, clean_text, extract_tags
from wikicrawl.scraper.fetcher import build_client, fetch_page
from wikicrawl.scraper.models import PageRecord, RawPage

__all__ = [
    "build_client",
    "fetch_page",
    "build_record",
    "clean_text",
    "extract_tags",
    "PageRecord",
    "RawPage",
]
