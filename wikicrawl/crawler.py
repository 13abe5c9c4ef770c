"""Batch driver: fetch every configured URL and persist what comes back.

Per URL the pipeline is::

    page_filename → fetch_page → save_html → build_record → sink.append

URLs are processed on a bounded ``ThreadPoolExecutor``.  :meth:`Crawler.run`
returns only after every URL has either been recorded or failed.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import httpx

from wikicrawl.config import Settings, settings as default_settings
from wikicrawl.errors import OutputError, PageError
from wikicrawl.output import JsonLinesSink, page_filename, save_html
from wikicrawl.scraper.extractor import build_record
from wikicrawl.scraper.fetcher import build_client, fetch_page
from wikicrawl.scraper.models import PageRecord


@dataclass
class CrawlReport:
    """Outcome of one batch."""

    recorded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    elapsed: float = 0.0


class Crawler:
    """Runs one batch against an already opened :class:`JsonLinesSink`."""

    def __init__(
        self,
        sink: JsonLinesSink,
        cfg: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.cfg = cfg or default_settings
        self.sink = sink
        self._client = client

    # ------------------------------------------------------------------
    # Single page
    # ------------------------------------------------------------------

    def process(self, client: httpx.Client, url: str) -> Optional[PageRecord]:
        """Fetch, snapshot and record one page.

        Returns the appended record, or ``None`` for a non-HTML or body-less
        response (its raw file is still written).

        Raises:
            PageError / httpx.HTTPError: The page is skipped.
            OutputError: An artifact could not be written.
        """
        filename = page_filename(url)
        raw = fetch_page(client, url)
        save_html(self.cfg.pages_dir, filename, raw.content)

        if not raw.is_html:
            return None
        record = build_record(raw, self.cfg.content_selector)
        if record is None:
            return None
        self.sink.append(record)
        return record

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    def run(self, urls: Optional[Iterable[str]] = None) -> CrawlReport:
        """Process *urls* (default: ``cfg.start_urls``) and wait for all of them."""
        started = time.monotonic()
        batch = list(urls if urls is not None else self.cfg.start_urls)
        report = CrawlReport()

        client = self._client or build_client(self.cfg)
        try:
            with ThreadPoolExecutor(max_workers=max(self.cfg.max_concurrent_fetches, 1)) as pool:
                future_to_url = {pool.submit(self.process, client, url): url for url in batch}
                for future in as_completed(future_to_url):
                    url = future_to_url[future]
                    try:
                        record = future.result()
                    except (PageError, httpx.HTTPError) as exc:
                        report.failed.append(url)
                        print(f"[VISITING] ✗ Failed {url!r}: {exc}")
                        continue
                    except OutputError:
                        for pending in future_to_url:
                            pending.cancel()
                        raise
                    if record is not None:
                        report.recorded.append(url)
                    print(f"[VISITING] ✓ {url}")
        finally:
            if self._client is None:
                client.close()

        report.elapsed = time.monotonic() - started
        return report


def crawl(cfg: Optional[Settings] = None) -> CrawlReport:
    """Run the whole batch: prepare outputs, fetch every page, close outputs.

    The reported elapsed time includes output setup.
    """
    started = time.monotonic()
    cfg = cfg or default_settings
    try:
        cfg.pages_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"could not create directory {cfg.pages_dir}: {exc}") from exc

    with JsonLinesSink(cfg.output_file) as sink:
        report = Crawler(sink, cfg).run()

    report.elapsed = time.monotonic() - started
    return report
