"""HTTP fetching restricted to the configured host allow-list."""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from wikicrawl.config import Settings, settings as default_settings
from wikicrawl.errors import DisallowedDomainError, InvalidPageURLError
from wikicrawl.scraper.models import RawPage


def _make_domain_guard(cfg: Settings) -> Callable[[httpx.Request], None]:
    """Return a request hook that refuses hosts outside ``cfg.allowed_domains``.

    httpx runs request hooks for every hop of a redirect chain, so a redirect
    off the allow-list is stopped before it is sent as well.
    """

    def guard(request: httpx.Request) -> None:
        host = request.url.host
        if not cfg.is_allowed(host):
            raise DisallowedDomainError(str(request.url), host)

    return guard


def _log_request(request: httpx.Request) -> None:
    print(f"[VISITING] {request.url}")


def build_client(cfg: Optional[Settings] = None) -> httpx.Client:
    """Create the shared client used for a whole batch.

    The client is safe to share between worker threads.
    """
    cfg = cfg or default_settings
    return httpx.Client(
        headers={"User-Agent": cfg.user_agent},
        timeout=cfg.request_timeout,
        follow_redirects=True,
        event_hooks={"request": [_make_domain_guard(cfg), _log_request]},
    )


def fetch_page(client: httpx.Client, url: str) -> RawPage:
    """Fetch *url* with *client* and return a :class:`RawPage`.

    Raises:
        DisallowedDomainError: If *url* (or a redirect target) is off-list.
        InvalidPageURLError: If *url* is not a valid URL.
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On any other transport failure.
    """
    try:
        response = client.get(url)
    except httpx.InvalidURL as exc:
        raise InvalidPageURLError(url, str(exc)) from exc
    response.raise_for_status()
    return RawPage(
        url=str(response.url),
        content=response.content,
        status_code=response.status_code,
        content_type=response.headers.get("content-type", ""),
    )
