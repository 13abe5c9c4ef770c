"""Raw HTML snapshots, one file per page."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote, urlsplit

from wikicrawl.errors import InvalidPageURLError, OutputError, PagePathError


def page_filename(url: str) -> str:
    """Return ``<segment>.html`` where *segment* is path segment 2 of *url*.

    ``https://en.wikipedia.org/wiki/Robot`` → ``Robot.html``.  The path is
    percent-decoded first, so ``Caf%C3%A9`` names ``Café.html``.

    Raises:
        InvalidPageURLError: If *url* cannot be parsed.
        PagePathError: If the path has fewer than three segments.
    """
    try:
        path = urlsplit(url).path
    except ValueError as exc:
        raise InvalidPageURLError(url, str(exc)) from exc
    segments = unquote(path).split("/")
    if len(segments) < 3:
        raise PagePathError(url)
    return f"{segments[2]}.html"


def save_html(page_dir: Path, filename: str, content: bytes) -> Path:
    """Write *content* unchanged to ``page_dir / filename``.

    The directory is created when missing and an existing file is replaced.
    """
    path = Path(page_dir) / filename
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as exc:
        raise OutputError(f"could not save HTML file {path}: {exc}") from exc
    return path
