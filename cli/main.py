"""wikicrawl CLI — entry-point for running and inspecting a crawl.

Usage:
    python cli/main.py --help

Commands:
    crawl    → fetch every configured page into output.jl + wikipages/
    scrape   → fetch one page and print its record
    records  → list the records of an output file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wikicrawl.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from dataclasses import replace
from typing import Optional

import httpx
import typer

from wikicrawl.config import settings
from wikicrawl.crawler import crawl
from wikicrawl.errors import OutputError, PageError

app = typer.Typer(
    name="wikicrawl",
    help="Fetch a fixed list of pages into JSON Lines records and raw HTML.",
    no_args_is_help=True,
)


@app.command("crawl")
def crawl_cmd(
    output: Optional[Path] = typer.Option(None, "--output", help="Record file (JSON Lines)."),
    pages_dir: Optional[Path] = typer.Option(None, "--pages-dir", help="Directory for raw HTML."),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", min=1, help="Fetches in flight."),
) -> None:
    """Fetch every configured page and write records plus raw snapshots."""
    cfg = replace(
        settings,
        output_file=output or settings.output_file,
        pages_dir=pages_dir or settings.pages_dir,
        max_concurrent_fetches=concurrency or settings.max_concurrent_fetches,
    )
    typer.echo(f"[crawl] {len(cfg.start_urls)} page(s) → {cfg.output_file}, {cfg.pages_dir}/")
    try:
        report = crawl(cfg)
    except OutputError as exc:
        typer.echo(f"[crawl] ✗ {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"[crawl] Total time elapsed: {report.elapsed:.2f}s")


@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="URL to scrape."),
) -> None:
    """Scrape a single URL and print its record as JSON (nothing is written)."""
    from wikicrawl.scraper import build_client, build_record, fetch_page

    with build_client(settings) as client:
        try:
            raw = fetch_page(client, url)
        except (PageError, httpx.HTTPError) as exc:
            typer.echo(f"[scrape] ✗ {exc}", err=True)
            raise typer.Exit(1)

    record = build_record(raw, settings.content_selector)
    if record is None:
        typer.echo(f"[scrape] HTTP {raw.status_code} — no <body> to extract.")
        return
    typer.echo(record.to_json())


@app.command("records")
def records(
    output: Optional[Path] = typer.Option(None, "--output", help="Record file to read."),
) -> None:
    """List the title and tags of every record in an output file."""
    from wikicrawl.output import read_records

    path = output or settings.output_file
    if not path.exists():
        typer.echo(f"[records] {path} does not exist.", err=True)
        raise typer.Exit(1)

    found = read_records(path)
    if not found:
        typer.echo(f"[records] No records in {path}.")
        return
    for rec in found:
        typer.echo(f"  {rec.title or '(untitled)'}  [{', '.join(rec.tags)}]  {rec.url}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
