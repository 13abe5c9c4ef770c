"""Tests for the output artifacts — the JSON Lines sink and raw page files.

All tests write under pytest's ``tmp_path`` so nothing leaks into the
working directory.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from wikicrawl.errors import InvalidPageURLError, OutputError, PagePathError
from wikicrawl.output import JsonLinesSink, page_filename, read_records, save_html
from wikicrawl.scraper.models import PageRecord

_EXAMPLE = PageRecord(
    url="https://example.com",
    title="Example",
    text="This is an example.",
    tags=("example", "test"),
)


# ---------------------------------------------------------------------------
# JsonLinesSink
# ---------------------------------------------------------------------------

class TestJsonLinesSink:
    def test_append_writes_non_empty_decodable_line(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        with JsonLinesSink(path) as sink:
            sink.append(_EXAMPLE)

        assert path.stat().st_size > 0
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {
            "url": "https://example.com",
            "title": "Example",
            "text": "This is an example.",
            "tags": ["example", "test"],
        }

    def test_same_record_same_bytes(self, tmp_path: Path) -> None:
        first, second = tmp_path / "a.jl", tmp_path / "b.jl"
        for path in (first, second):
            with JsonLinesSink(path) as sink:
                sink.append(_EXAMPLE)
        assert first.read_bytes() == second.read_bytes()

    def test_lines_are_newline_terminated(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        with JsonLinesSink(path) as sink:
            sink.append(_EXAMPLE)
            sink.append(_EXAMPLE)
        assert path.read_text(encoding="utf-8").count("\n") == 2

    def test_open_truncates_previous_run(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        path.write_text("stale line\n", encoding="utf-8")
        with JsonLinesSink(path):
            pass
        assert path.read_text(encoding="utf-8") == ""

    def test_open_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "output.jl"
        with JsonLinesSink(path) as sink:
            sink.append(_EXAMPLE)
        assert path.exists()

    def test_open_failure_raises_output_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(OutputError):
            JsonLinesSink(blocker / "output.jl").open()

    def test_append_on_closed_sink_raises(self, tmp_path: Path) -> None:
        sink = JsonLinesSink(tmp_path / "output.jl")
        with pytest.raises(OutputError):
            sink.append(_EXAMPLE)

    def test_unencodable_record_raises_output_error(self, tmp_path: Path) -> None:
        bad = PageRecord(url="u", title=object(), text="x")  # type: ignore[arg-type]
        with JsonLinesSink(tmp_path / "output.jl") as sink:
            with pytest.raises(OutputError):
                sink.append(bad)

    def test_unencodable_text_on_write_raises_output_error(self, tmp_path: Path) -> None:
        lone_surrogate = PageRecord(url="u", title="\ud800", text="x")
        with JsonLinesSink(tmp_path / "output.jl") as sink:
            with pytest.raises(OutputError):
                sink.append(lone_surrogate)

    def test_concurrent_appends_never_interleave(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        records = [
            PageRecord(url=f"https://example.com/{i}", title=str(i), text="x" * 5000, tags=("t",))
            for i in range(50)
        ]
        with JsonLinesSink(path) as sink:
            threads = [threading.Thread(target=sink.append, args=(r,)) for r in records]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        loaded = read_records(path)
        assert sorted(r.url for r in loaded) == sorted(r.url for r in records)


class TestReadRecords:
    def test_reads_back_every_field(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        with JsonLinesSink(path) as sink:
            sink.append(_EXAMPLE)
        assert read_records(path) == [_EXAMPLE]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "output.jl"
        path.write_text("\n" + _EXAMPLE.to_json() + "\n\n", encoding="utf-8")
        assert read_records(path) == [_EXAMPLE]


# ---------------------------------------------------------------------------
# Raw pages
# ---------------------------------------------------------------------------

class TestSaveHtml:
    def test_content_is_byte_identical(self, tmp_path: Path) -> None:
        content = b"<html><body>Example</body></html>"
        path = save_html(tmp_path, "example.html", content)

        assert path == tmp_path / "example.html"
        assert path.read_bytes() == content

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        path = save_html(tmp_path / "wikipages", "example.html", b"x")
        assert path.read_bytes() == b"x"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        save_html(tmp_path, "example.html", b"first")
        save_html(tmp_path, "example.html", b"second")
        assert (tmp_path / "example.html").read_bytes() == b"second"

    def test_write_failure_raises_output_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")
        with pytest.raises(OutputError):
            save_html(blocker, "example.html", b"x")


class TestPageFilename:
    def test_uses_second_path_segment(self) -> None:
        assert page_filename("https://en.wikipedia.org/wiki/Robot") == "Robot.html"

    def test_ignores_deeper_segments(self) -> None:
        assert page_filename("https://en.wikipedia.org/wiki/Robot/History") == "Robot.html"

    def test_keeps_punctuation(self) -> None:
        assert page_filename("https://en.wikipedia.org/wiki/Android_(robot)") == "Android_(robot).html"

    def test_decodes_percent_escapes(self) -> None:
        assert page_filename("https://en.wikipedia.org/wiki/Caf%C3%A9") == "Café.html"

    def test_unparseable_url_raises(self) -> None:
        with pytest.raises(InvalidPageURLError):
            page_filename("https://[en.wikipedia.org/wiki/Bad")

    @pytest.mark.parametrize("url", ["https://en.wikipedia.org/Robot", "https://en.wikipedia.org"])
    def test_short_path_raises(self, url: str) -> None:
        with pytest.raises(PagePathError):
            page_filename(url)
