"""Line-delimited record file.

Usage::

    from wikicrawl.output import JsonLinesSink

    with JsonLinesSink(Path("output.jl")) as sink:
        sink.append(record)
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import IO, List, Optional

from wikicrawl.errors import OutputError
from wikicrawl.scraper.models import PageRecord


class JsonLinesSink:
    """Append-only JSON Lines file shared by every worker of a batch.

    The file is truncated when opened.  :meth:`append` holds a lock for the
    whole write so each record lands as one complete line.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._fh: Optional[IO[str]] = None
        self._lock = threading.Lock()

    def open(self) -> JsonLinesSink:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._fh = self.path.open("w", encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"could not create output file {self.path}: {exc}") from exc
        return self

    def close(self) -> None:
        with self._lock:
            if self._fh is not None:
                self._fh.close()
                self._fh = None

    def __enter__(self) -> JsonLinesSink:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def append(self, record: PageRecord) -> None:
        """Serialize *record* and write it as one newline-terminated line."""
        try:
            line = record.to_json()
        except (TypeError, ValueError) as exc:
            raise OutputError(f"could not encode record for {record.url!r}: {exc}") from exc

        with self._lock:
            if self._fh is None:
                raise OutputError(f"output file {self.path} is not open")
            try:
                self._fh.write(line + "\n")
                self._fh.flush()
            except (OSError, ValueError) as exc:
                raise OutputError(f"could not write to {self.path}: {exc}") from exc


def read_records(path: Path) -> List[PageRecord]:
    """Load every record from a JSON Lines file written by :class:`JsonLinesSink`."""
    records: List[PageRecord] = []
    with Path(path).open(encoding="utf-8") as fh:
        for line in fh:
            if line.strip():
                records.append(PageRecord.from_json(line))
    return records
