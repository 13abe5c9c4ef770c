"""Output artifacts: the record file and raw page snapshots."""

from wikicrawl.output.pages import page_filename, save_html
from wikicrawl.output.writer import JsonLinesSink, read_records

__all__ = ["JsonLinesSink", "read_records", "page_filename", "save_html"]
