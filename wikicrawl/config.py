"""Centralised settings for the wikicrawl batch.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


DEFAULT_PAGES: tuple[str, ...] = (
    "https://en.wikipedia.org/wiki/Robotics",
    "https://en.wikipedia.org/wiki/Robot",
    "https://en.wikipedia.org/wiki/Reinforcement_learning",
    "https://en.wikipedia.org/wiki/Robot_Operating_System",
    "https://en.wikipedia.org/wiki/Intelligent_agent",
    "https://en.wikipedia.org/wiki/Software_agent",
    "https://en.wikipedia.org/wiki/Robotic_process_automation",
    "https://en.wikipedia.org/wiki/Chatbot",
    "https://en.wikipedia.org/wiki/Applications_of_artificial_intelligence",
    "https://en.wikipedia.org/wiki/Android_(robot)",
)


def _split_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Read a comma-separated environment variable as a tuple of strings."""
    raw = os.environ.get(name)
    if not raw:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Batch input
    # ------------------------------------------------------------------
    start_urls: tuple[str, ...] = field(
        default_factory=lambda: _split_env("CRAWL_PAGES", DEFAULT_PAGES)
    )
    allowed_domains: tuple[str, ...] = field(
        default_factory=lambda: _split_env("CRAWL_ALLOWED_DOMAINS", ("en.wikipedia.org",))
    )

    # ------------------------------------------------------------------
    # Output artifacts
    # ------------------------------------------------------------------
    output_file: Path = field(
        default_factory=lambda: Path(os.environ.get("CRAWL_OUTPUT_FILE", "output.jl"))
    )
    pages_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("CRAWL_PAGES_DIR", "wikipages"))
    )

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    content_selector: str = field(
        default_factory=lambda: os.environ.get("CRAWL_CONTENT_SELECTOR", "div#mw-content-text")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_CONCURRENCY", "4"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("CRAWL_USER_AGENT", "wikicrawl/1.0")
    )

    def is_allowed(self, host: str) -> bool:
        """Return ``True`` if *host* is on the allow-list (case-insensitive)."""
        return host.lower() in {d.lower() for d in self.allowed_domains}


# Module-level singleton — import this everywhere:
#   from wikicrawl.config import settings
settings = Settings()
