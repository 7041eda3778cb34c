"""Centralized configuration loaded from .env."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _load_env() -> None:
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "")
    if not raw:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    # Only needed when the document source is a URL
    scraper_api_key: str = ""

    # ScraperAPI tuning
    scraper_timeout: int = 60
    render_js: bool = True
    auto_scroll: bool = False

    # BeautifulSoup tree builder used for HTML strings
    html_parser: str = "lxml"

    @classmethod
    def from_env(cls) -> Settings:
        _load_env()
        return cls(
            scraper_api_key=os.getenv("SCRAPER_API_KEY", ""),
            scraper_timeout=int(os.getenv("SCRAPER_TIMEOUT") or "60"),
            render_js=_env_bool("RENDER_JS", True),
            auto_scroll=_env_bool("AUTO_SCROLL", False),
            html_parser=os.getenv("HTML_PARSER", "lxml"),
        )
