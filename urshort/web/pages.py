"""Static HTML pages served by the redirect endpoints."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from urshort.settings import Settings

WELCOME_FALLBACK = "Home page failed to load"
ERROR_FALLBACK = "Error page failed to load"


@dataclass(frozen=True)
class Pages:
    """Welcome and error page contents."""

    welcome: str
    error: str


def load_html_page(path: Path, fallback: str) -> str:
    """
    Load a local file into a string.

    :param path: file to read.
    :param fallback: text returned when the file cannot be read.
    :return: the page contents.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to load page {path}: {e}")
        return fallback


def load_pages(app_settings: Settings) -> Pages:
    """Load the configured welcome and error pages."""
    return Pages(
        welcome=load_html_page(app_settings.welcome_page_path, WELCOME_FALLBACK),
        error=load_html_page(app_settings.error_page_path, ERROR_FALLBACK),
    )
