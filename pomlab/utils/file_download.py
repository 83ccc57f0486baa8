"""Helpers for saving files captured from browser download events."""

import logging
import re
from pathlib import Path
from typing import Union

from playwright.sync_api import Download

logger = logging.getLogger(__name__)


def sanitize_filename(name: str) -> str:
    """Remove characters that are unsafe for filenames."""
    cleaned = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", name).strip(". ")
    return cleaned or "download"


def unique_path(directory: Union[str, Path], filename: str) -> Path:
    """``directory/filename``, suffixed with _1, _2, ... when that file already exists."""
    directory = Path(directory)
    filepath = directory / sanitize_filename(filename)
    if filepath.exists():
        stem = filepath.stem
        suffix = filepath.suffix
        counter = 1
        while filepath.exists():
            filepath = directory / f"{stem}_{counter}{suffix}"
            counter += 1
    return filepath


def save_download(download: Download, directory: Union[str, Path]) -> Path:
    """Persist a Playwright download under ``directory`` without clobbering earlier files."""
    Path(directory).mkdir(parents=True, exist_ok=True)
    filepath = unique_path(directory, download.suggested_filename)
    download.save_as(filepath)
    logger.info(f"Downloaded {download.url} -> {filepath}")
    return filepath
