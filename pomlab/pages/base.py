"""Capabilities every page-like object carries: title, delay and screenshot.

Page objects embed a PageUtilities instance rather than inheriting from it.
"""

import re
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image
from playwright.sync_api import Page

from pomlab.browser_interaction.action_executor import ActionExecutor
from pomlab.observation.visual_capture import VisualCapture
from pomlab.utils.config import SuiteConfig


class PageUtilities:
    def __init__(self, page: Page, screenshot_dir: str = "test-results/screenshots"):
        self.page = page
        self.screenshot_dir = Path(screenshot_dir)
        self._visual = VisualCapture(page)

    def get_title(self) -> str:
        return self.page.title()

    def delay(self, duration_ms: int):
        self.page.wait_for_timeout(duration_ms)

    def screenshot(self, name: str, full_page: bool = False) -> Image.Image:
        """Saves ``<screenshot_dir>/<name>.png`` and returns the image."""
        return self._visual.capture(self.screenshot_dir / f"{name}.png", full_page=full_page)


def compose(page: Page, config: Optional[SuiteConfig] = None) -> Tuple[SuiteConfig, PageUtilities, ActionExecutor]:
    """Builds the collaborators a page object holds. Performs no I/O."""
    config = config or SuiteConfig()
    utils = PageUtilities(page, config.screenshot_dir)
    actions = ActionExecutor(page, config.action_timeout_ms, config.navigation_timeout_ms)
    return config, utils, actions


def parse_price(text: str) -> float:
    """'$29.99' -> 29.99"""
    match = re.search(r"[\d,]+(?:\.\d+)?", text or "")
    if not match:
        raise ValueError(f"No price in {text!r}")
    return float(match.group(0).replace(",", ""))
