from playwright.sync_api import Page, Locator, TimeoutError as PlaywrightTimeoutError
from typing import Union, Sequence
from pathlib import Path
import logging

from pomlab.shared.errors import ActionTimeout, NavigationTimeout

logger = logging.getLogger(__name__)

FilePayload = dict  # {"name": ..., "mimeType": ..., "buffer": bytes}


class ActionExecutor:
    """Performs bounded interactions against locators of one page.

    Every Playwright timeout is re-raised as ActionTimeout (or NavigationTimeout
    for page loads). The only call that tolerates a missing target is
    ``click_if_visible``.
    """

    def __init__(self, page: Page, timeout_ms: int = 5000, navigation_timeout_ms: int = 10000):
        self.page = page
        self.timeout_ms = timeout_ms
        self.navigation_timeout_ms = navigation_timeout_ms

    def _describe(self, locator: Locator) -> str:
        return str(locator).replace("<Locator ", "").rstrip(">")

    def _timeout(self, action: str, locator: Locator, err: Exception) -> ActionTimeout:
        target = self._describe(locator)
        logger.error(f"Timeout executing {action} on {target}")
        reason = str(err).split("\n")[0]
        return ActionTimeout(f"{action} on {target} timed out after {self.timeout_ms}ms: {reason}", action=action)

    def navigate(self, url: str, ready: Locator) -> None:
        """Load ``url`` and block until ``ready`` is visible."""
        logger.info(f"Navigating to {url}")
        try:
            self.page.goto(url, wait_until="domcontentloaded", timeout=self.navigation_timeout_ms)
            ready.wait_for(state="visible", timeout=self.navigation_timeout_ms)
        except PlaywrightTimeoutError as err:
            logger.error(f"{url} never became ready ({self._describe(ready)})")
            raise NavigationTimeout(
                f"{url} did not show {self._describe(ready)} within {self.navigation_timeout_ms}ms",
                url=url,
            ) from err

    def click(self, locator: Locator) -> None:
        try:
            locator.click(timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout("click", locator, err) from err

    def fill(self, locator: Locator, value: str) -> None:
        try:
            locator.fill(value, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout("fill", locator, err) from err

    def select(self, locator: Locator, value: str) -> None:
        try:
            locator.select_option(value, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout("select", locator, err) from err

    def check(self, locator: Locator, checked: bool = True) -> None:
        try:
            locator.set_checked(checked, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout("check", locator, err) from err

    def set_files(self, locator: Locator, files: Union[str, Path, FilePayload, Sequence[Union[str, Path]]]) -> None:
        try:
            locator.set_input_files(files, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout("set_input_files", locator, err) from err

    def wait_for(self, locator: Locator, state: str = "visible") -> Locator:
        """Block until ``locator`` reaches ``state``; used before querying dynamic elements."""
        try:
            locator.wait_for(state=state, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as err:
            raise self._timeout(f"wait_for({state})", locator, err) from err
        return locator

    def text_of(self, locator: Locator) -> str:
        try:
            return (locator.text_content(timeout=self.timeout_ms) or "").strip()
        except PlaywrightTimeoutError as err:
            raise self._timeout("text_content", locator, err) from err

    def click_if_visible(self, locator: Locator) -> bool:
        """Best-effort click: only acts when the target is visible right now."""
        if not locator.is_visible():
            logger.info(f"Skipping click, {self._describe(locator)} not visible")
            return False
        self.click(locator)
        return True

    def wait(self, duration_ms: int) -> None:
        self.page.wait_for_timeout(duration_ms)
