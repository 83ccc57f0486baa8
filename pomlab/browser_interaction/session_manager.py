from playwright.sync_api import sync_playwright, Browser, BrowserContext, Page, Playwright
from typing import Callable, List, Optional
import logging

from pomlab.browser_interaction.auth_state import StateSource, capture_state, seed_context
from pomlab.shared.schemas import SessionState
from pomlab.utils.config import SuiteConfig

logger = logging.getLogger(__name__)

BROWSER_NAMES = ("chromium", "firefox", "webkit")

ContextInitializer = Callable[[BrowserContext], None]


class SessionManager:
    """Owns one Playwright browser and every context created through it."""

    def __init__(self, config: Optional[SuiteConfig] = None):
        self.config = config or SuiteConfig()
        if self.config.browser_name not in BROWSER_NAMES:
            raise ValueError(f"Unknown browser '{self.config.browser_name}', expected one of {BROWSER_NAMES}")
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.contexts: List[BrowserContext] = []
        self._initializers: List[ContextInitializer] = []

    @property
    def headless(self) -> bool:
        return self.config.headless

    def start(self) -> Browser:
        """Launches the configured browser engine."""
        if self.browser:
            return self.browser

        self.playwright = sync_playwright().start()
        launcher = getattr(self.playwright, self.config.browser_name)
        self.browser = launcher.launch(headless=self.config.headless)
        logger.info(f"Launched {self.config.browser_name} (headless={self.config.headless})")
        return self.browser

    def add_context_initializer(self, initializer: ContextInitializer):
        """Registers a callback run on every new context (seeded or not), e.g. to install routes."""
        self._initializers.append(initializer)

    def new_context(self, state: Optional[StateSource] = None, **overrides) -> BrowserContext:
        """Creates an isolated context, seeded with ``state`` when one is given."""
        browser = self.start()
        args = {**self.config.context_args(), **overrides}
        if state is not None:
            context = seed_context(browser, state, **args)
        else:
            context = browser.new_context(**args)
        try:
            context.set_default_timeout(self.config.action_timeout_ms)
            context.set_default_navigation_timeout(self.config.navigation_timeout_ms)
            for initializer in self._initializers:
                initializer(context)
        except BaseException:
            logger.error("Context setup failed, closing the half-built context")
            context.close()
            raise
        context.on("close", self._forget)
        self.contexts.append(context)
        return context

    def new_page(self, state: Optional[StateSource] = None) -> Page:
        """Creates a page inside its own fresh context."""
        return self.new_context(state).new_page()

    def capture(self, context: BrowserContext) -> SessionState:
        return capture_state(context)

    def seed(self, state: StateSource, **overrides) -> BrowserContext:
        return self.new_context(state=state, **overrides)

    def _forget(self, context: BrowserContext):
        if context in self.contexts:
            self.contexts.remove(context)

    def close(self):
        """Closes every context, the browser and Playwright itself."""
        for context in list(self.contexts):
            context.close()
        self.contexts = []
        if self.browser:
            self.browser.close()
            self.browser = None
        if self.playwright:
            self.playwright.stop()
            self.playwright = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
