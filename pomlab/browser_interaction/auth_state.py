"""Capture login state from one browsing context and replay it into others.

Interactive login is the slowest step of a browser test. Logging in once per
identity, snapshotting cookies and localStorage, and seeding every later
context with that snapshot lets tests skip the login form entirely.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from playwright.sync_api import Browser, BrowserContext, Locator, Page
from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError
from pydantic import ValidationError

from pomlab.shared.errors import CaptureError, NavigationTimeout, SeedError
from pomlab.shared.schemas import SessionState

logger = logging.getLogger(__name__)

StateSource = Union[SessionState, dict, str, Path]


def capture_state(context: BrowserContext) -> SessionState:
    """Snapshot all cookies and localStorage of an authenticated context."""
    try:
        raw = context.storage_state()
    except PlaywrightError as err:
        raise CaptureError(f"Cannot capture state: {str(err).splitlines()[0]}") from err
    try:
        state = SessionState.model_validate(raw)
    except ValidationError as err:
        raise CaptureError(f"Browser returned unexpected storage state: {err}") from err
    logger.info(
        f"Captured session state: {len(state.cookies)} cookies, "
        f"{len(state.origins)} origins, {state.local_storage_items} localStorage items"
    )
    return state


def load_state(source: StateSource) -> SessionState:
    """Coerce a SessionState, raw dict or JSON file path into a validated SessionState."""
    if isinstance(source, SessionState):
        return source
    try:
        if isinstance(source, (str, Path)):
            raw = json.loads(Path(source).read_text(encoding="utf-8"))
        else:
            raw = source
        return SessionState.model_validate(raw)
    except (OSError, json.JSONDecodeError) as err:
        raise SeedError(f"Cannot read session state from {source}: {err}") from err
    except ValidationError as err:
        raise SeedError(f"Malformed session state: {err}") from err


def save_state(state: SessionState, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(state.to_playwright(), indent=2), encoding="utf-8")
    logger.info(f"Session state saved to {path}")
    return path


def seed_context(browser: Browser, state: StateSource, **context_args) -> BrowserContext:
    """Create a new context preloaded with ``state``. No navigation happens here."""
    snapshot = load_state(state)
    context = browser.new_context(storage_state=snapshot.to_playwright(), **context_args)
    logger.info(f"Seeded new context with {len(snapshot.cookies)} cookies")
    return context


def verify_authenticated(page: Page, url: str, ready: Locator, login_marker: Locator, timeout_ms: int = 10000) -> None:
    """Open a protected ``url`` and check the seeded state was accepted.

    Raises SeedError when the application bounces to its login view, and
    NavigationTimeout when neither view shows up in time.
    """
    try:
        page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        ready.or_(login_marker).first.wait_for(state="visible", timeout=timeout_ms)
    except PlaywrightTimeoutError as err:
        raise NavigationTimeout(f"{url} reached neither the protected view nor the login view", url=url) from err
    if login_marker.is_visible():
        logger.error(f"Session state rejected: {url} redirected to {page.url}")
        raise SeedError(f"Session state rejected by server: {url} redirected to login ({page.url})")


class AuthStateStore:
    """Captured login state per identity, optionally persisted as ``<directory>/<identity>.json``.

    ``manager`` only needs a ``new_context()`` method; in practice it is a
    SessionManager. States are immutable so they can be handed to many
    contexts at once.
    """

    def __init__(self, manager, directory: Optional[Union[str, Path]] = None):
        self.manager = manager
        self.directory = Path(directory) if directory else None
        self._states: Dict[str, SessionState] = {}

    def path_for(self, identity: str) -> Optional[Path]:
        if not self.directory:
            return None
        return self.directory / f"{identity}.json"

    def get(self, identity: str) -> Optional[SessionState]:
        return self._states.get(identity)

    def put(self, identity: str, state: SessionState) -> None:
        self._states[identity] = state
        path = self.path_for(identity)
        if path:
            save_state(state, path)

    def ensure(self, identity: str, login: Callable[[Page], None]) -> SessionState:
        """Return the state for ``identity``, logging in through ``login`` only when none exists yet."""
        if identity in self._states:
            return self._states[identity]

        path = self.path_for(identity)
        if path and path.exists():
            logger.info(f"Reusing stored session for '{identity}' from {path}")
            self._states[identity] = load_state(path)
            return self._states[identity]

        logger.info(f"Logging in interactively as '{identity}'")
        context = self.manager.new_context()
        try:
            page = context.new_page()
            login(page)
            state = capture_state(context)
        finally:
            context.close()
        self.put(identity, state)
        return state

    def forget(self, identity: str) -> None:
        self._states.pop(identity, None)
        path = self.path_for(identity)
        if path and path.exists():
            path.unlink()

    def __contains__(self, identity: str) -> bool:
        return identity in self._states
