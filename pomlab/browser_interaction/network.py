"""Route helpers for mocking or spying on requests a page makes."""

import json
import logging
from typing import Any, Callable, List, Optional, Union

from playwright.sync_api import BrowserContext, Page, Request, Route
from pydantic import BaseModel

logger = logging.getLogger(__name__)

REGISTER_ENDPOINT = "**/api/register"

RouteTarget = Union[Page, BrowserContext]


def fulfill_json(target: RouteTarget, pattern: str, payload: Union[BaseModel, dict, list], status: int = 200) -> Callable[[Route], None]:
    """Answers every request matching ``pattern`` with ``payload`` as JSON.

    Returns the installed handler so it can be passed to ``unroute``.
    """
    if isinstance(payload, BaseModel):
        body = payload.model_dump_json(by_alias=True)
    else:
        body = json.dumps(payload)

    def handler(route: Route):
        logger.info(f"Fulfilling {route.request.method} {route.request.url} with canned {status}")
        route.fulfill(status=status, content_type="application/json", body=body)

    target.route(pattern, handler)
    return handler


class RequestSpy:
    """Records requests matching a URL pattern.

    With ``abort=True`` the requests never reach the network, which is what a
    test wants when it asserts that a call should not happen at all. Otherwise
    they fall back to whatever other route or the network would answer.
    """

    def __init__(self, pattern: str, abort: bool = True):
        self.pattern = pattern
        self.abort = abort
        self.requests: List[Request] = []
        self._target: Optional[RouteTarget] = None

    def _handle(self, route: Route):
        self.requests.append(route.request)
        logger.info(f"Spy caught {route.request.method} {route.request.url}")
        if self.abort:
            route.abort()
        else:
            # Hand over to the next matching handler (context routes included)
            route.fallback()

    def install(self, target: RouteTarget) -> "RequestSpy":
        target.route(self.pattern, self._handle)
        self._target = target
        return self

    def uninstall(self):
        if self._target is not None:
            self._target.unroute(self.pattern, self._handle)
            self._target = None

    @property
    def count(self) -> int:
        return len(self.requests)

    def json_bodies(self) -> List[Any]:
        return [r.post_data_json for r in self.requests if r.post_data]

    def __enter__(self):
        if self._target is None:
            raise RuntimeError(f"RequestSpy for {self.pattern} used before install(); it would see no requests")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.uninstall()
