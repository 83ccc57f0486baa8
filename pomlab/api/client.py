import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from pomlab.shared.errors import ApiError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass
class ApiResponse:
    status: int
    headers: Dict[str, str]
    body: bytes = field(repr=False)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400

    @property
    def content_type(self) -> str:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value.split(";")[0].strip().lower()
        return ""

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))

    def parse(self, model: Type[M]) -> M:
        try:
            return model.model_validate(self.json())
        except (ValueError, ValidationError) as err:
            raise ApiError(f"{self.url} returned a body that is not a valid {model.__name__}: {err}", self.status) from err


class ApiClient:
    """Thin JSON client for the public REST APIs used alongside the UI tests."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, json: Any = None, **kwargs) -> ApiResponse:
        url = self._url(path)
        resp = self.session.request(method, url, json=json, timeout=self.timeout, **kwargs)
        logger.info(f"{method} {url} -> {resp.status_code}")
        return ApiResponse(status=resp.status_code, headers=dict(resp.headers), body=resp.content, url=url)

    def get(self, path: str, **kwargs) -> ApiResponse:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs) -> ApiResponse:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs) -> ApiResponse:
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> ApiResponse:
        return self.request("DELETE", path, **kwargs)

    def get_model(self, path: str, model: Type[M]) -> M:
        """GETs ``path`` and validates the body; HTTP errors raise ApiError."""
        resp = self.get(path)
        if not resp.ok:
            raise ApiError(f"GET {resp.url} failed with HTTP {resp.status}", resp.status)
        return resp.parse(model)

    def post_model(self, path: str, payload: Any, model: Type[M]) -> M:
        resp = self.post(path, json=payload)
        if not resp.ok:
            raise ApiError(f"POST {resp.url} failed with HTTP {resp.status}", resp.status)
        return resp.parse(model)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
