from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal


class Cookie(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    value: str
    domain: str
    path: str = "/"
    expires: float = -1
    http_only: bool = Field(default=False, alias="httpOnly")
    secure: bool = False
    same_site: Literal["Strict", "Lax", "None"] = Field(default="Lax", alias="sameSite")


class StorageItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class OriginState(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin: str
    local_storage: List[StorageItem] = Field(default_factory=list, alias="localStorage")


class SessionState(BaseModel):
    """Snapshot of a context's cookies and localStorage, as Playwright serializes it."""

    model_config = ConfigDict(frozen=True)

    cookies: List[Cookie] = Field(default_factory=list)
    origins: List[OriginState] = Field(default_factory=list)

    def to_playwright(self) -> dict:
        """Dict accepted by ``Browser.new_context(storage_state=...)``."""
        return self.model_dump(by_alias=True)

    def cookie(self, name: str) -> Optional[Cookie]:
        for c in self.cookies:
            if c.name == name:
                return c
        return None

    def local_storage(self, origin: str) -> dict:
        for o in self.origins:
            if o.origin.rstrip("/") == origin.rstrip("/"):
                return {item.name: item.value for item in o.local_storage}
        return {}

    @property
    def local_storage_items(self) -> int:
        return sum(len(o.local_storage) for o in self.origins)


# REST payloads used by the API client

class User(BaseModel):
    id: int
    name: str
    email: str
    username: Optional[str] = None


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    body: str
    user_id: int = Field(alias="userId")


class LoginToken(BaseModel):
    token: str


class ErrorPayload(BaseModel):
    error: str


class RegisterResult(BaseModel):
    """Body returned by the BugBank registration endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    account_number: Optional[str] = Field(default=None, alias="accountNumber")
