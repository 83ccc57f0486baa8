from typing import Optional


class PomError(Exception):
    """Base class for every error raised by pomlab."""


class NavigationTimeout(PomError):
    """A page did not reach its ready condition within the bound."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ActionTimeout(PomError):
    """An interaction target never became actionable within the bound."""

    def __init__(self, message: str, action: Optional[str] = None):
        super().__init__(message)
        self.action = action


class CaptureError(PomError):
    """Session state could not be read from a browsing context."""


class SeedError(PomError):
    """Session state could not be used to seed a browsing context."""


class ApiError(PomError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
