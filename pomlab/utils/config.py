import os
import yaml
from dataclasses import dataclass, fields
from typing import Optional, Mapping


@dataclass
class SuiteConfig:
    # Browser
    browser_name: str = "chromium"  # "chromium", "firefox" or "webkit"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720
    locale: str = "en-US"

    # Sites under test
    saucedemo_url: str = "https://www.saucedemo.com"
    bugbank_url: str = "https://bugbank.netlify.app"
    the_internet_url: str = "https://the-internet.herokuapp.com"
    api_url: str = "https://jsonplaceholder.typicode.com"

    # Bounds (milliseconds)
    action_timeout_ms: int = 5000
    navigation_timeout_ms: int = 10000

    # Credentials
    username: str = "standard_user"
    password: str = "secret_sauce"

    # Paths
    screenshot_dir: str = "test-results/screenshots"
    download_dir: str = "downloads"
    auth_dir: str = ".auth"

    ci: bool = False

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}

    def context_args(self) -> dict:
        """Keyword arguments for ``Browser.new_context``."""
        return {"viewport": self.viewport, "locale": self.locale}

    @classmethod
    def load(cls, path: Optional[str] = None) -> "SuiteConfig":
        if not path:
            return cls()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls, path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> "SuiteConfig":
        """Load ``path`` (if any) and apply CI, BASE_URL, HEADLESS and BROWSER overrides."""
        env = os.environ if environ is None else environ
        config = cls.load(path)

        if env.get("CI", "").lower() == "true":
            config.ci = True
            # CI runners are slower and render at desktop resolution
            config.action_timeout_ms = max(config.action_timeout_ms, 10000)
            config.navigation_timeout_ms = max(config.navigation_timeout_ms, 20000)
            config.viewport_width, config.viewport_height = 1920, 1080
        if env.get("BASE_URL"):
            config.saucedemo_url = env["BASE_URL"].rstrip("/")
        if env.get("HEADLESS"):
            config.headless = env["HEADLESS"].lower() not in ("0", "false", "no")
        if env.get("BROWSER"):
            config.browser_name = env["BROWSER"]
        return config
