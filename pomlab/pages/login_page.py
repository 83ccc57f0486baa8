from typing import Optional

from playwright.sync_api import Page

from pomlab.pages.base import compose
from pomlab.utils.config import SuiteConfig


class LoginPage:
    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.username_input = page.locator("#user-name")
        self.password_input = page.locator("#password")
        self.login_button = page.locator("#login-button")
        self.error_message = page.locator('[data-test="error"]')

    @property
    def url(self) -> str:
        return self.config.saucedemo_url + "/"

    def navigate(self):
        self.actions.navigate(self.url, ready=self.login_button)

    def login(self, username: Optional[str] = None, password: Optional[str] = None):
        """Submits the login form. Waiting for the resulting page is up to the caller."""
        self.actions.fill(self.username_input, self.config.username if username is None else username)
        self.actions.fill(self.password_input, self.config.password if password is None else password)
        self.actions.click(self.login_button)

    def get_error_message(self) -> str:
        self.actions.wait_for(self.error_message)
        return self.actions.text_of(self.error_message)

    def is_error_message_visible(self) -> bool:
        return self.error_message.is_visible()
