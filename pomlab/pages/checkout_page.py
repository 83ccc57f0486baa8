from typing import Optional

from playwright.sync_api import Page

from pomlab.pages.base import compose
from pomlab.utils.config import SuiteConfig


class CheckoutPage:
    """Checkout steps one (customer info), two (overview) and complete."""

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.first_name_input = page.locator("#first-name")
        self.last_name_input = page.locator("#last-name")
        self.postal_code_input = page.locator("#postal-code")
        self.continue_button = page.locator("#continue")
        self.finish_button = page.locator("#finish")
        self.complete_header = page.locator(".complete-header")
        self.error_message = page.locator('[data-test="error"]')

    def fill_information(self, first_name: str, last_name: str, postal_code: str):
        self.actions.fill(self.first_name_input, first_name)
        self.actions.fill(self.last_name_input, last_name)
        self.actions.fill(self.postal_code_input, postal_code)

    def continue_to_overview(self):
        self.actions.click(self.continue_button)

    def finish(self):
        self.actions.click(self.finish_button)

    def get_complete_header(self) -> str:
        self.actions.wait_for(self.complete_header)
        return self.actions.text_of(self.complete_header)

    def get_error_message(self) -> str:
        self.actions.wait_for(self.error_message)
        return self.actions.text_of(self.error_message)
