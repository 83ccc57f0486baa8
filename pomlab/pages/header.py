from typing import Optional

from playwright.sync_api import Page

from pomlab.pages.base import compose
from pomlab.utils.config import SuiteConfig


class HeaderComponent:
    """SauceDemo header bar shown on every page after login."""

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.cart_link = page.locator(".shopping_cart_link")
        self.cart_badge = page.locator(".shopping_cart_badge")
        self.menu_button = page.locator("#react-burger-menu-btn")

    def get_cart_item_count(self) -> int:
        # The badge is removed from the DOM when the cart is empty; read it once
        texts = self.cart_badge.all_text_contents()
        if not texts:
            return 0
        return int(texts[0].strip() or "0")

    def go_to_cart(self):
        self.actions.click(self.cart_link)

    def open_menu(self):
        self.actions.click(self.menu_button)
