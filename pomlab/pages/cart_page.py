from typing import List, Optional

from playwright.sync_api import Page

from pomlab.pages.base import compose, parse_price
from pomlab.pages.header import HeaderComponent
from pomlab.utils.config import SuiteConfig


class CartPage:
    PATH = "/cart.html"

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.header = HeaderComponent(page, self.config)
        self.cart_items = page.locator(".cart_item")
        self.item_names = page.locator(".cart_item .inventory_item_name")
        self.checkout_button = page.locator("#checkout")
        self.continue_shopping_button = page.locator("#continue-shopping")

    @property
    def url(self) -> str:
        return self.config.saucedemo_url + self.PATH

    def navigate(self):
        self.actions.navigate(self.url, ready=self.checkout_button)

    def wait_ready(self):
        self.actions.wait_for(self.checkout_button)

    def get_item_count(self) -> int:
        return self.cart_items.count()

    def get_item_names(self) -> List[str]:
        return [name.strip() for name in self.item_names.all_text_contents()]

    def get_item_price(self, index: int = 0) -> float:
        return parse_price(self.actions.text_of(self.cart_items.nth(index).locator(".inventory_item_price")))

    def remove_item(self, index: int = 0):
        self.actions.click(self.cart_items.nth(index).locator(".cart_button"))

    def proceed_to_checkout(self):
        self.actions.click(self.checkout_button)

    def continue_shopping(self):
        self.actions.click(self.continue_shopping_button)
