from typing import List, Optional

from playwright.sync_api import Locator, Page

from pomlab.pages.base import compose, parse_price
from pomlab.pages.header import HeaderComponent
from pomlab.utils.config import SuiteConfig

SORT_OPTIONS = ("az", "za", "lohi", "hilo")


class InventoryPage:
    """Product list shown after login. Composes the header for cart access."""

    PATH = "/inventory.html"

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.header = HeaderComponent(page, self.config)
        self.title = page.locator(".title")
        self.product_items = page.locator(".inventory_item")
        self.product_names = page.locator(".inventory_item_name")
        self.sort_dropdown = page.locator(".product_sort_container")

    @property
    def url(self) -> str:
        return self.config.saucedemo_url + self.PATH

    def navigate(self):
        self.actions.navigate(self.url, ready=self.product_items.first)

    def wait_ready(self):
        """Blocks until the product list is rendered, e.g. right after a login submit."""
        self.actions.wait_for(self.product_items.first)

    def _item(self, index: int) -> Locator:
        return self.product_items.nth(index)

    def add_item_to_cart(self, index: int = 0):
        self.actions.click(self._item(index).locator("button[data-test^='add-to-cart']"))

    def remove_item_from_cart(self, index: int = 0):
        self.actions.click(self._item(index).locator("button[data-test^='remove']"))

    def get_product_name(self, index: int = 0) -> str:
        return self.actions.text_of(self.product_names.nth(index))

    def get_product_names(self) -> List[str]:
        return [name.strip() for name in self.product_names.all_text_contents()]

    def get_product_price(self, index: int = 0) -> float:
        return parse_price(self.actions.text_of(self._item(index).locator(".inventory_item_price")))

    def get_product_prices(self) -> List[float]:
        return [parse_price(t) for t in self.page.locator(".inventory_item_price").all_text_contents()]

    def get_product_count(self) -> int:
        return self.product_items.count()

    def sort_products(self, option: str):
        """Picks a sort order; the list re-renders asynchronously."""
        if option not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option '{option}', expected one of {SORT_OPTIONS}")
        self.actions.select(self.sort_dropdown, option)

    def get_title_text(self) -> str:
        return self.actions.text_of(self.title)

    def get_cart_item_count(self) -> int:
        return self.header.get_cart_item_count()
