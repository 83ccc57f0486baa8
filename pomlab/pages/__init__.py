"""Page objects for the demo applications under test."""

from pomlab.pages.base import PageUtilities
from pomlab.pages.header import HeaderComponent
from pomlab.pages.login_page import LoginPage
from pomlab.pages.inventory_page import InventoryPage, SORT_OPTIONS
from pomlab.pages.cart_page import CartPage
from pomlab.pages.checkout_page import CheckoutPage
from pomlab.pages.register_page import HomePage, RegisterPage
from pomlab.pages.file_pages import UploadPage, DownloadPage

__all__ = [
    "PageUtilities",
    "HeaderComponent",
    "LoginPage",
    "InventoryPage",
    "SORT_OPTIONS",
    "CartPage",
    "CheckoutPage",
    "HomePage",
    "RegisterPage",
    "UploadPage",
    "DownloadPage",
]
