"""BugBank home page and its registration card."""

from typing import List, Optional

from playwright.sync_api import Locator, Page

from pomlab.pages.base import compose
from pomlab.utils.config import SuiteConfig


class HomePage:
    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.heading = page.locator("h1")
        self.register_button = page.get_by_role("button", name="Registrar")

    def navigate(self):
        self.actions.navigate(self.config.bugbank_url, ready=self.heading)

    def get_heading(self) -> str:
        return self.actions.text_of(self.heading)

    def open_registration(self) -> "RegisterPage":
        """Opens the registration card and waits for it, since it is rendered on demand."""
        self.actions.click(self.register_button)
        register = RegisterPage(self.page, self.config)
        register.wait_ready()
        return register


class RegisterPage:
    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        # The home page also has a login card with the same placeholders
        self.card = page.locator(".card__register")
        self.name_input = self.card.get_by_placeholder("Informe seu nome")
        self.email_input = self.card.get_by_placeholder("Informe seu e-mail")
        self.password_input = self.card.get_by_placeholder("Informe sua senha")
        self.confirmation_input = self.card.get_by_placeholder("Informe a confirmação da senha")
        self.balance_toggle = page.locator("#toggleAddBalance")
        self.submit_button = self.card.get_by_role("button", name="Cadastrar")
        self.password_toggle = self.card.locator(
            "button:has(svg), [aria-label*=senha], [aria-label*=password]"
        ).first
        self.warnings = self.card.locator(".input__warging")
        self.modal_text = page.locator("#modalText")
        self.close_modal_button = page.locator("#btnCloseModal")

    def wait_ready(self):
        self.actions.wait_for(self.card)

    def fill_form(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        confirmation: Optional[str] = None,
    ):
        """Fills the given fields and leaves the rest untouched."""
        for locator, value in (
            (self.name_input, name),
            (self.email_input, email),
            (self.password_input, password),
            (self.confirmation_input, confirmation),
        ):
            if value is not None:
                self.actions.fill(locator, value)

    def toggle_balance(self):
        self.actions.click(self.balance_toggle)

    def submit(self):
        self.actions.click(self.submit_button)

    def register(self, name: str, email: str, password: str, confirmation: Optional[str] = None, with_balance: bool = False):
        self.fill_form(name, email, password, password if confirmation is None else confirmation)
        if with_balance:
            self.toggle_balance()
        self.submit()

    def get_modal_text(self) -> str:
        self.actions.wait_for(self.modal_text)
        return self.actions.text_of(self.modal_text)

    def close_modal(self):
        self.actions.click(self.close_modal_button)

    def validation_message(self, text: str) -> Locator:
        return self.card.get_by_text(text, exact=True)

    def get_validation_messages(self) -> List[str]:
        return [t.strip() for t in self.warnings.all_text_contents() if t.strip()]

    def get_password_input_type(self) -> Optional[str]:
        return self.password_input.get_attribute("type")

    def toggle_password_visibility(self) -> bool:
        """Clicks the show/hide password control if this build of the page has one."""
        return self.actions.click_if_visible(self.password_toggle)
