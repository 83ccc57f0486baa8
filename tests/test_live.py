"""Smoke tests against the public demo sites. Run with ``pytest --live``."""

import pytest
from playwright.sync_api import expect

from pomlab.api.client import ApiClient
from pomlab.browser_interaction.auth_state import AuthStateStore, verify_authenticated
from pomlab.browser_interaction.session_manager import SessionManager
from pomlab.pages import InventoryPage, LoginPage
from pomlab.shared.schemas import ErrorPayload, LoginToken, User
from pomlab.utils.config import SuiteConfig

from demo_sites import saucedemo_login

pytestmark = pytest.mark.live


@pytest.fixture(scope="module")
def live_config(tmp_path_factory):
    config = SuiteConfig.from_env()
    config.screenshot_dir = str(tmp_path_factory.mktemp("live-screenshots"))
    return config


@pytest.fixture(scope="module")
def live_manager(live_config):
    with SessionManager(live_config) as manager:
        yield manager


def test_saucedemo_login_and_reuse(live_manager, live_config):
    store = AuthStateStore(live_manager)
    state = store.ensure("standard_user", saucedemo_login(live_config, "standard_user"))
    assert state.cookie("session-username") is not None

    for _ in range(2):
        context = live_manager.new_context(state=state)
        try:
            page = context.new_page()
            inventory = InventoryPage(page, live_config)
            verify_authenticated(
                page,
                inventory.url,
                ready=inventory.product_items.first,
                login_marker=LoginPage(page, live_config).login_button,
            )
            expect(inventory.title).to_have_text("Products")
            assert inventory.get_product_count() == 6
        finally:
            context.close()


def test_jsonplaceholder_user(live_config):
    with ApiClient(live_config.api_url) as client:
        user = client.get_model("users/1", User)
    assert user.id == 1
    assert "@" in user.email


def test_reqres_login():
    with ApiClient("https://reqres.in/api") as client:
        client.session.headers["x-api-key"] = "reqres-free-v1"
        token = client.post_model("login", {"email": "eve.holt@reqres.in", "password": "cityslicka"}, LoginToken)
        assert token.token

        resp = client.post("register", json={"email": "sydney@fife"})
    assert resp.status == 400
    assert resp.parse(ErrorPayload).error
