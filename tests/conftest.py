import pytest

from pomlab.browser_interaction.auth_state import AuthStateStore
from pomlab.browser_interaction.session_manager import SessionManager
from pomlab.utils.config import SuiteConfig

from demo_sites import install_demo_sites, saucedemo_login


def pytest_addoption(parser):
    parser.addoption("--live", action="store_true", default=False, help="Also run tests against the real demo sites")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="needs --live and network access")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def config(tmp_path_factory):
    artifacts = tmp_path_factory.mktemp("artifacts")
    return SuiteConfig(
        headless=True,
        screenshot_dir=str(artifacts / "screenshots"),
        download_dir=str(artifacts / "downloads"),
        auth_dir=str(artifacts / ".auth"),
    )


@pytest.fixture(scope="module")
def manager(config):
    with SessionManager(config) as manager:
        manager.add_context_initializer(lambda context: install_demo_sites(context, config))
        yield manager


@pytest.fixture
def context(manager):
    context = manager.new_context()
    yield context
    context.close()


@pytest.fixture
def page(context):
    page = context.new_page()
    yield page
    # Mocks installed by a test must not leak into the next one
    page.unroute_all()


@pytest.fixture(scope="module")
def auth_store(manager):
    return AuthStateStore(manager)


@pytest.fixture(scope="module")
def standard_state(auth_store, config):
    return auth_store.ensure("standard_user", saucedemo_login(config, "standard_user"))


@pytest.fixture(scope="module")
def problem_state(auth_store, config):
    return auth_store.ensure("problem_user", saucedemo_login(config, "problem_user"))
