import pytest
from pomlab.browser_interaction.session_manager import SessionManager
from pomlab.utils.config import SuiteConfig

def test_session_lifecycle():
    """Test that the session manager can start and stop a browser."""
    manager = SessionManager(SuiteConfig(headless=True))
    try:
        browser = manager.start()
        assert browser is not None
        assert manager.start() is browser
        context = manager.new_context()
        assert context in manager.contexts
    finally:
        manager.close()
        assert manager.contexts == []
        assert manager.browser is None
        assert manager.playwright is None

def test_unknown_browser_rejected():
    with pytest.raises(ValueError, match="Unknown browser"):
        SessionManager(SuiteConfig(browser_name="netscape"))

def test_closed_context_is_forgotten():
    with SessionManager(SuiteConfig(headless=True)) as manager:
        context = manager.new_context()
        context.close()
        assert context not in manager.contexts

def test_context_args_and_initializers():
    """Every context gets the configured viewport and runs registered initializers."""
    seen = []
    config = SuiteConfig(headless=True, viewport_width=800, viewport_height=600)
    with SessionManager(config) as manager:
        manager.add_context_initializer(seen.append)
        page = manager.new_page()
        assert page.viewport_size == {"width": 800, "height": 600}
        assert seen == [page.context]

def test_contexts_are_isolated():
    with SessionManager(SuiteConfig(headless=True)) as session:
        first = session.new_page()
        second = session.new_page()
        first.set_content("<h1>one</h1>")
        first.context.add_cookies([{"name": "k", "value": "v", "url": "https://example.com"}])
        assert first.context.cookies() != []
        assert second.context.cookies() == []

def test_failed_initializer_closes_context():
    """A context whose setup fails is closed, not left open and untracked."""
    def broken_route_install(context):
        raise RuntimeError("route install failed")

    with SessionManager(SuiteConfig(headless=True)) as manager:
        manager.add_context_initializer(broken_route_install)
        with pytest.raises(RuntimeError, match="route install failed"):
            manager.new_context()
        assert manager.contexts == []
        assert manager.browser.contexts == manager.contexts
