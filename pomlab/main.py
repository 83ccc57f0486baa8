import click
import logging
from pathlib import Path

from pomlab.browser_interaction.auth_state import AuthStateStore, load_state, save_state
from pomlab.browser_interaction.session_manager import SessionManager, BROWSER_NAMES
from pomlab.pages.inventory_page import InventoryPage
from pomlab.pages.login_page import LoginPage
from pomlab.shared.errors import PomError
from pomlab.utils.config import SuiteConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

@click.group()
def cli():
    """pomlab CLI - capture and inspect reusable login state."""
    pass

@cli.command()
@click.option("--identity", default=None, help="Username to log in as (defaults to the configured user)")
@click.option("--password", default=None, help="Password (defaults to the configured password)")
@click.option("--out", default=None, help="Where to write the state JSON (defaults to <auth_dir>/<identity>.json)")
@click.option("--browser", "browser_name", default=None, type=click.Choice(BROWSER_NAMES), help="Browser engine")
@click.option("--headless/--no-headless", default=None, help="Run in headless mode")
@click.option("--config", "config_path", default=None, help="Path to a YAML config file")
def capture(identity, password, out, browser_name, headless, config_path):
    """Log in through the UI once and save the session state for reuse."""
    config = SuiteConfig.from_env(config_path)
    if browser_name:
        config.browser_name = browser_name
    if headless is not None:
        config.headless = headless
    identity = identity or config.username

    def login(page):
        login_page = LoginPage(page, config)
        login_page.navigate()
        login_page.login(identity, password)
        InventoryPage(page, config).wait_ready()

    logger.info(f"Capturing session for '{identity}' on {config.saucedemo_url}")
    try:
        with SessionManager(config) as manager:
            store = AuthStateStore(manager)
            state = store.ensure(identity, login)
            target = Path(out) if out else Path(config.auth_dir) / f"{identity}.json"
            save_state(state, target)
    except PomError as e:
        raise click.ClickException(str(e))
    click.echo(f"saved_to: {target}")

@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def inspect(path):
    """Summarise a saved session state file."""
    try:
        state = load_state(path)
    except PomError as e:
        raise click.ClickException(str(e))
    click.echo(f"cookies: {len(state.cookies)}")
    click.echo(f"origins: {len(state.origins)}")
    click.echo(f"localStorage_items: {state.local_storage_items}")
    for cookie in state.cookies:
        click.echo(f"  {cookie.domain}{cookie.path} {cookie.name}")

if __name__ == "__main__":
    cli()
