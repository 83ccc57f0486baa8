import pytest
import yaml

from pomlab.utils.config import SuiteConfig


def test_defaults():
    config = SuiteConfig.load()
    assert config.browser_name == "chromium"
    assert config.viewport == {"width": 1280, "height": 720}
    assert config.context_args() == {"viewport": {"width": 1280, "height": 720}, "locale": "en-US"}


def test_load_yaml(tmp_path):
    path = tmp_path / "suite.yaml"
    path.write_text(yaml.safe_dump({"browser_name": "firefox", "action_timeout_ms": 2500}))
    config = SuiteConfig.load(str(path))
    assert config.browser_name == "firefox"
    assert config.action_timeout_ms == 2500


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "suite.yaml"
    path.write_text("not_a_setting: 1\n")
    with pytest.raises(ValueError, match="not_a_setting"):
        SuiteConfig.load(str(path))


def test_ci_environment():
    config = SuiteConfig.from_env(environ={"CI": "true", "BASE_URL": "https://staging.example.com/"})
    assert config.ci
    assert config.action_timeout_ms == 10000
    assert config.viewport == {"width": 1920, "height": 1080}
    assert config.saucedemo_url == "https://staging.example.com"


def test_local_environment():
    config = SuiteConfig.from_env(environ={"HEADLESS": "0", "BROWSER": "webkit"})
    assert not config.ci
    assert config.action_timeout_ms == 5000
    assert config.headless is False
    assert config.browser_name == "webkit"
