from pathlib import Path

import pytest

from core.config import BUNDLED_ASSET_DIR, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.port == 8080
    assert settings.asset_dir == BUNDLED_ASSET_DIR
    assert settings.page_url() == "http://127.0.0.1:8080/thegui"


def test_overrides():
    settings = Settings.from_env({
        "GUI_HOST": "0.0.0.0",
        "GUI_PORT": "9000",
        "GUI_ASSET_DIR": "/srv/assets",
        "GUI_OPEN_BROWSER": "no",
        "GUI_BROWSER_REQUIRED": "off",
        "GUI_EXPOSE_TEMPLATES": "Yes",
        "GUI_READY_TIMEOUT": "1.5",
        "LOG_LEVEL": "debug",
    })
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.asset_dir == Path("/srv/assets")
    assert not settings.open_browser
    assert not settings.browser_required
    assert settings.expose_templates
    assert settings.ready_timeout == 1.5
    assert settings.log_level == "DEBUG"
    assert settings.page_url(9001) == "http://127.0.0.1:9001/thegui"


def test_ipv6_host_is_bracketed():
    assert Settings(host="::1").page_url() == "http://[::1]:8080/thegui"


def test_bad_port_rejected():
    with pytest.raises(ValueError):
        Settings.from_env({"GUI_PORT": "eighty"})


def test_log_level_must_be_a_level_name():
    with pytest.raises(ValueError):
        Settings.from_env({"LOG_LEVEL": "BASIC_FORMAT"})
    with pytest.raises(ValueError):
        Settings.from_env({"LOG_LEVEL": "logger"})
    assert Settings.from_env({"LOG_LEVEL": " warning "}).log_level == "WARNING"
