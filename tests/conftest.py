import pytest

from core import AssetStore, Core
from core.config import BUNDLED_ASSET_DIR
from web.app import create_app


@pytest.fixture
def store():
    return AssetStore.from_directory(BUNDLED_ASSET_DIR)


@pytest.fixture
def core(store):
    return Core.from_store(store)


@pytest.fixture
def app(core):
    flask_app = create_app(core)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
