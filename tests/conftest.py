import pytest

from storefront import create_app
from storefront.db import init_db


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "users.db")


@pytest.fixture
def storage(db_path):
    storage = init_db(db_path)
    yield storage
    storage.close()


@pytest.fixture
def preloaded_storage(db_path):
    storage = init_db(db_path, preload=True)
    yield storage
    storage.close()


@pytest.fixture
def client(storage):
    app = create_app(storage)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def preloaded_client(preloaded_storage):
    app = create_app(preloaded_storage)
    app.config["TESTING"] = True
    return app.test_client()
