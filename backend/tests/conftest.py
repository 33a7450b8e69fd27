import pytest
from fastapi.testclient import TestClient

from inventory_api.handler import ItemHandler
from inventory_api.main import create_app
from inventory_api.storage import InventoryStore


@pytest.fixture()
def store():
    return InventoryStore()


@pytest.fixture()
def handler(store):
    return ItemHandler(store)


@pytest.fixture()
def client(store):
    return TestClient(create_app(store))
