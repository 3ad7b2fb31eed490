import pytest
from fastapi.testclient import TestClient

from itemservice.core.config import Settings
from itemservice.main import create_app
from itemservice.services.item_store import ItemStore


@pytest.fixture
def store():
    return ItemStore()


@pytest.fixture
def settings():
    return Settings(seed_sample_data=False, log_level='WARNING')


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
