import pytest

from scanbite import config
from scanbite.datauri import to_data_uri
from tests.helpers import png_bytes


@pytest.fixture
def photo_png():
    return png_bytes()


@pytest.fixture
def photo_uri(photo_png):
    return to_data_uri(photo_png, "image/png")


@pytest.fixture
def mock_products(monkeypatch):
    monkeypatch.setattr(config, "PRODUCT_SOURCE", "mock")


@pytest.fixture(autouse=True)
def simulation_defaults(monkeypatch):
    monkeypatch.setattr(config, "LOW_CONFIDENCE_THRESHOLD", 0.7)
    monkeypatch.setattr(config, "SIMULATE_ON_LOW_CONFIDENCE", True)
