import pytest
import requests

from scanbite import config, openfoodfacts
from scanbite.errors import ProductLookupError
from tests.helpers import FakeResponse

NUTELLA = {
    "code": "3017620425035",
    "status": 1,
    "product": {
        "product_name": "Nutella",
        "brands": "Ferrero, Nutella",
        "ingredients_text_en": "Sugar, palm oil, _hazelnuts_ 13%, skimmed _milk_ powder 8.7%, fat-reduced cocoa 7.4%, emulsifier: lecithins (_soya_), vanillin.",
        "allergens_tags": ["en:milk", "en:nuts", "en:soybeans"],
    },
}


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def install(response):
        def fake_get(url, **kwargs):
            recorded.append((url, kwargs))
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(openfoodfacts.requests, "get", fake_get)
        return recorded
    return install


def test_fetch_product(calls):
    recorded = calls(FakeResponse(200, NUTELLA))
    product = openfoodfacts.fetch_product("3017620425035")
    assert product.is_found is True
    assert product.product_name == "Nutella"
    assert product.brand == "Ferrero"
    assert product.ingredients == [
        "Sugar",
        "palm oil",
        "hazelnuts 13%",
        "skimmed milk powder 8.7%",
        "fat-reduced cocoa 7.4%",
        "emulsifier: lecithins (soya)",
        "vanillin",
    ]
    assert product.allergens == ["Milk", "Nuts", "Soybeans"]
    assert product.source == "openfoodfacts"

    url, kwargs = recorded[0]
    assert url == f"{config.OFF_BASE_URL}/api/v2/product/3017620425035"
    assert kwargs["params"]["lc"] == "en"
    assert kwargs["timeout"] == config.OFF_TIMEOUT
    assert "User-Agent" in kwargs["headers"]


def test_structured_ingredients_and_name_fallback(calls):
    calls(FakeResponse(200, {"status": 1, "product": {
        "generic_name": "Chocolate spread",
        "ingredients": [{"text": "_Sugar_"}, {"text": ""}, {"text": "Cocoa."}],
    }}))
    product = openfoodfacts.fetch_product("12345678")
    assert product.product_name == "Chocolate spread"
    assert product.brand is None
    assert product.ingredients == ["Sugar", "Cocoa"]
    assert product.allergens == []


def test_unknown_name(calls):
    calls(FakeResponse(200, {"status": 1, "product": {"code": "1"}}))
    assert openfoodfacts.fetch_product("12345678").product_name == "Unknown Product"


@pytest.mark.parametrize("response", [
    FakeResponse(404, {"status": 0}),
    FakeResponse(200, {"status": 0, "status_verbose": "product not found"}),
    FakeResponse(200, {"status": 1}),
])
def test_not_found(calls, response):
    calls(response)
    assert openfoodfacts.fetch_product("12345678") is None


@pytest.mark.parametrize("response", [
    FakeResponse(503, None),
    FakeResponse(200, json_error=True),
    requests.ConnectionError("offline"),
    requests.Timeout("slow"),
])
def test_lookup_errors(calls, response):
    calls(response)
    with pytest.raises(ProductLookupError):
        openfoodfacts.fetch_product("12345678")
