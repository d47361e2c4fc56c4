import logging
from typing import Optional

import requests

from scanbite import config
from scanbite.errors import ProductLookupError
from scanbite.ingredients import clean_ingredient, pretty_tags, split_ingredients
from scanbite.models import AnalyzeBarcodeOutput

FIELDS = (
    "code,product_name,product_name_en,generic_name,generic_name_en,"
    "brands,ingredients_text,ingredients_text_en,ingredients,allergens_tags"
)


def product_name(product: dict) -> str:
    return (
        product.get("product_name") or product.get("product_name_en")
        or product.get("generic_name_en") or product.get("generic_name")
        or "Unknown Product"
    )


def product_brand(product: dict) -> Optional[str]:
    brands = product.get("brands") or ""
    first = brands.split(",")[0].strip()
    return first or None


def product_ingredients(product: dict) -> list[str]:
    text = product.get("ingredients_text_en") or product.get("ingredients_text")
    if text:
        return split_ingredients(text)
    ingredients = []
    for item in product.get("ingredients") or []:
        name = clean_ingredient(item.get("text") or "") if isinstance(item, dict) else ""
        if name:
            ingredients.append(name)
    return ingredients


def parse_product(product: dict) -> AnalyzeBarcodeOutput:
    return AnalyzeBarcodeOutput(
        is_found=True,
        product_name=product_name(product),
        brand=product_brand(product),
        ingredients=product_ingredients(product),
        allergens=pretty_tags(product.get("allergens_tags")),
        potential_concerns=[],
        overall_assessment="",
        source="openfoodfacts",
    )


def fetch_product(barcode: str, session=None) -> Optional[AnalyzeBarcodeOutput]:
    """
    Fetch a product from the Open Food Facts v2 product endpoint.
    Returns None when the barcode is unknown; raises ProductLookupError when
    the service cannot be reached or answers with an unexpected error.
    """
    http = session or requests
    url = f"{config.OFF_BASE_URL}/api/v2/product/{barcode}"
    headers = {"User-Agent": config.OFF_USER_AGENT}
    try:
        resp = http.get(
            url,
            params={"lc": "en", "fields": FIELDS},
            headers=headers,
            timeout=config.OFF_TIMEOUT,
        )
    except requests.RequestException as e:
        raise ProductLookupError(f"Open Food Facts request failed for {barcode}: {e}") from e

    if resp.status_code == 404:
        logging.info(f"OFF: Product {barcode} not found.")
        return None
    if resp.status_code != 200:
        raise ProductLookupError(f"Open Food Facts returned HTTP {resp.status_code} for {barcode}")

    try:
        data = resp.json() or {}
    except ValueError as e:
        raise ProductLookupError(f"Open Food Facts returned invalid JSON for {barcode}") from e

    product = data.get("product")
    if data.get("status") == 0 or not product:
        logging.info(f"OFF: Product {barcode} not found ({data.get('status_verbose', 'no product')}).")
        return None
    return parse_product(product)
