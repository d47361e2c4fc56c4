import logging
from typing import Optional

from scanbite import config
from scanbite.allergens import match_allergens
from scanbite.concerns import detect_concerns
from scanbite.errors import ProductLookupError
from scanbite.llm import get_client
from scanbite.models import AnalyzeBarcodeInput, AnalyzeBarcodeOutput, BarcodeAssessment
from scanbite.openfoodfacts import fetch_product
from scanbite.products import fetch_mock_product
from scanbite.prompts import build_barcode_prompt

CANNOT_ANALYZE = "Cannot analyze product due to missing information or product not found."
AI_FAILED = "AI analysis failed to generate a response."


def lookup_product(barcode: str) -> AnalyzeBarcodeOutput:
    """Open Food Facts first (when enabled), the mock table otherwise or as fallback."""
    if config.PRODUCT_SOURCE == "openfoodfacts":
        try:
            product = fetch_product(barcode)
            if product:
                return product
        except ProductLookupError as e:
            logging.warning(f"OFF lookup failed, using mock products: {e}")
    return fetch_mock_product(barcode)


def allergen_warning(product: AnalyzeBarcodeOutput, user_allergens) -> Optional[str]:
    if not user_allergens:
        return None
    matched = match_allergens(product.ingredients or [], user_allergens, product.allergens or [])
    if matched:
        return f"Warning: Product contains your allergens: {', '.join(matched)}"
    return None


def analyze_barcode(flow_input: AnalyzeBarcodeInput, client=None) -> AnalyzeBarcodeOutput:
    # Step 1: get product information
    product = lookup_product(flow_input.barcode_number)
    warning = allergen_warning(product, flow_input.user_allergens)

    if not product.is_found or not product.ingredients:
        return product.model_copy(update={
            "product_name": product.product_name or "Product not found",
            "potential_concerns": [],
            "overall_assessment": product.overall_assessment or CANNOT_ANALYZE,
            "allergen_warning": warning,
        })

    # Step 2: ask the model about the ingredients
    assessment = None
    try:
        client = client or get_client()
        assessment = client.generate(build_barcode_prompt(product), BarcodeAssessment)
    except Exception as e:
        logging.error(f"Error during AI barcode analysis for {flow_input.barcode_number}: {e}")

    if assessment is None:
        return product.model_copy(update={
            "potential_concerns": detect_concerns(product.ingredients, product.allergens),
            "overall_assessment": AI_FAILED,
            "allergen_warning": warning,
        })

    # product identity always comes from the lookup, never from the model
    return product.model_copy(update={
        "potential_concerns": assessment.potential_concerns,
        "overall_assessment": assessment.overall_assessment,
        "is_found": product.is_found,
        "allergen_warning": warning,
    })
