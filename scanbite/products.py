from scanbite.models import AnalyzeBarcodeOutput

# Simulated product database
MOCK_PRODUCTS = {
    "123456789012": {
        "is_found": True,
        "product_name": "Super Sweet Cereal",
        "brand": "KidsCo",
        "ingredients": [
            "Whole Grain Oats",
            "Sugar",
            "Corn Syrup",
            "Artificial Colors (Red 40, Yellow 5)",
            "Artificial Flavors",
            "Salt",
            "Vitamin B12",
        ],
        "allergens": ["May contain wheat"],
    },
    "987654321098": {
        "is_found": True,
        "product_name": "Organic Veggie Crisps",
        "brand": "Healthy Snacks Inc.",
        "ingredients": ["Organic Potatoes", "Organic Sunflower Oil", "Sea Salt", "Organic Rosemary Extract"],
        "allergens": [],
    },
    "112233445566": {
        "is_found": True,
        "product_name": "Diet Soda Blast",
        "brand": "ZeroCal",
        "ingredients": [
            "Carbonated Water",
            "Caramel Color",
            "Aspartame",
            "Phosphoric Acid",
            "Potassium Benzoate (Preservative)",
            "Natural Flavors",
            "Caffeine",
        ],
        "allergens": [],
    },
    "000000000000": {
        "is_found": False,
        "product_name": "Unknown Product",
    },
}


def fetch_mock_product(barcode: str) -> AnalyzeBarcodeOutput:
    """Look a barcode up in the built-in product table."""
    info = MOCK_PRODUCTS.get(barcode)
    if info and info.get("is_found"):
        return AnalyzeBarcodeOutput(
            is_found=True,
            product_name=info.get("product_name") or "N/A",
            brand=info.get("brand") or "N/A",
            ingredients=list(info.get("ingredients") or []),
            allergens=list(info.get("allergens") or []),
            potential_concerns=[],
            overall_assessment="",
            source="mock",
        )
    return AnalyzeBarcodeOutput(
        is_found=False,
        product_name="Product not found",
        brand="",
        ingredients=[],
        allergens=[],
        potential_concerns=[],
        overall_assessment="Could not retrieve information for this barcode.",
        source="mock",
    )
