# allergen synonyms mapping and matching logic

import re

ALLERGEN_SYNONYMS = {
    "lactose": ["milk", "whey", "casein", "lactose", "cheese", "yogurt"],
    "peanut": ["peanut", "groundnut", "goober"],
    "gluten": ["wheat", "barley", "rye", "gluten", "spelt"],
    "soy": ["soy", "soya", "soybean"],
    "egg": ["egg", "albumin", "ovalbumin"],
    "tree nut": ["almond", "cashew", "walnut", "hazelnut", "pecan", "pistachio", "macadamia", "brazil nut", "tree nut"],
    "fish": ["fish", "anchovy", "cod", "haddock", "hake", "halibut", "herring", "mackerel", "pollock", "salmon", "sardine", "tilapia", "trout", "tuna"],
    "shellfish": ["shrimp", "prawn", "crab", "lobster", "scallop", "clam", "oyster", "mussel", "shellfish"],
    "sesame": ["sesame", "sesame seed"],
    "mustard": ["mustard", "mustard seed"],
    "sulfite": ["sulfite", "sulphite", "sulfur dioxide", "sulphur dioxide", "metabisulfite"],
}

# Open Food Facts tag names for the families above
ALLERGEN_ALIASES = {
    "milk": "lactose",
    "dairy": "lactose",
    "peanuts": "peanut",
    "soybeans": "soy",
    "eggs": "egg",
    "nuts": "tree nut",
    "tree nuts": "tree nut",
    "crustaceans": "shellfish",
    "molluscs": "shellfish",
    "sesame seeds": "sesame",
    "sulphur dioxide and sulphites": "sulfite",
    "sulfites": "sulfite",
}


def canonical_allergen(name: str) -> str:
    key = name.lower().strip()
    if key in ALLERGEN_SYNONYMS:
        return key
    return ALLERGEN_ALIASES.get(key, key)


def _mentions(text: str, word: str) -> bool:
    # plural-tolerant whole word match ("eggs", "almonds")
    return re.search(rf"\b{re.escape(word)}(?:e?s)?\b", text) is not None


def find_allergens(ingredients: list) -> list:
    """
    Returns the allergen families whose synonyms appear in the ingredients.
    """
    text = " | ".join(i.lower() for i in ingredients)
    found = []
    for allergen, synonyms in ALLERGEN_SYNONYMS.items():
        if any(_mentions(text, syn) for syn in synonyms):
            found.append(allergen)
    return found


def match_allergens(ingredients: list, user_allergens: list, declared: list = None) -> list:
    """
    Returns the user's allergens present in the ingredients (via synonyms)
    or in the declared allergen list.
    """
    everything = list(ingredients) + list(declared or [])
    present = set(find_allergens(everything))
    declared_keys = {canonical_allergen(d) for d in (declared or [])}
    text = " | ".join(i.lower() for i in everything)
    matched = []
    for allergen in user_allergens:
        if not allergen or not allergen.strip():
            continue
        key = canonical_allergen(allergen)
        if key in present or key in declared_keys or _mentions(text, key):
            if allergen.strip() not in matched:
                matched.append(allergen.strip())
    return matched
