from fuzzywuzzy import fuzz

from scanbite.allergens import find_allergens
from scanbite.ingredients import additive_category
from scanbite.models import Concern

SUGARS = ["sugar", "corn syrup", "glucose syrup", "high fructose corn syrup", "dextrose", "fructose", "sucrose", "invert syrup"]

ARTIFICIAL_SWEETENERS = ["aspartame", "sucralose", "acesulfame potassium", "acesulfame k", "saccharin", "cyclamate", "neotame"]

ARTIFICIAL_COLORS = ["red 40", "yellow 5", "yellow 6", "blue 1", "blue 2", "red 3", "green 3", "artificial color", "artificial colour", "tartrazine", "allura red"]

PRESERVATIVES = ["preservative", "benzoate", "sorbate", "nitrite", "nitrate", "sulfite", "sulphite", "propionate", "bht", "bha", "tbhq"]

FLAVOR_ENHANCERS = ["monosodium glutamate", "msg", "disodium inosinate", "disodium guanylate", "ajinomoto"]

FUZZY_THRESHOLD = 90


def _contains(ingredient: str, terms) -> list:
    name = ingredient.lower()
    return [t for t in terms if t in name]


def _fuzzy_hit(ingredient: str, terms) -> str:
    """Best term matching a possibly misspelt ingredient ('aspartme'), or ''."""
    name = ingredient.lower()
    for term in terms:
        if term in name or fuzz.ratio(term, name) >= FUZZY_THRESHOLD:
            return term
        # partial_ratio scores 100 for any name that is a piece of the term
        if len(name) >= len(term) and fuzz.partial_ratio(term, name) >= FUZZY_THRESHOLD:
            return term
    return ""


def _is_additive(ingredient: str, category: str) -> bool:
    return additive_category(ingredient) == category


def detect_concerns(ingredients: list, allergens: list = None) -> list:
    """Rule-based concerns for an ingredient list, in label order of importance."""
    concerns = []
    if not ingredients:
        return concerns

    leading = ingredients[:3]
    syrups = [i for i in leading if _contains(i, ["corn syrup"])]
    sugars = [i for i in leading if _contains(i, SUGARS)]
    if syrups:
        concerns.append(Concern(concern="Sweetened with Corn Syrup", details=f"Corn syrup is among the first ingredients: {', '.join(syrups)}."))
    if sugars:
        concerns.append(Concern(concern="High Sugar Content", details=f"Sugars are among the first ingredients: {', '.join(sugars)}."))

    colors = [i for i in ingredients if _contains(i, ARTIFICIAL_COLORS) or _is_additive(i, "Colours")]
    if colors:
        concerns.append(Concern(concern="Contains Artificial Colors", details=", ".join(colors)))

    for ingredient in ingredients:
        if _fuzzy_hit(ingredient, ARTIFICIAL_SWEETENERS) or _is_additive(ingredient, "Sweeteners"):
            concerns.append(Concern(concern=f"Contains Artificial Sweetener: {ingredient}"))

    preservatives = [i for i in ingredients if _contains(i, PRESERVATIVES) or _is_additive(i, "Preservatives")]
    if len(preservatives) > 1:
        concerns.append(Concern(concern="Multiple Preservatives", details=", ".join(preservatives)))
    elif preservatives:
        concerns.append(Concern(concern="Contains Preservative", details=preservatives[0]))

    enhancers = [i for i in ingredients if _fuzzy_hit(i, FLAVOR_ENHANCERS) or _is_additive(i, "Flavor Enhancers")]
    if enhancers:
        concerns.append(Concern(concern="Contains Flavor Enhancers", details=", ".join(enhancers)))

    present = find_allergens(list(ingredients) + list(allergens or []))
    if present:
        concerns.append(Concern(
            concern="Common Allergen Present",
            details=f"Contains or may contain: {', '.join(present)}.",
        ))
    return concerns
