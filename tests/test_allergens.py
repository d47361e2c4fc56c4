from scanbite.allergens import canonical_allergen, find_allergens, match_allergens


def test_find_allergens_uses_synonyms():
    found = find_allergens(["Whole Wheat Flour", "Eggs", "Almonds", "Salt"])
    assert found == ["gluten", "egg", "tree nut"]


def test_find_allergens_whole_words_only():
    assert find_allergens(["Eggplant", "Codfish-free broth"]) == []


def test_canonical_allergen():
    assert canonical_allergen("Milk") == "lactose"
    assert canonical_allergen(" peanuts ") == "peanut"
    assert canonical_allergen("sesame") == "sesame"


def test_match_user_allergens_in_ingredients():
    matched = match_allergens(["Skimmed Milk Powder", "Sugar"], ["milk", "peanut"])
    assert matched == ["milk"]


def test_match_declared_allergens():
    matched = match_allergens(["Roasted Nuts"], ["peanut", ""], declared=["Peanuts"])
    assert matched == ["peanut"]


def test_match_plain_word_in_declared_text():
    matched = match_allergens(["Oats"], ["wheat"], declared=["May contain wheat"])
    assert matched == ["wheat"]


def test_no_match():
    assert match_allergens(["Water"], ["soy"]) == []
