from scanbite.ingredients import additive_category, pretty_tags, split_ingredients, strip_tag_prefix


def test_split_simple_list():
    assert split_ingredients("Water, Sugar; Salt") == ["Water", "Sugar", "Salt"]


def test_split_keeps_bracketed_groups_together():
    text = "Vegetable[Tomato Paste(36%)],Water,Stabilizers(INS 412,INS 415),Herbs(0.8%)."
    assert split_ingredients(text) == [
        "Vegetable[Tomato Paste(36%)]",
        "Water",
        "Stabilizers(INS 412,INS 415)",
        "Herbs(0.8%)",
    ]


def test_split_cleans_openfoodfacts_markup():
    text = "Sugar,  _milk_   powder , cocoa butter, , emulsifier (_soy_ lecithin)."
    assert split_ingredients(text) == ["Sugar", "milk powder", "cocoa butter", "emulsifier (soy lecithin)"]


def test_split_empty():
    assert split_ingredients("") == []
    assert split_ingredients(None) == []


def test_tag_prefix():
    assert strip_tag_prefix("en:milk") == "milk"
    assert strip_tag_prefix("fr:lait") == "lait"
    assert strip_tag_prefix("gluten") == "gluten"


def test_pretty_tags_dedupes_in_order():
    assert pretty_tags(["en:tree-nuts", "en:milk", "fr:milk", None, ""]) == ["Tree Nuts", "Milk"]
    assert pretty_tags(None) == []


def test_additive_category():
    assert additive_category("Preservative(INS 211)") == "Preservatives"
    assert additive_category("e-951") == "Sweeteners"
    assert additive_category("E150d") == "Colours"
    assert additive_category("E1520") == "Food Additive"
    assert additive_category("salt") is None
