from scanbite.simulate import simulate_results


def test_simulate_conventional():
    out = simulate_results("Apple")
    ident = out.identification
    assert ident.is_food_item is True
    assert ident.name == "Simulated Conventional Apple"
    assert ident.is_organic is False
    assert ident.confidence == 0.5
    assert out.components.sugar_percentage == 5
    assert out.components.water_percentage == 80
    assert len(out.chemical_residues) == 3
    assert out.edibility == "Wash & Eat"


def test_simulate_organic():
    out = simulate_results("Carrot", assumed_organic=True)
    assert out.identification.name == "Simulated Organic Carrot"
    assert out.identification.is_organic is True
    assert out.components.sugar_percentage == 7
    assert [r.name for r in out.chemical_residues] == [
        "Natural Waxes (e.g., Carnauba from organic sources)",
        "Kaolin Clay (trace)",
    ]


def test_simulated_residues_are_copies():
    first = simulate_results("Pear")
    first.chemical_residues[0].name = "changed"
    assert simulate_results("Pear").chemical_residues[0].name != "changed"
