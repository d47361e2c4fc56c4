from typing import Optional

from scanbite.models import AnalyzeFoodItemOutput, ChemicalResidue, Components, Identification

ORGANIC_RESIDUES = [
    ChemicalResidue(
        name="Natural Waxes (e.g., Carnauba from organic sources)",
        estimated_percentage=0.001,
        hazardous_effects="Generally recognized as safe (GRAS) for consumption, common on organic produce for protection.",
    ),
    ChemicalResidue(
        name="Kaolin Clay (trace)",
        estimated_percentage=0.01,
        hazardous_effects="Natural mineral, sometimes used in organic farming for pest control. Harmless in trace amounts.",
    ),
]

CONVENTIONAL_RESIDUES = [
    ChemicalResidue(
        name="Simulated Pesticide Alpha (e.g., Organophosphate type)",
        estimated_percentage=0.05,
        hazardous_effects=(
            "Synthetic pesticide. May cause mild irritation if not washed properly. "
            "Potential neurotoxic effects with prolonged high exposure. Wash item thoroughly."
        ),
    ),
    ChemicalResidue(
        name="Simulated Fungicide Beta (e.g., Triazole type)",
        estimated_percentage=0.02,
        hazardous_effects="Synthetic fungicide to prevent spoilage. Potential for endocrine disruption. Wash item thoroughly.",
    ),
    ChemicalResidue(
        name="Simulated Wax Coating (Petroleum-based)",
        estimated_percentage=0.1,
        hazardous_effects=(
            "Commonly used on conventional produce to extend shelf life and improve appearance. "
            "Generally considered safe in small amounts but some prefer to avoid."
        ),
    ),
]


def simulate_results(item_type: str, assumed_organic: Optional[bool] = None) -> AnalyzeFoodItemOutput:
    """
    Build a plausible analysis for a food item when the model could not give a
    confident one. Only meant for items already known to be food.
    """
    organic = assumed_organic is True
    residues = ORGANIC_RESIDUES if organic else CONVENTIONAL_RESIDUES
    if organic:
        reasoning = "Simulated as organic; the item showed a lean towards organic growing."
    else:
        reasoning = "Simulated as conventionally grown; exhibits typical appearance for such items."
    return AnalyzeFoodItemOutput(
        identification=Identification(
            is_food_item=True,
            item_type=item_type,
            name=f"Simulated {'Organic' if organic else 'Conventional'} {item_type}",
            confidence=0.5,
            dominant_colors=["simulated color 1", "simulated color 2"],
            is_organic=organic,
            organic_reasoning=reasoning,
        ),
        components=Components(
            water_percentage=80,
            sugar_percentage=7 if organic else 5,
            fiber_percentage=3,
            vitamins_and_minerals="Vitamin C, Potassium (Simulated)",
        ),
        chemical_residues=[r.model_copy() for r in residues],
        edibility="Wash & Eat",
    )
