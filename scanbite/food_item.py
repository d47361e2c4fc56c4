"""
Food item analysis
==================

Identifies the food in a photo, breaks down its components, lists likely
chemical residues and recommends an edibility status.

- analyze_food_item - runs the model on an AnalyzeFoodItemInput photo
- needs_simulation  - decides whether a food answer is too weak to show
"""

import logging

from scanbite import config
from scanbite.datauri import load_image, parse_data_uri
from scanbite.errors import ConfigurationError
from scanbite.llm import get_client
from scanbite.models import AnalyzeFoodItemInput, AnalyzeFoodItemOutput, Identification
from scanbite.prompts import FOOD_ITEM_PROMPT
from scanbite.simulate import simulate_results

SYSTEM_ERROR_NAME = "Analysis failed due to a system error."
INCOMPLETE_NAME = "Analysis incomplete. The AI could not process the image."
NON_FOOD_NAME = "Non-food item detected"
UNNAMED_FOOD_NAME = "Unnamed Food Item"


def non_food(name: str) -> AnalyzeFoodItemOutput:
    return AnalyzeFoodItemOutput(identification=Identification(is_food_item=False, name=name))


def needs_simulation(output: AnalyzeFoodItemOutput) -> bool:
    confidence = output.identification.confidence
    if confidence is not None and confidence < config.LOW_CONFIDENCE_THRESHOLD:
        return True
    return output.components is None and output.edibility is None


def analyze_food_item(flow_input: AnalyzeFoodItemInput, client=None) -> AnalyzeFoodItemOutput:
    """
    Raises InvalidDataURIError / InvalidImageError for unusable photos and
    ConfigurationError without an API key. Model failures come back as a
    non-food identification instead.
    """
    _, data = parse_data_uri(flow_input.photo_data_uri)
    image = load_image(data)
    client = client or get_client()

    try:
        output = client.generate(FOOD_ITEM_PROMPT, AnalyzeFoodItemOutput, image=image)
    except ConfigurationError:
        raise
    except Exception as e:
        logging.error(f"Error during AI food analysis: {e}")
        logging.warning("Falling back to a default non-food response due to an error.")
        return non_food(SYSTEM_ERROR_NAME)

    if output is None:
        logging.warning("AI prompt returned no output.")
        return non_food(INCOMPLETE_NAME)

    ident = output.identification
    if not ident.is_food_item:
        logging.info("AI determined item is not food.")
        return non_food(ident.name or NON_FOOD_NAME)

    if config.SIMULATE_ON_LOW_CONFIDENCE and needs_simulation(output):
        item_type = ident.item_type or ident.name or "Food Item"
        logging.info(f"Low confidence analysis ({ident.confidence}); simulating results for {item_type}.")
        return simulate_results(item_type, assumed_organic=ident.is_organic)

    return output.model_copy(update={
        "identification": ident.model_copy(update={
            "is_food_item": True,
            "name": ident.name or UNNAMED_FOOD_NAME,
        }),
    })
