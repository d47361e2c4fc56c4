import re
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from scanbite.datauri import parse_data_uri

Edibility = Literal["Safe to Eat", "Wash & Eat", "Unsafe"]

BARCODE_RE = re.compile(r"^\d{6,14}$")


class CamelModel(BaseModel):
    # snake_case in Python, camelCase on the wire and in model output
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeFoodItemInput(CamelModel):
    photo_data_uri: str = Field(
        description="A photo of a food item as a base64 data URI: 'data:<mimetype>;base64,<encoded_data>'."
    )

    @field_validator("photo_data_uri")
    @classmethod
    def check_data_uri(cls, value: str) -> str:
        parse_data_uri(value)
        return value


class ChemicalResidue(CamelModel):
    name: str
    estimated_percentage: Optional[float] = None
    hazardous_effects: Optional[str] = None


class Identification(CamelModel):
    is_food_item: bool
    item_type: Optional[str] = None
    name: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0, le=1)
    dominant_colors: Optional[List[str]] = None
    is_organic: Optional[bool] = None
    organic_reasoning: Optional[str] = None


class Components(CamelModel):
    water_percentage: Optional[float] = None
    sugar_percentage: Optional[float] = None
    fiber_percentage: Optional[float] = None
    vitamins_and_minerals: Optional[str] = None


class AnalyzeFoodItemOutput(CamelModel):
    identification: Identification
    components: Optional[Components] = None
    chemical_residues: Optional[List[ChemicalResidue]] = None
    edibility: Optional[Edibility] = None


class AnalyzeBarcodeInput(CamelModel):
    barcode_number: str = Field(description="The product barcode number (e.g., UPC, EAN).")
    user_allergens: Optional[List[str]] = None

    @field_validator("barcode_number")
    @classmethod
    def check_barcode(cls, value: str) -> str:
        value = value.strip()
        if not BARCODE_RE.match(value):
            raise ValueError("barcode must be 6 to 14 digits")
        return value


class Concern(CamelModel):
    concern: str
    details: Optional[str] = None


class BarcodeAssessment(CamelModel):
    potential_concerns: List[Concern] = []
    overall_assessment: str = ""


class AnalyzeBarcodeOutput(CamelModel):
    product_name: Optional[str] = None
    brand: Optional[str] = None
    ingredients: Optional[List[str]] = None
    allergens: Optional[List[str]] = None
    potential_concerns: Optional[List[Concern]] = None
    overall_assessment: Optional[str] = None
    is_found: bool
    source: Optional[str] = None
    allergen_warning: Optional[str] = None


class Tip(BaseModel):
    title: str
    description: str
    category: str
    image: str


class SpokenSummary(BaseModel):
    text: str
