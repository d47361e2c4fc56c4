import io

from PIL import Image


class FakeClient:
    """Stands in for GeminiClient; hands out queued answers in order."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def generate(self, prompt, schema, image=None):
        self.calls.append({"prompt": prompt, "schema": schema, "image": image})
        answer = self.answers.pop(0) if self.answers else None
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, dict):
            return schema.model_validate(answer)
        return answer


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise ValueError("not json")
        return self._payload


def png_bytes(color=(200, 30, 30)):
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buf, format="PNG")
    return buf.getvalue()


APPLE = {
    "identification": {
        "isFoodItem": True,
        "itemType": "fruit",
        "name": "Red Apple",
        "confidence": 0.92,
        "dominantColors": ["red", "yellow"],
        "isOrganic": False,
        "organicReasoning": "Uniform shape and glossy finish.",
    },
    "components": {
        "waterPercentage": 86,
        "sugarPercentage": 10.4,
        "fiberPercentage": 2.4,
        "vitaminsAndMinerals": "Vitamin C, Potassium",
    },
    "chemicalResidues": [
        {"name": "Chlorpyrifos (Organophosphate Pesticide)", "estimatedPercentage": 0.01, "hazardousEffects": "Neurotoxic at high exposure."},
    ],
    "edibility": "Wash & Eat",
}
