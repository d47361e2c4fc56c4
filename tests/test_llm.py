import importlib

import pytest
from google.api_core import exceptions as google_exceptions

from scanbite import config
from scanbite.errors import ConfigurationError, ModelResponseError
from scanbite.llm import GeminiClient, parse_model_json
from scanbite.models import AnalyzeFoodItemOutput, BarcodeAssessment


class FakeResponse:
    def __init__(self, text=None, blocked=False):
        self._text = text
        self._blocked = blocked
        self.prompt_feedback = "blocked" if blocked else None

    @property
    def text(self):
        if self._blocked:
            raise ValueError("no candidates")
        return self._text


class FakeModel:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.contents = None

    def generate_content(self, contents):
        self.contents = contents
        if self.error:
            raise self.error
        return self.response


def client_with(model):
    client = GeminiClient(model_name="test-model", api_key="key")
    client._model = model
    return client


def test_parse_plain_json():
    out = parse_model_json('{"potentialConcerns": [], "overallAssessment": "Fine."}', BarcodeAssessment)
    assert out.overall_assessment == "Fine."
    assert out.potential_concerns == []


def test_parse_fenced_json():
    text = '```json\n{"identification": {"isFoodItem": false, "name": "Mug"}}\n```'
    out = parse_model_json(text, AnalyzeFoodItemOutput)
    assert out.identification.is_food_item is False
    assert out.identification.name == "Mug"


@pytest.mark.parametrize("text", [None, "", "   ", "```json\n```"])
def test_parse_no_output(text):
    assert parse_model_json(text, BarcodeAssessment) is None


def test_parse_invalid_json():
    with pytest.raises(ModelResponseError):
        parse_model_json("Sure! Here is the analysis", BarcodeAssessment)


def test_parse_schema_mismatch():
    with pytest.raises(ModelResponseError):
        parse_model_json('{"identification": {"name": "Apple"}, "edibility": "Maybe"}', AnalyzeFoodItemOutput)


def test_missing_api_key():
    client = GeminiClient(api_key="")
    with pytest.raises(ConfigurationError):
        client.generate("prompt", BarcodeAssessment)


def test_default_model(monkeypatch):
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    importlib.reload(config)
    assert config.GEMINI_MODEL == "gemini-2.5-flash"
    assert GeminiClient(api_key="key").model_name == "gemini-2.5-flash"


def test_generate_sends_prompt_and_image():
    model = FakeModel(FakeResponse('{"potentialConcerns": [{"concern": "High Sugar Content"}], "overallAssessment": "Sweet."}'))
    out = client_with(model).generate("the prompt", BarcodeAssessment, image="IMG")
    assert model.contents == ["the prompt", "IMG"]
    assert out.potential_concerns[0].concern == "High Sugar Content"


def test_generate_blocked_response_is_no_output():
    model = FakeModel(FakeResponse(blocked=True))
    assert client_with(model).generate("p", BarcodeAssessment) is None


def test_generate_wraps_api_errors():
    model = FakeModel(error=google_exceptions.ServiceUnavailable("down"))
    with pytest.raises(ModelResponseError):
        client_with(model).generate("p", BarcodeAssessment)
