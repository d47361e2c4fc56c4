import json
import logging
import re
from typing import Optional, Type, TypeVar

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import BaseModel, ValidationError

from scanbite import config
from scanbite.errors import ConfigurationError, ModelResponseError

T = TypeVar("T", bound=BaseModel)

FENCE_RE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


def parse_model_json(text: Optional[str], schema: Type[T]) -> Optional[T]:
    """
    Turn raw model text into a validated schema instance.
    Returns None when the model produced no text at all.
    """
    if text is None:
        return None
    cleaned = FENCE_RE.sub("", text).strip()
    if not cleaned:
        return None
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ModelResponseError(f"model returned invalid JSON: {e}") from e
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ModelResponseError(f"model output does not match {schema.__name__}: {e}") from e


class GeminiClient:
    def __init__(self, model_name: str = None, api_key: str = None, temperature: float = None):
        self.model_name = model_name or config.GEMINI_MODEL
        self.api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self.temperature = config.GEMINI_TEMPERATURE if temperature is None else temperature
        self._model = None

    def _get_model(self):
        if self._model is None:
            if not self.api_key:
                raise ConfigurationError("GEMINI_API_KEY is not set")
            genai.configure(api_key=self.api_key)
            # JSON mime type keeps the answer free of prose around the object
            generation_config = genai.GenerationConfig(
                temperature=self.temperature,
                response_mime_type="application/json",
            )
            self._model = genai.GenerativeModel(self.model_name, generation_config=generation_config)
        return self._model

    def generate(self, prompt: str, schema: Type[T], image=None) -> Optional[T]:
        model = self._get_model()
        contents = [prompt] if image is None else [prompt, image]
        logging.info(f"Gemini: sending {schema.__name__} prompt to {self.model_name}")
        try:
            response = model.generate_content(contents)
        except google_exceptions.GoogleAPIError as e:
            raise ModelResponseError(f"Gemini request failed: {e}") from e
        try:
            text = response.text
        except ValueError:
            # blocked or empty candidate list
            logging.warning(f"Gemini: no text in response ({getattr(response, 'prompt_feedback', None)})")
            return None
        return parse_model_json(text, schema)


_client = None


def get_client() -> GeminiClient:
    global _client
    if _client is None:
        _client = GeminiClient()
    return _client
