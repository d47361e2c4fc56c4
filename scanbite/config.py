import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))

# "openfoodfacts" (live API, mock table as fallback) or "mock"
PRODUCT_SOURCE = os.getenv("PRODUCT_SOURCE", "openfoodfacts").strip().lower()
OFF_BASE_URL = os.getenv("OFF_BASE_URL", "https://world.openfoodfacts.org").rstrip("/")
OFF_TIMEOUT = float(os.getenv("OFF_TIMEOUT", "5"))
OFF_USER_AGENT = os.getenv("OFF_USER_AGENT", "ScanBite/0.3 (+food-scanner)")

LOW_CONFIDENCE_THRESHOLD = float(os.getenv("LOW_CONFIDENCE_THRESHOLD", "0.7"))
SIMULATE_ON_LOW_CONFIDENCE = _env_bool("SIMULATE_ON_LOW_CONFIDENCE", True)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
