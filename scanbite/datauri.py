import base64
import binascii
import io
import re

from PIL import Image, UnidentifiedImageError

from scanbite.errors import InvalidDataURIError, InvalidImageError

DATA_URI_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[\w.+-]+=[^;,]*)*);base64,(?P<data>.*)$",
    re.DOTALL,
)


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """
    Split a base64 data URI into (mime_type, raw bytes).
    Raises InvalidDataURIError when the URI is not in
    'data:<mimetype>;base64,<encoded_data>' form.
    """
    match = DATA_URI_RE.match(uri.strip()) if uri else None
    if not match:
        raise InvalidDataURIError("expected a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")
    payload = re.sub(r"\s+", "", match.group("data"))
    if not payload:
        raise InvalidDataURIError("data URI has an empty payload")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidDataURIError(f"data URI payload is not valid base64: {e}") from e
    return match.group("mime").lower(), data


def to_data_uri(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def load_image(data: bytes) -> Image.Image:
    """Open image bytes with Pillow, failing early on anything that is not a picture."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"could not decode image: {e}") from e
    if img.mode not in ("RGB", "L"):
        img = img.convert("RGB")
    return img
