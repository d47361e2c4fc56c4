import logging
from typing import List

from fastapi import Body, Depends, FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from scanbite import __version__, config
from scanbite.barcode import analyze_barcode
from scanbite.datauri import to_data_uri
from scanbite.errors import (
    ConfigurationError,
    InvalidDataURIError,
    InvalidImageError,
    ScanBiteError,
)
from scanbite.food_item import analyze_food_item
from scanbite.llm import get_client
from scanbite.models import (
    AnalyzeBarcodeInput,
    AnalyzeBarcodeOutput,
    AnalyzeFoodItemInput,
    AnalyzeFoodItemOutput,
    SpokenSummary,
    Tip,
)
from scanbite.speech import spoken_summary
from scanbite.tips import get_tips

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

ERROR_STATUS = {
    InvalidDataURIError: 400,
    InvalidImageError: 400,
    ConfigurationError: 503,
}

app = FastAPI(title="AAHAR", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ScanBiteError)
async def scanbite_error_handler(request: Request, exc: ScanBiteError):
    status = next((code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500)
    if status >= 500:
        logging.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.get("/")
def home():
    return {
        "name": "AAHAR",
        "tagline": "Scan your food, know what's on it.",
        "version": __version__,
        "links": {"scan": "/scan/food", "barcode": "/scan/barcode/{barcode}", "tips": "/tips"},
    }


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/tips", response_model=List[Tip])
def tips(category: str = Query(None)):
    return get_tips(category)


@app.post("/scan/food", response_model=AnalyzeFoodItemOutput, response_model_exclude_none=True)
def scan_food(request: AnalyzeFoodItemInput = Body(...), client=Depends(get_client)):
    return analyze_food_item(request, client=client)


@app.post("/scan/image", response_model=AnalyzeFoodItemOutput, response_model_exclude_none=True)
def scan_image(file: UploadFile = File(...), client=Depends(get_client)):
    # file-upload fallback for devices without a camera
    # "image/png; name=a.png" -> "image/png"
    mime_type = (file.content_type or "").split(";")[0].strip().lower()
    if not mime_type.startswith("image/"):
        raise HTTPException(status_code=400, detail=f"Expected an image upload, got '{mime_type or 'unknown'}'")
    data = file.file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    try:
        flow_input = AnalyzeFoodItemInput(photo_data_uri=to_data_uri(data, mime_type))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors()[0]["msg"])
    return analyze_food_item(flow_input, client=client)


@app.post("/scan/speech", response_model=SpokenSummary)
def scan_speech(result: AnalyzeFoodItemOutput = Body(...)):
    return SpokenSummary(text=spoken_summary(result))


def _barcode_input(barcode: str, user_allergens) -> AnalyzeBarcodeInput:
    try:
        return AnalyzeBarcodeInput(barcode_number=barcode, user_allergens=user_allergens)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors()[0]["msg"])


@app.get("/scan/barcode/{barcode}", response_model=AnalyzeBarcodeOutput, response_model_exclude_none=True)
def scan_barcode(barcode: str, user_allergens: List[str] = Query(None), client=Depends(get_client)):
    return analyze_barcode(_barcode_input(barcode, user_allergens), client=client)


@app.post("/scan/barcode", response_model=AnalyzeBarcodeOutput, response_model_exclude_none=True)
def scan_barcode_post(request: AnalyzeBarcodeInput = Body(...), client=Depends(get_client)):
    return analyze_barcode(request, client=client)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("scanbite.main:app", host="0.0.0.0", port=8000)
