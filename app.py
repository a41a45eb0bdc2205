"""
RoleFit API - compares a CV with a job description using Gemini.

Run:
    uvicorn app:app --reload --port 3001
    python app.py
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple
from contextlib import asynccontextmanager
from fastapi import FastAPI, UploadFile, File, Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from config import Settings, load_settings
from schemas import AnalysisResponse, APIInfoResponse, HealthResponse
from parsers.upload import UploadRejectedError, validate_pdf_upload
from matching.evaluator import evaluate

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("rolefit")

VERSION = "1.0.0"
ENDPOINTS = {
    "POST /analyze": "Analyze CV against job description",
    "GET /health": "Service health",
    "GET /": "API information",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings once at startup; a missing GEMINI_API_URL / GEMINI_API_KEY aborts startup."""
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    app.state.settings = settings

    logger.info("RoleFit API server started on port %d", settings.port)
    for route, description in ENDPOINTS.items():
        logger.info("   %s - %s", route, description)

    yield
    app.state.settings = None
    logger.info("Application shutting down.")


app = FastAPI(title="RoleFit API", version=VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise HTTPException(status_code=503, detail="Settings not loaded")
    return settings


def _read_upload(field: str, upload: Optional[UploadFile]) -> Tuple[Optional[str], bytes]:
    if upload is None:
        validate_pdf_upload(field, None, None, None)
    data = upload.file.read()
    validate_pdf_upload(field, upload.filename, upload.content_type, len(data))
    return upload.filename, data


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/", response_model=APIInfoResponse)
def root():
    return APIInfoResponse(name="RoleFit API", version=VERSION, endpoints=ENDPOINTS)


@app.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(version=VERSION)


@app.post("/analyze", response_model=AnalysisResponse)
def analyze(
    cv: Optional[UploadFile] = File(None),
    jd: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
):
    """Compare an uploaded CV with an uploaded job description (both PDF, max 5MB)."""
    try:
        cv_name, cv_bytes = _read_upload("cv", cv)
        jd_name, jd_bytes = _read_upload("jd", jd)
    except UploadRejectedError as e:
        logger.info("Upload rejected (%s): %s", e.field, e.message)
        body = AnalysisResponse(ok=False, message=e.message, result=None)
        return JSONResponse(status_code=400, content=body.model_dump())

    logger.info("Analyzing cv=%s (%d bytes) against jd=%s (%d bytes)", cv_name, len(cv_bytes), jd_name, len(jd_bytes))
    try:
        return evaluate(jd_bytes, cv_bytes, settings)
    except Exception:
        logger.exception("Error processing PDF files or evaluation")
        return AnalysisResponse(ok=False, message="Failed to process PDF files or evaluate resume", result=None)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=load_settings().port)
