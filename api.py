"""
PAN Validator — FastAPI Server
===============================

RESTful API for classifying batches of raw PAN values.

Endpoints:
    POST /validate          Validate a JSON batch of raw PAN rows
    POST /validate/file     Upload a text file (one PAN per line)
    GET  /classify/{pan}    Classify a single PAN exactly as given
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import asyncio
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

from pan_validator import __version__
from pan_validator.classifier import explain
from pan_validator.models import ClassificationResult, SummaryReport, ValidationReport
from pan_validator.pipeline import PanValidationPipeline

load_dotenv()

MAX_UPLOAD_BYTES = int(os.getenv("PAN_MAX_UPLOAD_BYTES", str(1_048_576)))


# ─── Application Lifespan ───────────────────────────────────────────

_pipeline: PanValidationPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared pipeline on startup."""
    global _pipeline  # noqa: PLW0603
    _pipeline = PanValidationPipeline()
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="PAN Validator API",
    description=(
        "Syntactic validation for Indian Permanent Account Numbers. "
        "Normalizes and deduplicates raw rows, rejects malformed PANs and PANs "
        "with repeated or sequential characters, and reports batch counts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    pans: list[Optional[str]] = Field(
        ...,
        description="Raw PAN rows. Nulls and blanks are allowed and count as missing.",
        json_schema_extra={
            "example": [" axbcd1243f ", "AXBCD1243F", "ABCDE1234F", None, ""]
        },
    )


class ValidateResponse(BaseModel):
    """Structured batch report returned by the API."""

    input_hash: str = Field(description="SHA-256 hash of the raw rows")
    summary: SummaryReport
    results: list[ClassificationResult]

    model_config = {"json_schema_extra": {"example": {
        "input_hash": "a1b2c3d4...",
        "summary": {
            "total_processed": 5,
            "total_valid": 1,
            "total_invalid": 1,
            "missing_incomplete": 3,
        },
        "results": [
            {
                "pan": "ABCDE1234F",
                "status": "INVALID",
                "violations": ["SEQUENTIAL_LETTERS", "SEQUENTIAL_DIGITS"],
            },
            {"pan": "AXBCD1243F", "status": "VALID", "violations": []},
        ],
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> PanValidationPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(report: ValidationReport) -> ValidateResponse:
    """Convert the internal ValidationReport to the API response schema."""
    return ValidateResponse(
        input_hash=report.input_hash,
        summary=report.summary,
        results=report.results,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/validate",
    summary="Validate a batch of raw PAN rows",
    tags=["Validation"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def validate_pans(request: ValidateRequest) -> ValidateResponse:
    """Normalize, classify and summarize a batch of raw PAN rows.

    Returns:
    - **summary**: processed / valid / invalid / missing-incomplete counts.
      Duplicate rows are counted under missing-incomplete.
    - **results**: one entry per distinct normalized PAN, sorted
    - **input_hash**: SHA-256 of the raw rows for audit trail
    """
    pipeline = _get_pipeline()
    report = pipeline.run(request.pans)
    return _build_response(report)


@app.post(
    "/validate/file",
    summary="Validate PANs from an uploaded text file",
    tags=["Validation"],
    responses={
        413: {"description": "File too large"},
        400: {"description": "File is not valid UTF-8 text"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
async def validate_pan_file(file: UploadFile) -> ValidateResponse:
    """Upload a text file with one raw PAN per line.

    Blank lines count toward missing-incomplete.
    """
    if file.size and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")

    content = await file.read()
    try:
        raw_text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    pipeline = _get_pipeline()
    report = await asyncio.to_thread(pipeline.run_text, raw_text)
    return _build_response(report)


@app.get(
    "/classify/{pan}",
    summary="Classify a single PAN",
    tags=["Validation"],
)
def classify_pan(pan: str) -> ClassificationResult:
    """Classify one value exactly as given, without trimming or upper-casing.

    Use /validate for raw, untrusted rows.
    """
    return explain(pan)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _get_pipeline()
    return HealthResponse(status="healthy", version=__version__)
