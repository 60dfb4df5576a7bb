"""
Numeral Text: FastAPI Server
============================

HTTP front end for spelling integer literals as English words.

Endpoints:
    POST /generate          Spell a numeral
    GET  /can-generate      Check whether a numeral can be spelled
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numeral_text import __version__
from numeral_text.config import GeneratorSettings
from numeral_text.exceptions import InvalidArgumentError, NumeralFormatError
from numeral_text.generator import NumeralTextGenerator
from numeral_text.models import Sign
from numeral_text.tables import MAX_DIGITS

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)


# ─── Application Lifespan ───────────────────────────────────────────

_generator: NumeralTextGenerator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the generator from environment settings on startup."""
    global _generator  # noqa: PLW0603
    _generator = NumeralTextGenerator(GeneratorSettings())
    yield
    _generator = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Text API",
    description=(
        "Spell signed integer literals of up to "
        f"{MAX_DIGITS} digits as English cardinal numbers."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""

    source: str = Field(
        ...,
        description="Integer literal, optionally signed, e.g. '-120'.",
        json_schema_extra={"example": "-120"},
    )
    conjunction: Optional[bool] = Field(
        default=None,
        description="Insert British 'and'. Defaults to the server setting.",
    )


class GenerateResponse(BaseModel):
    source: str
    text: str
    sign: Sign
    digits: str

    model_config = {"json_schema_extra": {"example": {
        "source": "-120",
        "text": "negative one hundred twenty",
        "sign": "negative",
        "digits": "120",
    }}}


class CanGenerateResponse(BaseModel):
    source: str
    can_generate: bool


class HealthResponse(BaseModel):
    status: str
    version: str
    max_digits: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_generator() -> NumeralTextGenerator:
    if _generator is None:
        raise HTTPException(status_code=503, detail="Generator not initialised")
    return _generator


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/generate",
    summary="Spell an integer literal",
    tags=["Generation"],
    responses={
        400: {"description": "Source is empty or whitespace"},
        422: {"description": "Source is not a digit sequence or is too long"},
        503: {"description": "Generator not yet initialised"},
    },
)
def generate(request: GenerateRequest) -> GenerateResponse:
    """Return the English cardinal spelling of `source`."""
    generator = _get_generator()
    try:
        numeral = generator.prepare(request.source)
        text = generator.spell(numeral, request.conjunction)
    except InvalidArgumentError as e:
        logger.warning("Rejected empty source %r: %s", request.source, e)
        raise HTTPException(status_code=400, detail={"code": e.code, "message": str(e)})
    except NumeralFormatError as e:
        logger.warning("Rejected numeral %r: %s", request.source, e)
        raise HTTPException(
            status_code=422,
            detail={"code": e.details.get("finding", e.code), "message": str(e)},
        )

    return GenerateResponse(
        source=request.source,
        text=text,
        sign=numeral.sign,
        digits=numeral.digits,
    )


@app.get(
    "/can-generate",
    summary="Check whether an integer literal can be spelled",
    tags=["Generation"],
    responses={503: {"description": "Generator not yet initialised"}},
)
def check(source: str = "") -> CanGenerateResponse:
    """Never fails for bad input; returns `can_generate: false` instead."""
    generator = _get_generator()
    return CanGenerateResponse(source=source, can_generate=generator.can_generate(source))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Generator not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_generator()
    return HealthResponse(status="healthy", version=__version__, max_digits=MAX_DIGITS)
