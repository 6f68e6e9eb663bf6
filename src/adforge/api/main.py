"""Adforge — FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes that wrap
the generation pipeline, and the ``main()`` CLI function that launches the
uvicorn server.

Architecture
------------
- **The pipeline** (:class:`~adforge.core.pipeline.ImagePipeline`) is built
  once in the lifespan handler and stored on ``app.state``.  Routes receive
  it through the :func:`get_pipeline` dependency, so tests can substitute a
  pipeline wired to a fake generation client.
- **Generation failures** never surface as raw exceptions: the pipeline
  returns a failure outcome, which is wrapped in the same envelope as a
  success and given a status code matching its error kind.
- **Missing credentials** do not stop the server.  Prompt compilation and
  the informational routes keep working; generation answers 503 until an
  API key is configured.

Endpoints
---------
========  ================================  ==================================
Method    Path                              Purpose
========  ================================  ==================================
GET       ``/api/config``                   Version, model, domain schemas
GET       ``/api/info``                     Server status and capabilities
POST      ``/api/generate/{domain}``        Generate and save one image
POST      ``/api/prompt/compile/{domain}``  Preview the compiled prompt
POST      ``/api/strategy``                 Visual strategy consultation text
========  ================================  ==================================

Usage
-----
CLI (installed entry point)::

    adforge

Direct invocation::

    python -m adforge.api.main
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adforge import __version__
from adforge.api.models import CompiledPromptResponse, GenerationEnvelope, StrategyRequest
from adforge.api.strategy import build_strategy_prompt
from adforge.core.config import AdforgeConfig, config
from adforge.core.errors import ConfigurationError, ValidationError, describe_error
from adforge.core.outcome import synthesize_failure
from adforge.core.pipeline import ImagePipeline, build_pipeline, compile_request
from adforge.core.schemas import DOMAIN_SCHEMAS, Domain

logger = logging.getLogger(__name__)

SERVER_NAME = "Adforge"

# HTTP status for each failure kind reported by the pipeline.
STATUS_CODES = {
    "validation": 400,
    "size_limit": 413,
    "persistence": 500,
    "invocation": 502,
    "configuration": 503,
    "unexpected": 500,
}

CAPABILITIES = [
    "Marketing image generation",
    "Business logo creation",
    "Product mockup generation",
    "Food photography",
    "Business portrait photography",
    "Commercial product photography",
]

_STARTED_AT = time.monotonic()


# ---------------------------------------------------------------------------
# Application lifecycle: pipeline setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the generation pipeline on startup.

    A missing API key is logged rather than raised; ``app.state.pipeline``
    is then ``None`` and generation requests are answered with 503.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    # --- Startup -----------------------------------------------------------
    try:
        app.state.pipeline = build_pipeline(config)
        logger.info("Pipeline ready (model %s).", config.model_name)
    except ConfigurationError as e:
        app.state.pipeline = None
        logger.error("Generation disabled: %s", e.message)

    yield  # Application runs here.

    # --- Shutdown ----------------------------------------------------------
    app.state.pipeline = None
    logger.info("Pipeline released on shutdown.")


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Adforge",
    description="Business visual generation: structured requests in, PNG files out.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Dependencies.
# ---------------------------------------------------------------------------


def get_pipeline(request: Request) -> ImagePipeline | None:
    """Return the pipeline built at startup, or None if generation is disabled."""
    return getattr(request.app.state, "pipeline", None)


def get_settings() -> AdforgeConfig:
    """Return the active configuration."""
    return config


def _envelope_response(envelope: GenerationEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config(settings: AdforgeConfig = Depends(get_settings)) -> dict:
    """Return the API configuration for clients.

    The response includes:

    - ``version`` — API version string.
    - ``model`` — generation model identifier.
    - ``domains`` — one entry per content domain with its filename prefix
      and the JSON schema of its request body (camelCase keys).
    """
    return {
        "version": __version__,
        "model": settings.model_name,
        "domains": [
            {
                "id": domain.value,
                "file_prefix": schema.file_prefix,
                "schema": schema.model_json_schema(by_alias=True),
            }
            for domain, schema in DOMAIN_SCHEMAS.items()
        ],
    }


@app.get("/api/info")
async def get_info(
    pipeline: ImagePipeline | None = Depends(get_pipeline),
    settings: AdforgeConfig = Depends(get_settings),
) -> dict:
    """Return server status and capabilities.

    ``status`` is ``"running"`` when generation is available and
    ``"unconfigured"`` when no API key was found at startup.
    """
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "model": settings.model_name,
        "status": "running" if pipeline is not None else "unconfigured",
        "output_directory": str(settings.outputs_dir),
        "capabilities": CAPABILITIES,
        "uptime_seconds": round(time.monotonic() - _STARTED_AT, 3),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/generate/{domain}", response_model=GenerationEnvelope)
def generate(
    domain: str,
    payload: Any = Body(default=None),
    pipeline: ImagePipeline | None = Depends(get_pipeline),
) -> JSONResponse:
    """Generate one image for a content domain and save it as PNG.

    The body is the domain's request object (see ``GET /api/config``).  The
    response is always a :class:`GenerationEnvelope`; the status code tells
    failures apart:

    - 400 — the request failed validation (no service call was made)
    - 404 — unknown content domain
    - 413 — the generated image exceeded the size limit
    - 500 — the image could not be saved, or an unexpected error occurred
    - 502 — the generation service failed or returned no image
    - 503 — no API key is configured

    Declared with ``def`` so the blocking service call runs in FastAPI's
    worker threadpool.
    """
    if domain not in {d.value for d in Domain}:
        outcome = synthesize_failure(None, ValidationError("domain", f"unknown domain {domain!r}"))
        return _envelope_response(GenerationEnvelope.from_outcome(outcome), 404)

    resolved = Domain(domain)
    if pipeline is None:
        error = ConfigurationError("Image generation is not configured: no API key was found")
        outcome = synthesize_failure(resolved, error)
        return _envelope_response(GenerationEnvelope.from_outcome(outcome), 503)

    outcome = pipeline.run(resolved, payload)
    status_code = 200 if outcome.success else STATUS_CODES.get(outcome.error_kind, 500)
    return _envelope_response(GenerationEnvelope.from_outcome(outcome), status_code)


@app.post("/api/prompt/compile/{domain}", response_model=CompiledPromptResponse)
async def compile_prompt_preview(
    domain: str,
    payload: Any = Body(default=None),
) -> CompiledPromptResponse:
    """Validate a request and return the prompt generation would send.

    No service call is made and nothing is written.

    Raises:
        HTTPException: 404 for an unknown domain, 400 for an invalid request.
    """
    try:
        request, prompt = compile_request(domain, payload)
    except ValidationError as e:
        status_code = 404 if e.field == "domain" else 400
        raise HTTPException(status_code=status_code, detail=describe_error(e)) from e
    return CompiledPromptResponse(
        domain=request.domain.value,
        compiled_prompt=prompt,
        request=request.model_dump(mode="json", by_alias=True),
    )


@app.post("/api/strategy")
async def visual_strategy(req: StrategyRequest) -> dict:
    """Return the visual content strategy consultation prompt.

    Returns:
        Dictionary with ``title`` and ``prompt`` keys.
    """
    return {
        "title": "Business Visual Strategy",
        "prompt": build_strategy_prompt(
            req.business_type,
            req.goals,
            req.target_audience,
            budget=req.budget,
            timeline=req.timeline,
        ),
    }


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~adforge.core.config.config`
    (``ADFORGE_SERVER_HOST``, ``ADFORGE_SERVER_PORT``, ``ADFORGE_LOG_LEVEL``).
    Defaults to ``127.0.0.1:8765``.

    This function is registered as the ``adforge`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Adforge %s starting on %s:%d", __version__, config.server_host, config.server_port)
    logger.info("Images will be saved to: %s", config.outputs_dir)
    logger.info("Using model: %s", config.model_name)
    if not config.has_api_key:
        logger.warning("No API key found; set GOOGLE_API_KEY to enable generation.")

    uvicorn.run(
        "adforge.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
