"""Core generation pipeline.

This package turns a structured request for a business visual into a saved
PNG file:

- **schemas**: Per-domain request models and their closed option sets
- **lookup**: Descriptive clause tables for every categorical option
- **validation**: Structural validation with field-level error reporting
- **prompt_compiler**: Deterministic per-domain prompt composition
- **invoker**: google-genai call and first-payload extraction
- **artifact_store**: Size-checked PNG persistence
- **outcome**: Success and failure status blocks
- **pipeline**: The stages wired together
- **config**: Configuration management using Pydantic Settings

Architecture Overview
---------------------
Stages run strictly in sequence, one request in and one outcome out::

    validate -> compile -> invoke -> persist -> synthesize

Any failure jumps straight to a failure outcome; no later stage runs.

Usage Example
-------------
    from adforge.core import build_pipeline, config

    pipeline = build_pipeline(config)
    outcome = pipeline.run("logo", {
        "businessName": "Blue Fern Studio",
        "style": {"type": "minimalist", "industry": "creative"},
    })
    print(outcome.text)
"""

from adforge.core.config import AdforgeConfig, config
from adforge.core.errors import AdforgeError
from adforge.core.outcome import GenerationOutcome
from adforge.core.pipeline import ImagePipeline, build_pipeline, compile_request
from adforge.core.schemas import Domain

__all__ = [
    "AdforgeConfig",
    "AdforgeError",
    "Domain",
    "GenerationOutcome",
    "ImagePipeline",
    "build_pipeline",
    "compile_request",
    "config",
]
