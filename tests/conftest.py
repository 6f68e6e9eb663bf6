"""Shared pytest fixtures for Adforge tests."""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from google.genai import types
from PIL import Image

from adforge.core.artifact_store import ArtifactStore
from adforge.core.config import AdforgeConfig
from adforge.core.invoker import GenerationInvoker
from adforge.core.pipeline import ImagePipeline

FIXED_TIME = 1_700_000_000.123


def make_image_bytes(fmt: str = "PNG", mode: str = "RGB", size: tuple[int, int] = (8, 8)) -> bytes:
    """Encode a small solid-colour image in the given format."""
    color = 128 if mode in ("L", "1") else tuple([128] * len(mode))
    image = Image.new(mode, size, color)
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def make_response(*candidates: list[types.Part]) -> types.GenerateContentResponse:
    """Build a GenerateContentResponse with one candidate per parts list."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=parts))
            for parts in candidates
        ]
    )


def image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(mime_type=mime_type, data=data))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


class FakeModels:
    """Stands in for ``client.models``; records every generate_content call."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    """Minimal google-genai client double."""

    def __init__(self, response=None, error: Exception | None = None):
        self.models = FakeModels(response=response, error=error)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def outputs_dir(temp_dir: Path) -> Path:
    """Output directory path (not created; the store creates it on demand)."""
    return temp_dir / "generated-images"


@pytest.fixture
def test_config(outputs_dir: Path) -> AdforgeConfig:
    """Create a test configuration pointing at a temporary outputs directory.

    Args:
        outputs_dir: Output directory from fixture

    Returns:
        AdforgeConfig instance for testing
    """
    return AdforgeConfig(
        api_key="test-key",
        model_name="test-image-model",
        outputs_dir=outputs_dir,
        _env_file=None,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid PNG image."""
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small valid JPEG image."""
    return make_image_bytes("JPEG")


@pytest.fixture
def fake_client(png_bytes: bytes) -> FakeClient:
    """A client whose responses carry one PNG payload after a text part."""
    return FakeClient(
        response=make_response([text_part("Here is your image."), image_part(png_bytes)])
    )


@pytest.fixture
def store(outputs_dir: Path) -> ArtifactStore:
    """Artifact store with a fixed clock."""
    return ArtifactStore(outputs_dir, clock=lambda: FIXED_TIME)


@pytest.fixture
def pipeline(fake_client: FakeClient, store: ArtifactStore) -> ImagePipeline:
    """Pipeline wired to the fake client and the temporary store."""
    return ImagePipeline(GenerationInvoker(fake_client, "test-image-model"), store)


@pytest.fixture
def valid_payloads() -> dict[str, dict]:
    """One minimal valid request body per content domain."""
    return {
        "marketing": {"prompt": "a red bicycle leaning on a cafe wall"},
        "logo": {"businessName": "Blue Fern Studio", "style": {"type": "minimalist"}},
        "mockup": {
            "product": {
                "name": "Aurora Serum",
                "type": "bottle",
                "description": "Frosted glass dropper bottle with a copper cap",
            },
            "setting": {"environment": "studio", "background": "gradient", "angle": "angle"},
        },
        "food": {
            "dish": {
                "name": "Wild Mushroom Risotto",
                "description": "Creamy arborio rice topped with seared mushrooms",
            },
            "photography": {"style": "45-degree", "lighting": "natural-window"},
        },
        "portrait": {
            "subject": {
                "description": "mid-career woman with short dark hair",
                "profession": "Architecture",
                "attire": "business-casual",
                "expression": "approachable-warm",
            },
            "photography": {
                "style": "corporate-headshot",
                "background": "neutral-gray",
                "lighting": "soft-natural",
            },
        },
        "product": {
            "product": {
                "name": "Pulse One Headphones",
                "category": "electronics",
                "description": "Matte black over-ear headphones with brushed aluminium hinges",
            },
            "photography": {
                "style": "clean-ecommerce",
                "angle": "three-quarter",
                "background": "pure-white",
                "lighting": "soft-box-even",
            },
        },
    }
