"""Persistence of generated images as PNG files.

The store enforces the hard size limit on the decoded payload, re-encodes it
to PNG with Pillow, and writes it under the outputs directory with a
timestamp-qualified name::

    {prefix}-[{slug}-]{epoch-millis}.png

The slug is derived from business-identifying text (business name, product
name, dish name, profession): lowercased, with every character outside
``[a-z0-9]`` replaced by a hyphen.

Ordering guarantees:

- The size check runs before any filesystem access, so an oversized payload
  leaves no trace on disk.
- Re-encoding happens in memory; the target file is only opened once the
  PNG bytes exist, so a codec failure never leaves a partial file.
- Directory creation is idempotent and safe against concurrent saves.
"""

import io
import logging
import re
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from adforge.core.errors import PersistenceError, SizeLimitError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 50 * 1024 * 1024
IMAGE_FORMAT = "PNG"
IMAGE_EXTENSION = ".png"

# Modes Pillow can write to PNG without conversion.
_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


def sanitize_slug(text: str) -> str:
    """Lowercase ``text`` and replace every character outside [a-z0-9] with ``-``."""
    return re.sub(r"[^a-z0-9]", "-", text.lower())


def build_filename(prefix: str, slug_source: str | None, timestamp_ms: int) -> str:
    """Build ``{prefix}-[{slug}-]{timestamp}.png``; empty slug sources are skipped."""
    slug = sanitize_slug(slug_source) if slug_source else ""
    if slug:
        return f"{prefix}-{slug}-{timestamp_ms}{IMAGE_EXTENSION}"
    return f"{prefix}-{timestamp_ms}{IMAGE_EXTENSION}"


@dataclass(frozen=True)
class ImageArtifact:
    """A persisted image.

    Attributes:
        path: Absolute path of the written file
        size_bytes: Size of the re-encoded PNG on disk
        source_bytes: Size of the payload received from the service
        data: The PNG bytes that were written
    """

    path: Path
    size_bytes: int
    source_bytes: int
    data: bytes = field(repr=False, default=b"")

    @property
    def filename(self) -> str:
        return self.path.name


class ArtifactStore:
    """Write generated image payloads to the outputs directory.

    Args:
        outputs_dir: Directory receiving the PNG files (created on demand)
        max_bytes: Upper bound on the decoded payload size
        clock: Returns the current time in seconds; defaults to ``time.time``
    """

    def __init__(
        self,
        outputs_dir: Path,
        max_bytes: int = MAX_IMAGE_BYTES,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.outputs_dir = Path(outputs_dir)
        self.max_bytes = max_bytes
        self.clock = clock or time.time

    def save(self, payload: bytes, prefix: str, slug_source: str | None = None) -> ImageArtifact:
        """Size-check, re-encode and write one image payload.

        Args:
            payload: Decoded image bytes in any format Pillow can read
            prefix: Content-domain filename prefix
            slug_source: Business-identifying text for the filename, if any

        Returns:
            The written artifact

        Raises:
            SizeLimitError: If the payload exceeds ``max_bytes``
            PersistenceError: If the directory, re-encode or write fails
        """
        if len(payload) > self.max_bytes:
            logger.warning(
                "Rejecting %d byte payload (limit %d bytes)", len(payload), self.max_bytes
            )
            raise SizeLimitError(len(payload), self.max_bytes)

        try:
            self.outputs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create outputs directory %s: %s", self.outputs_dir, e)
            raise PersistenceError(
                f"Failed to save image: cannot create output directory {self.outputs_dir}"
            ) from e

        png_bytes = self._encode_png(payload)

        timestamp_ms = int(self.clock() * 1000)
        path = self.outputs_dir / build_filename(prefix, slug_source, timestamp_ms)
        try:
            path.write_bytes(png_bytes)
        except OSError as e:
            logger.error("Cannot write %s: %s", path, e)
            raise PersistenceError(f"Failed to save image: cannot write {path.name}") from e

        logger.info("Image saved to: %s (%d bytes)", path, len(png_bytes))
        return ImageArtifact(
            path=path.resolve(),
            size_bytes=len(png_bytes),
            source_bytes=len(payload),
            data=png_bytes,
        )

    @staticmethod
    def _encode_png(payload: bytes) -> bytes:
        """Decode ``payload`` with Pillow and re-encode it as PNG in memory."""
        try:
            with Image.open(io.BytesIO(payload)) as image:
                image.load()
                if image.mode not in _PNG_MODES:
                    target = "RGBA" if "A" in image.getbands() else "RGB"
                    logger.debug("Converting %s image to %s for PNG", image.mode, target)
                    image = image.convert(target)
                buffer = io.BytesIO()
                image.save(buffer, format=IMAGE_FORMAT)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.error("Could not re-encode payload as PNG: %s", e)
            raise PersistenceError("Failed to save image: payload is not a readable image") from e
        return buffer.getvalue()
