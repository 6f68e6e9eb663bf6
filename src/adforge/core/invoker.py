"""Generation service invocation via the google-genai SDK.

The invoker is handed a ready client when it is constructed; nothing here
holds a process-wide client.  Tests substitute any object exposing
``client.models.generate_content``.

Payload Extraction
------------------
Only the first candidate of a response is consulted.  Its parts are scanned
in order and the first part carrying non-empty inline data wins; later parts
and later candidates are ignored.  A response with no candidates, a first
candidate with no content or parts, or parts with no inline data all yield
``None`` from :func:`find_first_inline_payload`, which the invoker reports as
"no image data".
"""

import base64
import binascii
import logging
from typing import Any

from google import genai
from google.genai import types

from adforge.core.config import AdforgeConfig
from adforge.core.errors import ConfigurationError, InvocationError

logger = logging.getLogger(__name__)

NO_IMAGE_DATA_MESSAGE = "No image data received from the generation service"
REQUEST_FAILED_MESSAGE = "Image generation request failed"


def create_client(config: AdforgeConfig) -> genai.Client:
    """Build a live google-genai client from configuration.

    Raises:
        ConfigurationError: If no API key is configured
    """
    if not config.has_api_key:
        raise ConfigurationError(
            "No API key configured. Set GOOGLE_API_KEY (or ADFORGE_API_KEY) to use the "
            "generation service."
        )
    return genai.Client(api_key=config.api_key.get_secret_value())


def find_first_inline_payload(response: Any) -> bytes | None:
    """Return the first inline payload of the first candidate, decoded.

    Args:
        response: A ``GenerateContentResponse`` (or an object of the same shape)

    Returns:
        The payload bytes, or None when the first candidate carries none.
        Payloads delivered as base64 text are decoded.
    """
    candidates = getattr(response, "candidates", None)
    if candidates is None or len(candidates) == 0:
        return None

    content = candidates[0].content
    if content is None or content.parts is None:
        return None

    for part in content.parts:
        inline = part.inline_data
        if inline is None or inline.data is None or len(inline.data) == 0:
            continue
        if isinstance(inline.data, str):
            try:
                # Wrapped base64 is accepted; other stray characters are not.
                return base64.b64decode("".join(inline.data.split()), validate=True)
            except binascii.Error as e:
                raise InvocationError("Generation service returned malformed image data") from e
        return bytes(inline.data)
    return None


class GenerationInvoker:
    """Send compiled prompts to the generation model and extract image bytes.

    Args:
        client: google-genai client (or a test double with the same surface)
        model_name: Model identifier passed on every call
        max_prompt_length: Reject longer prompts before calling the service
    """

    def __init__(
        self,
        client: Any,
        model_name: str,
        max_prompt_length: int | None = None,
    ) -> None:
        self.client = client
        self.model_name = model_name
        self.max_prompt_length = max_prompt_length

    def generate(self, prompt: str) -> bytes:
        """Run one generation request and return the first image payload.

        Raises:
            InvocationError: If the prompt is too long, the call fails, or
                the response carries no image data
        """
        if self.max_prompt_length is not None and len(prompt) > self.max_prompt_length:
            raise InvocationError(
                f"Prompt is {len(prompt)} characters long; the limit is {self.max_prompt_length}"
            )

        logger.info("Requesting image from %s (%d character prompt)", self.model_name, len(prompt))
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
            )
        except Exception as e:
            logger.error("Generation request to %s failed: %s", self.model_name, e, exc_info=True)
            raise InvocationError(REQUEST_FAILED_MESSAGE) from e

        payload = find_first_inline_payload(response)
        if payload is None:
            logger.warning("Response from %s contained no image data", self.model_name)
            raise InvocationError(NO_IMAGE_DATA_MESSAGE)

        logger.info("Received %d byte image payload", len(payload))
        return payload
