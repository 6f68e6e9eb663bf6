"""The validate, compile, invoke, persist, synthesize pipeline."""

import logging
from typing import Any

from adforge.core.artifact_store import ArtifactStore
from adforge.core.config import AdforgeConfig, config as default_config
from adforge.core.errors import AdforgeError
from adforge.core.invoker import GenerationInvoker, create_client
from adforge.core.outcome import GenerationOutcome, synthesize_failure, synthesize_success
from adforge.core.prompt_compiler import compile_prompt
from adforge.core.schemas import Domain, DomainRequest
from adforge.core.validation import resolve_domain, validate_request

logger = logging.getLogger(__name__)


def compile_request(domain: Domain | str, payload: Any) -> tuple[DomainRequest, str]:
    """Validate a raw request and compile its prompt.

    Raises:
        ValidationError: If the domain is unknown or the payload is invalid
    """
    request = validate_request(domain, payload)
    prompt = compile_prompt(request)
    logger.debug("Compiled %s prompt: %s", request.domain.value, prompt)
    return request, prompt


class ImagePipeline:
    """Run one structured request through to a saved image.

    Stages run strictly in order and the first failure ends the run: nothing
    is sent to the service before the request validates, and nothing is
    written before the service returns image data.
    """

    def __init__(self, invoker: GenerationInvoker, store: ArtifactStore):
        self.invoker = invoker
        self.store = store

    def compile(self, domain: Domain | str, payload: Any) -> tuple[DomainRequest, str]:
        """Validate and compile without calling the service."""
        return compile_request(domain, payload)

    def run(self, domain: Domain | str, payload: Any) -> GenerationOutcome:
        """Generate and save one image.

        Never raises for request-level failures; every error becomes a
        failure outcome.

        Args:
            domain: Content domain identifier
            payload: Raw request body

        Returns:
            Success outcome with the saved path, or a failure outcome
        """
        resolved: Domain | None = None
        try:
            resolved = resolve_domain(domain)
            logger.info("Generating %s image", resolved.value)

            request, prompt = compile_request(resolved, payload)
            image_bytes = self.invoker.generate(prompt)
            artifact = self.store.save(image_bytes, request.file_prefix, request.slug_source)
        except AdforgeError as e:
            logger.warning(
                "%s generation failed (%s): %s",
                resolved.value if resolved else "Unknown-domain",
                e.kind,
                e.message,
            )
            return synthesize_failure(resolved, e)
        except Exception:
            logger.exception("Unexpected error during %s generation", domain)
            return synthesize_failure(resolved)

        logger.info("%s image complete: %s", resolved.value, artifact.path)
        return synthesize_success(request, artifact)


def build_pipeline(config: AdforgeConfig | None = None, client: Any = None) -> ImagePipeline:
    """Assemble a pipeline from configuration.

    Args:
        config: Settings to use (defaults to the global ``config``)
        client: google-genai client; built from ``config.api_key`` if omitted

    Raises:
        ConfigurationError: If no client is given and no API key is configured
    """
    config = config or default_config
    if client is None:
        client = create_client(config)
    invoker = GenerationInvoker(
        client,
        model_name=config.model_name,
        max_prompt_length=config.max_prompt_length,
    )
    store = ArtifactStore(config.outputs_dir)
    return ImagePipeline(invoker, store)
