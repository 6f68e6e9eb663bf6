"""Error taxonomy for the generation pipeline.

Every failure the pipeline expects is an :class:`AdforgeError`.  The message
of each error is intended to be displayed directly to the caller, so it must
never contain service internals, stack traces, or credentials.  The original
exception, when there is one, is chained with ``raise ... from`` and logged.
"""

from __future__ import annotations

from typing import Any


class AdforgeError(Exception):
    """Base class for user-facing pipeline errors."""

    kind: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AdforgeError):
    """The structured request does not match its domain schema.

    Attributes:
        field: Dotted path of the first offending field (e.g. ``style.type``).
        constraint: Human-readable description of the violated rule.
        errors: Every violation found, as ``(field, constraint)`` pairs.
    """

    kind = "validation"

    def __init__(
        self,
        field: str,
        constraint: str,
        errors: list[tuple[str, str]] | None = None,
    ) -> None:
        self.field = field
        self.constraint = constraint
        self.errors = errors or [(field, constraint)]
        super().__init__(f"Invalid request: {field}: {constraint}")


class InvocationError(AdforgeError):
    """The generation service failed or returned no usable image."""

    kind = "invocation"


class SizeLimitError(AdforgeError):
    """The decoded image payload exceeds the hard size limit."""

    kind = "size_limit"

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            f"Generated image exceeds the {limit // (1024 * 1024)}MB limit ({size} bytes)"
        )


class PersistenceError(AdforgeError):
    """The image could not be re-encoded or written to disk."""

    kind = "persistence"


class ConfigurationError(AdforgeError):
    """Required configuration (such as the service credential) is missing."""

    kind = "configuration"


def describe_error(error: AdforgeError) -> dict[str, Any]:
    """Return a JSON-friendly description of an error for API responses."""
    detail: dict[str, Any] = {"kind": error.kind, "message": error.message}
    if isinstance(error, ValidationError):
        detail["field"] = error.field
        detail["constraint"] = error.constraint
        detail["errors"] = [{"field": f, "constraint": c} for f, c in error.errors]
    return detail
