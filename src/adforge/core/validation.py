"""Structural validation of incoming generation requests."""

import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from adforge.core.errors import ValidationError
from adforge.core.schemas import DOMAIN_SCHEMAS, Domain, DomainRequest

logger = logging.getLogger(__name__)


def resolve_domain(domain: Domain | str) -> Domain:
    """Return the :class:`Domain` for an identifier.

    Raises:
        ValidationError: If the identifier names no supported domain
    """
    try:
        return Domain(domain)
    except ValueError as e:
        supported = ", ".join(d.value for d in Domain)
        raise ValidationError(
            "domain", f"unsupported content domain {domain!r} (expected one of: {supported})"
        ) from e


def format_location(loc: tuple[int | str, ...]) -> str:
    """Render a Pydantic error location as a dotted path.

    List indices are rendered in brackets, e.g. ``style.colors[1]``.
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "request"


def validate_request(domain: Domain | str, payload: Any) -> DomainRequest:
    """Validate a raw request against its domain schema.

    Nothing outside this function is touched: no network call and no
    filesystem access happen before it returns.

    Args:
        domain: Content domain identifier (enum member or wire string)
        payload: Decoded request body

    Returns:
        The validated, defaulted request model for the domain

    Raises:
        ValidationError: Naming the first offending field and its constraint
    """
    resolved = resolve_domain(domain)
    if not isinstance(payload, Mapping):
        raise ValidationError("request", "must be an object")

    schema = DOMAIN_SCHEMAS[resolved]
    try:
        request = schema.model_validate({**payload, "domain": resolved})
    except pydantic.ValidationError as e:
        errors = [(format_location(err["loc"]), err["msg"]) for err in e.errors()]
        field, constraint = errors[0]
        logger.info(
            "Rejected %s request: %d error(s), first at %s", resolved.value, len(errors), field
        )
        raise ValidationError(field, constraint, errors) from e

    logger.debug("Validated %s request", resolved.value)
    return request
