"""Decoding layer between raw response bodies and the typed models.

Validates JSON bodies against the pydantic models and turns every
validation failure into a DecodeError that names the failing field.

Usage::

    from orda.decode import decode_build_list

    builds = decode_build_list(response.content)
"""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from orda.exceptions import DecodeError
from orda.models import BuildOrder, Status

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS = TypeAdapter(Status)
_BUILD = TypeAdapter(BuildOrder)
_BUILD_LIST = TypeAdapter(list[BuildOrder])


def _error_path(error: dict[str, Any]) -> str | None:
    loc = error.get("loc") or ()
    return ".".join(str(part) for part in loc) or None


def _validate(adapter: TypeAdapter[T], body: str | bytes, what: str) -> T:
    try:
        return adapter.validate_json(body, strict=True)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        path = _error_path(first)
        if first.get("type") == "json_invalid":
            message = f"{what}: body is not valid JSON ({first.get('msg')})"
        else:
            message = (
                f"{what}: {first.get('msg', 'validation failed')} "
                f"at {path or '<root>'} ({len(errors)} error(s))"
            )
        logger.debug("Decode failed for %s: %s", what, errors)
        raise DecodeError(message, path=path, errors=errors) from exc


def decode_status(body: str | bytes) -> Status:
    """Decode a /status body."""
    return _validate(_STATUS, body, "status")


def decode_build(body: str | bytes) -> BuildOrder:
    """Decode a single build order object (/builds/{id})."""
    return _validate(_BUILD, body, "build order")


def decode_build_list(body: str | bytes) -> list[BuildOrder]:
    """Decode an array of build orders (/builds and /favorites/{id}).

    Source order is preserved. A single invalid element fails the whole
    list -- there is no partial result.
    """
    return _validate(_BUILD_LIST, body, "build order list")

