"""Shared response decoding helpers for provider extractors.

Provider responses are validated with tolerant pydantic models (unknown fields
are ignored). Validation failures are reported by the offending field paths
only, so the raw upstream body never ends up in an error message.
"""
from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors_parts.dispatch_error import DispatchError
from ..errors_parts.error_kind import ErrorKind

M = TypeVar("M", bound=BaseModel)


def _field_paths(exc: ValidationError) -> str:
    locs = []
    for err in exc.errors():
        path = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        if path not in locs:
            locs.append(path)
    return ", ".join(locs)


def parse_response(model: Type[M], body: Any, *, provider: str, display_name: str) -> M:
    """Validate ``body`` against ``model`` or raise a ``RESPONSE_PARSE`` error."""
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise DispatchError(
            provider=provider,
            message=f"Failed to parse {display_name} response: invalid field(s) {_field_paths(exc)}",
            kind=ErrorKind.RESPONSE_PARSE,
        ) from None


def empty_response(*, provider: str, display_name: str) -> DispatchError:
    """Return the ``EMPTY_RESPONSE`` error for a response without text."""
    return DispatchError(
        provider=provider,
        message=f"No content in {display_name} response",
        kind=ErrorKind.EMPTY_RESPONSE,
    )


__all__ = ["parse_response", "empty_response"]
