"""Shared HTTP capability base.

``HttpCapability`` owns the request lifecycle common to every provider that is
called over plain HTTP:

1. check the cancellation token,
2. open a scoped client with the provider's auth headers,
3. POST the provider body to the provider endpoint,
4. map transport/status/decoding failures to ``DispatchError``,
5. hand the decoded JSON to the provider's text extractor.

Subclasses only describe the wire format: ``endpoint``, ``auth_headers``,
``build_body`` and ``extract_text``. Raw ``httpx`` exceptions never escape
``generate_text``. The API key is scrubbed from every error message.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..cancellation_parts.cancellation_token import CancellationToken
from ..cancellation_parts.runner import run_cancellable
from ..errors_parts.classification import is_retryable, redact
from ..errors_parts.dispatch_error import DispatchError
from ..errors_parts.error_kind import ErrorKind
from ..logging import LogContext, get_logger, normalized_log_event
from ..models_parts.content_part import ContentPart
from ..models_parts.generation_request import GenerationRequest
from ..models_parts.provider_config import ProviderConfig
from ..timeouts import resolve_timeout
from .client import open_http_client


def _status_message(response: httpx.Response) -> str:
    """Return the provider's error message from a non-success response.

    Providers wrap errors as ``{"error": {"message": ...}}``; fall back to the
    raw body text, then to the reason phrase.
    """
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, Mapping):
        err = body.get("error")
        if isinstance(err, Mapping) and isinstance(err.get("message"), str):
            return err["message"]
        if isinstance(err, str):
            return err
    text = response.text.strip()
    return text or response.reason_phrase or f"HTTP {response.status_code}"


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class HttpCapability:
    """Base class for capabilities executing one HTTP POST per generation."""

    provider: str = ""
    display_name: str = ""

    def __init__(
        self,
        config: ProviderConfig,
        model: str,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._model = model
        self._transport = transport
        self._logger = get_logger(f"llm_dispatch.{self.provider}")

    @property
    def provider_name(self) -> str:
        return self.provider

    @property
    def model(self) -> str:
        return self._model

    # -------------------- wire format hooks --------------------

    def endpoint(self, request: GenerationRequest) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def auth_headers(self) -> Dict[str, str]:  # pragma: no cover - abstract
        raise NotImplementedError

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def extract_text(self, body: Any) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    # -------------------- execution --------------------

    def _error(
        self,
        message: str,
        kind: ErrorKind,
        *,
        status_code: Optional[int] = None,
    ) -> DispatchError:
        return DispatchError(
            provider=self.provider,
            message=redact(message, [self._config.secret()]),
            status_code=status_code,
            kind=kind,
            model=self._model,
            retryable=is_retryable(kind, status_code),
        )

    def _cancelled(self, cancel: Optional[CancellationToken]) -> DispatchError:
        reason = cancel.reason if cancel is not None else None
        return self._error(reason or "operation cancelled", ErrorKind.CANCELLED)

    def generate_text(
        self,
        request: GenerationRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> List[ContentPart]:
        """Execute the request and return the extracted text as one part.

        Raises:
            DispatchError: for every failure (transport, timeout, status,
                decoding, empty content, cancellation).
        """
        if cancel is not None and cancel.cancelled:
            raise self._cancelled(cancel)
        ctx = LogContext(provider=self.provider, model=self._model)
        timeout = resolve_timeout(request.timeout_seconds, self._config.timeout_seconds)
        path = self.endpoint(request)
        body = self.build_body(request)
        start = time.perf_counter()
        status: Optional[int] = None
        try:
            with open_http_client(
                self._config.base_url,
                timeout=timeout,
                headers=self.auth_headers(),
                transport=self._transport,
                cancel=cancel,
            ) as client:
                response = run_cancellable(lambda: client.post(path, json=body), cancel)
                status = response.status_code
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise self._error(
                _status_message(exc.response),
                ErrorKind.HTTP_STATUS,
                status_code=exc.response.status_code,
            ) from None
        except (httpx.TimeoutException, TimeoutError) as exc:
            if cancel is not None and cancel.cancelled:
                raise self._cancelled(cancel) from None
            raise self._error(
                f"Request to {self.display_name} timed out after {timeout:g}s: {_describe(exc)}",
                ErrorKind.TIMEOUT,
            ) from None
        except (httpx.TransportError, RuntimeError) as exc:
            # abandoned or closed by cancellation
            if cancel is not None and cancel.cancelled:
                raise self._cancelled(cancel) from None
            if not isinstance(exc, httpx.TransportError):
                raise self._error(_describe(exc), ErrorKind.UNANTICIPATED) from None
            raise self._error(
                f"Request to {self.display_name} failed: {_describe(exc)}",
                ErrorKind.TRANSPORT,
            ) from None
        except json.JSONDecodeError as exc:
            raise self._error(
                f"Failed to parse {self.display_name} response: invalid JSON ({exc.msg})",
                ErrorKind.RESPONSE_PARSE,
            ) from None
        except httpx.HTTPError as exc:
            raise self._error(
                f"Request to {self.display_name} failed: {_describe(exc)}",
                ErrorKind.TRANSPORT,
            ) from None
        finally:
            normalized_log_event(
                self._logger,
                "capability.request",
                ctx,
                phase="request",
                status_code=status,
                latency_ms=(time.perf_counter() - start) * 1000.0,
                level=logging.INFO,
            )
        if cancel is not None and cancel.cancelled:
            raise self._cancelled(cancel)
        try:
            text = self.extract_text(payload)
        except DispatchError as err:
            if err.model is None:
                err.model = self._model
            raise
        return [ContentPart.of_text(text)]


__all__ = ["HttpCapability"]
