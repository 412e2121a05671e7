"""Shared base for vendor-SDK capabilities.

SDK capabilities are the alternate backend to the HTTP ones: same contract,
but the call goes through the vendor client, whose richer response is
converted into typed :class:`ContentPart` values (text, tool calls,
refusals). The vendor client is opened per call in a ``with`` block, built on
an ``httpx.Client`` so a test transport can be injected, with SDK-level retries
disabled.

Error handling:
    Any exception raised by the SDK is normalized with ``normalize_error``:
    the status code is read from the SDK error's ``status_code`` attribute and
    timeouts/connection errors are recognised by class name. The API key is
    scrubbed from messages.
"""
from __future__ import annotations

import logging
import time
from typing import Any, List, Optional

import httpx

from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.runner import run_cancellable
from .errors_parts.classification import normalize_error
from .errors_parts.dispatch_error import DispatchError
from .errors_parts.error_kind import ErrorKind
from .http.client import build_timeout
from .logging import LogContext, get_logger, normalized_log_event
from .models_parts.content_part import ContentPart
from .models_parts.generation_request import GenerationRequest
from .models_parts.provider_config import ProviderConfig
from .timeouts import resolve_timeout


class SdkCapability:
    """Base class for capabilities backed by a vendor SDK client."""

    provider: str = ""
    display_name: str = ""
    sdk_extra: str = ""

    def __init__(
        self,
        config: ProviderConfig,
        model: str,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if self._client_class() is None:
            raise RuntimeError(
                f"{self.sdk_extra} SDK not installed; install extras [sdk]"
            )
        self._config = config
        self._model = model
        self._transport = transport
        self._logger = get_logger(f"llm_dispatch.{self.provider}.sdk")

    @property
    def provider_name(self) -> str:
        return self.provider

    @property
    def model(self) -> str:
        return self._model

    # -------------------- SDK hooks --------------------

    def _client_class(self) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _client_base_url(self) -> str:
        return self._config.base_url

    def _invoke(self, client: Any, request: GenerationRequest) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _to_parts(self, response: Any) -> List[ContentPart]:  # pragma: no cover - abstract
        raise NotImplementedError

    # -------------------- execution --------------------

    def _make_client(self, timeout: float) -> Any:
        http_kwargs: dict = {"timeout": build_timeout(timeout)}
        if self._transport is not None:
            http_kwargs["transport"] = self._transport
        return self._client_class()(
            api_key=self._config.secret(),
            base_url=self._client_base_url(),
            timeout=timeout,
            max_retries=0,
            http_client=httpx.Client(**http_kwargs),
        )

    def _cancelled(self, cancel: CancellationToken) -> DispatchError:
        return DispatchError(
            provider=self.provider,
            message=cancel.reason or "operation cancelled",
            kind=ErrorKind.CANCELLED,
            model=self._model,
        )

    def generate_text(
        self,
        request: GenerationRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> List[ContentPart]:
        """Run one SDK call and return its typed content parts."""
        if cancel is not None and cancel.cancelled:
            raise self._cancelled(cancel)
        ctx = LogContext(provider=self.provider, model=self._model)
        timeout = resolve_timeout(request.timeout_seconds, self._config.timeout_seconds)
        start = time.perf_counter()
        status: Optional[int] = None
        try:
            with self._make_client(timeout) as client:
                if cancel is None:
                    response = self._invoke(client, request)
                else:
                    with cancel.on_cancel(client.close):
                        response = run_cancellable(lambda: self._invoke(client, request), cancel)
        except DispatchError:
            raise
        except Exception as exc:
            if cancel is not None and cancel.cancelled:
                raise self._cancelled(cancel) from None
            err = normalize_error(
                exc,
                provider=self.provider,
                model=self._model,
                secrets=[self._config.secret()],
            )
            status = err.status_code
            raise err from None
        finally:
            normalized_log_event(
                self._logger,
                "capability.request",
                ctx,
                phase="request",
                status_code=status,
                latency_ms=(time.perf_counter() - start) * 1000.0,
                level=logging.INFO,
                backend="sdk",
            )
        if cancel is not None and cancel.cancelled:
            raise self._cancelled(cancel)
        return self._to_parts(response)


__all__ = ["SdkCapability"]
