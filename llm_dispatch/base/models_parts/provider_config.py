"""
Provider configuration model.

``ProviderConfig`` is built once by the configuration loader and never
mutated afterwards. The API key is held as a ``SecretStr`` so it renders as
``**********`` in ``repr``/``str`` and cannot leak through logging of the
config object.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator


Backend = Literal["http", "sdk"]


class ProviderConfig(BaseModel):
    """Credentials and endpoint for one provider.

    Attributes
    ----------
    provider:
        Canonical provider id (e.g. ``"openai"``).
    api_key:
        Secret credential. Read it with ``api_key.get_secret_value()`` only at
        the point of building a request.
    base_url:
        API base URL without a trailing slash.
    default_model:
        Model used when a dispatch does not name one.
    backend:
        Capability implementation: ``"http"`` (direct wire calls) or ``"sdk"``
        (vendor SDK).
    timeout_seconds:
        Per-provider request timeout override.
    """

    model_config = ConfigDict(frozen=True)

    provider: str
    api_key: SecretStr
    base_url: str
    default_model: Optional[str] = None
    backend: Backend = "http"
    timeout_seconds: Optional[float] = None

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def secret(self) -> str:
        """Return the raw API key."""
        return self.api_key.get_secret_value()


__all__ = [
    "Backend",
    "ProviderConfig",
]
