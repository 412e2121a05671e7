"""HTTP utilities package for capabilities.

Exposes the scoped ``httpx`` client helper and the shared HTTP capability base.
"""

from .client import open_http_client, build_timeout
from .capability import HttpCapability

__all__ = ["open_http_client", "build_timeout", "HttpCapability"]
