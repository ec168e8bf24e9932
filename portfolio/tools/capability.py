"""Delegated capability client — calls remote security functions over HTTP."""
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

PASSWORD_GENERATOR = "security-password-generator"
BREACH_CHECKER = "security-breach-checker"
HEADER_ANALYZER = "security-header-analyzer"
SSL_CHECKER = "security-ssl-checker"
VULNERABILITY_SCANNER = "security-vulnerability-scanner"
PORT_SCANNER = "security-port-scanner"


class CapabilityError(Exception):
    """A delegated capability failed (transport error, bad status or malformed body)."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"{name}: {message}")


class CapabilityClient:
    """POSTs a JSON body to `<base_url>/<function name>` and returns the JSON object reply."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        return headers

    async def invoke(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}/{name}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(url, json=body, headers=self._headers())
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise CapabilityError(name, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CapabilityError(name, f"request failed: {e}") from e
        except ValueError as e:
            raise CapabilityError(name, "invalid JSON response") from e

        if not isinstance(data, dict):
            raise CapabilityError(name, f"expected a JSON object, got {type(data).__name__}")
        if data.get("error") and len(data) == 1:
            # Function-level failure reported in a 2xx body
            raise CapabilityError(name, str(data["error"]))

        logger.debug(f"Capability {name} -> {len(data)} keys")
        return data
