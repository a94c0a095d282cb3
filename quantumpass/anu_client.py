from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import DEFAULT_BASE_URL
from .errors import (
    QuantumNumbersApiError,
    QuantumNumbersError,
    QuantumNumbersTransportError,
)

logger = logging.getLogger(__name__)


class QuantumNumbersClient:
    """
    Minimal client for the ANU quantum random numbers API.

    Notes
    - One GET per call. No retry and no caching: every password gets fresh
      bytes or an error.
    - The response body is returned verbatim; the caller decides how many
      bytes it needs.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("?")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "QuantumNumbersClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_quantum_numbers(
        self,
        length: int,
        dtype: str = "uint8",
        block_size: int = 100,
    ) -> bytes:
        """
        Fetch `length` values of type `dtype` and return the raw body bytes.

        Raises QuantumNumbersApiError on any non-200 answer (message carries
        the body text) and QuantumNumbersTransportError when no answer came.
        """
        params = {"length": length, "type": dtype, "size": block_size}
        headers = {"x-api-key": self._api_key}
        logger.debug(
            "Requesting %d quantum numbers (type=%s, size=%d)",
            length,
            dtype,
            block_size,
        )
        try:
            resp = self._client.get(self._base_url, params=params, headers=headers)
        except httpx.TransportError as exc:
            raise QuantumNumbersTransportError(
                f"Quantum numbers request failed: {exc}"
            ) from exc
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Bad base_url, or a header value that is not ASCII
            raise QuantumNumbersError(
                f"Cannot build quantum numbers request: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise QuantumNumbersApiError(resp.status_code, resp.text)

        return resp.content


def get_quantum_numbers(
    api_key: str,
    length: int,
    dtype: str = "uint8",
    block_size: int = 100,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 30.0,
) -> bytes:
    """One-shot helper: open a client, fetch, close."""
    with QuantumNumbersClient(api_key, base_url=base_url, timeout=timeout) as qc:
        return qc.get_quantum_numbers(length, dtype, block_size)


__all__ = [
    "QuantumNumbersClient",
    "get_quantum_numbers",
]
