from __future__ import annotations

import httpx
import pytest

from quantumpass.anu_client import QuantumNumbersClient
from quantumpass.config import DEFAULT_BASE_URL, QuantumPassConfig
from quantumpass.errors import (
    QuantumNumbersApiError,
    QuantumNumbersError,
    QuantumNumbersTransportError,
)
from quantumpass.generator import AnuByteSource


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), timeout=10.0)


def test_request_shape_and_raw_body():
    calls = {"count": 0, "last_request": None}
    body = bytes([98, 1, 55, 0, 255])

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        calls["last_request"] = request
        return httpx.Response(200, content=body)

    with QuantumNumbersClient("KEY", client=_client(handler)) as qc:
        data = qc.get_quantum_numbers(5, "uint8", 100)

    assert data == body
    assert calls["count"] == 1
    req = calls["last_request"]
    assert req.method == "GET"
    assert req.headers["x-api-key"] == "KEY"
    assert req.url.params.get("length") == "5"
    assert req.url.params.get("type") == "uint8"
    assert req.url.params.get("size") == "100"
    assert str(req.url).startswith(DEFAULT_BASE_URL)


def test_body_returned_verbatim_even_if_longer():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b'{"success": true}')

    with QuantumNumbersClient("KEY", client=_client(handler)) as qc:
        assert qc.get_quantum_numbers(3) == b'{"success": true}'


def test_non_200_raises_api_error_with_body():
    calls = {"count": 0}

    def handler(_: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(403, text="Invalid API key")

    with QuantumNumbersClient("BAD", client=_client(handler)) as qc:
        with pytest.raises(QuantumNumbersApiError) as exc_info:
            qc.get_quantum_numbers(8)

    err = exc_info.value
    assert err.status_code == 403
    assert err.body == "Invalid API key"
    assert "Invalid API key" in str(err)
    # No retry
    assert calls["count"] == 1


def test_transport_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    with QuantumNumbersClient("KEY", client=_client(handler)) as qc:
        with pytest.raises(QuantumNumbersTransportError) as exc_info:
            qc.get_quantum_numbers(8)

    assert isinstance(exc_info.value, QuantumNumbersError)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_injected_client_left_open():
    http = _client(lambda _: httpx.Response(200, content=b"x"))
    with QuantumNumbersClient("KEY", client=http) as qc:
        qc.get_quantum_numbers(1)
    assert not http.is_closed
    http.close()


def test_non_ascii_key_raises_client_error():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"x")

    with QuantumNumbersClient("clé", client=_client(handler)) as qc:
        with pytest.raises(QuantumNumbersError):
            qc.get_quantum_numbers(1)


def test_malformed_base_url_raises_client_error():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"x")

    with QuantumNumbersClient(
        "KEY", base_url="https://bad\x00host", client=_client(handler)
    ) as qc:
        with pytest.raises(QuantumNumbersError):
            qc.get_quantum_numbers(1)


class RecordingHttpClient:
    """Stand-in for httpx.Client that records its constructor timeout."""

    instances: list["RecordingHttpClient"] = []

    def __init__(self, timeout=None) -> None:
        self.timeout = timeout
        self.closed = False
        RecordingHttpClient.instances.append(self)

    def get(self, url, params=None, headers=None) -> httpx.Response:
        return httpx.Response(200, content=bytes([98, 1, 55]))

    def close(self) -> None:
        self.closed = True


def test_configured_timeout_reaches_httpx(monkeypatch):
    RecordingHttpClient.instances.clear()
    monkeypatch.setattr(httpx, "Client", RecordingHttpClient)

    source = AnuByteSource(QuantumPassConfig(api_key="KEY", timeout=2.5))
    assert source.fetch(3) == bytes([98, 1, 55])

    [http] = RecordingHttpClient.instances
    assert http.timeout == 2.5
    assert http.closed


def test_default_timeout_is_thirty_seconds(monkeypatch):
    RecordingHttpClient.instances.clear()
    monkeypatch.setattr(httpx, "Client", RecordingHttpClient)

    with QuantumNumbersClient("KEY") as qc:
        qc.get_quantum_numbers(3)

    assert RecordingHttpClient.instances[0].timeout == 30.0
