from __future__ import annotations

import copy
from typing import Any, Callable, Iterator

import httpx
import pytest

from oaiapi.client import ApiClient

BASE_URL = "https://api.test/v1"

TRANSCRIPTION_BODY: dict[str, Any] = {
    "created": 1700000000,
    "object": "transcription",
    "model": "whisper-1",
    "text": "hello",
    "duration": 1.5,
    "language": "en",
    "task": "transcribe",
    "segments": [
        {
            "id": 0,
            "start": 0.0,
            "end": 1.5,
            "text": "hello",
            "tokens": [1, 2],
            "avg_logprob": -0.1,
            "compression_ratio": 1.0,
            "no_speech_prob": 0.01,
            "seek": 0,
            "temperature": 0.0,
        }
    ],
}

TRANSPORT_HEADERS = {
    "openai-organization": "org-test",
    "x-request-id": "req_123",
    "openai-version": "2020-10-01",
    "openai-processing-ms": "250",
}


@pytest.fixture
def transcription_body() -> dict[str, Any]:
    return copy.deepcopy(TRANSCRIPTION_BODY)


@pytest.fixture
def make_client() -> Iterator[Callable[..., ApiClient]]:
    """Build an ApiClient whose network layer is the given handler."""
    clients: list[ApiClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> ApiClient:
        client = ApiClient(
            api_key=kwargs.pop("api_key", "sk-test"),
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        clients.append(client)
        return client

    yield _make

    for c in clients:
        c.close()
