"""
OAIAPI — OpenAI API Client.

Клиентская библиотека для OpenAI HTTP API.
Декодирует JSON-ответы в типизированные модели и переносит
метаданные транспорта (организация, request id, версия API,
время обработки) вместе с результатом.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

__version__ = "1.0.0"

from oaiapi.client import ApiClient
from oaiapi.errors import (
    ApiResponseError,
    AuthenticationError,
    OpenAIClientError,
    ResponseDecodeError,
    TransportError,
    TransportMetadataError,
)
from oaiapi.models import (
    ApiError,
    ApiResultBase,
    AudioTranscriptionResult,
    MetadataNormalizer,
    Model,
    Segment,
    TransportMetadata,
    Word,
)

__all__ = [
    "__version__",
    "ApiClient",
    "ApiResponseError",
    "AuthenticationError",
    "OpenAIClientError",
    "ResponseDecodeError",
    "TransportError",
    "TransportMetadataError",
    "ApiError",
    "ApiResultBase",
    "AudioTranscriptionResult",
    "MetadataNormalizer",
    "Model",
    "Segment",
    "TransportMetadata",
    "Word",
]
