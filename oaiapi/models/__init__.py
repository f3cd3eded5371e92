"""
OAIAPI — OpenAI API Client.

Pydantic модели ответов API.

Содержит:
- base: Общая оболочка ответа (ApiResultBase, ApiError, TransportMetadata, MetadataNormalizer)
- model: Идентификатор модели (Model)
- audio: Результаты аудио эндпоинтов (Word, Segment, AudioTranscriptionResult)

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from oaiapi.models.model import Model
from oaiapi.models.base import (
    ApiError,
    ApiResultBase,
    MetadataNormalizer,
    RawJsonText,
    TransportMetadata,
)
from oaiapi.models.audio import (
    AudioTranscriptionResult,
    Segment,
    Word,
)

__all__ = [
    "Model",
    "ApiError",
    "ApiResultBase",
    "MetadataNormalizer",
    "RawJsonText",
    "TransportMetadata",
    "AudioTranscriptionResult",
    "Segment",
    "Word",
]
