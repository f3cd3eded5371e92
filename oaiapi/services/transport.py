"""
OAIAPI — OpenAI API Client.

Извлечение метаданных транспорта из заголовков HTTP ответа.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import logging
from datetime import timedelta
from typing import Mapping, Optional

from oaiapi.config import (
    HEADER_API_VERSION,
    HEADER_ORGANIZATION,
    HEADER_PROCESSING_MS,
    HEADER_REQUEST_ID,
)
from oaiapi.models.base import TransportMetadata

logger = logging.getLogger(__name__)


def _parse_processing_ms(value: Optional[str]) -> Optional[timedelta]:
    if value is None:
        return None
    try:
        return timedelta(milliseconds=float(value))
    except (ValueError, OverflowError):
        logger.warning(f"[OpenAI API] Invalid {HEADER_PROCESSING_MS} header: {value!r}")
        return None


def extract_transport_metadata(
    headers: Mapping[str, str],
    elapsed: Optional[float] = None,
) -> TransportMetadata:
    """
    Строит TransportMetadata из заголовков ответа.

    Имена заголовков сравниваются без учёта регистра. Время обработки
    берётся из Openai-Processing-Ms, а если заголовка нет —
    из локального замера elapsed.

    Args:
        headers: Заголовки ответа (httpx.Headers или dict).
        elapsed: Локально измеренное время запроса в секундах.

    Returns:
        TransportMetadata; отсутствующие значения равны None.

    Example:
        >>> meta = extract_transport_metadata({"x-request-id": "req_1"}, elapsed=0.25)
        >>> meta.request_id, meta.processing_time.total_seconds()
        ('req_1', 0.25)
    """
    lowered = {k.lower(): v for k, v in headers.items()}

    processing_time = _parse_processing_ms(lowered.get(HEADER_PROCESSING_MS.lower()))
    if processing_time is None and elapsed is not None:
        processing_time = timedelta(seconds=elapsed)

    return TransportMetadata(
        organization=lowered.get(HEADER_ORGANIZATION.lower()),
        processing_time=processing_time,
        request_id=lowered.get(HEADER_REQUEST_ID.lower()),
        api_version=lowered.get(HEADER_API_VERSION.lower()),
    )
