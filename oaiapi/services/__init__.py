"""
OAIAPI — OpenAI API Client.

Сервисные модули.

Содержит:
- decoder: Декодирование тел ответов в модели
- transport: Извлечение метаданных транспорта из заголовков

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from oaiapi.services.decoder import decode_error_body, decode_response
from oaiapi.services.transport import extract_transport_metadata

__all__ = [
    "decode_response",
    "decode_error_body",
    "extract_transport_metadata",
]
