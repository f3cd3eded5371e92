"""
OAIAPI — OpenAI API Client.

Конфигурация клиента.
Все настройки загружаются из переменных окружения; явно переданные
аргументы ApiClient имеют приоритет над ними.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import os

# =============================================================================
# API Endpoint Configuration
# =============================================================================

# Secret key used for the Authorization: Bearer header
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# Base URL of the API (OpenAI or any compatible service)
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")

# Organization id sent with every request (empty = not sent)
OPENAI_ORGANIZATION = os.getenv("OPENAI_ORGANIZATION", "")

# User-Agent header value
OPENAI_USER_AGENT = os.getenv("OPENAI_USER_AGENT", "oaiapi-python")

# =============================================================================
# Request Configuration
# =============================================================================

# Request timeout in seconds
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "120.0"))

# Raise ApiResponseError when a 2xx body carries an "error" object
OPENAI_RAISE_ON_API_ERROR = os.getenv("OPENAI_RAISE_ON_API_ERROR", "true").lower() == "true"

# Default model for audio endpoints
DEFAULT_AUDIO_MODEL = os.getenv("OPENAI_AUDIO_MODEL", "whisper-1")

# =============================================================================
# Response Header Names
# =============================================================================

HEADER_ORGANIZATION = "Openai-Organization"
HEADER_REQUEST_ID = "X-Request-ID"
HEADER_API_VERSION = "Openai-Version"
HEADER_PROCESSING_MS = "Openai-Processing-Ms"
