"""
OAIAPI — OpenAI API Client.

Модуль авторизации по токену.
Формирует заголовки Authorization: Bearer и OpenAI-Organization
для запросов к API.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import logging
from typing import Optional

from oaiapi.errors import AuthenticationError

logger = logging.getLogger(__name__)


def build_auth_headers(api_key: Optional[str], organization: Optional[str] = None) -> dict[str, str]:
    """
    Формирует заголовки авторизации.

    Args:
        api_key: Секретный API ключ.
        organization: Идентификатор организации (необязательно).

    Returns:
        Словарь заголовков для HTTP запроса.

    Raises:
        AuthenticationError: Если API ключ не задан.

    Example:
        >>> build_auth_headers("sk-test", "org-1")
        {'Authorization': 'Bearer sk-test', 'OpenAI-Organization': 'org-1'}
    """
    if not api_key:
        logger.warning("Authentication failed: no API key configured")
        raise AuthenticationError(
            "No API key provided. Pass api_key or set OPENAI_API_KEY."
        )

    headers = {"Authorization": f"Bearer {api_key}"}
    if organization:
        headers["OpenAI-Organization"] = organization

    return headers
