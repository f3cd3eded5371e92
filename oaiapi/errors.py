"""
OAIAPI — OpenAI API Client.

Иерархия исключений клиента.

Различает три вида ошибок:
- ошибка декодирования (тело ответа не является корректным JSON
  или не соответствует ожидаемой форме);
- ошибка уровня API (тело содержит объект "error" или HTTP статус не 2xx);
- ошибка транспорта (сеть, таймаут).

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from oaiapi.models.base import ApiError, ApiResultBase


class OpenAIClientError(Exception):
    """Базовое исключение для всех ошибок клиента."""


class AuthenticationError(OpenAIClientError):
    """Исключение при отсутствии API ключа."""


class TransportError(OpenAIClientError):
    """
    Исключение при сетевой ошибке.

    Attributes:
        url: URL запроса.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class TransportMetadataError(OpenAIClientError):
    """Исключение при повторной установке метаданных транспорта."""


class ResponseDecodeError(OpenAIClientError):
    """
    Исключение при ошибке декодирования тела ответа.

    Возникает, если тело не является корректным JSON или его форма
    не соответствует типу результата. Исходная ошибка pydantic
    доступна через __cause__.

    Attributes:
        result_type: Имя типа, в который выполнялось декодирование.
        body: Тело ответа (обрезанное для сообщения).
    """

    def __init__(self, result_type: str, body: str, reason: str):
        self.result_type = result_type
        self.body = body
        super().__init__(
            f"Failed to decode {result_type} from response body: {reason}"
        )


class ApiResponseError(OpenAIClientError):
    """
    Исключение при ошибке уровня API.

    Возникает при HTTP статусе вне диапазона 2xx либо, если включён
    raise_on_api_error, при наличии объекта "error" в успешном ответе.

    Attributes:
        status_code: HTTP статус ответа.
        error: Декодированный объект ошибки API (если есть).
        body: Исходное тело ответа.
        result: Декодированный результат (только для 2xx ответов с "error").
        url: URL запроса.
    """

    def __init__(
        self,
        status_code: int,
        error: Optional["ApiError"] = None,
        body: str = "",
        result: Optional["ApiResultBase"] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.error = error
        self.body = body
        self.result = result
        self.url = url

        if error is not None:
            detail = f"{error.message} (code {error.code})"
        else:
            detail = body[:500] if body else "no response body"

        message = f"Error at {url or 'API'} with HTTP status code {status_code}: {detail}"
        if status_code >= 500:
            message = (
                f"OpenAI had an internal server error, which can happen occasionally. "
                f"Please retry your request. {message}"
            )
        super().__init__(message)
