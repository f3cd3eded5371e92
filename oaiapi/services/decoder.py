"""
OAIAPI — OpenAI API Client.

Декодирование тел ответов API в типизированные модели.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import json
import logging
from typing import Optional, TypeVar, Union

from pydantic import ValidationError

from oaiapi.errors import ResponseDecodeError
from oaiapi.models.base import ApiError, ApiResultBase

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=ApiResultBase)

# Max body length kept in decode errors
_BODY_PREVIEW_CHARS = 500


def _body_text(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def decode_response(result_type: type[ResultT], body: Union[bytes, str]) -> ResultT:
    """
    Декодирует JSON тело ответа в тип результата.

    Объект "error" в теле считается данными и возвращается в поле
    result.error; исключение поднимается только при невалидном JSON
    или несоответствии формы.

    Args:
        result_type: Класс результата (наследник ApiResultBase).
        body: Тело HTTP ответа.

    Returns:
        Декодированный результат.

    Raises:
        ResponseDecodeError: Если тело не удалось декодировать.

    Example:
        >>> r = decode_response(ApiResultBase, b'{"object": "list"}')
        >>> r.object_type
        'list'
    """
    try:
        result = result_type.model_validate_json(body)
    except ValidationError as e:
        preview = _body_text(body)[:_BODY_PREVIEW_CHARS]
        logger.error(
            f"[OpenAI API] Failed to decode {result_type.__name__}: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
        )
        raise ResponseDecodeError(result_type.__name__, preview, str(e)) from e

    if result.error is not None:
        logger.warning(
            f"[OpenAI API] Response carries API error {result.error.code}: "
            f"{result.error.message}"
        )

    return result


def decode_error_body(body: Union[bytes, str]) -> Optional[ApiError]:
    """
    Извлекает объект ошибки из тела неуспешного ответа.

    Args:
        body: Тело HTTP ответа.

    Returns:
        ApiError или None, если тело не JSON или не содержит
        распознаваемого объекта "error".
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return None

    if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
        return None

    try:
        return ApiError.model_validate(payload["error"])
    except ValidationError as e:
        logger.debug(f"[OpenAI API] Unrecognized error object: {e}")
        return None
