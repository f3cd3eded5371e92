"""
OAIAPI — OpenAI API Client.

Базовые модели ответа API.

Содержит:
- MetadataNormalizer: правило поля, сохраняющее произвольный JSON как строку
- ApiError: объект ошибки из тела ответа
- TransportMetadata: метаданные из HTTP заголовков и замера времени
- ApiResultBase: общая оболочка, которую расширяет каждый тип результата

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    PrivateAttr,
)

from oaiapi.errors import TransportMetadataError
from oaiapi.models.model import Model


class MetadataNormalizer:
    """
    Правило декодирования поля с JSON произвольной формы.

    Значение поля (объект, массив, строка, число, boolean или null)
    сохраняется как компактная JSON строка: без пробелов, с порядком
    ключей, в котором они пришли. Правило подключается к конкретному
    полю через тип RawJsonText, а не ко всем строковым полям.

    Сериализация через это правило не поддерживается: клиент только
    читает такие поля из ответов и никогда не отправляет их.

    Example:
        >>> MetadataNormalizer.decode({"param": "x", "nested": [1, 2, 3]})
        '{"param":"x","nested":[1,2,3]}'
        >>> MetadataNormalizer.decode("abc")
        '"abc"'
    """

    @staticmethod
    def decode(value: Any) -> str:
        """
        Возвращает компактную JSON строку для одного JSON значения.

        Args:
            value: Значение, разобранное из JSON на позиции поля.

        Returns:
            Каноническая компактная JSON строка.

        Raises:
            ValueError: Если значение не представимо в JSON.
        """
        try:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ValueError(f"metadata is not a JSON value: {e}") from e

    @staticmethod
    def encode(value: Any) -> Any:
        """
        Сериализация не поддерживается.

        Raises:
            NotImplementedError: Всегда.
        """
        raise NotImplementedError(
            "Serializing through MetadataNormalizer is not supported"
        )


# Opt-in field type: any JSON value captured verbatim as compact JSON text
RawJsonText = Annotated[
    Optional[str],
    BeforeValidator(MetadataNormalizer.decode),
    PlainSerializer(MetadataNormalizer.encode, when_used="unless-none"),
]


class ApiError(BaseModel):
    """
    Объект ошибки из тела ответа API.

    Форма поля metadata не зафиксирована контрактом API, поэтому оно
    хранится как JSON строка (см. MetadataNormalizer).

    Note:
        Правило metadata работает только на чтение ответа и применяется
        и при создании объекта из Python: строка, переданная как
        ApiError(metadata='{"a":1}'), считается JSON строкой и будет
        закодирована повторно ('"{\\"a\\":1}"'). Числа вне диапазона
        float (например 1e400) не представимы в JSON и дают ошибку
        декодирования.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: int
    message: str
    metadata: RawJsonText = None


class TransportMetadata(BaseModel):
    """
    Метаданные транспорта.

    Берутся из заголовков HTTP ответа и локального замера времени,
    а не из тела ответа.
    """

    model_config = ConfigDict(frozen=True)

    organization: Optional[str] = None
    processing_time: Optional[timedelta] = None
    request_id: Optional[str] = None
    api_version: Optional[str] = None


class ApiResultBase(BaseModel):
    """
    Результат вызова OpenAI API с общими для всех эндпоинтов метаданными.

    Поля тела ответа декодируются один раз и далее не меняются.
    Метаданные транспорта устанавливаются клиентом ровно один раз,
    после успешного декодирования, через attach_transport_metadata().

    Наличие error не является исключением на этом уровне: решение,
    поднимать ли ошибку, принимает ApiClient.

    Example:
        >>> r = ApiResultBase.model_validate({"created": 1700000000, "object": "list"})
        >>> r.created.isoformat()
        '2023-11-14T22:13:20+00:00'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    created_unix_time: Optional[int] = Field(default=None, alias="created")
    model: Optional[Model] = None
    object_type: Optional[str] = Field(default=None, alias="object")
    error: Optional[ApiError] = None

    _transport: Optional[TransportMetadata] = PrivateAttr(default=None)

    @property
    def created(self) -> Optional[datetime]:
        """Время генерации результата (UTC) или None."""
        if self.created_unix_time is None:
            return None
        return datetime.fromtimestamp(self.created_unix_time, tz=timezone.utc)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def transport_metadata(self) -> Optional[TransportMetadata]:
        return self._transport

    @property
    def organization(self) -> Optional[str]:
        """Организация, указанная API для запроса."""
        return self._transport.organization if self._transport else None

    @property
    def processing_time(self) -> Optional[timedelta]:
        """Время обработки запроса; полезно для поиска задержек."""
        return self._transport.processing_time if self._transport else None

    @property
    def request_id(self) -> Optional[str]:
        """Request id из заголовков ответа, для обращения в поддержку."""
        return self._transport.request_id if self._transport else None

    @property
    def api_version(self) -> Optional[str]:
        """Версия API (заголовок Openai-Version)."""
        return self._transport.api_version if self._transport else None

    def attach_transport_metadata(self, metadata: TransportMetadata) -> None:
        """
        Устанавливает метаданные транспорта.

        Вызывается транспортным слоем один раз, после декодирования
        и до передачи результата вызывающему коду.

        Args:
            metadata: Метаданные из заголовков и замера времени.

        Raises:
            TransportMetadataError: Если метаданные уже установлены.
        """
        if self._transport is not None:
            raise TransportMetadataError(
                f"Transport metadata already attached to {type(self).__name__}"
            )
        self._transport = metadata
