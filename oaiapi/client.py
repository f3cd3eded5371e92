"""
OAIAPI — OpenAI API Client.

HTTP клиент OpenAI API.
Выполняет запросы через httpx, декодирует тело ответа в модель
результата и прикрепляет к нему метаданные транспорта
(организация, request id, версия API, время обработки).

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

import logging
import time
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

import httpx

from oaiapi.auth import build_auth_headers
from oaiapi.config import (
    DEFAULT_AUDIO_MODEL,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    OPENAI_ORGANIZATION,
    OPENAI_RAISE_ON_API_ERROR,
    OPENAI_TIMEOUT_SECONDS,
    OPENAI_USER_AGENT,
)
from oaiapi.errors import ApiResponseError, TransportError
from oaiapi.models.audio import AudioTranscriptionResult
from oaiapi.models.base import ApiResultBase
from oaiapi.services.decoder import decode_error_body, decode_response
from oaiapi.services.transport import extract_transport_metadata

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=ApiResultBase)

AudioFile = Union[str, Path, bytes, IO[bytes]]

# Response formats returned as plain text by the audio endpoints
TEXT_RESPONSE_FORMATS = ("text", "srt", "vtt")


def _audio_file_field(file: AudioFile, filename: Optional[str] = None) -> tuple[str, bytes]:
    """
    Готовит поле file для multipart запроса.

    Args:
        file: Путь к файлу, байты или бинарный файловый объект.
        filename: Имя файла; API определяет формат по расширению.

    Returns:
        Кортеж (имя файла, содержимое).
    """
    if isinstance(file, (str, Path)):
        path = Path(file)
        return filename or path.name, path.read_bytes()

    if isinstance(file, bytes):
        return filename or "audio.wav", file

    name = filename or Path(getattr(file, "name", "audio.wav")).name
    return name, file.read()


class ApiClient:
    """
    Клиент OpenAI API.

    Все параметры по умолчанию берутся из конфигурации (переменных
    окружения). Параметр transport позволяет подменить сетевой слой
    httpx (например, httpx.MockTransport в тестах).

    Attributes:
        base_url: Базовый URL API.
        raise_on_api_error: Поднимать ли ApiResponseError, если успешный
            ответ содержит объект "error".

    Example:
        >>> with ApiClient(api_key="sk-...") as client:
        ...     result = client.transcribe("speech.mp3", language="en")
        ...     print(result.text, result.request_id, result.processing_time)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        organization: Optional[str] = None,
        timeout: Optional[float] = None,
        raise_on_api_error: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or OPENAI_BASE_URL).rstrip("/")
        self.organization = organization if organization is not None else (OPENAI_ORGANIZATION or None)
        self.timeout = timeout if timeout is not None else OPENAI_TIMEOUT_SECONDS
        self.raise_on_api_error = (
            OPENAI_RAISE_ON_API_ERROR if raise_on_api_error is None else raise_on_api_error
        )

        headers = build_auth_headers(api_key if api_key is not None else OPENAI_API_KEY, self.organization)
        headers["User-Agent"] = OPENAI_USER_AGENT

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=transport,
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Закрывает HTTP соединения."""
        self._client.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> tuple[httpx.Response, float]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"[OpenAI API] {method} {url}")

        start = time.perf_counter()
        try:
            response = self._client.request(method, path.lstrip("/"), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"[OpenAI API] Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e
        elapsed = time.perf_counter() - start

        logger.info(
            f"[OpenAI API] {method} {url} -> {response.status_code} in {elapsed:.3f}s"
        )

        if not response.is_success:
            error = decode_error_body(response.content)
            logger.warning(
                f"[OpenAI API] {url} returned HTTP {response.status_code}"
                + (f": {error.message}" if error is not None else "")
            )
            raise ApiResponseError(
                response.status_code,
                error=error,
                body=response.text,
                url=url,
            )

        return response, elapsed

    def request(
        self,
        method: str,
        path: str,
        result_type: type[ResultT],
        **kwargs: Any,
    ) -> ResultT:
        """
        Выполняет запрос и декодирует ответ в result_type.

        Метаданные транспорта прикрепляются после декодирования
        и до возврата результата.

        Args:
            method: HTTP метод.
            path: Путь относительно base_url (например, "/audio/transcriptions").
            result_type: Класс результата (наследник ApiResultBase).
            **kwargs: Аргументы httpx.Client.request (json, data, files, ...).

        Returns:
            Декодированный результат с метаданными транспорта.

        Raises:
            TransportError: При сетевой ошибке.
            ApiResponseError: При HTTP статусе вне 2xx, а также при объекте
                "error" в теле, если включён raise_on_api_error.
            ResponseDecodeError: Если тело не удалось декодировать.
        """
        response, elapsed = self._send(method, path, **kwargs)

        result = decode_response(result_type, response.content)
        result.attach_transport_metadata(extract_transport_metadata(response.headers, elapsed))

        if result.error is not None and self.raise_on_api_error:
            raise ApiResponseError(
                response.status_code,
                error=result.error,
                body=response.text,
                result=result,
                url=str(response.request.url),
            )

        return result

    def transcribe(
        self,
        file: AudioFile,
        model: str = DEFAULT_AUDIO_MODEL,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        timestamp_granularities: Optional[list[str]] = None,
        filename: Optional[str] = None,
    ) -> AudioTranscriptionResult:
        """
        Транскрибирует аудио (POST /audio/transcriptions, verbose_json).

        Args:
            file: Аудиофайл (путь, байты или файловый объект).
            model: Название модели.
            language: Код языка (ISO-639-1), например "en" или "ru".
            prompt: Подсказка, продолжающая предыдущий фрагмент.
            temperature: Температура сэмплирования (0..1).
            timestamp_granularities: Гранулярность временных меток: "word", "segment".
            filename: Имя файла для multipart поля.

        Returns:
            AudioTranscriptionResult с сегментами и метаданными.
        """
        data = self._audio_form(model, "verbose_json", prompt, temperature)
        if language:
            data["language"] = language
        if timestamp_granularities:
            data["timestamp_granularities[]"] = list(timestamp_granularities)

        return self.request(
            "POST",
            "/audio/transcriptions",
            AudioTranscriptionResult,
            data=data,
            files={"file": _audio_file_field(file, filename)},
        )

    def translate(
        self,
        file: AudioFile,
        model: str = DEFAULT_AUDIO_MODEL,
        prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        filename: Optional[str] = None,
    ) -> AudioTranscriptionResult:
        """
        Переводит аудио на английский (POST /audio/translations, verbose_json).

        Args:
            file: Аудиофайл (путь, байты или файловый объект).
            model: Название модели.
            prompt: Подсказка на английском.
            temperature: Температура сэмплирования (0..1).
            filename: Имя файла для multipart поля.

        Returns:
            AudioTranscriptionResult с сегментами и метаданными.
        """
        return self.request(
            "POST",
            "/audio/translations",
            AudioTranscriptionResult,
            data=self._audio_form(model, "verbose_json", prompt, temperature),
            files={"file": _audio_file_field(file, filename)},
        )

    def transcribe_as_text(
        self,
        file: AudioFile,
        response_format: str = "text",
        model: str = DEFAULT_AUDIO_MODEL,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        filename: Optional[str] = None,
    ) -> str:
        """
        Транскрибирует аудио и возвращает ответ как строку.

        Args:
            file: Аудиофайл (путь, байты или файловый объект).
            response_format: "text", "srt" или "vtt".
            model: Название модели.
            language: Код языка.
            prompt: Подсказка.
            temperature: Температура сэмплирования.
            filename: Имя файла для multipart поля.

        Returns:
            Текст транскрипции в выбранном формате.

        Raises:
            ValueError: Если формат ответа не текстовый.
        """
        if response_format not in TEXT_RESPONSE_FORMATS:
            supported = ", ".join(TEXT_RESPONSE_FORMATS)
            raise ValueError(
                f"Unsupported response_format: '{response_format}'. "
                f"Supported formats: {supported}"
            )

        data = self._audio_form(model, response_format, prompt, temperature)
        if language:
            data["language"] = language

        response, _ = self._send(
            "POST",
            "/audio/transcriptions",
            data=data,
            files={"file": _audio_file_field(file, filename)},
        )
        return response.text

    @staticmethod
    def _audio_form(
        model: str,
        response_format: str,
        prompt: Optional[str],
        temperature: Optional[float],
    ) -> dict[str, Any]:
        data: dict[str, Any] = {"model": model, "response_format": response_format}
        if prompt:
            data["prompt"] = prompt
        if temperature is not None:
            data["temperature"] = str(temperature)
        return data
