"""
OAIAPI — OpenAI API Client.

Модели результатов аудио эндпоинтов.
Соответствуют формату verbose_json ответа OpenAI Audio
Transcriptions/Translations API.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from oaiapi.models.base import ApiResultBase


class Word(BaseModel):
    """
    Временная метка слова.

    Присутствует в ответе при timestamp_granularities[]=word.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    word: str
    start: float
    end: float


class Segment(BaseModel):
    """
    Сегмент транскрипции.

    Соответствует формату segment из OpenAI verbose_json ответа.
    Метрики avg_logprob, compression_ratio, no_speech_prob и temperature
    переносятся как есть, без проверок между полями.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    seek: int = 0
    start: float
    end: float
    text: str
    tokens: list[int] = []
    temperature: float = 0.0
    avg_logprob: float = 0.0
    compression_ratio: float = 0.0
    no_speech_prob: float = 0.0

    @model_validator(mode="after")
    def _check_bounds(self) -> "Segment":
        if self.end < self.start:
            raise ValueError(
                f"Segment {self.id} ends before it starts ({self.start} > {self.end})"
            )
        return self


class AudioTranscriptionResult(ApiResultBase):
    """
    Результат транскрипции или перевода в формате verbose_json.

    Сегменты идут в хронологическом порядке, как в исходном аудио.

    Пример ответа:
    {
        "task": "transcribe",
        "language": "english",
        "duration": 1.5,
        "text": "hello",
        "segments": [
            {
                "id": 0,
                "seek": 0,
                "start": 0.0,
                "end": 1.5,
                "text": "hello",
                "tokens": [1, 2],
                "temperature": 0.0,
                "avg_logprob": -0.1,
                "compression_ratio": 1.0,
                "no_speech_prob": 0.01
            }
        ]
    }
    """

    duration: float = 0.0
    language: str = ""
    segments: list[Segment] = []
    task: str = ""
    text: str = ""
    words: Optional[list[Word]] = None
