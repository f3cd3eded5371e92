"""
OAIAPI — OpenAI API Client.

Утилиты форматирования результатов транскрипции.
Преобразуют сегменты AudioTranscriptionResult в форматы субтитров
локально, без повторного запроса к API.

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oaiapi.models.audio import AudioTranscriptionResult


def _split_timestamp(seconds: float) -> tuple[int, int, int, int]:
    total_ms = int(round(max(seconds, 0.0) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return hours, minutes, secs, millis


def format_timestamp_vtt(seconds: float) -> str:
    """
    Форматирует секунды в VTT timestamp (HH:MM:SS.mmm).

    Example:
        >>> format_timestamp_vtt(3661.5)
        '01:01:01.500'
    """
    hours, minutes, secs, millis = _split_timestamp(seconds)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def format_timestamp_srt(seconds: float) -> str:
    """
    Форматирует секунды в SRT timestamp (HH:MM:SS,mmm).

    Example:
        >>> format_timestamp_srt(3661.5)
        '01:01:01,500'
    """
    hours, minutes, secs, millis = _split_timestamp(seconds)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def format_vtt(result: "AudioTranscriptionResult") -> str:
    """
    Форматирует результат в WebVTT.

    Args:
        result: Результат транскрипции.

    Returns:
        Строка в формате WebVTT.

    Example output:
        WEBVTT

        00:00:00.000 --> 00:00:02.500
        Hello world
    """
    lines = ["WEBVTT", ""]

    for seg in result.segments:
        lines.append(f"{format_timestamp_vtt(seg.start)} --> {format_timestamp_vtt(seg.end)}")
        lines.append(seg.text.strip())
        lines.append("")

    return "\n".join(lines)


def format_srt(result: "AudioTranscriptionResult") -> str:
    """
    Форматирует результат в SubRip (SRT).

    Нумерация субтитров начинается с 1 и идёт в порядке сегментов.

    Example output:
        1
        00:00:00,000 --> 00:00:02,500
        Hello world
    """
    lines = []

    for number, seg in enumerate(result.segments, start=1):
        lines.append(str(number))
        lines.append(f"{format_timestamp_srt(seg.start)} --> {format_timestamp_srt(seg.end)}")
        lines.append(seg.text.strip())
        lines.append("")

    return "\n".join(lines)


def format_tsv(result: "AudioTranscriptionResult") -> str:
    """Форматирует результат в TSV с временными метками в миллисекундах."""
    lines = ["start\tend\ttext"]

    for seg in result.segments:
        # Tabs inside text would break columns
        text = seg.text.strip().replace("\t", " ")
        lines.append(f"{int(round(seg.start * 1000))}\t{int(round(seg.end * 1000))}\t{text}")

    return "\n".join(lines)
