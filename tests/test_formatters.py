from __future__ import annotations

from oaiapi.models import AudioTranscriptionResult
from oaiapi.utils.formatters import (
    format_srt,
    format_timestamp_srt,
    format_timestamp_vtt,
    format_tsv,
    format_vtt,
)


def _result() -> AudioTranscriptionResult:
    return AudioTranscriptionResult.model_validate(
        {
            "text": "Hello world How are you?",
            "segments": [
                {"id": 0, "start": 0.0, "end": 2.5, "text": " Hello world"},
                {"id": 1, "start": 2.5, "end": 5.0, "text": " How\tare you?"},
            ],
        }
    )


def test_timestamps():
    assert format_timestamp_vtt(3661.5) == "01:01:01.500"
    assert format_timestamp_srt(3661.5) == "01:01:01,500"
    assert format_timestamp_srt(0.0) == "00:00:00,000"
    assert format_timestamp_vtt(0.29) == "00:00:00.290"
    assert format_timestamp_vtt(59.9996) == "00:01:00.000"


def test_vtt():
    assert format_vtt(_result()) == (
        "WEBVTT\n\n"
        "00:00:00.000 --> 00:00:02.500\nHello world\n\n"
        "00:00:02.500 --> 00:00:05.000\nHow\tare you?\n"
    )


def test_srt_numbering_follows_order():
    lines = format_srt(_result()).split("\n")
    assert lines[0] == "1"
    assert lines[1] == "00:00:00,000 --> 00:00:02,500"
    assert lines[2] == "Hello world"
    assert lines[4] == "2"


def test_tsv():
    assert format_tsv(_result()) == "start\tend\ttext\n0\t2500\tHello world\n2500\t5000\tHow are you?"


def test_empty_result():
    empty = AudioTranscriptionResult.model_validate({})
    assert format_vtt(empty) == "WEBVTT\n"
    assert format_srt(empty) == ""
    assert format_tsv(empty) == "start\tend\ttext"
