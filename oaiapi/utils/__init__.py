"""
OAIAPI — OpenAI API Client.

Утилитарные модули.

Содержит:
- formatters: Функции форматирования вывода (VTT, SRT, TSV)

Copyright (c) 2025 Andrey Sobolev (haiodo@gmail.com)
Licensed under MIT License.
"""

from oaiapi.utils.formatters import (
    format_vtt,
    format_srt,
    format_tsv,
    format_timestamp_vtt,
    format_timestamp_srt,
)

__all__ = [
    "format_vtt",
    "format_srt",
    "format_tsv",
    "format_timestamp_vtt",
    "format_timestamp_srt",
]
