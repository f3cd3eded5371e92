#!/usr/bin/env python3
"""
Batch transcription tool.

Scans an input folder for audio files, transcribes each file through the
OpenAI Audio Transcriptions API (verbose_json) and writes outputs to an
output folder.

Outputs per file:
  - {basename}.txt  : plain-text transcription
  - {basename}.json : verbose result plus transport metadata (request id, ...)

Also appends a summary line to {output}/summary.csv with:
  filename, audio_seconds, elapsed_seconds, chars, chars_per_second, request_id, status

Usage:
  OPENAI_API_KEY=sk-... python -m oaiapi.batch_transcribe -i samples -o output
  python -m oaiapi.batch_transcribe -i samples -o output --language ru --model whisper-1

Notes:
  - Connection settings come from environment variables (see oaiapi.config).
  - An API, network or file read error for one file is recorded as its status; the batch continues.
"""
from __future__ import annotations

import csv
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from oaiapi.client import ApiClient
from oaiapi.config import DEFAULT_AUDIO_MODEL
from oaiapi.errors import (
    ApiResponseError,
    AuthenticationError,
    ResponseDecodeError,
    TransportError,
)
from oaiapi.models.audio import AudioTranscriptionResult

logger = logging.getLogger(__name__)

# Default locations
DEFAULT_INPUT_DIR = Path("samples")
DEFAULT_OUTPUT_DIR = Path("output")

# Formats accepted by the transcription endpoint
AUDIO_SUFFIXES = {".flac", ".m4a", ".mp3", ".mp4", ".mpeg", ".mpga", ".oga", ".ogg", ".wav", ".webm"}

SUMMARY_HEADER = [
    "filename",
    "audio_seconds",
    "elapsed_seconds",
    "chars",
    "chars_per_second",
    "request_id",
    "status",
]


def find_audio_files(folder: Path) -> List[Path]:
    """Find audio files under folder (recursive) with supported extensions."""
    return sorted(
        p for p in folder.rglob("*") if p.is_file() and p.suffix.lower() in AUDIO_SUFFIXES
    )


def append_summary_row(csv_path: Path, row: Tuple) -> None:
    write_header = not csv_path.exists()
    with csv_path.open("a", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        if write_header:
            w.writerow(SUMMARY_HEADER)
        w.writerow(row)


def result_to_dict(result: AudioTranscriptionResult) -> dict:
    """Convert a result and its transport metadata to a JSON-serializable dict."""
    data = result.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"error"})
    if result.error is not None:
        data["error"] = {
            "code": result.error.code,
            "message": result.error.message,
            "metadata": result.error.metadata,
        }
    processing = result.processing_time
    data["_meta"] = {
        "request_id": result.request_id,
        "organization": result.organization,
        "api_version": result.api_version,
        "processing_seconds": processing.total_seconds() if processing is not None else None,
    }
    return data


def transcribe_file(
    client: ApiClient,
    audio_path: Path,
    model: str = DEFAULT_AUDIO_MODEL,
    language: Optional[str] = None,
) -> Tuple[Optional[AudioTranscriptionResult], dict, float, str]:
    """
    Transcribe a single file.

    Returns (result_or_None, result_dict, elapsed_seconds, status)
    status is one of: "ok", "api_error", "decode_error", "network_error", "read_error"
    """
    start = time.perf_counter()
    try:
        result = client.transcribe(audio_path, model=model, language=language)
    except ApiResponseError as e:
        elapsed = time.perf_counter() - start
        error = {"error": str(e), "status_code": e.status_code}
        if e.error is not None:
            error["code"] = e.error.code
            error["metadata"] = e.error.metadata
        return None, error, round(elapsed, 3), "api_error"
    except ResponseDecodeError as e:
        return None, {"error": str(e)}, round(time.perf_counter() - start, 3), "decode_error"
    except TransportError as e:
        return None, {"error": str(e)}, round(time.perf_counter() - start, 3), "network_error"
    except OSError as e:
        return None, {"error": f"Failed to read audio: {e}"}, round(time.perf_counter() - start, 3), "read_error"

    elapsed = time.perf_counter() - start
    return result, result_to_dict(result), round(elapsed, 3), "ok"


def main(
    input_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    model: str = DEFAULT_AUDIO_MODEL,
    language: Optional[str] = None,
    client: Optional[ApiClient] = None,
) -> int:
    input_dir = input_dir or DEFAULT_INPUT_DIR
    output_dir = output_dir or DEFAULT_OUTPUT_DIR

    print("Batch transcription starting")
    print(f"Input folder : {input_dir}")
    print(f"Output folder: {output_dir}")

    if not input_dir.exists():
        print(f"Input folder does not exist: {input_dir}")
        return 1

    files = find_audio_files(input_dir)
    if not files:
        print(f"No audio files found in {input_dir}")
        return 0

    output_dir.mkdir(parents=True, exist_ok=True)
    summary_csv = output_dir / "summary.csv"

    if client is None:
        try:
            client = ApiClient()
        except AuthenticationError as e:
            print(str(e))
            return 1

    with client:
        for idx, f in enumerate(files, start=1):
            print(f"\n[{idx}/{len(files)}] Processing: {f.name}")
            result, result_dict, elapsed, status = transcribe_file(
                client, f, model=model, language=language
            )

            result_dict["_source"] = {
                "file": str(f),
                "elapsed_seconds": elapsed,
                "status": status,
                "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S"),
            }

            text = result.text if result is not None else ""
            txt_path = output_dir / f"{f.stem}.txt"
            json_path = output_dir / f"{f.stem}.json"
            try:
                txt_path.write_text(text + "\n", encoding="utf-8")
                with json_path.open("w", encoding="utf-8") as jf:
                    json.dump(result_dict, jf, ensure_ascii=False, indent=2)
            except OSError as e:
                print(f"Failed to write outputs for {f}: {e}")
                status = "write_error"

            audio_sec = result.duration if result is not None else None
            chars = len(text)
            cps = round(chars / audio_sec, 4) if audio_sec else None
            request_id = result.request_id if result is not None else None

            append_summary_row(summary_csv, (str(f), audio_sec, elapsed, chars, cps, request_id, status))

            print(f"-> Saved: {json_path} (elapsed={elapsed}s, chars={chars}, cps={cps}, status={status})")

    print("\nBatch transcription completed.")
    return 0


if __name__ == "__main__":
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    p = argparse.ArgumentParser(description="Batch transcription of an audio folder via the OpenAI API")
    p.add_argument("--input", "-i", type=Path, default=DEFAULT_INPUT_DIR, help="Input directory (default: samples)")
    p.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT_DIR, help="Output directory (default: output)")
    p.add_argument("--model", "-m", default=DEFAULT_AUDIO_MODEL, help="Model name (default: whisper-1)")
    p.add_argument("--language", "-l", default=None, help="Language code, e.g. en or ru")
    args = p.parse_args()

    sys.exit(main(input_dir=args.input, output_dir=args.output, model=args.model, language=args.language))
