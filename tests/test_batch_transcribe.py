from __future__ import annotations

import csv
import json

import httpx

from oaiapi.batch_transcribe import find_audio_files, main, transcribe_file

from tests.conftest import TRANSCRIPTION_BODY, TRANSPORT_HEADERS


def _handler(request: httpx.Request) -> httpx.Response:
    if b'filename="broken.mp3"' in request.content:
        body = {"error": {"code": 400, "message": "Invalid file format", "metadata": {"format": "mp3"}}}
        return httpx.Response(400, json=body)
    return httpx.Response(200, json=TRANSCRIPTION_BODY, headers=TRANSPORT_HEADERS)


def test_find_audio_files(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "a.wav").write_bytes(b"x")
    (tmp_path / "nested" / "b.MP3").write_bytes(b"x")
    (tmp_path / "notes.txt").write_text("x")

    found = find_audio_files(tmp_path)

    assert [p.name for p in found] == ["a.wav", "b.MP3"]


def test_batch_writes_outputs_and_summary(tmp_path, make_client):
    input_dir = tmp_path / "in"
    output_dir = tmp_path / "out"
    input_dir.mkdir()
    (input_dir / "good.wav").write_bytes(b"RIFF")
    (input_dir / "broken.mp3").write_bytes(b"ID3")

    code = main(input_dir=input_dir, output_dir=output_dir, client=make_client(_handler))

    assert code == 0
    assert (output_dir / "good.txt").read_text(encoding="utf-8") == "hello\n"

    good = json.loads((output_dir / "good.json").read_text(encoding="utf-8"))
    assert good["text"] == "hello"
    assert good["created"] == 1700000000
    assert good["_meta"]["request_id"] == "req_123"
    assert good["_meta"]["processing_seconds"] == 0.25
    assert good["_source"]["status"] == "ok"

    broken = json.loads((output_dir / "broken.json").read_text(encoding="utf-8"))
    assert broken["status_code"] == 400
    assert broken["metadata"] == '{"format":"mp3"}'
    assert broken["_source"]["status"] == "api_error"

    with (output_dir / "summary.csv").open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    statuses = {row["filename"].rsplit("/", 1)[-1]: row["status"] for row in rows}
    assert statuses == {"broken.mp3": "api_error", "good.wav": "ok"}
    good_row = next(r for r in rows if r["filename"].endswith("good.wav"))
    assert good_row["request_id"] == "req_123"
    assert good_row["audio_seconds"] == "1.5"


def test_batch_missing_input(tmp_path, make_client):
    assert main(input_dir=tmp_path / "missing", output_dir=tmp_path / "out", client=make_client(_handler)) == 1


def test_batch_unreadable_file_recorded(tmp_path, make_client):
    input_dir = tmp_path / "in"
    output_dir = tmp_path / "out"
    input_dir.mkdir()
    (input_dir / "good.wav").write_bytes(b"RIFF")
    # A directory with an audio suffix cannot be read as a file
    (input_dir / "locked.wav").mkdir()
    (input_dir / "locked.wav" / "x").write_bytes(b"x")

    files = find_audio_files(input_dir)
    assert [p.name for p in files] == ["good.wav"]

    client = make_client(_handler)
    result, data, _, status = transcribe_file(client, input_dir / "locked.wav")

    assert result is None
    assert status == "read_error"
    assert "Failed to read audio" in data["error"]

    assert main(input_dir=input_dir, output_dir=output_dir, client=client) == 0
    assert (output_dir / "good.txt").read_text(encoding="utf-8") == "hello\n"
