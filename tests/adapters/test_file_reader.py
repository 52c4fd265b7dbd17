from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dog_records.adapters.file_reader.default import DefaultTextReader
from tests.support import VALID_DOGS_JSON, write_dogs_file


def test_reads_utf8_text(tmp_path: Path) -> None:
    path = write_dogs_file(tmp_path, VALID_DOGS_JSON)
    assert DefaultTextReader().read(str(path)) == VALID_DOGS_JSON


def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        DefaultTextReader().read(str(tmp_path / "missing.json"))


def test_directory_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        DefaultTextReader().read(str(tmp_path))


def test_invalid_utf8_raises_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "dogs.json"
    path.write_bytes(b"\xff\xfe[]")
    with pytest.raises(UnicodeDecodeError):
        DefaultTextReader().read(str(path))


def test_custom_encoding(tmp_path: Path) -> None:
    path = tmp_path / "dogs.json"
    path.write_bytes('[{"name": "Bärli", "breed": "Berner"}]'.encode("latin-1"))
    assert "Bärli" in DefaultTextReader(encoding="latin-1").read(str(path))


def test_failures_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="dog_records")
    missing = str(tmp_path / "missing.json")
    with pytest.raises(FileNotFoundError):
        DefaultTextReader().read(missing)
    record = caplog.records[-1]
    assert record.getMessage() == "dogs_file_unreadable"
    assert getattr(record, "context")["path"] == missing
