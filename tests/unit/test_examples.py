from __future__ import annotations

from pathlib import Path

from dog_records import get_dogs
from dog_records.examples import SAMPLE_DOGS, generate_example


def test_generate_example_writes_readable_file(tmp_path: Path) -> None:
    written = generate_example(tmp_path)
    assert written == [tmp_path / "dogs.json"]
    assert get_dogs(written[0]) == list(SAMPLE_DOGS)


def test_generate_example_idempotent(tmp_path: Path) -> None:
    assert generate_example(tmp_path)
    # second call without force should not overwrite
    assert generate_example(tmp_path) == []


def test_generate_example_force_overwrites(tmp_path: Path) -> None:
    target = generate_example(tmp_path)[0]
    original = target.read_text(encoding="utf-8")
    target.write_text("override", encoding="utf-8")
    generate_example(tmp_path, force=True)
    assert target.read_text(encoding="utf-8") == original


def test_generate_example_creates_destination(tmp_path: Path) -> None:
    written = generate_example(tmp_path / "nested" / "dir", filename="pack.json")
    assert written[0].name == "pack.json"
    assert written[0].exists()
