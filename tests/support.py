"""Shared fixtures-as-functions for the dog_records test-suite."""

from __future__ import annotations

from pathlib import Path

VALID_DOGS_JSON = """[
  {"name": "Comet", "breed": "Whippet"},
  {"name": "Maisey", "breed": "Treeing Walker Coonhound"}
]
"""
TRUNCATED_JSON = '[{"name": "Comet", "breed": "Whip'
WRONG_SCHEMA_JSON = '[{"name": "Comet"}]'
HUGE_NUMBER_JSON = "[" + "1" * 5000 + "]"
DEEPLY_NESTED_JSON = "[" * 100_000 + "]" * 100_000


def write_dogs_file(directory: Path, content: str, *, name: str = "dogs.json") -> Path:
    """Write *content* to ``directory / name`` and return the path."""

    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
