from __future__ import annotations

import json

import pytest

from dog_records.domain.dog import SchemaMismatch
from dog_records.domain.errors import BadFile, BadJson, ErrorKind, GetDogsError, converting_errors


def test_error_hierarchy() -> None:
    assert issubclass(BadFile, GetDogsError)
    assert issubclass(BadJson, GetDogsError)
    for error in (BadFile(OSError("x")), BadJson(ValueError("y"))):
        assert isinstance(error, Exception)


def test_kinds_and_exit_codes_are_distinct() -> None:
    assert BadFile.kind is ErrorKind.BAD_FILE
    assert BadJson.kind is ErrorKind.BAD_JSON
    assert BadFile.exit_code != BadJson.exit_code


def test_str_prefixes_source_message() -> None:
    assert str(BadFile(FileNotFoundError("dogs.json"))) == "bad file: dogs.json"
    assert str(BadJson(SchemaMismatch("missing field 'breed'"))) == "bad JSON: missing field 'breed'"


def test_source_is_the_wrapped_exception() -> None:
    cause = PermissionError("denied")
    assert BadFile(cause).source is cause


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (FileNotFoundError("missing"), BadFile),
        (IsADirectoryError("dir"), BadFile),
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), BadFile),
        (json.JSONDecodeError("Expecting value", "", 0), BadJson),
        (SchemaMismatch("expected a JSON array, got dict"), BadJson),
    ],
)
def test_convert_maps_low_level_errors(exc: BaseException, expected: type[GetDogsError]) -> None:
    converted = GetDogsError.convert(exc)
    assert type(converted) is expected
    assert converted.source is exc


def test_convert_rejects_unrelated_exceptions() -> None:
    with pytest.raises(TypeError):
        GetDogsError.convert(KeyError("name"))


def test_converting_errors_chains_cause() -> None:
    with pytest.raises(BadJson) as excinfo:
        with converting_errors():
            json.loads("[1,")
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
    assert excinfo.value.kind is ErrorKind.BAD_JSON


def test_converting_errors_passes_other_exceptions_through() -> None:
    with pytest.raises(KeyError):
        with converting_errors():
            raise KeyError("breed")
