from __future__ import annotations

import pytest

from dog_records.adapters.env.default import DefaultEnvLoader, default_env_prefix


def test_default_env_prefix() -> None:
    assert default_env_prefix("dog-records") == "DOG_RECORDS"


def test_loader_filters_by_prefix() -> None:
    environ = {
        "DOG_RECORDS_FILE": "/data/pack.json",
        "DOG_RECORDS_VARIANT": "matched",
        "DOG_RECORDSX": "ignored",
        "OTHER_FILE": "ignored",
    }
    data = DefaultEnvLoader(environ=environ).load("DOG_RECORDS")
    assert data == {"file": "/data/pack.json", "variant": "matched"}


def test_loader_accepts_prefix_with_trailing_underscore() -> None:
    data = DefaultEnvLoader(environ={"DOG_RECORDS_FILE": "a.json"}).load("DOG_RECORDS_")
    assert data == {"file": "a.json"}


def test_loader_skips_empty_values() -> None:
    assert DefaultEnvLoader(environ={"DOG_RECORDS_FILE": ""}).load("DOG_RECORDS") == {}


def test_loader_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOG_RECORDS_FILE", "from-env.json")
    assert DefaultEnvLoader().load("DOG_RECORDS")["file"] == "from-env.json"
