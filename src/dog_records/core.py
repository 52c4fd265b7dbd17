"""Composition root for ``dog_records``.

Purpose
-------
Provide the entry points that combine settings resolution, the chosen
``get_dogs`` variant, and the JSON codec. The CLI talks only to this module.

Contents
--------
* :data:`DEFAULT_FILE_PATH` – file read when nothing else is configured.
* :class:`Settings` – resolved file path and variant.
* :func:`resolve_settings` – merge explicit arguments with the environment.
* :func:`load_dogs` – high-level API returning ``list[Dog]``.
* :func:`dump_dogs` – serialise a collection with the default codec.

System Role
-----------
Precedence is explicit argument, then ``DOG_RECORDS_*`` environment variables,
then the defaults defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Mapping, Sequence

from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .adapters.json_codec.default import JSONDogCodec
from .application.get_dogs import DEFAULT_VARIANT, VARIANTS, describe_failure
from .domain.dog import Dog
from .observability import bind_trace_id, log_error, log_info, make_event

SLUG: Final[str] = "dog-records"
DEFAULT_FILE_PATH: Final[str] = "./dogs.json"

_CODEC: Final[JSONDogCodec] = JSONDogCodec()


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved inputs for a single load."""

    file_path: str
    variant: str


def resolve_settings(
    *,
    file_path: str | Path | None = None,
    variant: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Return the effective :class:`Settings` for a load.

    Raises
    ------
    ValueError
        When the resolved variant is not one of :data:`VARIANTS`.

    Examples
    --------
    >>> resolve_settings(environ={})
    Settings(file_path='./dogs.json', variant='converted')
    >>> resolve_settings(variant="matched", environ={"DOG_RECORDS_FILE": "pack.json"})
    Settings(file_path='pack.json', variant='matched')
    """

    env = DefaultEnvLoader(environ=environ).load(default_env_prefix(SLUG))
    resolved_path = str(file_path) if file_path is not None else env.get("file", DEFAULT_FILE_PATH)
    resolved_variant = (variant or env.get("variant", DEFAULT_VARIANT)).lower()
    if resolved_variant not in VARIANTS:
        choices = ", ".join(VARIANTS)
        raise ValueError(f"Unknown variant {resolved_variant!r}; expected one of: {choices}")
    return Settings(file_path=resolved_path, variant=resolved_variant)


def load_dogs(
    file_path: str | Path | None = None,
    *,
    variant: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Dog]:
    """Read and parse the dogs file using the configured variant.

    Returns
    -------
    list[Dog]
        One record per element of the JSON array, in file order.

    Raises
    ------
    GetDogsError
        For the ``matched`` and ``converted`` variants.
    Exception
        For the ``opaque`` variant, whatever the reader or codec raised.

    Side Effects
    ------------
    Clears the trace identifier and emits ``dogs_loaded`` or
    ``dogs_load_failed``.
    """

    settings = resolve_settings(file_path=file_path, variant=variant, environ=environ)
    bind_trace_id(None)
    get_dogs = VARIANTS[settings.variant]
    try:
        dogs = get_dogs(settings.file_path)
    except Exception as exc:
        log_error(
            "dogs_load_failed",
            **make_event("load", settings.file_path, {"variant": settings.variant, "error": describe_failure(exc)}),
        )
        raise
    log_info("dogs_loaded", **make_event("load", settings.file_path, {"variant": settings.variant, "dogs": len(dogs)}))
    return dogs


def dump_dogs(dogs: Sequence[Dog], *, indent: int | None = None) -> str:
    """Serialise *dogs* as a JSON array.

    Examples
    --------
    >>> dump_dogs([Dog("Comet", "Whippet")])
    '[{"name": "Comet", "breed": "Whippet"}]'
    """

    return _CODEC.encode(dogs, indent=indent)


__all__ = [
    "DEFAULT_FILE_PATH",
    "Settings",
    "dump_dogs",
    "load_dogs",
    "resolve_settings",
]
