"""Three ways of reading a dogs file and reporting what went wrong.

Purpose
-------
Each function below reads a JSON file describing dogs and returns a list of
:class:`~dog_records.domain.dog.Dog`. They differ only in how failures reach
the caller.

Contents
--------
* :func:`get_dogs_opaque` – low-level exceptions escape unchanged. Fine when
  callers only need to know that something failed.
* :func:`get_dogs_matched` – each step is wrapped by hand and its failures are
  re-raised as :class:`BadFile` or :class:`BadJson`.
* :func:`get_dogs_converted` – the same outcome as ``get_dogs_matched`` with a
  straight-line body, relying on :func:`converting_errors`.
* :func:`describe_failure` – what a caller of ``get_dogs_opaque`` has to do to
  tell the failures apart.
* :data:`VARIANTS` – the three functions keyed by name.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Final, Mapping

from ..adapters.file_reader.default import DefaultTextReader
from ..adapters.json_codec.default import JSONDogCodec
from ..domain.dog import Dog, SchemaMismatch
from ..domain.errors import BadFile, BadJson, GetDogsError, converting_errors
from .ports import DogCodec, TextReader

_DEFAULT_READER: Final[TextReader] = DefaultTextReader()
_DEFAULT_CODEC: Final[DogCodec] = JSONDogCodec()


def get_dogs_opaque(
    file_path: str | Path,
    *,
    reader: TextReader | None = None,
    codec: DogCodec | None = None,
) -> list[Dog]:
    """Return the dogs in *file_path*, letting any failure escape as-is.

    Raises
    ------
    OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaMismatch
        Whatever the reader or codec raised. Callers must inspect the type
        themselves (see :func:`describe_failure`).
    """

    text = (reader or _DEFAULT_READER).read(str(file_path))
    return (codec or _DEFAULT_CODEC).decode(text)


def get_dogs_matched(
    file_path: str | Path,
    *,
    reader: TextReader | None = None,
    codec: DogCodec | None = None,
) -> list[Dog]:
    """Return the dogs in *file_path*, classifying failures by hand.

    Raises
    ------
    BadFile
        The file could not be read.
    BadJson
        The content is not a JSON array of dogs.
    """

    try:
        text = (reader or _DEFAULT_READER).read(str(file_path))
    except (OSError, UnicodeDecodeError) as exc:
        raise BadFile(exc) from exc
    try:
        return (codec or _DEFAULT_CODEC).decode(text)
    except (json.JSONDecodeError, SchemaMismatch) as exc:
        raise BadJson(exc) from exc


def get_dogs_converted(
    file_path: str | Path,
    *,
    reader: TextReader | None = None,
    codec: DogCodec | None = None,
) -> list[Dog]:
    """Return the dogs in *file_path*; failures are converted automatically.

    Raises the same :class:`BadFile` / :class:`BadJson` errors as
    :func:`get_dogs_matched`.

    Examples
    --------
    >>> try:
    ...     get_dogs_converted("/nonexistent/dogs.json")
    ... except GetDogsError as err:
    ...     err.kind.value
    'bad_file'
    """

    with converting_errors():
        text = (reader or _DEFAULT_READER).read(str(file_path))
        return (codec or _DEFAULT_CODEC).decode(text)


get_dogs = get_dogs_converted

VARIANTS: Final[Mapping[str, Callable[..., list[Dog]]]] = {
    "opaque": get_dogs_opaque,
    "matched": get_dogs_matched,
    "converted": get_dogs_converted,
}
DEFAULT_VARIANT: Final[str] = "converted"


def describe_failure(exc: BaseException) -> str:
    """Return a user-facing message for any exception raised by a variant.

    Errors that already belong to :class:`GetDogsError` render themselves.
    Anything else is classified by checking its concrete type, which is all a
    caller of :func:`get_dogs_opaque` can do.

    Examples
    --------
    >>> describe_failure(FileNotFoundError("no such file"))
    'bad file: no such file'
    >>> describe_failure(SchemaMismatch("missing field 'breed' at index 0"))
    "bad JSON: missing field 'breed' at index 0"
    >>> describe_failure(KeyError("boom"))
    "some other kind of error: 'boom'"
    """

    if isinstance(exc, GetDogsError):
        return str(exc)
    if isinstance(exc, (OSError, UnicodeDecodeError)):
        return f"bad file: {exc}"
    if isinstance(exc, (json.JSONDecodeError, SchemaMismatch)):
        return f"bad JSON: {exc}"
    return f"some other kind of error: {exc}"
