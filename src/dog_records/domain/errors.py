"""Domain-level error taxonomy.

Purpose
-------
Expose the two failure kinds a dogs lookup can end in as one small tagged
union, so callers can branch on :attr:`GetDogsError.kind` (or on the concrete
subclass) without inspecting the low-level exception that caused it.

Contents
--------
* :class:`ErrorKind` – the discriminant.
* :class:`GetDogsError` – base type; wraps the low-level exception as
  :attr:`~GetDogsError.source`.
* :class:`BadFile` – the file could not be read.
* :class:`BadJson` – the file was read but its content is not a dogs array.
* :func:`converting_errors` – context manager mapping low-level exceptions to
  the types above.

System Role
-----------
Application code raises these; the CLI renders ``str(error)`` and exits with
:attr:`~GetDogsError.exit_code`.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from enum import Enum
from typing import ClassVar, Iterator

from .dog import SchemaMismatch


class ErrorKind(str, Enum):
    """Discriminant shared by every :class:`GetDogsError`."""

    BAD_FILE = "bad_file"
    BAD_JSON = "bad_json"


class GetDogsError(Exception):
    """Base type for all failures raised while getting dogs.

    Why
    ----
    Provide a single catch-all type for callers that only need to know that
    something went wrong, while :attr:`kind` keeps the cause switchable.

    What
    ----
    Stores the wrapped exception on :attr:`source`. ``str()`` renders as
    ``"<label>: <source>"``.

    Examples
    --------
    >>> err = GetDogsError.convert(FileNotFoundError("dogs.json"))
    >>> err.kind is ErrorKind.BAD_FILE, str(err)
    (True, 'bad file: dogs.json')
    """

    kind: ClassVar[ErrorKind]
    label: ClassVar[str]
    exit_code: ClassVar[int]

    def __init__(self, source: BaseException) -> None:
        super().__init__(source)
        self.source = source

    def __str__(self) -> str:
        return f"{self.label}: {self.source}"

    @classmethod
    def convert(cls, exc: BaseException) -> GetDogsError:
        """Map a low-level exception onto :class:`BadFile` or :class:`BadJson`.

        Raises
        ------
        TypeError
            When *exc* belongs to neither kind.
        """

        if isinstance(exc, _FILE_ERRORS):
            return BadFile(exc)
        if isinstance(exc, _JSON_ERRORS):
            return BadJson(exc)
        raise TypeError(f"cannot convert {type(exc).__name__} into a GetDogsError")


class BadFile(GetDogsError):
    """The dogs file could not be opened, read, or decoded as text."""

    kind = ErrorKind.BAD_FILE
    label = "bad file"
    exit_code = 66  # EX_NOINPUT


class BadJson(GetDogsError):
    """The dogs file is not a JSON array of ``{name, breed}`` objects."""

    kind = ErrorKind.BAD_JSON
    label = "bad JSON"
    exit_code = 65  # EX_DATAERR


# UnicodeDecodeError is a ValueError, so it must be matched before the JSON kinds.
_FILE_ERRORS: tuple[type[BaseException], ...] = (OSError, UnicodeDecodeError)
_JSON_ERRORS: tuple[type[BaseException], ...] = (json.JSONDecodeError, SchemaMismatch)


@contextmanager
def converting_errors() -> Iterator[None]:
    """Re-raise convertible exceptions from the block as :class:`GetDogsError`.

    The original exception is chained as ``__cause__``. Anything that is
    neither a file nor a JSON failure propagates untouched.

    Examples
    --------
    >>> try:
    ...     with converting_errors():
    ...         json.loads("[")
    ... except GetDogsError as err:
    ...     err.kind
    <ErrorKind.BAD_JSON: 'bad_json'>
    """

    try:
        yield
    except _FILE_ERRORS + _JSON_ERRORS as exc:
        raise GetDogsError.convert(exc) from exc


__all__ = [
    "BadFile",
    "BadJson",
    "ErrorKind",
    "GetDogsError",
    "converting_errors",
]
