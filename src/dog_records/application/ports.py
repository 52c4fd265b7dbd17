"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the two pipeline steps must satisfy so the
``get_dogs`` variants can be exercised with any reader or codec.

Contents
--------
* :class:`TextReader` – the file-reading step.
* :class:`DogCodec` – the JSON (de)serialisation step.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..domain.dog import Dog


@runtime_checkable
class TextReader(Protocol):
    """Read a whole file as text.

    Implementations raise the underlying :class:`OSError` or
    :class:`UnicodeDecodeError`; translating them is the caller's job.
    """

    def read(self, path: str) -> str:
        """Return the full text content of *path*."""


@runtime_checkable
class DogCodec(Protocol):
    """Translate between JSON text and :class:`Dog` collections."""

    def decode(self, text: str) -> list[Dog]:
        """Parse *text* or raise ``json.JSONDecodeError`` / ``SchemaMismatch``."""

    def encode(self, dogs: Sequence[Dog], *, indent: int | None = None) -> str:
        """Serialise *dogs* as a JSON array."""
