"""Domain record describing a single dog.

Purpose
-------
Hold the one flat value object the package deals in. The module performs no
I/O; adapters hand it already-decoded JSON values and it either returns a
:class:`Dog` or raises :class:`SchemaMismatch`.

Contents
--------
* :class:`SchemaMismatch` – decoded JSON does not have the expected shape.
* :class:`Dog` – immutable ``name``/``breed`` pair.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

_FIELDS: Final[tuple[str, ...]] = ("name", "breed")


class SchemaMismatch(ValueError):
    """Raised when syntactically valid JSON does not describe dogs.

    Why
    ----
    A document such as ``{"name": "Rex"}`` parses fine but is still the wrong
    content. Callers treat it exactly like malformed JSON, so it lives next to
    the record it guards rather than in the error taxonomy. The JSON codec
    also raises it for documents past the decoder's number or nesting limits.
    """


@dataclass(frozen=True, slots=True)
class Dog:
    """Immutable name/breed pair.

    Examples
    --------
    >>> Dog.from_mapping({"name": "Comet", "breed": "Whippet"})
    Dog(name='Comet', breed='Whippet')
    >>> Dog("Maisey", "Treeing Walker Coonhound").to_dict()
    {'name': 'Maisey', 'breed': 'Treeing Walker Coonhound'}
    """

    name: str
    breed: str

    @classmethod
    def from_mapping(cls, data: object, *, index: int | None = None) -> Dog:
        """Build a :class:`Dog` from one decoded JSON object.

        Parameters
        ----------
        data:
            Value produced by the JSON decoder for a single array element.
        index:
            Position inside the enclosing array, used only for error messages.

        Raises
        ------
        SchemaMismatch
            When *data* is not an object, or ``name``/``breed`` is missing or
            not a string. Unknown keys are ignored.
        """

        where = "" if index is None else f" at index {index}"
        if not isinstance(data, Mapping):
            raise SchemaMismatch(f"expected an object{where}, got {type(data).__name__}")
        values: dict[str, str] = {}
        for field in _FIELDS:
            if field not in data:
                raise SchemaMismatch(f"missing field '{field}'{where}")
            value = data[field]
            if not isinstance(value, str):
                raise SchemaMismatch(f"field '{field}'{where} must be a string, got {type(value).__name__}")
            values[field] = value
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready representation of this record."""

        return {"name": self.name, "breed": self.breed}
