"""JSON adapter for the (de)serialisation step.

Purpose
-------
Convert JSON text into :class:`~dog_records.domain.dog.Dog` collections and
back. A small wrapper around :mod:`json` so shape validation and logging live
in one place.

Contents
--------
* :class:`JSONDogCodec` – decodes a JSON array of dogs and encodes one.
"""

from __future__ import annotations

import json
from typing import Sequence

from ...domain.dog import Dog, SchemaMismatch
from ...observability import log_debug, log_error


class JSONDogCodec:
    """Decode and encode JSON arrays of ``{"name", "breed"}`` objects."""

    def decode(self, text: str) -> list[Dog]:
        """Return the dogs described by *text*.

        Raises
        ------
        json.JSONDecodeError
            When *text* is not JSON at all (empty, truncated, garbage).
        SchemaMismatch
            When the JSON is valid but is not an array of dog objects, or
            exceeds the decoder's number-size or nesting limits.

        Examples
        --------
        >>> JSONDogCodec().decode('[{"name": "Oscar", "breed": "German Shorthaired Pointer"}]')
        [Dog(name='Oscar', breed='German Shorthaired Pointer')]
        """

        try:
            data = _parse(text)
            if not isinstance(data, list):
                raise SchemaMismatch(f"expected a JSON array, got {type(data).__name__}")
            dogs = [Dog.from_mapping(item, index=index) for index, item in enumerate(data)]
        except (json.JSONDecodeError, SchemaMismatch) as exc:
            log_error("dogs_json_invalid", step="decode", path=None, error=str(exc))
            raise
        log_debug("dogs_decoded", step="decode", path=None, dogs=len(dogs))
        return dogs

    def encode(self, dogs: Sequence[Dog], *, indent: int | None = None) -> str:
        """Return *dogs* serialised as a JSON array.

        Examples
        --------
        >>> JSONDogCodec().encode([Dog("Comet", "Whippet")])
        '[{"name": "Comet", "breed": "Whippet"}]'
        """

        return json.dumps([dog.to_dict() for dog in dogs], indent=indent)


def _parse(text: str) -> object:
    """Run :func:`json.loads`, reporting decoder limits as :class:`SchemaMismatch`.

    Integer literals past the interpreter's digit limit raise a bare
    ``ValueError`` and very deep nesting raises ``RecursionError``; both mean
    the content cannot become dogs.
    """

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        raise
    except (ValueError, RecursionError) as exc:
        raise SchemaMismatch(f"JSON exceeds decoder limits: {exc}") from exc
