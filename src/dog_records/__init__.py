"""Public package surface for ``dog_records``.

Read a JSON file describing dogs into :class:`Dog` records and report the two
ways it can fail (:class:`BadFile`, :class:`BadJson`) through one error family.
``import dog_records`` and ``python -m dog_records`` reach the same functions.
"""

from __future__ import annotations

from .application.get_dogs import (
    VARIANTS,
    describe_failure,
    get_dogs,
    get_dogs_converted,
    get_dogs_matched,
    get_dogs_opaque,
)
from .core import DEFAULT_FILE_PATH, Settings, dump_dogs, load_dogs, resolve_settings
from .domain.dog import Dog, SchemaMismatch
from .domain.errors import BadFile, BadJson, ErrorKind, GetDogsError, converting_errors
from .observability import bind_trace_id, get_logger

__all__ = [
    "BadFile",
    "BadJson",
    "DEFAULT_FILE_PATH",
    "Dog",
    "ErrorKind",
    "GetDogsError",
    "SchemaMismatch",
    "Settings",
    "VARIANTS",
    "bind_trace_id",
    "converting_errors",
    "describe_failure",
    "dump_dogs",
    "get_dogs",
    "get_dogs_converted",
    "get_dogs_matched",
    "get_dogs_opaque",
    "get_logger",
    "load_dogs",
    "resolve_settings",
]
