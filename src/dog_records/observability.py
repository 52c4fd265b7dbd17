"""Structured logging for the dogs pipeline.

Purpose
    Every step of a load (read the file, decode the JSON, hand back the dogs)
    reports one named event with the same context keys, so a log line tells
    which step ran, on which file, and with which outcome. The package logger
    stays silent until the host application attaches a handler.

Contents
    - ``TRACE_ID``: identifier correlating the events of one load.
    - ``get_logger``: the ``dog_records`` logger.
    - ``bind_trace_id``: sets or clears ``TRACE_ID``.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit an event whose fields
      land in ``record.context``.
    - ``make_event``: builds the ``step``/``path`` payload for an event.

Events
    ``dogs_file_read`` / ``dogs_file_unreadable`` (step ``read``),
    ``dogs_decoded`` / ``dogs_json_invalid`` (step ``decode``),
    ``dogs_loaded`` / ``dogs_load_failed`` (step ``load``),
    ``env_variables_loaded`` (step ``settings``) and ``example_written``
    (step ``generate``).
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("dog_records_trace_id", default=None)
"""Identifier shared by the read/decode/load events of one call; cleared by ``load_dogs``."""

_LOGGER: Final[logging.Logger] = logging.getLogger("dog_records")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``dog_records`` logger so an application can attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Tag subsequent pipeline events with *trace_id*; ``None`` removes the tag.

    Examples
    --------
    >>> bind_trace_id('load-42')
    >>> TRACE_ID.get()
    'load-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Report a routine step outcome, such as a file read or a decode."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Report the overall result of a load."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Report a step that failed before its exception propagates."""

    _emit(logging.ERROR, message, fields)


def make_event(
    step: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the fields describing one pipeline step.

    Inputs
        step: ``"read"``, ``"decode"``, ``"load"``, ``"settings"`` or ``"generate"``.
        path: Dogs file involved, or ``None`` when the step works on text.
        payload: Extra detail such as the variant or the number of dogs.

    Examples
    --------
    >>> make_event('load', 'dogs.json', {'variant': 'converted', 'dogs': 4})
    {'step': 'load', 'path': 'dogs.json', 'variant': 'converted', 'dogs': 4}
    """

    event: dict[str, Any] = {"step": step, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    _LOGGER.log(level, message, extra={"context": {"trace_id": TRACE_ID.get(), **fields}})
