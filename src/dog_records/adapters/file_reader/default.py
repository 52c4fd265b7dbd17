"""Filesystem adapter for the file-reading step.

Purpose
-------
Turn a path into text. The adapter owns the single file handle the package
ever opens and releases it before returning.

Contents
--------
* :class:`DefaultTextReader` – reads a file as bytes and decodes it.

System Role
-----------
Implements :class:`dog_records.application.ports.TextReader`. It deliberately
raises the standard library exceptions unchanged so each ``get_dogs`` variant
can show its own way of classifying them.
"""

from __future__ import annotations

from ...observability import log_debug, log_error


class DefaultTextReader:
    """Read a whole file and decode it with a fixed encoding."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, path: str) -> str:
        """Return the content of *path* as text.

        Raises
        ------
        OSError
            When the file is missing, is a directory, or cannot be opened.
        UnicodeDecodeError
            When the bytes are not valid in the configured encoding.

        Side Effects
        ------------
        Emits ``dogs_file_read`` debug events and ``dogs_file_unreadable`` error
        events.

        Examples
        --------
        >>> from pathlib import Path
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b'[]')
        >>> tmp.close()
        >>> DefaultTextReader().read(tmp.name)
        '[]'
        >>> Path(tmp.name).unlink()
        """

        try:
            with open(path, "rb") as handle:
                payload = handle.read()
            text = payload.decode(self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            log_error("dogs_file_unreadable", step="read", path=path, error=str(exc))
            raise
        log_debug("dogs_file_read", step="read", path=path, size=len(payload))
        return text
