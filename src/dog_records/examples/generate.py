"""Sample data generation helpers.

Purpose
-------
Write a ready-made ``dogs.json`` so the CLI and the documentation have
something to read. This module belongs to the outer ring and only depends on
the codec.

Contents
    - ``SAMPLE_DOGS``: the records written to the sample file.
    - ``generate_example``: writes the sample file under a destination.
    - ``_should_write`` / ``_ensure_parent``: tiny filesystem helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..adapters.json_codec.default import JSONDogCodec
from ..domain.dog import Dog
from ..observability import log_debug

SAMPLE_DOGS: Final[tuple[Dog, ...]] = (
    Dog(name="Comet", breed="Whippet"),
    Dog(name="Maisey", breed="Treeing Walker Coonhound"),
    Dog(name="Oscar", breed="German Shorthaired Pointer"),
    Dog(name="Ramsay", breed="Native American Indian Dog"),
)
"""Records written by :func:`generate_example`."""


def generate_example(
    destination: str | Path,
    *,
    force: bool = False,
    filename: str = "dogs.json",
) -> list[Path]:
    """Write :data:`SAMPLE_DOGS` to ``destination / filename``.

    Parameters
    ----------
    destination:
        Directory that will receive the file. Created when missing.
    force:
        When ``True`` an existing file is overwritten; otherwise it is left
        alone and nothing is reported.
    filename:
        Name of the file to create.

    Returns
    -------
    list[Path]
        Paths written during this invocation (empty when skipped).

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> [path.name for path in generate_example(tmp.name)]
    ['dogs.json']
    >>> generate_example(tmp.name)
    []
    >>> tmp.cleanup()
    """

    path = Path(destination) / filename
    if not _should_write(path, force):
        return []
    _ensure_parent(path)
    path.write_text(JSONDogCodec().encode(SAMPLE_DOGS, indent=2) + "\n", encoding="utf-8")
    log_debug("example_written", step="generate", path=str(path), dogs=len(SAMPLE_DOGS))
    return [path]


def _should_write(path: Path, force: bool) -> bool:
    """Return ``True`` when *path* is absent or *force* allows overwriting."""

    return force or not path.exists()


def _ensure_parent(path: Path) -> None:
    """Create the parent directory of *path* if needed."""

    path.parent.mkdir(parents=True, exist_ok=True)
