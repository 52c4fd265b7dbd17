"""Environment variable adapter.

Purpose
-------
Collect the settings an operator may supply through the process environment.

Key behaviours
--------------
* Enforces a prefix (``default_env_prefix``) so only relevant keys are
  captured.
* Strips the prefix and lower-cases the remainder (``DOG_RECORDS_FILE`` ->
  ``file``).
* Ignores empty values so ``DOG_RECORDS_FILE=`` behaves like an unset variable.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('dog-records')
    'DOG_RECORDS'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the package namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability."""

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str) -> dict[str, str]:
        """Return ``{key: value}`` for every variable starting with *prefix*.

        Examples
        --------
        >>> DefaultEnvLoader(environ={"DOG_RECORDS_FILE": "pack.json", "HOME": "/root"}).load("DOG_RECORDS")
        {'file': 'pack.json'}
        """

        normalized_prefix = prefix if prefix.endswith("_") else f"{prefix}_"
        collected: dict[str, str] = {}
        for name, value in self._environ.items():
            if not name.upper().startswith(normalized_prefix) or not value:
                continue
            key = name[len(normalized_prefix) :].lower()
            if key:
                collected[key] = value
        log_debug("env_variables_loaded", step="settings", path=None, keys=sorted(collected))
        return collected
