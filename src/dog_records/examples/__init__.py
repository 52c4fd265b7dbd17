"""Sample data helpers for ``dog_records``."""

from .generate import SAMPLE_DOGS, generate_example

__all__ = [
    "SAMPLE_DOGS",
    "generate_example",
]
