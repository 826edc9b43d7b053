"""Error taxonomy for concept services.

A missing identifier is not an error: `view` and `update` return None.
"""

from __future__ import annotations


class ConceptError(Exception):
    """Base class for failures raised by concept services."""

    pass


class DuplicateIdentifierError(ConceptError, ValueError):
    """Raised when `create` is given an identifier already present in the store."""

    def __init__(self, concept: str, record_id: int):
        self.concept = concept
        self.record_id = record_id
        super().__init__(f"{concept} with ID {record_id} already exists.")
