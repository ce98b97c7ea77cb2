"""
Pydantic base model shared by sessionizer value objects.

Candidate collections, multiplexer definitions and captured command results
are all immutable once built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Frozen model that rejects unknown fields and coerced types."""

    model_config = ConfigDict(
        extra='forbid',
        strict=True,
        frozen=True,
    )
