"""ftee data models — Pydantic v2, frozen (immutable)."""

from ftee.models.classification import LineClassification
from ftee.models.summary import RunSummary

__all__ = ["LineClassification", "RunSummary"]
