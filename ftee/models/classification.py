"""Result of classifying a single input line."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LineClassification(BaseModel):
    """Whether a line is a directive, and the destinations it names.

    Payload lines have ``is_directive=False`` and no names. Directive lines
    carry the names in the order they appear, duplicates included.
    """

    model_config = ConfigDict(frozen=True)

    names: list[str] = []
    is_directive: bool = False

