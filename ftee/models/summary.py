"""Counters reported after a committed run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RunSummary(BaseModel):
    """What a successful run read and where it wrote."""

    model_config = ConfigDict(frozen=True)

    inputs: list[str] = []
    lines_read: int = 0
    directives: int = 0
    payload_lines: int = 0
    discarded_lines: int = 0  # payload read while no target was active
    destinations: list[str] = []  # first-open order
