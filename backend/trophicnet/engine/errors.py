"""Validation defects and the error raised for an invalid network."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class DefectKind(enum.Enum):
    STRUCTURAL = "structural"
    SHAPE_MISMATCH = "shape_mismatch"
    STOCHASTIC_SUM = "stochastic_sum"


@dataclass(frozen=True)
class NetworkDefect:
    """One violation found by the validator.

    ``level`` and ``row`` are 0-based; the message carries them 1-based.
    """

    kind: DefectKind
    message: str
    level: int | None = None
    row: int | None = None

    def __str__(self) -> str:
        return f"- {self.message}"


def format_report(defects: Sequence[NetworkDefect]) -> str:
    """One line per defect, in discovery order."""
    return "\n".join(str(d) for d in defects)


class InvalidNetworkError(ValueError):
    """Raised when trophic levels fail validation. Carries every defect."""

    def __init__(self, defects: Sequence[NetworkDefect]) -> None:
        self.defects = tuple(defects)
        super().__init__(
            "Could not draw the trophic network with the given trophic levels data:\n"
            + self.report
        )

    @property
    def report(self) -> str:
        return format_report(self.defects)

    @property
    def kinds(self) -> set[DefectKind]:
        return {d.kind for d in self.defects}
