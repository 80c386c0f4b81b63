"""Series data model.

A ``SeriesResult`` is either a non-empty tuple of samples or a single
``SeriesError``; never both, never neither.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class Sample(BaseModel):
    """One evaluated point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    label: str


class ErrorKind(str, Enum):
    """Why a series could not be produced."""

    EMPTY_DATA = "empty_data"
    MISSING_EXPRESSION = "missing_expression"
    INVALID_EXPRESSION_SYNTAX = "invalid_expression_syntax"
    NO_VALID_POINTS = "no_valid_points"
    INVALID_RANGE = "invalid_range"
    UNEXPECTED = "unexpected"


class SeriesError(BaseModel):
    """User-facing failure message plus the path that produced it."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


class SeriesResult(BaseModel):
    """Outcome of building a series."""

    model_config = ConfigDict(frozen=True)

    samples: Tuple[Sample, ...] = ()
    error: Optional[SeriesError] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "SeriesResult":
        if self.samples and self.error is not None:
            raise ValueError("A series result cannot carry both samples and an error")
        if not self.samples and self.error is None:
            raise ValueError("An empty series result must carry an error")
        return self

    @classmethod
    def ok(cls, samples) -> "SeriesResult":
        return cls(samples=tuple(samples))

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "SeriesResult":
        return cls(error=SeriesError(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    @property
    def xs(self) -> list[float]:
        return [s.x for s in self.samples]

    @property
    def ys(self) -> list[float]:
        return [s.y for s in self.samples]

    @property
    def labels(self) -> list[str]:
        return [s.label for s in self.samples]
