"""
Diagnostic Schema
=================

Read-only data models describing a manager's ordering policy.

These models never take part in ordering. They exist so callers can log,
display or assert on the policy a `SortManager` holds and on how a single
comparison was decided.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CriterionInfo(BaseModel):
    """Summary of one registered criterion."""

    model_config = ConfigDict(frozen=True)

    name: str
    """The criterion's name."""

    kind: str
    """Class name of the criterion implementation."""

    precedence: int = Field(ge=0)
    """Registration index. Lower values are consulted first."""

    def __repr__(self) -> str:
        return f"CriterionInfo(#{self.precedence} {self.name} <{self.kind}>)"


class ComparisonOutcome(BaseModel):
    """
    How the composed comparator ordered two items.

    Examples
    --------
    Decided by the second criterion:
        ComparisonOutcome(
            result=-1,
            decided_by="value_desc",
            evaluated=["status_asc", "value_desc"],
        )

    Full tie:
        ComparisonOutcome(result=0, decided_by=None, evaluated=["status_asc"])
    """

    model_config = ConfigDict(frozen=True)

    result: int
    """The composed three-way result."""

    decided_by: Optional[str] = None
    """Name of the first criterion that returned non-zero, or None on a tie."""

    evaluated: list[str] = Field(default_factory=list)
    """Criteria consulted, in order, up to and including the deciding one."""

    @model_validator(mode="after")
    def _validate_decision(self) -> "ComparisonOutcome":
        """A non-zero result must name its deciding criterion and vice versa."""
        if (self.result != 0) != (self.decided_by is not None):
            raise ValueError("decided_by must be set exactly when result is non-zero")
        if self.decided_by is not None and (
            not self.evaluated or self.evaluated[-1] != self.decided_by
        ):
            raise ValueError("decided_by must be the last evaluated criterion")
        return self

    @property
    def is_tie(self) -> bool:
        """True when every criterion considered the items equivalent."""
        return self.result == 0
