"""
multisort
=========

Keep in-memory lists ordered by a prioritized chain of comparison rules.

Public API:
- Criterion: Abstract base class for comparison rules
- SortManager: Composes criteria; sorts, inserts and repositions items
- KeyCriterion, AttributeCriterion, CallableCriterion: Reference criteria
- CriterionInfo, ComparisonOutcome: Diagnostic models
"""

from multisort.core import (
    ComparisonOutcome,
    Criterion,
    CriterionInfo,
    SortManager,
)
from multisort.criteria import (
    AttributeCriterion,
    CallableCriterion,
    KeyCriterion,
)

__all__ = [
    "Criterion",
    "SortManager",
    "CriterionInfo",
    "ComparisonOutcome",
    "KeyCriterion",
    "AttributeCriterion",
    "CallableCriterion",
]
