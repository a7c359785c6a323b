"""
multisort Core: Criterion-Composed Ordering
===========================================

This package provides the comparison-rule abstraction and the manager that
composes registered rules into a single ordering for in-place list
maintenance.

Public API:
- Criterion: Abstract base class for comparison rules
- SortManager: Composes criteria and sorts/inserts/repositions items
- CriterionInfo: Summary of a registered criterion
- ComparisonOutcome: Which criterion decided a comparison
"""

from multisort.core.criterion import Criterion
from multisort.core.schema import (
    ComparisonOutcome,
    CriterionInfo,
)
from multisort.core.manager import SortManager

__all__ = [
    "Criterion",
    "SortManager",
    "CriterionInfo",
    "ComparisonOutcome",
]
