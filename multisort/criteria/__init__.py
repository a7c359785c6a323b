"""
Reference Criteria
==================

Ready-made criterion implementations built on `Criterion`:
- KeyCriterion: Orders by an extracted value
- AttributeCriterion: Orders by an attribute path
- CallableCriterion: Wraps a three-way compare function
"""

from multisort.criteria.key_criterion import AttributeCriterion, KeyCriterion
from multisort.criteria.callable_criterion import CallableCriterion

__all__ = [
    "KeyCriterion",
    "AttributeCriterion",
    "CallableCriterion",
]
