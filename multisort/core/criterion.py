"""
Criterion Interface
===================

Defines the contract for a single named comparison rule.

Key Principle: A criterion only answers "which of these two comes first?".
It never sees the sequence being sorted and never mutates the items.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Criterion(ABC, Generic[T]):
    """
    Abstract base class for all sorting criteria.

    Subclass this to create custom criteria. Override the `compare()` method
    to implement your logic.

    Example
    -------
    >>> class ByPriorityDesc(Criterion[Task]):
    ...     def __init__(self):
    ...         super().__init__("priority_desc")
    ...
    ...     def compare(self, a: Task, b: Task) -> int:
    ...         return b.priority - a.priority
    """

    def __init__(self, name: str):
        """
        Initialize the criterion.

        Parameters
        ----------
        name : str
            Human-readable identifier. Used for diagnostics only, never
            consulted by comparison logic.
        """
        self._name = name

    @property
    def name(self) -> str:
        """The criterion name (read-only)."""
        return self._name

    @abstractmethod
    def compare(self, a: T, b: T) -> int:
        """
        Compare two items.

        This method MUST be:
        1. Antisymmetric - compare(a, b) == -compare(b, a)
        2. Reflexive - compare(a, a) == 0
        3. Stateless - the answer may not depend on earlier calls

        Parameters
        ----------
        a : T
            First item
        b : T
            Second item

        Returns
        -------
        int
            Negative if `a` precedes `b`, positive if `a` follows `b`,
            zero if this criterion cannot distinguish them.

        Raises
        ------
        NotImplementedError
            If a subclass delegates here instead of providing a rule
        """
        raise NotImplementedError(
            f"{self.__class__.__name__}.compare must be implemented by a concrete criterion"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
