"""
Key Criterion
=============

Orders items by a value extracted from each item, ascending or descending.

Covers the common "by timestamp ascending" / "by priority descending" rules
without a dedicated subclass per field.
"""

from operator import attrgetter
from typing import Any, Callable

from multisort.core.criterion import Criterion, T


class KeyCriterion(Criterion[T]):
    """
    Compare items by `key(item)`.

    Extracted values must support `<` and `>` against each other.

    Example
    -------
    >>> by_deadline = KeyCriterion("deadline_asc", lambda t: t.deadline)
    >>> by_priority = KeyCriterion("priority_desc", lambda t: t.priority, descending=True)
    """

    def __init__(
        self,
        name: str,
        key: Callable[[T], Any],
        *,
        descending: bool = False,
    ):
        """
        Initialize the criterion.

        Parameters
        ----------
        name : str
            Non-empty criterion name
        key : callable
            Extracts the comparison value from an item
        descending : bool
            Reverse the natural order of the extracted values

        Raises
        ------
        ValueError
            If name is empty
        TypeError
            If key is not callable
        """
        if not name or not name.strip():
            raise ValueError("name must be a non-empty string")
        if not callable(key):
            raise TypeError("key must be callable")

        super().__init__(name)
        self._key = key
        self._descending = descending

    @property
    def descending(self) -> bool:
        """Whether the natural order is reversed."""
        return self._descending

    def compare(self, a: T, b: T) -> int:
        left = self._key(a)
        right = self._key(b)

        if left < right:
            result = -1
        elif left > right:
            result = 1
        else:
            result = 0

        return -result if self._descending else result

    def __repr__(self) -> str:
        direction = "desc" if self._descending else "asc"
        return f"{self.__class__.__name__}(name={self.name!r}, {direction})"


class AttributeCriterion(KeyCriterion[T]):
    """
    Compare items by a (possibly dotted) attribute name.

    Example
    -------
    >>> AttributeCriterion("status_asc", "status")
    >>> AttributeCriterion("owner_name", "owner.name")
    """

    def __init__(self, name: str, attribute: str, *, descending: bool = False):
        if not attribute or not attribute.strip():
            raise ValueError("attribute must be a non-empty string")

        super().__init__(name, attrgetter(attribute), descending=descending)
        self._attribute = attribute

    @property
    def attribute(self) -> str:
        """The attribute path being compared."""
        return self._attribute
