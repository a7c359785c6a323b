"""
Callable Criterion
==================

Wraps a plain three-way compare function as a named criterion.
"""

from typing import Callable

from multisort.core.criterion import Criterion, T


class CallableCriterion(Criterion[T]):
    """
    Delegate comparison to a caller-supplied function.

    The function follows the `Criterion.compare` contract: negative, zero or
    positive.

    Example
    -------
    >>> by_length = CallableCriterion("title_length", lambda a, b: len(a.title) - len(b.title))
    """

    def __init__(self, name: str, func: Callable[[T, T], int]):
        if not name or not name.strip():
            raise ValueError("name must be a non-empty string")
        if not callable(func):
            raise TypeError("func must be callable")

        super().__init__(name)
        self._func = func

    def compare(self, a: T, b: T) -> int:
        return self._func(a, b)
