"""
Sort Manager
============

Composes an ordered list of criteria into one comparator and keeps
caller-owned lists ordered by it.

The manager:
1. Registers criteria (registration order = tie-break precedence)
2. Composes them lexicographically (first non-zero result wins)
3. Sorts, inserts and repositions items in place

All sequence operations mutate the list they are given and return that
same list object. The manager never copies or owns items.
"""

import logging
from functools import cmp_to_key
from typing import Any, Callable, Generic, Optional, TypeVar

from multisort.core.criterion import Criterion
from multisort.core.schema import ComparisonOutcome, CriterionInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortManager(Generic[T]):
    """
    Maintains sort order for lists under a prioritized set of criteria.

    Example
    -------
    >>> manager = SortManager(
    ...     AttributeCriterion("status_asc", "status"),
    ...     AttributeCriterion("value_desc", "value", descending=True),
    ... )
    >>> manager.sort(tasks)
    >>> manager.insert_item(tasks, new_task)
    >>>
    >>> task.value = 42
    >>> manager.rearrange_item_in_sort_array(tasks, task, key=lambda t: t.id)
    """

    def __init__(self, *initial_criteria: Criterion[T]):
        """
        Initialize the manager.

        Parameters
        ----------
        *initial_criteria : Criterion
            Criteria to register, highest precedence first

        Raises
        ------
        TypeError
            If any argument is not a Criterion
        """
        self._criteria: list[Criterion[T]] = []
        self.add_criteria(*initial_criteria)

    @property
    def criteria(self) -> tuple[Criterion[T], ...]:
        """Registered criteria in precedence order (read-only snapshot)."""
        return tuple(self._criteria)

    @property
    def criterion_count(self) -> int:
        """Number of registered criteria."""
        return len(self._criteria)

    @property
    def sort_key(self) -> Callable[[T], Any]:
        """
        Key wrapper for the composed comparator.

        Usable with `sorted()`, `min()` and `max()` when a new list is wanted
        instead of in-place mutation.
        """
        return cmp_to_key(self._compare_items)

    def add_criteria(self, *criteria: Criterion[T]) -> None:
        """
        Append one or more criteria after those already registered.

        No de-duplication is performed; registering two criteria with the
        same name is allowed.

        Raises
        ------
        TypeError
            If any argument is not a Criterion
        """
        for criterion in criteria:
            if not isinstance(criterion, Criterion):
                raise TypeError(
                    f"Expected a Criterion, got {type(criterion).__name__}"
                )

        self._criteria.extend(criteria)
        for criterion in criteria:
            logger.info("[SortManager] Registered criterion: %r", criterion)

    def get_criterion(self, name: str) -> Optional[Criterion[T]]:
        """Get the first registered criterion with this name."""
        for criterion in self._criteria:
            if criterion.name == name:
                return criterion
        return None

    def describe(self) -> list[CriterionInfo]:
        """Summarize the registered criteria in precedence order."""
        return [
            CriterionInfo(
                name=criterion.name,
                kind=criterion.__class__.__name__,
                precedence=index,
            )
            for index, criterion in enumerate(self._criteria)
        ]

    def explain(self, a: T, b: T) -> ComparisonOutcome:
        """
        Compare two items and report which criterion decided.

        The result is always identical to the composed comparator's.
        """
        evaluated: list[str] = []
        for criterion in self._criteria:
            evaluated.append(criterion.name)
            result = criterion.compare(a, b)
            if result != 0:
                return ComparisonOutcome(
                    result=result,
                    decided_by=criterion.name,
                    evaluated=evaluated,
                )
        return ComparisonOutcome(result=0, evaluated=evaluated)

    def sort(self, items: list[T]) -> list[T]:
        """
        Sort a list in place by the registered criteria.

        Items equal under every criterion keep their relative order
        (`list.sort` is stable).

        Parameters
        ----------
        items : list
            The list to reorder

        Returns
        -------
        list
            The same list object, now sorted
        """
        logger.debug(
            "[SortManager] Sorting %d items by %d criteria",
            len(items),
            len(self._criteria),
        )
        items.sort(key=cmp_to_key(self._compare_items))
        return items

    def is_sorted(self, items: list[T]) -> bool:
        """Check that every adjacent pair is in composed order."""
        return all(
            self._compare_items(items[i], items[i + 1]) <= 0
            for i in range(len(items) - 1)
        )

    def find_insert_index(self, items: list[T], new_item: T) -> int:
        """
        Find where `new_item` belongs in an already-sorted list.

        Linear scan from the start: returns the first index whose element
        does not precede `new_item`, or `len(items)` when `new_item` follows
        every element. The list is assumed sorted; this is not checked.
        """
        for index, item in enumerate(items):
            if self._compare_items(new_item, item) <= 0:
                return index
        return len(items)

    def insert_item(self, items: list[T], new_item: T) -> list[T]:
        """
        Insert an item into an already-sorted list, keeping it sorted.

        An item equivalent to existing items lands before the first of them.

        Returns
        -------
        list
            The same list object, with `new_item` inserted
        """
        index = self.find_insert_index(items, new_item)
        items.insert(index, new_item)
        logger.debug("[SortManager] Inserted item at index %d of %d", index, len(items))
        return items

    def rearrange_item_in_sort_array(
        self,
        items: list[T],
        updated_item: T,
        *,
        key: Optional[Callable[[T], Any]] = None,
    ) -> list[T]:
        """
        Move a mutated item to its new position in a sorted list.

        By default the element to remove is the first one the composed
        comparator considers equal to `updated_item` (after mutation). If no
        criterion keys on a stable identity this can remove a different,
        equivalent element or nothing at all. Pass `key` to locate the
        element by `key(element) == key(updated_item)` instead.

        Parameters
        ----------
        items : list
            A list sorted by this manager
        updated_item : T
            The item whose ordering fields changed
        key : callable, optional
            Identity extractor used to find the element to remove

        Returns
        -------
        list
            The same list object, with `updated_item` repositioned
        """
        current_index = self._locate(items, updated_item, key)

        if current_index is not None:
            del items[current_index]
            logger.debug("[SortManager] Removed stale entry at index %d", current_index)
        else:
            logger.debug("[SortManager] No existing entry found, inserting as new")

        return self.insert_item(items, updated_item)

    def _locate(
        self,
        items: list[T],
        target: T,
        key: Optional[Callable[[T], Any]],
    ) -> Optional[int]:
        """Index of the first element matching `target`, or None."""
        if key is None:
            for index, item in enumerate(items):
                if self._compare_items(target, item) == 0:
                    return index
            return None

        target_key = key(target)
        for index, item in enumerate(items):
            if key(item) == target_key:
                return index
        return None

    def _compare_items(self, a: T, b: T) -> int:
        """
        Composed comparator.

        Returns the first non-zero criterion result, or 0 when every
        criterion ties.
        """
        for criterion in self._criteria:
            result = criterion.compare(a, b)
            if result != 0:
                return result
        return 0

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self._criteria)
        return f"SortManager(criteria=[{names}])"
