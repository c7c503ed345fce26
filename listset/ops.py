"""Sequence-set operations over ordered, possibly duplicate-containing collections.

Two families live here:
- cardinality-aware: `intersection`, `subtract`, `sum` match occurrences one for
  one through a counting map, so repeated values pair up at most as often as
  they occur on both sides. Unhashable elements (dicts, lists) are matched by
  equality instead of by hash.
- membership-based: `retain_all`, `remove_all` only ask whether a value occurs
  in the second collection at all.

`is_equal_list` and `hash_code_for_list` give list value semantics (same
elements, same order) to any iterable collection and accept `None`.

No function mutates its inputs; each returns a new list.
"""

from __future__ import annotations

from typing import Any, Collection, Iterable, List, Optional, TypeVar

from .utils import ElementBag, fold_hash, null_safe_equals, require

E = TypeVar("E")

# Shared immutable "no elements" value.
EMPTY_LIST: tuple = ()

_MISSING = object()


def intersection(list1: Collection[E], list2: Collection[E]) -> List[E]:
    """Return the elements contained in both lists.

    The smaller list is turned into a counting map and the larger one is walked
    once, so the result follows the larger list's order and each value appears
    at most min(count in list1, count in list2) times.

    Raises:
        NullArgumentError: if either list is None.
    """
    require(list1, "list1")
    require(list2, "list2")

    smaller, larger = list1, list2
    if len(list1) > len(list2):
        smaller, larger = list2, list1

    remaining = ElementBag(smaller)
    result: List[E] = []
    for e in larger:
        if remaining.take(e):
            result.append(e)
    return result


def subtract(list1: Iterable[E], list2: Iterable[E]) -> List[E]:
    """Remove one occurrence of each element of `list2` from a copy of `list1`.

    Cardinality is respected: if `list1` holds two `None` and `list2` one, the
    result still holds one. The earliest occurrences are the ones removed.

    Raises:
        NullArgumentError: if either list is None.
    """
    require(list1, "list1")
    require(list2, "list2")

    pending = ElementBag(list2)
    result: List[E] = []
    for e in list1:
        if pending.take(e):
            continue
        result.append(e)
    return result


def union(list1: Iterable[E], list2: Iterable[E]) -> List[E]:
    """Return a new list with `list2` appended to `list1`."""
    require(list1, "list1")
    require(list2, "list2")

    result: List[E] = list(list1)
    result.extend(list2)
    return result


def sum(list1: Collection[E], list2: Collection[E]) -> List[E]:
    """Return the sum of the lists: their intersection subtracted from their union."""
    return subtract(union(list1, list2), intersection(list1, list2))


def is_equal_list(list1: Optional[Collection[Any]], list2: Optional[Collection[Any]]) -> bool:
    """Compare two collections for list value-equality.

    Equal means same size and equal elements at every position, where None equals
    only None. Either argument may be None; that is never equal to a collection.
    The result is undefined if a collection is modified during the comparison.
    """
    if list1 is list2:
        return True
    if list1 is None or list2 is None or len(list1) != len(list2):
        return False

    it1 = iter(list1)
    it2 = iter(list2)
    while True:
        obj1 = next(it1, _MISSING)
        obj2 = next(it2, _MISSING)
        if obj1 is _MISSING or obj2 is _MISSING:
            # Both must run out on the same step.
            return obj1 is _MISSING and obj2 is _MISSING
        if not null_safe_equals(obj1, obj2):
            return False


def hash_code_for_list(list_: Optional[Iterable[Any]]) -> int:
    """Order-sensitive list hash, consistent with `is_equal_list`.

    Returns 0 for None, otherwise folds `h = 31 * h + hash(e)` from a seed of 1,
    with None elements hashing to 0 and the result kept in signed 32-bit range.
    """
    if list_ is None:
        return 0
    return fold_hash(list_)


def retain_all(collection: Iterable[E], retain: Collection[Any]) -> List[E]:
    """Return the elements of `collection` that also occur in `retain`.

    Membership only: an element keeps its full count from `collection` as long
    as `retain` contains it at least once.

    Raises:
        NullArgumentError: if either argument is None.
    """
    require(collection, "collection")
    require(retain, "retain")
    return [e for e in collection if e in retain]


def remove_all(collection: Iterable[E], remove: Collection[Any]) -> List[E]:
    """Return the elements of `collection` that do not occur in `remove`.

    Raises:
        NullArgumentError: if either argument is None.
    """
    require(collection, "collection")
    require(remove, "remove")
    return [e for e in collection if e not in remove]
