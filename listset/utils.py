"""Element-level helpers shared by the sequence-set operations.

`None` is treated as an ordinary element: it equals only `None` and hashes to the
fixed sentinel 0. Hashes are folded into a signed 32-bit range so the list hash
stays bounded and matches the classic `31 * h + e` list hash.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List, Optional

from .errors import NullArgumentError


HASH_SEED = 1
HASH_MULTIPLIER = 31
NULL_HASH = 0

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def require(value: Optional[Any], name: str) -> Any:
    """Return `value` unchanged, or raise NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(name)
    return value


def null_safe_equals(a: Any, b: Any) -> bool:
    """Equality where None equals only None."""
    if a is None:
        return b is None
    return a == b


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def element_hash(element: Any) -> int:
    """Hash one element: 0 for None, the list hash for nested lists.

    Dicts and sets are not hashable in Python; they get the order-insensitive
    sum of their entry hashes (`key ^ value` per dict entry), which keeps
    equal containers hashing equal.
    """
    if element is None:
        return NULL_HASH
    if isinstance(element, list):
        return fold_hash(element)
    if isinstance(element, dict):
        total = 0
        for key, value in element.items():
            total += element_hash(key) ^ element_hash(value)
        return to_int32(total)
    if isinstance(element, set):
        total = 0
        for item in element:
            total += element_hash(item)
        return to_int32(total)
    return to_int32(hash(element))


def fold_hash(items: Iterable[Any]) -> int:
    """Order-sensitive `31 * h + e` fold over `items`, starting from HASH_SEED."""
    h = HASH_SEED
    for item in items:
        h = to_int32(HASH_MULTIPLIER * h + element_hash(item))
    return h


def is_hashable(value: Any) -> bool:
    """True if `hash(value)` succeeds (a tuple holding a list does not)."""
    try:
        hash(value)
    except TypeError:
        return False
    return True


class ElementBag:
    """Counting map (element -> remaining occurrences) with one-for-one `take`.

    Hashable elements are counted in a Counter. Unhashable ones (dicts, lists,
    ...) are kept in a plain list and matched by equality, so only `==` is
    required of the elements.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._counts: Counter = Counter()
        self._unhashable: List[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        if is_hashable(item):
            self._counts[item] += 1
        else:
            self._unhashable.append(item)

    def take(self, item: Any) -> bool:
        """Remove one occurrence equal to `item`; False if none is left."""
        if is_hashable(item):
            if self._counts[item] > 0:
                self._counts[item] -= 1
                return True
        else:
            for key, n in self._counts.items():
                if n > 0 and null_safe_equals(key, item):
                    self._counts[key] -= 1
                    return True
        for i, other in enumerate(self._unhashable):
            if null_safe_equals(other, item):
                del self._unhashable[i]
                return True
        return False
