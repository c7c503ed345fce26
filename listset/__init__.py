"""Sequence-set helpers for the analyzer service.

The package is small on purpose:
- `ops.py` holds the operations (intersection, subtract, union, sum, list
  equality and hash, retain/remove).
- `utils.py` holds the null-aware element helpers they share.
- `models.py` / `compare.py` turn a pair of result lists into one comparison record.
"""

from .compare import compare_lists
from .errors import NullArgumentError
from .models import ListComparison
from .ops import (
    EMPTY_LIST,
    hash_code_for_list,
    intersection,
    is_equal_list,
    remove_all,
    retain_all,
    subtract,
    union,
)
from .ops import sum as sum_lists

__all__ = [
    "EMPTY_LIST",
    "ListComparison",
    "NullArgumentError",
    "compare_lists",
    "hash_code_for_list",
    "intersection",
    "is_equal_list",
    "remove_all",
    "retain_all",
    "subtract",
    "sum_lists",
    "union",
]
