"""Build a `ListComparison` from two sequences."""

from __future__ import annotations

import logging
from typing import Any, Collection

from . import ops
from .models import ListComparison
from .utils import require

logger = logging.getLogger(__name__)


def compare_lists(left: Collection[Any], right: Collection[Any]) -> ListComparison:
    """Run every sequence-set operation over `left` and `right`.

    Args:
        left: First sequence (e.g. the previous scan's results).
        right: Second sequence (e.g. the current scan's results).

    Returns:
        A frozen ListComparison.

    Raises:
        NullArgumentError: if either sequence is None.
    """
    require(left, "left")
    require(right, "right")

    report = ListComparison(
        left=list(left),
        right=list(right),
        common=ops.intersection(left, right),
        only_left=ops.subtract(left, right),
        only_right=ops.subtract(right, left),
        combined=ops.union(left, right),
        difference=ops.sum(left, right),
        equal=ops.is_equal_list(left, right),
        left_hash=ops.hash_code_for_list(left),
        right_hash=ops.hash_code_for_list(right),
    )
    logger.debug(
        "compared lists: left=%d right=%d common=%d equal=%s",
        len(report.left),
        len(report.right),
        len(report.common),
        report.equal,
    )
    return report
