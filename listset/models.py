"""Data models for comparison results.

The analyzer that consumes these helpers mostly wants one answer to "how do these
two result lists differ?". `ListComparison` packages the individual operations
into a single in-memory record. It is a value object for callers in the same
process, not an exchange format.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ListComparison(BaseModel):
    """Result of comparing a left and a right sequence.

    All list fields are new lists; the inputs are copied into `left`/`right` as
    given. Hashes are only comparable within one interpreter process.
    """

    model_config = ConfigDict(frozen=True)

    left: List[Any] = Field(default_factory=list, description="Left input, in order.")
    right: List[Any] = Field(default_factory=list, description="Right input, in order.")

    common: List[Any] = Field(default_factory=list, description="Cardinality-aware intersection.")
    only_left: List[Any] = Field(default_factory=list, description="left minus right, one-for-one.")
    only_right: List[Any] = Field(default_factory=list, description="right minus left, one-for-one.")
    combined: List[Any] = Field(default_factory=list, description="left followed by right.")
    difference: List[Any] = Field(default_factory=list, description="Union minus intersection.")

    equal: bool = Field(..., description="Same elements in the same order.")
    left_hash: int = Field(..., description="Order-sensitive list hash of left.")
    right_hash: int = Field(..., description="Order-sensitive list hash of right.")

    @computed_field
    @property
    def same_elements(self) -> bool:
        """True when both sides hold the same values with the same counts, in any order."""
        return not self.only_left and not self.only_right
