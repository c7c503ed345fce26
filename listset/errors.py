"""Errors raised by the sequence-set helpers."""

from __future__ import annotations


class NullArgumentError(TypeError):
    """Raised when an operation receives ``None`` where a sequence is required."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name
