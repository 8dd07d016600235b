from __future__ import annotations

from typing import Any


class InvalidWordError(TypeError):
    """Raised when a scoring entry point receives something other than a str."""

    def __init__(self, value: Any, expected: str = "str"):
        self.value = value
        super().__init__(f"expected {expected}, got {type(value).__name__}")
