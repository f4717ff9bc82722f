"""
Base class for seeded streaming primitives.

Every primitive is constructed from a seed and is usable immediately:
advance() consumes one sample and returns the updated output, peek()
returns the current output without consuming anything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StreamingMethod(ABC):
    """Base class for streaming primitives with O(1) updates."""

    @abstractmethod
    def advance(self, value: Any) -> float:
        """Consume one sample and return the updated output."""
        ...

    @abstractmethod
    def peek(self) -> float:
        """Current output, without advancing."""
        ...
