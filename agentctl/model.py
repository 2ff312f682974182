"""Core model: levels of detail and descriptions of things in the system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

_U64_MAX = 2**64 - 1


class LevelOfDetail(IntEnum):
    """How much detail should be output; ordered by declaration."""

    STANDARD = 0
    CONCISE = 1
    VERBOSE = 2
    NONE = 3


@dataclass
class Description:
    """Text for something, keyed by the level of detail it is written for."""

    content_mapping: dict[LevelOfDetail, str] = field(default_factory=dict)

    def describe(self, level_of_detail: LevelOfDetail) -> str | None:
        """Return the text for the given level, or None when there is none."""
        return self.content_mapping.get(level_of_detail)


class Describable(ABC):
    """Anything that can be described: tasks, agents, systems and so on."""

    @abstractmethod
    def descriptors(self) -> dict[str, Description]:
        """Return discrete, non-overlapping descriptions keyed by name."""


def add(left: int, right: int) -> int:
    """Add two unsigned 64-bit integers, raising on overflow."""
    for value in (left, right):
        if not 0 <= value <= _U64_MAX:
            raise ValueError(f"value out of range for u64: {value}")
    total = left + right
    if total > _U64_MAX:
        raise OverflowError("attempt to add with overflow")
    return total