"""Tick identity models.

Usage:
    tick = TickId(42)
    tick.next()           # TickId(43)
    tick + 5              # TickId(47)
    TickId(50) - tick     # 8
    TickId.of(7)          # coerce int or TickId
"""

from __future__ import annotations

from dataclasses import dataclass

TICK_ID_MAX = 2**32 - 1


@dataclass(frozen=True, slots=True, order=True)
class TickId:
    """Unsigned 32-bit identifier of a discrete simulation step.

    Ticks are totally ordered by value. Two ticks are adjacent when their
    values differ by exactly one.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"TickId value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= TICK_ID_MAX:
            raise ValueError(f"TickId value {self.value} outside [0, {TICK_ID_MAX}]")

    @classmethod
    def of(cls, value: TickId | int) -> TickId:
        """Coerce an int or TickId into a TickId.

        Args:
            value: Tick value or an existing TickId.

        Returns:
            The TickId itself, or a new one wrapping the int.

        Raises:
            TypeError: If value is neither a TickId nor an int.
            ValueError: If value is outside the unsigned 32-bit range.
        """
        if isinstance(value, TickId):
            return value
        return cls(value)

    def next(self) -> TickId:
        """Return the tick immediately after this one.

        Raises:
            OverflowError: If this tick is TICK_ID_MAX.
        """
        return self + 1

    def __add__(self, other: int) -> TickId:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        value = self.value + other
        if not 0 <= value <= TICK_ID_MAX:
            raise OverflowError(f"TickId {self.value} + {other} leaves [0, {TICK_ID_MAX}]")
        return TickId(value)

    def __sub__(self, other: TickId | int) -> TickId | int:
        if isinstance(other, TickId):
            return self.value - other.value
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self + (-other)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
