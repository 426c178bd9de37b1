"""
Capability Interfaces

Small abstract contracts implemented per value type:
    - Equatable   (value equality)
    - Cloneable   (independent copies)
    - Comparable  (total ordering against T)

ARCHITECTURAL RULE:
    These are interfaces, not a hierarchy.
    A value type mixes in whichever capabilities it supports.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar("T")


class Equatable(ABC):
    """
    Value equality contract.

    Implementers define `equals`; `==` is routed through it.
    Equatable values are unhashable unless the implementer says otherwise.
    """

    @abstractmethod
    def equals(self, other) -> bool:
        ...

    def __eq__(self, other) -> bool:
        return self.equals(other)


class Cloneable(ABC):
    """Produces an independent copy of itself."""

    @abstractmethod
    def clone(self):
        ...


class Comparable(ABC, Generic[T]):
    """
    Ordering contract.

    `compare_to` returns -1, 0 or 1.
    The rich comparison operators are derived from it.
    """

    @abstractmethod
    def compare_to(self, other: T) -> int:
        ...

    def __lt__(self, other: T) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: T) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: T) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: T) -> bool:
        return self.compare_to(other) >= 0
