"""
Boxed String Value

StringType wraps a single str and adds the capabilities a bare str
does not advertise through an interface:
    - Equatable  (equals / ==)
    - Cloneable  (clone)
    - Comparable (compare_to / < <= > >=)

The same helpers found in `typeutils.strings` are exposed as static
methods so callers holding only the class can reach them.

ARCHITECTURAL RULE:
    The boxed value is mutable (set_value), so StringType is unhashable.
    Identity never matters; equality is by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typeutils import strings
from typeutils.capabilities import Cloneable, Comparable, Equatable
from typeutils.strings import InvalidArgumentError

__all__ = ["StringType", "InvalidArgumentError"]


@dataclass(eq=False)
class StringType(Equatable, Cloneable, Comparable[Union[str, "StringType"]]):
    """
    A str value with equality, cloning and lexicographic ordering.

    Properties:
        value:
            The wrapped string. Defaults to DEFAULT_VALUE ("").

    Example:
        StringType("a").compare_to("b")        -> -1
        StringType("a").equals(StringType("a")) -> True
        StringType("a").set_value("b").get_value() -> "b"
    """

    TYPE = strings.TYPE
    DEFAULT_VALUE = ""

    value: str = DEFAULT_VALUE

    def get_value(self) -> str:
        return self.value

    def set_value(self, value: str) -> StringType:
        """Replace the wrapped value in place and return self for chaining."""
        self.value = value
        return self

    def clone(self) -> StringType:
        return StringType(self.value)

    def equals(self, other: Union[str, StringType]) -> bool:
        """
        Compare wrapped values.

        Accepts a raw str or another StringType.
        Anything else is simply not equal.
        """
        if isinstance(other, StringType):
            return self.value == other.value
        if strings.is_string(other):
            return self.value == other
        return False

    def compare_to(self, other: Union[str, StringType]) -> int:
        """
        Lexicographic comparison against a str or StringType.

        Returns:
            1 if self sorts after other, -1 if before, 0 if equal

        Raises:
            InvalidArgumentError: If other is neither str nor StringType
        """
        other_value = StringType.value_of(other).get_value()

        if self.value > other_value:
            return 1
        if self.value < other_value:
            return -1
        return 0

    @classmethod
    def value_of(cls, value: Union[str, StringType]) -> StringType:
        """Box a str; StringType instances are returned unchanged."""
        if isinstance(value, StringType):
            return value
        if strings.is_string(value):
            return cls(value)
        raise InvalidArgumentError(f"Expected str or StringType, got {type(value).__name__}")

    def __str__(self) -> str:
        return self.value

    # Static helpers, same behavior as the module-level functions
    is_string = staticmethod(strings.is_string)
    first_to_upper_case = staticmethod(strings.first_to_upper_case)
    contains = staticmethod(strings.contains)
    starts_with = staticmethod(strings.starts_with)
    ends_with = staticmethod(strings.ends_with)
    occurrences = staticmethod(strings.occurrences)
    join = staticmethod(strings.join)
    humanize = staticmethod(strings.humanize)
    enlarge = staticmethod(strings.enlarge)
