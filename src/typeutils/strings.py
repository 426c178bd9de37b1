"""
String helpers.

Free functions over plain `str` values: a type check, case transforms,
substring queries and padding. All functions are pure; none mutate or
keep state.
"""

import re
from typing import Pattern, Union


TYPE = "string"

_CASE_BOUNDARY_RE = re.compile(r"[a-z][A-Z]+")
_SEPARATOR_RE = re.compile(r"[-_]")


class InvalidArgumentError(TypeError):
    """Raised when an argument has the wrong type or an unusable value."""
    pass


def is_string(value) -> bool:
    """Return True if value is a str (boxed StringType values are not)."""
    return isinstance(value, str)


def first_to_upper_case(s: str) -> str:
    """
    Capitalize the first character of a string.

    Only the first character changes; the remainder is kept as-is
    ("hELLO" -> "HELLO", not "Hello").

    Args:
        s: Input string

    Returns:
        Transformed string, or "" for empty input
    """
    return s[:1].upper() + s[1:]


def contains(s: str, sub: str) -> bool:
    return sub in s


def starts_with(s: str, sub: str) -> bool:
    return s.startswith(sub)


def ends_with(s: str, sub: str) -> bool:
    """True if `sub` is a suffix of `s`. Empty `sub` always matches."""
    return s.endswith(sub)


def occurrences(s: str, sub: Union[str, Pattern[str]], literal: bool = False) -> int:
    """
    Count non-overlapping matches of `sub` in `s`.

    IMPORTANT:
        `sub` is a regular expression, not literal text.
        occurrences("a.c", ".") == 3
        Pass literal=True to count the text itself instead.

    Args:
        s: String to search
        sub: Pattern (str or compiled) to count
        literal: Escape `sub` before matching (compiled flags are kept)

    Returns:
        Number of matches (0 if none)

    Raises:
        re.error: If `sub` is not a valid pattern
    """
    if literal:
        if isinstance(sub, str):
            sub = re.escape(sub)
        else:
            sub = re.compile(re.escape(sub.pattern), sub.flags)
    return sum(1 for _ in re.finditer(sub, s))


def join(separator: str, *parts: str) -> str:
    return separator.join(parts)


def humanize(s: str) -> str:
    """
    Turn a camelCase, snake_case or kebab-case identifier into words.

    Examples:
        fooBarBaz   -> Foo bar baz
        foo_bar-baz -> Foo bar baz
        userID      -> User id
    """
    spaced = _CASE_BOUNDARY_RE.sub(lambda m: m.group()[0] + " " + m.group()[1:], s)
    return " ".join(_SEPARATOR_RE.split(first_to_upper_case(spaced.lower())))


def enlarge(s: str, pad: str, length: int, leading: bool = True) -> str:
    """
    Pad a string up to `length` characters with repetitions of `pad`.

    The last repetition is truncated so the result is exactly `length`
    characters long. Strings already at or over `length` come back unchanged.

    Examples:
        enlarge("7", "0", 3)         -> "007"
        enlarge("7", "0", 3, False)  -> "700"
        enlarge("7", "ab", 4)        -> "aba7"

    Args:
        s: String to pad
        pad: Padding unit
        length: Target length
        leading: Prepend padding if True, append otherwise

    Raises:
        InvalidArgumentError: If padding is needed but `pad` is empty
    """
    missing = length - len(s)
    if missing <= 0:
        return s
    if not pad:
        raise InvalidArgumentError(f"Cannot enlarge {s!r} to {length} characters with an empty pad")

    repeats = -(-missing // len(pad))
    part = (pad * repeats)[:missing]

    return part + s if leading else s + part
