"""
typeutils Package

Small helpers over primitive values and plain records.

PACKAGE LAYOUT:
---------------
    strings        - free functions over str (type check, case, substrings, padding)
    string_type    - StringType, a boxed str with equality, cloning and ordering
    capabilities   - Equatable / Cloneable / Comparable interfaces
    records        - traversal helpers over mappings (own keys only)

Every operation is pure and synchronous.
Nothing here performs I/O.
"""

__version__ = "0.1.0"
