"""
File: strings.py
Purpose: Small string helpers shared by the entity constructors.
"""


def is_null_or_empty(s):
    return s is None or len(s) < 1


def null_or_empty_exists(*strings):
    """True if any of the given strings is None or empty."""
    return any(is_null_or_empty(s) for s in strings)


def null_to_empty(s):
    return "" if s is None else s


def truncate(s, length):
    """
    Cuts a string down to at most `length` characters.
    A negative length leaves the string untouched.
    """
    if s is None:
        return None
    if length < 0:
        return s
    return s[:length]
