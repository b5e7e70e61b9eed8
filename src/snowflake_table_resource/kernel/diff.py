"""Diff suppression for values that Snowflake does not round-trip exactly."""

import re

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def normalize_statement(value: str) -> str:
    """Collapse every run of whitespace to one space and trim both ends.

    >>> normalize_statement("  SELECT\\n\\t1  ")
    'SELECT 1'
    """
    return WHITESPACE_RUN_PATTERN.sub(" ", value).strip()


def should_suppress_diff(old: str, new: str) -> bool:
    """Tell whether two values differ only in letter case or in runs of whitespace.

    Case is compared with ``lower``, not ``casefold``, so "ß" and "ss" stay different.

    Snowflake does not faithfully round-trip stored text, so a character-wise
    comparison reports drift that is not there. The price is that a change in
    case or whitespace that is semantically significant goes unnoticed.

    >>> should_suppress_diff("SELECT  1", "select 1")
    True
    >>> should_suppress_diff("SELECT 1", "SELECT 2")
    False
    >>> should_suppress_diff("straße", "STRASSE")
    False
    """
    return normalize_statement(old).lower() == normalize_statement(new).lower()
