"""``${key}`` placeholder grammar: scanning, formatting and substitution.

Tokens are ``${`` + identifier + ``}``. There are no nested expressions and
substituted values are never rescanned, so a value containing ``${x}`` is
emitted literally. Text like ``${not a key}`` is not a token and passes
through unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from datetime import date, datetime, timezone
from typing import Any

from .exceptions import UnresolvedPlaceholderError

KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
PLACEHOLDER_PATTERN = re.compile(r"\$\{(" + KEY_PATTERN.pattern + r")\}")


def is_valid_key(key: str) -> bool:
    """Return True if *key* can appear inside a ``${...}`` token."""
    return isinstance(key, str) and KEY_PATTERN.fullmatch(key) is not None


def find_placeholders(text: str | None) -> list[str]:
    """Return placeholder keys in *text* in first-seen order, without duplicates."""
    if not text:
        return []
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(text)))


def format_value(value: Any) -> str:
    """Stringify a parameter value for insertion into message text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
            return value.isoformat().replace("+00:00", "Z")
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def substitute(
    text: str | None,
    params: Mapping[str, Any],
    declared: Collection[str] = (),
) -> str:
    """Replace every placeholder in *text* with its formatted value.

    A token whose key is in *declared* but has no value is kept verbatim.

    Raises:
        UnresolvedPlaceholderError: an undeclared token's key has no value in
            *params* (absent or ``None``).
    """
    if not text:
        return ""

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        value = params.get(key)
        if value is None:
            if key in declared:
                return match.group(0)
            raise UnresolvedPlaceholderError(key)
        return format_value(value)

    return PLACEHOLDER_PATTERN.sub(_replace, text)
