# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SafeValue - text explicitly exempted from escaping."""

from __future__ import annotations

from typing import Any


class SafeValue:
    """A string the caller vouches for: rendered verbatim, never escaped.

    SafeValue is immutable and compares by value, so two wrappers around the
    same text are interchangeable.

    Example:
        >>> SafeValue('<b>bold</b>').render()
        '<b>bold</b>'
        >>> SafeValue('a') == SafeValue('a')
        True
    """

    __slots__ = ('_text',)

    def __init__(self, text: Any = '') -> None:
        object.__setattr__(self, '_text', str(text))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' is immutable")

    @property
    def text(self) -> str:
        """The wrapped payload."""
        return self._text

    def render(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __html__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SafeValue({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeValue):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash((SafeValue, self._text))

    def __len__(self) -> int:
        return len(self._text)

    def __add__(self, other: object) -> SafeValue:
        if isinstance(other, SafeValue):
            return SafeValue(self._text + other._text)
        return NotImplemented


def mark_safe(text: Any) -> SafeValue:
    """Wrap text as a SafeValue (no-op if it already is one)."""
    if isinstance(text, SafeValue):
        return text
    return SafeValue(text)
