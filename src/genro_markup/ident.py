# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Short unique identifiers for correlating elements (label/input, aria-*).

Example:
    Pairing a label with its input::

        ref = Ref()
        make_element('label', {'for': ref}, ['Email'])
        make_element('input', {'id': ref, 'type': 'email'}, is_void=True)
"""

from __future__ import annotations

import time
from typing import Callable, Iterator

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError(f"Cannot encode negative number: {number}")
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_DIGITS[remainder])
    return ''.join(reversed(digits))


class IdentifierGenerator:
    """Monotonic generator of short, DOM-id-legal tokens.

    The counter is seeded on first use from the clock in milliseconds
    (or from an injected seed) and advanced by one per identifier; each
    identifier is the prefix followed by the counter in base 36.

    Example:
        >>> gen = IdentifierGenerator(seed=35)
        >>> gen.next(), gen.next()
        ('_10', '_11')
    """

    __slots__ = ('_counter', '_clock', '_prefix')

    def __init__(
        self,
        seed: int | None = None,
        clock: Callable[[], float] = time.time,
        prefix: str = '_',
    ) -> None:
        """Initialize an IdentifierGenerator.

        Args:
            seed: Initial counter value. If None, seeded from clock on first use.
            clock: Returns the current time in seconds.
            prefix: Marker prepended to every identifier; keeps ids from
                starting with a digit.
        """
        self._counter = seed
        self._clock = clock
        self._prefix = prefix

    def __repr__(self) -> str:
        return f"IdentifierGenerator(counter={self._counter!r}, prefix={self._prefix!r})"

    @property
    def counter(self) -> int | None:
        """Last value used, or None before first use of a clock-seeded generator."""
        return self._counter

    def next(self) -> str:
        """Return the next identifier."""
        if self._counter is None:
            self._counter = int(self._clock() * 1000)
        self._counter += 1
        return f"{self._prefix}{to_base36(self._counter)}"

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()


default_generator = IdentifierGenerator()


def new_id() -> str:
    """Next identifier from the process-wide default generator."""
    return default_generator.next()


class Ref:
    """A stable identifier, drawn once from a generator.

    Renders as its identifier wherever a text value is accepted (attribute
    values, children).
    """

    __slots__ = ('_value',)

    def __init__(self, value: str | None = None, generator: IdentifierGenerator | None = None) -> None:
        if not value:
            value = (generator or default_generator).next()
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ref):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Ref, self._value))
