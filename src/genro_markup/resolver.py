# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value resolution - turns any child value into its contributed text.

Every node renders its children through this module. A child value is first
classified into a closed set of kinds (see ChildKind), then resolved:

    ABSENT    None, '', booleans          -> contributes nothing
    CALLBACK  any callable that is not a node -> invoked, result resolved again
    NODE      a Node                      -> node.render()
    SAFE      SafeValue or __html__ object -> payload, verbatim
    NUMERIC   int, float, Decimal, ...    -> str(value), verbatim
    TEXT      str or custom __str__ object -> escaped text
    UNKNOWN   anything else               -> ResolutionAmbiguity (strict)
                                             or nothing (permissive)

Booleans count as absent so that ``flag and node`` can be used as a child.
"""

from __future__ import annotations

import html
import inspect
import logging
import numbers
from enum import Enum
from typing import Any, Callable, Iterable, TYPE_CHECKING

from .exceptions import ResolutionAmbiguity
from .safe import SafeValue

if TYPE_CHECKING:
    from .node import Node


logger = logging.getLogger(__name__)


class ChildKind(Enum):
    """The closed set of child value kinds."""

    ABSENT = 'absent'
    CALLBACK = 'callback'
    NODE = 'node'
    SAFE = 'safe'
    NUMERIC = 'numeric'
    TEXT = 'text'
    UNKNOWN = 'unknown'


def escape(text: str) -> str:
    """Entity-encode ``< > & " '``."""
    return html.escape(text, quote=True)


def _has_custom_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def classify(value: Any) -> ChildKind:
    """Classify a child value.

    Args:
        value: Any value stored as a child or returned by a callback.

    Returns:
        The ChildKind the resolver dispatches on.
    """
    # Import here to avoid circular dependency
    from .node import Node

    if value is None or value is True or value is False:
        return ChildKind.ABSENT
    if isinstance(value, Node):
        return ChildKind.NODE
    # Before str: markup string subclasses carry __html__
    if isinstance(value, SafeValue) or hasattr(type(value), '__html__'):
        return ChildKind.SAFE
    if isinstance(value, str):
        return ChildKind.TEXT if value else ChildKind.ABSENT
    if isinstance(value, numbers.Number):
        return ChildKind.NUMERIC
    if callable(value):
        return ChildKind.CALLBACK
    if isinstance(value, (bytes, bytearray)):
        return ChildKind.UNKNOWN
    if _has_custom_str(value):
        return ChildKind.TEXT
    return ChildKind.UNKNOWN


def _positional_arity(callback: Callable) -> int | None:
    """Number of positional arguments a callable accepts, None for ``*args``."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature get the first argument.
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def call_with_context(callback: Callable, *context: Any) -> Any:
    """Invoke a callback with as many leading context arguments as it accepts.

    Lets callers write either ``lambda: ...`` or ``lambda node: ...``.

    Example:
        >>> call_with_context(lambda: 'x', 'ignored')
        'x'
        >>> call_with_context(lambda a, b: a + b, 1, 2, 3)
        3
    """
    arity = _positional_arity(callback)
    if arity is None:
        return callback(*context)
    return callback(*context[:arity])


def resolve(
    value: Any,
    context: Node | None = None,
    *,
    escape_text: bool = True,
    strict: bool = True,
) -> str:
    """Resolve a single child value to text.

    Args:
        value: The child value.
        context: Node passed to callbacks (the node owning the value).
        escape_text: If False, TEXT values are emitted unescaped (raw contexts).
        strict: If True, UNKNOWN values raise ResolutionAmbiguity; otherwise
            they contribute nothing.

    Returns:
        The text contributed by the value.

    Raises:
        ResolutionAmbiguity: For unclassifiable values in strict mode.
    """
    kind = classify(value)

    if kind is ChildKind.ABSENT:
        return ''
    if kind is ChildKind.CALLBACK:
        result = call_with_context(value, context)
        return resolve(result, context, escape_text=escape_text, strict=strict)
    if kind is ChildKind.NODE:
        return value.render()
    if kind is ChildKind.SAFE:
        return str(value.__html__())
    if kind is ChildKind.NUMERIC:
        return str(value)
    if kind is ChildKind.TEXT:
        text = str(value)
        return escape(text) if escape_text else text

    if strict:
        raise ResolutionAmbiguity(
            f"Cannot render child value of type '{type(value).__name__}': {value!r}"
        )
    logger.debug("Ignoring unrenderable child value of type %s", type(value).__name__)
    return ''


def join(
    values: Iterable[Any],
    context: Node | None = None,
    *,
    separator: str = ' ',
    escape_text: bool = True,
    strict: bool = True,
) -> str:
    """Resolve values left to right and join the non-empty results.

    Args:
        values: Child values in render order.
        context: Node passed to callbacks.
        separator: ' ' for ordinary nodes, '' for raw contexts.
        escape_text: Forwarded to resolve().
        strict: Forwarded to resolve().

    Returns:
        The joined text.
    """
    parts = []
    for value in values:
        text = resolve(value, context, escape_text=escape_text, strict=strict)
        if text:
            parts.append(text)
    return separator.join(parts)
