# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorator registering builder methods as tag factories."""

from __future__ import annotations

import re
from functools import wraps
from typing import Any, Callable


# Tag names: letters, digits, '-' and '_', starting with a letter
_TAG_PATTERN = re.compile(r'^[a-zA-Z][a-zA-Z0-9_-]*$')


def _parse_tags(tags: str | tuple[str, ...] | list[str] | None) -> tuple[str, ...]:
    """Parse a tag specification into a tuple of tag names.

    Args:
        tags: 'card', 'card, panel', or a sequence of names. None or empty
            means "use the method name".

    Returns:
        Tuple of tag names (possibly empty).

    Raises:
        ValueError: If a tag name is invalid.

    Examples:
        >>> _parse_tags('card, panel')
        ('card', 'panel')
        >>> _parse_tags(None)
        ()
    """
    if not tags:
        return ()
    if isinstance(tags, str):
        tags = tags.split(',')

    parsed = []
    for spec in tags:
        tag = spec.strip()
        if not _TAG_PATTERN.match(tag):
            raise ValueError(f"Invalid tag specification: '{spec}'")
        parsed.append(tag)
    return tuple(parsed)


def element(tags: str | tuple[str, ...] | None = None) -> Callable:
    """Mark a builder method as the factory for one or more tags.

    The decorated method receives the tag name as its first argument after
    self. Calling the method directly uses the first declared tag (or the
    method name); calling it through an alias passes the alias.

    Args:
        tags: Tag name(s), comma-separated. If omitted, the method name.

    Example:
        >>> class CardBuilder(HtmlBuilder):
        ...     @element(tags='card, panel')
        ...     def card(self, tag, first=None, children=None, **attrs):
        ...         return self.tag('div', first, children, **attrs).add_class(tag)
        ...
        >>> CardBuilder().panel(['Body']).render()
        '<div class="panel">Body</div>'
    """
    parsed = _parse_tags(tags)

    def decorator(func: Callable) -> Callable:
        default_tag = parsed[0] if parsed else func.__name__

        @wraps(func)
        def wrapper(self: Any, *args: Any, _tag: str | None = None, **kwargs: Any) -> Any:
            return func(self, _tag or default_tag, *args, **kwargs)

        wrapper._element_tags = parsed or (func.__name__,)
        return wrapper

    return decorator
