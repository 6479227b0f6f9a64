# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderBase - base class for tag-catalogue builders."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from ..element import ElementNode, make_element
from ..schema import DEFAULT_SCHEMA, HtmlSchema, html_name


class BuilderBase:
    """Base class for builders turning attribute access into element factories.

    A builder provides domain-specific methods for creating elements. Use the
    @element decorator to define tags:

    1. Single tag (method name used):
        @element()
        def card(self, tag, first=None, children=None, **attrs):
            return self.tag('div', first, children, **attrs).add_class(tag)

    2. Multiple tags pointing to the same method:
        @element(tags='note, warning, tip')
        def callout(self, tag, first=None, children=None, **attrs):
            return self.tag('aside', first, children, **attrs).add_class(tag)

    The class builds an _element_tags dict mapping tag names to methods via
    __init_subclass__.

    Usage:
        >>> builder = MyBuilder()
        >>> builder.warning(['Careful'])  # calls callout() with tag='warning'
    """

    # Class-level dict mapping tag -> method name
    _element_tags: dict[str, str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _element_tags dict from @element decorated methods."""
        super().__init_subclass__(**kwargs)

        # Start with parent's tags if any
        cls._element_tags = {}
        for base in cls.__mro__[1:]:
            if hasattr(base, '_element_tags'):
                cls._element_tags.update(base._element_tags)
                break

        for name, method in cls.__dict__.items():
            if name.startswith('_') or not callable(method):
                continue
            for tag in getattr(method, '_element_tags', ()):
                cls._element_tags[tag] = name

    def __init__(self, schema: HtmlSchema | None = None) -> None:
        self._schema = schema if schema is not None else DEFAULT_SCHEMA

    @property
    def schema(self) -> HtmlSchema:
        return self._schema

    def __getattr__(self, name: str) -> Callable[..., ElementNode]:
        """Look up name as a registered tag, then as a schema tag."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        tag = html_name(name)
        element_tags = getattr(type(self), '_element_tags', {})
        if tag in element_tags:
            return partial(getattr(self, element_tags[tag]), _tag=tag)

        factory = self._resolve_tag(tag)
        if factory is not None:
            return factory

        raise AttributeError(
            f"'{type(self).__name__}' has no element '{name}'"
        )

    def _resolve_tag(self, tag: str) -> Callable[..., ElementNode] | None:
        """Return a factory for tag, or None. Subclasses add their vocabulary."""
        return None

    def tag(
        self,
        tag_name: str,
        first: Any = None,
        children: Any = None,
        is_void: bool | None = None,
        **attrs: Any,
    ) -> ElementNode:
        """Create an element with any tag name.

        Args:
            tag_name: Tag name (custom elements welcome).
            first: Raw attribute text, attribute mapping, children list, or a
                single child (see make_element).
            children: Explicit children; wins over a list passed as first.
            is_void: Void flag. If None, looked up in the schema.
            **attrs: Attributes; ``class_`` -> ``class``, ``data_id`` -> ``data-id``.

        Example:
            >>> builder.tag('my-widget', {'size': 3}, ['x'], data_mode='dark')
        """
        node = make_element(tag_name, first, children, is_void=is_void, schema=self._schema)
        for name, value in attrs.items():
            node.set_attribute(html_name(name), value)
        return node
