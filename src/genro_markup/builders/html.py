# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - factories for every HTML5 (and SVG) tag plus the primitives.

Example:
    Building a page::

        from genro_markup.builders import html

        page = html.document({'lang': 'en'}, [
            html.head([html.title(['Users'])]),
            html.body([
                html.h1(['Users']),
                html.ul({'class': 'users'}, [
                    html.each(users, lambda user, key: html.li([user.name])),
                ]),
                html.if_(lambda: not users)(html.p(['No users yet'])),
            ]),
        ])
        page.render()

    Tag factories take the same arguments as make_element, plus keyword
    attributes::

        html.div('class="box"')('Hello')
        html.input(type='email', required=True, class_='field')
        html.del_(['removed'])  # Python keywords take a trailing underscore
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..conditional import ConditionalNode
from ..element import DocumentNode, ElementNode, split_arguments
from ..iteration import IterationNode, ReplayableIterationNode
from ..node import Node
from ..raw import BufferedNode, RawNode
from ..safe import SafeValue, mark_safe
from ..schema import html_name
from ..slot import SlotNode
from .base import BuilderBase


class HtmlBuilder(BuilderBase):
    """Builder for HTML5 elements.

    Provides dynamic methods for every tag of its schema via __getattr__.
    Void elements (meta, br, img, etc.) are flagged from the schema.

    Usage:
        >>> builder = HtmlBuilder()
        >>> builder.div({'id': 'main'}, [builder.p(['Hello'])]).render()
        '<div id="main"><p>Hello</p></div>'
        >>> builder.br().render()
        '<br>'
    """

    def _resolve_tag(self, tag: str) -> Callable[..., ElementNode] | None:
        if self._schema.has_element(tag):
            return self._make_tag_method(tag)
        return None

    def _make_tag_method(self, name: str) -> Callable[..., ElementNode]:
        """Create a factory for a specific tag."""
        is_void = self._schema.is_void(name)

        def tag_method(first: Any = None, children: Any = None, **attrs: Any) -> ElementNode:
            return self.tag(name, first, children, is_void=is_void, **attrs)

        tag_method.__name__ = name
        return tag_method

    def document(self, first: Any = None, children: Any = None, **attrs: Any) -> DocumentNode:
        """Create the ``<html>`` root, rendered with a doctype."""
        attributes, items = split_arguments(first, children)
        for name, value in attrs.items():
            attributes[html_name(name)] = value
        return DocumentNode(attributes, items, schema=self._schema)

    def fragment(self, *children: Any) -> Node:
        """Group children without markup (space-joined)."""
        return Node(*children)

    def raw(self, *children: Any) -> RawNode:
        """Unescaped, unseparated children. Trusted markup only."""
        return RawNode(*children)

    def safe(self, text: Any) -> SafeValue:
        """Mark text as exempt from escaping."""
        return mark_safe(text)

    def slot(self, *children: Any, render_callback: Callable[[], Any] | None = None) -> SlotNode:
        """Deferred content: render_callback wins over the static children."""
        return SlotNode(*children, render_callback=render_callback)

    def if_(self, condition: Any, *children: Any) -> ConditionalNode:
        """Start a conditional; chain ``.elif_(cond)(...)`` and ``.else_(...)``."""
        return ConditionalNode(condition, *children)

    def buffered(self, *children: Any) -> BufferedNode:
        """Capture what callable children print."""
        return BufferedNode(*children)

    def each(self, source: Iterable[Any], transform: Callable[..., Any] | None = None) -> IterationNode:
        """Map transform over source at render time (one-shot)."""
        return IterationNode(source, transform)

    def each_replayable(
        self, source: Iterable[Any], transform: Callable[..., Any] | None = None
    ) -> ReplayableIterationNode:
        """Like each(), but renders the same output every time."""
        return ReplayableIterationNode(source, transform)


html = HtmlBuilder()
