# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlSchema - the tag and attribute tables the renderer consults.

The tables are configuration data, not behaviour: element classes and
builders take an HtmlSchema instance, so custom or SVG-only tag sets can be
injected without touching the rendering code.

Example:
    Restricting a builder to an SVG vocabulary::

        svg_schema = HtmlSchema(
            elements=frozenset({'svg', 'g', 'path', 'circle'}),
            void_elements=frozenset(),
        )
        builder = HtmlBuilder(schema=svg_schema)
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field


HTML_ELEMENTS = frozenset({
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b', 'base',
    'bdi', 'bdo', 'blockquote', 'body', 'br', 'button', 'canvas', 'caption',
    'cite', 'code', 'col', 'colgroup', 'data', 'datalist', 'dd', 'del',
    'details', 'dfn', 'dialog', 'div', 'dl', 'dt', 'em', 'embed', 'fieldset',
    'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5',
    'h6', 'head', 'header', 'hgroup', 'hr', 'html', 'i', 'iframe', 'img',
    'input', 'ins', 'kbd', 'keygen', 'label', 'legend', 'li', 'link', 'main',
    'map', 'mark', 'meta', 'meter', 'nav', 'noscript', 'object', 'ol',
    'optgroup', 'option', 'output', 'p', 'param', 'picture', 'pre',
    'progress', 'q', 'rp', 'rt', 'ruby', 's', 'samp', 'script', 'section',
    'select', 'small', 'source', 'span', 'strong', 'style', 'sub', 'summary',
    'sup', 'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th',
    'thead', 'time', 'title', 'tr', 'track', 'u', 'ul', 'var', 'video', 'wbr',
})

SVG_ELEMENTS = frozenset({
    'svg', 'circle', 'ellipse', 'line', 'polygon', 'polyline', 'rect', 'path',
    'text', 'tspan', 'g', 'defs', 'use', 'symbol', 'image', 'marker',
    'pattern', 'mask', 'stop', 'filter', 'animate', 'mpath', 'set',
})

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'keygen',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

BOOLEAN_ATTRIBUTES = frozenset({
    'allowfullscreen', 'async', 'autofocus', 'autoplay', 'checked',
    'controls', 'default', 'defer', 'disabled', 'formnovalidate', 'hidden',
    'ismap', 'itemscope', 'loop', 'multiple', 'muted', 'nomodule',
    'novalidate', 'open', 'readonly', 'required', 'reversed', 'selected',
})

# Attributes that get a dedicated setter method on ElementNode.
ATTRIBUTE_NAMES = (
    'accept', 'accept-charset', 'accesskey', 'action', 'align', 'alt', 'async',
    'autocapitalize', 'autocomplete', 'autofocus', 'autoplay', 'bgcolor',
    'border', 'buffered', 'capture', 'challenge', 'charset', 'checked', 'cite',
    'class', 'code', 'codebase', 'color', 'cols', 'colspan', 'content',
    'contenteditable', 'contextmenu', 'controls', 'coords', 'crossorigin',
    'csp', 'data', 'datetime', 'decoding', 'default', 'defer', 'dir',
    'dirname', 'disabled', 'download', 'draggable', 'enctype', 'enterkeyhint',
    'for', 'form', 'formaction', 'formenctype', 'formmethod', 'formnovalidate',
    'formtarget', 'headers', 'height', 'hidden', 'high', 'href', 'hreflang',
    'http-equiv', 'icon', 'importance', 'integrity', 'intrinsicsize',
    'inputmode', 'ismap', 'itemprop', 'keytype', 'kind', 'label', 'lang',
    'language', 'loading', 'list', 'loop', 'low', 'manifest', 'max',
    'maxlength', 'minlength', 'media', 'method', 'min', 'multiple', 'muted',
    'name', 'novalidate', 'open', 'optimum', 'pattern', 'ping', 'placeholder',
    'poster', 'preload', 'radiogroup', 'readonly', 'referrerpolicy', 'rel',
    'required', 'reversed', 'rows', 'rowspan', 'sandbox', 'scope', 'scoped',
    'selected', 'shape', 'size', 'sizes', 'slot', 'span', 'spellcheck', 'src',
    'srcdoc', 'srclang', 'srcset', 'start', 'step', 'style', 'summary',
    'tabindex', 'target', 'title', 'translate', 'type', 'usemap', 'value',
    'width', 'wrap',
)


def python_name(html_name: str) -> str:
    """Map an HTML name to a Python identifier.

    Hyphens become underscores; keywords get a trailing underscore.

    Examples:
        >>> python_name('http-equiv')
        'http_equiv'
        >>> python_name('class')
        'class_'
    """
    name = html_name.replace('-', '_')
    if keyword.iskeyword(name):
        name += '_'
    return name


def html_name(python_identifier: str) -> str:
    """Inverse of python_name: ``class_`` -> ``class``, ``data_id`` -> ``data-id``."""
    name = python_identifier
    if name.endswith('_') and not name.startswith('_'):
        name = name[:-1]
    return name.replace('_', '-')


# Explicit setter table: Python method name -> HTML attribute name.
ATTRIBUTE_SETTERS: dict[str, str] = {python_name(name): name for name in ATTRIBUTE_NAMES}


@dataclass(frozen=True)
class HtmlSchema:
    """Tag and attribute tables.

    Attributes:
        elements: Tag names a builder offers as factory methods.
        void_elements: Tags rendered without closing tag and without children.
        boolean_attributes: Attributes rendered bare when truthy and omitted
            when falsy.
    """

    elements: frozenset[str] = field(default=HTML_ELEMENTS | SVG_ELEMENTS)
    void_elements: frozenset[str] = field(default=VOID_ELEMENTS)
    boolean_attributes: frozenset[str] = field(default=BOOLEAN_ATTRIBUTES)

    def is_void(self, tag: str) -> bool:
        return tag in self.void_elements

    def is_boolean_attribute(self, name: str) -> bool:
        return name in self.boolean_attributes

    def has_element(self, tag: str) -> bool:
        return tag in self.elements


DEFAULT_SCHEMA = HtmlSchema()
