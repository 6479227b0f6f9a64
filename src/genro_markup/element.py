# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementNode and DocumentNode - nodes that render as HTML tags.

Example:
    Building and rendering an element::

        card = make_element('div', {'class': 'card'}, [
            make_element('h1', {}, ['Hi']),
            make_element('p', {}, ['<x>']),
        ])
        card.render()
        # '<div class="card"><h1>Hi</h1> <p>&lt;x&gt;</p></div>'

    Attribute setters chain::

        make_element('input', is_void=True).type('email').required().name('mail')
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterable

from .exceptions import InvalidAttributeValue, StructuralViolation
from .node import Node
from .resolver import ChildKind, call_with_context, classify, escape, resolve
from .schema import ATTRIBUTE_SETTERS, BOOLEAN_ATTRIBUTES, DEFAULT_SCHEMA, HtmlSchema


class _RawAttributes:
    """Key of the unsafe raw-attribute slot.

    Not a string, so it can never collide with a real attribute name.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return 'RAW_ATTRIBUTES'


RAW_ATTRIBUTES = _RawAttributes()

_ATTRIBUTE_KINDS = frozenset({
    ChildKind.ABSENT,
    ChildKind.CALLBACK,
    ChildKind.SAFE,
    ChildKind.NUMERIC,
    ChildKind.TEXT,
})


def _check_attribute(name: Any, value: Any) -> None:
    """Raise InvalidAttributeValue unless name/value can be rendered."""
    if name is RAW_ATTRIBUTES:
        if not isinstance(value, str) and classify(value) is not ChildKind.SAFE:
            raise InvalidAttributeValue(
                f"Raw attribute text must be a string, got {type(value).__name__}"
            )
        return
    if not isinstance(name, str) or not name:
        raise InvalidAttributeValue(f"Attribute names must be non-empty strings, got {name!r}")
    if classify(value) not in _ATTRIBUTE_KINDS:
        raise InvalidAttributeValue(
            f"Attribute '{name}' cannot take a value of type {type(value).__name__}"
        )


class ElementNode(Node):
    """A node rendered as an HTML element.

    Each element has:
    - tag_name: the element's tag
    - attributes: insertion-ordered mapping of attribute name to value
      (str, number, bool, None, SafeValue, or a callable returning one)
    - is_void: fixed at construction; void elements render no closing tag
      and refuse children

    Calling an element appends children and returns it, so children can be
    supplied after attributes::

        make_element('ul', {'class': 'menu'})(li_1, li_2)
    """

    __slots__ = ('_tag_name', '_attributes', '_is_void', '_schema')

    def __init__(
        self,
        tag_name: str,
        attributes: Mapping[Any, Any] | None = None,
        children: Iterable[Any] = (),
        is_void: bool | None = None,
        schema: HtmlSchema | None = None,
    ) -> None:
        """Initialize an ElementNode.

        Args:
            tag_name: Non-empty tag name.
            attributes: Initial attributes (may include RAW_ATTRIBUTES).
            children: Initial child values.
            is_void: Void flag. If None, looked up in the schema.
            schema: Tables for void elements and boolean attributes.

        Raises:
            ValueError: If tag_name is empty.
            StructuralViolation: If a void element is given children.
            InvalidAttributeValue: If an attribute value has an unsupported kind.
        """
        if not isinstance(tag_name, str) or not tag_name:
            raise ValueError(f"Tag name must be a non-empty string, got {tag_name!r}")
        self._schema = schema if schema is not None else DEFAULT_SCHEMA
        self._tag_name = tag_name
        self._is_void = self._schema.is_void(tag_name) if is_void is None else bool(is_void)
        self._attributes: dict[Any, Any] = {}
        for name, value in (attributes or {}).items():
            self.set_attribute(name, value)
        super().__init__(*children)

    def __repr__(self) -> str:
        return f"ElementNode({self._tag_name!r}, {len(self._children)} children)"

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def is_void(self) -> bool:
        return self._is_void

    @property
    def schema(self) -> HtmlSchema:
        return self._schema

    @property
    def attributes(self) -> Mapping[Any, Any]:
        """Read-only view of the stored attributes."""
        return MappingProxyType(self._attributes)

    def _check_attach(self, child: Any) -> None:
        if self._is_void:
            raise StructuralViolation(
                f"<{self._tag_name}> is a void element and cannot have children"
            )
        super()._check_attach(child)

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def set_attribute(self, name: str, value: Any = True) -> ElementNode:
        """Set an attribute.

        Args:
            name: Attribute name.
            value: str, number, bool, None, SafeValue, or a callable returning
                one of those (invoked at render time with this element).

        Returns:
            self, for chaining.

        Raises:
            InvalidAttributeValue: If name or value cannot be rendered.
        """
        _check_attribute(name, value)
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Return the stored (unevaluated) attribute value, or default."""
        return self._attributes.get(name, default)

    def remove_attribute(self, name: str) -> ElementNode:
        self._attributes.pop(name, None)
        return self

    def set_unsafe_attributes(self, text: str) -> ElementNode:
        """Store trusted attribute text emitted verbatim inside the tag.

        The text bypasses escaping entirely. Never pass external input.

        Example:
            >>> make_element('div').set_unsafe_attributes('data-x="1" hidden').render()
            '<div data-x="1" hidden></div>'
        """
        return self.set_attribute(RAW_ATTRIBUTES, text)

    def id(self, value: Any) -> ElementNode:
        return self.set_attribute('id', value)

    def classes(self, *args: str | Mapping[str, Any] | Iterable[str] | None) -> ElementNode:
        """Set the class attribute from names and ``{name: flag}`` mappings.

        Example:
            >>> make_element('div').classes('btn', {'active': True, 'hidden': False})
            ... # class="btn active"
        """
        flags: dict[str, bool] = {}
        for arg in args:
            if arg is None:
                continue
            if isinstance(arg, str):
                flags[arg] = True
            elif isinstance(arg, Mapping):
                for key, flag in arg.items():
                    flags[key] = bool(flag)
            else:
                for key in arg:
                    flags[key] = True

        names = ' '.join(name for name, flag in flags.items() if flag)
        if names:
            self.set_attribute('class', names)
        return self

    def add_class(self, name: str) -> ElementNode:
        """Append a class name to the existing class attribute."""
        existing = self._attributes.get('class')
        if existing and isinstance(existing, str):
            if name in existing.split():
                return self
            return self.set_attribute('class', f"{existing} {name}")
        return self.set_attribute('class', name)

    def render_attributes(self) -> str:
        """Render attributes in insertion order, each with a leading space."""
        parts = []
        for name, value in self._attributes.items():
            if name is RAW_ATTRIBUTES:
                parts.append(f" {value}")
                continue

            if classify(value) is ChildKind.CALLBACK:
                value = call_with_context(value, self)
                _check_attribute(name, value)
                if classify(value) is ChildKind.CALLBACK:
                    raise InvalidAttributeValue(
                        f"Attribute '{name}' callback returned another callable"
                    )

            if value is None or value is False:
                continue

            boolean = self._schema.is_boolean_attribute(name)
            if value is True or (boolean and value):
                parts.append(f" {escape(name)}")
            elif boolean:
                continue
            else:
                text = resolve(value, self, strict=True)
                parts.append(f' {escape(name)}="{text}"')

        return ''.join(parts)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> str:
        tag = self._tag_name
        if self._is_void:
            return f"<{tag}{self.render_attributes()}>"
        return f"<{tag}{self.render_attributes()}>{self.render_children()}</{tag}>"

    def to_dict(self) -> dict[str, Any]:
        """Structural snapshot with attribute callbacks evaluated.

        Returns:
            Dict with 'tag_name', 'attributes', 'is_void' and 'children';
            nested elements are converted recursively, other child values
            are returned as stored.
        """
        attributes = {
            name: call_with_context(value, self)
            if classify(value) is ChildKind.CALLBACK else value
            for name, value in self._attributes.items()
        }
        children = [
            child.to_dict() if isinstance(child, ElementNode) else child
            for child in self._children
        ]
        return {
            'tag_name': self._tag_name,
            'attributes': attributes,
            'is_void': self._is_void,
            'children': children,
        }


def _make_setter(attribute: str, boolean: bool) -> Callable[..., ElementNode]:
    if boolean:
        def setter(self: ElementNode, value: Any = True) -> ElementNode:
            return self.set_attribute(attribute, value)
    else:
        def setter(self: ElementNode, value: Any) -> ElementNode:
            return self.set_attribute(attribute, value)
    setter.__doc__ = f"Set the ``{attribute}`` attribute."
    return setter


def _install_attribute_setters(cls: type, table: Mapping[str, str]) -> None:
    """Add one setter method per entry of table (Python name -> HTML name)."""
    for method_name, attribute in table.items():
        if hasattr(cls, method_name):
            continue
        setter = _make_setter(attribute, attribute in BOOLEAN_ATTRIBUTES)
        setter.__name__ = method_name
        setter.__qualname__ = f"{cls.__name__}.{method_name}"
        setattr(cls, method_name, setter)


_install_attribute_setters(ElementNode, ATTRIBUTE_SETTERS)


class DocumentNode(ElementNode):
    """The ``<html>`` root element, rendered after a doctype declaration."""

    __slots__ = ()

    DOCTYPE = '<!DOCTYPE html>'

    def __init__(
        self,
        attributes: Mapping[Any, Any] | None = None,
        children: Iterable[Any] = (),
        schema: HtmlSchema | None = None,
    ) -> None:
        super().__init__('html', attributes, children, is_void=False, schema=schema)

    def __repr__(self) -> str:
        return f"DocumentNode({len(self._children)} children)"

    def render(self) -> str:
        return f"{self.DOCTYPE}\n{super().render()}"


def split_arguments(first: Any, children: Any) -> tuple[dict[Any, Any], list[Any]]:
    """Classify the flexible leading argument of a tag constructor.

    Args:
        first: str (unsafe raw attribute text), Mapping (attributes),
            list/tuple (children), None (nothing), or any single child value.
        children: Explicit children. If not None it always wins for child
            assignment.

    Returns:
        Tuple of (attributes, children).
    """
    attributes: dict[Any, Any] = {}
    items: list[Any] = []

    if isinstance(first, str):
        attributes[RAW_ATTRIBUTES] = first
    elif isinstance(first, Mapping):
        attributes.update(first)
    elif isinstance(first, (list, tuple)):
        items = list(first)
    elif first is not None:
        items = [first]

    if children is not None:
        items = list(children) if isinstance(children, (list, tuple)) else [children]

    return attributes, items


def make_element(
    tag_name: str,
    first: Any = None,
    children: Any = None,
    is_void: bool | None = None,
    schema: HtmlSchema | None = None,
) -> ElementNode:
    """Construct an ElementNode from the flexible tag-constructor arguments.

    This is the single entry point used by tag catalogues.

    Example:
        >>> make_element('div', 'class="box"', ['Hello']).render()
        '<div class="box">Hello</div>'
        >>> make_element('br', is_void=True).render()
        '<br>'
    """
    attributes, items = split_arguments(first, children)
    return ElementNode(tag_name, attributes, items, is_void=is_void, schema=schema)


def make_document(
    first: Any = None,
    children: Any = None,
    schema: HtmlSchema | None = None,
) -> DocumentNode:
    """Construct a DocumentNode with the same argument rules as make_element."""
    attributes, items = split_arguments(first, children)
    return DocumentNode(attributes, items, schema=schema)
