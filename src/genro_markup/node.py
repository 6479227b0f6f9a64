# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - base class of the markup tree."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Iterable, Iterator

from .exceptions import StructuralViolation
from .resolver import join


class Node:
    """A node in a markup tree.

    Each node has:
    - children: ordered child values (nodes, text, numbers, callbacks,
      SafeValue, or None which is skipped on attach)
    - parent: weak back-reference to the node that last attached it

    Ownership flows from parent to child through the children sequence; the
    back-reference is only used for context lookup. A plain Node renders its
    children space-joined with no surrounding markup, so it also serves as a
    fragment.

    Example:
        >>> Node('hello', 'world').render()
        'hello world'
        >>> Node('<b>').render()
        '&lt;b&gt;'
    """

    __slots__ = ('_children', '_parent', '_strict', '__weakref__')

    #: Class default for unclassifiable children: raise (True) or skip (False).
    STRICT: bool = True

    def __init__(self, *children: Any) -> None:
        self._children: list[Any] = []
        self._parent: weakref.ref[Node] | None = None
        self._strict: bool | None = None
        self.attach_all(children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._children)} children)"

    @property
    def parent(self) -> Node | None:
        """The node that last attached this one, or None."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> tuple[Any, ...]:
        """Snapshot of the stored child values, in render order."""
        return tuple(self._children)

    @property
    def strict(self) -> bool:
        """Whether unclassifiable children raise ResolutionAmbiguity."""
        return self.STRICT if self._strict is None else self._strict

    @strict.setter
    def strict(self, value: bool) -> None:
        self._strict = bool(value)

    def ancestors(self) -> Iterator[Node]:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def _set_parent(self, parent: Node | None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def _check_attach(self, child: Any) -> None:
        """Raise StructuralViolation if child cannot be attached here."""
        if isinstance(child, Node):
            if child is self or any(node is child for node in self.ancestors()):
                raise StructuralViolation(
                    f"Cannot attach {child!r} to {self!r}: it would create a cycle"
                )

    def _adopt(self, child: Any) -> None:
        """Move a Node child under this node (detach from any prior parent)."""
        if isinstance(child, Node):
            if child.parent is not None:
                child.detach()
            child._set_parent(self)

    def _remove_child(self, child: Node) -> None:
        for index, value in enumerate(self._children):
            if value is child:
                del self._children[index]
                return

    def attach(self, child: Any) -> Node:
        """Append one child value.

        Args:
            child: Any child value. None is ignored.

        Returns:
            self, for chaining.

        Raises:
            StructuralViolation: If this node does not accept children or the
                child is one of this node's ancestors.
        """
        if child is None:
            return self
        self._check_attach(child)
        self._adopt(child)
        self._children.append(child)
        return self

    def attach_all(self, children: Iterable[Any]) -> Node:
        """Append a sequence of child values, in order."""
        for child in children:
            self.attach(child)
        return self

    def detach(self) -> Node:
        """Remove this node from its parent.

        Returns:
            self.

        Raises:
            StructuralViolation: If the node has no parent.
        """
        parent = self.parent
        if parent is None:
            raise StructuralViolation(f"{self!r} has no parent to detach from")
        parent._remove_child(self)
        self._parent = None
        return self

    def clear_children(self) -> Node:
        """Remove all children."""
        for child in self._children:
            if isinstance(child, Node) and child.parent is self:
                child._parent = None
        self._children = []
        return self

    def apply_hook(self, hook: Callable[[Node], Any] | None) -> Node:
        """Call ``hook(self)`` for side effects and return self.

        Example:
            >>> div.apply_hook(lambda el: el.set_attribute('data-count', 3))
        """
        if hook is not None:
            hook(self)
        return self

    def apply_children_hook(self, hook: Callable[[Any], Any] | None) -> Node:
        """Call ``hook(child)`` for every stored child value and return self."""
        if hook is not None:
            for child in list(self._children):
                hook(child)
        return self

    def map(self, source: Iterable[Any], transform: Callable | None = None) -> Node:
        """Append an IterationNode over source.

        Args:
            source: Items to render (consumed by the first render).
            transform: Optional ``(item, key) -> child value`` function.

        Returns:
            self, for chaining.
        """
        # Import here to avoid circular dependency
        from .iteration import IterationNode

        return self.attach(IterationNode(source, transform))

    def __call__(self, *children: Any) -> Node:
        return self.attach_all(children)

    def render_children(self, separator: str = ' ') -> str:
        """Resolve the stored children and join them with separator."""
        return join(self._children, self, separator=separator, strict=self.strict)

    def render(self) -> str:
        """Render this node to text."""
        return self.render_children()

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()
