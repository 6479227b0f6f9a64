# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IterationNode - children produced at render time from a data source.

The source is wrapped in an iterator when the node is built, so the first
render consumes it and later renders produce nothing. Use
ReplayableIterationNode when the same node must render more than once.

Example:
    >>> items = IterationNode(['a', 'b'], lambda item, key: make_element('li', [item]))
    >>> ul = make_element('ul', [items])
    >>> ul.render()
    '<ul><li>a</li> <li>b</li></ul>'
    >>> ul.render()
    '<ul></ul>'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator

from .exceptions import StructuralViolation
from .node import Node
from .resolver import call_with_context, join


logger = logging.getLogger(__name__)


def _keyed(source: Iterable[Any] | None) -> Iterator[tuple[Any, Any]]:
    """Yield (key, item) pairs: mapping keys, or positions for other iterables."""
    if source is None:
        return iter(())
    if isinstance(source, Mapping):
        return iter(source.items())
    return enumerate(source)


class IterationNode(Node):
    """A node mapping a transform over a data source when rendered.

    The transform is called as ``transform(item, key)``. If it declares a
    third positional parameter, it also receives this node's parent, the
    scope the generated children are rendered in. Without a transform, items
    are rendered as they are (text escaped, nodes rendered, ...).

    Children never arrive through attach(): it raises StructuralViolation.
    """

    __slots__ = ('_pairs', '_transform', '_exhausted')

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        transform: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize an IterationNode.

        Args:
            source: Finite iterable, mapping, or generator of items.
            transform: Optional ``(item, key[, scope]) -> child value``.
        """
        super().__init__()
        self._pairs = _keyed(source)
        self._transform = transform
        self._exhausted = False

    def __repr__(self) -> str:
        state = 'exhausted' if self._exhausted else 'pending'
        return f"{type(self).__name__}({state})"

    @property
    def transform(self) -> Callable[..., Any] | None:
        return self._transform

    @property
    def exhausted(self) -> bool:
        """True once a render has consumed the source."""
        return self._exhausted

    def _check_attach(self, child: Any) -> None:
        raise StructuralViolation(
            f"Cannot attach children to {type(self).__name__}: "
            "children are produced by its source"
        )

    def _produce(self, pairs: Iterable[tuple[Any, Any]]) -> list[Any]:
        if self._transform is None:
            return [item for _, item in pairs]
        scope = self.parent
        return [call_with_context(self._transform, item, key, scope) for key, item in pairs]

    def render(self) -> str:
        if self._exhausted:
            logger.debug("%r rendered again after its source was consumed", self)
        try:
            values = self._produce(self._pairs)
        finally:
            # A failed render still consumes the source
            self._exhausted = True
            self._pairs = iter(())
        return join(values, self, strict=self.strict)


class ReplayableIterationNode(IterationNode):
    """An IterationNode that renders its full output on every render.

    The source is materialized into a list at construction; the transform
    runs again on every render.
    """

    __slots__ = ('_items',)

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        transform: Callable[..., Any] | None = None,
    ) -> None:
        super().__init__(None, transform)
        self._items = list(_keyed(source))

    def render(self) -> str:
        return join(self._produce(self._items), self, strict=self.strict)
