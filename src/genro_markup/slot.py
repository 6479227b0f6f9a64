# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SlotNode - deferred content with a static fallback."""

from __future__ import annotations

from typing import Any, Callable

from .node import Node
from .resolver import resolve


def _check_callback(callback: Any) -> Callable[[], Any] | None:
    if callback is not None and not callable(callback):
        raise TypeError(
            f"Slot render callback must be callable or None, got {type(callback).__name__}"
        )
    return callback


class SlotNode(Node):
    """A node whose content can be supplied by a render-time callback.

    If a render callback is set, it is invoked with no arguments on every
    render and its result (resolved like any child value) is the whole
    output; the stored children are ignored. Without a callback the stored
    children render normally.

    Example:
        >>> SlotNode('default').render()
        'default'
        >>> SlotNode('default', render_callback=lambda: 'injected').render()
        'injected'
    """

    __slots__ = ('_render_callback',)

    def __init__(self, *children: Any, render_callback: Callable[[], Any] | None = None) -> None:
        self._render_callback = _check_callback(render_callback)
        super().__init__(*children)

    def __repr__(self) -> str:
        mode = 'callback' if self._render_callback is not None else 'static'
        return f"SlotNode({mode}, {len(self._children)} children)"

    @property
    def render_callback(self) -> Callable[[], Any] | None:
        return self._render_callback

    def set_render_callback(self, callback: Callable[[], Any] | None) -> SlotNode:
        """Set (or clear, with None) the render callback.

        Raises:
            TypeError: If callback is neither None nor callable.
        """
        self._render_callback = _check_callback(callback)
        return self

    def render(self) -> str:
        if self._render_callback is not None:
            return resolve(self._render_callback(), self, strict=self.strict)
        return self.render_children()
