# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Escape-exempt nodes: RawNode and BufferedNode.

Both bypass escaping. They exist for pre-trusted markup and for bridging
code that prints its output instead of returning it; never feed them
external input.
"""

from __future__ import annotations

import io
from contextlib import redirect_stdout
from typing import Any

from .node import Node
from .resolver import ChildKind, call_with_context, classify, join, resolve


class RawNode(Node):
    """A node rendering its children unescaped and unseparated.

    Callbacks are invoked and nodes rendered as usual; only text escaping
    and the space separator are dropped.

    Example:
        >>> RawNode('<div>', 'Hello', '</div>').render()
        '<div>Hello</div>'
    """

    __slots__ = ()

    def render(self) -> str:
        return join(self._children, self, separator='', escape_text=False, strict=self.strict)


class BufferedNode(Node):
    """A node capturing what its children print to stdout.

    Each callable child is invoked while stdout is redirected to an
    in-memory buffer; a non-None return value is appended to the same
    buffer. Other children are resolved without escaping and appended.
    The captured text is returned unescaped.

    Example:
        >>> BufferedNode(lambda: print('<b>hi</b>', end='')).render()
        '<b>hi</b>'
    """

    __slots__ = ()

    def render(self) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            for child in self._children:
                if classify(child) is ChildKind.CALLBACK:
                    result = call_with_context(child, self)
                else:
                    result = child
                buffer.write(resolve(result, self, escape_text=False, strict=self.strict))
        return buffer.getvalue()
