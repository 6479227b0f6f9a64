# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConditionalNode - if / elif / else selection of children.

Branches are (condition, children) pairs scanned in declaration order on
every render; the first true condition selects its children, otherwise the
fallback children render. Conditions are booleans, any other value tested
for truthiness, or callables evaluated lazily. Nothing is cached between
renders, so callables capturing mutable state are re-checked each time.

Example:
    Fluent construction::

        node = (
            ConditionalNode(lambda: user.is_admin)('Admin panel')
            .elif_(lambda: user.is_logged)('Dashboard')
            .else_('Please log in')
        )
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from .exceptions import StructuralViolation
from .node import Node
from .resolver import call_with_context, join


class ConditionalState(Enum):
    """Render-time state of a ConditionalNode."""

    UNEVALUATED = 'unevaluated'
    EVALUATING = 'evaluating'
    RESOLVED = 'resolved'


_MISSING = object()


class ConditionalNode(Node):
    """A node rendering exactly one of its branches.

    Attributes:
        ELSE: Value of selected_branch when the fallback rendered.
    """

    __slots__ = ('_branches', '_fallback', '_state', '_selected')

    ELSE = 'else'

    def __init__(self, condition: Any = _MISSING, *children: Any) -> None:
        """Initialize a ConditionalNode.

        Args:
            condition: Condition of the first branch. If omitted, the node
                starts with no branches.
            *children: Children of the first branch.
        """
        self._branches: list[tuple[Any, list[Any]]] = []
        self._fallback: list[Any] = []
        self._state = ConditionalState.UNEVALUATED
        self._selected: int | str | None = None
        super().__init__()
        if condition is not _MISSING:
            self.add_branch(condition, children)

    def __repr__(self) -> str:
        return f"ConditionalNode({len(self._branches)} branches)"

    @property
    def state(self) -> ConditionalState:
        return self._state

    @property
    def selected_branch(self) -> int | str | None:
        """Index of the branch chosen by the last render, ELSE, or None."""
        return self._selected

    @property
    def branches(self) -> tuple[tuple[Any, tuple[Any, ...]], ...]:
        return tuple((condition, tuple(kids)) for condition, kids in self._branches)

    @property
    def fallback(self) -> tuple[Any, ...]:
        return tuple(self._fallback)

    @property
    def children(self) -> tuple[Any, ...]:
        """All stored child values, branches first, then the fallback."""
        values: list[Any] = []
        for _, kids in self._branches:
            values.extend(kids)
        values.extend(self._fallback)
        return tuple(values)

    def _store(self, target: list[Any], children: Iterable[Any]) -> None:
        for child in children:
            if child is None:
                continue
            Node._check_attach(self, child)
            self._adopt(child)
            target.append(child)

    def _release(self, values: Iterable[Any]) -> None:
        for child in values:
            if isinstance(child, Node) and child.parent is self:
                child._parent = None

    def _remove_child(self, child: Node) -> None:
        for values in [kids for _, kids in self._branches] + [self._fallback]:
            for index, value in enumerate(values):
                if value is child:
                    del values[index]
                    return

    # -------------------------------------------------------------------------
    # Builder operations
    # -------------------------------------------------------------------------

    def add_branch(self, condition: Any, children: Iterable[Any] = ()) -> ConditionalNode:
        """Append a (condition, children) branch.

        Raises:
            StructuralViolation: If fallback children were already added.
        """
        if self._fallback:
            raise StructuralViolation("Cannot add a branch after the fallback children")
        kids: list[Any] = []
        self._branches.append((condition, kids))
        self._store(kids, children)
        return self

    def elif_(self, condition: Any) -> ConditionalNode:
        """Open a new branch; fill it by calling the node with its children."""
        return self.add_branch(condition)

    def else_(self, *children: Any) -> ConditionalNode:
        """Append children to the fallback."""
        self._store(self._fallback, children)
        return self

    def set_fallback(self, children: Iterable[Any]) -> ConditionalNode:
        """Replace the fallback children."""
        self._release(self._fallback)
        self._fallback = []
        self._store(self._fallback, children)
        return self

    def attach(self, child: Any) -> ConditionalNode:
        """Append a child to the most recently opened branch.

        Raises:
            StructuralViolation: If there is no branch yet, or fallback
                children were already added.
        """
        if child is None:
            return self
        if self._fallback:
            raise StructuralViolation("Cannot add branch children after the fallback children")
        if not self._branches:
            raise StructuralViolation("ConditionalNode has no branch to add children to")
        self._store(self._branches[-1][1], [child])
        return self

    def clear_children(self) -> ConditionalNode:
        for _, kids in self._branches:
            self._release(kids)
            kids.clear()
        self._release(self._fallback)
        self._fallback = []
        return self

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _evaluate(self, condition: Any) -> bool:
        if callable(condition) and not isinstance(condition, Node):
            condition = call_with_context(condition, self)
        return bool(condition)

    def render(self) -> str:
        self._state = ConditionalState.EVALUATING
        self._selected = None

        selected: list[Any] = self._fallback
        choice: int | str = self.ELSE
        try:
            for index, (condition, kids) in enumerate(self._branches):
                if self._evaluate(condition):
                    selected, choice = kids, index
                    break
        except BaseException:
            self._state = ConditionalState.UNEVALUATED
            raise

        self._selected = choice
        self._state = ConditionalState.RESOLVED
        return join(selected, self, strict=self.strict)
