# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ConditionalNode."""

import pytest

from genro_markup import (
    ConditionalNode,
    ConditionalState,
    Node,
    StructuralViolation,
    make_element,
)


class Counter:
    """Callable condition recording how often it was evaluated."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.result


class TestConditionalSelection:
    """Tests for branch selection."""

    def test_first_true_branch_wins(self):
        node = (
            ConditionalNode()
            .add_branch(False, ['A'])
            .add_branch(True, ['B'])
            .set_fallback(['C'])
        )
        assert node.render() == 'B'
        assert node.selected_branch == 1

    def test_fallback_when_nothing_matches(self):
        node = ConditionalNode(False, 'A').else_('C')
        assert node.render() == 'C'
        assert node.selected_branch == ConditionalNode.ELSE

    def test_no_match_no_fallback_is_empty(self):
        assert ConditionalNode(False, 'A').render() == ''

    def test_empty_conditional(self):
        node = ConditionalNode()
        assert node.render() == ''
        assert node.selected_branch == ConditionalNode.ELSE

    def test_truthiness_of_non_callables(self):
        assert ConditionalNode(0, 'zero').elif_('yes')('text').render() == 'text'
        assert ConditionalNode([], 'empty').else_('fallback').render() == 'fallback'

    def test_nodes_are_tested_by_truthiness_not_called(self):
        node = ConditionalNode(Node(), 'picked')
        assert node.render() == 'picked'

    def test_short_circuit(self):
        first = Counter(False)
        second = Counter(True)
        third = Counter(True)
        node = (
            ConditionalNode(first, 'A')
            .elif_(second)('B')
            .elif_(third)('C')
        )
        assert node.render() == 'B'
        assert (first.calls, second.calls, third.calls) == (1, 1, 0)

    def test_reevaluated_every_render(self):
        state = {'admin': True}
        node = ConditionalNode(lambda: state['admin'], 'Admin').else_('User')
        assert node.render() == 'Admin'
        state['admin'] = False
        assert node.render() == 'User'
        assert node.selected_branch == ConditionalNode.ELSE

    def test_condition_receives_node(self):
        seen = []
        node = ConditionalNode(lambda n: seen.append(n) or True, 'x')
        node.render()
        assert seen == [node]

    def test_only_selected_children_resolved(self):
        calls = []
        node = ConditionalNode(True, 'shown').else_(lambda: calls.append('fallback'))
        assert node.render() == 'shown'
        assert calls == []

    def test_selected_children_space_joined(self):
        node = ConditionalNode(True, make_element('b', ['x']), 'y')
        assert node.render() == '<b>x</b> y'

    def test_text_is_escaped(self):
        assert ConditionalNode(True, '<i>').render() == '&lt;i&gt;'


class TestConditionalState:
    """Tests for the render-time state."""

    def test_initial_state(self):
        node = ConditionalNode(True, 'x')
        assert node.state is ConditionalState.UNEVALUATED
        assert node.selected_branch is None

    def test_evaluating_during_render(self):
        observed = []

        def condition(node):
            observed.append(node.state)
            return True

        node = ConditionalNode(condition, 'x')
        node.render()
        assert observed == [ConditionalState.EVALUATING]
        assert node.state is ConditionalState.RESOLVED

    def test_failing_condition_resets_state(self):
        def condition():
            raise RuntimeError('boom')

        node = ConditionalNode(condition, 'x')
        with pytest.raises(RuntimeError, match='boom'):
            node.render()
        assert node.state is ConditionalState.UNEVALUATED
        assert node.selected_branch is None


class TestConditionalStructure:
    """Tests for branch construction and ownership."""

    def test_fluent_chain(self):
        node = (
            ConditionalNode(lambda: False)('Admin panel')
            .elif_(lambda: True)('Dashboard')
            .else_('Please log in')
        )
        assert len(node.branches) == 2
        assert node.fallback == ('Please log in',)
        assert node.render() == 'Dashboard'

    def test_children_lists_all_branches(self):
        node = ConditionalNode(True, 'a').elif_(False)('b').else_('c')
        assert node.children == ('a', 'b', 'c')

    def test_branch_after_fallback_raises(self):
        node = ConditionalNode(True, 'a').else_('c')
        with pytest.raises(StructuralViolation):
            node.add_branch(False, ['b'])
        with pytest.raises(StructuralViolation):
            node.elif_(False)

    def test_branch_children_after_fallback_raise(self):
        node = ConditionalNode(True, 'a').else_('c')
        with pytest.raises(StructuralViolation):
            node.attach('b')

    def test_attach_without_branch_raises(self):
        with pytest.raises(StructuralViolation):
            ConditionalNode().attach('x')

    def test_branch_children_get_parent(self):
        child = make_element('p')
        fallback = make_element('span')
        node = ConditionalNode(True, child).else_(fallback)
        assert child.parent is node
        assert fallback.parent is node

    def test_reattach_removes_from_branch(self):
        child = make_element('p')
        node = ConditionalNode(True, child, 'text')
        other = Node()
        other.attach(child)
        assert node.branches[0][1] == ('text',)

    def test_set_fallback_replaces(self):
        old = make_element('i')
        node = ConditionalNode(False, 'a').else_(old)
        node.set_fallback(['new'])
        assert old.parent is None
        assert node.render() == 'new'

    def test_clear_children(self):
        child = make_element('p')
        node = ConditionalNode(True, child).else_('c')
        node.clear_children()
        assert child.parent is None
        assert node.children == ()
        assert node.render() == ''

    def test_nested_conditionals(self):
        inner = ConditionalNode(lambda: True, 'inner')
        outer = ConditionalNode(lambda: True, make_element('div', [inner]))
        assert outer.render() == '<div>inner</div>'
