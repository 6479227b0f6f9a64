# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for scoped styles."""

import pytest

from genro_markup import StyleRegistry, style_tag, styled


RULES = {
    'color': 'red',
    '&:hover': {'color': 'blue'},
    'span': {'font-weight': 'bold'},
    '@media (max-width: 600px)': {'color': 'green'},
}


@pytest.fixture
def registry():
    return StyleRegistry()


class TestStyleRegistry:
    """Tests for StyleRegistry."""

    def test_register_returns_scope(self, registry):
        assert registry.register('abcdef1234', {'color': 'red'}) == 'c-abcdef12'
        assert registry.scopes() == ['c-abcdef12']

    def test_register_deduplicates(self, registry):
        first = registry.register('abcdef1234', {'color': 'red'})
        second = registry.register('abcdef1234', {'color': 'blue'})
        assert first == second
        assert registry.rules_for(first) == {'color': 'red'}

    def test_compile(self, registry):
        registry.register('abcdef1234', RULES)
        assert registry.compile() == (
            '.c-abcdef12 { color: red; }\n'
            '.c-abcdef12:hover { color: blue; }\n'
            '.c-abcdef12 span { font-weight: bold; }\n'
            '@media (max-width: 600px) {\n'
            '.c-abcdef12 { color: green; }\n'
            '}\n'
        )

    def test_compile_minified(self, registry):
        registry.register('abcdef1234', RULES)
        assert registry.compile(minify=True) == (
            '.c-abcdef12{color:red;}'
            '.c-abcdef12:hover{color:blue;}'
            '.c-abcdef12 span{font-weight:bold;}'
            '@media (max-width:600px){.c-abcdef12{color:green;}}'
        )

    def test_nested_without_properties(self, registry):
        registry.register('0123456789', {'li': {'a': {'color': 'red'}}})
        assert registry.compile() == '.c-01234567 li a { color: red; }\n'

    def test_empty_registry(self, registry):
        assert registry.compile() == ''

    def test_reset(self, registry):
        registry.register('abcdef1234', {'color': 'red'})
        registry.reset()
        assert registry.scopes() == []
        assert registry.rules_for('c-abcdef12') is None


class TestStyled:
    """Tests for styled() and style_tag()."""

    def test_styled_adds_scope_class(self, registry):
        Button = styled('button', {'padding': '1rem'}, registry=registry)
        assert Button.scope.startswith('c-')
        assert len(Button.scope) == 10
        assert Button(['Click']).render() == f'<button class="{Button.scope}">Click</button>'

    def test_styled_keeps_existing_classes(self, registry):
        Button = styled('button', {'padding': '1rem'}, registry=registry)
        node = Button({'class': 'primary'}, ['Go'])
        assert node.get_attribute('class') == f'primary {Button.scope}'

    def test_styled_keyword_attributes(self, registry):
        Link = styled('a', {'color': 'red'}, registry=registry)
        assert Link(href='/home').get_attribute('href') == '/home'

    def test_same_rules_share_scope(self, registry):
        first = styled('div', {'margin': 0}, registry=registry)
        second = styled('div', {'margin': 0}, registry=registry)
        assert first.scope == second.scope
        assert len(registry.scopes()) == 1

    def test_tag_is_part_of_the_key(self, registry):
        assert styled('div', {'margin': 0}, registry=registry).scope != \
            styled('span', {'margin': 0}, registry=registry).scope

    def test_style_tag(self, registry):
        styled('p', {'color': 'red'}, registry=registry)
        tag = style_tag(registry=registry)
        assert tag.render() == f'<style>{registry.compile()}</style>'
        assert '&' not in tag.render()

    def test_style_tag_minified(self, registry):
        scope = styled('p', {'color': 'red'}, registry=registry).scope
        assert style_tag(registry=registry, minify=True).render() == \
            f'<style>.{scope}{{color:red;}}</style>'
