# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""End-to-end usage scenarios and SafeValue behaviour."""

import pytest

from genro_markup import (
    IdentifierGenerator,
    MarkupError,
    Ref,
    SafeValue,
    StructuralViolation,
    html,
    mark_safe,
)


class User:
    def __init__(self, name, admin=False):
        self.name = name
        self.admin = admin


class TestSafeValue:
    """Tests for SafeValue and mark_safe."""

    def test_render_verbatim(self):
        assert SafeValue('<b>bold</b>').render() == '<b>bold</b>'
        assert str(SafeValue('<i>')) == '<i>'

    def test_immutable(self):
        value = SafeValue('x')
        with pytest.raises(AttributeError):
            value._text = 'y'

    def test_value_equality(self):
        assert SafeValue('a') == SafeValue('a')
        assert SafeValue('a') != SafeValue('b')
        assert SafeValue('a') != 'a'
        assert hash(SafeValue('a')) == hash(SafeValue('a'))

    def test_concatenation(self):
        assert SafeValue('<a>') + SafeValue('</a>') == SafeValue('<a></a>')

    def test_mark_safe_is_idempotent(self):
        value = SafeValue('x')
        assert mark_safe(value) is value
        assert mark_safe(3) == SafeValue('3')

    def test_html_protocol_objects_are_safe(self):
        class Markup:
            def __html__(self):
                return '<em>ok</em>'

        assert html.p([Markup()]).render() == '<p><em>ok</em></p>'


class TestPageScenarios:
    """Whole-page rendering."""

    def test_user_list_page(self):
        users = [User('Ada', admin=True), User('<Bob>')]
        page = html.document({'lang': 'en'}, [
            html.head([html.meta(charset='utf-8'), html.title(['Users'])]),
            html.body([
                html.h1(['Users']),
                html.ul({'class': 'users'}, [
                    html.each(users, lambda user, key: html.li(
                        {'data-index': key},
                        [user.name, html.if_(user.admin, html.em(['admin']))],
                    )),
                ]),
            ]),
        ])
        assert page.render() == (
            '<!DOCTYPE html>\n'
            '<html lang="en">'
            '<head><meta charset="utf-8"> <title>Users</title></head> '
            '<body><h1>Users</h1> <ul class="users">'
            '<li data-index="0">Ada <em>admin</em></li> '
            '<li data-index="1">&lt;Bob&gt;</li>'
            '</ul></body>'
            '</html>'
        )

    def test_empty_state(self):
        users = []
        body = html.div([
            html.if_(lambda: bool(users), html.ul([html.each_replayable(users)]))
            .else_(html.p(['No users yet'])),
        ])
        assert body.render() == '<div><p>No users yet</p></div>'
        users.append('Ada')
        assert body.render() == '<div><ul></ul></div>'

    def test_form_with_refs(self):
        gen = IdentifierGenerator(seed=35)
        email = Ref(generator=gen)
        form = html.form({'method': 'post'}, [
            html.label({'for': email}, ['Email']),
            html.input(id=email, type='email', required=True),
            html.button(type='submit')('Send'),
        ])
        assert form.render() == (
            '<form method="post">'
            '<label for="_10">Email</label> '
            '<input id="_10" type="email" required> '
            '<button type="submit">Send</button>'
            '</form>'
        )

    def test_layout_with_slot(self):
        content = html.slot(html.p(['Default content']))
        layout = html.main([html.header(['Site']), content])
        assert layout.render() == '<main><header>Site</header> <p>Default content</p></main>'
        content.set_render_callback(lambda: html.p(['Page']))
        assert layout.render() == '<main><header>Site</header> <p>Page</p></main>'

    def test_xss_payloads_are_neutralised(self):
        payload = '"><script>alert(1)</script>'
        node = html.a({'href': payload, 'title': payload}, [payload])
        rendered = node.render()
        assert '<script>' not in rendered
        assert rendered.count('"') == 4


class TestErrors:
    """Errors share a common base."""

    def test_structural_violation_is_markup_error(self):
        with pytest.raises(MarkupError):
            html.br()('child')

    def test_same_element_in_two_trees_moves(self):
        shared = html.span(['x'])
        first = html.div([shared])
        second = html.div([shared])
        assert first.render() == '<div></div>'
        assert second.render() == '<div><span>x</span></div>'

    def test_cycle_raises(self):
        outer = html.div()
        inner = html.div()
        outer.attach(inner)
        with pytest.raises(StructuralViolation):
            inner.attach(outer)
