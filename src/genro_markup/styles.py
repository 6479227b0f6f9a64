# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Scoped styles - components register CSS rules and get a scope class.

Rules are nested dicts: string values are properties, dict values are nested
selectors. ``&`` stands for the enclosing selector; selectors without ``&``
become descendants; ``@media`` keys wrap their rules in a media block.

Example:
    >>> Button = styled('button', {
    ...     'padding': '0.5rem 1rem',
    ...     '&:hover': {'background': '#0056b3'},
    ... })
    >>> Button(['Click']).render()         # '<button class="c-3f2a...">Click</button>'
    >>> style_tag().render()               # '<style>.c-3f2a... { padding: ...; }...</style>'
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from typing import Any, Callable, Mapping

from .element import ElementNode
from .safe import SafeValue


logger = logging.getLogger(__name__)

Rules = Mapping[str, Any]


class StyleRegistry:
    """Collects scoped CSS rules and compiles them into one stylesheet.

    Identical keys share one scope class, so registering the same component
    twice emits its rules once.
    """

    __slots__ = ('_styles', '_scope_map')

    def __init__(self) -> None:
        self._styles: dict[str, Rules] = {}
        self._scope_map: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"StyleRegistry({len(self._styles)} scopes)"

    def register(self, key: str, rules: Rules) -> str:
        """Register rules under key and return the scope class name.

        Args:
            key: Identifier of the rule set, typically a content hash.
            rules: Nested CSS rules.

        Returns:
            The scope class, 'c-' followed by the first 8 characters of key.
        """
        if key in self._scope_map:
            return self._scope_map[key]

        scope = f"c-{key[:8]}"
        self._scope_map[key] = scope
        self._styles[scope] = rules
        logger.debug("Registered style scope %s", scope)
        return scope

    def compile(self, minify: bool = False) -> str:
        """Compile every registered rule set into CSS text."""
        css = ''.join(
            self._compile_rules(rules, f".{scope}") for scope, rules in self._styles.items()
        )
        return self._minify(css) if minify else css

    def _compile_rules(self, rules: Rules, context: str) -> str:
        output = ''
        props = []
        media_queries = []

        for selector, value in rules.items():
            if isinstance(value, Mapping):
                if selector.startswith('@media'):
                    # Emitted after the rules of this context
                    media_queries.append((selector, value))
                else:
                    output += self._compile_rules(value, self._resolve_selector(selector, context))
            else:
                props.append(f"{selector}: {value}")

        if props:
            output = f"{context} {{ {'; '.join(props)}; }}\n" + output

        for query, media_rules in media_queries:
            output += f"{query} {{\n{self._compile_rules(media_rules, context)}}}\n"

        return output

    @staticmethod
    def _resolve_selector(selector: str, context: str) -> str:
        if '&' in selector:
            return selector.replace('&', context)
        return f"{context} {selector}"

    @staticmethod
    def _minify(css: str) -> str:
        css = re.sub(r'/\*[^*]*\*+([^/][^*]*\*+)*/', '', css)
        css = re.sub(r'\s+', ' ', css)
        css = re.sub(r'\s*([{}:;,])\s*', r'\1', css)
        return css.strip()

    def reset(self) -> None:
        """Forget every registered rule set."""
        self._styles.clear()
        self._scope_map.clear()

    def scopes(self) -> list[str]:
        return list(self._styles)

    def rules_for(self, scope: str) -> Rules | None:
        return self._styles.get(scope)


default_registry = StyleRegistry()


def _rules_key(tag: str, rules: Rules) -> str:
    payload = tag + json.dumps(rules, sort_keys=True, default=str)
    return hashlib.md5(payload.encode('utf-8')).hexdigest()


def styled(
    tag: str,
    rules: Rules,
    registry: StyleRegistry | None = None,
    builder: Any | None = None,
) -> Callable[..., ElementNode]:
    """Return a factory creating ``tag`` elements carrying a scope class.

    Args:
        tag: Tag name of the created elements.
        rules: Nested CSS rules registered for the scope.
        registry: Registry to use (default: the module registry).
        builder: Builder creating the elements (default: the html builder).

    Returns:
        A function taking the usual tag arguments ``(first, children, **attrs)``.
    """
    if builder is None:
        # Import here to avoid circular dependency
        from .builders.html import html as builder
    registry = registry if registry is not None else default_registry
    scope = registry.register(_rules_key(tag, rules), rules)

    def factory(first: Any = None, children: Any = None, **attrs: Any) -> ElementNode:
        return builder.tag(tag, first, children, **attrs).add_class(scope)

    factory.scope = scope
    return factory


def style_tag(
    registry: StyleRegistry | None = None,
    minify: bool = False,
    builder: Any | None = None,
) -> ElementNode:
    """A ``<style>`` element holding the compiled CSS of registry."""
    if builder is None:
        # Import here to avoid circular dependency
        from .builders.html import html as builder
    registry = registry if registry is not None else default_registry
    return builder.tag('style', [SafeValue(registry.compile(minify))])
