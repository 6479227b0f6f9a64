# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - HTML generation from trees of typed nodes.

A lightweight, zero-dependency library: build a tree of elements,
conditionals, iterations, slots and text, then render it to an HTML string.
Text is escaped unless explicitly marked safe.
"""

__version__ = "0.1.0"

from .builders import BuilderBase, HtmlBuilder, element, html
from .conditional import ConditionalNode, ConditionalState
from .element import (
    RAW_ATTRIBUTES,
    DocumentNode,
    ElementNode,
    make_document,
    make_element,
)
from .exceptions import (
    InvalidAttributeValue,
    MarkupError,
    ResolutionAmbiguity,
    StructuralViolation,
)
from .ident import IdentifierGenerator, Ref, new_id
from .iteration import IterationNode, ReplayableIterationNode
from .node import Node
from .raw import BufferedNode, RawNode
from .resolver import ChildKind, classify, escape, resolve
from .safe import SafeValue, mark_safe
from .schema import DEFAULT_SCHEMA, HtmlSchema
from .slot import SlotNode
from .styles import StyleRegistry, style_tag, styled

__all__ = [
    # Nodes
    "Node",
    "ElementNode",
    "DocumentNode",
    "IterationNode",
    "ReplayableIterationNode",
    "ConditionalNode",
    "ConditionalState",
    "SlotNode",
    "RawNode",
    "BufferedNode",
    # Construction
    "make_element",
    "make_document",
    "RAW_ATTRIBUTES",
    # Values
    "SafeValue",
    "mark_safe",
    "ChildKind",
    "classify",
    "escape",
    "resolve",
    # Identifiers
    "IdentifierGenerator",
    "Ref",
    "new_id",
    # Configuration
    "HtmlSchema",
    "DEFAULT_SCHEMA",
    # Builders
    "BuilderBase",
    "HtmlBuilder",
    "element",
    "html",
    # Styles
    "StyleRegistry",
    "styled",
    "style_tag",
    # Exceptions
    "MarkupError",
    "StructuralViolation",
    "InvalidAttributeValue",
    "ResolutionAmbiguity",
]
