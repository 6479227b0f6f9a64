# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup exceptions."""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for markup tree errors."""

    pass


class StructuralViolation(MarkupError):
    """Raised when an operation would break the tree's structural invariants.

    Examples: adding children to a void element, attaching children directly
    to an IterationNode, detaching a node that has no parent.
    """

    pass


class InvalidAttributeValue(MarkupError, TypeError):
    """Raised when an attribute is given a value of a kind it cannot render."""

    pass


class ResolutionAmbiguity(MarkupError, TypeError):
    """Raised in strict mode when a child value cannot be classified."""

    pass
