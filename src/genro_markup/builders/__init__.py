# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders - tag catalogues on top of the markup nodes."""

from .base import BuilderBase
from .decorators import element
from .html import HtmlBuilder, html

__all__ = [
    'BuilderBase',
    'element',
    'HtmlBuilder',
    'html',
]
