# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for HtmlTags - base class and the HTML scope builders."""

from .base import BuilderBase
from .decorators import element
from .html import BodyBuilder, DivBuilder, DocumentBuilder, FlowBuilder, HeadBuilder

__all__ = [
    'BuilderBase',
    'element',
    'FlowBuilder',
    'DocumentBuilder',
    'HeadBuilder',
    'BodyBuilder',
    'DivBuilder',
]
