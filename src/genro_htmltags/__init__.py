# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTags - Build HTML document trees with nested builder scopes.

A lightweight, zero-dependency DSL: describe the page with nested
callables, get back an immutable tree, render it with ``str()``.

Example:
    >>> from genro_htmltags import html
    >>> page = html(lambda doc: (
    ...     doc.head(lambda head: head.title('Hello')),
    ...     doc.body(lambda body: body.p('World')),
    ... ))
    >>> str(page.body)
    '<body>\\n<p>World</p>\\n</body>'
"""

__version__ = "0.1.0"

from .dsl import html
from .exceptions import HtmlTagsError, InvalidChildError, MissingChildError
from .node import Body, Division, Document, Element, Head, Paragraph, Title

__all__ = [
    # Entry point
    "html",
    # Nodes
    "Element",
    "Document",
    "Head",
    "Title",
    "Body",
    "Division",
    "Paragraph",
    # Exceptions
    "HtmlTagsError",
    "MissingChildError",
    "InvalidChildError",
]
