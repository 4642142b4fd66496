# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""The ``html`` entry point of the DSL."""

from __future__ import annotations

from typing import Callable

from .builders import DocumentBuilder
from .node import Document


def html(init: Callable[[DocumentBuilder], None]) -> Document:
    """Build a complete document.

    Opens a DocumentBuilder, runs ``init`` against it and returns the
    finalized Document. Every other scope is opened from inside ``init``.
    Usable as a decorator, in which case the decorated name is bound to
    the Document.

    Raises:
        MissingChildError: If ``init`` leaves the head or body unset.

    Example:
        >>> @html
        ... def page(doc):
        ...     doc.head(lambda head: head.title('my web page'))
        ...     doc.body(lambda body: body.p('hello'))
        >>> print(page.head)
        <head>
        <title>my web page</title>
        </head>
    """
    builder = DocumentBuilder()
    init(builder)
    return builder.build()
