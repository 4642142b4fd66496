# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML builders - one builder per composite node.

Example:
    Building a page with nested scopes::

        def page(doc):
            doc.head(lambda head: head.title('my web page'))

            @doc.body
            def _(body):
                body.div(lambda div: div.p('welcome'), id='header')
                body.p('plain paragraph')

        builder = DocumentBuilder()
        page(builder)
        document = builder.build()

Title and Paragraph have no children and so have no builder; they are
created directly by ``HeadBuilder.title`` and ``p``.
"""

from __future__ import annotations

from ..exceptions import InvalidChildError
from ..node import Body, Division, Document, Element, Head, Paragraph, Title
from .base import BuilderBase
from .decorators import element


class FlowBuilder(BuilderBase):
    """Common base for builders holding an ordered list of children.

    Every append goes to the end, so rendering follows call order.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Element] = []

    @property
    def children(self) -> tuple[Element, ...]:
        """Snapshot of the children added so far."""
        return tuple(self._children)

    @element('DivBuilder')
    def div(self, node: Division) -> None:
        """Append a ``<div>``, configured by the init callable.

        Options: ``id`` and ``class_``, both optional.
        """
        self._children.append(node)

    def p(self, content: str) -> Paragraph:
        """Append a paragraph with raw text content."""
        node = Paragraph(content)
        self._children.append(node)
        return node

    def append(self, node: Element) -> Element:
        """Append an already built node.

        Raises:
            InvalidChildError: If node is not an Element.
        """
        if not isinstance(node, Element):
            raise InvalidChildError(
                f"{type(self).__name__} accepts only Element children, "
                f"got {type(node).__name__}"
            )
        self._children.append(node)
        return node


class DivBuilder(FlowBuilder):
    """Builder for ``<div>``; id and class are fixed when the scope opens."""

    def __init__(self, id: str | None = None, class_: str | None = None) -> None:
        super().__init__()
        self.id = id
        self.class_name = class_

    def _make_node(self) -> Division:
        return Division(tuple(self._children), id=self.id, class_name=self.class_name)


class BodyBuilder(FlowBuilder):
    """Builder for ``<body>``."""

    def _make_node(self) -> Body:
        return Body(tuple(self._children))


class HeadBuilder(BuilderBase):
    """Builder for ``<head>``. A title is required."""

    _required = ('title',)

    def __init__(self) -> None:
        super().__init__()
        self._title: Title | None = None

    def title(self, content: str) -> Title:
        """Set the title; a later call replaces it."""
        self._title = Title(content)
        return self._title

    def _make_node(self) -> Head:
        return Head(self._title)


class DocumentBuilder(BuilderBase):
    """Builder for the ``<html>`` root. Head and body are required."""

    _required = ('head', 'body')

    def __init__(self) -> None:
        super().__init__()
        self._head: Head | None = None
        self._body: Body | None = None

    @element(HeadBuilder)
    def head(self, node: Head) -> None:
        """Set the head; a later call replaces it."""
        self._head = node

    @element(BodyBuilder)
    def body(self, node: Body) -> None:
        """Set the body; a later call replaces it."""
        self._body = node

    def _make_node(self) -> Document:
        return Document(self._head, self._body)
