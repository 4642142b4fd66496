# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTags node classes.

A finished document is a tree of frozen Element variants. Every variant
renders itself through ``str()``; rendering is a pure function of the
node's fields and its children's rendering.

Example:
    >>> page = Document(
    ...     head=Head(Title('my web page')),
    ...     body=Body((Division((Paragraph('hi'),), id='main'),)),
    ... )
    >>> print(page)
    <html>
    <head>
    <title>my web page</title>
    </head>
    <body>
    <div id="main"><p>hi</p></div>
    </body>
    </html>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator


class Element:
    """Base class of every node in the tree.

    The variant set is closed: Document, Head, Title, Body, Division and
    Paragraph. Text is emitted verbatim, without escaping.
    """

    __slots__ = ()

    tag: ClassVar[str] = ''

    def iter_children(self) -> Iterator[Element]:
        """Yield direct children in document order."""
        return iter(())

    def walk(self) -> Iterator[Element]:
        """Yield this node and all its descendants, depth-first.

        Example:
            >>> [n.tag for n in Head(Title('x')).walk()]
            ['head', 'title']
        """
        yield self
        for child in self.iter_children():
            yield from child.walk()


@dataclass(frozen=True)
class Title(Element):
    """Leaf holding the document title."""

    tag: ClassVar[str] = 'title'

    content: str

    def __str__(self) -> str:
        return f"<title>{self.content}</title>"


@dataclass(frozen=True)
class Paragraph(Element):
    """Leaf holding a paragraph of raw text."""

    tag: ClassVar[str] = 'p'

    content: str

    def __str__(self) -> str:
        return f"<p>{self.content}</p>"


@dataclass(frozen=True)
class Head(Element):
    """Document head. Always carries exactly one title."""

    tag: ClassVar[str] = 'head'

    title: Title

    def iter_children(self) -> Iterator[Element]:
        yield self.title

    def __str__(self) -> str:
        return f"<head>\n{self.title}\n</head>"


@dataclass(frozen=True)
class Body(Element):
    """Document body with an ordered sequence of children.

    The opening tag, each child and the closing tag go on separate lines.
    This layout is deliberate and matches the expected page output; the
    wrapping tags are not inlined the way ``<div>`` renders.
    """

    tag: ClassVar[str] = 'body'

    children: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'children', tuple(self.children))

    def iter_children(self) -> Iterator[Element]:
        return iter(self.children)

    def __str__(self) -> str:
        lines = ["<body>"]
        lines.extend(str(child) for child in self.children)
        lines.append("</body>")
        return "\n".join(lines)


@dataclass(frozen=True)
class Division(Element):
    """A ``<div>`` with ordered children and optional id/class attributes.

    Children are joined by newlines inside the tags. An attribute is
    rendered only when its field is set, id first.
    """

    tag: ClassVar[str] = 'div'

    children: tuple[Element, ...] = ()
    id: str | None = None
    class_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'children', tuple(self.children))

    def iter_children(self) -> Iterator[Element]:
        return iter(self.children)

    def __str__(self) -> str:
        id_attr = f' id="{self.id}"' if self.id is not None else ""
        class_attr = f' class="{self.class_name}"' if self.class_name is not None else ""
        inner = "\n".join(str(child) for child in self.children)
        return f"<div{id_attr}{class_attr}>{inner}</div>"


@dataclass(frozen=True)
class Document(Element):
    """Root ``<html>`` node with exactly one head and one body."""

    tag: ClassVar[str] = 'html'

    head: Head
    body: Body

    def iter_children(self) -> Iterator[Element]:
        yield self.head
        yield self.body

    def __str__(self) -> str:
        return f"<html>\n{self.head}\n{self.body}\n</html>"
