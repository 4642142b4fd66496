# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sample page used by the command line and as a usage reference."""

from __future__ import annotations

from .builders import BodyBuilder, DocumentBuilder
from .dsl import html
from .node import Document


def _page(doc: DocumentBuilder) -> None:
    doc.head(lambda head: head.title("my web page"))

    @doc.body
    def _(body: BodyBuilder) -> None:
        body.div(
            lambda div: div.p("welcome to my web site"),
            id="header",
            class_="main-header",
        )

        @body.div
        def _(div):
            div.p("this is the start of my site")
            div.p("this was rendered")


def sample_page() -> Document:
    """Return a small two-section page."""
    return html(_page)
