# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderBase - Abstract base class for HtmlTags builders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..exceptions import MissingChildError

if TYPE_CHECKING:
    from ..node import Element

logger = logging.getLogger(__name__)


class BuilderBase(ABC):
    """Abstract base class for HtmlTags builders.

    A builder is a transient, mutable accumulator for one composite node.
    It is open while the caller configures it and becomes finalized on
    the first successful ``build()``, which returns an immutable node.

    Scoped openers are defined with the @element decorator:

        class BodyBuilder(BuilderBase):
            @element('DivBuilder')
            def div(self, node):
                self._children.append(node)

    The class automatically builds an ``_element_tags`` set with the names
    of its openers via __init_subclass__.

    Required single children are listed in ``_required``. Each name refers
    to a ``_<name>`` attribute that must not be None at build time.
    """

    # Class-level set of scoped opener names
    _element_tags: frozenset[str] = frozenset()

    # Names of required single children
    _required: tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _element_tags set from @element decorated methods."""
        super().__init_subclass__(**kwargs)

        tags: set[str] = set()
        for base in cls.__mro__[1:]:
            if '_element_tags' in base.__dict__:
                tags.update(base._element_tags)
                break

        for name, method in cls.__dict__.items():
            if name.startswith('_') or not callable(method):
                continue
            if hasattr(method, '_element_builder'):
                tags.add(name)

        cls._element_tags = frozenset(tags)

    def __init__(self) -> None:
        self._finalized = False

    def __getattr__(self, name: str) -> Any:
        """Report unsupported elements with the list of supported ones."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        supported = ', '.join(self.elements()) or 'none'
        raise AttributeError(
            f"'{type(self).__name__}' has no element '{name}'. "
            f"Supported elements: {supported}"
        )

    @classmethod
    def elements(cls) -> tuple[str, ...]:
        """Names of the scoped openers this builder supports, sorted."""
        return tuple(sorted(cls._element_tags))

    @property
    def is_finalized(self) -> bool:
        """True once build() has produced a node."""
        return self._finalized

    def missing(self) -> list[str]:
        """Names of required children not set yet."""
        return [name for name in self._required if getattr(self, f'_{name}') is None]

    def build(self) -> Element:
        """Finalize the accumulated state into an immutable node.

        Raises:
            MissingChildError: If a required child has not been set.
        """
        missing = self.missing()
        if missing:
            raise MissingChildError(
                f"{type(self).__name__} cannot be built: "
                f"missing required {', '.join(repr(m) for m in missing)}"
            )

        node = self._make_node()
        self._finalized = True
        logger.debug("%s finalized into <%s>", type(self).__name__, node.tag)
        return node

    @abstractmethod
    def _make_node(self) -> Element:
        """Create the node from the accumulated state."""
