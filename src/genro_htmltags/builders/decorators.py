# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators for builder methods that open a nested scope."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from ..node import Element
    from .base import BuilderBase


def _resolve_builder(spec: type[BuilderBase] | str, func: Callable) -> type[BuilderBase]:
    """Return the builder class for spec.

    A string is looked up in the decorated function's module globals, which
    lets a builder open a scope of its own class (``DivBuilder.div``).

    Raises:
        NameError: If a string spec names nothing in that module.
    """
    if not isinstance(spec, str):
        return spec
    try:
        return func.__globals__[spec]
    except KeyError:
        raise NameError(
            f"Builder '{spec}' for element '{func.__name__}' is not defined"
        ) from None


def element(builder: type[BuilderBase] | str) -> Callable:
    """Decorator turning a builder method into a scoped element opener.

    The decorated method receives the finalized child node and attaches it
    to its own accumulator. The wrapper does the scoping:

    1. creates a fresh ``builder`` with the keyword options of the call,
    2. runs the caller's ``init(child_builder)`` on it, if given,
    3. finalizes it with ``build()``,
    4. hands the node to the decorated method and returns it.

    ``init`` is the only positional argument, so an opener also works as a
    decorator.

    Args:
        builder: Builder class for the child scope, or its name in the
            decorated method's module.

    Example:
        >>> class BodyBuilder(BuilderBase):
        ...     @element('DivBuilder')
        ...     def div(self, node):
        ...         self._children.append(node)
        ...
        >>> body.div(lambda d: d.p('hi'), id='main')
        >>> @body.div
        ... def _(d):
        ...     d.p('hello')
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(
            self: BuilderBase,
            init: Callable[[Any], None] | None = None,
            /,
            **options: Any,
        ) -> Element:
            child = _resolve_builder(builder, func)(**options)
            if init is not None:
                init(child)
            node = child.build()
            func(self, node)
            return node

        wrapper._element_builder = builder
        return wrapper

    return decorator
