# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTags exceptions."""

from __future__ import annotations


class HtmlTagsError(Exception):
    """Base exception for HtmlTags errors."""

    pass


class MissingChildError(HtmlTagsError):
    """Raised when a builder is finalized before a required child is set."""

    pass


class InvalidChildError(HtmlTagsError):
    """Raised when a value that is not an Element is added as a child."""

    pass
