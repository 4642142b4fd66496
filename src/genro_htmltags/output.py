# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Writing rendered elements to files."""

from __future__ import annotations

import logging
from pathlib import Path

from .node import Element

logger = logging.getLogger(__name__)


def write_html(
    element: Element, filename: str | Path, output_dir: str | Path | None = None
) -> Path:
    """Render element and save it, followed by a newline.

    Args:
        element: Node to render, usually a Document.
        filename: Target file. Relative names are resolved in output_dir.
        output_dir: Directory to save to (default: current directory).
            Created if missing.

    Returns:
        Path of the written file.
    """
    output_dir = Path.cwd() if output_dir is None else Path(output_dir)
    output_path = output_dir / filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(f"{element}\n", encoding="utf-8")
    logger.info("Wrote <%s> to %s", element.tag, output_path)
    return output_path
