"""Writing rendered diagrams to disk."""

from __future__ import annotations

import os
from pathlib import Path


def render_to_file(path: str | os.PathLike[str], content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories as needed.

    Raises OSError if the directory cannot be created or the file written.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content.encode("utf-8"))