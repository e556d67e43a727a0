"""Common front matter, configuration and fencing for every diagram."""

from __future__ import annotations

import os
from typing import Generic, TypeVar

from mermaidkit.files import render_to_file
from mermaidkit.markdown import MarkdownFencer

T = TypeVar("T")

_SEPARATOR = "---\n"


class BaseDiagram(MarkdownFencer, Generic[T]):
    """A diagram with an optional title and a configuration block.

    Subclasses supply their body by overriding ``_body``.
    """

    def __init__(self, config: T, title: str = "") -> None:
        super().__init__()
        self.title = title
        self.config = config

    def set_title(self, title: str) -> BaseDiagram[T]:
        self.title = title
        return self

    def render(self, content: str) -> str:
        """Return front matter followed by ``content``, fenced if enabled."""
        parts = [_SEPARATOR]
        if self.title:
            parts.append(f"title: {self.title}\n")
        parts.append(str(self.config))
        parts.append(_SEPARATOR)
        parts.append(content)
        return self.wrap_with_fence("".join(parts))

    def _body(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render(self._body())

    def render_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the rendered diagram to ``path``."""
        render_to_file(path, str(self))