"""Configuration block shared by all diagram types."""

from __future__ import annotations

from dataclasses import dataclass

from mermaidkit.properties import INDENTATION
from mermaidkit.theme import Theme


@dataclass
class ConfigurationProperties(Theme):
    """Global diagram configuration: theme, size limits and font size."""

    max_text_size: int = 50000
    max_edges: int = 500
    font_size: int = 16

    def set_max_text_size(self, max_text_size: int) -> ConfigurationProperties:
        self.max_text_size = max_text_size
        return self

    def set_max_edges(self, max_edges: int) -> ConfigurationProperties:
        self.max_edges = max_edges
        return self

    def set_font_size(self, font_size: int) -> ConfigurationProperties:  # type: ignore[override]
        self.font_size = font_size
        return self

    def __str__(self) -> str:
        return "".join(
            [
                "config:\n",
                Theme.__str__(self),
                f"{INDENTATION}maxTextSize: {self.max_text_size}\n",
                f"{INDENTATION}maxEdges: {self.max_edges}\n",
                f"{INDENTATION}fontSize: {self.font_size}\n",
            ]
        )