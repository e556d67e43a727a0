"""Optional Markdown code-fence wrapping for rendered diagrams."""

from __future__ import annotations

_FENCE_START = "```mermaid\n"
_FENCE_END = "\n```\n"


class MarkdownFencer:
    """Holds whether output is wrapped in a ``mermaid`` code fence."""

    def __init__(self) -> None:
        self._markdown_fence = False

    def enable_markdown_fence(self) -> MarkdownFencer:
        """Turn fencing on; returns self for chaining."""
        self._markdown_fence = True
        return self

    def disable_markdown_fence(self) -> None:
        """Turn fencing off."""
        self._markdown_fence = False

    def markdown_fence_enabled(self) -> bool:
        """Return whether fencing is on."""
        return self._markdown_fence

    def wrap_with_fence(self, content: str) -> str:
        """Wrap ``content`` in a code fence if fencing is on."""
        if not self._markdown_fence:
            return content
        return f"{_FENCE_START}{content}{_FENCE_END}"