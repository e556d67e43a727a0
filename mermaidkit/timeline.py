"""Timeline diagrams: sections holding events with optional sub-events."""

from __future__ import annotations

from dataclasses import dataclass, field

from mermaidkit.base_diagram import BaseDiagram
from mermaidkit.properties import INDENTATION
from mermaidkit.timeline_config import TimelineConfigurationProperties

_DIAGRAM_TYPE = "timeline\n"


@dataclass
class Event:
    """A timeline event: an optional period title, text and sub-events."""

    title: str = ""
    text: str = ""
    sub_events: list[Event] = field(default_factory=list)

    def add_sub_event(self, text: str) -> Event:
        """Append an untitled sub-event; returns self for chaining."""
        self.sub_events.append(Event("", text))
        return self

    def __str__(self) -> str:
        parts = []
        if self.title:
            parts.append(f"{INDENTATION}{self.title}\n")
        if self.text:
            parts.append(f"{INDENTATION}: {self.text}\n")
        parts.extend(str(sub) for sub in self.sub_events)
        return "".join(parts)


@dataclass
class Section:
    """A titled group of timeline events."""

    title: str = ""
    events: list[Event] = field(default_factory=list)

    def add_event(self, title: str, text: str) -> Event:
        """Create an event, append it and return it."""
        event = Event(title, text)
        self.events.append(event)
        return event

    def __str__(self) -> str:
        header = f"{INDENTATION}section {self.title}\n" if self.title else ""
        return header + "".join(str(event) for event in self.events)


class TimelineDiagram(BaseDiagram[TimelineConfigurationProperties]):
    """A timeline diagram made of sections."""

    def __init__(self, title: str = "") -> None:
        super().__init__(TimelineConfigurationProperties(), title)
        self.sections: list[Section] = []

    def add_section(self, title: str) -> Section:
        """Create a section, append it and return it."""
        section = Section(title)
        self.sections.append(section)
        return section

    def _body(self) -> str:
        return _DIAGRAM_TYPE + "".join(str(section) for section in self.sections)