"""User journey diagrams: sections of scored tasks with participants."""

from __future__ import annotations

from dataclasses import dataclass, field

from mermaidkit.base_diagram import BaseDiagram
from mermaidkit.journey_config import JourneyConfigurationProperties
from mermaidkit.properties import INDENTATION

_DIAGRAM_TYPE = "journey\n"
_MIN_SCORE = 1
_MAX_SCORE = 5


@dataclass
class Task:
    """A journey task with a score from 1 to 5 and optional participants."""

    title: str
    score: int
    participants: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        line = f"{INDENTATION * 2}{self.title}: {self.score}"
        if self.participants:
            line += ": " + ",".join(self.participants)
        return line + "\n"


@dataclass
class JourneySection:
    """A titled group of journey tasks."""

    title: str = ""
    tasks: list[Task] = field(default_factory=list)

    def add_task(self, title: str, score: int, *args: str) -> Task:
        """Append a task; the score is clamped to 1..5 and ``args`` are participants."""
        clamped = min(max(score, _MIN_SCORE), _MAX_SCORE)
        task = Task(title, clamped, list(args))
        self.tasks.append(task)
        return task

    def __str__(self) -> str:
        header = f"{INDENTATION}section {self.title}\n"
        return header + "".join(str(task) for task in self.tasks)


class JourneyDiagram(BaseDiagram[JourneyConfigurationProperties]):
    """A user journey diagram made of sections."""

    def __init__(self, title: str = "") -> None:
        super().__init__(JourneyConfigurationProperties(), title)
        self.sections: list[JourneySection] = []

    def add_section(self, title: str) -> JourneySection:
        """Create a section, append it and return it."""
        section = JourneySection(title)
        self.sections.append(section)
        return section

    def _body(self) -> str:
        return _DIAGRAM_TYPE + "".join(str(section) for section in self.sections)