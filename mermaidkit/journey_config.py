"""User-journey-specific configuration settings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mermaidkit.config import ConfigurationProperties
from mermaidkit.properties import (
    INDENTATION,
    BoolProperty,
    DiagramProperty,
    IntProperty,
    StringArrayProperty,
    StringProperty,
)

_JOURNEY_HEADER = f"{INDENTATION}journey:\n"

PROPERTY_DIAGRAM_MARGIN_X = "diagramMarginX"
PROPERTY_DIAGRAM_MARGIN_Y = "diagramMarginY"
PROPERTY_LEFT_MARGIN = "leftMargin"
PROPERTY_WIDTH = "width"
PROPERTY_HEIGHT = "height"
PROPERTY_BOX_MARGIN = "boxMargin"
PROPERTY_BOX_TEXT_MARGIN = "boxTextMargin"
PROPERTY_NOTE_MARGIN = "noteMargin"
PROPERTY_MESSAGE_MARGIN = "messageMargin"
PROPERTY_MESSAGE_ALIGN = "messageAlign"
PROPERTY_BOTTOM_MARGIN_ADJ = "bottomMarginAdj"
PROPERTY_RIGHT_ANGLES = "rightAngles"
PROPERTY_TASK_FONT_SIZE = "taskFontSize"
PROPERTY_TASK_FONT_FAMILY = "taskFontFamily"
PROPERTY_TASK_MARGIN = "taskMargin"
PROPERTY_ACTIVATION_WIDTH = "activationWidth"
PROPERTY_TEXT_PLACEMENT = "textPlacement"
PROPERTY_ACTOR_COLOURS = "actorColours"
PROPERTY_SECTION_FILLS = "sectionFills"
PROPERTY_SECTION_COLOURS = "sectionColours"


@dataclass
class JourneyConfigurationProperties(ConfigurationProperties):
    """Global configuration plus settings specific to user journey diagrams."""

    properties: dict[str, DiagramProperty] = field(default_factory=dict)

    def _set(
        self, kind: type[DiagramProperty], name: str, value: object
    ) -> JourneyConfigurationProperties:
        self.properties[name] = kind(name, value)
        return self

    def set_diagram_margin_x(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_DIAGRAM_MARGIN_X, value)

    def set_diagram_margin_y(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_DIAGRAM_MARGIN_Y, value)

    def set_left_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_LEFT_MARGIN, value)

    def set_width(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_WIDTH, value)

    def set_height(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_HEIGHT, value)

    def set_box_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOX_MARGIN, value)

    def set_box_text_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOX_TEXT_MARGIN, value)

    def set_note_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_NOTE_MARGIN, value)

    def set_message_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_MESSAGE_MARGIN, value)

    def set_message_align(self, value: str) -> JourneyConfigurationProperties:
        return self._set(StringProperty, PROPERTY_MESSAGE_ALIGN, value)

    def set_bottom_margin_adj(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOTTOM_MARGIN_ADJ, value)

    def set_right_angles(self, value: bool) -> JourneyConfigurationProperties:
        return self._set(BoolProperty, PROPERTY_RIGHT_ANGLES, value)

    def set_task_font_size(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_TASK_FONT_SIZE, value)

    def set_task_font_family(self, value: str) -> JourneyConfigurationProperties:
        return self._set(StringProperty, PROPERTY_TASK_FONT_FAMILY, value)

    def set_task_margin(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_TASK_MARGIN, value)

    def set_activation_width(self, value: int) -> JourneyConfigurationProperties:
        return self._set(IntProperty, PROPERTY_ACTIVATION_WIDTH, value)

    def set_text_placement(self, value: str) -> JourneyConfigurationProperties:
        return self._set(StringProperty, PROPERTY_TEXT_PLACEMENT, value)

    def set_actor_colours(self, value: Iterable[str]) -> JourneyConfigurationProperties:
        return self._set(StringArrayProperty, PROPERTY_ACTOR_COLOURS, list(value))

    def set_section_fills(self, value: Iterable[str]) -> JourneyConfigurationProperties:
        return self._set(StringArrayProperty, PROPERTY_SECTION_FILLS, list(value))

    def set_section_colours(
        self, value: Iterable[str]
    ) -> JourneyConfigurationProperties:
        return self._set(StringArrayProperty, PROPERTY_SECTION_COLOURS, list(value))

    def __str__(self) -> str:
        text = ConfigurationProperties.__str__(self)
        if self.properties:
            text += _JOURNEY_HEADER + "".join(
                prop.format() for prop in self.properties.values()
            )
        return text