"""Timeline-specific configuration settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from mermaidkit.config import ConfigurationProperties
from mermaidkit.properties import (
    INDENTATION,
    BoolProperty,
    DiagramProperty,
    FloatProperty,
    IntProperty,
    StringProperty,
)

_TIMELINE_HEADER = f"{INDENTATION}timeline\n"

PROPERTY_DISABLE_MULTICOLOR = "disableMulticolor"
PROPERTY_DIAGRAM_MARGIN_X = "diagramMarginX"
PROPERTY_DIAGRAM_MARGIN_Y = "diagramMarginY"
PROPERTY_LEFT_MARGIN = "leftMargin"
PROPERTY_WIDTH = "width"
PROPERTY_HEIGHT = "height"
PROPERTY_PADDING = "padding"
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


@dataclass
class TimelineConfigurationProperties(ConfigurationProperties):
    """Global configuration plus settings specific to timeline diagrams."""

    properties: dict[str, DiagramProperty] = field(default_factory=dict)

    def _set(
        self, kind: type[DiagramProperty], name: str, value: object
    ) -> TimelineConfigurationProperties:
        self.properties[name] = kind(name, value)
        return self

    def set_disable_multicolor(self, value: bool) -> TimelineConfigurationProperties:
        return self._set(BoolProperty, PROPERTY_DISABLE_MULTICOLOR, value)

    def set_diagram_margin_x(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_DIAGRAM_MARGIN_X, value)

    def set_diagram_margin_y(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_DIAGRAM_MARGIN_Y, value)

    def set_left_margin(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_LEFT_MARGIN, value)

    def set_width(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_WIDTH, value)

    def set_height(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_HEIGHT, value)

    def set_padding(self, value: float) -> TimelineConfigurationProperties:
        return self._set(FloatProperty, PROPERTY_PADDING, float(value))

    def set_box_margin(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOX_MARGIN, value)

    def set_box_text_margin(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOX_TEXT_MARGIN, value)

    def set_note_margin(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_NOTE_MARGIN, value)

    def set_message_margin(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_MESSAGE_MARGIN, value)

    def set_message_align(self, value: str) -> TimelineConfigurationProperties:
        return self._set(StringProperty, PROPERTY_MESSAGE_ALIGN, value)

    def set_bottom_margin_adj(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_BOTTOM_MARGIN_ADJ, value)

    def set_right_angles(self, value: bool) -> TimelineConfigurationProperties:
        return self._set(BoolProperty, PROPERTY_RIGHT_ANGLES, value)

    def set_task_font_size(self, value: int) -> TimelineConfigurationProperties:
        return self._set(IntProperty, PROPERTY_TASK_FONT_SIZE, value)

    def set_task_font_family(self, value: str) -> TimelineConfigurationProperties:
        return self._set(StringProperty, PROPERTY_TASK_FONT_FAMILY, value)

    def set_task_margin(self, value: float) -> TimelineConfigurationProperties:
        return self._set(FloatProperty, PROPERTY_TASK_MARGIN, float(value))

    def set_activation_width(self, value: float) -> TimelineConfigurationProperties:
        return self._set(FloatProperty, PROPERTY_ACTIVATION_WIDTH, float(value))

    def set_text_placement(self, value: str) -> TimelineConfigurationProperties:
        return self._set(StringProperty, PROPERTY_TEXT_PLACEMENT, value)

    def __str__(self) -> str:
        text = ConfigurationProperties.__str__(self)
        if self.properties:
            text += _TIMELINE_HEADER + "".join(
                prop.format() for prop in self.properties.values()
            )
        return text