import pytest

from mermaidkit.properties import (
    BoolProperty,
    FloatProperty,
    IntProperty,
    StringProperty,
)
from mermaidkit.timeline_config import TimelineConfigurationProperties

DEFAULT_BASE = (
    "config:\n"
    "    theme: default\n"
    "    maxTextSize: 50000\n"
    "    maxEdges: 500\n"
    "    fontSize: 16\n"
)


def test_new_has_no_properties():
    config = TimelineConfigurationProperties()
    assert config.properties == {}


def test_empty_configuration_has_no_timeline_block():
    config = TimelineConfigurationProperties()
    assert str(config) == DEFAULT_BASE
    assert "timeline" not in str(config)


def test_single_property_exact_output():
    config = TimelineConfigurationProperties()
    config.set_padding(10.5)
    assert str(config) == DEFAULT_BASE + "    timeline\n        padding: 10.5\n"


def test_multiple_properties():
    config = TimelineConfigurationProperties()
    config.set_padding(10.5)
    config.set_disable_multicolor(True)
    config.set_task_font_family("Arial")
    out = str(config)
    for want in (
        "timeline",
        "padding: 10.5",
        "disableMulticolor: true",
        "taskFontFamily: Arial",
    ):
        assert want in out


def test_base_properties_with_timeline_properties():
    config = TimelineConfigurationProperties()
    config.set_font_size(12)
    config.set_padding(10.5)
    out = str(config)
    assert "fontSize: 12" in out
    assert "timeline" in out
    assert "padding: 10.5" in out
    assert out.index("fontSize: 12") < out.index("    timeline\n")


@pytest.mark.parametrize(
    "setter, name, value, kind",
    [
        ("set_disable_multicolor", "disableMulticolor", True, BoolProperty),
        ("set_diagram_margin_x", "diagramMarginX", 20, IntProperty),
        ("set_diagram_margin_y", "diagramMarginY", 30, IntProperty),
        ("set_left_margin", "leftMargin", 15, IntProperty),
        ("set_width", "width", 800, IntProperty),
        ("set_height", "height", 600, IntProperty),
        ("set_padding", "padding", 10.5, FloatProperty),
        ("set_box_margin", "boxMargin", 10, IntProperty),
        ("set_box_text_margin", "boxTextMargin", 5, IntProperty),
        ("set_note_margin", "noteMargin", 8, IntProperty),
        ("set_message_margin", "messageMargin", 12, IntProperty),
        ("set_message_align", "messageAlign", "left", StringProperty),
        ("set_bottom_margin_adj", "bottomMarginAdj", 25, IntProperty),
        ("set_right_angles", "rightAngles", True, BoolProperty),
        ("set_task_font_size", "taskFontSize", 14, IntProperty),
        ("set_task_font_family", "taskFontFamily", "Arial", StringProperty),
        ("set_task_margin", "taskMargin", 5.5, FloatProperty),
        ("set_activation_width", "activationWidth", 2.5, FloatProperty),
        ("set_text_placement", "textPlacement", "top", StringProperty),
    ],
)
def test_setters(setter, name, value, kind):
    config = TimelineConfigurationProperties()
    result = getattr(config, setter)(value)
    assert result is config
    prop = config.properties[name]
    assert isinstance(prop, kind)
    assert prop.name == name
    assert prop.value == value


def test_setter_overwrites_previous_value():
    config = TimelineConfigurationProperties()
    config.set_width(100).set_width(200)
    assert list(config.properties) == ["width"]
    assert config.properties["width"].value == 200
    assert "        width: 200\n" in str(config)