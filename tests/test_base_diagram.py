import pytest

from mermaidkit.base_diagram import BaseDiagram
from mermaidkit.config import ConfigurationProperties
from mermaidkit.theme import ThemeName

DEFAULT_CONFIG = (
    "config:\n"
    "    theme: default\n"
    "    maxTextSize: 50000\n"
    "    maxEdges: 500\n"
    "    fontSize: 16\n"
)


@pytest.fixture
def diagram():
    return BaseDiagram(ConfigurationProperties())


def test_new_base_diagram_keeps_config():
    config = ConfigurationProperties().set_font_size(14)
    built = BaseDiagram(config)
    assert built.config is config
    assert str(built.config) == str(ConfigurationProperties().set_font_size(14))
    assert built.title == ""
    assert built.markdown_fence_enabled() is False


def test_empty_diagram(diagram):
    assert diagram.render("test content") == f"---\n{DEFAULT_CONFIG}---\ntest content"


def test_diagram_with_configuration(diagram):
    diagram.config.set_font_size(14)
    diagram.config.set_font_family("Arial")
    rendered = diagram.render("test content")
    assert "fontSize: 14" in rendered
    assert "fontFamily: Arial" in rendered
    assert "test content" in rendered


def test_diagram_with_theme(diagram):
    diagram.config.set_theme("dark")
    rendered = diagram.render("test content")
    assert "config:" in rendered
    assert "theme: dark" in rendered


def test_diagram_with_title(diagram):
    diagram.set_title("Test Diagram")
    assert diagram.render("test content") == (
        f"---\ntitle: Test Diagram\n{DEFAULT_CONFIG}---\ntest content"
    )


def test_diagram_with_all_features(diagram):
    diagram.config.set_theme("dark")
    diagram.set_title("Test Diagram")
    diagram.config.set_font_size(14)
    diagram.config.set_font_family("Arial")
    rendered = diagram.render("test content")
    for expected in (
        "---",
        "title: Test Diagram",
        "config:",
        "theme: dark",
        "fontSize: 14",
        "fontFamily: Arial",
        "test content",
    ):
        assert expected in rendered
    assert rendered.index("title:") < rendered.index("config:") < rendered.index("test content")


@pytest.mark.parametrize("theme", [ThemeName.DEFAULT, ThemeName.DARK])
def test_set_theme(diagram, theme):
    diagram.config.set_theme(theme)
    assert diagram.config.name == theme


@pytest.mark.parametrize("title", ["", "Test Diagram", "Test: Diagram!"])
def test_set_title(diagram, title):
    assert diagram.set_title(title) is diagram
    assert diagram.title == title


def test_fenced_render(diagram):
    diagram.enable_markdown_fence()
    assert diagram.render("x") == f"```mermaid\n---\n{DEFAULT_CONFIG}---\nx\n```\n"


def test_render_to_file(diagram, tmp_path):
    target = tmp_path / "out" / "diagram.mmd"
    diagram.render_to_file(target)
    assert target.read_text() == f"---\n{DEFAULT_CONFIG}---\n"
    assert target.read_text() == str(diagram)