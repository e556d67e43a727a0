# mermaidkit

Build Mermaid timeline and user journey diagrams from Python objects and
render them as Mermaid source text. You can also wrap the text in a Markdown
code fence.

## Installation

```
pip install mermaidkit
```

The package has no runtime dependencies. To run the test suite:

```
pip install "mermaidkit[test]"
pytest
```

## Timelines

```python
from mermaidkit.timeline import TimelineDiagram
from mermaidkit.theme import ThemeName

diagram = TimelineDiagram()
diagram.enable_markdown_fence()
diagram.set_title("Simple Project Timeline")
diagram.config.set_theme(ThemeName.DARK)
diagram.config.set_font_family("Arial")

planning = diagram.add_section("Planning")
planning.add_event("2024-01", "Project kickoff").add_sub_event("Requirements gathering")
planning.add_event("2024-02", "Budget allocation")

diagram.config.set_padding(10.5).set_disable_multicolor(True)

print(diagram)
diagram.render_to_file("docs/timeline.md")
```

A `TimelineDiagram` holds `Section` objects, and each section holds `Event`
objects. The output lists them in the order they were added.
`Section.add_event(title, text)` returns the new event.
`Event.add_sub_event(text)` appends an untitled sub-event and returns the
event itself. An event with an empty title or empty text omits that line. A
section with an empty title omits its `section` line.

Timeline-specific settings live on `diagram.config`, a
`TimelineConfigurationProperties`. Its setters return the configuration, so
they can be chained. The setters are:

- `set_disable_multicolor`
- `set_diagram_margin_x` and `set_diagram_margin_y`
- `set_left_margin`
- `set_width` and `set_height`
- `set_padding`
- `set_box_margin` and `set_box_text_margin`
- `set_note_margin`
- `set_message_margin` and `set_message_align`
- `set_bottom_margin_adj`
- `set_right_angles`
- `set_task_font_size`, `set_task_font_family` and `set_task_margin`
- `set_activation_width`
- `set_text_placement`

Once at least one of them is set, the settings appear under an indented
`timeline` line in the configuration block.

## User journeys

```python
from mermaidkit.journey import JourneyDiagram

diagram = JourneyDiagram()
diagram.set_title("Shopping")

browse = diagram.add_section("Browse")
browse.add_task("Visit Homepage", 5)
browse.add_task("Read Reviews", 4, "Customer")

print(diagram)
```

prints

```
---
title: Shopping
config:
    theme: default
    maxTextSize: 50000
    maxEdges: 500
    fontSize: 16
---
journey
    section Browse
        Visit Homepage: 5
        Read Reviews: 4: Customer
```

`JourneySection.add_task(title, score, *participants)` returns the new `Task`.
Scores below 1 become 1 and scores above 5 become 5. Participants are
optional, and the output joins them with commas.

Journey-specific settings live on `diagram.config`, a
`JourneyConfigurationProperties`. It has the same kinds of setters as the
timeline configuration, without `set_disable_multicolor` and `set_padding`.
It also has three list settings:

- `set_actor_colours`
- `set_section_fills`
- `set_section_colours`

They are written as quoted inline lists under an indented `journey:` line.

## Shared building blocks

- `mermaidkit.config.ConfigurationProperties`: the common `config:` block.
  It holds the theme, `maxTextSize`, `maxEdges` and `fontSize`, with defaults
  of 50000, 500 and 16. The block is set through `set_max_text_size`,
  `set_max_edges` and `set_font_size`.
- `mermaidkit.theme.Theme` and `ThemeName`: the theme name and optional theme
  variables.
  - The theme names are `default`, `neutral`, `dark`, `forest` and `base`.
  - Theme variables are set with setters such as `set_dark_mode`,
    `set_background`, `set_primary_color` and `set_font_family`. They appear
    under `themeVariables:`.
  - On a diagram's configuration, `set_font_size` sets the `fontSize` entry of
    the `config:` block. It does not set a theme variable.
- `mermaidkit.markdown.MarkdownFencer` wraps output in a `mermaid` code fence
  when fencing is on. It has `enable_markdown_fence`, `disable_markdown_fence`,
  `markdown_fence_enabled` and `wrap_with_fence`.
- `mermaidkit.base_diagram.BaseDiagram` is the base class of both diagram
  types. It writes the front matter: a `---` line, the optional title, the
  configuration block and another `---` line. It has these methods:
  - `set_title`
  - `render(content)`
  - `render_to_file(path)`
- `mermaidkit.files.render_to_file(path, content)` writes text to a file as
  UTF-8 and creates parent directories. It raises `OSError` on failure.
- `mermaidkit.ids.DefaultIDGenerator` yields `"0"`, `"1"`, `"2"` and so on.
  It can start from another number, and `reset()` restarts it at zero.
  `IDGenerator` is its abstract base.
- `mermaidkit.properties` provides the typed settings `BoolProperty`,
  `IntProperty`, `FloatProperty`, `StringProperty` and `StringArrayProperty`.
  Each one formats itself as an indented `name: value` line.

## What this package does not do

- It builds only timeline and user journey diagrams. There are no other
  Mermaid diagram types.
- It produces Mermaid source text only. It does not parse Mermaid text, and
  it does not render diagrams to images.
- It has no command-line interface.