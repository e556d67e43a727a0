"""Theme selection and theme variables for diagram front matter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mermaidkit.properties import INDENTATION, _format_scalar

THEME_VAR_DARK_MODE = "darkMode"
THEME_VAR_BACKGROUND = "background"
THEME_VAR_FONT_FAMILY = "fontFamily"
THEME_VAR_FONT_SIZE = "fontSize"
THEME_VAR_PRIMARY_COLOR = "primaryColor"
THEME_VAR_PRIMARY_TEXT_COLOR = "primaryTextColor"
THEME_VAR_SECONDARY_COLOR = "secondaryColor"
THEME_VAR_PRIMARY_BORDER_COLOR = "primaryBorderColor"
THEME_VAR_TERTIARY_COLOR = "tertiaryColor"
THEME_VAR_NOTE_BKG_COLOR = "noteBkgColor"
THEME_VAR_NOTE_TEXT_COLOR = "noteTextColor"
THEME_VAR_NOTE_BORDER_COLOR = "noteBorderColor"
THEME_VAR_LINE_COLOR = "lineColor"
THEME_VAR_TEXT_COLOR = "textColor"
THEME_VAR_MAIN_BKG = "mainBkg"
THEME_VAR_ERROR_BKG_COLOR = "errorBkgColor"
THEME_VAR_ERROR_TEXT_COLOR = "errorTextColor"


class ThemeName(str, Enum):
    """Built-in theme names."""

    DEFAULT = "default"
    NEUTRAL = "neutral"
    DARK = "dark"
    FOREST = "forest"
    BASE = "base"

    def __str__(self) -> str:
        return self.value


@dataclass
class Theme:
    """A theme name plus optional theme variables."""

    name: ThemeName | str = ThemeName.DEFAULT
    variables: dict[str, Any] = field(default_factory=dict)

    def set_theme(self, name: ThemeName | str) -> Theme:
        self.name = name
        return self

    def _set_variable(self, key: str, value: Any) -> Theme:
        self.variables[key] = value
        return self

    def set_dark_mode(self, value: bool) -> Theme:
        return self._set_variable(THEME_VAR_DARK_MODE, value)

    def set_background(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_BACKGROUND, value)

    def set_font_family(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_FONT_FAMILY, value)

    def set_font_size(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_FONT_SIZE, value)

    def set_primary_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_PRIMARY_COLOR, value)

    def set_primary_text_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_PRIMARY_TEXT_COLOR, value)

    def set_secondary_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_SECONDARY_COLOR, value)

    def set_primary_border_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_PRIMARY_BORDER_COLOR, value)

    def set_tertiary_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_TERTIARY_COLOR, value)

    def set_note_bkg_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_NOTE_BKG_COLOR, value)

    def set_note_text_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_NOTE_TEXT_COLOR, value)

    def set_note_border_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_NOTE_BORDER_COLOR, value)

    def set_line_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_LINE_COLOR, value)

    def set_text_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_TEXT_COLOR, value)

    def set_main_bkg(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_MAIN_BKG, value)

    def set_error_bkg_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_ERROR_BKG_COLOR, value)

    def set_error_text_color(self, value: str) -> Theme:
        return self._set_variable(THEME_VAR_ERROR_TEXT_COLOR, value)

    def __str__(self) -> str:
        lines = [f"{INDENTATION}theme: {self.name}\n"]
        if self.variables:
            lines.append(f"{INDENTATION}themeVariables:\n")
            lines.extend(
                f"{INDENTATION * 2}{key}: {_format_scalar(value)}\n"
                for key, value in self.variables.items()
            )
        return "".join(lines)