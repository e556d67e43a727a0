"""Named diagram settings rendered as indented ``name: value`` lines."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

INDENTATION = "    "


def _format_float(value: float) -> str:
    """Format a float with the shortest digits, switching to exponent form
    when the decimal exponent is below -4 or at least 6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    number = Decimal(repr(value)).normalize()
    sign, digit_tuple, exponent = number.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    decimal_exponent = len(digits) + int(exponent) - 1
    prefix = "-" if sign else ""

    if decimal_exponent < -4 or decimal_exponent >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        exp_sign = "+" if decimal_exponent >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"
    return format(number, "f")


def _format_scalar(value: Any) -> str:
    """Render a single setting value the way it appears in diagram front matter."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


@dataclass
class DiagramProperty:
    """A named diagram setting."""

    name: str
    value: Any

    def format(self) -> str:
        """Return the setting as an indented line."""
        return f"{INDENTATION * 2}{self.name}: {_format_scalar(self.value)}\n"


class BoolProperty(DiagramProperty):
    """A boolean setting."""


class IntProperty(DiagramProperty):
    """An integer setting."""


class FloatProperty(DiagramProperty):
    """A floating-point setting."""


class StringProperty(DiagramProperty):
    """A text setting."""


class StringArrayProperty(DiagramProperty):
    """A list-of-strings setting, rendered as a quoted inline list."""

    def format(self) -> str:
        quoted = ", ".join(json.dumps(item, ensure_ascii=False) for item in self.value)
        return f"{INDENTATION * 2}{self.name}: [{quoted}]\n"