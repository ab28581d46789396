"""Complex values, the value source read by the view, and the plot window."""

import math
import re
from dataclasses import dataclass

from .errors import ValueParseError

# ---------------------------------------------------------------------------
# Window margins
# ---------------------------------------------------------------------------

# (min_factor, max_factor) applied to the coordinate along each axis
HORIZONTAL_MARGIN_FACTORS = (-1.0, 2.0)
VERTICAL_MARGIN_FACTORS = (-0.5, 1.2)


@dataclass(frozen=True)
class ComplexValue:
    """A snapshot of the complex number drawn in one render pass."""

    real: float
    imag: float

    @property
    def magnitude(self):
        return math.hypot(self.real, self.imag)

    @property
    def phase(self):
        """Argument in (-pi, pi]."""
        angle = math.atan2(self.imag, self.real)
        if angle == -math.pi:
            return math.pi
        return angle

    @classmethod
    def from_complex(cls, z):
        z = complex(z)
        return cls(z.real, z.imag)

    def __complex__(self):
        return complex(self.real, self.imag)


@dataclass(frozen=True)
class ViewRange:
    """Plot window in value coordinates."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def contains(self, x, y):
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


def range_bound(value, direction, factors):
    """Window edge along one axis for a coordinate, on the side of ``direction``.

    The edge on the side the point lies uses the larger factor so the point
    and its label stay inside; the opposite edge keeps a smaller margin past
    the origin.
    """
    min_factor, max_factor = factors
    if value == 0.0 or math.isnan(value) or math.isinf(value):
        return direction * max_factor
    factor = max_factor if direction * value >= 0.0 else min_factor
    return factor * value


class ComplexModel:
    """Source of the complex value currently displayed."""

    def __init__(self, value=0j):
        self._value = ComplexValue.from_complex(value)

    @property
    def real(self):
        return self._value.real

    @property
    def imag(self):
        return self._value.imag

    @property
    def phase(self):
        return self._value.phase

    def set_value(self, value):
        self._value = ComplexValue.from_complex(value)

    def snapshot(self):
        """Read real and imaginary parts once, for a consistent render pass."""
        return self._value

    def view_range(self):
        """Window fitted around the origin and the current value."""
        real, imag = self.real, self.imag
        return ViewRange(
            x_min=range_bound(real, -1.0, HORIZONTAL_MARGIN_FACTORS),
            x_max=range_bound(real, 1.0, HORIZONTAL_MARGIN_FACTORS),
            y_min=range_bound(imag, -1.0, VERTICAL_MARGIN_FACTORS),
            y_max=range_bound(imag, 1.0, VERTICAL_MARGIN_FACTORS),
        )

    def __repr__(self):
        return f"ComplexModel({complex(self._value)!r})"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_IMAGINARY_UNIT = re.compile(r"(?<=[0-9.+\-])i$|^i$")


def parse_complex(text):
    """Read ``3+4i``, ``3+4j``, ``-2.5-1i`` or ``5i`` as a ComplexValue."""
    s = str(text).strip().replace(" ", "")
    if not s:
        raise ValueParseError("empty complex value")
    s = _IMAGINARY_UNIT.sub("j", s)
    try:
        z = complex(s)
    except ValueError:
        raise ValueParseError(f"not a complex number: {text!r}") from None
    return ComplexValue.from_complex(z)
