"""Geometry of the complex graph: radius vector, phase arc, label placement.

Everything here is a pure function of a ComplexValue. The curves are returned
as closures over their parameters, ``f(t) -> (x, y)`` for ``t`` in [0, 1],
ready to be sampled by a drawing surface.
"""

import enum
import math
from dataclasses import dataclass
from typing import NamedTuple

from .errors import PureRealValueError

# The arc is drawn on an ellipse shrunk by this factor so it stays well inside
# the radius vector.
ARC_SHRINK_FACTOR = 5.0


class RelativePosition(enum.Enum):
    """Where a label sits relative to its anchor along one axis.

    BEFORE is toward smaller coordinates (left, below), AFTER toward larger
    ones (right, above).
    """

    NONE = "none"
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class ArcParameters:
    """Partial ellipse ``(a*cos(t*th), b*sin(t*th))`` for t in [0, 1]."""

    semi_axis_a: float
    semi_axis_b: float
    angular_span: float

    def point_at(self, t):
        th = t * self.angular_span
        return self.semi_axis_a * math.cos(th), self.semi_axis_b * math.sin(th)

    def curve(self):
        a, b, span = self.semi_axis_a, self.semi_axis_b, self.angular_span

        def f(t):
            return a * math.cos(t * span), b * math.sin(t * span)

        return f


@dataclass(frozen=True)
class LabelPlacement:
    x: float
    y: float
    horizontal: RelativePosition
    vertical: RelativePosition


class LabelPlacements(NamedTuple):
    real: LabelPlacement
    imag: LabelPlacement
    magnitude: LabelPlacement
    phase: LabelPlacement


# ---------------------------------------------------------------------------
# Radius vector
# ---------------------------------------------------------------------------


def radius_segment(value):
    """Segment from the origin to the value: ``(t*real, t*imag)``."""
    real, imag = value.real, value.imag

    def f(t):
        return t * real, t * imag

    return f


# ---------------------------------------------------------------------------
# Phase arc
# ---------------------------------------------------------------------------


def compute_arc(value):
    """Ellipse semi-axes and angular span of the arc marking the phase.

    The span ``th`` is the ellipse parameter at which ``(a*cos(t), b*sin(t))``
    meets the line through the origin at the value's phase:
    ``th = atan((a/b) * tan(phase))``. atan only reaches (-pi/2, pi/2), so for
    the left half-plane the span is shifted by pi toward the value.

    A purely imaginary value would give a flat ellipse; it gets a fixed
    quarter arc instead. A purely real value has no arc at all and raises
    PureRealValueError.
    """
    real, imag = value.real, value.imag
    if imag == 0.0:
        raise PureRealValueError(real)

    if real == 0.0:
        a = 1.0 / ARC_SHRINK_FACTOR
        b = abs(imag) / ARC_SHRINK_FACTOR
        th = math.pi / 2.0 if imag > 0.0 else -math.pi / 2.0
        return ArcParameters(a, b, th)

    a = abs(real) / ARC_SHRINK_FACTOR
    b = abs(imag) / ARC_SHRINK_FACTOR
    th = math.atan(abs(real / imag) * math.tan(value.phase))
    if real < 0.0:
        th += -math.pi if imag < 0.0 else math.pi
    return ArcParameters(a, b, th)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------


def compute_label_placements(value, arc):
    """Anchor and offset of the re, im, |z| and arg labels for this quadrant."""
    real, imag = value.real, value.imag
    before, after, none = (
        RelativePosition.BEFORE,
        RelativePosition.AFTER,
        RelativePosition.NONE,
    )

    real_label = LabelPlacement(real, 0.0, none, before if imag >= 0.0 else after)
    imag_label = LabelPlacement(0.0, imag, before if real >= 0.0 else after, none)

    if real == 0.0:
        magnitude_vertical = none
    else:
        magnitude_vertical = before if real * imag < 0.0 else after
    magnitude_label = LabelPlacement(real / 2.0, imag / 2.0, none, magnitude_vertical)

    # Right half-plane: next to the abscissa. Left half-plane: halfway along
    # the arc, clear of its far end.
    ratio = 0.0 if real >= 0.0 else 0.5
    x, y = arc.point_at(ratio)
    phase_label = LabelPlacement(
        x,
        y,
        after if real >= 0.0 else none,
        after if imag >= 0.0 else before,
    )

    return LabelPlacements(real_label, imag_label, magnitude_label, phase_label)
