"""complex_graph: draw the geometry of a single complex number.

Renders the radius vector, the phase arc, the real/imaginary projections and
the re/im/|z|/arg labels of one complex value onto a matplotlib plot.

Usage:
    python -m complex_graph --value 3+4i            # one diagram
    python -m complex_graph --gallery               # one per quadrant
    python -m complex_graph --list                  # list gallery entries

Requires: pip install numpy matplotlib
"""

from .errors import ComplexGraphError, PureRealValueError, ValueParseError
from .geometry import (
    ArcParameters,
    LabelPlacement,
    RelativePosition,
    compute_arc,
    compute_label_placements,
    radius_segment,
)
from .model import ComplexModel, ComplexValue, ViewRange, parse_complex
from .surface import AxesSurface
from .view import LABEL_TEXTS, ComplexGraphView, render_complex

__all__ = [
    "ArcParameters",
    "AxesSurface",
    "ComplexGraphError",
    "ComplexGraphView",
    "ComplexModel",
    "ComplexValue",
    "LABEL_TEXTS",
    "LabelPlacement",
    "PureRealValueError",
    "RelativePosition",
    "ValueParseError",
    "ViewRange",
    "compute_arc",
    "compute_label_placements",
    "parse_complex",
    "radius_segment",
    "render_complex",
]
