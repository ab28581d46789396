"""The complex graph view: one render pass from a value source to a surface."""

import matplotlib.pyplot as plt

from ._common import FIGSIZE, STYLE, resolve, setup_axes
from .geometry import compute_arc, compute_label_placements, radius_segment
from .model import ComplexModel
from .surface import Axis, AxesSurface

CURVE_T_MIN = 0.0
CURVE_T_MAX = 1.0
CURVE_T_STEP = 0.01
DASH_LENGTH = 1
GAP_LENGTH = 3

LABEL_TEXTS = {
    "real": "re(z)",
    "imag": "im(z)",
    "magnitude": "|z|",
    "phase": "arg(z)",
}


class ComplexGraphView:
    """Draws the radius vector, phase arc, projections and labels of a value."""

    def __init__(self, model, style=None, label_texts=None):
        self.model = model
        self.style = dict(STYLE if style is None else style)
        self.label_texts = dict(LABEL_TEXTS)
        if label_texts:
            self.label_texts.update(label_texts)

    def render(self, surface, view_range):
        """Draw the whole graph on ``surface`` inside ``view_range``."""
        neutral = resolve(self.style, "neutral_dark")
        accent = resolve(self.style, "accent")

        value = self.model.snapshot()
        real, imag = value.real, value.imag
        arc = compute_arc(value)
        labels = compute_label_placements(value, arc)

        surface.fill_background(view_range, resolve(self.style, "bg"))

        # Grid, axes and graduations
        surface.draw_grid(view_range, resolve(self.style, "grid"))
        surface.draw_axes(view_range, resolve(self.style, "axis"))
        graduations = resolve(self.style, "text")
        surface.draw_labels_and_graduations(view_range, Axis.VERTICAL, graduations)
        surface.draw_labels_and_graduations(view_range, Axis.HORIZONTAL, graduations)

        surface.draw_curve(
            view_range, CURVE_T_MIN, CURVE_T_MAX, CURVE_T_STEP,
            radius_segment(value), False, neutral,
        )
        surface.draw_curve(
            view_range, CURVE_T_MIN, CURVE_T_MAX, CURVE_T_STEP,
            arc.curve(), False, neutral,
        )

        # Projections onto the real and imaginary axes
        surface.draw_segment(
            view_range, Axis.VERTICAL, real, 0.0, imag, accent, DASH_LENGTH, GAP_LENGTH
        )
        surface.draw_segment(
            view_range, Axis.HORIZONTAL, imag, 0.0, real, accent, DASH_LENGTH, GAP_LENGTH
        )

        surface.draw_dot(view_range, real, imag, accent, True)

        for name, placement in zip(labels._fields, labels):
            surface.draw_label(
                view_range,
                placement.x,
                placement.y,
                self.label_texts[name],
                accent,
                placement.horizontal,
                placement.vertical,
            )


def render_complex(value, style=None, label_texts=None, figsize=FIGSIZE):
    """Figure showing the complex graph of ``value``, windowed around it."""
    style = dict(STYLE if style is None else style)
    model = value if isinstance(value, ComplexModel) else ComplexModel(complex(value))
    view = ComplexGraphView(model, style=style, label_texts=label_texts)

    fig = plt.figure(figsize=figsize, facecolor=resolve(style, "bg"))
    ax = fig.add_subplot(111)
    setup_axes(ax, style, grid=False)
    try:
        view.render(AxesSurface(ax, halo_color=resolve(style, "bg")), model.view_range())
    except Exception:
        plt.close(fig)
        raise
    fig.tight_layout()
    return fig
