"""Drawing surface: the plotting primitives the complex graph is built from.

AxesSurface implements them on a matplotlib Axes. Coordinates are value
coordinates; the view range is the window being drawn.
"""

import enum

import matplotlib.patheffects as pe
import numpy as np
from matplotlib.ticker import MaxNLocator

from .geometry import RelativePosition

LABEL_MARGIN = 4  # points between a label and its anchor
MAX_GRADUATIONS = 7


class Axis(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


_HA = {
    RelativePosition.BEFORE: "right",
    RelativePosition.NONE: "center",
    RelativePosition.AFTER: "left",
}
_VA = {
    RelativePosition.BEFORE: "top",
    RelativePosition.NONE: "center",
    RelativePosition.AFTER: "bottom",
}
_OFFSET = {
    RelativePosition.BEFORE: -LABEL_MARGIN,
    RelativePosition.NONE: 0,
    RelativePosition.AFTER: LABEL_MARGIN,
}


def sample_parameters(t_min, t_max, t_step):
    """Parameter values from t_min to t_max inclusive, t_step apart."""
    if t_step <= 0:
        raise ValueError(f"t_step must be positive, got {t_step}")
    count = int(np.floor((t_max - t_min) / t_step + 1e-9)) + 1
    ts = t_min + t_step * np.arange(count)
    if ts[-1] < t_max:
        ts = np.append(ts, t_max)
    return ts


class AxesSurface:
    """Plotting primitives on a matplotlib Axes."""

    def __init__(self, ax, halo_color="#ffffff"):
        self.ax = ax
        self.halo_color = halo_color

    def fill_background(self, view_range, color):
        self.ax.set_facecolor(color)
        self.ax.set_xlim(view_range.x_min, view_range.x_max)
        self.ax.set_ylim(view_range.y_min, view_range.y_max)

    def draw_grid(self, view_range, color):
        self.ax.grid(True, color=color, linewidth=0.5)
        self.ax.set_axisbelow(True)

    def draw_axes(self, view_range, color):
        self.ax.axhline(0, color=color, lw=1.0, zorder=1)
        self.ax.axvline(0, color=color, lw=1.0, zorder=1)
        for spine in self.ax.spines.values():
            spine.set_visible(False)

    def draw_labels_and_graduations(self, view_range, axis, color):
        """Tick marks and numbers along one axis."""
        target = self.ax.xaxis if axis is Axis.HORIZONTAL else self.ax.yaxis
        target.set_major_locator(MaxNLocator(MAX_GRADUATIONS))
        self.ax.tick_params(
            axis="x" if axis is Axis.HORIZONTAL else "y",
            colors=color,
            labelsize=9,
        )

    def draw_curve(self, view_range, t_min, t_max, t_step, f, dashed, color, clip=True):
        """Sample ``f(t) -> (x, y)`` over [t_min, t_max] and draw the polyline."""
        points = np.array([f(t) for t in sample_parameters(t_min, t_max, t_step)])
        (line,) = self.ax.plot(
            points[:, 0],
            points[:, 1],
            "--" if dashed else "-",
            color=color,
            lw=1.5,
            clip_on=clip,
            zorder=3,
        )
        return line

    def draw_segment(self, view_range, axis, position, start, end, color,
                     dash_length=0, gap_length=0):
        """Axis-aligned segment; vertical at x=position, horizontal at y=position."""
        if axis is Axis.VERTICAL:
            xs, ys = [position, position], [start, end]
        else:
            xs, ys = [start, end], [position, position]
        linestyle = (0, (dash_length, gap_length)) if dash_length > 0 else "-"
        (line,) = self.ax.plot(xs, ys, linestyle=linestyle, color=color, lw=1.0, zorder=2)
        return line

    def draw_dot(self, view_range, x, y, color, filled=True):
        (marker,) = self.ax.plot(
            x,
            y,
            "o",
            color=color,
            markerfacecolor=color if filled else "none",
            markersize=6,
            zorder=5,
        )
        return marker

    def draw_label(self, view_range, x, y, text, color, horizontal, vertical):
        """Text next to (x, y), offset by the relative positions."""
        return self.ax.annotate(
            text,
            xy=(x, y),
            xytext=(_OFFSET[horizontal], _OFFSET[vertical]),
            textcoords="offset points",
            ha=_HA[horizontal],
            va=_VA[vertical],
            color=color,
            fontsize=11,
            path_effects=[pe.withStroke(linewidth=3, foreground=self.halo_color)],
            zorder=6,
        )
