"""Shared style, helpers, and constants for complex graph rendering."""

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

DPI = 200
FIGSIZE = (6, 6)

# ---------------------------------------------------------------------------
# Style tokens
# ---------------------------------------------------------------------------

STYLE = {
    "bg": "#ffffff",  # Plot background
    "grid": "#e6e6e6",  # Grid lines
    "axis": "#000000",  # Axis lines and graduations
    "text": "#3a3a3a",  # Graduation labels
    "neutral_dark": "#636363",  # Radius vector and phase arc
    "accent": "#ff000c",  # Projections, marker and labels
}


def resolve(style, token):
    """Look up a named style token, failing loudly on unknown names."""
    try:
        return style[token]
    except KeyError:
        raise KeyError(f"unknown style token {token!r}") from None


def setup_axes(ax, style, grid=True):
    """Apply the graph styling to axes."""
    ax.set_facecolor(resolve(style, "bg"))
    ax.tick_params(colors=resolve(style, "text"), labelsize=9)
    for spine in ax.spines.values():
        spine.set_visible(False)
    if grid:
        ax.grid(True, color=resolve(style, "grid"), linewidth=0.5)
    ax.set_axisbelow(True)


def save(fig, path, style=None):
    """Save a figure as PNG and close it."""
    style = STYLE if style is None else style
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fig.savefig(
        path,
        dpi=DPI,
        bbox_inches="tight",
        facecolor=resolve(style, "bg"),
        pad_inches=0.2,
    )
    plt.close(fig)
    print(f"  {os.path.relpath(path)}")
