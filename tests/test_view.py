"""
Tests for the complex graph render pass

Checks the order of drawing primitives against a recording surface, then a
real render on a matplotlib Axes.
"""

import matplotlib.pyplot as plt
import pytest

from complex_graph._common import STYLE
from complex_graph.errors import PureRealValueError
from complex_graph.geometry import RelativePosition
from complex_graph.model import ComplexModel, ViewRange
from complex_graph.surface import Axis, AxesSurface, sample_parameters
from complex_graph.view import LABEL_TEXTS, ComplexGraphView, render_complex


class RecordingSurface:
    """Surface that remembers every primitive call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))

        return record

    def names(self):
        return [name for name, _, _ in self.calls]


VIEW = ViewRange(-3.0, 6.0, -2.0, 4.8)


def without_curves(calls):
    """Calls with the sampled functions dropped, for comparison."""
    return [(name, [a for a in args if not callable(a)]) for name, args, _ in calls]


def render_recorded(z, **kwargs):
    surface = RecordingSurface()
    ComplexGraphView(ComplexModel(z), **kwargs).render(surface, VIEW)
    return surface


class TestRenderOrder:
    def test_sequence(self) -> None:
        assert render_recorded(3 + 4j).names() == [
            "fill_background",
            "draw_grid",
            "draw_axes",
            "draw_labels_and_graduations",
            "draw_labels_and_graduations",
            "draw_curve",
            "draw_curve",
            "draw_segment",
            "draw_segment",
            "draw_dot",
            "draw_label",
            "draw_label",
            "draw_label",
            "draw_label",
        ]

    def test_curves_sampled_over_unit_interval(self) -> None:
        surface = render_recorded(3 + 4j)
        curves = [args for name, args, _ in surface.calls if name == "draw_curve"]
        for view, t_min, t_max, t_step, f, dashed, color in curves:
            assert view == VIEW
            assert (t_min, t_max, t_step) == (0.0, 1.0, 0.01)
            assert dashed is False
            assert color == STYLE["neutral_dark"]
        radius = curves[0][4]
        assert radius(1.0) == (3.0, 4.0)
        arc = curves[1][4]
        assert arc(0.0) == (pytest.approx(0.6), 0.0)

    def test_projection_segments(self) -> None:
        surface = render_recorded(-2 + 3j)
        segments = [args for name, args, _ in surface.calls if name == "draw_segment"]
        assert segments == [
            (VIEW, Axis.VERTICAL, -2.0, 0.0, 3.0, STYLE["accent"], 1, 3),
            (VIEW, Axis.HORIZONTAL, 3.0, 0.0, -2.0, STYLE["accent"], 1, 3),
        ]

    def test_dot(self) -> None:
        surface = render_recorded(-2 - 3j)
        (dot,) = [args for name, args, _ in surface.calls if name == "draw_dot"]
        assert dot == (VIEW, -2.0, -3.0, STYLE["accent"], True)

    def test_labels(self) -> None:
        surface = render_recorded(-2 + 3j)
        labels = [args for name, args, _ in surface.calls if name == "draw_label"]
        texts = [args[3] for args in labels]
        assert texts == ["re(z)", "im(z)", "|z|", "arg(z)"]
        assert labels[2][1:3] == (-1.0, 1.5)
        assert labels[2][5:] == (RelativePosition.NONE, RelativePosition.BEFORE)

    def test_custom_label_texts(self) -> None:
        surface = render_recorded(1 + 1j, label_texts={"imag": "im(θ)"})
        texts = [args[3] for name, args, _ in surface.calls if name == "draw_label"]
        assert texts == ["re(z)", "im(θ)", "|z|", "arg(z)"]
        assert LABEL_TEXTS["imag"] == "im(z)"

    def test_custom_style(self) -> None:
        style = dict(STYLE, accent="#00ff00")
        surface = render_recorded(1 + 1j, style=style)
        (dot,) = [args for name, args, _ in surface.calls if name == "draw_dot"]
        assert dot[3] == "#00ff00"

    def test_unknown_style_token(self) -> None:
        style = {k: v for k, v in STYLE.items() if k != "accent"}
        with pytest.raises(KeyError):
            render_recorded(1 + 1j, style=style)

    def test_pure_real_aborts_before_drawing(self) -> None:
        surface = RecordingSurface()
        view = ComplexGraphView(ComplexModel(4 + 0j))
        with pytest.raises(PureRealValueError):
            view.render(surface, VIEW)
        assert surface.calls == []

    def test_repeatable(self) -> None:
        view = ComplexGraphView(ComplexModel(-1.5 + 0.5j))
        first, second = RecordingSurface(), RecordingSurface()
        view.render(first, VIEW)
        view.render(second, VIEW)
        assert without_curves(first.calls) == without_curves(second.calls)


class TestSampleParameters:
    def test_unit_interval(self) -> None:
        ts = sample_parameters(0.0, 1.0, 0.01)
        assert len(ts) == 101
        assert ts[0] == 0.0
        assert ts[-1] == pytest.approx(1.0)

    def test_includes_end_when_step_does_not_divide(self) -> None:
        ts = sample_parameters(0.0, 1.0, 0.3)
        assert list(ts) == pytest.approx([0.0, 0.3, 0.6, 0.9, 1.0])

    def test_rejects_non_positive_step(self) -> None:
        with pytest.raises(ValueError):
            sample_parameters(0.0, 1.0, 0.0)


class TestAxesRender:
    @pytest.fixture
    def figure(self):
        fig = render_complex(3 + 4j)
        yield fig
        plt.close(fig)

    def test_window(self, figure) -> None:
        ax = figure.axes[0]
        assert ax.get_xlim() == (-3.0, 6.0)
        assert ax.get_ylim() == pytest.approx((-2.0, 4.8))

    def test_artists(self, figure) -> None:
        ax = figure.axes[0]
        # two axis lines, radius, arc, two projections, marker
        assert len(ax.lines) == 7
        assert [t.get_text() for t in ax.texts] == ["re(z)", "im(z)", "|z|", "arg(z)"]

    def test_curves(self, figure) -> None:
        ax = figure.axes[0]
        radius, arc = ax.lines[2], ax.lines[3]
        assert len(radius.get_xdata()) == 101
        assert radius.get_xdata()[-1] == pytest.approx(3.0)
        assert radius.get_ydata()[-1] == pytest.approx(4.0)
        assert arc.get_xdata()[0] == pytest.approx(0.6)

    def test_label_alignment(self, figure) -> None:
        ax = figure.axes[0]
        re_label, im_label = ax.texts[0], ax.texts[1]
        assert re_label.get_verticalalignment() == "top"
        assert re_label.get_horizontalalignment() == "center"
        assert im_label.get_horizontalalignment() == "right"

    def test_pure_real_closes_figure(self) -> None:
        before = plt.get_fignums()
        with pytest.raises(PureRealValueError):
            render_complex(2.0)
        assert plt.get_fignums() == before

    def test_draw_segment_on_axes(self) -> None:
        fig, ax = plt.subplots()
        try:
            line = AxesSurface(ax).draw_segment(VIEW, Axis.VERTICAL, 2.0, 0.0, 3.0, "red", 1, 3)
            assert list(line.get_xdata()) == [2.0, 2.0]
            assert list(line.get_ydata()) == [0.0, 3.0]
        finally:
            plt.close(fig)
