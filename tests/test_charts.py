from datetime import date
from decimal import Decimal

import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from models.spending import CategorySpending, MonthlySpending
from services.chart_layout import layout_bar_chart, layout_line_chart
from ui.charts import canvas_size, draw_bar_chart, draw_line_chart, prepare_canvas
from utils.constants import LABEL_ROTATION


@pytest.fixture
def canvas():
    fig = Figure(figsize=(4, 3), dpi=100)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    return fig, ax


def test_canvas_size_is_in_pixels(canvas):
    fig, _ = canvas
    assert canvas_size(fig) == pytest.approx((400, 300))


def test_prepare_canvas_flips_y(canvas):
    fig, ax = canvas

    width, height = prepare_canvas(fig, ax, "white")

    assert (width, height) == pytest.approx((400, 300))
    assert ax.get_xlim() == pytest.approx((0, 400))
    assert ax.get_ylim() == pytest.approx((300, 0))
    assert not ax.axison


def test_draw_bar_chart(canvas):
    fig, ax = canvas
    width, height = prepare_canvas(fig, ax)
    bars = layout_bar_chart(
        [CategorySpending("Groceries", Decimal("200")), CategorySpending("Transport", Decimal("50"))],
        width, height,
    )

    draw_bar_chart(ax, bars, "black")
    fig.canvas.draw()

    assert len(ax.patches) == 2
    assert [t.get_text() for t in ax.texts] == ["Groceries", "Transport"]
    first = ax.patches[0]
    assert (first.get_x(), first.get_y()) == pytest.approx((bars[0].x, bars[0].y))
    assert first.get_height() == pytest.approx(bars[0].height)


def test_draw_line_chart(canvas):
    fig, ax = canvas
    width, height = prepare_canvas(fig, ax)
    points = layout_line_chart(
        [MonthlySpending(date(2025, m, 1), Decimal(m * 10)) for m in range(1, 7)],
        width, height,
    )

    draw_line_chart(ax, points, "black")
    fig.canvas.draw()

    assert len(ax.lines) == 1
    assert len(ax.texts) == 6
    assert ax.texts[0].get_text() == "Jan"
    assert ax.texts[0].get_rotation() == pytest.approx(-LABEL_ROTATION % 360)


def test_empty_line_chart_draws_nothing(canvas):
    fig, ax = canvas
    prepare_canvas(fig, ax)

    draw_line_chart(ax, [], "black")

    assert len(ax.lines) == 0
    assert len(ax.texts) == 0


def test_redraw_clears_previous_shapes(canvas):
    fig, ax = canvas
    width, height = prepare_canvas(fig, ax)
    draw_bar_chart(ax, layout_bar_chart([CategorySpending("Groceries", Decimal("1"))], width, height))

    prepare_canvas(fig, ax)

    assert len(ax.patches) == 0
    assert len(ax.texts) == 0
