"""Draw chart geometry onto a matplotlib Axes used as a plain pixel canvas.

The axes are stretched over the whole figure with limits set to the canvas
size and the y axis flipped, so the coordinates produced by
services.chart_layout land on screen unchanged.
"""
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from services.chart_layout import Bar, Point
from utils.constants import LABEL_ROTATION, LINE_COLOR

LABEL_FONT_SIZE = 9


def canvas_size(fig: Figure) -> tuple[float, float]:
    """Figure size in pixels."""
    w, h = fig.get_size_inches()
    return w * fig.dpi, h * fig.dpi


def prepare_canvas(fig: Figure, ax: Axes, bg: str = "white") -> tuple[float, float]:
    width, height = canvas_size(fig)
    ax.clear()
    ax.set_position((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    fig.patch.set_facecolor(bg)
    ax.set_facecolor(bg)
    return width, height


def draw_bar_chart(ax: Axes, bars: list[Bar], text_color: str = "black"):
    for bar in bars:
        ax.add_patch(Rectangle(
            (bar.x, bar.y), bar.width, bar.height,
            facecolor=bar.color, edgecolor="none",
        ))
        ax.text(
            bar.label_x, bar.label_y, bar.label,
            ha="center", va="baseline",
            fontsize=LABEL_FONT_SIZE, color=text_color,
        )


def draw_line_chart(ax: Axes, points: list[Point], text_color: str = "black"):
    if not points:
        return
    ax.plot(
        [p.x for p in points], [p.y for p in points],
        color=LINE_COLOR, linewidth=2,
    )
    for p in points:
        ax.text(
            p.label_x, p.label_y, p.label,
            # LABEL_ROTATION is a y-down angle; matplotlib turns counter-clockwise.
            ha="left", va="baseline", rotation=-LABEL_ROTATION,
            rotation_mode="anchor", fontsize=LABEL_FONT_SIZE, color=text_color,
        )
