"""Pixel geometry for the two report charts.

Origin is the top-left corner of the drawing surface, y grows downwards.
Both layout functions are pure, so the same inputs and canvas size always
produce the same shapes.
"""
from dataclasses import dataclass
from typing import Sequence
from models.spending import CategorySpending, MonthlySpending
from utils.constants import (
    BAR_COLORS, CHART_LABEL_OFFSET, CHART_TOP_MARGIN, MIN_BAR_HEIGHT,
)
from utils.date_helpers import short_month


@dataclass(frozen=True)
class Bar:
    x: float
    y: float
    width: float
    height: float
    label: str
    label_x: float
    label_y: float
    color: str


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: str
    label_x: float
    label_y: float


def layout_bar_chart(
    spendings: Sequence[CategorySpending],
    canvas_width: float,
    canvas_height: float,
) -> list[Bar]:
    if not spendings:
        return []
    max_amount = max(s.amount for s in spendings)
    bar_width = canvas_width / (len(spendings) * 2)
    usable = canvas_height - CHART_TOP_MARGIN
    bars = []
    for i, s in enumerate(spendings):
        if max_amount == 0:
            height = 0.0
        else:
            height = max(float(MIN_BAR_HEIGHT), float(s.amount / max_amount) * usable)
        x = i * bar_width * 2
        bars.append(Bar(
            x=x,
            y=canvas_height - height,
            width=bar_width,
            height=height,
            label=s.category,
            label_x=x + bar_width / 2,
            label_y=canvas_height - CHART_LABEL_OFFSET,
            color=BAR_COLORS[i % len(BAR_COLORS)],
        ))
    return bars


def layout_line_chart(
    spendings: Sequence[MonthlySpending],
    canvas_width: float,
    canvas_height: float,
) -> list[Point]:
    """Empty when there is nothing to scale against (no data or all zero)."""
    if not spendings:
        return []
    max_amount = max(s.amount for s in spendings)
    if max_amount == 0:
        return []
    count = len(spendings)
    step_x = canvas_width / (count - 1) if count > 1 else canvas_width
    usable = canvas_height - CHART_TOP_MARGIN
    points = []
    for i, s in enumerate(spendings):
        x = i * step_x
        points.append(Point(
            x=x,
            y=canvas_height - float(s.amount / max_amount) * usable,
            label=short_month(s.month),
            label_x=x,
            label_y=canvas_height - CHART_LABEL_OFFSET,
        ))
    return points
