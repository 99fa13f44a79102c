# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
from dataclasses import dataclass, replace

import numpy as np

from portflare.geometry.math import angles_within, perpendicular_offset, point_along_line, point_on_circle

ARROW_HEAD = 6.0
ARROW_HEAD_ANGLE = np.pi/6
LABEL_OFFSET = 8.0


@dataclass(frozen=True)
class Arc:
    center_x: float
    center_y: float
    radius: float
    start_angle: float
    end_angle: float
    filled: bool = True

    def points(self, n=64):
        angles = np.linspace(self.start_angle, self.end_angle, n)
        return [point_on_circle((self.center_x, self.center_y), self.radius, a) for a in angles]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    filled: bool = True


@dataclass(frozen=True)
class Line:
    start: tuple
    end: tuple


@dataclass(frozen=True)
class Label:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class Arrow:
    origin: tuple
    length: float
    angle: float
    label_text: str = ''

    @property
    def end(self):
        return point_on_circle(self.origin, self.length, self.angle)


def dimension_label(value_mm) -> str:
    return f"{value_mm:.0f}mm"


def dimension_arrow(start, end, value_mm):
    """Arrow between two canvas points labelled with a millimetre value.
    """
    dx = end[0]-start[0]
    dy = end[1]-start[1]
    return Arrow(
        origin=(float(start[0]), float(start[1])),
        length=float(np.hypot(dx, dy)),
        angle=float(np.arctan2(dy, dx)),
        label_text=dimension_label(value_mm),
    )


def arrow_strokes(arrow: Arrow, head=ARROW_HEAD, head_angle=ARROW_HEAD_ANGLE):
    """Shaft plus two short diagonal strokes at each end
    """
    start = arrow.origin
    end = arrow.end
    strokes = [Line(start, end)]
    for tip, inward in ((start, arrow.angle), (end, arrow.angle+np.pi)):
        for side in (-head_angle, head_angle):
            strokes.append(Line(tip, point_on_circle(tip, head, inward+side)))
    return strokes


def arrow_label(arrow: Arrow, offset=LABEL_OFFSET):
    """Label centred on the shaft, pushed sideways by offset
    """
    if not arrow.label_text:
        return None
    mid = point_along_line(arrow.origin, arrow.end, 0.5)
    x, y = perpendicular_offset(mid, arrow.angle, offset)
    return Label(x, y, arrow.label_text)


def arc_bounds(arc: Arc):
    angles = [arc.start_angle, arc.end_angle] + angles_within(arc.start_angle, arc.end_angle)
    pts = np.array([point_on_circle((arc.center_x, arc.center_y), arc.radius, a) for a in angles])
    return (*pts.min(axis=0), *pts.max(axis=0))


def bounds(arcs, rects, arrows, labels):
    """Bounding box (min_x, min_y, max_x, max_y) of a set of primitives
    """
    xs = []
    ys = []
    for arc in arcs:
        x0, y0, x1, y1 = arc_bounds(arc)
        xs += [x0, x1]
        ys += [y0, y1]
    for rect in rects:
        xs += [rect.x, rect.x+rect.width]
        ys += [rect.y, rect.y+rect.height]
    for arrow in arrows:
        for x, y in (arrow.origin, arrow.end):
            xs.append(x)
            ys.append(y)
        label = arrow_label(arrow)
        if label:
            xs.append(label.x)
            ys.append(label.y)
    for label in labels:
        xs.append(label.x)
        ys.append(label.y)

    assert xs, "no primitives"
    return float(min(xs)), float(min(ys)), float(max(xs)), float(max(ys))


def translate(primitive, dx, dy):
    if isinstance(primitive, Arc):
        return replace(primitive, center_x=primitive.center_x+dx, center_y=primitive.center_y+dy)
    if isinstance(primitive, (Rect, Label)):
        return replace(primitive, x=primitive.x+dx, y=primitive.y+dy)
    if isinstance(primitive, Arrow):
        x, y = primitive.origin
        return replace(primitive, origin=(x+dx, y+dy))
    if isinstance(primitive, Line):
        return Line((primitive.start[0]+dx, primitive.start[1]+dy), (primitive.end[0]+dx, primitive.end[1]+dy))
    raise TypeError(f"cannot translate {primitive!r}")
