# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch

"""Front and side schematics of a flared port.

Views are built in body coordinates (origin at the top left corner of the
port, y pointing down) and then shifted so their content starts at the border.
"""
from dataclasses import dataclass, field

import numpy as np

from portflare.port.model import PhysicalModel, PortDesignError
from portflare.schematic.primitives import (
    LABEL_OFFSET,
    Arc,
    Arrow,
    Label,
    Rect,
    bounds,
    dimension_arrow,
    dimension_label,
    translate,
)

BORDER = 10.0

# distance of the dimension arrows from the port body
ANNOTATION_GAP = 20.0


@dataclass(frozen=True)
class View:
    name: str
    arcs: list = field(default_factory=list)
    rects: list = field(default_factory=list)
    arrows: list = field(default_factory=list)
    labels: list = field(default_factory=list)
    extent: tuple = (0.0, 0.0)
    valid: bool = True
    message: str = ''


def _finish(name, arcs, rects, arrows, labels, border, valid=True, message=''):
    min_x, min_y, max_x, max_y = bounds(arcs, rects, arrows, labels)
    dx = border - min_x
    dy = border - min_y
    return View(
        name=name,
        arcs=[translate(p, dx, dy) for p in arcs],
        rects=[translate(p, dx, dy) for p in rects],
        arrows=[translate(p, dx, dy) for p in arrows],
        labels=[translate(p, dx, dy) for p in labels],
        extent=(max_x-min_x + 2.0*border, max_y-min_y + 2.0*border),
        valid=valid,
        message=message,
    )


def _overall_arrows(width_px, height_px, width_mm, height_mm):
    gap = ANNOTATION_GAP
    return [
        dimension_arrow((0.0, -gap), (width_px, -gap), width_mm),
        dimension_arrow((-gap, height_px), (-gap, 0.0), height_mm),
    ]


def front_view(model: PhysicalModel, scale=1.0, border=BORDER) -> View:
    """Port seen from the front of the baffle
    """
    assert scale > 0
    assert border >= 0

    W = model.port_external_width*scale
    H = model.port_external_height*scale

    rects = [Rect(0.0, 0.0, W, H, filled=False)]
    arrows = _overall_arrows(W, H, model.port_external_width, model.port_external_height)

    try:
        min_diameter = model.port_min_diameter()
    except PortDesignError as e:
        # outline and overall dimensions do not depend on the flare
        return _finish('front', [], rects, arrows, [], border, message=str(e))

    baffle = (model.port_external_height/2.0 - min_diameter/2.0)*scale
    rects += [
        Rect(0.0, 0.0, W, baffle),
        Rect(0.0, H-baffle, W, baffle),
    ]
    arrows.append(dimension_arrow((W/2.0, H-baffle), (W/2.0, baffle), min_diameter))

    return _finish('front', [], rects, arrows, [], border)


def side_view(model: PhysicalModel, scale=1.0, border=BORDER) -> View:
    """Cut through the port showing the two flare arcs
    """
    assert scale > 0
    assert border >= 0

    length = model.port_length*scale
    H = model.port_external_height*scale
    arrows = _overall_arrows(length, H, model.port_length, model.port_external_height)

    try:
        alpha = model.flare_arc_start()
        min_diameter = model.port_min_diameter()
    except PortDesignError as e:
        return _finish('side', [], [], arrows, [], border, valid=False, message=str(e))

    R = model.port_flare_radius*scale
    min_radius = min_diameter/2.0*scale
    square_mid = H/2.0
    cx = length/2.0

    upper = Arc(cx, square_mid - min_radius - R, R, alpha, np.pi - alpha)
    lower = Arc(cx, square_mid + min_radius + R, R, np.pi + alpha, 2.0*np.pi - alpha)

    arrows += [
        dimension_arrow((cx, square_mid + min_radius), (cx, square_mid - min_radius), min_diameter),
        Arrow(origin=(cx, lower.center_y), length=R, angle=-np.pi/2.0),
    ]
    labels = [
        Label(cx, lower.center_y + LABEL_OFFSET, f"R {dimension_label(model.port_flare_radius)}"),
    ]

    return _finish('side', [upper, lower], [], arrows, labels, border)


def project(model: PhysicalModel, scale=1.0, border=BORDER):
    return {
        'front': front_view(model, scale, border),
        'side': side_view(model, scale, border),
    }
