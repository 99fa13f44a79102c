# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon, Rectangle

from portflare.port.design import UNDEFINED, PortDesign
from portflare.schematic.render import draw_view, render_design

matplotlib.use('Agg')


def test_draw_view():
    design = PortDesign()
    view = design.views['side']

    fig, ax = plt.subplots(1, 1)
    draw_view(ax, view)

    polygons = [p for p in ax.patches if isinstance(p, Polygon)]
    assert len(polygons) == len(view.arcs) == 2
    texts = [t.get_text() for t in ax.texts]
    assert texts == ['R 120mm', '120mm', '92mm', '60mm']

    width, height = view.extent
    assert ax.get_xlim() == (0, width)
    # y points down
    assert ax.get_ylim() == (height, 0)
    plt.close(fig)


def test_draw_view_front():
    view = PortDesign().views['front']
    fig, ax = plt.subplots(1, 1)
    draw_view(ax, view)

    rects = [p for p in ax.patches if isinstance(p, Rectangle)]
    assert len(rects) == 3
    assert not rects[0].get_fill()
    assert rects[1].get_fill()
    plt.close(fig)


def test_render_undefined():
    design = PortDesign()
    design.update(port_flare_radius=20)
    fig = render_design(design.views, design.report)

    front, side = fig.axes
    assert UNDEFINED in [t.get_text() for t in side.texts]
    # the front view keeps its outline and overall dimensions
    assert UNDEFINED not in [t.get_text() for t in front.texts]
    assert [t.get_text() for t in front.texts] == ['100mm', '92mm']
    assert len(front.patches) == 1
    assert UNDEFINED in fig._suptitle.get_text()
    plt.close(fig)
