# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
import click
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon, Rectangle

from portflare.common.plot import schematic_styles
from portflare.port.design import UNDEFINED, cross_section_option, evaluate, format_report
from portflare.port.dimensions import dimension_options
from portflare.port.model import PhysicalModel
from portflare.schematic.primitives import arrow_label, arrow_strokes
from portflare.schematic.projector import BORDER, View, project


def draw_view(ax: Axes, view: View, styles=None):
    styles = styles or schematic_styles
    width, height = view.extent

    for arc in view.arcs:
        ax.add_patch(Polygon(
            arc.points(),
            closed=True,
            fill=arc.filled,
            facecolor=styles['fill'],
            edgecolor=styles['outline'],
            linewidth=styles['line_width'],
        ))

    for rect in view.rects:
        ax.add_patch(Rectangle(
            (rect.x, rect.y),
            rect.width,
            rect.height,
            fill=rect.filled,
            facecolor=styles['fill'],
            edgecolor=styles['outline'],
            linewidth=styles['line_width'],
        ))

    labels = list(view.labels)
    for arrow in view.arrows:
        for line in arrow_strokes(arrow):
            ax.plot(
                [line.start[0], line.end[0]],
                [line.start[1], line.end[1]],
                color=styles['dimension'],
                linewidth=styles['line_width'],
            )
        label = arrow_label(arrow)
        if label:
            labels.append(label)

    for label in labels:
        ax.text(label.x, label.y, label.text, ha='center', va='center', fontsize=styles['font_size'])

    if not view.valid:
        ax.text(width/2, height/2, UNDEFINED, ha='center', va='center', color='red', fontsize=styles['font_size'])

    # canvas coordinates, y points down
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_axis_off()
    ax.set_title(view.name)


def render_design(views, report=None) -> Figure:
    fig, axs = plt.subplots(1, 2)
    draw_view(axs[0], views['front'])
    draw_view(axs[1], views['side'])
    if report is not None:
        fig.suptitle('\n'.join(format_report(report)), fontsize=schematic_styles['font_size'])
    return fig


@click.command(name='draw', help='Draw front and side views of the port.')
@dimension_options
@click.option('--scale', type=click.FloatRange(min=0.0, min_open=True), default=1.0, show_default=True, help='Pixels per mm.')
@click.option('--border', type=click.FloatRange(min=0.0), default=BORDER, show_default=True, help='Margin in pixels.')
@click.option('--out', type=click.Path(dir_okay=False), help='Save the drawing instead of showing it.')
@cross_section_option
def main(dimensions, scale, border, out, cross_section):
    model = PhysicalModel.from_dimensions(dimensions)
    views = project(model, scale, border)
    fig = render_design(views, evaluate(model, cross_section))

    if out:
        fig.savefig(out)
        plt.close(fig)
    else:
        plt.show()
