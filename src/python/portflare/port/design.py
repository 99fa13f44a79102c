# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
from dataclasses import dataclass

import click
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
import numpy as np
import pandas as pd

from portflare.common.plot import plot_styles
from portflare.port.dimensions import FIELD_NAMES, RawDimensions, dimension_options
from portflare.port.model import CROSS_SECTIONS, PhysicalModel, PortDesignError
from portflare.schematic.projector import BORDER, project

UNDEFINED = 'undefined for current dimensions'


@dataclass(frozen=True)
class PortReport:
    min_diameter: float | None
    flare_ratio: float | None
    resonant_frequency: float | None
    error: str | None = None


def evaluate(model: PhysicalModel, cross_section='rectangular') -> PortReport:
    """Derived quantities, None where the dimensions leave them undefined
    """
    try:
        min_diameter = model.port_min_diameter()
        flare_ratio = model.nfr_ratio()
    except PortDesignError as e:
        return PortReport(None, None, None, error=str(e))

    try:
        frequency = model.resonant_frequency(cross_section)
    except PortDesignError as e:
        return PortReport(min_diameter, flare_ratio, None, error=str(e))

    return PortReport(min_diameter, flare_ratio, frequency)


def format_report(report: PortReport):
    def fmt(value, unit):
        return UNDEFINED if value is None else f"{value:.2f} {unit}"

    ratio = UNDEFINED if report.flare_ratio is None else f"{report.flare_ratio:.3f} (recommended to be 0.5)"
    lines = [
        f"Normalized flare ratio = {ratio}",
        f"Port minimum diameter  = {fmt(report.min_diameter, 'mm')}",
        f"Frequency              = {fmt(report.resonant_frequency, 'Hz')}",
    ]
    if report.error:
        lines.append(f"Reason: {report.error}")
    return lines


class PortDesign:
    """Current dimensions with everything derived from them.

    Every update rebuilds the model, report and views from scratch.
    """

    def __init__(self, dimensions: RawDimensions | None = None, scale=1.0, border=BORDER, cross_section='rectangular'):
        self.scale = scale
        self.border = border
        self.cross_section = cross_section
        self.dimensions = dimensions if dimensions is not None else RawDimensions()
        self._recompute()

    def _recompute(self):
        self.model = PhysicalModel.from_dimensions(self.dimensions)
        self.report = evaluate(self.model, self.cross_section)
        self.views = project(self.model, self.scale, self.border)

    def update(self, **changes):
        self.dimensions = self.dimensions.update(**changes)
        self._recompute()
        return self.report


def _print(fstring):
    print(f'--PORT: {fstring}')


cross_section_option = click.option(
    '--cross-section',
    type=click.Choice(CROSS_SECTIONS),
    default='rectangular',
    show_default=True,
    help='Shape used for the minimum port area.'
)


@click.command(name='report', help='Print minimum diameter, flare ratio and tuning frequency.')
@dimension_options
@cross_section_option
@click.pass_context
def report(ctx, dimensions, cross_section):
    verbose = (ctx.obj or {}).get('VERBOSE', False)
    model = PhysicalModel.from_dimensions(dimensions)
    result = evaluate(model, cross_section)

    if verbose:
        _print(f'{dimensions}')
        _print(f'{cross_section=}')
        if result.resonant_frequency is not None:
            terms = model.helmholtz_terms(cross_section)
            _print(f'L_actual    = {terms.L_actual} m')
            _print(f'r_fit       = {terms.r_fit} m')
            _print(f'D_min       = {terms.D_min} m')
            _print(f'A_min       = {terms.A_min} m²')
            _print(f'L_effective = {terms.L_effective} m')
            _print(f'A_effective = {terms.A_effective} m²')
            _print(f'V_box       = {terms.V_box} m³')

    for line in format_report(result):
        print(line)


def _table_cell(value, row, name) -> int:
    if pd.isna(value):
        raise click.UsageError(f"row {row}, column {name}: missing value")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise click.UsageError(f"row {row}, column {name}: '{value}' is not a number")
    if not number.is_integer() or number < 0:
        raise click.UsageError(f"row {row}, column {name}: {value} is not a non-negative integer")
    return int(number)


def evaluate_table(designs: pd.DataFrame, cross_section='rectangular') -> pd.DataFrame:
    missing = [name for name in FIELD_NAMES if name not in designs.columns]
    if missing:
        raise click.UsageError(f"missing columns {missing}")

    rows = []
    for row, spec in designs.iterrows():
        dims = RawDimensions(**{name: _table_cell(spec[name], row, name) for name in FIELD_NAMES})
        result = evaluate(PhysicalModel.from_dimensions(dims), cross_section)
        rows.append({
            'min_diameter': result.min_diameter,
            'flare_ratio': result.flare_ratio,
            'resonant_frequency': result.resonant_frequency,
        })

    results = pd.DataFrame(rows, index=designs.index, columns=['min_diameter', 'flare_ratio', 'resonant_frequency'])
    return pd.concat([designs[list(FIELD_NAMES)], results.astype(float)], axis=1)


@click.command(name='table', help='Evaluate candidate designs from a CSV file.')
@click.argument('csv_file', nargs=1, type=click.Path(exists=True))
@click.option('--out', type=click.Path(dir_okay=False), help='Write results as CSV.')
@cross_section_option
def table(csv_file, out, cross_section):
    designs = pd.read_csv(csv_file)
    results = evaluate_table(designs, cross_section)

    if out:
        results.to_csv(out, index=False)
        print(f"{out=}")
    else:
        print(results.to_string(index=False))


def frequency_sweep(dimensions: RawDimensions, param, values, cross_section='rectangular'):
    assert param in FIELD_NAMES
    frequency = np.full(len(values), np.nan)
    for i, value in enumerate(values):
        model = PhysicalModel.from_dimensions(dimensions.update(**{param: int(value)}))
        result = evaluate(model, cross_section)
        if result.resonant_frequency is not None:
            frequency[i] = result.resonant_frequency
    return frequency


@click.command(name='sweep', help='Plot tuning frequency against one dimension.')
@dimension_options
@click.option('--param', type=click.Choice(FIELD_NAMES), default='box_volume', show_default=True)
@click.option('--start', type=click.IntRange(min=0), required=True)
@click.option('--stop', type=click.IntRange(min=0), required=True)
@click.option('--step', type=click.IntRange(min=1), default=1, show_default=True)
@click.option('--out', type=click.Path(dir_okay=False), help='Save the plot instead of showing it.')
@cross_section_option
def sweep(dimensions, param, start, stop, step, out, cross_section):
    if stop < start:
        raise click.BadParameter('--stop must not be less than --start')

    values = np.arange(start, stop+1, step)
    frequency = frequency_sweep(dimensions, param, values, cross_section)

    plt.rcParams.update(plot_styles)
    fig, ax = plt.subplots(1, 1)
    ax: Axes = ax
    ax.plot(values, frequency)
    ax.set_xlabel(param)
    ax.set_ylabel('Frequency [Hz]')
    ax.set_title(f'{cross_section} port')
    ax.grid(which='major', linewidth=0.75)
    ax.grid(which='minor', color='#DDDDDD', linestyle=':', linewidth=0.5)
    ax.minorticks_on()

    if out:
        fig.savefig(out)
        plt.close(fig)
    else:
        plt.show()
