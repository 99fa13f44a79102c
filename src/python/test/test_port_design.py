# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
import numpy as np
import pandas as pd
import pytest

from portflare.port.design import UNDEFINED, PortDesign, evaluate, evaluate_table, format_report, frequency_sweep
from portflare.port.dimensions import RawDimensions
from portflare.port.model import PhysicalModel


def model(**changes):
    return PhysicalModel.from_dimensions(RawDimensions().update(**changes))


def test_evaluate():
    report = evaluate(model())
    assert report.min_diameter == pytest.approx(59.846096)
    assert report.flare_ratio == 0.5
    assert report.resonant_frequency == pytest.approx(28.17, abs=0.05)
    assert report.error is None


def test_evaluate_invalid_geometry():
    report = evaluate(model(port_flare_radius=59))
    assert report.min_diameter is None
    assert report.flare_ratio is None
    assert report.resonant_frequency is None
    assert 'flare radius' in report.error


def test_evaluate_degenerate_volume():
    report = evaluate(model(box_volume=0))
    assert report.min_diameter == pytest.approx(59.846096)
    assert report.flare_ratio == 0.5
    assert report.resonant_frequency is None
    assert 'volume' in report.error


def test_format_report():
    lines = format_report(evaluate(model()))
    assert lines == [
        'Normalized flare ratio = 0.500 (recommended to be 0.5)',
        'Port minimum diameter  = 59.85 mm',
        'Frequency              = 28.17 Hz',
    ]

    lines = format_report(evaluate(model(port_flare_radius=10)))
    assert all(UNDEFINED in line for line in lines[:3])
    assert lines[3].startswith('Reason: ')


def test_port_design_update():
    design = PortDesign()
    assert design.report.resonant_frequency == pytest.approx(28.17, abs=0.05)
    assert design.views['side'].valid

    before = design.report.resonant_frequency
    report = design.update(box_volume=300)
    assert report is design.report
    assert report.resonant_frequency < before
    assert design.model.box_volume == 300.0

    design.update(port_flare_radius=20)
    assert design.report.resonant_frequency is None
    assert not design.views['side'].valid
    assert design.views['front'].rects

    design.update(port_flare_radius=120, box_volume=161)
    assert design.report == PortDesign().report
    assert design.views == PortDesign().views


def test_evaluate_table():
    designs = pd.DataFrame({
        'port_length': [120, 120, 100],
        'port_flare_radius': [120, 50, 120],
        'port_external_width': [100, 100, 100],
        'port_external_height': [92, 92, 92],
        'box_volume': [161, 161, 80],
    })
    results = evaluate_table(designs)

    assert list(results.columns[-3:]) == ['min_diameter', 'flare_ratio', 'resonant_frequency']
    assert results['resonant_frequency'][0] == pytest.approx(28.17, abs=0.05)
    assert np.isnan(results['min_diameter'][1])
    assert np.isnan(results['resonant_frequency'][1])
    assert results['resonant_frequency'][2] > results['resonant_frequency'][0]


def test_frequency_sweep():
    values = np.arange(40, 140, 10)
    frequency = frequency_sweep(RawDimensions(), 'port_flare_radius', values)
    assert frequency.shape == values.shape
    # flare radius below half the port length is undefined
    assert np.all(np.isnan(frequency[values < 60]))
    assert not np.any(np.isnan(frequency[values >= 70]))
