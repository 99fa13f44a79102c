# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
import dataclasses
import json

import pytest

from portflare.port.dimensions import FIELD_NAMES, RawDimensions, load_dimensions


def test_defaults():
    raw = RawDimensions()
    assert raw.port_length == 120
    assert raw.port_flare_radius == 120
    assert raw.port_external_width == 100
    assert raw.port_external_height == 92
    assert raw.box_volume == 161
    assert FIELD_NAMES == ('port_length', 'port_flare_radius', 'port_external_width', 'port_external_height', 'box_volume')


def test_update_returns_new_snapshot():
    raw = RawDimensions()
    changed = raw.update(box_volume=50, port_length=90)
    assert changed.box_volume == 50
    assert changed.port_length == 90
    assert changed.port_flare_radius == raw.port_flare_radius
    assert raw.box_volume == 161

    with pytest.raises(dataclasses.FrozenInstanceError):
        raw.box_volume = 10

    with pytest.raises(TypeError):
        raw.update(port_depth=10)


@pytest.mark.parametrize('value', [-1, 1.5, '120', True, None])
def test_invalid_values(value):
    with pytest.raises(ValueError):
        RawDimensions(port_length=value)

    with pytest.raises(ValueError):
        RawDimensions().update(box_volume=value)


def test_load_dimensions(tmp_path):
    path = tmp_path / 'port.json'
    path.write_text(json.dumps({'box_volume': 80, 'port_length': 100}))
    raw = load_dimensions(path)
    assert raw == RawDimensions(box_volume=80, port_length=100)


def test_load_dimensions_errors(tmp_path):
    path = tmp_path / 'unknown.json'
    path.write_text(json.dumps({'port_depth': 80}))
    with pytest.raises(ValueError, match='port_depth'):
        load_dimensions(path)

    path = tmp_path / 'list.json'
    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(ValueError):
        load_dimensions(path)
