# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch
from dataclasses import dataclass, fields, replace
from functools import update_wrapper
import json

import click


@dataclass(frozen=True)
class RawDimensions:
    """Dimensions as entered by the user.

    port_length: Duct length in mm
    port_flare_radius: Radius of the flare arc in mm
    port_external_width: Width of the port opening in mm
    port_external_height: Height of the port at the baffle in mm
    box_volume: Internal enclosure volume in litres
    """
    port_length: int = 120
    port_flare_radius: int = 120
    port_external_width: int = 100
    port_external_height: int = 92
    box_volume: int = 161

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{field.name} must not be negative, got {value}")

    def update(self, **changes):
        """Return a new snapshot with the given fields replaced.
        """
        return replace(self, **changes)


FIELD_NAMES = tuple(field.name for field in fields(RawDimensions))


def load_dimensions(path) -> RawDimensions:
    with open(path) as f:
        values = json.load(f)

    if not isinstance(values, dict):
        raise ValueError(f"{path}: expected a JSON object with dimensions")

    unknown = sorted(set(values) - set(FIELD_NAMES))
    if unknown:
        raise ValueError(f"{path}: unknown dimensions {unknown}")

    return RawDimensions(**values)


# (option, field, help)
_OPTIONS = [
    ('--length', 'port_length', 'Port length in mm.'),
    ('--flare-radius', 'port_flare_radius', 'Flare radius in mm.'),
    ('--width', 'port_external_width', 'Port width in mm.'),
    ('--height', 'port_external_height', 'Port height in mm.'),
    ('--volume', 'box_volume', 'Box volume in litres.'),
]


def dimension_options(func):
    """Add the five dimension options plus --dimensions to a click command.

    The wrapped command receives a single ``dimensions`` argument.
    """
    def wrapper(dimensions_file, **kwargs):
        try:
            dims = load_dimensions(dimensions_file) if dimensions_file else RawDimensions()
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--dimensions')

        changes = {}
        for _, name, _ in _OPTIONS:
            value = kwargs.pop(name)
            if value is not None:
                changes[name] = value
        return func(dimensions=dims.update(**changes), **kwargs)

    update_wrapper(wrapper, func)

    for option, name, text in reversed(_OPTIONS):
        wrapper = click.option(option, name, type=click.IntRange(min=0), default=None, help=text)(wrapper)
    wrapper = click.option(
        '--dimensions', 'dimensions_file',
        type=click.Path(exists=True, dir_okay=False),
        help='JSON file with dimensions, options take precedence.'
    )(wrapper)
    return wrapper
