# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch

"""Acoustic and geometric model of a flared (bell-mouth) port.

Lengths are in mm and the box volume in litres unless a name says otherwise.
"""
from dataclasses import dataclass

import numpy as np

from portflare.port.dimensions import RawDimensions

# speed of sound in air at room temperature, m/s
SPEED_OF_SOUND = 343.0

# empirical end correction for this flare profile
FLARE_END_CORRECTION = 0.576

MM_PER_M = 1000.0
LITRES_PER_M3 = 1000.0

CROSS_SECTIONS = ('rectangular', 'circular')


class PortDesignError(ValueError):
    """Dimensions for which a derived quantity is undefined.
    """


class InvalidGeometry(PortDesignError):
    """The flare radius is too small for the port length or height.
    """


class DegenerateConfiguration(PortDesignError):
    """A zero volume or flare radius, the resonance would divide by zero.
    """


def _check_flare_radius(R):
    if R <= 0:
        raise DegenerateConfiguration(f"flare radius must be positive, got {R}")


def flare_arc_start(l, R) -> float:
    """Angle on the flare arc where the straight section of the duct starts

    l: Port length
    R: Flare radius
    """
    _check_flare_radius(R)
    ratio = (l/2.0)/R
    if ratio < 0.0 or ratio > 1.0:
        raise InvalidGeometry(f"flare radius {R} is less than half the port length {l}")
    return float(np.arccos(ratio))


def port_min_diameter(l, R, H) -> float:
    """Narrowest internal opening of the port, at its midpoint

    l: Port length
    R: Flare radius
    H: External port height
    """
    half = l/2.0
    if R < half:
        raise InvalidGeometry(f"flare radius {R} is less than half the port length {l}")

    # how far the arc recedes from the flat face
    d = np.sqrt(R**2 - half**2)
    diameter = float(H - 2.0*(R - d))
    if diameter < 0.0:
        raise InvalidGeometry(f"flare radius {R} is too aggressive for port height {H}")
    return diameter


def normalized_flare_ratio(l, R) -> float:
    """Port length over twice the flare radius, ~0.5 is well proportioned
    """
    _check_flare_radius(R)
    L_actual = l/MM_PER_M
    r_fit = R/MM_PER_M
    return L_actual/(2.0*r_fit)


@dataclass(frozen=True)
class HelmholtzTerms:
    # all in SI units
    L_actual: float
    r_fit: float
    D_min: float
    A_min: float
    L_effective: float
    A_effective: float
    V_box: float
    frequency: float


def helmholtz_terms(l, R, W, H, V, cross_section='rectangular') -> HelmholtzTerms:
    """Helmholtz resonance of the box with an end correction for the flare

    l: Port length
    R: Flare radius
    W: External port width
    H: External port height
    V: Box volume in litres
    cross_section: 'rectangular' (W x D_min) or 'circular' (pi*(D_min/2)^2)
    """
    if cross_section not in CROSS_SECTIONS:
        raise ValueError(f"unknown cross section {cross_section!r}")
    if V <= 0:
        raise DegenerateConfiguration(f"box volume must be positive, got {V}")
    _check_flare_radius(R)

    L_actual = l/MM_PER_M
    r_fit = R/MM_PER_M
    D_min = port_min_diameter(l, R, H)/MM_PER_M

    if cross_section == 'rectangular':
        A_min = D_min * (W/MM_PER_M)
    else:
        A_min = np.pi*(D_min/2.0)**2

    L_effective = L_actual + D_min
    A_effective = A_min * (1.0 + FLARE_END_CORRECTION*(L_actual/(2.0*r_fit)))
    V_box = V/LITRES_PER_M3

    if L_effective*V_box <= 0.0:
        raise DegenerateConfiguration(f"effective port length {L_effective} m gives no resonance")
    if A_effective < 0.0:
        raise InvalidGeometry(f"effective port area {A_effective} m² is negative")

    frequency = SPEED_OF_SOUND/(2.0*np.pi) * np.sqrt(A_effective/(L_effective*V_box))

    return HelmholtzTerms(
        L_actual=L_actual,
        r_fit=r_fit,
        D_min=D_min,
        A_min=float(A_min),
        L_effective=L_effective,
        A_effective=float(A_effective),
        V_box=V_box,
        frequency=float(frequency),
    )


def resonant_frequency(l, R, W, H, V, cross_section='rectangular') -> float:
    return helmholtz_terms(l, R, W, H, V, cross_section).frequency


@dataclass(frozen=True)
class PhysicalModel:
    port_length: float
    port_flare_radius: float
    port_external_width: float
    port_external_height: float
    box_volume: float

    @staticmethod
    def from_dimensions(raw: RawDimensions):
        return PhysicalModel(
            port_length=float(raw.port_length),
            port_flare_radius=float(raw.port_flare_radius),
            port_external_width=float(raw.port_external_width),
            port_external_height=float(raw.port_external_height),
            box_volume=float(raw.box_volume),
        )

    def flare_arc_start(self):
        return flare_arc_start(self.port_length, self.port_flare_radius)

    def port_min_diameter(self):
        return port_min_diameter(self.port_length, self.port_flare_radius, self.port_external_height)

    def min_radius(self):
        return self.port_min_diameter()/2.0

    def nfr_ratio(self):
        return normalized_flare_ratio(self.port_length, self.port_flare_radius)

    def helmholtz_terms(self, cross_section='rectangular'):
        return helmholtz_terms(
            self.port_length,
            self.port_flare_radius,
            self.port_external_width,
            self.port_external_height,
            self.box_volume,
            cross_section,
        )

    def resonant_frequency(self, cross_section='rectangular'):
        return self.helmholtz_terms(cross_section).frequency
