# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch

"""Small 2D helpers shared by the schematic projector.
"""
import numpy as np


def point_on_circle(center, radius: float, angle: float):
    """
    Calculate the coordinates of a point on a circle arc.

    Parameters:
    center (tuple): (x, y) coordinates of the center of the circle.
    radius: Radius of the circle.
    angle: Angle in radians.

    Returns:
    tuple: (p_x, p_y) coordinates of the point on the circle arc.
    """
    x, y = center
    p_x = x + radius * np.cos(angle)
    p_y = y + radius * np.sin(angle)
    return (float(p_x), float(p_y))


def point_along_line(p1, p2, t):
    return (
        p1[0] + (p2[0]-p1[0]) * t,
        p1[1] + (p2[1]-p1[1]) * t,
    )


def perpendicular_offset(point, angle: float, distance: float):
    """Move point sideways from a line running at angle.

    Positive distances go to the left of the direction of travel, which on a
    y-down canvas puts labels of horizontal lines above them.
    """
    x, y = point
    return (float(x + distance*np.sin(angle)), float(y - distance*np.cos(angle)))


def angles_within(start: float, end: float):
    """Multiples of pi/2 inside [start, end], used for exact arc bounds.
    """
    assert start <= end
    first = int(np.ceil(start/(np.pi/2)))
    last = int(np.floor(end/(np.pi/2)))
    return [k*np.pi/2 for k in range(first, last+1)]
