"""Inverse kinematics and odometry for omni-wheel robots with evenly spaced wheels."""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = Sequence[Sequence[float]]


def _wheel_angles(wheel_count: int, heading_offset: float) -> list[float]:
    """Angles in radians of each wheel, spaced evenly from the heading offset."""
    if wheel_count <= 0:
        raise ValueError("wheel_count must be positive")
    step = 360.0 / wheel_count
    return [math.radians(step * i + heading_offset) for i in range(wheel_count)]


def drive(
    x: float,
    y: float,
    w: float,
    heading_offset: float,
    wheel_count: int,
    wheel_radius: float,
    robot_radius: float,
) -> list[float]:
    """Return the speed of each wheel for a body velocity (x, y) and rotation w."""
    if wheel_radius == 0:
        raise ValueError("wheel_radius must be non-zero")
    spin = w * robot_radius / wheel_radius
    return [
        (-x * math.sin(angle)) / wheel_radius
        + (y * math.cos(angle)) / wheel_radius
        + spin
        for angle in _wheel_angles(wheel_count, heading_offset)
    ]


def transform_kinematic(x: float, y: float, w: float, matrix: Matrix) -> list[float]:
    """Return wheel speeds from a precomputed kinematic matrix with one (x, y, w) row per wheel."""
    speeds = []
    for row in matrix:
        if len(row) != 3:
            raise ValueError("each kinematic matrix row must have three entries")
        kx, ky, kw = row
        speeds.append(kx * x + ky * y + kw * w)
    return speeds


def odometry(matrix: Matrix, wheel_speeds: Sequence[float], angle: float) -> tuple[float, float]:
    """Estimate body velocity from wheel speeds with a 2xN odometry matrix, rotated by angle degrees."""
    if len(matrix) != 2:
        raise ValueError("odometry matrix must have two rows")
    for row in matrix:
        if len(row) != len(wheel_speeds):
            raise ValueError("odometry matrix row length must match the number of wheels")
    mx, my = (sum(m * t for m, t in zip(row, wheel_speeds)) for row in matrix)
    rad = math.radians(angle)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    return (cos_a * mx - sin_a * my, sin_a * mx + cos_a * my)


def wheel_odometry(
    wheel_speeds: Sequence[float],
    angle_robot: float = 0.0,
    heading_offset: float = 0.0,
    gain: float = 1.0,
) -> tuple[float, float]:
    """Estimate body velocity by projecting each wheel speed onto its drive direction."""
    if not wheel_speeds:
        raise ValueError("at least one wheel speed is required")
    x = 0.0
    y = 0.0
    angles = _wheel_angles(len(wheel_speeds), heading_offset + angle_robot)
    for angle, speed in zip(angles, wheel_speeds):
        x += -math.sin(angle) * speed / 2
        y += math.cos(angle) * speed / 2
    return (x * gain, y * gain)