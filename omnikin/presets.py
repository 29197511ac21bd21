"""Robot configurations with precomputed kinematic and odometry matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from omnikin.kinematics import drive, odometry, transform_kinematic, wheel_odometry

WHEEL_RADIUS = 0.6
ROBOT_RADIUS = 1.0


@dataclass(frozen=True)
class RobotConfig:
    """An omni-wheel robot: geometry, matrices and the gain for wheel odometry."""

    name: str
    wheel_count: int
    heading_offset: float
    kinematic_matrix: tuple[tuple[float, ...], ...]
    odometry_matrix: tuple[tuple[float, ...], ...]
    odometry_gain: float
    wheel_radius: float = WHEEL_RADIUS
    robot_radius: float = ROBOT_RADIUS

    def __post_init__(self) -> None:
        if self.wheel_count <= 0:
            raise ValueError("wheel_count must be positive")
        if len(self.kinematic_matrix) != self.wheel_count:
            raise ValueError("kinematic matrix needs one row per wheel")
        if len(self.odometry_matrix) != 2 or any(
            len(row) != self.wheel_count for row in self.odometry_matrix
        ):
            raise ValueError("odometry matrix must be 2 x wheel_count")

    def drive(self, x: float, y: float, w: float) -> list[float]:
        """Wheel speeds computed from the robot geometry."""
        return drive(
            x, y, w, self.heading_offset, self.wheel_count, self.wheel_radius, self.robot_radius
        )

    def transform(self, x: float, y: float, w: float) -> list[float]:
        """Wheel speeds computed from the kinematic matrix."""
        return transform_kinematic(x, y, w, self.kinematic_matrix)

    def matrix_odometry(self, wheel_speeds: Sequence[float], angle: float = 0.0) -> tuple[float, float]:
        """Body velocity from the odometry matrix, rotated by angle degrees."""
        return odometry(self.odometry_matrix, wheel_speeds, angle)

    def wheel_odometry(
        self,
        wheel_speeds: Sequence[float],
        angle_robot: float = 0.0,
        heading_offset: float | None = None,
    ) -> tuple[float, float]:
        """Body velocity by wheel projection; heading defaults to the robot's own."""
        if len(wheel_speeds) != self.wheel_count:
            raise ValueError("expected one speed per wheel")
        offset = self.heading_offset if heading_offset is None else heading_offset
        return wheel_odometry(wheel_speeds, angle_robot, offset, self.odometry_gain)


_PRESETS: dict[str, RobotConfig] = {
    config.name: config
    for config in (
        RobotConfig(
            name="3w",
            wheel_count=3,
            heading_offset=0.0,
            kinematic_matrix=(
                (-0.000000, 1.666667, 1.666667),
                (-1.443376, -0.833333, 1.666667),
                (1.443376, -0.833333, 1.666667),
            ),
            odometry_matrix=(
                (0.000000, -0.346410, 0.346410),
                (0.400000, -0.200000, -0.200000),
            ),
            odometry_gain=0.8,
        ),
        RobotConfig(
            name="4w",
            wheel_count=4,
            heading_offset=45.0,
            kinematic_matrix=(
                (-1.178511, 1.178511, 1.666667),
                (-1.178511, -1.178511, 1.666667),
                (1.178511, -1.178511, 1.666667),
                (1.178511, 1.178511, 1.666667),
            ),
            odometry_matrix=(
                (-0.212132, -0.212132, 0.212132, 0.212132),
                (0.212132, -0.212132, -0.212132, 0.212132),
            ),
            odometry_gain=0.6,
        ),
        RobotConfig(
            name="5w",
            wheel_count=5,
            heading_offset=0.0,
            kinematic_matrix=(
                (-0.000000, 1.666667, 1.666667),
                (-1.585094, 0.515028, 1.666667),
                (-0.979642, -1.348362, 1.666667),
                (0.979642, -1.348362, 1.666667),
                (1.585094, 0.515028, 1.666667),
            ),
            odometry_matrix=(
                (0.000000, -0.228254, -0.141068, 0.141068, 0.228254),
                (0.240000, 0.074164, -0.194164, -0.194164, 0.074164),
            ),
            odometry_gain=0.48,
        ),
        RobotConfig(
            name="6w",
            wheel_count=6,
            heading_offset=0.0,
            kinematic_matrix=(
                (-0.000000, 1.666667, 1.666667),
                (-1.443376, 0.833333, 1.666667),
                (-1.443376, -0.833333, 1.666667),
                (-0.000000, -1.666667, 1.666667),
                (1.443376, -0.833333, 1.666667),
                (1.443376, 0.833333, 1.666667),
            ),
            odometry_matrix=(
                (0.000000, -0.173205, -0.173205, -0.000000, 0.173205, 0.173205),
                (0.200000, 0.100000, -0.100000, -0.200000, -0.100000, 0.100000),
            ),
            odometry_gain=0.4,
        ),
    )
}


def get_preset(name: str) -> RobotConfig:
    """Return the named robot configuration."""
    try:
        return _PRESETS[name]
    except KeyError:
        known = ", ".join(preset_names())
        raise KeyError(f"unknown preset {name!r}; known presets: {known}") from None


def preset_names() -> tuple[str, ...]:
    """Names of all known presets, sorted."""
    return tuple(sorted(_PRESETS))