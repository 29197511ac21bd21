"""Command-line demonstration: wheel speeds and odometry for a preset robot."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from omnikin.presets import RobotConfig, get_preset, preset_names


@dataclass(frozen=True)
class DemoResult:
    """Everything computed for one demonstration run."""

    config: RobotConfig
    x: float
    y: float
    w: float
    drive_speeds: list[float]
    transform_speeds: list[float]
    matrix_odometry: tuple[float, float]
    wheel_odometry: tuple[float, float]


def run_demo(
    config: RobotConfig,
    x: float = 12.0,
    y: float = 10.0,
    w: float = 0.0,
    odometry_angle: float = 0.0,
    odometry_heading: float | None = None,
) -> DemoResult:
    """Compute wheel speeds both ways, then estimate body velocity back from the matrix speeds."""
    drive_speeds = config.drive(x, y, w)
    transform_speeds = config.transform(x, y, w)
    matrix_estimate = config.matrix_odometry(transform_speeds, odometry_angle)
    wheel_estimate = config.wheel_odometry(transform_speeds, odometry_angle, odometry_heading)
    return DemoResult(
        config=config,
        x=x,
        y=y,
        w=w,
        drive_speeds=drive_speeds,
        transform_speeds=transform_speeds,
        matrix_odometry=matrix_estimate,
        wheel_odometry=wheel_estimate,
    )


def _motor_lines(speeds: Sequence[float]) -> list[str]:
    return [f"Motor[{i}] = {speed:.2f}" for i, speed in enumerate(speeds)]


def format_report(result: DemoResult) -> str:
    """Render a demonstration result as a plain-text report."""
    lines = [
        "-------------- Input Speed --------------",
        f"x: {result.x:.2f}, y: {result.y:.2f}",
        "----------- output motor ---------------",
        *_motor_lines(result.drive_speeds),
        "----------- output motor with matrix transform ---------------",
        *_motor_lines(result.transform_speeds),
        "------------ speed output odometry 1------------",
        f"x: {result.matrix_odometry[0]:.2f}, y: {result.matrix_odometry[1]:.2f}",
        "------------ speed output odometry 2 (wheel projection with gain)------------",
        f"x: {result.wheel_odometry[0]:.2f}, y: {result.wheel_odometry[1]:.2f}",
    ]
    return "\n".join(lines) + "\n"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omnikin",
        description="Show wheel speeds and odometry estimates for an omni-wheel robot.",
    )
    parser.add_argument("--preset", choices=preset_names(), default="4w", help="robot preset")
    parser.add_argument("-x", type=float, default=12.0, help="body velocity along x")
    parser.add_argument("-y", type=float, default=10.0, help="body velocity along y")
    parser.add_argument("-w", type=float, default=0.0, help="angular velocity")
    parser.add_argument(
        "--angle", type=float, default=0.0, help="robot orientation in degrees for odometry"
    )
    parser.add_argument(
        "--heading",
        type=float,
        default=None,
        help="wheel heading offset in degrees for wheel odometry (default: preset's own)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration for the chosen preset and print the report."""
    args = _parser().parse_args(argv)
    result = run_demo(get_preset(args.preset), args.x, args.y, args.w, args.angle, args.heading)
    print(format_report(result), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())