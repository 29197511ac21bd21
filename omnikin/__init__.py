"""Kinematics, odometry, robot presets and a demo command for omni-wheel mobile robots."""

__version__ = "0.1.0"
__all__ = ["kinematics", "presets", "demo"]