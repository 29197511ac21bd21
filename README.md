# omnikin

Kinematics and odometry for omni-wheel mobile robots whose wheels are spaced
evenly around the body: three, four, five, six or any other number.

- **Inverse kinematics**: turn a desired body velocity `(x, y, w)` into a
  speed for each wheel, either from the wheel geometry
  (`omnikin.kinematics.drive`) or from a precomputed kinematic matrix with
  one `(x, y, w)` row per wheel (`omnikin.kinematics.transform_kinematic`).
- **Odometry**: turn wheel speeds back into a body velocity, either with a
  2 x N odometry matrix followed by a rotation by the robot's angle in
  degrees (`omnikin.kinematics.odometry`), or by projecting each wheel speed
  onto its drive direction and applying a gain
  (`omnikin.kinematics.wheel_odometry`).
- **Presets**: ready-made `RobotConfig` objects for 3, 4, 5 and 6 wheels in
  `omnikin.presets`, with their matrices and odometry gains.

Invalid input raises `ValueError` (for example a zero wheel radius, a
non-positive wheel count, or a matrix whose shape does not match the number
of wheels). An unknown preset name raises `KeyError`.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Using the library

```python
from omnikin.kinematics import drive, wheel_odometry

# Four wheels, the first at 45 degrees, wheel radius 0.6, robot radius 1.0
speeds = drive(12, 10, 0, 45, 4, 0.6, 1.0)

# Estimate the body velocity back from the wheel speeds:
# robot angle 0, heading offset 45, gain 0.6
vx, vy = wheel_odometry(speeds, 0, 45, 0.6)
```

`wheel_odometry` defaults to a robot angle of 0, a heading offset of 0 and a
gain of 1.

Using a preset:

```python
from omnikin.presets import get_preset, preset_names

print(preset_names())        # ('3w', '4w', '5w', '6w')
robot = get_preset("4w")

speeds = robot.drive(12, 10, 0)
matrix_speeds = robot.transform(12, 10, 0)
print(robot.matrix_odometry(matrix_speeds, 0))
print(robot.wheel_odometry(matrix_speeds, 0))
```

`RobotConfig` is a frozen dataclass holding a robot's name, wheel count,
heading offset, kinematic and odometry matrices, odometry gain, wheel radius
and robot radius (the presets use 0.6 and 1.0). It checks on creation that
the matrices fit the wheel count. `RobotConfig.wheel_odometry` uses the
robot's own heading offset unless another one is passed, and requires one
speed per wheel.

## Demo

The `omnikin-demo` command takes a preset through the whole chain and prints
the input velocity, the wheel speeds from the geometry and from the matrix,
and both odometry estimates computed from the matrix wheel speeds:

```
omnikin-demo --help
omnikin-demo --preset 3w -x 12 -y 10
```

Options:

- `--preset` — one of `3w`, `4w`, `5w`, `6w` (default `4w`)
- `-x`, `-y` — body velocity (defaults 12 and 10)
- `-w` — angular velocity (default 0)
- `--angle` — robot orientation in degrees used for odometry (default 0)
- `--heading` — wheel heading offset in degrees for wheel odometry
  (default: the preset's own)

The same run is available from Python with `omnikin.demo.run_demo`, and
`omnikin.demo.format_report` turns the returned `DemoResult` into the
printed report.

## What it does not do

omnikin only computes numbers. It does not drive motors, read encoders or
talk to any hardware, and it does not integrate velocities over time into a
position.

## Running the tests

```
pip install .[test]
pytest
```