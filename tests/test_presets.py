import pytest

from omnikin.presets import RobotConfig, get_preset, preset_names

NAMES = ["3w", "4w", "5w", "6w"]


def test_preset_names():
    assert preset_names() == tuple(NAMES)


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        get_preset("7w")


@pytest.mark.parametrize("name", NAMES)
def test_wheel_count_matches_name(name):
    config = get_preset(name)
    assert config.wheel_count == int(name[0])


def test_four_wheel_heading_and_gains():
    assert get_preset("4w").heading_offset == 45.0
    assert [get_preset(n).odometry_gain for n in NAMES] == [0.8, 0.6, 0.48, 0.4]


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("velocity", [(12, 10, 0), (12, 0, 0), (12, 20, 0), (-3, 7, 2)])
def test_matrix_transform_agrees_with_drive(name, velocity):
    config = get_preset(name)
    assert config.transform(*velocity) == pytest.approx(config.drive(*velocity), abs=1e-4)


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("velocity", [(12, 10), (12, 0), (-5, 20)])
def test_matrix_odometry_recovers_velocity(name, velocity):
    config = get_preset(name)
    speeds = config.transform(velocity[0], velocity[1], 0)
    assert config.matrix_odometry(speeds, 0) == pytest.approx(velocity, abs=1e-3)


@pytest.mark.parametrize("name", NAMES)
def test_matrix_odometry_ignores_rotation(name):
    config = get_preset(name)
    speeds = config.transform(0, 0, 3.0)
    assert config.matrix_odometry(speeds) == pytest.approx((0.0, 0.0), abs=1e-4)


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("velocity", [(12, 10), (12, 0), (12, 20)])
def test_wheel_odometry_recovers_velocity(name, velocity):
    config = get_preset(name)
    speeds = config.drive(velocity[0], velocity[1], 0)
    assert config.wheel_odometry(speeds) == pytest.approx(velocity)


def test_wheel_odometry_heading_passed_as_robot_angle():
    config = get_preset("4w")
    speeds = config.transform(12, 0, 0)
    assert config.wheel_odometry(speeds, 45, 0) == pytest.approx(config.wheel_odometry(speeds))


def test_wheel_odometry_rejects_wrong_length():
    with pytest.raises(ValueError):
        get_preset("3w").wheel_odometry([1.0, 2.0])


def test_config_rejects_mismatched_matrices():
    with pytest.raises(ValueError):
        RobotConfig(
            name="bad",
            wheel_count=3,
            heading_offset=0.0,
            kinematic_matrix=((1.0, 0.0, 0.0),),
            odometry_matrix=((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
            odometry_gain=1.0,
        )
    with pytest.raises(ValueError):
        RobotConfig(
            name="bad",
            wheel_count=1,
            heading_offset=0.0,
            kinematic_matrix=((1.0, 0.0, 0.0),),
            odometry_matrix=((0.0, 0.0),),
            odometry_gain=1.0,
        )