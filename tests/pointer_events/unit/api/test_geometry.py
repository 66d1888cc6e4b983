from __future__ import annotations

import math

import pytest

from pointer_events.api.geometry import (
    Point,
    PointShape,
    ShapeType,
    Vec2,
    azimuth_altitude_from_tilt,
)


def test_shape_defaults_to_unit_ellipse() -> None:
    shape = PointShape()
    assert shape.shape_type is ShapeType.ELLIPSE
    assert (shape.width, shape.height) == (1.0, 1.0)
    assert (shape.axis_aligned_width, shape.axis_aligned_height) == (1.0, 1.0)


def test_rotated_rectangle_bounding_box() -> None:
    quarter = PointShape(shape_type=ShapeType.RECTANGLE, width=4.0, height=2.0, angle_deg=90.0)
    assert quarter.axis_aligned_width == pytest.approx(2.0)
    assert quarter.axis_aligned_height == pytest.approx(4.0)

    diagonal = PointShape(shape_type=ShapeType.RECTANGLE, width=2.0, height=2.0, angle_deg=45.0)
    assert diagonal.axis_aligned_width == pytest.approx(2.0 * math.sqrt(2.0))
    assert diagonal.axis_aligned_height == pytest.approx(2.0 * math.sqrt(2.0))


def test_rotated_ellipse_bounding_box() -> None:
    ellipse = PointShape(shape_type=ShapeType.ELLIPSE, width=4.0, height=2.0, angle_deg=90.0)
    assert ellipse.axis_aligned_width == pytest.approx(2.0)
    assert ellipse.axis_aligned_height == pytest.approx(4.0)

    circle = PointShape(shape_type=ShapeType.ELLIPSE, width=2.0, height=2.0, angle_deg=45.0)
    assert circle.axis_aligned_width == pytest.approx(2.0)
    assert circle.axis_aligned_height == pytest.approx(2.0)


def test_negative_shape_size_is_clamped() -> None:
    shape = PointShape(width=-3.0, height=-1.0)
    assert (shape.width, shape.height) == (0.0, 0.0)


def test_uniform_shape_uses_size_for_both_axes() -> None:
    shape = PointShape.uniform(ShapeType.RECTANGLE, 5.0, size_tolerance=0.5)
    assert (shape.width, shape.height) == (5.0, 5.0)
    assert (shape.width_tolerance, shape.height_tolerance) == (0.5, 0.5)


@pytest.mark.parametrize(
    ("tilt_x", "tilt_y", "azimuth", "altitude"),
    [
        (0.0, 0.0, 0.0, 90.0),
        (45.0, 0.0, 0.0, 45.0),
        (-45.0, 0.0, 180.0, 45.0),
        (0.0, 30.0, 90.0, 60.0),
        (0.0, -30.0, 270.0, 60.0),
        (90.0, 0.0, 0.0, 0.0),
        (45.0, 45.0, 45.0, 90.0 - math.degrees(math.atan(math.sqrt(2.0)))),
    ],
)
def test_azimuth_altitude_from_tilt(
    tilt_x: float, tilt_y: float, azimuth: float, altitude: float
) -> None:
    result_azimuth, result_altitude = azimuth_altitude_from_tilt(tilt_x, tilt_y)
    assert result_azimuth == pytest.approx(azimuth)
    assert result_altitude == pytest.approx(altitude)


def test_point_clamps_and_wraps_ranges() -> None:
    point = Point(
        position=Vec2(3.0, 4.0),
        pressure=1.5,
        tangential_pressure=-0.2,
        twist_deg=-30.0,
        tilt_x_deg=120.0,
        tilt_y_deg=-100.0,
    )
    assert point.pressure == 1.0
    assert point.tangential_pressure == 0.0
    assert point.twist_deg == pytest.approx(330.0)
    assert point.tilt_x_deg == 90.0
    assert point.tilt_y_deg == -90.0
    assert point.altitude_deg == 0.0


def test_point_precise_position_defaults_to_position() -> None:
    point = Point(position=Vec2(10.0, 20.0))
    assert point.precise_position == Vec2(10.0, 20.0)

    precise = Point(position=Vec2(10.0, 20.0), precise_position=Vec2(10.25, 20.5))
    assert precise.precise_position == Vec2(10.25, 20.5)


def test_point_derived_angles_are_stable_across_rebuilds() -> None:
    first = Point(tilt_x_deg=30.0, tilt_y_deg=-60.0)
    second = Point(tilt_x_deg=first.tilt_x_deg, tilt_y_deg=first.tilt_y_deg)
    assert first == second
    assert second.azimuth_deg == first.azimuth_deg
    assert second.altitude_deg == first.altitude_deg
    assert first.azimuth_rad == pytest.approx(math.radians(first.azimuth_deg))


def test_point_describe_lists_fields() -> None:
    text = Point(position=Vec2(1.0, 2.0), pressure=0.5).describe()
    assert "Position: 1.0,2.0" in text
    assert "Pressure: 0.5" in text


@pytest.mark.parametrize("twist", [-1e-20, 360.0, 720.0, -360.0])
def test_twist_wraps_into_half_open_range(twist: float) -> None:
    assert Point(twist_deg=twist).twist_deg == 0.0


def test_azimuth_stays_below_full_turn_for_tiny_negative_tilt() -> None:
    point = Point(tilt_x_deg=45.0, tilt_y_deg=-1e-300)
    assert 0.0 <= point.azimuth_deg < 360.0
