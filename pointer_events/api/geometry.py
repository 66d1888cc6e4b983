"""Pointer geometry value types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class Vec2:
    """Position in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


class ShapeType(StrEnum):
    """How width, height and angle of a PointShape are interpreted."""

    ELLIPSE = "ELLIPSE"
    RECTANGLE = "RECTANGLE"


@dataclass(frozen=True, slots=True)
class PointShape:
    """Contact shape of a pointer.

    Mouse and pen pointers usually report a 1x1 shape. Touch pointers may
    report the size of the contact, or a rotated ellipse describing a finger
    tip. The axis-aligned size is the bounding box of the rotated shape.
    """

    shape_type: ShapeType = ShapeType.ELLIPSE
    width: float = 1.0
    height: float = 1.0
    width_tolerance: float = 0.0
    height_tolerance: float = 0.0
    angle_deg: float = 0.0
    axis_aligned_width: float = field(init=False, repr=False, compare=False)
    axis_aligned_height: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        width = max(0.0, float(self.width))
        height = max(0.0, float(self.height))
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "angle_deg", float(self.angle_deg))
        aabb_width, aabb_height = _axis_aligned_size(
            self.shape_type, width, height, math.radians(self.angle_deg)
        )
        object.__setattr__(self, "axis_aligned_width", aabb_width)
        object.__setattr__(self, "axis_aligned_height", aabb_height)

    @classmethod
    def uniform(
        cls,
        shape_type: ShapeType,
        size: float,
        size_tolerance: float = 0.0,
    ) -> PointShape:
        """Build a square or circular shape."""
        return cls(
            shape_type=shape_type,
            width=size,
            height=size,
            width_tolerance=size_tolerance,
            height_tolerance=size_tolerance,
        )

    @property
    def angle_rad(self) -> float:
        return math.radians(self.angle_deg)


def _axis_aligned_size(
    shape_type: ShapeType,
    width: float,
    height: float,
    angle_rad: float,
) -> tuple[float, float]:
    if angle_rad == 0.0:
        return width, height
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    if shape_type is ShapeType.RECTANGLE:
        return (
            abs(width * cos_a) + abs(height * sin_a),
            abs(width * sin_a) + abs(height * cos_a),
        )
    return (
        math.hypot(width * cos_a, height * sin_a),
        math.hypot(width * sin_a, height * cos_a),
    )


@dataclass(frozen=True, slots=True)
class Point:
    """Position, shape, tilt, twist and pressure of one pointer sample.

    Pressure and tangential pressure are normalized to [0, 1]. Tilt X and
    tilt Y are in [-90, 90] degrees, twist in [0, 360). Devices that do not
    report a value leave it at 0. Azimuth and altitude are derived from tilt.
    """

    position: Vec2 = field(default_factory=Vec2)
    precise_position: Vec2 | None = None
    shape: PointShape = field(default_factory=PointShape)
    pressure: float = 0.0
    tangential_pressure: float = 0.0
    twist_deg: float = 0.0
    tilt_x_deg: float = 0.0
    tilt_y_deg: float = 0.0
    azimuth_deg: float = field(init=False, repr=False, compare=False)
    altitude_deg: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.precise_position is None:
            object.__setattr__(self, "precise_position", self.position)
        object.__setattr__(self, "pressure", _clamp(self.pressure, 0.0, 1.0))
        object.__setattr__(
            self, "tangential_pressure", _clamp(self.tangential_pressure, 0.0, 1.0)
        )
        object.__setattr__(self, "twist_deg", _wrap_degrees(self.twist_deg))
        tilt_x = _clamp(self.tilt_x_deg, -90.0, 90.0)
        tilt_y = _clamp(self.tilt_y_deg, -90.0, 90.0)
        object.__setattr__(self, "tilt_x_deg", tilt_x)
        object.__setattr__(self, "tilt_y_deg", tilt_y)
        azimuth, altitude = azimuth_altitude_from_tilt(tilt_x, tilt_y)
        object.__setattr__(self, "azimuth_deg", azimuth)
        object.__setattr__(self, "altitude_deg", altitude)

    @property
    def twist_rad(self) -> float:
        return math.radians(self.twist_deg)

    @property
    def tilt_x_rad(self) -> float:
        return math.radians(self.tilt_x_deg)

    @property
    def tilt_y_rad(self) -> float:
        return math.radians(self.tilt_y_deg)

    @property
    def azimuth_rad(self) -> float:
        return math.radians(self.azimuth_deg)

    @property
    def altitude_rad(self) -> float:
        return math.radians(self.altitude_deg)

    def describe(self) -> str:
        """Return a multi-line debug dump."""
        precise = self.precise_position or self.position
        return "\n".join(
            (
                "------------",
                f"        Position: {self.position.x},{self.position.y}",
                f"Precise Position: {precise.x},{precise.y}",
                f"        Pressure: {self.pressure}",
                f"   Tan. Pressure: {self.tangential_pressure}",
                f"           Twist: {self.twist_deg}",
                f"           TiltX: {self.tilt_x_deg}",
                f"           TiltY: {self.tilt_y_deg}",
            )
        )


def azimuth_altitude_from_tilt(tilt_x_deg: float, tilt_y_deg: float) -> tuple[float, float]:
    """Convert tilt X/Y in degrees to (azimuth, altitude) in degrees.

    Azimuth is in [0, 360) with 0 pointing towards increasing screen X.
    Altitude is 90 for a transducer perpendicular to the surface and 0 when
    it lies flat.
    """
    if tilt_x_deg == 0.0 and tilt_y_deg == 0.0:
        return 0.0, 90.0
    if tilt_x_deg == 0.0:
        azimuth = 90.0 if tilt_y_deg > 0.0 else 270.0
    elif tilt_y_deg == 0.0:
        azimuth = 0.0 if tilt_x_deg > 0.0 else 180.0
    else:
        tan_x = math.tan(math.radians(tilt_x_deg))
        tan_y = math.tan(math.radians(tilt_y_deg))
        azimuth = _wrap_degrees(math.degrees(math.atan2(tan_y, tan_x)))
    if abs(tilt_x_deg) == 90.0 or abs(tilt_y_deg) == 90.0:
        return azimuth, 0.0
    tan_x = math.tan(math.radians(tilt_x_deg))
    tan_y = math.tan(math.radians(tilt_y_deg))
    resultant_tilt = math.degrees(math.atan(math.hypot(tan_x, tan_y)))
    return azimuth, _clamp(90.0 - resultant_tilt, 0.0, 90.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, float(value)))


def _wrap_degrees(value: float) -> float:
    """Wrap into [0, 360). Tiny negatives round to 360.0 under ``%``."""
    wrapped = float(value) % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


__all__ = ["Point", "PointShape", "ShapeType", "Vec2", "azimuth_altitude_from_tilt"]
