"""Gamepad state: joystick normalization and extended HID reports (gyro, touchpad)."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass, field

BUTTON_COUNT = 32

# Raw value the joystick API reports when a read fails.
JOYSTICK_ERROR = 32767
_AXIS_CENTER = 32760
_AXIS_RANGE = 32767.0
_TRIGGER_RANGE = 65535.0

_MIN_REPORT_LENGTH = 64
_PS5_REPORT_ID = 0x01
_SWITCH_REPORT_IDS = (0x30, 0x21)

_PS5_GYRO_SCALE = 0.001064
_PS4_GYRO_SCALE = 0.00875
_SWITCH_GYRO_SCALE = 0.07

_TOUCH_WIDTH = 1920.0
_TOUCH_HEIGHT = 1080.0

_SONY_VENDOR = 0x054C
_NINTENDO_VENDOR = 0x057E
_PS5_PRODUCTS = frozenset({0x0CE6, 0x0DF2})
_PS4_PRODUCTS = frozenset({0x09CC, 0x05C4, 0x0BA0})
_SWITCH_PRODUCTS = frozenset({0x2009, 0x2006, 0x2007})

_INT16 = struct.Struct("<h")


class ExtendedType(enum.IntEnum):
    """Which extended HID feature set a controller offers."""

    NONE = 0
    PS4 = 1
    PS5 = 2
    SWITCH = 3


_TYPE_NAMES = {
    ExtendedType.PS4: "PS4 Extended",
    ExtendedType.PS5: "PS5 Extended",
    ExtendedType.SWITCH: "Switch Extended",
}


@dataclass
class GyroState:
    """Angular rates reported by a motion sensor."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    available: bool = False


@dataclass
class TouchpadState:
    """Normalized touch position, in 0..1 on each axis."""

    x: float = 0.0
    y: float = 0.0
    touched: bool = False
    available: bool = False


@dataclass
class GamepadState:
    """Sticks, triggers, buttons and optional extended features of one pad."""

    left_stick_x: float = 0.0
    left_stick_y: float = 0.0
    right_stick_x: float = 0.0
    right_stick_y: float = 0.0
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    buttons: list[bool] = field(default_factory=lambda: [False] * BUTTON_COUNT)
    connected: bool = False
    gyro: GyroState = field(default_factory=GyroState)
    touchpad: TouchpadState = field(default_factory=TouchpadState)
    extended_type: ExtendedType = ExtendedType.NONE

    def any_button_pressed(self) -> bool:
        return any(self.buttons)

    def total_gyro_rotation(self) -> float:
        """Magnitude of the gyro vector, or 0 when there is no gyro."""
        if not self.gyro.available:
            return 0.0
        return math.sqrt(self.gyro.pitch**2 + self.gyro.yaw**2 + self.gyro.roll**2)


def _axis(raw: int) -> float:
    return (raw - _AXIS_CENTER) / _AXIS_RANGE


def normalize_joystick(
    left_x: int,
    left_y: int,
    right_x: int,
    right_y: int,
    trigger_l: int,
    trigger_r: int,
    buttons: int,
) -> GamepadState:
    """Build a pad state from raw joystick readings.

    A left X reading equal to the joystick error value means the device is
    gone; the result is then a disconnected, neutral state.
    """
    if left_x == JOYSTICK_ERROR:
        return GamepadState(connected=False)
    return GamepadState(
        left_stick_x=_axis(left_x),
        left_stick_y=_axis(left_y),
        right_stick_x=_axis(right_x),
        right_stick_y=_axis(right_y),
        left_trigger=trigger_l / _TRIGGER_RANGE,
        right_trigger=trigger_r / _TRIGGER_RANGE,
        buttons=[bool(buttons >> bit & 1) for bit in range(BUTTON_COUNT)],
        connected=True,
    )


def _int16(report: bytes, offset: int) -> int:
    return _INT16.unpack_from(report, offset)[0]


def _apply_gyro(state: GamepadState, report: bytes, offset: int, scale: float) -> None:
    state.gyro.available = True
    state.gyro.pitch = _int16(report, offset) * scale
    state.gyro.yaw = _int16(report, offset + 2) * scale
    state.gyro.roll = _int16(report, offset + 4) * scale


def _apply_touch(state: GamepadState, report: bytes, offset: int) -> None:
    state.touchpad.available = True
    state.touchpad.touched = (report[offset] & 0x80) == 0
    if state.touchpad.touched:
        lo, mid, hi = report[offset + 1], report[offset + 2], report[offset + 3]
        state.touchpad.x = (lo | (mid & 0x0F) << 8) / _TOUCH_WIDTH
        state.touchpad.y = (hi << 4 | (mid & 0xF0) >> 4) / _TOUCH_HEIGHT


def apply_ps5_report(state: GamepadState, report: bytes) -> bool:
    """Fill gyro and touchpad from a DualSense input report; False if it is not one."""
    report = bytes(report)
    if len(report) < _MIN_REPORT_LENGTH or report[0] != _PS5_REPORT_ID:
        return False
    state.extended_type = ExtendedType.PS5
    _apply_gyro(state, report, 16, _PS5_GYRO_SCALE)
    _apply_touch(state, report, 33)
    return True


def apply_ps4_report(state: GamepadState, report: bytes) -> bool:
    """Fill gyro and touchpad from a DualShock 4 input report; False if too short."""
    report = bytes(report)
    if len(report) < _MIN_REPORT_LENGTH:
        return False
    state.extended_type = ExtendedType.PS4
    _apply_gyro(state, report, 13, _PS4_GYRO_SCALE)
    _apply_touch(state, report, 35)
    return True


def apply_switch_report(state: GamepadState, report: bytes) -> bool:
    """Fill gyro from a Switch controller report; the pad has no touchpad."""
    report = bytes(report)
    if len(report) < _MIN_REPORT_LENGTH or report[0] not in _SWITCH_REPORT_IDS:
        return False
    state.extended_type = ExtendedType.SWITCH
    _apply_gyro(state, report, 19, _SWITCH_GYRO_SCALE)
    state.touchpad.available = False
    state.touchpad.touched = False
    return True


def identify_controller(vendor_id: int, product_id: int) -> ExtendedType:
    """Extended feature set of a HID device, by its vendor and product ids."""
    if vendor_id == _SONY_VENDOR:
        if product_id in _PS5_PRODUCTS:
            return ExtendedType.PS5
        if product_id in _PS4_PRODUCTS:
            return ExtendedType.PS4
    elif vendor_id == _NINTENDO_VENDOR and product_id in _SWITCH_PRODUCTS:
        return ExtendedType.SWITCH
    return ExtendedType.NONE


def extended_type_name(kind: int) -> str:
    """Display name of an extended feature set."""
    try:
        return _TYPE_NAMES.get(ExtendedType(kind), "Basic Only")
    except ValueError:
        return "Basic Only"