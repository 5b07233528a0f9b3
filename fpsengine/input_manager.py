"""Keyboard, mouse and gamepad input combined into one per-frame FPS command."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from fpsengine.gamepad import GamepadState
from fpsengine.keyboard import Key, KeyboardState

STICK_DEADZONE = 0.2
GAMEPAD_LOOK_SENSITIVITY = 3.0
TRIGGER_THRESHOLD = 0.5

# Gamepad button indices.
BUTTON_SOUTH = 0
BUTTON_EAST = 1
BUTTON_WEST = 2
BUTTON_NORTH = 3
BUTTON_L1 = 4
BUTTON_R1 = 5
BUTTON_SELECT = 6
BUTTON_START = 7
BUTTON_L3 = 8
BUTTON_R3 = 9


class PositionMode(enum.Enum):
    """How the mouse reports its position."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass
class MouseState:
    """Buttons, position (or movement in relative mode) and wheel of a mouse."""

    left_button: bool = False
    middle_button: bool = False
    right_button: bool = False
    x_button1: bool = False
    x_button2: bool = False
    x: int = 0
    y: int = 0
    scroll_wheel_value: int = 0
    position_mode: PositionMode = PositionMode.ABSOLUTE


@dataclass
class FPSCommand:
    """The player's intent for one frame, independent of the input device."""

    move_forward: float = 0.0
    move_right: float = 0.0
    look_x: float = 0.0
    look_y: float = 0.0

    jump: bool = False
    sprint: bool = False
    crouch: bool = False
    fire: bool = False
    aim: bool = False
    reload: bool = False
    interact: bool = False
    melee: bool = False

    jump_trigger: bool = False
    fire_trigger: bool = False
    aim_trigger: bool = False
    reload_trigger: bool = False

    weapon_next: bool = False
    weapon_prev: bool = False
    weapon1: bool = False
    weapon2: bool = False
    weapon3: bool = False
    weapon4: bool = False

    pause: bool = False
    pause_trigger: bool = False
    scoreboard: bool = False

    mouse_position: tuple[float, float] = (0.0, 0.0)
    left_stick: tuple[float, float] = (0.0, 0.0)
    right_stick: tuple[float, float] = (0.0, 0.0)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _outside_deadzone(x: float, y: float) -> bool:
    return abs(x) > STICK_DEADZONE or abs(y) > STICK_DEADZONE


class InputManager:
    """Builds an :class:`FPSCommand` each frame and detects newly pressed actions."""

    def __init__(self) -> None:
        self.command = FPSCommand()
        self.previous = FPSCommand()
        self.mouse_locked = False
        self.mouse_mode = PositionMode.ABSOLUTE
        self.mouse_visible = True

    def __repr__(self) -> str:
        return f"InputManager(mouse_locked={self.mouse_locked})"

    def set_mouse_locked(self, locked: bool) -> None:
        """Lock the mouse for look control (relative, hidden) or release it."""
        self.mouse_locked = bool(locked)
        if self.mouse_locked:
            self.mouse_mode = PositionMode.RELATIVE
            self.mouse_visible = False
        else:
            self.mouse_mode = PositionMode.ABSOLUTE
            self.mouse_visible = True

    def update(
        self,
        keyboard: KeyboardState,
        mouse: MouseState | None = None,
        pad: GamepadState | None = None,
    ) -> FPSCommand:
        """Combine this frame's device states into a new command and return it."""
        self.previous = self.command
        cmd = FPSCommand()
        if mouse is None:
            mouse = MouseState(position_mode=self.mouse_mode)

        kb_forward = float(keyboard.is_down(Key.W)) - float(keyboard.is_down(Key.S))
        kb_right = float(keyboard.is_down(Key.D)) - float(keyboard.is_down(Key.A))

        cmd.jump = keyboard.is_down(Key.SPACE)
        cmd.sprint = keyboard.is_down(Key.LEFTSHIFT)
        cmd.crouch = keyboard.is_down(Key.LEFTCONTROL)
        cmd.reload = keyboard.is_down(Key.R)
        cmd.interact = keyboard.is_down(Key.E)
        cmd.melee = keyboard.is_down(Key.V)
        cmd.pause = keyboard.is_down(Key.ESCAPE)
        cmd.scoreboard = keyboard.is_down(Key.TAB)
        cmd.weapon1 = keyboard.is_down(Key.D1)
        cmd.weapon2 = keyboard.is_down(Key.D2)
        cmd.weapon3 = keyboard.is_down(Key.D3)
        cmd.weapon4 = keyboard.is_down(Key.D4)

        cmd.fire = mouse.left_button
        cmd.aim = mouse.right_button
        cmd.mouse_position = (float(mouse.x), float(mouse.y))
        if mouse.position_mode is PositionMode.RELATIVE:
            cmd.look_x = float(mouse.x)
            cmd.look_y = float(mouse.y)
        cmd.weapon_next = mouse.scroll_wheel_value > 0
        cmd.weapon_prev = mouse.scroll_wheel_value < 0

        if pad is not None and pad.connected:
            self._apply_pad(cmd, pad)

        cmd.move_forward = _clamp_unit(cmd.move_forward + kb_forward)
        cmd.move_right = _clamp_unit(cmd.move_right + kb_right)

        prev = self.previous
        cmd.jump_trigger = cmd.jump and not prev.jump
        cmd.fire_trigger = cmd.fire and not prev.fire
        cmd.aim_trigger = cmd.aim and not prev.aim
        cmd.reload_trigger = cmd.reload and not prev.reload
        cmd.pause_trigger = cmd.pause and not prev.pause

        self.command = cmd
        return replace(cmd)

    @staticmethod
    def _apply_pad(cmd: FPSCommand, pad: GamepadState) -> None:
        lx, ly = pad.left_stick_x, pad.left_stick_y
        rx, ry = pad.right_stick_x, pad.right_stick_y

        if _outside_deadzone(lx, ly):
            cmd.move_forward += -ly
            cmd.move_right += lx
        if _outside_deadzone(rx, ry):
            cmd.look_x += rx * GAMEPAD_LOOK_SENSITIVITY
            cmd.look_y += ry * GAMEPAD_LOOK_SENSITIVITY

        cmd.left_stick = (lx, ly)
        cmd.right_stick = (rx, ry)

        buttons = pad.buttons
        cmd.jump = cmd.jump or buttons[BUTTON_SOUTH]
        cmd.reload = cmd.reload or buttons[BUTTON_WEST]
        cmd.interact = cmd.interact or buttons[BUTTON_NORTH]
        cmd.aim = cmd.aim or buttons[BUTTON_L1] or pad.left_trigger > TRIGGER_THRESHOLD
        cmd.fire = cmd.fire or buttons[BUTTON_R1] or pad.right_trigger > TRIGGER_THRESHOLD
        cmd.pause = cmd.pause or buttons[BUTTON_START]
        cmd.sprint = cmd.sprint or buttons[BUTTON_L3]
        cmd.melee = cmd.melee or buttons[BUTTON_R3]