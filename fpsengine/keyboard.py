"""Keyboard state tracking: 255 virtual keys held as a bit set, with edge detection."""

from __future__ import annotations

import enum

STATE_SIZE = 256 // 8
_MAX_KEY = 0xFE

WM_ACTIVATEAPP = 0x001C
WM_KEYDOWN = 0x0100
WM_KEYUP = 0x0101
WM_SYSKEYDOWN = 0x0104
WM_SYSKEYUP = 0x0105

_VK_SHIFT = 0x10
_VK_CONTROL = 0x11
_VK_MENU = 0x12
_EXTENDED_KEY_FLAG = 0x01000000

# Scan codes of the two shift keys, as reported in bits 16-23 of the message data.
_SHIFT_SCAN_CODES = {0x2A: 0xA0, 0x36: 0xA1}


class Key(enum.IntEnum):
    """Virtual key codes."""

    NONE = 0x0
    BACK = 0x8
    TAB = 0x9
    ENTER = 0xD
    PAUSE = 0x13
    CAPSLOCK = 0x14
    KANA = 0x15
    KANJI = 0x19
    ESCAPE = 0x1B
    IMECONVERT = 0x1C
    IMENOCONVERT = 0x1D
    SPACE = 0x20
    PAGEUP = 0x21
    PAGEDOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    PRINTSCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    D0 = 0x30
    D1 = 0x31
    D2 = 0x32
    D3 = 0x33
    D4 = 0x34
    D5 = 0x35
    D6 = 0x36
    D7 = 0x37
    D8 = 0x38
    D9 = 0x39
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    LEFTWINDOWS = 0x5B
    RIGHTWINDOWS = 0x5C
    APPS = 0x5D
    SLEEP = 0x5F
    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUMLOCK = 0x90
    SCROLL = 0x91
    LEFTSHIFT = 0xA0
    RIGHTSHIFT = 0xA1
    LEFTCONTROL = 0xA2
    RIGHTCONTROL = 0xA3
    LEFTALT = 0xA4
    RIGHTALT = 0xA5
    BROWSERBACK = 0xA6
    BROWSERFORWARD = 0xA7
    BROWSERREFRESH = 0xA8
    BROWSERSTOP = 0xA9
    BROWSERSEARCH = 0xAA
    BROWSERFAVORITES = 0xAB
    BROWSERHOME = 0xAC
    VOLUMEMUTE = 0xAD
    VOLUMEDOWN = 0xAE
    VOLUMEUP = 0xAF
    MEDIANEXTTRACK = 0xB0
    MEDIAPREVIOUSTRACK = 0xB1
    MEDIASTOP = 0xB2
    MEDIAPLAYPAUSE = 0xB3
    LAUNCHMAIL = 0xB4
    SELECTMEDIA = 0xB5
    LAUNCHAPPLICATION1 = 0xB6
    LAUNCHAPPLICATION2 = 0xB7
    OEMSEMICOLON = 0xBA
    OEMPLUS = 0xBB
    OEMCOMMA = 0xBC
    OEMMINUS = 0xBD
    OEMPERIOD = 0xBE
    OEMQUESTION = 0xBF
    OEMTILDE = 0xC0
    OEMOPENBRACKETS = 0xDB
    OEMPIPE = 0xDC
    OEMCLOSEBRACKETS = 0xDD
    OEMQUOTES = 0xDE
    OEM8 = 0xDF
    OEMBACKSLASH = 0xE2
    PROCESSKEY = 0xE5
    OEMCOPY = 0xF2
    OEMAUTO = 0xF3
    OEMENLW = 0xF4
    ATTN = 0xF6
    CRSEL = 0xF7
    EXSEL = 0xF8
    ERASEEOF = 0xF9
    PLAY = 0xFA
    ZOOM = 0xFB
    PA1 = 0xFD
    OEMCLEAR = 0xFE


def _in_range(key: int) -> bool:
    return 0 <= int(key) <= _MAX_KEY


class KeyboardState:
    """Current and previous-frame key states; keys outside 0..0xFE are ignored."""

    def __init__(self) -> None:
        self._current = 0
        self._previous = 0

    def __repr__(self) -> str:
        return f"KeyboardState(pressed={sorted(self.pressed())!r})"

    def pressed(self) -> list[int]:
        """Codes of every key currently held."""
        return [code for code in range(_MAX_KEY + 1) if self._current >> code & 1]

    def key_down(self, key: int) -> None:
        if _in_range(key):
            self._current |= 1 << int(key)

    def key_up(self, key: int) -> None:
        if _in_range(key):
            self._current &= ~(1 << int(key))

    def is_down(self, key: int) -> bool:
        return _in_range(key) and bool(self._current >> int(key) & 1)

    def is_up(self, key: int) -> bool:
        return _in_range(key) and not self._current >> int(key) & 1

    def is_triggered(self, key: int) -> bool:
        """Whether ``key`` is down now but was up at the last snapshot."""
        if not _in_range(key):
            return False
        bit = 1 << int(key)
        return bool(self._current & bit and not self._previous & bit)

    def snapshot(self) -> None:
        """Remember the current state as the previous frame's."""
        self._previous = self._current

    def reset(self) -> None:
        self._current = 0
        self._previous = 0

    def process_message(self, message: int, w_param: int, l_param: int) -> None:
        """Update the state from a window key message."""
        if message == WM_ACTIVATEAPP:
            self.reset()
            return
        if message in (WM_KEYDOWN, WM_SYSKEYDOWN):
            down = True
        elif message in (WM_KEYUP, WM_SYSKEYUP):
            down = False
        else:
            return

        vk = int(w_param)
        if vk == _VK_SHIFT:
            vk = _SHIFT_SCAN_CODES.get((int(l_param) & 0x00FF0000) >> 16, 0)
            if not down:
                # Releasing either shift clears both, in case both were held.
                self.key_up(Key.LEFTSHIFT)
                self.key_up(Key.RIGHTSHIFT)
        elif vk == _VK_CONTROL:
            vk = Key.RIGHTCONTROL if int(l_param) & _EXTENDED_KEY_FLAG else Key.LEFTCONTROL
        elif vk == _VK_MENU:
            vk = Key.RIGHTALT if int(l_param) & _EXTENDED_KEY_FLAG else Key.LEFTALT

        if down:
            self.key_down(vk)
        else:
            self.key_up(vk)

    def to_bytes(self) -> bytes:
        """The current state as a 32-byte bit set, key ``n`` at bit ``n % 8`` of byte ``n // 8``."""
        return self._current.to_bytes(STATE_SIZE, "little")