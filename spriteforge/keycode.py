"""Virtual key codes for keyboard input."""

from enum import IntEnum


class Keycode(IntEnum):
    """Keyboard keys by their virtual key code."""

    SPACE = 0x20
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28

    TAB = 0x09
    CAPS_LOCK = 0x14
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LEFT_ALT = 0xA4
    RIGHT_ALT = 0xA5
    LEFT_WINDOWS = 0x5B
    RIGHT_WINDOWS = 0x5C
    ENTER = 0x0D
    BACKSPACE = 0x08
    ESCAPE = 0x1B

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

    ALPHA0 = 0x30
    ALPHA1 = 0x31
    ALPHA2 = 0x32
    ALPHA3 = 0x33
    ALPHA4 = 0x34
    ALPHA5 = 0x35
    ALPHA6 = 0x36
    ALPHA7 = 0x37
    ALPHA8 = 0x38
    ALPHA9 = 0x39

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

    OEM_1 = 0xBA  # ;:
    OEM_PLUS = 0xBB  # +=
    OEM_COMMA = 0xBC  # ,<
    OEM_MINUS = 0xBD  # -_
    OEM_PERIOD = 0xBE  # .>
    OEM_2 = 0xBF  # /?
    OEM_3 = 0xC0  # `~
    OEM_4 = 0xDB  # [{
    OEM_5 = 0xDC  # \|
    OEM_6 = 0xDD  # ]}
    OEM_7 = 0xDE  # '"