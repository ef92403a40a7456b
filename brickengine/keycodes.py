"""Engine-level input key codes."""

from enum import IntEnum, auto


class InputKeyCode(IntEnum):
    """Keys, mouse buttons and controller inputs known to the engine."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count

    # Numbers
    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()

    # Letters
    KEY_A = auto()
    KEY_B = auto()
    KEY_C = auto()
    KEY_D = auto()
    KEY_E = auto()
    KEY_F = auto()
    KEY_G = auto()
    KEY_H = auto()
    KEY_I = auto()
    KEY_J = auto()
    KEY_K = auto()
    KEY_L = auto()
    KEY_M = auto()
    KEY_N = auto()
    KEY_O = auto()
    KEY_P = auto()
    KEY_Q = auto()
    KEY_R = auto()
    KEY_S = auto()
    KEY_T = auto()
    KEY_U = auto()
    KEY_V = auto()
    KEY_W = auto()
    KEY_X = auto()
    KEY_Y = auto()
    KEY_Z = auto()

    # Arrow keys
    KEY_RIGHT = auto()
    KEY_LEFT = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()

    # Special
    KEY_LSHIFT = auto()
    KEY_LCTRL = auto()
    KEY_RSHIFT = auto()
    KEY_RCTRL = auto()
    KEY_SPACE = auto()
    KEY_ENTER = auto()
    KEY_BACKSPACE = auto()
    KEY_PAGEDOWN = auto()
    KEY_PAGEUP = auto()
    KEY_HOME = auto()
    KEY_ESCAPE = auto()

    # Function keys
    KEY_F1 = auto()
    KEY_F2 = auto()
    KEY_F3 = auto()
    KEY_F4 = auto()
    KEY_F5 = auto()
    KEY_F6 = auto()
    KEY_F7 = auto()
    KEY_F8 = auto()
    KEY_F9 = auto()
    KEY_F10 = auto()
    KEY_F11 = auto()
    KEY_F12 = auto()

    # Mouse
    KEY_MOUSE_LEFT = auto()
    KEY_MOUSE_RIGHT = auto()

    # Controller
    CONTROLLER_X_AXIS = auto()
    CONTROLLER_Y_AXIS = auto()
    CONTROLLER_A = auto()
    CONTROLLER_B = auto()
    CONTROLLER_X = auto()
    CONTROLLER_Y = auto()
    CONTROLLER_START = auto()
    CONTROLLER_SELECT = auto()
    CONTROLLER_DPAD_UP = auto()
    CONTROLLER_DPAD_LEFT = auto()
    CONTROLLER_DPAD_RIGHT = auto()
    CONTROLLER_DPAD_DOWN = auto()
    CONTROLLER_SHOULDER_LEFT = auto()
    CONTROLLER_SHOULDER_RIGHT = auto()