import pygame
from enum import Enum, auto


class Control(Enum):
    STEER_LEFT = auto()
    STEER_RIGHT = auto()
    THROTTLE_FORWARD = auto()
    THROTTLE_REVERSE = auto()
    BRAKE = auto()


# --- CONFIGURATION: KEY BINDINGS ---
KEY_BINDINGS = {
    pygame.K_LEFT: Control.STEER_LEFT,
    pygame.K_RIGHT: Control.STEER_RIGHT,
    pygame.K_UP: Control.THROTTLE_FORWARD,
    pygame.K_DOWN: Control.THROTTLE_REVERSE,
    pygame.K_SPACE: Control.BRAKE,
}


class InputState:
    """
    Which controls are currently held down.
    Written by key events, read once per control tick.
    """

    def __init__(self, bindings=None):
        self.bindings = KEY_BINDINGS if bindings is None else bindings
        self.turn_left = False
        self.turn_right = False
        self.throttle_forward = False
        self.throttle_reverse = False
        self.brake = False

    def set_control(self, control: Control, pressed: bool):
        if control == Control.STEER_LEFT:
            self.turn_left = pressed
        elif control == Control.STEER_RIGHT:
            self.turn_right = pressed
        elif control == Control.THROTTLE_FORWARD:
            self.throttle_forward = pressed
        elif control == Control.THROTTLE_REVERSE:
            self.throttle_reverse = pressed
        elif control == Control.BRAKE:
            self.brake = pressed

    def set_key(self, key_code: int, pressed: bool) -> bool:
        """Updates the flag bound to `key_code`. Unbound keys are ignored; returns False for them."""
        control = self.bindings.get(key_code)
        if control is None:
            return False
        self.set_control(control, bool(pressed))
        return True

    def handle_event(self, event) -> bool:
        if event.type == pygame.KEYDOWN:
            return self.set_key(event.key, True)
        if event.type == pygame.KEYUP:
            return self.set_key(event.key, False)
        return False

    def release_all(self):
        for control in Control:
            self.set_control(control, False)

    def held(self):
        """The set of controls currently held, logged when a key changes it."""
        flags = {
            Control.STEER_LEFT: self.turn_left,
            Control.STEER_RIGHT: self.turn_right,
            Control.THROTTLE_FORWARD: self.throttle_forward,
            Control.THROTTLE_REVERSE: self.throttle_reverse,
            Control.BRAKE: self.brake,
        }
        return {control for control, active in flags.items() if active}
