# this is the car itself, it only knows how it moves: speed, heading and where it ends up
# deciding *when* to accelerate, brake or turn is left to the brain (see brain/game_loop.py)

import logging
from math import cos, sin, radians

import pygame

logger = logging.getLogger(__name__)

# --- CONFIGURATION: PHYSICS ---
ACCELERATION = 1000  # px/s^2
MAX_SPEED = 500  # px/s
BRAKE_RATE = 10  # brakes decelerate at this multiple of ACCELERATION
ROLLING_RESISTANCE_COEFFICIENT = 0.03  # asphalt
GRAVITY = 9.81
ROLLING_DECELERATION = ROLLING_RESISTANCE_COEFFICIENT * GRAVITY

# --- CONFIGURATION: ARENA ---
SPRITE_FOOTPRINT = 50  # px kept clear at the right and bottom edges
START_X = 100
START_Y = 100

STATIONARY_TURN_FACTOR = 5


def format_speed(speed: float) -> str:
    return f"{speed}px/s"


class Car:
    """
    Represents the player's car.
    Holds position, heading and speed and integrates them over time.
    It does not own a surface or a thread; callers drive it tick by tick.
    """

    def __init__(self, x=START_X, y=START_Y, angle=0.0, acceleration=ACCELERATION,
                 max_speed=MAX_SPEED, brake_rate=BRAKE_RATE,
                 rolling_deceleration=ROLLING_DECELERATION):
        self.position = pygame.math.Vector2(x, y)
        # Degrees, 0 along +x, counter-clockwise positive
        self.angle = float(angle)
        self.speed = 0.0

        self.acceleration = float(acceleration)
        self.max_speed = float(max_speed)
        self.brake_rate = brake_rate
        self.rolling_deceleration = float(rolling_deceleration)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def _set_speed(self, speed: float):
        # Only the car may set its speed directly, and never to max_speed or beyond.
        if abs(speed) < self.max_speed:
            self.speed = speed

    def accelerate(self, duration_ms: float, factor: float = 1):
        """
        Accelerates for `duration_ms` milliseconds, scaled by `factor`.
        A request that would push |speed| past max_speed is rejected outright:
        the speed stays where it was, it is not clamped.
        """
        new_speed = self.speed + factor * self.acceleration * (duration_ms / 1000)
        if abs(new_speed) <= self.max_speed:
            self.speed = new_speed
        else:
            logger.debug("Rejected speed %.2f (max %.2f)", new_speed, self.max_speed)

    def apply_brakes(self, duration_ms: float):
        """Brakes toward zero. A single call can stop the car but never reverse it."""
        if self.speed < 0:  # reversing
            self.accelerate(duration_ms, self.brake_rate)
            if self.speed > 0:
                self._set_speed(0)
        elif self.speed > 0:  # moving forwards
            self.accelerate(duration_ms, -self.brake_rate)
            if self.speed < 0:
                self._set_speed(0)

    def turn(self, delta_degrees: float):
        """
        Turns relative to the current heading.
        Steering inverts when reversing. A parked car can still be nudged,
        at five times the requested angle.
        """
        if self.speed > 0:
            self.angle += delta_degrees
        elif self.speed < 0:
            self.angle -= delta_degrees
        else:
            self.angle += STATIONARY_TURN_FACTOR * delta_degrees

        self.angle %= 360
        if self.angle >= 360:  # float rounding on tiny negatives
            self.angle = 0.0

    def apply_rolling_deceleration(self, duration_ms: float):
        """Rolling resistance slows the car every tick; it can stop it but not reverse it."""
        amount = self.rolling_deceleration * (duration_ms / 10)
        if abs(self.speed) - amount < 0:
            self._set_speed(0)
            return

        if self.speed < 0:
            self._set_speed(self.speed + amount)
        elif self.speed > 0:
            self._set_speed(self.speed - amount)

    def displacement(self, duration_ms: float):
        """Returns (dx, dy) in screen space for travelling `duration_ms` at the current speed and heading."""
        sector = int(self.angle // 90)
        theta = radians(self.angle % 90)
        distance = self.speed * (duration_ms / 1000)

        if sector == 0:
            return cos(theta) * distance, -sin(theta) * distance
        if sector == 1:
            return -sin(theta) * distance, -cos(theta) * distance
        if sector == 2:
            return -cos(theta) * distance, sin(theta) * distance
        return sin(theta) * distance, cos(theta) * distance

    def integrate_position(self, duration_ms: float, bounds):
        """
        Moves the car for `duration_ms` inside an arena of `bounds` = (width, height).
        If the move would leave the arena, the car stops dead where it is.
        """
        width, height = bounds
        dx, dy = self.displacement(duration_ms)
        new_x = self.position.x + dx
        new_y = self.position.y + dy

        if (new_x < 0 or new_x > width - SPRITE_FOOTPRINT or
                new_y < 0 or new_y > height - SPRITE_FOOTPRINT):
            self._set_speed(0)
        else:
            self.position.update(new_x, new_y)

    def speed_text(self) -> str:
        return format_speed(self.speed)
