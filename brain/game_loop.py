import logging

from cars.car import Car
from brain.controls import InputState

logger = logging.getLogger(__name__)

# --- CONFIGURATION: TICKS ---
CONTROL_PERIOD_MS = 20
PHYSICS_PERIOD_MS = 10
TURN_STEP_DEGREES = 5
MAX_FRAME_MS = 250  # longest stretch of simulated time a single frame may cover
FPS = 60


class GameLoop:
    """
    Drives the car from one thread.

    Two fixed-period ticks share the car: the control tick reads the held
    keys and applies steering and throttle, the physics tick applies rolling
    resistance and moves the car. `advance` runs every tick that falls due in
    time order, physics first when both land on the same instant, so there is
    never more than one writer touching the car at a time.

    `presentation` needs `arena_size()`, `request_redraw(x, y, angle)`,
    `show_speed(text)` and `render()`.
    """

    def __init__(self, car: Car, inputs: InputState, presentation,
                 control_period_ms=CONTROL_PERIOD_MS, physics_period_ms=PHYSICS_PERIOD_MS):
        self.car = car
        self.inputs = inputs
        self.presentation = presentation
        self.control_period_ms = control_period_ms
        self.physics_period_ms = physics_period_ms

        self.now_ms = 0
        self.next_control_ms = control_period_ms
        self.next_physics_ms = physics_period_ms
        self.running = False

    def control_tick(self):
        inputs = self.inputs
        car = self.car
        duration = self.control_period_ms

        # Both may be held, which cancels out
        if inputs.turn_left:
            car.turn(TURN_STEP_DEGREES)
        if inputs.turn_right:
            car.turn(-TURN_STEP_DEGREES)

        if inputs.brake:
            car.apply_brakes(duration)
        elif inputs.throttle_forward:
            car.accelerate(duration)
        elif inputs.throttle_reverse:
            car.accelerate(duration, -1)

        self.presentation.request_redraw(car.x, car.y, car.angle)
        self.presentation.show_speed(car.speed_text())

    def physics_tick(self):
        duration = self.physics_period_ms
        self.car.apply_rolling_deceleration(duration)
        self.car.integrate_position(duration, self.presentation.arena_size())

    def advance(self, elapsed_ms):
        """Moves simulated time forward by `elapsed_ms` and runs every tick due in that window."""
        elapsed_ms = max(0, min(elapsed_ms, MAX_FRAME_MS))
        target = self.now_ms + elapsed_ms
        ticks = 0

        while min(self.next_control_ms, self.next_physics_ms) <= target:
            if self.next_physics_ms <= self.next_control_ms:
                self.now_ms = self.next_physics_ms
                self.physics_tick()
                self.next_physics_ms += self.physics_period_ms
            else:
                self.now_ms = self.next_control_ms
                self.control_tick()
                self.next_control_ms += self.control_period_ms
            ticks += 1

        self.now_ms = target
        return ticks

    def stop(self):
        if self.running:
            logger.info("Shutdown requested")
        self.running = False

    def run(self, clock, handle_events, fps=FPS):
        """
        Frame loop: wait for the next frame, pump events, advance the ticks, draw.
        `handle_events` is called once per frame and may call `stop()`.
        Returns once stopped; a KeyboardInterrupt counts as a stop request.
        """
        self.running = True
        logger.info(f"Game loop started (control {self.control_period_ms}ms, physics {self.physics_period_ms}ms)")
        try:
            while self.running:
                elapsed = clock.tick(fps)
                handle_events()
                if not self.running:
                    break
                self.advance(elapsed)
                self.presentation.render()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            self.stop()
        logger.info(f"Game loop stopped after {self.now_ms}ms of simulated time")
