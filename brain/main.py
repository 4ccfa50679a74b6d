import sys
import logging

import pygame

from cars.car import Car
from cars.sprite import CarSprite, SpriteLoadError, load_car_image, DEFAULT_CAR_IMAGE
from brain.controls import InputState
from brain.game_loop import GameLoop

# --- Constants ---
SCREEN_WIDTH = 500
SCREEN_HEIGHT = 500
HEADER_HEIGHT = 24
STATUS_BAR_HEIGHT = 24
WINDOW_TITLE = "Top-Down Car"
INSTRUCTIONS = "Up: Accelerate, Down: Reverse, Left/Right: Steering, Space: Brakes"

# --- Colors ---
BACKGROUND_COLOR = (200, 200, 200)
ARENA_COLOR = (235, 235, 235)
TEXT_COLOR = (0, 0, 0)

logger = logging.getLogger(__name__)


class GameWindow:
    """
    The pygame side of the game: header with the key help, the arena the car
    drives in, and a status bar with the speed readout.
    """

    def __init__(self, screen: pygame.Surface, sprite: CarSprite, font: pygame.font.Font):
        self.screen = screen
        self.sprite = sprite
        self.font = font
        width, height = screen.get_size()
        self.arena_rect = pygame.Rect(0, HEADER_HEIGHT, width, height - HEADER_HEIGHT - STATUS_BAR_HEIGHT)
        self.speed_text = ""
        self.dirty = True

    def arena_size(self):
        return self.arena_rect.size

    def request_redraw(self, x, y, angle):
        self.sprite.update(x, y, angle)
        self.dirty = True

    def show_speed(self, text):
        if text != self.speed_text:
            self.speed_text = text
            self.dirty = True

    def render(self):
        if not self.dirty:
            return

        self.screen.fill(BACKGROUND_COLOR)
        self.screen.blit(self.font.render(INSTRUCTIONS, True, TEXT_COLOR), (4, 4))

        arena = self.screen.subsurface(self.arena_rect)
        arena.fill(ARENA_COLOR)
        arena.blit(self.sprite.image, self.sprite.rect)

        status_y = self.arena_rect.bottom + 4
        self.screen.blit(self.font.render(f"Speed: {self.speed_text}", True, TEXT_COLOR), (4, status_y))

        pygame.display.flip()
        self.dirty = False


def make_event_handler(inputs: InputState, game: GameLoop):
    def handle_events():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                game.stop()
            elif event.type == pygame.WINDOWFOCUSLOST:
                # Key-up events are lost while unfocused
                inputs.release_all()
            elif inputs.handle_event(event):
                logger.debug(f"Held controls: {sorted(c.name for c in inputs.held())}")
    return handle_events


def main(image_path=DEFAULT_CAR_IMAGE):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    pygame.init()
    pygame.font.init()
    font = pygame.font.SysFont('Arial', 14, bold=True)
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    try:
        image, size = load_car_image(image_path)
    except SpriteLoadError as e:
        logger.error(f"Fatal: {e}")
        pygame.quit()
        sys.exit(1)

    sprite = CarSprite(image.convert_alpha())
    window = GameWindow(screen, sprite, font)

    car = Car()
    inputs = InputState()
    game = GameLoop(car, inputs, window)

    logger.info(f"Car {size[0]}x{size[1]} at ({car.x}, {car.y}), arena {window.arena_size()}")
    window.request_redraw(car.x, car.y, car.angle)
    window.show_speed(car.speed_text())

    game.run(clock, make_event_handler(inputs, game))

    pygame.quit()


if __name__ == "__main__":
    main()
