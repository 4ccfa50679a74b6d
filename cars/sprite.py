# drawing side of the car: the bitmap, and how it is rotated and placed on screen
# the kinematics in car.py never touch pygame surfaces

import os
import logging

import pygame

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")
DEFAULT_CAR_IMAGE = os.path.join(ASSETS_DIR, "car.bmp")


class SpriteLoadError(Exception):
    """The car image is missing or could not be decoded."""


def load_car_image(path=DEFAULT_CAR_IMAGE):
    """Loads the car bitmap. Returns (surface, (width, height))."""
    try:
        image = pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        raise SpriteLoadError(f"Could not load car image {path!r}: {e}") from e

    logger.info(f"Car image loaded from: {path} ({image.get_width()}x{image.get_height()})")
    return image, image.get_size()


class CarSprite(pygame.sprite.Sprite):
    """
    Draws the car bitmap at a top-left (x, y), rotated about its own centre.
    """
    def __init__(self, image: pygame.Surface):
        super().__init__()

        self.original_image = image
        self.image = image
        self.rect = self.image.get_rect()
        self.angle = None

    def update(self, x, y, angle):
        """Re-rotates the bitmap for the given heading and re-centres the rect."""
        # The unrotated bitmap sits with its top-left at (x, y); rotation keeps that centre
        center = (x + self.original_image.get_width() / 2,
                  y + self.original_image.get_height() / 2)

        if angle != self.angle:
            self.image = pygame.transform.rotate(self.original_image, angle)
            self.angle = angle
        self.rect = self.image.get_rect(center=center)
