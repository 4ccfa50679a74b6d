import os

# pygame has to run without a real display under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialise pygame once for the whole test run"""
    pygame.init()
    yield
    pygame.quit()
