import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Headless pygame: event queue and fonts, no window."""
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()
