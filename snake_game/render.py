"""
Draws a Game onto a pygame surface. Knows nothing about the rules.
"""
import pygame

from .config import BG


def draw_square(surface, shape):
    rect = pygame.Rect(shape.x, shape.y, shape.size, shape.size)
    if len(shape.color) == 4 and shape.color[3] < 255:
        # translucent fill, blended over whatever is underneath
        tile = pygame.Surface(rect.size, pygame.SRCALPHA)
        tile.fill(shape.color)
        surface.blit(tile, rect)
    else:
        pygame.draw.rect(surface, shape.color[:3], rect)


def render(surface, game):
    surface.fill(BG)
    for shape in game.drawables():
        draw_square(surface, shape)
