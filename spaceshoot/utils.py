"""Text drawing helpers and tag-list reading."""

import logging

import pygame

_log = logging.getLogger(__name__)


def render_text_center(surface, font, text, x, y, color):
    """Draw ``text`` centred in a span of width ``x`` at row ``y``.

    Returns the rectangle the text was drawn into.
    """
    rendered = font.render(text, False, color)
    width, height = rendered.get_size()
    rect = pygame.Rect(int((x - width) / 2), y, width, height)
    surface.blit(rendered, rect)
    return rect


def render_text(surface, font, text, x, y, w, h, color):
    """Draw ``text`` stretched to the box ``(x, y, w, h)`` and return the box."""
    rendered = font.render(text, False, color)
    scaled = pygame.transform.scale(rendered, (w, h))
    rect = pygame.Rect(x, y, w, h)
    surface.blit(scaled, rect)
    return rect


def read_tags_from_file(file_name):
    """Return the non-empty lines of a text file, or an empty list if it cannot be read."""
    try:
        with open(file_name, encoding="utf-8") as file:
            return [line.rstrip("\n") for line in file if line.rstrip("\n")]
    except OSError:
        _log.error("Could not open file %s", file_name)
        return []