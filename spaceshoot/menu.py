"""A vertical menu of text items drawn over banner textures."""

import pygame

from .utils import render_text_center


class MenuItem:
    """One menu entry; its banner is centred in a span of width ``x``."""

    def __init__(self, texture, text, font, x, y, width, height, normal_color, selected_color):
        self.texture = texture
        self.text = text
        self.font = font
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.normal_color = normal_color
        self.selected_color = selected_color
        self.selected = False

    @property
    def rect(self):
        """Area covered by the item's banner."""
        tex_w, tex_h = self.texture.width, self.texture.height
        return pygame.Rect(int((self.x - tex_w) / 2), self.y - 2, tex_w, tex_h)

    @property
    def color(self):
        return self.selected_color if self.selected else self.normal_color

    def render(self, surface):
        """Draw the banner and the text; return the banner area."""
        rect = self.rect
        if self.texture.texture is not None:
            surface.blit(pygame.transform.scale(self.texture.texture, rect.size), rect)
        render_text_center(surface, self.font.font, self.text, self.x, self.y, self.color)
        return rect

    def hit_test(self, x, y):
        """Select the item if ``(x, y)`` lies on it, edges included, else deselect it."""
        rect = self.rect
        self.selected = rect.x <= x <= rect.x + rect.w and rect.y <= y <= rect.y + rect.h
        return self.selected

    def select(self):
        self.selected = True

    def deselect(self):
        self.selected = False


class Menu:
    """An ordered list of items with exactly one highlighted entry."""

    def __init__(self, item_texts):
        self._item_texts = list(item_texts)
        self._items = []
        self._current = 0
        self.previous_index = 0

    @property
    def items(self):
        return list(self._items)

    @property
    def item_texts(self):
        return list(self._item_texts)

    @property
    def current_index(self):
        return self._current

    def add_menu_item(self, texture, text, font, x, y, width, height, normal_color, selected_color):
        """Append a new item and return it."""
        item = MenuItem(texture, text, font, x, y, width, height, normal_color, selected_color)
        self._items.append(item)
        return item

    def _highlight_current(self):
        for item in self._items:
            item.deselect()
        if self._items:
            self._items[self._current].select()

    def select_at(self, x, y):
        """Select the item under ``(x, y)``; return its index, or -1 on a miss."""
        hit = -1
        for index, item in enumerate(self._items):
            if item.hit_test(x, y):
                hit = index
                self._current = index
        self._highlight_current()
        return hit

    def select_up(self):
        """Move the highlight up, wrapping to the last item."""
        if self._items:
            self._current = (self._current - 1) % len(self._items)
            self._highlight_current()

    def select_down(self):
        """Move the highlight down, wrapping to the first item."""
        if self._items:
            self._current = (self._current + 1) % len(self._items)
            self._highlight_current()

    def render(self, surface):
        for item in self._items:
            item.render(surface)