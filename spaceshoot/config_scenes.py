"""Simple screens that show their name and return on Escape."""

import logging

import pygame

from .scene import Scene
from .utils import render_text_center

_log = logging.getLogger(__name__)

FONT_TAG = "Silver-48px"
TEXT_COLOR = (255, 255, 255, 255)


class TextScene(Scene):
    """A screen that draws its title centred; Escape goes back."""

    title = ""

    def update(self, delta_time):
        """Nothing on this screen changes over time."""

    def render(self, surface):
        """Draw the title at half the window height; return the text area."""
        name = type(self).__name__
        if surface is None:
            _log.error("Surface is null in %s.render", name)
            return None
        if self.scene_font is None:
            _log.error("No font to draw %s with", name)
            return None
        return render_text_center(
            surface, self.scene_font, self.title, self.window_width, self.window_height // 2, TEXT_COLOR
        )

    def handle_input(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.scene_manager.go_back()

    def on_enter(self):
        _log.info("Entering %s", type(self).__name__)
        font = self.resource_manager.fonts.get(FONT_TAG)
        if font is not None:
            _log.info("Font found: %s", FONT_TAG)
            self.scene_font = font.font
        else:
            _log.info("Font not found: %s", FONT_TAG)

    def on_exit(self):
        _log.info("Exiting %s", type(self).__name__)


class LevelScene(TextScene):
    title = "Level Scene"


class OptionScene(TextScene):
    title = "Option Scene"


class SettingScene(TextScene):
    title = "Setting Scene"


class HelpScene(TextScene):
    title = "Help Scene"


class QuitScene(TextScene):
    title = "Quit Scene"