"""The title menu: pick a screen with the arrow keys, Enter or the mouse."""

import logging
from pathlib import Path

import pygame

from .config_scenes import HelpScene, LevelScene, OptionScene, QuitScene, SettingScene
from .menu import Menu
from .resource_manager import ResourceError
from .scene import Scene
from .utils import read_tags_from_file, render_text

_log = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path("..", "..", "data")

OPTION_TEXTS = ("Play", "Option", "Setting", "Help", "Quit")
OPTION_SCENES = ("LevelScene", "OptionScene", "SettingScene", "HelpScene", "QuitScene")
OPTION_Y = 100
OPTION_COLOR = (255, 255, 255, 255)
SELECTED_COLOR = (255, 0, 0, 255)

TITLE_TEXT = "Space Shoot"
TITLE_COLOR = (55, 149, 135, 255)
VERSION_TEXT = "Version: 1.0.1"
VERSION_COLOR = (175, 221, 255, 255)

BANNER_TAG = "banner_modern"
ITEM_FONT_TAG = "Silver-48px"
MAIN_FONT_TAG = "VonwaonBitmap-16px"
SELECT_SOUND = "menu_select"
MENU_MUSIC = "bg_menu_scene"

_SUB_SCENES = {
    "LevelScene": LevelScene,
    "HelpScene": HelpScene,
    "OptionScene": OptionScene,
    "SettingScene": SettingScene,
    "QuitScene": QuitScene,
}


def _play_sound(sound):
    if sound is not None and pygame.mixer.get_init():
        pygame.mixer.Channel(0).play(sound)


def _play_music(track):
    if track is None or not pygame.mixer.get_init():
        return
    try:
        pygame.mixer.music.load(track)
        pygame.mixer.music.play(-1)
    except pygame.error as exc:
        _log.error("Failed to play music %s: %s", track, exc)


class MenuScene(Scene):
    """The main menu, leading to the level and the configuration screens."""

    def __init__(self, context, data_dir=DEFAULT_DATA_DIR):
        super().__init__(context)
        self._data_dir = Path(data_dir)
        self.menu = Menu(OPTION_TEXTS)
        self.main_font = None
        self.layout_tags = []

    def update(self, delta_time):
        """The menu has nothing that changes over time."""

    def render(self, surface):
        """Draw the title, the version line and the menu."""
        font = self.main_font.font if self.main_font is not None else None
        if font is None:
            _log.error("No main font to draw the menu title with")
        else:
            render_text(
                surface, font, TITLE_TEXT,
                self.window_width // 2 - 200, self.window_height // 4 - 100, 400, 100,
                TITLE_COLOR,
            )
            render_text(
                surface, font, VERSION_TEXT,
                self.window_width - 404, self.window_height - 24, 400, 20,
                VERSION_COLOR,
            )
        self.menu.render(surface)

    def _open_current(self):
        sound = self.sound_effect_map.get(SELECT_SOUND)
        self.scene_manager.change_scene(OPTION_SCENES[self.menu.current_index])
        _play_sound(sound)

    def handle_input(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self.menu.select_up()
                _play_sound(self.sound_effect_map.get(SELECT_SOUND))
            elif event.key == pygame.K_DOWN:
                self.menu.select_down()
                _log.debug("Down key pressed")
                _play_sound(self.sound_effect_map.get(SELECT_SOUND))
            elif event.key == pygame.K_LEFT:
                _log.debug("Left key pressed")
            elif event.key == pygame.K_RIGHT:
                _log.debug("Right key pressed")
            elif event.key == pygame.K_RETURN:
                _log.debug("Enter key pressed")
                self._open_current()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            _log.debug("Mouse button pressed at (%s, %s)", x, y)
            selected = self.menu.select_at(x, y)
            if selected != -1:
                _log.debug("Selected menu item: %s", selected)
                self._open_current()

    def on_enter(self):
        """Register the sub-screens, collect audio and build the menu.

        Raises ResourceError when the banner texture or the item font is missing.
        """
        _log.debug("Menu scene entered")
        for name, scene_class in _SUB_SCENES.items():
            self.scene_manager.register_scene(
                name, lambda scene_class=scene_class: scene_class(self._context)
            )

        menu_dir = self._data_dir / "scenes" / "menu"
        self.layout_tags = read_tags_from_file(menu_dir / "menu_scene.txt")
        music_tags = read_tags_from_file(menu_dir / "menu_music.txt")
        sound_tags = read_tags_from_file(menu_dir / "menu_sound.txt")

        all_music = self.resource_manager.music
        for tag in music_tags:
            resource = all_music.get(tag)
            if resource is None:
                _log.error("Music not found: %s", tag)
                continue
            self.music.append(resource.music)
            self.music_map.setdefault(tag, resource.music)
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(1.0)

        all_sounds = self.resource_manager.sounds
        for tag in sound_tags:
            resource = all_sounds.get(tag)
            if resource is None:
                _log.error("Sound not found: %s", tag)
                continue
            self.sound_effects.append(resource.sound)
            self.sound_effect_map.setdefault(tag, resource.sound)
        if pygame.mixer.get_init():
            pygame.mixer.Channel(0).set_volume(1.0)

        texture = self.resource_manager.textures.get(BANNER_TAG)
        if texture is None:
            raise ResourceError(f"Texture not found: {BANNER_TAG}")
        fonts = self.resource_manager.fonts
        font = fonts.get(ITEM_FONT_TAG)
        if font is None:
            raise ResourceError(f"Font not found: {ITEM_FONT_TAG}")
        self.main_font = fonts.get(MAIN_FONT_TAG)
        if self.main_font is None:
            _log.error("Failed to load main font")

        offset = 0
        for text in OPTION_TEXTS:
            self.menu.add_menu_item(
                texture, text, font, self.window_width, OPTION_Y * 3 + offset,
                100, 100, OPTION_COLOR, SELECTED_COLOR,
            )
            offset += font.height() + 20
        self.menu.items[self.menu.current_index].select()

        _play_music(self.music_map.get(MENU_MUSIC))

    def on_exit(self):
        _log.debug("Menu scene exited")
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self.clean()
        self.menu = Menu(OPTION_TEXTS)