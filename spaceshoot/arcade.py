"""The arcade shooter's game object: window, star background, text and high scores."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import pygame

from .objects import Background, FontType

_log = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("..", "..", "data", "score.dat")
DEFAULT_ASSET_DIR = Path("..", "..", "assets")
WINDOW_TITLE = "Space Shoot"
FPS = 60
AUDIO_CHANNELS = 32
MAX_SCORE_ENTRIES = 8
FAR_STARS_SPEED = 20
TITLE_FONT_SIZE = 32

FONT_FILES = {
    FontType.SILVER: "Silver.ttf",
    FontType.VONWAON: "VonwaonBitmap-16px.ttf",
}


class ScoreBoard:
    """The best scores, highest first; equal scores keep the order they arrived in."""

    def __init__(self, capacity=MAX_SCORE_ENTRIES):
        self.capacity = capacity
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())

    def add(self, score, name):
        """Insert an entry, dropping the lowest one when the board is over capacity."""
        index = next(
            (i for i, (existing, _) in enumerate(self._entries) if existing < score),
            len(self._entries),
        )
        self._entries.insert(index, (score, name))
        if len(self._entries) > self.capacity:
            self._entries.pop()

    def entries(self):
        """The ``(score, name)`` pairs, highest score first."""
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def save(self, path):
        """Write one ``score name`` line per entry. Raises OSError on failure."""
        with open(path, "w", encoding="utf-8") as file:
            for score, name in self._entries:
                file.write(f"{score} {name}\n")

    def load(self, path):
        """Replace the entries with the whitespace-separated pairs in ``path``.

        Reading stops at the first score that is not an integer.
        Raises OSError when the file cannot be read.
        """
        with open(path, encoding="utf-8") as file:
            tokens = file.read().split()
        self._entries.clear()
        for score_token, name in zip(tokens[::2], tokens[1::2]):
            try:
                score = int(score_token)
            except ValueError:
                break
            self.add(score, name)


class ArcadeScene(ABC):
    """A screen of the arcade shooter, driven by a :class:`Game`."""

    def __init__(self, game):
        self.game = game

    @abstractmethod
    def init(self):
        """Prepare the scene when it becomes current."""

    @abstractmethod
    def update(self, delta_time):
        """Advance the scene by ``delta_time`` seconds."""

    @abstractmethod
    def render(self):
        """Draw the scene onto the game's surface."""

    @abstractmethod
    def clean(self):
        """Release what the scene holds before it is replaced."""

    @abstractmethod
    def handle_event(self, event):
        """React to an input event."""


class Game:
    """Window, scrolling stars, text drawing, high scores and the frame loop."""

    def __init__(self, width=600, height=800, data_path=DEFAULT_DATA_PATH,
                 asset_dir=DEFAULT_ASSET_DIR):
        self.window_width = width
        self.window_height = height
        self.data_path = Path(data_path)
        self.asset_dir = Path(asset_dir)
        self.fps = FPS
        self.frame_time = 1000 // FPS
        self.delta_time = 0.0
        self.running = True
        self.is_full_screen = False
        self.score = 0
        self.score_board = ScoreBoard()
        self.surface = None
        self.current_scene = None
        self.title_font = None
        self.text_font = None
        self.near_stars = Background()
        self.far_stars = Background(speed=FAR_STARS_SPEED)
        self._fonts = {}

    def _font(self, font_type, size):
        key = (font_type, size)
        if key in self._fonts:
            return self._fonts[key]
        if not pygame.font.get_init():
            pygame.font.init()
        path = self.asset_dir / "font" / FONT_FILES[font_type]
        try:
            font = pygame.font.Font(str(path), size)
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load font %s: %s", path, exc)
            return None
        self._fonts[key] = font
        return font

    def _load_background(self, file_name, layer):
        path = self.asset_dir / "image" / file_name
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load texture %s: %s", path, exc)
            self.running = False
            return
        width, height = image.get_size()
        layer.width = width // 4
        layer.height = height // 4
        if layer.width > 0 and layer.height > 0:
            layer.texture = pygame.transform.scale(image, (layer.width, layer.height))
        else:
            layer.texture = image

    def init(self, scene):
        """Open the window and audio, load the background, fonts and scores, enter ``scene``."""
        pygame.mixer.pre_init(44100, -16, 2, 2028)
        pygame.init()

        try:
            if not pygame.display.get_init():
                pygame.display.init()
            self.surface = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            _log.error("Window could not be created: %s", exc)
            self.running = False

        try:
            icon = pygame.image.load(str(self.asset_dir / "image" / "icon" / "app-icon.bmp"))
            pygame.display.set_icon(icon)
        except (pygame.error, OSError) as exc:
            _log.info("Failed to load icon: %s", exc)

        if not pygame.font.get_init():
            _log.error("Font system could not initialize")
            self.running = False

        if pygame.mixer.get_init():
            pygame.mixer.set_num_channels(AUDIO_CHANNELS)
            pygame.mixer.music.set_volume(0.25)
            for channel in range(AUDIO_CHANNELS):
                pygame.mixer.Channel(channel).set_volume(0.125)
        else:
            _log.error("Audio could not be opened")
            self.running = False

        self._load_background("Stars-A.png", self.near_stars)
        self._load_background("Stars-B.png", self.far_stars)

        self.title_font = self._font(FontType.VONWAON, TITLE_FONT_SIZE)
        self.text_font = self._font(FontType.VONWAON, TITLE_FONT_SIZE)
        if self.title_font is None or self.text_font is None:
            self.running = False

        try:
            self.score_board.load(self.data_path)
        except OSError as exc:
            _log.error("Failed to load scores from %s: %s", self.data_path, exc)

        self.current_scene = scene
        scene.init()

    def run(self):
        """Process frames until the game stops, then clean up."""
        try:
            while self.running:
                frame_start = pygame.time.get_ticks()
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(self.delta_time)
                self.render()

                elapsed = pygame.time.get_ticks() - frame_start
                if elapsed < self.frame_time:
                    pygame.time.delay(self.frame_time - elapsed)
                    self.delta_time = self.frame_time / 1000.0
                else:
                    self.delta_time = elapsed / 1000.0
        finally:
            self.clean()

    def clean(self):
        """Save the scores, clean the current scene and shut pygame down."""
        try:
            self.score_board.save(self.data_path)
        except OSError as exc:
            _log.error("Failed to save scores to %s: %s", self.data_path, exc)
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.near_stars.texture = None
        self.far_stars.texture = None
        self.title_font = None
        self.text_font = None
        self._fonts.clear()
        self.surface = None
        pygame.quit()

    def update(self, delta_time):
        self.update_background(delta_time)
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def render(self):
        if self.surface is None:
            return
        self.surface.fill((0, 0, 0))
        self.render_background()
        if self.current_scene is not None:
            self.current_scene.render()
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def change_scene(self, scene):
        """Clean the current scene and enter ``scene``."""
        if self.current_scene is not None:
            self.current_scene.clean()
        self.current_scene = scene
        scene.init()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self.is_full_screen = not self.is_full_screen
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                flags = pygame.FULLSCREEN if self.is_full_screen else 0
                self.surface = pygame.display.set_mode(
                    (self.window_width, self.window_height), flags
                )
        if self.current_scene is not None:
            self.current_scene.handle_event(event)

    def update_background(self, delta_time):
        self.near_stars.advance(delta_time)
        self.far_stars.advance(delta_time)

    def render_background(self):
        """Tile the far stars, then the near stars, over the whole window."""
        if self.surface is None:
            return
        for layer in (self.far_stars, self.near_stars):
            if layer.texture is None or layer.width <= 0 or layer.height <= 0:
                continue
            for pos_y in range(int(layer.offset), self.window_height, layer.height):
                for pos_x in range(0, self.window_width, layer.width):
                    self.surface.blit(layer.texture, (pos_x, pos_y))

    def _rendered(self, text, font_size, color, font_type):
        font = self._font(font_type, font_size)
        if font is None:
            self.running = False
            return None
        return font.render(text, False, color)

    def render_text_center(self, text, x, y, font_size, color, font_type):
        """Draw ``text`` centred in a span of width ``x``; return its top-right corner."""
        rendered = self._rendered(text, font_size, color, font_type)
        if rendered is None:
            return (0, 0)
        width = rendered.get_width()
        left = int((x - width) / 2)
        if self.surface is not None:
            self.surface.blit(rendered, (left, y))
        return (left + width, y)

    def render_text(self, text, x, y, font_size, color, font_type):
        """Draw ``text`` with its top-left corner at ``(x, y)``."""
        rendered = self._rendered(text, font_size, color, font_type)
        if rendered is not None and self.surface is not None:
            self.surface.blit(rendered, (x, y))

    def render_text_right(self, text, x, y, font_size, color, font_type):
        """Draw ``text`` so that it ends ``x`` pixels from the window's right edge."""
        rendered = self._rendered(text, font_size, color, font_type)
        if rendered is not None and self.surface is not None:
            self.surface.blit(rendered, (self.window_width - x - rendered.get_width(), y))