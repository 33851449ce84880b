"""The game engine: window, audio, resources and the frame loop."""

import argparse
import logging
from pathlib import Path

import pygame

from .menu_scene import MenuScene
from .resource_manager import ResourceError, ResourceManager
from .scene_manager import SceneManager

_log = logging.getLogger(__name__)

DEFAULT_RESOURCE_PATH = Path("..", "..", "data", "resources.json")
DEFAULT_ICON_PATH = Path("..", "..", "assets", "image", "icon", "app-icon.bmp")
WINDOW_TITLE = "Space Shoot"
FPS = 60
AUDIO_CHANNELS = 32


class Engine:
    """Owns the window and the managers, and runs the frame loop.

    The engine is also the context its scenes read the window size,
    the surface and the managers from.
    """

    def __init__(self, resource_path=DEFAULT_RESOURCE_PATH, width=1280, height=720):
        self.resource_path = Path(resource_path)
        self.window_width = width
        self.window_height = height
        self.resource_manager = ResourceManager()
        self.scene_manager = SceneManager()
        self.surface = None
        self.running = False
        self.frame_time = 1000 // FPS
        self.delta_time = 0.0

    def init(self):
        """Open the window and audio, load resources and enter the menu."""
        self.running = True
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
            pygame.display.set_icon(pygame.image.load(DEFAULT_ICON_PATH))
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

        try:
            self.resource_manager.load_all(self.resource_path)
        except ResourceError as exc:
            _log.error("Failed to load resources: %s", exc)
            print("Failed to load resources")
            self.running = False
            return

        data_dir = self.resource_path.parent
        self.scene_manager.register_scene("MenuScene", lambda: MenuScene(self, data_dir=data_dir))
        self.scene_manager.change_scene("MenuScene")

    def run(self):
        """Initialise, then process frames until the window is closed."""
        self.init()
        try:
            while self.running:
                frame_start = pygame.time.get_ticks()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                        break
                    self.handle_events(event)
                self.update(self.delta_time)
                self.render()

                elapsed = pygame.time.get_ticks() - frame_start
                if elapsed < self.frame_time:
                    pygame.time.delay(self.frame_time - elapsed)
                    self.delta_time = self.frame_time / 1000.0
                else:
                    self.delta_time = elapsed / 1000.0
        finally:
            self.quit()

    def update(self, delta_time):
        scene = self.scene_manager.current_scene
        if scene is not None:
            scene.update(delta_time)

    def render(self):
        self.surface.fill((0, 0, 0))
        scene = self.scene_manager.current_scene
        if scene is not None:
            scene.render(self.surface)
        pygame.display.flip()

    def handle_events(self, event):
        scene = self.scene_manager.current_scene
        if scene is not None:
            scene.handle_input(event)

    def quit(self):
        """Close audio and the window."""
        self.running = False
        self.surface = None
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="spaceshoot", description="Run the game.")
    parser.add_argument("--resources", default=str(DEFAULT_RESOURCE_PATH),
                        help="top-level resource file")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args(argv)
    Engine(args.resources, args.width, args.height).run()
    return 0