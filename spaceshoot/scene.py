"""Base classes for scenes and components."""

from abc import ABC, abstractmethod


class Component(ABC):
    """Something attached to an entity that is updated every frame."""

    def __init__(self):
        self.has_component = False

    @abstractmethod
    def update(self):
        """Advance the component by one frame."""


class Scene(ABC):
    """A screen of the game.

    ``context`` supplies ``resource_manager``, ``scene_manager``,
    ``window_width``, ``window_height`` and ``surface``.
    """

    def __init__(self, context):
        self._context = context
        self.sound_effects = []
        self.music = []
        self.sound_effect_map = {}
        self.music_map = {}
        self.scene_font = None

    @property
    def window_width(self):
        return self._context.window_width

    @property
    def window_height(self):
        return self._context.window_height

    @property
    def surface(self):
        return self._context.surface

    @property
    def resource_manager(self):
        return self._context.resource_manager

    @property
    def scene_manager(self):
        return self._context.scene_manager

    @abstractmethod
    def update(self, delta_time):
        """Advance the scene by ``delta_time`` seconds."""

    @abstractmethod
    def render(self, surface):
        """Draw the scene onto ``surface``."""

    @abstractmethod
    def handle_input(self, event):
        """React to an input event."""

    def on_enter(self):
        """Called when the scene becomes the current one."""

    def on_exit(self):
        """Called when the scene stops being the current one."""

    def clean(self):
        """Forget the sounds and music the scene collected."""
        self.sound_effects.clear()
        self.sound_effect_map.clear()
        self.music.clear()
        self.music_map.clear()