"""Loaded game resources: textures, fonts, music, sounds and animations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


class Resource(ABC):
    """A loaded asset that can release what it holds."""

    @abstractmethod
    def unload(self):
        """Release the underlying asset."""


@dataclass
class TextureResource(Resource):
    """An image with the size it is meant to be drawn at."""

    texture: Any
    width: int
    height: int

    def unload(self):
        self.texture = None


@dataclass
class FontResource(Resource):
    """A font at a given point size."""

    font: Any
    size: int
    bold: bool = False
    italic: bool = False
    name: str = "DefaultFont"

    def unload(self):
        self.font = None

    def height(self):
        """Line height of the font in pixels, or 0 once unloaded."""
        if self.font is None:
            return 0
        return self.font.get_height()


@dataclass
class MusicResource(Resource):
    """A music track with its playback volume."""

    music: Any
    volume: float = 1.0

    def unload(self):
        self.music = None


@dataclass
class SoundResource(Resource):
    """A sound effect with its playback volume."""

    sound: Any
    volume: float = 1.0

    def unload(self):
        self.sound = None


@dataclass
class Frame:
    """Sprite-sheet description of an animation."""

    texture: Any
    x: int
    y: int
    w: int
    h: int
    current_frame: int
    total_frames: int
    frame_duration: float


@dataclass
class Animation:
    """An animation built from a sprite-sheet frame description."""

    frame: Optional[Frame]


@dataclass
class AnimationResource(Resource):
    """Holds a loaded animation."""

    animation: Optional[Animation]

    def unload(self):
        self.animation = None