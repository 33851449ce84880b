"""Loading of game resources described by JSON manifests."""

import json
import logging
from pathlib import Path

import pygame

from .resources import (
    Animation,
    AnimationResource,
    FontResource,
    Frame,
    MusicResource,
    SoundResource,
    TextureResource,
)

_log = logging.getLogger(__name__)


class ResourceError(Exception):
    """A resource manifest is malformed."""


def _load_image(path):
    return pygame.image.load(path)


def _load_font(path, size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_music(path):
    if not Path(path).is_file():
        raise FileNotFoundError(f"No such music file: {path}")
    return str(path)


def _load_sound(path):
    return pygame.mixer.Sound(path)


def _field(entry, key, kind, tag):
    if not isinstance(entry, dict):
        raise ResourceError(f"entry {tag!r} is not an object")
    if key not in entry:
        raise ResourceError(f"entry {tag!r} has no {key!r}")
    value = entry[key]
    if kind is bool:
        valid = isinstance(value, bool)
    elif kind is str:
        valid = isinstance(value, str)
    else:
        valid = isinstance(value, (int, float))
    if not valid:
        raise ResourceError(f"entry {tag!r}: {key!r} must be {kind.__name__}, got {value!r}")
    return kind(value)


class ResourceManager:
    """Keeps every loaded resource by tag; the first load of a tag wins."""

    def __init__(self, texture_loader=None, font_loader=None, music_loader=None, sound_loader=None):
        self._texture_loader = texture_loader or _load_image
        self._font_loader = font_loader or _load_font
        self._music_loader = music_loader or _load_music
        self._sound_loader = sound_loader or _load_sound
        self._textures = {}
        self._fonts = {}
        self._music = {}
        self._sounds = {}
        self._animations = {}

    @property
    def textures(self):
        return dict(self._textures)

    @property
    def fonts(self):
        return dict(self._fonts)

    @property
    def music(self):
        return dict(self._music)

    @property
    def sounds(self):
        return dict(self._sounds)

    @property
    def animations(self):
        return dict(self._animations)

    def _read_table(self, file_path, kind):
        try:
            with open(file_path, encoding="utf-8") as file:
                data = json.load(file)
        except OSError:
            _log.error("Failed to open %s file %s", kind, file_path)
            return {}
        except json.JSONDecodeError as exc:
            _log.error("Failed to parse %s file %s: %s", kind, file_path, exc)
            return {}
        if not isinstance(data, dict):
            raise ResourceError(f"{kind} file {file_path} does not hold an object")
        return data

    def _fetch(self, loader, kind, file_path, *args):
        try:
            value = loader(*args)
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load %s %s: %s", kind, file_path, exc)
            return None
        if value is None:
            _log.error("Failed to load %s %s", kind, file_path)
        return value

    def load_textures(self, file_path):
        """Load the textures listed in a manifest file."""
        for tag, entry in self._read_table(file_path, "texture").items():
            if tag in self._textures:
                continue
            image_path = _field(entry, "file", str, tag)
            width = _field(entry, "w", int, tag)
            height = _field(entry, "h", int, tag)
            texture = self._fetch(self._texture_loader, "texture", file_path, image_path)
            self._textures[tag] = TextureResource(texture, width, height)

    def load_fonts(self, file_path):
        """Load the fonts listed in a manifest file; each is named by its tag."""
        for tag, entry in self._read_table(file_path, "font").items():
            if tag in self._fonts:
                continue
            font_path = _field(entry, "file", str, tag)
            size = _field(entry, "size", int, tag)
            bold = _field(entry, "bold", bool, tag)
            italic = _field(entry, "italic", bool, tag)
            font = self._fetch(self._font_loader, "font", file_path, font_path, size)
            self._fonts[tag] = FontResource(font, size, bold, italic, tag)

    def load_music(self, file_path):
        """Load the music tracks listed in a manifest file."""
        for tag, entry in self._read_table(file_path, "music").items():
            if tag in self._music:
                continue
            music_path = _field(entry, "file", str, tag)
            music = self._fetch(self._music_loader, "music", file_path, music_path)
            volume = _field(entry, "volume", float, tag)
            self._music[tag] = MusicResource(music, volume)

    def load_sounds(self, file_path):
        """Load the sound effects listed in a manifest file."""
        for tag, entry in self._read_table(file_path, "sound").items():
            if tag in self._sounds:
                continue
            sound_path = _field(entry, "file", str, tag)
            sound = self._fetch(self._sound_loader, "sound", file_path, sound_path)
            volume = _field(entry, "volume", float, tag)
            self._sounds[tag] = SoundResource(sound, volume)

    def load_animations(self, file_path):
        """Load the animations listed in a manifest file."""
        for tag, entry in self._read_table(file_path, "animation").items():
            if tag in self._animations:
                continue
            image_path = _field(entry, "image", str, tag)
            texture = self._fetch(self._texture_loader, "texture", file_path, image_path)
            frame = Frame(
                texture=texture,
                x=_field(entry, "x", int, tag),
                y=_field(entry, "y", int, tag),
                w=_field(entry, "w", int, tag),
                h=_field(entry, "h", int, tag),
                current_frame=_field(entry, "currentFrame", int, tag),
                total_frames=_field(entry, "totalFrames", int, tag),
                frame_duration=_field(entry, "frameDuration", float, tag),
            )
            _log.info("Loading animation %s from file: %s | %s", tag, image_path, frame)
            self._animations[tag] = AnimationResource(Animation(frame))

    def load_all(self, file_path):
        """Load every manifest named in a top-level resource file.

        Raises ResourceError when an entry is not a path or a manifest is malformed.
        """
        _log.info("Loading resources from %s", file_path)
        loaders = {
            "textures": self.load_textures,
            "fonts": self.load_fonts,
            "music": self.load_music,
            "sounds": self.load_sounds,
            "animations": self.load_animations,
        }
        for tag, path in self._read_table(file_path, "resource").items():
            if not isinstance(path, str):
                raise ResourceError(
                    f"Failed to load resources: path is not a string, but is {json.dumps(path)}"
                )
            loader = loaders.get(tag)
            if loader is None:
                _log.warning("Unknown resource type: %s", tag)
                continue
            _log.info("Loading %s from %s", tag, path)
            loader(path)

    def unload_all(self):
        """Forget every loaded resource."""
        self._textures.clear()
        self._fonts.clear()
        self._music.clear()
        self._sounds.clear()
        self._animations.clear()