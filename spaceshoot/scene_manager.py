"""Registry of scene factories with a back-navigation history."""

import logging

_log = logging.getLogger(__name__)


class UnknownSceneError(LookupError):
    """No scene is registered under the requested name."""


class SceneManager:
    """Creates scenes by name and keeps the names of the scenes left behind."""

    def __init__(self):
        self._creators = {}
        self._history = []
        self._current_scene = None
        self._current_scene_name = ""

    @property
    def current_scene(self):
        return self._current_scene

    @property
    def current_scene_name(self):
        return self._current_scene_name

    @property
    def history(self):
        """Names of earlier scenes, oldest first."""
        return tuple(self._history)

    def register_scene(self, name, creator):
        """Register ``creator``, a callable taking no arguments, under ``name``."""
        _log.info("Registering scene %s", name)
        self._creators[name] = creator

    def _create(self, name):
        try:
            creator = self._creators[name]
        except KeyError:
            raise UnknownSceneError(f"No scene registered as {name!r}") from None
        _log.info("Creating scene %s", name)
        return creator()

    def change_scene(self, name):
        """Leave the current scene, remember it, and enter a new ``name`` scene."""
        if name not in self._creators:
            raise UnknownSceneError(f"No scene registered as {name!r}")
        if self._current_scene is not None:
            self._current_scene.on_exit()
            self._history.append(self._current_scene_name)
        _log.info("Changing scene to %s", name)
        self._current_scene = self._create(name)
        self._current_scene_name = name
        self._current_scene.on_enter()

    def go_back(self):
        """Return to a fresh instance of the previous scene; no-op without history."""
        if not self._history:
            return
        previous = self._history.pop()
        if self._current_scene is not None:
            self._current_scene.on_exit()
        self._current_scene = self._create(previous)
        self._current_scene_name = previous
        self._current_scene.on_enter()