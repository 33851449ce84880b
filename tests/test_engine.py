import json
from pathlib import Path
from unittest import mock

import pygame
import pytest

from spaceshoot.engine import Engine, main
from spaceshoot.menu_scene import TITLE_COLOR, MenuScene


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture
def resource_file(tmp_path):
    data = tmp_path / "data"
    menu_dir = data / "scenes" / "menu"
    menu_dir.mkdir(parents=True)
    (menu_dir / "menu_scene.txt").write_text("banner_modern\n", encoding="utf-8")
    (menu_dir / "menu_music.txt").write_text("", encoding="utf-8")
    (menu_dir / "menu_sound.txt").write_text("", encoding="utf-8")

    banner = data / "banner.bmp"
    pygame.image.save(pygame.Surface((64, 16)), str(banner))
    font_path = str(Path(pygame.__file__).parent / pygame.font.get_default_font())

    textures = _write(data / "textures.json", {"banner_modern": {"file": str(banner), "w": 64, "h": 16}})
    fonts = _write(data / "fonts.json", {
        "Silver-48px": {"file": font_path, "size": 24, "bold": False, "italic": False},
        "VonwaonBitmap-16px": {"file": font_path, "size": 16, "bold": False, "italic": False},
    })
    resources = data / "resources.json"
    _write(resources, {"textures": textures, "fonts": fonts})
    return resources


def test_defaults():
    engine = Engine()
    assert (engine.window_width, engine.window_height) == (1280, 720)
    assert engine.frame_time == 16
    assert engine.resource_path == Path("..", "..", "data", "resources.json")
    assert engine.running is False


def test_init_enters_menu_scene(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    engine.init()
    assert engine.scene_manager.current_scene_name == "MenuScene"
    assert isinstance(engine.scene_manager.current_scene, MenuScene)
    assert engine.surface.get_size() == (320, 240)
    assert engine.scene_manager.current_scene.layout_tags == ["banner_modern"]


def test_init_loads_resources(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    engine.init()
    assert set(engine.resource_manager.fonts) == {"Silver-48px", "VonwaonBitmap-16px"}
    assert engine.resource_manager.textures["banner_modern"].width == 64


def test_bad_resource_file_stops_engine(headless, tmp_path):
    path = tmp_path / "resources.json"
    _write(path, {"textures": 5})
    engine = Engine(path, 320, 240)
    engine.init()
    assert engine.running is False
    assert engine.scene_manager.current_scene is None


def test_handle_events_reaches_scene(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    engine.init()
    engine.handle_events(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    assert engine.scene_manager.current_scene.menu.current_index == 1


def test_render_draws_the_title(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    engine.init()
    engine.render()
    width, height = engine.surface.get_size()
    colours = {
        tuple(engine.surface.get_at((x, y)))[:3]
        for x in range(width)
        for y in range(height)
    }
    assert TITLE_COLOR[:3] in colours


def test_quit_shuts_pygame_down(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    engine.init()
    engine.quit()
    assert engine.running is False
    assert not pygame.get_init()


def test_run_stops_on_quit_event(headless, resource_file):
    engine = Engine(resource_file, 320, 240)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        engine.run()
    assert engine.running is False
    assert engine.scene_manager.current_scene_name == "MenuScene"
    assert not pygame.get_init()


def test_main_runs_and_returns_zero(headless, resource_file):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main(["--resources", str(resource_file), "--width", "320", "--height", "240"])
    assert result == 0
    assert not pygame.get_init()