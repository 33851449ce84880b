import logging

import pygame
import pytest

from spaceshoot.utils import read_tags_from_file, render_text, render_text_center

WHITE = (255, 255, 255)


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 32)


def _brightness(surface, rect):
    return sum(pygame.transform.average_color(surface, rect)[:3])


def test_render_text_center_places_text_in_middle(font):
    canvas = pygame.Surface((600, 200))
    rect = render_text_center(canvas, font, "Space Shoot", 600, 40, WHITE)
    assert rect.size == font.render("Space Shoot", False, WHITE).get_size()
    assert rect.y == 40
    assert abs(rect.centerx - 300) <= 1
    assert _brightness(canvas, rect) > 0


def test_render_text_center_uses_half_the_span(font):
    canvas = pygame.Surface((600, 200))
    rect = render_text_center(canvas, font, "Rank", 400, 0, WHITE)
    assert abs(rect.centerx - 200) <= 1
    right_side = pygame.Rect(rect.right, 0, 600 - rect.right, 200)
    assert _brightness(canvas, right_side) == 0


def test_render_text_stretches_into_box(font):
    canvas = pygame.Surface((300, 100))
    rect = render_text(canvas, font, "Help", 10, 20, 120, 40, WHITE)
    assert rect == pygame.Rect(10, 20, 120, 40)
    assert _brightness(canvas, rect) > 0
    assert _brightness(canvas, pygame.Rect(0, 0, 10, 100)) == 0
    assert _brightness(canvas, pygame.Rect(130, 0, 170, 100)) == 0


def test_read_tags_skips_empty_lines(tmp_path):
    path = tmp_path / "menu_scene.txt"
    path.write_text("banner_modern\n\nSilver-48px\nVonwaonBitmap-16px", encoding="utf-8")
    assert read_tags_from_file(path) == ["banner_modern", "Silver-48px", "VonwaonBitmap-16px"]


def test_read_tags_keeps_whitespace_lines(tmp_path):
    path = tmp_path / "tags.txt"
    path.write_text("menu_select\n  \n", encoding="utf-8")
    assert read_tags_from_file(str(path)) == ["menu_select", "  "]


def test_read_tags_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        tags = read_tags_from_file(tmp_path / "absent.txt")
    assert tags == []
    assert "Could not open file" in caplog.text