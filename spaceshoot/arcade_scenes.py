"""Title, play and game-over screens of the arcade shooter."""

import argparse
import logging
import math
from pathlib import Path

import pygame

from .arcade import DEFAULT_ASSET_DIR, DEFAULT_DATA_PATH, ArcadeScene, Game
from .objects import (
    Enemy,
    EnemyProjectile,
    Explosion,
    FontType,
    Item,
    Player,
    PlayerProjectile,
)
from .shooter_world import Controls, Templates, World

_log = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
INTRO_MUSIC = Path("music", "06_Battle_in_Space_Intro.ogg")
LEVEL_MUSIC = Path("music", "level1_loop.ogg")
DEATH_DELAY = 3.0
DEFAULT_NAME = "Player"

SOUND_FILES = {
    "player_shoot": "laser_shoot4.wav",
    "enemy_shoot": "xs_laser.wav",
    "player_explode": "explosion1.wav",
    "enemy_explode": "explosion3.wav",
    "get_item": "eff5.wav",
    "hit": "eff11.wav",
}

HEALTH_ICON_SIZE = 32
HEALTH_ICON_STEP = 40
HEALTH_PER_ICON = 20
UI_MARGIN = 20


def _play_music(path):
    """Loop the music at ``path``; return whether it started."""
    if not pygame.mixer.get_init():
        _log.error("Audio is not available to play %s", path)
        return False
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error as exc:
        _log.error("Failed to play music %s: %s", path, exc)
        return False
    return True


def _stop_music():
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()


def _display_active():
    return pygame.display.get_init() and pygame.display.get_surface() is not None


class TitleScene(ArcadeScene):
    """The opening screen; Enter starts a round."""

    def __init__(self, game):
        super().__init__(game)
        self.timer = 0.0

    def init(self):
        _play_music(self.game.asset_dir / INTRO_MUSIC)

    def update(self, delta_time):
        self.timer += delta_time
        if self.timer >= 1.0:
            self.timer -= 1.0

    def render(self):
        game = self.game
        game.render_text_center("Space Shoot", game.window_width, game.window_height // 8,
                                72, WHITE, FontType.SILVER)
        if self.timer < 0.5:
            game.render_text_center("Press key Enter to start", game.window_width,
                                    game.window_height // 2, 48, WHITE, FontType.SILVER)

    def clean(self):
        """The title screen holds nothing to release."""

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self.game.change_scene(MainScene(self.game))


class MainScene(ArcadeScene):
    """One round of play: loads the sprites and sounds and drives a :class:`World`."""

    def __init__(self, game, rng=None):
        super().__init__(game)
        self.rng = rng
        self.paused = False
        self.world = None
        self.ui_health = None
        self.score_font = None
        self.sounds = {}

    def _fail(self, message, *args):
        _log.error(message, *args)
        self.game.running = False

    def _image(self, relative):
        path = self.game.asset_dir / relative
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            self._fail("Failed to load texture %s: %s", path, exc)
            return None

    def _sprite(self, relative, divisor):
        image = self._image(relative)
        if image is None:
            return None, 0, 0
        width = image.get_width() // divisor
        height = image.get_height() // divisor
        if width > 0 and height > 0:
            image = pygame.transform.scale(image, (width, height))
        return image, width, height

    def _load_sounds(self):
        if not pygame.mixer.get_init():
            self._fail("Audio is not available to load sounds")
            return
        for name, file_name in SOUND_FILES.items():
            path = self.game.asset_dir / "sound" / file_name
            try:
                self.sounds[name] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as exc:
                self._fail("Failed to load sound %s: %s", path, exc)

    def _load_score_font(self):
        if not pygame.font.get_init():
            pygame.font.init()
        path = self.game.asset_dir / "font" / "VonwaonBitmap-12px.ttf"
        try:
            self.score_font = pygame.font.Font(str(path), 24)
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load font %s: %s", path, exc)
            self.score_font = None

    def _load_templates(self):
        texture, w, h = self._sprite(Path("image", "player", "PlayerRed_Frame_01_png_processed.png"), 2)
        player = Player(texture=texture, width=w, height=h)

        texture, w, h = self._sprite(Path("image", "laser-3.png"), 4)
        player_projectile = PlayerProjectile(texture=texture, width=w, height=h)

        texture, w, h = self._sprite(Path("image", "insect-1.png"), 4)
        enemy = Enemy(texture=texture, width=w, height=h)

        texture, w, h = self._sprite(Path("image", "bullet-1.png"), 2)
        enemy_projectile = EnemyProjectile(texture=texture, width=w, height=h)

        sheet = self._image(Path("effect", "explosion.png"))
        explosion = Explosion(texture=sheet)
        if sheet is not None:
            sheet_w, sheet_h = sheet.get_size()
            explosion.total_frames = sheet_w // sheet_h if sheet_h else 0
            explosion.height = sheet_h * 2
            explosion.width = explosion.height

        texture, w, h = self._sprite(Path("image", "item", "Powerup_Health_png_processed.png"), 2)
        item = Item(texture=texture, width=w, height=h)

        return Templates(
            player=player,
            enemy=enemy,
            enemy_projectile=enemy_projectile,
            player_projectile=player_projectile,
            explosion=explosion,
            item=item,
        )

    def init(self):
        if not _play_music(self.game.asset_dir / LEVEL_MUSIC):
            self.game.running = False

        icon = self._image(Path("image", "Health UI Black.png"))
        if icon is not None:
            icon = pygame.transform.scale(icon, (HEALTH_ICON_SIZE, HEALTH_ICON_SIZE))
        self.ui_health = icon

        self._load_score_font()
        self._load_sounds()
        templates = self._load_templates()
        self.world = World(self.game.window_width, self.game.window_height, templates, self.rng)

    @staticmethod
    def _controls():
        if not _display_active():
            return Controls()
        keys = pygame.key.get_pressed()
        return Controls(
            up=bool(keys[pygame.K_w]),
            down=bool(keys[pygame.K_s]),
            left=bool(keys[pygame.K_a]),
            right=bool(keys[pygame.K_d]),
            fire=bool(keys[pygame.K_SPACE]),
        )

    def _play_sounds(self):
        for name in self.world.sounds:
            sound = self.sounds.get(name)
            if sound is None or not pygame.mixer.get_init():
                continue
            if name == "player_shoot":
                pygame.mixer.Channel(0).play(sound)
            else:
                sound.play()
        self.world.sounds.clear()

    def update(self, delta_time):
        if self.paused or self.world is None:
            return
        world = self.world
        world.step(self._controls(), delta_time, pygame.time.get_ticks())
        self._play_sounds()
        if world.is_dead:
            self.game.score = world.player.score
            if world.death_timer >= DEATH_DELAY:
                self.game.change_scene(EndScene(self.game))

    @staticmethod
    def _blit(surface, entity):
        if entity.texture is None:
            return
        surface.blit(entity.texture, (int(entity.position.x), int(entity.position.y)))

    def _render_player(self, surface):
        player = self.world.player
        if player.texture is None:
            return
        alpha_step = 255 // (len(player.trail) + 1)
        ghost = player.texture.copy()
        for index, position in enumerate(player.trail, start=1):
            ghost.set_alpha(alpha_step * index)
            surface.blit(ghost, (int(position.x), int(position.y)))
        self._blit(surface, player)

    @staticmethod
    def _render_enemy_projectile(surface, projectile):
        if projectile.texture is None:
            return
        direction = projectile.direction
        angle = math.degrees(math.atan2(direction.y, direction.x)) - 90
        sprite = pygame.transform.rotate(projectile.texture, -angle)
        center = (int(projectile.position.x) + projectile.width / 2,
                  int(projectile.position.y) + projectile.height / 2)
        surface.blit(sprite, sprite.get_rect(center=center))

    @staticmethod
    def _render_explosion(surface, explosion):
        if explosion.texture is None or explosion.width <= 0 or explosion.height <= 0:
            return
        area = pygame.Rect(explosion.current_frame * explosion.width, 0,
                           explosion.width // 2, explosion.height // 2)
        frame = pygame.Surface(area.size, pygame.SRCALPHA)
        frame.blit(explosion.texture, (0, 0), area)
        scaled = pygame.transform.scale(frame, (explosion.width, explosion.height))
        surface.blit(scaled, (int(explosion.position.x), int(explosion.position.y)))

    def _render_ui(self, surface):
        player = self.world.player
        if self.ui_health is not None:
            dim = self.ui_health.copy()
            dim.fill((100, 100, 100), special_flags=pygame.BLEND_RGB_MULT)
            for i in range(player.health // HEALTH_PER_ICON):
                surface.blit(dim, (UI_MARGIN + i * HEALTH_ICON_STEP, UI_MARGIN))
            for i in range(player.current_health // HEALTH_PER_ICON):
                surface.blit(self.ui_health, (UI_MARGIN + i * HEALTH_ICON_STEP, UI_MARGIN))
        if self.score_font is not None:
            text = self.score_font.render(f"SCORE: {self.world.score}", False, WHITE)
            x = self.game.window_width - UI_MARGIN - text.get_width()
            surface.blit(text, (x, UI_MARGIN))

    def render(self):
        surface = self.game.surface
        if surface is None or self.world is None:
            return
        world = self.world
        if not world.is_dead:
            self._render_player(surface)
        for enemy in world.enemies:
            self._blit(surface, enemy)
        for projectile in world.player_projectiles:
            self._blit(surface, projectile)
        for projectile in world.enemy_projectiles:
            self._render_enemy_projectile(surface, projectile)
        for explosion in world.explosions:
            self._render_explosion(surface, explosion)
        for item in world.items:
            self._blit(surface, item)
        self._render_ui(surface)

    def clean(self):
        _stop_music()
        self.sounds.clear()
        self.world = None
        self.ui_health = None
        self.score_font = None

    def handle_event(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self.game.change_scene(TitleScene(self.game))
        elif event.key == pygame.K_p:
            self.paused = not self.paused


class EndScene(ArcadeScene):
    """Game over: type a name for the score board, then show the ranking."""

    def __init__(self, game):
        super().__init__(game)
        self.typing = True
        self.blink_timer = 1.0
        self.name = ""

    def init(self):
        _play_music(self.game.asset_dir / INTRO_MUSIC)
        if _display_active():
            pygame.key.start_text_input()

    def update(self, delta_time):
        self.blink_timer -= delta_time
        if self.blink_timer < 0:
            self.blink_timer += 1.0

    def render(self):
        if self.typing:
            self._render_title_text()
        else:
            self._render_rank_text()

    def _render_title_text(self):
        game = self.game
        width, height = game.window_width, game.window_height
        game.render_text_center("Game Over", width, height // 8, 72, WHITE, FontType.SILVER)
        game.render_text_center(f"Your Score: {game.score}", width, height // 4, 60,
                                WHITE, FontType.SILVER)
        game.render_text_center("Please Input Your Name, Press Enter to Confirm", width,
                                height // 2, 36, WHITE, FontType.SILVER)
        name_y = height // 2 + 100
        blink = self.blink_timer < 0.5
        if self.name:
            x, y = game.render_text_center(self.name, width, name_y, 36, WHITE, FontType.SILVER)
            if blink:
                game.render_text("_", x, y, 36, WHITE, FontType.SILVER)
        elif blink:
            game.render_text_center("_", width, name_y, 36, WHITE, FontType.SILVER)

    def _render_rank_text(self):
        game = self.game
        width, height = game.window_width, game.window_height
        game.render_text_center("Rank", width, int(0.05 * height), 60, WHITE, FontType.SILVER)
        pos_y = int(0.2 * height)
        pos_x = int(0.2 * width)
        for rank, (score, name) in enumerate(game.score_board.entries(), start=1):
            game.render_text(f"{rank}. {name}", pos_x, pos_y, 48, WHITE, FontType.SILVER)
            game.render_text_right(str(score), pos_x, pos_y, 48, WHITE, FontType.SILVER)
            pos_y += 50
        if self.blink_timer < 0.5:
            game.render_text_center("Press Enter to back to Menu", width, int(0.8 * height),
                                    60, WHITE, FontType.SILVER)

    def clean(self):
        _stop_music()

    def _confirm_name(self):
        self.typing = False
        if _display_active():
            pygame.key.stop_text_input()
        if not self.name:
            self.name = DEFAULT_NAME
        self.game.score_board.add(self.game.score, self.name)

    def handle_event(self, event):
        if self.typing:
            if event.type == pygame.TEXTINPUT:
                self.name += event.text
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    self._confirm_name()
                elif event.key == pygame.K_BACKSPACE:
                    self.name = self.name[:-1]
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self.game.change_scene(TitleScene(self.game))


def main(argv=None):
    parser = argparse.ArgumentParser(prog="spaceshoot-arcade", description="Play the arcade shooter.")
    parser.add_argument("--width", type=int, default=600)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("--scores", default=str(DEFAULT_DATA_PATH), help="score board file")
    parser.add_argument("--assets", default=str(DEFAULT_ASSET_DIR), help="asset directory")
    args = parser.parse_args(argv)
    game = Game(args.width, args.height, args.scores, args.assets)
    game.init(TitleScene(game))
    game.run()
    return 0