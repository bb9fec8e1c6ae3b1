"""Flat-shape pygame drawing of simulation snapshots.

World coordinates are centred with y up; pygame uses a top-left origin
with y down. The renderer only reads ``Snapshot`` objects.
"""

from typing import Optional, Tuple

import pygame
from pymunk import BB

from .config import GameConfig
from .simulation import Snapshot
from .state_machine import GamePhase


# Colors (RGB)
COLOR_SKY = (78, 192, 202)
COLOR_PIPE = (115, 191, 46)
COLOR_PIPE_EDGE = (84, 56, 71)
COLOR_GROUND = (222, 216, 149)
COLOR_GROUND_EDGE = (115, 191, 46)
COLOR_TEXT = (255, 255, 255)
COLOR_SHADOW = (0, 0, 0)
COLOR_GAME_OVER = (224, 108, 117)

# Wing shade per flap animation frame
PLAYER_FRAME_COLORS = [
    (230, 80, 60),
    (240, 110, 70),
    (250, 140, 80),
]
COLOR_PLAYER_EYE = (255, 255, 255)
COLOR_PLAYER_BEAK = (250, 200, 60)


class SceneRenderer:
    """Draws ground, pipes, player and HUD onto a pygame surface."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self._score_font: Optional[pygame.font.Font] = None
        self._banner_font: Optional[pygame.font.Font] = None

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        screen_x = int(x + self.config.screen_width / 2)
        screen_y = int(self.config.screen_height / 2 - y)
        return screen_x, screen_y

    def bb_to_rect(self, bb: BB) -> pygame.Rect:
        left, top = self.world_to_screen(bb.left, bb.top)
        return pygame.Rect(left, top, int(bb.right - bb.left), int(bb.top - bb.bottom))

    def draw(self, surface: pygame.Surface, snapshot: Snapshot, show_hud: bool = True) -> None:
        surface.fill(COLOR_SKY)

        for pair in snapshot.pairs:
            for bb in (pair.top, pair.bottom):
                rect = self.bb_to_rect(bb)
                pygame.draw.rect(surface, COLOR_PIPE, rect)
                pygame.draw.rect(surface, COLOR_PIPE_EDGE, rect, width=3)

        # Ground is drawn at tile size, not hitbox size
        c = self.config
        for tile in snapshot.ground:
            left, top = self.world_to_screen(
                tile.x - tile.width / 2, tile.y + c.ground_tile_height / 2
            )
            rect = pygame.Rect(left, top, int(tile.width) + 1, int(c.ground_tile_height))
            pygame.draw.rect(surface, COLOR_GROUND, rect)
            pygame.draw.line(surface, COLOR_GROUND_EDGE, rect.topleft, rect.topright, 6)

        self._draw_player(surface, snapshot)

        if show_hud:
            self._draw_hud(surface, snapshot)

    def _draw_player(self, surface: pygame.Surface, snapshot: Snapshot) -> None:
        width = int(self.config.player_width)
        height = int(self.config.player_height)
        body = pygame.Surface((width, height), pygame.SRCALPHA)
        color = PLAYER_FRAME_COLORS[snapshot.player_frame % len(PLAYER_FRAME_COLORS)]
        pygame.draw.ellipse(body, color, body.get_rect())
        pygame.draw.circle(body, COLOR_PLAYER_EYE, (int(width * 0.7), int(height * 0.3)), max(height // 6, 2))
        pygame.draw.rect(
            body, COLOR_PLAYER_BEAK,
            (int(width * 0.8), int(height * 0.5), width - int(width * 0.8), max(height // 5, 2)),
        )

        # pygame rotates counter-clockwise for positive angles, matching nose-up
        rotated = pygame.transform.rotate(body, snapshot.player_angle)
        center = self.world_to_screen(*snapshot.player_position)
        surface.blit(rotated, rotated.get_rect(center=center))

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._score_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._score_font = pygame.font.Font(None, 100)
            self._banner_font = pygame.font.Font(None, 64)
        return self._score_font, self._banner_font

    def _draw_hud(self, surface: pygame.Surface, snapshot: Snapshot) -> None:
        score_font, banner_font = self._fonts()
        cx = int(self.config.screen_width // 2)
        score_y = int(self.config.screen_height // 4)

        # Score with drop shadow
        text = str(snapshot.score)
        shadow = score_font.render(text, True, COLOR_SHADOW)
        surface.blit(shadow, shadow.get_rect(center=(cx + 5, score_y + 5)))
        label = score_font.render(text, True, COLOR_TEXT)
        surface.blit(label, label.get_rect(center=(cx, score_y)))

        center = (cx, int(self.config.screen_height // 2))
        if snapshot.game_over_ui_visible:
            banner = banner_font.render("GAME OVER", True, COLOR_GAME_OVER)
            surface.blit(banner, banner.get_rect(center=center))
        elif snapshot.phase is GamePhase.PAUSED:
            banner = banner_font.render("Press SPACE", True, COLOR_TEXT)
            surface.blit(banner, banner.get_rect(center=center))
