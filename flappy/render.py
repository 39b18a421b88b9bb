# flappy/render.py
# -------------------------------------------------------------
# Rendu pygame (formes primitives) de l'état de la simulation
# Licence: MIT
# -------------------------------------------------------------

import math
from typing import Iterable

import pygame

from .events import Event, GameState, ObstacleKind, OverlayCleared, StateChanged
from .game import Game

# Couleurs (R, G, B)
SKY = (135, 206, 235)
PIPE_GREEN = (76, 175, 80)
PIPE_DARK = (56, 142, 60)
GROUND_BROWN = (156, 102, 31)
GROUND_DARK = (121, 85, 61)
BIRD_ORANGE = (255, 140, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SKIN_COLORS = {
    "red": (230, 70, 60),
    "blue": (70, 140, 230),
    "yellow": (255, 204, 0),
}

BIG_FONT_SIZE = 48
SMALL_FONT_SIZE = 18
LIP_HEIGHT = 8
TILE_WIDTH = 24
WING_SWING = (0, 6, 12, 6)  # décalage de l'aile (degrés) par image d'animation


class Renderer:
    """Dessine un Game sur une surface; ne modifie jamais la simulation."""

    def __init__(self, surface: pygame.Surface, game: Game):
        self.surface = surface
        self.game = game
        cfg = game.config
        self.width = int(cfg.screen_width)
        self.height = int(cfg.screen_height)
        self.scale = cfg.scale
        self.font_big = pygame.font.SysFont(None, self.px(BIG_FONT_SIZE))
        self.font_small = pygame.font.SysFont(None, self.px(SMALL_FONT_SIZE))
        self.overlay_timer = 0.0

    def px(self, size: float) -> int:
        """Taille en pixels à l'échelle courante, jamais nulle."""
        return max(1, int(size * self.scale))

    def to_screen(self, x: float, y: float):
        """Coordonnées monde (origine au centre, y vers le haut) -> pixels."""
        return (x + self.width / 2, self.height / 2 - y)

    def handle(self, events: Iterable[Event], dt: float):
        """Suivre les calques: le clignotement repart à chaque changement d'état."""
        self.overlay_timer += dt
        for event in events:
            if isinstance(event, (StateChanged, OverlayCleared)):
                self.overlay_timer = 0.0

    # ----------------------- rendu -------------------------
    def draw(self):
        self.surface.fill(SKY)
        self.draw_clouds()
        for _, position, kind in self.game.obstacle_list():
            self.draw_pipe(position, kind)
        self.draw_ground()
        self.draw_bird()

        state = self.game.current_state()
        if state == GameState.MENU:
            self.draw_menu()
        elif state == GameState.PLAYING:
            self.draw_score()
        elif state == GameState.GAME_OVER:
            self.draw_score()
            self.draw_game_over()

    def draw_pipe(self, position, kind: ObstacleKind):
        cfg = self.game.config
        half_w, half_h = cfg.pipe_hitbox_half_w, cfg.pipe_hitbox_half_h
        left, top = self.to_screen(position[0] - half_w, position[1] + half_h)
        rect = pygame.Rect(int(left), int(top), int(half_w * 2), int(half_h * 2))
        pygame.draw.rect(self.surface, PIPE_GREEN, rect)
        lip = self.px(LIP_HEIGHT)
        # Bord sombre du côté de l'écart
        lip_y = rect.bottom - lip if kind == ObstacleKind.TOP else rect.top
        pygame.draw.rect(self.surface, PIPE_DARK, (rect.x, lip_y, rect.width, lip))

    def draw_ground(self):
        """Chaque segment de sol est une bande avec des dalles qui défilent."""
        cfg = self.game.config
        seg_w = int(cfg.floor_segment_width * 2)
        tile_w = self.px(TILE_WIDTH)
        for seg_x in self.game.floor_segment_list():
            left, top = self.to_screen(seg_x - cfg.floor_segment_width, cfg.floor_y + cfg.floor_half_height)
            left, top = int(left), int(top)
            pygame.draw.rect(self.surface, GROUND_BROWN, (left, top, seg_w, int(cfg.floor_half_height * 2)))
            for rx in range(left, left + seg_w, tile_w):
                pygame.draw.rect(self.surface, GROUND_DARK, (rx, top + int(20 * self.scale), tile_w - 4, 10))

    def draw_bird(self):
        pose = self.game.bird_pose()
        if pose is None:
            return
        skin, frame = self.game.bird_sprite()
        cfg = self.game.config
        cx, cy = (int(v) for v in self.to_screen(*pose.position))
        radius = max(1, int(cfg.bird_half_height))
        angle = pose.rotation  # positif = bec vers le haut

        # Corps (cercle)
        pygame.draw.circle(self.surface, SKIN_COLORS.get(skin, SKIN_COLORS["yellow"]), (cx, cy), radius)
        # Bec orienté selon l'inclinaison
        bx = cx + (radius - 2) * math.cos(angle)
        by = cy - (radius - 2) * math.sin(angle)
        tip = (bx + 8 * self.scale * math.cos(angle), by - 8 * self.scale * math.sin(angle))
        side = 3 * self.scale
        points = [
            (bx - side * math.sin(angle), by - side * math.cos(angle)),
            tip,
            (bx + side * math.sin(angle), by + side * math.cos(angle)),
        ]
        pygame.draw.polygon(self.surface, BIRD_ORANGE, points)
        # Aile: arc qui suit l'inclinaison et l'image d'animation
        wing_r = max(radius - 4, 1)
        rect = pygame.Rect(cx - wing_r, cy - wing_r, wing_r * 2, wing_r * 2)
        swing = math.radians(WING_SWING[frame % len(WING_SWING)])
        start_angle = math.radians(200) + angle + swing
        end_angle = math.radians(340) + angle + swing
        pygame.draw.arc(self.surface, BIRD_ORANGE, rect, start_angle, end_angle, min(2, wing_r))

    def draw_clouds(self):
        """Quelques nuages stylisés (décoratif)."""
        t = self.game.clock.elapsed
        cx = self.width - (t * 15 * self.scale % (self.width + 60 * self.scale))
        self.draw_cloud(int(cx), int(80 * self.scale))
        cx2 = self.width - (t * 10 * self.scale % (self.width + 120 * self.scale)) + 60 * self.scale
        self.draw_cloud(int(cx2), int(140 * self.scale), scale=0.8)

    def draw_cloud(self, x: int, y: int, scale: float = 1.0):
        r = int(18 * scale * self.scale)
        pygame.draw.circle(self.surface, WHITE, (x, y), r)
        pygame.draw.circle(self.surface, WHITE, (x + int(1.2 * r), y + int(0.2 * r)), int(0.9 * r))
        pygame.draw.circle(self.surface, WHITE, (x - int(1.0 * r), y + int(0.1 * r)), int(0.8 * r))

    # ----------------------- textes ------------------------
    def draw_text_shadow(self, text: str, font: pygame.font.Font, x: int, y: int):
        """Texte blanc centré avec ombre noire pour la lisibilité."""
        surf = font.render(text, True, WHITE)
        shadow = font.render(text, True, BLACK)
        rect = surf.get_rect(center=(x, y))
        self.surface.blit(shadow, rect.move(2, 2))
        self.surface.blit(surf, rect)

    def draw_score(self):
        self.draw_text_shadow(str(self.game.display_score()), self.font_big, self.width // 2, int(56 * self.scale))

    def draw_menu(self):
        mid_x, mid_y = self.width // 2, self.height // 2
        self.draw_text_shadow("FLAPPY", self.font_big, mid_x, mid_y - int(90 * self.scale))
        self.draw_text_shadow("BIRD", self.font_big, mid_x, mid_y - int(50 * self.scale))
        # Astuce clignotante
        if int(self.overlay_timer * 2) % 2 == 0:
            self.draw_text_shadow("Espace / Clic pour jouer", self.font_small, mid_x, mid_y + int(40 * self.scale))

    def draw_game_over(self):
        mid_x, mid_y = self.width // 2, self.height // 2
        self.draw_text_shadow("GAME OVER", self.font_big, mid_x, mid_y - int(20 * self.scale))
        self.draw_text_shadow("Espace / Clic pour rejouer", self.font_small, mid_x, mid_y + int(20 * self.scale))
        self.draw_text_shadow("Esc pour quitter", self.font_small, mid_x, mid_y + int(40 * self.scale))
