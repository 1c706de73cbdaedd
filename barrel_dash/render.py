# render.py -- drawing the road, the runner, barrels and HUD
# Pure side effects on a pygame surface; reads the session, never changes it.

import math

import pygame

BACKGROUND = (34, 34, 34)
LANE_LINE = (136, 136, 136)
BODY = (76, 175, 80)
SKIN = (255, 224, 178)
INK = (34, 34, 34)
BARREL = (160, 82, 45)
BAND = (255, 255, 255)
TEXT = (220, 220, 220)
HINT = (200, 200, 200)
GAME_OVER_RED = (220, 80, 80)

DASH, GAP = 10, 10


class Fonts:
    def __init__(self, font, big_font):
        self.font = font
        self.big_font = big_font

    @classmethod
    def default(cls):
        if not pygame.font.get_init():
            pygame.font.init()
        return cls(pygame.font.SysFont(None, 26), pygame.font.SysFont(None, 48))


# ----------------------------
# Road + lane dividers
# ----------------------------
def draw_background(surface, config):
    surface.fill(BACKGROUND)
    lane_w = config.lane_width
    for i in range(1, config.lanes):
        x = int(i * lane_w)
        y = 0
        while y < config.height:
            pygame.draw.line(surface, LANE_LINE, (x, y), (x, min(config.height, y + DASH)), 2)
            y += DASH + GAP


# ----------------------------
# Runner & barrels
# ----------------------------
def draw_player(surface, player):
    x, y, w, h = player.rect
    cx = x + w // 2
    pygame.draw.rect(surface, BODY, (x, y, w, h))
    # head and face
    pygame.draw.circle(surface, SKIN, (cx, y + 15), 15)
    pygame.draw.circle(surface, INK, (cx - 5, y + 15), 2)
    pygame.draw.circle(surface, INK, (cx + 5, y + 15), 2)
    pygame.draw.arc(surface, INK, (cx - 5, y + 15, 10, 10), math.pi, 2 * math.pi, 1)
    # arms
    pygame.draw.line(surface, SKIN, (x, y + 30), (x - 10, y + 50), 5)
    pygame.draw.line(surface, SKIN, (x + w, y + 30), (x + w + 10, y + 50), 5)
    # hat
    pygame.draw.rect(surface, INK, (x + 2, y + 2, w - 4, 8))
    pygame.draw.rect(surface, INK, (x + 10, y - 8, w - 20, 10))


def draw_obstacle(surface, obstacle):
    r = obstacle.rect
    pygame.draw.ellipse(surface, BARREL, r)
    band_w = int(obstacle.width / 1.1)
    band_h = int(obstacle.height / 1.25)
    band = pygame.Rect(0, 0, band_w, band_h)
    band.center = r.center
    pygame.draw.ellipse(surface, BAND, band, 3)


# ----------------------------
# HUD + game over overlay
# ----------------------------
def draw_hud(surface, session, fonts):
    score_surf = fonts.font.render(session.score_text(), True, TEXT)
    surface.blit(score_surf, (12, 12))
    hint = fonts.font.render("Left/Right or A/D | R restart, Q quit | M mute", True, HINT)
    surface.blit(hint, (12, 36))


def draw_game_over(surface, session, fonts):
    width, height = surface.get_size()
    overlay = pygame.Surface((width, height))
    overlay.set_alpha(200)
    overlay.fill((12, 12, 14))
    surface.blit(overlay, (0, 0))
    go_surf = fonts.big_font.render("GAME OVER", True, GAME_OVER_RED)
    surface.blit(go_surf, ((width - go_surf.get_width()) // 2, height // 3))
    info = fonts.font.render(session.final_score_text() or "", True, TEXT)
    surface.blit(info, ((width - info.get_width()) // 2, height // 2))
    hint = fonts.font.render("Press R to restart or Q to quit", True, HINT)
    surface.blit(hint, ((width - hint.get_width()) // 2, height // 2 + 36))


def render(surface, session, fonts):
    draw_background(surface, session.config)
    draw_player(surface, session.player)
    for ob in session.obstacles:
        draw_obstacle(surface, ob)
    draw_hud(surface, session, fonts)
    if not session.running:
        draw_game_over(surface, session, fonts)
