# main.py -- Barrel Dash window, frame clock and event pump
# Dodge falling barrels by switching lanes; one point per second survived.
# Usage:
#   python -m barrel_dash --lanes 3
#   python -m barrel_dash --seed 42 --mute

import sys
import traceback

import pygame

from .audio import CollisionCue
from .controls import Intent, apply_intent, intent_for_key
from .render import Fonts, render
from .session import GameSession
from .settings import SAMPLE_RATE, build_config, parse_args
from .spawner import make_lane_source


def handle_key(session, cue, key):
    """Route one key press. Returns False when the player asked to quit."""
    print(f"[main] KEYDOWN: key={key}")
    intent = intent_for_key(key)
    if intent is None:
        return True
    if intent is Intent.QUIT:
        print("[main] Quit requested (Q)")
        return False
    if intent is Intent.MUTE:
        print("[main] muted:", cue.toggle_mute())
        return True
    was_running = session.running
    if apply_intent(session, intent):
        if intent is Intent.RESTART:
            print("[main] Restart requested (R)")
        elif was_running:
            print(f"[main] lane -> {session.player.lane}")
    return True


def run(session, cue, screen, fonts, fps):
    clock = pygame.time.Clock()
    running = True
    while running:
        clock.tick(fps)
        now = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                print("[main] QUIT event")
                running = False
            elif event.type == pygame.KEYDOWN:
                if not handle_key(session, cue, event.key):
                    running = False

        # tick halts by itself once the game is over; the frame keeps drawing the overlay
        session.tick(now)

        render(screen, session, fonts)
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    print(f"[main] Starting Barrel Dash -- lanes={config.lanes}, fps={config.fps}, seed={args.seed}, mute={args.mute}")
    try:
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
        except Exception:
            pass
        pygame.init()
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption(f"Barrel Dash -- {config.lanes} lanes")
        fonts = Fonts.default()
        cue = CollisionCue.create(muted=args.mute)

        def on_game_over(final_score):
            print("[main] collision -> game over, final score:", final_score, session.snapshot())
            cue.play()

        session = GameSession(config, rng=make_lane_source(args.seed), on_game_over=on_game_over)

        try:
            pygame.event.set_allowed(None)
            pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        except Exception:
            pass

        print("[main] game loop starting")
        run(session, cue, screen, fonts, config.fps)
        pygame.quit()
        return 0
    except KeyboardInterrupt:
        pygame.quit()
        print("\nExited by user (KeyboardInterrupt).")
        return 0
    except Exception:
        print("[main] Unexpected error:", traceback.format_exc())
        pygame.quit()
        return 1


if __name__ == "__main__":
    sys.exit(main())
