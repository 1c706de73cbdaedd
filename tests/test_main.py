import pygame

from barrel_dash.audio import CollisionCue
from barrel_dash.main import handle_key
from barrel_dash.session import GameSession, Status
from tests.helpers import FixedLanes


def test_quit_key_stops_the_loop(config):
    session = GameSession(config, rng=FixedLanes(0))
    assert not handle_key(session, CollisionCue(None), pygame.K_q)


def test_mute_key_toggles_cue(config):
    session = GameSession(config, rng=FixedLanes(0))
    cue = CollisionCue(None)
    assert handle_key(session, cue, pygame.K_m)
    assert cue.muted
    assert handle_key(session, cue, pygame.K_m)
    assert not cue.muted


def test_arrow_keys_move_player(config):
    session = GameSession(config, rng=FixedLanes(0))
    assert handle_key(session, CollisionCue(None), pygame.K_LEFT)
    assert session.player.lane == 0
    assert handle_key(session, CollisionCue(None), pygame.K_SPACE)
    assert session.player.lane == 0


def test_restart_key_after_crash(config):
    session = GameSession(config, rng=FixedLanes(1))
    ticks = 0
    while session.tick(ticks * 16):
        ticks += 1
    assert handle_key(session, CollisionCue(None), pygame.K_r)
    assert session.status is Status.RUNNING
    assert session.obstacles == []


def test_every_key_press_is_logged(config, capsys):
    session = GameSession(config, rng=FixedLanes(0))
    handle_key(session, CollisionCue(None), pygame.K_SPACE)
    handle_key(session, CollisionCue(None), pygame.K_RIGHT)
    out = capsys.readouterr().out
    assert f"[main] KEYDOWN: key={pygame.K_SPACE}" in out
    assert f"[main] KEYDOWN: key={pygame.K_RIGHT}" in out
    assert "[main] lane -> 2" in out
