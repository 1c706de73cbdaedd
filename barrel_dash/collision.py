# collision.py -- lane-gated AABB test

from .geometry import rects_overlap


def collides(player, obstacle):
    if player.lane != obstacle.lane:
        return False
    return rects_overlap(player.box, obstacle.box)


def first_collision(player, obstacles):
    for ob in obstacles:
        if collides(player, ob):
            return ob
    return None
