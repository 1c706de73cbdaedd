# spawner.py -- timed obstacle spawns at random lanes

import random

from .entities import Obstacle


def make_lane_source(seed=None):
    """Random source for lane picks. Anything with ``randrange`` will do."""
    return random.Random(seed)


class Spawner:
    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng if rng is not None else make_lane_source()
        self.last_spawn_ms = None

    def due(self, now):
        if self.last_spawn_ms is None:
            return True
        return now - self.last_spawn_ms > self.config.spawn_interval_ms

    def spawn(self, now):
        lane = self.rng.randrange(self.config.lanes)
        self.last_spawn_ms = now
        return Obstacle.in_lane(self.config, lane)

    def reset(self):
        self.last_spawn_ms = None
