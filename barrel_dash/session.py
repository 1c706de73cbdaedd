# session.py -- game state and the per-tick update
#
# One GameSession owns the player, the obstacle list, the timers and the
# score. The runner calls tick() once per frame and reset() on restart;
# input reaches it through controls.apply_intent between ticks.

from enum import Enum

from .collision import first_collision
from .entities import Player
from .movement import advance_obstacles
from .settings import GameConfig
from .spawner import Spawner


class Status(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameSession:
    def __init__(self, config=None, rng=None, on_game_over=None):
        self.config = config or GameConfig()
        self.player = Player(self.config)
        self.spawner = Spawner(self.config, rng)
        self.on_game_over = on_game_over
        self.obstacles = []
        self.status = Status.RUNNING
        self.start_ms = None
        self.score = 0
        self.final_score = None

    @property
    def running(self):
        return self.status is Status.RUNNING

    def tick(self, now):
        """Advance one frame at time ``now`` (ms).

        Returns True when another tick should be scheduled. A session that is
        over does nothing and returns False until reset().
        """
        if not self.running:
            return False
        if self.start_ms is None:
            self.start_ms = now

        self.obstacles = advance_obstacles(self.obstacles, self.config.obstacle_speed, self.config.height)

        if self.spawner.due(now):
            self.obstacles.append(self.spawner.spawn(now))

        # only the first hit in spawn order counts
        if first_collision(self.player, self.obstacles) is not None:
            self._end()
            return False

        self.score = max(0, int((now - self.start_ms) // 1000))
        return True

    def _end(self):
        self.status = Status.GAME_OVER
        self.final_score = self.score
        if self.on_game_over is not None:
            self.on_game_over(self.final_score)

    def reset(self):
        self.player.reset()
        self.obstacles = []
        self.spawner.reset()
        self.start_ms = None
        self.score = 0
        self.final_score = None
        self.status = Status.RUNNING

    def move_left(self):
        if not self.running:
            return False
        return self.player.shift(-1)

    def move_right(self):
        if not self.running:
            return False
        return self.player.shift(1)

    # ----------------------------
    # text projections for the HUD
    # ----------------------------
    def score_text(self):
        return f"Score: {self.score}"

    def final_score_text(self):
        if self.final_score is None:
            return None
        return f"Score: {self.final_score}"

    def snapshot(self):
        return {
            "status": self.status.value,
            "lane": self.player.lane,
            "obstacles": [(ob.lane, ob.y) for ob in self.obstacles],
            "score": self.score,
        }
