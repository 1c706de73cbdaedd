# settings.py -- Barrel Dash constants, config and CLI flags
# Usage:
#   python -m barrel_dash --lanes 3
#   python -m barrel_dash --seed 7 --mute

import argparse
from dataclasses import dataclass

# ----------------------------
# Settings
# ----------------------------
WIDTH, HEIGHT = 400, 600
FPS = 60
LANES = 3
MIN_LANES, MAX_LANES = 2, 6

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 60
PLAYER_BOTTOM_MARGIN = 10

OBSTACLE_WIDTH = 40
OBSTACLE_HEIGHT = 40
OBSTACLE_SPEED = 4             # px per tick, not scaled by frame time
SPAWN_INTERVAL_MS = 1000

SAMPLE_RATE = 44100


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    lanes: int = LANES
    fps: int = FPS
    player_width: int = PLAYER_WIDTH
    player_height: int = PLAYER_HEIGHT
    obstacle_width: int = OBSTACLE_WIDTH
    obstacle_height: int = OBSTACLE_HEIGHT
    obstacle_speed: float = OBSTACLE_SPEED
    spawn_interval_ms: int = SPAWN_INTERVAL_MS

    def __post_init__(self):
        if self.lanes < 1:
            raise ValueError(f"need at least one lane, got {self.lanes}")
        for name in ("width", "height", "fps", "player_width", "player_height",
                     "obstacle_width", "obstacle_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        widest = max(self.player_width, self.obstacle_width)
        if widest > self.width / self.lanes:
            raise ValueError(f"items {widest}px wide do not fit in {self.lanes} lanes of {self.width}px")

    @property
    def lane_width(self):
        return self.width / self.lanes

    @property
    def player_y(self):
        return self.height - self.player_height - PLAYER_BOTTOM_MARGIN

    @property
    def center_lane(self):
        return self.lanes // 2


# ----------------------------
# CLI args
# ----------------------------
def build_parser():
    parser = argparse.ArgumentParser(prog="barrel_dash", description="Barrel Dash")
    parser.add_argument("--lanes", type=int, default=LANES, help=f"number of lanes ({MIN_LANES}-{MAX_LANES})")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle lanes (optional)")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument("--mute", action="store_true", help="start with sound muted")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def build_config(args):
    lanes = max(MIN_LANES, min(MAX_LANES, args.lanes))
    fps = max(1, args.fps)
    return GameConfig(lanes=lanes, fps=fps)
