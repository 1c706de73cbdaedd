# entities.py -- Player & Obstacle

import pygame

from .geometry import lane_to_x


class Player:
    def __init__(self, config):
        self.config = config
        self.width = config.player_width
        self.height = config.player_height
        self.y = config.player_y
        self.lane = config.center_lane

    @property
    def x(self):
        return lane_to_x(self.config, self.lane, self.width)

    @property
    def box(self):
        return (self.x, self.y, self.width, self.height)

    @property
    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def shift(self, delta):
        """Move ``delta`` lanes, clamped to the road. Returns True if the lane changed."""
        new_lane = max(0, min(self.config.lanes - 1, self.lane + delta))
        if new_lane == self.lane:
            return False
        self.lane = new_lane
        return True

    def reset(self):
        self.lane = self.config.center_lane
        self.y = self.config.player_y


class Obstacle:
    def __init__(self, lane, x, y, width, height):
        self.lane = lane
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @classmethod
    def in_lane(cls, config, lane):
        # starts fully above the top edge
        return cls(lane, lane_to_x(config, lane, config.obstacle_width), -config.obstacle_height,
                   config.obstacle_width, config.obstacle_height)

    @property
    def box(self):
        return (self.x, self.y, self.width, self.height)

    @property
    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def update(self, speed):
        self.y += speed

    def __repr__(self):
        return f"Obstacle(lane={self.lane}, x={self.x}, y={self.y})"
