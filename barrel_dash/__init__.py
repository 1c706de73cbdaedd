# Barrel Dash -- lane-switching arcade dodger built on pygame

from .session import GameSession, Status
from .settings import GameConfig

__version__ = "0.1.0"

__all__ = ["GameConfig", "GameSession", "Status"]
