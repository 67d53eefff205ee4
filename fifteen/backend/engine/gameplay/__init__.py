from fifteen.backend.engine.gameplay.game import Puzzle
from fifteen.backend.engine.gameplay.replay import replay

__all__ = ["Puzzle", "replay"]
