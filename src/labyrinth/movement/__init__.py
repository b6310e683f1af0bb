from .engine import Direction, MovementEngine, MoveResult

__all__ = ["Direction", "MovementEngine", "MoveResult"]
