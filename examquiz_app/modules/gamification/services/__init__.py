from .streak_service import StreakService

__all__ = ['StreakService']
