from .leaderboard_service import LeaderboardService
from .learner_stats_service import LearnerStatsService

__all__ = ['LeaderboardService', 'LearnerStatsService']
