"""Statistics use cases."""

from .get_stats import GetStatsUseCase, StatsResponse

__all__ = ["GetStatsUseCase", "StatsResponse"]
