"""
Dashboard Statistics Use Case
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Callable

from backoffice.core.domain import AggregationException, AuthorizationException
from backoffice.domains.orders.application.ports import IStatsRepository
from backoffice.domains.orders.domain.services import DashboardStats, StatsAggregator
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class DashboardStatsResponse:
    stats: DashboardStats
    generated_at: datetime
    success: bool = True


class GetDashboardStatsUseCase:
    """
    Use Case: Get Dashboard Statistics

    Loads a fresh snapshot and aggregates it. Any failure while reading or
    aggregating surfaces as a single AggregationException; partial
    statistics are never returned.
    """

    def __init__(
        self,
        stats_repository: IStatsRepository,
        aggregator: StatsAggregator,
        clock: Callable[[], datetime] | None = None,
    ):
        self.stats_repository = stats_repository
        self.aggregator = aggregator
        self.clock = clock or (lambda: datetime.now(UTC))

    async def execute(self, acting_user: CurrentUser) -> DashboardStatsResponse:
        if not acting_user.is_admin:
            raise AuthorizationException("view_dashboard_stats", "stats", str(acting_user.id))

        now = self.clock()
        try:
            snapshot = await self.stats_repository.load_snapshot()
            stats = self.aggregator.aggregate(snapshot, now)
        except Exception as e:
            logger.error(f"Error aggregating dashboard statistics: {e}")
            raise AggregationException("dashboard collections", e) from e

        return DashboardStatsResponse(stats=stats, generated_at=now)


__all__ = ["DashboardStatsResponse", "GetDashboardStatsUseCase"]
