"""
Base Container - Shared Singletons.

Single Responsibility: Build the stateless domain services once per
application from settings.
"""

import logging
from zoneinfo import ZoneInfo

from backoffice.config.settings import Settings, get_settings
from backoffice.domains.orders.domain.services import DeliveryRouteAssigner, ReviewGate, StatsAggregator

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

        self._route_assigner: DeliveryRouteAssigner | None = None
        self._review_gate: ReviewGate | None = None
        self._stats_aggregator: StatsAggregator | None = None

        logger.info("BaseContainer initialized")

    def get_route_assigner(self) -> DeliveryRouteAssigner:
        if self._route_assigner is None:
            self._route_assigner = DeliveryRouteAssigner(
                enforce_eligibility=self.settings.ENFORCE_ROUTE_ELIGIBILITY,
            )
        return self._route_assigner

    def get_review_gate(self) -> ReviewGate:
        if self._review_gate is None:
            self._review_gate = ReviewGate(max_images=self.settings.REVIEW_MAX_IMAGES)
        return self._review_gate

    def get_stats_aggregator(self) -> StatsAggregator:
        """
        Aggregator bound to STATS_TIMEZONE, or to the server's local zone
        when that is unset.
        """
        if self._stats_aggregator is None:
            timezone = ZoneInfo(self.settings.STATS_TIMEZONE) if self.settings.STATS_TIMEZONE else None
            self._stats_aggregator = StatsAggregator(timezone=timezone)
        return self._stats_aggregator
