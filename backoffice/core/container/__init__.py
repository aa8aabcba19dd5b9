"""
Dependency Injection Container.

Facade composing the domain containers. One instance lives on
`app.state.container` for the lifetime of the application.
"""

import logging

from backoffice.config.settings import Settings

from .base import BaseContainer
from .orders import OrdersContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, settings: Settings | None = None):
        self._base = BaseContainer(settings)
        self._orders = OrdersContainer(self._base)
        logger.info("DependencyContainer initialized with all domain containers")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    @property
    def orders(self) -> OrdersContainer:
        return self._orders


__all__ = ["BaseContainer", "DependencyContainer", "OrdersContainer"]
