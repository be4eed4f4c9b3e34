"""
Base Container - Shared Singletons.

Holds the settings and the process-wide notification services.
"""

import logging

from ricebikes.config.settings import Settings, get_settings
from ricebikes.services.notifications import NotificationTrigger, SlackNotificationService

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

        self._slack_service: SlackNotificationService | None = None
        self._notification_trigger: NotificationTrigger | None = None

        logger.info("BaseContainer initialized")

    def get_slack_service(self) -> SlackNotificationService:
        """Get SlackNotificationService instance (singleton)."""
        if self._slack_service is None:
            self._slack_service = SlackNotificationService(self.settings)
        return self._slack_service

    def get_notification_trigger(self) -> NotificationTrigger:
        """Get NotificationTrigger instance (singleton)."""
        if self._notification_trigger is None:
            self._notification_trigger = NotificationTrigger(self.get_slack_service())
        return self._notification_trigger
