from .notification_trigger import NotificationTrigger
from .slack_service import SlackNotificationService, SlackResponse

__all__ = ["NotificationTrigger", "SlackNotificationService", "SlackResponse"]
