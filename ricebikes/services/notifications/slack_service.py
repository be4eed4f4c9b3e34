"""
Slack webhook notifications for shop events.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from ricebikes.config.settings import Settings, get_settings
from ricebikes.domains.transactions.domain.entities import Transaction

logger = logging.getLogger(__name__)

BOT_USERNAME = "Rice Bikes Bot"


@dataclass
class SlackResponse:
    success: bool
    message: str


def _transaction_num(transaction: Transaction | None) -> str:
    if transaction is None or transaction.transaction_num is None:
        return "Unknown"
    return str(transaction.transaction_num)


class SlackNotificationService:
    """
    Posts messages to the configured Slack incoming webhook.

    Never raises: failures are logged and reported through SlackResponse.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.webhook_url = self.settings.SLACK_WEBHOOK_URL or ""
        self.enabled = self.settings.SLACK_NOTIFICATIONS_ENABLED
        self.timeout = self.settings.SLACK_TIMEOUT_SECONDS

        if not self.enabled:
            logger.info("Slack notifications are disabled")
        elif not self.webhook_url:
            logger.warning("SLACK_WEBHOOK_URL is not set, Slack notifications will fail")

    async def send(self, payload: dict[str, Any]) -> SlackResponse:
        """Post a message payload to the webhook."""
        if not self.enabled:
            logger.debug("Slack notifications disabled, skipping message")
            return SlackResponse(True, "Notifications disabled")

        if not self.webhook_url:
            logger.error("Slack webhook URL not configured")
            return SlackResponse(False, "Webhook URL missing")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)

            if response.status_code >= 400:
                error_msg = f"Slack API error: {response.status_code} {response.text}"
                logger.error(error_msg)
                return SlackResponse(False, error_msg)

            logger.info("Slack notification sent")
            return SlackResponse(True, "Notification sent")

        except httpx.TimeoutException:
            error_msg = "Timeout while contacting Slack"
            logger.error(error_msg)
            return SlackResponse(False, error_msg)
        except httpx.HTTPError as e:
            error_msg = f"Failed to send Slack notification: {e}"
            logger.error(error_msg)
            return SlackResponse(False, error_msg)

    # =========================================================================
    # Message builders
    # =========================================================================

    def _message(self, text: str, icon: str, color: str, fields: list[dict[str, Any]], footer: str) -> dict[str, Any]:
        return {
            "text": text,
            "username": BOT_USERNAME,
            "icon_emoji": icon,
            "attachments": [
                {
                    "color": color,
                    "fields": fields,
                    "footer": footer,
                    "ts": int(time.time()),
                }
            ],
        }

    async def notify_build_complete(self, transaction: Transaction | None) -> SlackResponse:
        return await self.send(
            self._message(
                "Bike Build Complete!",
                ":bike:",
                "good",
                [{"title": "Transaction #", "value": _transaction_num(transaction), "short": True}],
                "Ready for inspection and safety check",
            )
        )

    async def notify_reservation_complete(self, transaction: Transaction | None) -> SlackResponse:
        return await self.send(
            self._message(
                "Bike Reserved!",
                ":clipboard:",
                "warning",
                [{"title": "Transaction #", "value": _transaction_num(transaction), "short": True}],
                "Customer deposit processed",
            )
        )

    async def notify_transaction_complete(self, transaction: Transaction | None) -> SlackResponse:
        total = transaction.total_cost if transaction is not None else 0.0
        return await self.send(
            self._message(
                "Sale Complete!",
                ":money_with_wings:",
                "#36a64f",
                [
                    {"title": "Transaction #", "value": _transaction_num(transaction), "short": True},
                    {"title": "Final Price", "value": f"${total:.2f}", "short": True},
                ],
                "Transaction closed",
            )
        )

    async def notify_workflow_step_complete(self, step_name: str, transaction: Transaction | None) -> SlackResponse:
        return await self.send(
            self._message(
                f"Workflow Step Complete: {step_name}",
                ":white_check_mark:",
                "#0066cc",
                [
                    {"title": "Transaction #", "value": _transaction_num(transaction), "short": True},
                    {"title": "Step", "value": step_name, "short": True},
                ],
                "Workflow progress updated",
            )
        )
