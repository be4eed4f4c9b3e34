"""
Maps workflow and transaction events to Slack messages.
"""

import logging

from ricebikes.domains.transactions.domain.entities import Transaction
from ricebikes.domains.workflow.domain.entities import WorkflowStep

from .slack_service import SlackNotificationService

logger = logging.getLogger(__name__)


class NotificationTrigger:
    """
    Decides which notification an event deserves.

    Satisfies both IStepCompletionNotifier and ITransactionUpdateNotifier.
    """

    def __init__(self, slack_service: SlackNotificationService):
        self.slack = slack_service

    async def handle_step_completion(self, step: WorkflowStep, transaction: Transaction | None = None) -> None:
        if not step.is_completed:
            return

        name = step.step_name.lower()
        if name == "build":
            result = await self.slack.notify_build_complete(transaction)
        elif name == "reservation":
            result = await self.slack.notify_reservation_complete(transaction)
        elif name == "checkout":
            result = await self.slack.notify_transaction_complete(transaction)
        else:
            result = await self.slack.notify_workflow_step_complete(step.step_name, transaction)

        if not result.success:
            logger.warning(f"Step completion notification not delivered: {result.message}")

    async def handle_transaction_update(self, old: Transaction, new: Transaction) -> None:
        if not old.is_reserved and new.is_reserved:
            await self.slack.notify_reservation_complete(new)

        if not old.is_completed and new.is_completed:
            await self.slack.notify_transaction_complete(new)

        if new.is_retrospec and not old.is_paid and new.is_paid:
            await self.handle_bike_sale(new)

    async def handle_bike_sale(self, transaction: Transaction) -> None:
        await self.slack.notify_transaction_complete(transaction)
