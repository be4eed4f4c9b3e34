"""
Workflow Domain Value Objects
"""

from ricebikes.core.domain import StatusEnum


class WorkflowType(StatusEnum):
    """Workflows a transaction can go through."""

    BIKE_SALES = "bike_sales"
    REPAIR_PROCESS = "repair_process"
    ORDER_FULFILLMENT = "order_fulfillment"
    CUSTOM_WORKFLOW = "custom_workflow"


class BikeSalesStep(StatusEnum):
    BIKE_SPEC = "BikeSpec"
    BUILD = "Build"
    CREATION = "Creation"
    CHECKOUT = "Checkout"


class RepairProcessStep(StatusEnum):
    ASSESSMENT = "Assessment"
    PARTS_ORDERING = "Parts Ordering"
    REPAIR_WORK = "Repair Work"
    QUALITY_CHECK = "Quality Check"
