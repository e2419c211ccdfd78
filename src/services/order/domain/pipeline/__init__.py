from .order_context import OrderContext as OrderContext
from .order_processing_pipeline import (
    OrderProcessingPipeline as OrderProcessingPipeline,
)
from .stages import OrderStage as OrderStage
from .stages import charge_payment as charge_payment
from .stages import close_order as close_order
from .stages import confirm_order as confirm_order
from .stages import validate_order as validate_order
