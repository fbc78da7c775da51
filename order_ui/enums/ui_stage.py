from enum import Enum

from order_ui.utils.text import to_text


class UiStage(str, Enum):
    """
    Lifecycle stage shown to the customer for a single order.

    Decoupled from the raw backend status vocabulary: exactly one stage is
    resolved per order snapshot (see services/order_stage.py).
    """

    # Dispatch / matching
    CHECKING_DRIVERS = "checking_drivers"
    NO_RIDERS = "no_riders"
    ASSIGNING_RIDER = "assigning_rider"

    # Store workflow
    WAITING_STORE_CONFIRM = "waiting_store_confirm"
    WAITING_QUOTE = "waiting_quote"
    QUOTE_READY = "quote_ready"
    WAITING_PAYMENT = "waiting_payment"
    PREPARING = "preparing"

    # Delivery leg
    RIDER_ON_THE_WAY = "rider_on_the_way"
    PICKED_UP = "picked_up"
    NEAR_YOU = "near_you"
    DELIVERED = "delivered"

    # Terminal
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def from_string(cls, value) -> 'UiStage | None':
        """
        Convert a stage string to UiStage.

        Case-insensitive, whitespace-tolerant. Returns None for unknown
        or empty values instead of raising.

        Examples:
            >>> UiStage.from_string(" Picked_Up ")
            UiStage.PICKED_UP
            >>> UiStage.from_string("teleported") is None
            True
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None

        normalized = to_text(value).strip().lower()
        for stage in cls:
            if stage.value == normalized:
                return stage
        return None

