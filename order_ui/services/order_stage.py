import logging

from order_ui.enums.ui_stage import UiStage
from order_ui.models.order_snapshot import OrderSnapshotDTO
from order_ui.models.stage_copy import StageCopyDTO
from order_ui.utils.localizator import Localizator
from order_ui.utils.text import to_text

logger = logging.getLogger(__name__)


# Permissive on purpose: the backend owns payment correctness, the UI only
# needs a calm state.
PAID_ENOUGH_STATUSES = frozenset({
    "verified",
    "paid",
    "captured",
    "authorized",
    "success",
    "completed",
})

CANCELLED_STATUSES = frozenset({"cancelled", "canceled"})

CASH_PAYMENT_METHODS = frozenset({"cash", "cod"})

SYSTEM_CANCEL_ACTORS = frozenset({"system", "auto", "platform"})

NO_DRIVER_CANCEL_REASONS = frozenset({
    "no_drivers_available",
    "no_available_driver",
    "no_driver_available",
    "no_rider_available",
    "no_riders_available",
    "dispatch_exhausted",
    "exhausted",
    "no_riders",
    "no_drivers",
})


def _norm(value) -> str:
    """Coerce an untrusted field to a trimmed, lower-cased string ("" for None)."""
    return to_text(value).strip().lower()


class OrderStageService:

    @staticmethod
    def is_cancelled(status) -> bool:
        return _norm(status) in CANCELLED_STATUSES

    @staticmethod
    def is_paid_enough(payment_status) -> bool:
        return _norm(payment_status) in PAID_ENOUGH_STATUSES

    @staticmethod
    def is_system_no_driver_cancel(order) -> bool:
        """
        True when the platform itself cancelled the order because no rider
        could be matched.

        Only selects non-penalizing copy; the stage stays CANCELLED.
        """
        snapshot = OrderSnapshotDTO.from_raw(order)
        if not OrderStageService.is_cancelled(snapshot.status):
            return False

        by_system = _norm(snapshot.cancelled_by) in SYSTEM_CANCEL_ACTORS
        no_driver = _norm(snapshot.cancel_reason) in NO_DRIVER_CANCEL_REASONS
        return by_system and no_driver

    @staticmethod
    def classify(order) -> UiStage:
        """
        Resolve the single UI stage for an order snapshot.

        Rules are checked top to bottom and the first match wins:
        1. dispatch exhausted, no driver, not cancelled -> NO_RIDERS
        2. hard terminal: cancelled / completed
        3. delivery leg: delivered, in_transit, picked_up, arrived/accepted
        4. store flow (store attached): quote, store confirmation, prep, payment window
        5. parcel/transport flow: pending_payment, pending
        6. ASSIGNING_RIDER

        Args:
            order: OrderSnapshotDTO, dict or any object carrying order fields

        Returns:
            UiStage (never raises)
        """
        snapshot = OrderSnapshotDTO.from_raw(order)
        stage = OrderStageService._resolve_stage(snapshot)
        logger.debug(f"Order stage resolved: status={_norm(snapshot.status)!r} -> {stage.value}")
        return stage

    @staticmethod
    def _resolve_stage(snapshot: OrderSnapshotDTO) -> UiStage:
        status = _norm(snapshot.status)
        store_status = _norm(snapshot.store_status)
        payment_status = _norm(snapshot.payment_status)
        payment_method = _norm(snapshot.payment_method)
        dispatch_status = _norm(snapshot.dispatch_status)
        has_store = bool(snapshot.store_id)
        has_driver = bool(snapshot.driver_id)
        cancelled = status in CANCELLED_STATUSES

        is_cod = payment_method in CASH_PAYMENT_METHODS
        payment_pending = not is_cod and not OrderStageService.is_paid_enough(payment_status)

        # Exhausted dispatch surfaced calmly; a real cancellation wins
        if not has_driver and "exhaust" in dispatch_status and not cancelled:
            return UiStage.NO_RIDERS

        # Hard terminal
        if cancelled:
            return UiStage.CANCELLED
        if status == "completed":
            return UiStage.COMPLETED

        # Delivery leg
        if status == "delivered":
            return UiStage.DELIVERED
        if status == "in_transit":
            # near_you is a pass-through hint, not derived from driver location
            return UiStage.NEAR_YOU if snapshot.near_you else UiStage.PICKED_UP
        if status == "picked_up":
            return UiStage.PICKED_UP
        if status in ("arrived", "accepted"):
            return UiStage.RIDER_ON_THE_WAY

        # Store flow: store acceptance comes before the payment window
        if has_store:
            requires_quote = bool(snapshot.requires_quote_confirmation) or bool(_norm(snapshot.request_kind))
            quote_status = _norm(snapshot.quote_status)

            if requires_quote:
                if quote_status == "pending":
                    return UiStage.WAITING_QUOTE
                if quote_status == "ready" and not OrderStageService.is_paid_enough(payment_status):
                    return UiStage.QUOTE_READY

            if not store_status or store_status == "new":
                return UiStage.WAITING_STORE_CONFIRM
            if store_status == "preparing":
                return UiStage.PREPARING
            if store_status in ("ready", "accepted"):
                return UiStage.WAITING_PAYMENT if payment_pending else UiStage.ASSIGNING_RIDER

        # Parcel / transport flow
        if status == "pending_payment":
            return UiStage.ASSIGNING_RIDER
        if status == "pending":
            return UiStage.ASSIGNING_RIDER if has_driver else UiStage.CHECKING_DRIVERS

        return UiStage.ASSIGNING_RIDER

    @staticmethod
    def copy_for(stage, order=None, lang: str | None = None) -> StageCopyDTO:
        """
        Title/subtitle for a stage.

        The CANCELLED stage switches to the no-penalty "couldn't match a rider"
        wording when the platform cancelled for lack of drivers. An unknown
        stage value gets the ASSIGNING_RIDER copy.

        Args:
            stage: UiStage or its string value
            order: Snapshot the stage was computed from (only read for CANCELLED)
            lang: Optional language code, defaults to config.COPY_LANGUAGE

        Returns:
            StageCopyDTO with non-empty title and subtitle
        """
        resolved = UiStage.from_string(stage)
        if resolved is None:
            logger.warning(f"No copy for unknown UI stage {stage!r}, using {UiStage.ASSIGNING_RIDER.value}")
            resolved = UiStage.ASSIGNING_RIDER

        key = resolved.value
        if resolved == UiStage.CANCELLED and OrderStageService.is_system_no_driver_cancel(order):
            key = Localizator.SYSTEM_NO_DRIVER_CANCEL_KEY

        title, subtitle = Localizator.get_stage_copy(key, lang=lang)
        return StageCopyDTO(title=title, subtitle=subtitle)


# Function-style aliases for callers that don't want the service class
def classify_order(order) -> UiStage:
    return OrderStageService.classify(order)


def copy_for_stage(stage, order=None, lang: str | None = None) -> StageCopyDTO:
    return OrderStageService.copy_for(stage, order, lang=lang)


def is_system_no_driver_cancel(order) -> bool:
    return OrderStageService.is_system_no_driver_cancel(order)
