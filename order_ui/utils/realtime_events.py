"""
Realtime Event Type Normalization

Resolves raw (possibly legacy) realtime event type strings to their canonical
RealtimeEventType value, extracts the related order id from the payload shapes
senders use, and decides whether an event should trigger an order refetch.

All functions are total: malformed input degrades to "" / False / None.
"""
import logging
from collections.abc import Mapping
from types import MappingProxyType

from order_ui.enums.realtime_event_type import RealtimeEventDomain, RealtimeEventType
from order_ui.utils.text import to_text

logger = logging.getLogger(__name__)


# Append-only: an alias must never be repointed, deployed senders rely on it.
LEGACY_EVENT_ALIASES: Mapping[str, str] = MappingProxyType({
    # chat
    "chat.message": RealtimeEventType.CHAT_MESSAGE.value,

    # order
    "ORDER_STATUS": RealtimeEventType.ORDER_UPDATED.value,
    "STORE_STATUS": RealtimeEventType.ORDER_UPDATED.value,
    "STORE_ORDER_UPDATED": RealtimeEventType.ORDER_UPDATED.value,

    # driver
    "DRIVER_LOCATION": RealtimeEventType.DRIVER_LOCATION_UPDATED.value,
    "DRIVER_JOB_UPDATED": RealtimeEventType.ORDER_UPDATED.value,
    "DRIVER_JOB_STATUS": RealtimeEventType.ORDER_UPDATED.value,

    # dispatch offers
    "OFFER_CANCELLED": RealtimeEventType.ORDER_SEARCH_CANCELLED.value,
    "OFFER_TIMEOUT": RealtimeEventType.DRIVER_OFFER_EXPIRED.value,
})

ORDER_REFRESH_EVENT_TYPES: frozenset[str] = frozenset(t.value for t in [
    # order lifecycle
    RealtimeEventType.ORDER_CREATED,
    RealtimeEventType.ORDER_UPDATED,
    RealtimeEventType.ORDER_CANCELLED,
    RealtimeEventType.ORDER_EXPIRED,
    RealtimeEventType.ORDER_REDISPATCHED,
    RealtimeEventType.ORDER_SEARCH_CANCELLED,

    # dispatch & matching
    RealtimeEventType.DISPATCH_SEARCHING,
    RealtimeEventType.DRIVER_OFFERED,
    RealtimeEventType.DRIVER_OFFER_EXPIRED,
    RealtimeEventType.DRIVER_ASSIGNED,
    RealtimeEventType.DRIVER_REJECTED,
    RealtimeEventType.DRIVER_UNASSIGNED,

    # trip progress
    RealtimeEventType.DRIVER_EN_ROUTE_TO_PICKUP,
    RealtimeEventType.DRIVER_ARRIVED_PICKUP,
    RealtimeEventType.PICKED_UP,
    RealtimeEventType.EN_ROUTE_TO_DROPOFF,
    RealtimeEventType.ARRIVED_DROPOFF,
    RealtimeEventType.DELIVERED,
    RealtimeEventType.DELIVERY_CONFIRMED,

    # payments (wallet/escrow balance changes don't touch the order)
    RealtimeEventType.PAYMENT_REQUIRED,
    RealtimeEventType.PAYMENT_SUBMITTED,
    RealtimeEventType.PAYMENT_VERIFIED,
    RealtimeEventType.PAYMENT_REJECTED,
    RealtimeEventType.REFUND_ISSUED,

    # store workflow
    RealtimeEventType.STORE_ACCEPTED,
    RealtimeEventType.STORE_PREP_STATUS_UPDATED,
    RealtimeEventType.STORE_READY,
    RealtimeEventType.STORE_CANCELLED,
    RealtimeEventType.ITEMS_UPDATED,

    # COD / OTP
    RealtimeEventType.COD_OTP_SENT,
    RealtimeEventType.COD_OTP_CONFIRMED,
    RealtimeEventType.COD_OTP_EXPIRED,
    RealtimeEventType.PARCEL_COD_COLLECTED,
    RealtimeEventType.PARCEL_COD_REMIT_REQUIRED,
    RealtimeEventType.PARCEL_COD_REMITTED,
    RealtimeEventType.PARCEL_COD_REMIT_REJECTED,

    # driver state
    RealtimeEventType.DRIVER_STATUS_CHANGED,
    RealtimeEventType.DRIVER_LOCATION_UPDATED,
])

# First match wins; payloads sometimes carry several id-shaped keys.
ORDER_ID_KEYS: tuple[str, ...] = (
    "order_id",
    "job_id",
    "delivery_order_id",
    "id",
    "orderId",
    "jobId",
)

_CANONICAL_TYPES: frozenset[str] = frozenset(t.value for t in RealtimeEventType)


def _lookup(container, key: str):
    """Read `key` from a mapping or an attribute-bearing object, None if absent."""
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(key)
    if isinstance(container, (str, bytes, int, float, list, tuple)):
        return None
    # pydantic models keep unknown payload keys in model_extra
    extra = getattr(container, "model_extra", None)
    if isinstance(extra, Mapping) and key in extra:
        return extra[key]
    try:
        return getattr(container, key, None)
    except Exception:
        return None


def normalize_type(raw) -> str:
    """
    Resolve a raw event type to its canonical form.

    Args:
        raw: Event type as received (any type)

    Returns:
        "" for empty input, the canonical type for a known legacy alias,
        otherwise the trimmed input unchanged (forward-compatible passthrough).

    Examples:
        >>> normalize_type(" chat.message ")
        'CHAT_MESSAGE'
        >>> normalize_type("SOMETHING_NEW")
        'SOMETHING_NEW'
    """
    event_type = to_text(raw).strip()
    if not event_type:
        return ""

    canonical = LEGACY_EVENT_ALIASES.get(event_type)
    if canonical is not None:
        return canonical

    if event_type not in _CANONICAL_TYPES:
        logger.debug(f"Unknown realtime event type passed through: {event_type}")
    return event_type


def extract_order_id(event) -> str:
    """
    Extract the order/job id from a realtime payload.

    Top-level keys are tried first (in ORDER_ID_KEYS order), then the same
    keys one level down under `data`. The first non-None value wins, even
    an empty string.

    Returns:
        The id stringified and trimmed, "" if none of the keys is present.
    """
    for key in ORDER_ID_KEYS:
        value = _lookup(event, key)
        if value is not None:
            return to_text(value).strip()

    data = _lookup(event, "data")
    for key in ORDER_ID_KEYS:
        value = _lookup(data, key)
        if value is not None:
            return to_text(value).strip()

    return ""


def is_refresh_trigger(raw_type) -> bool:
    """True if receiving this event type should refetch the order. Unknown -> False."""
    return normalize_type(raw_type) in ORDER_REFRESH_EVENT_TYPES


def is_canonical_type(raw_type) -> bool:
    return normalize_type(raw_type) in _CANONICAL_TYPES


def event_domain(raw_type) -> RealtimeEventDomain | None:
    """Domain of the normalized event type, None for unknown or empty types."""
    event_type = normalize_type(raw_type)
    if event_type not in _CANONICAL_TYPES:
        return None
    return RealtimeEventType(event_type).domain
