from enum import Enum


class RealtimeEventDomain(str, Enum):
    """Functional area a canonical realtime event type belongs to."""
    ORDER_LIFECYCLE = "order_lifecycle"
    DISPATCH = "dispatch"
    TRIP_PROGRESS = "trip_progress"
    PAYMENTS = "payments"
    STORE_WORKFLOW = "store_workflow"
    COD_OTP = "cod_otp"
    CHAT_SUPPORT = "chat_support"
    DRIVER_STATE = "driver_state"


class RealtimeEventType(str, Enum):
    """
    Canonical realtime/socket event types.

    Mirrors the event type catalog emitted by the API. Values are the exact
    wire strings; legacy spellings are resolved in utils/realtime_events.py.
    """

    # A) Order lifecycle
    ORDER_CREATED = "ORDER_CREATED"
    ORDER_UPDATED = "ORDER_UPDATED"
    ORDER_CANCELLED = "ORDER_CANCELLED"
    ORDER_EXPIRED = "ORDER_EXPIRED"
    ORDER_REDISPATCHED = "ORDER_REDISPATCHED"
    ORDER_SEARCH_CANCELLED = "ORDER_SEARCH_CANCELLED"

    # B) Dispatch & driver matching
    DISPATCH_SEARCHING = "DISPATCH_SEARCHING"
    DRIVER_OFFERED = "DRIVER_OFFERED"
    DRIVER_OFFER_EXPIRED = "DRIVER_OFFER_EXPIRED"
    DRIVER_ASSIGNED = "DRIVER_ASSIGNED"
    DRIVER_REJECTED = "DRIVER_REJECTED"
    DRIVER_UNASSIGNED = "DRIVER_UNASSIGNED"

    # C) Trip progress (driver statuses)
    DRIVER_EN_ROUTE_TO_PICKUP = "DRIVER_EN_ROUTE_TO_PICKUP"
    DRIVER_ARRIVED_PICKUP = "DRIVER_ARRIVED_PICKUP"
    PICKED_UP = "PICKED_UP"
    EN_ROUTE_TO_DROPOFF = "EN_ROUTE_TO_DROPOFF"
    ARRIVED_DROPOFF = "ARRIVED_DROPOFF"
    DELIVERED = "DELIVERED"
    DELIVERY_CONFIRMED = "DELIVERY_CONFIRMED"

    # D) Payments / Wallet / Escrow
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    PAYMENT_SUBMITTED = "PAYMENT_SUBMITTED"
    PAYMENT_VERIFIED = "PAYMENT_VERIFIED"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"
    WALLET_UPDATED = "WALLET_UPDATED"
    ESCROW_UPDATED = "ESCROW_UPDATED"
    REFUND_ISSUED = "REFUND_ISSUED"

    # E) Store / Merchant workflow
    STORE_ACCEPTED = "STORE_ACCEPTED"
    STORE_PREP_STATUS_UPDATED = "STORE_PREP_STATUS_UPDATED"
    STORE_READY = "STORE_READY"
    STORE_CANCELLED = "STORE_CANCELLED"
    ITEMS_UPDATED = "ITEMS_UPDATED"

    # F) COD / OTP / Parcel COD
    COD_OTP_SENT = "COD_OTP_SENT"
    COD_OTP_CONFIRMED = "COD_OTP_CONFIRMED"
    COD_OTP_EXPIRED = "COD_OTP_EXPIRED"
    PARCEL_COD_COLLECTED = "PARCEL_COD_COLLECTED"
    PARCEL_COD_REMIT_REQUIRED = "PARCEL_COD_REMIT_REQUIRED"
    PARCEL_COD_REMITTED = "PARCEL_COD_REMITTED"
    PARCEL_COD_REMIT_REJECTED = "PARCEL_COD_REMIT_REJECTED"

    # G) Chat / support
    CHAT_MESSAGE = "CHAT_MESSAGE"
    CHAT_CONVERSATION_UPDATED = "CHAT_CONVERSATION_UPDATED"
    SUPPORT_ASSIGNED = "SUPPORT_ASSIGNED"

    # H) Driver state
    DRIVER_STATUS_CHANGED = "DRIVER_STATUS_CHANGED"
    DRIVER_LOCATION_UPDATED = "DRIVER_LOCATION_UPDATED"
    DRIVER_TRUST_SCORE_UPDATED = "DRIVER_TRUST_SCORE_UPDATED"

    @property
    def domain(self) -> RealtimeEventDomain:
        return _EVENT_DOMAINS[self]


_EVENT_DOMAINS: dict[RealtimeEventType, RealtimeEventDomain] = {
    **dict.fromkeys([
        RealtimeEventType.ORDER_CREATED,
        RealtimeEventType.ORDER_UPDATED,
        RealtimeEventType.ORDER_CANCELLED,
        RealtimeEventType.ORDER_EXPIRED,
        RealtimeEventType.ORDER_REDISPATCHED,
        RealtimeEventType.ORDER_SEARCH_CANCELLED,
    ], RealtimeEventDomain.ORDER_LIFECYCLE),
    **dict.fromkeys([
        RealtimeEventType.DISPATCH_SEARCHING,
        RealtimeEventType.DRIVER_OFFERED,
        RealtimeEventType.DRIVER_OFFER_EXPIRED,
        RealtimeEventType.DRIVER_ASSIGNED,
        RealtimeEventType.DRIVER_REJECTED,
        RealtimeEventType.DRIVER_UNASSIGNED,
    ], RealtimeEventDomain.DISPATCH),
    **dict.fromkeys([
        RealtimeEventType.DRIVER_EN_ROUTE_TO_PICKUP,
        RealtimeEventType.DRIVER_ARRIVED_PICKUP,
        RealtimeEventType.PICKED_UP,
        RealtimeEventType.EN_ROUTE_TO_DROPOFF,
        RealtimeEventType.ARRIVED_DROPOFF,
        RealtimeEventType.DELIVERED,
        RealtimeEventType.DELIVERY_CONFIRMED,
    ], RealtimeEventDomain.TRIP_PROGRESS),
    **dict.fromkeys([
        RealtimeEventType.PAYMENT_REQUIRED,
        RealtimeEventType.PAYMENT_SUBMITTED,
        RealtimeEventType.PAYMENT_VERIFIED,
        RealtimeEventType.PAYMENT_REJECTED,
        RealtimeEventType.WALLET_UPDATED,
        RealtimeEventType.ESCROW_UPDATED,
        RealtimeEventType.REFUND_ISSUED,
    ], RealtimeEventDomain.PAYMENTS),
    **dict.fromkeys([
        RealtimeEventType.STORE_ACCEPTED,
        RealtimeEventType.STORE_PREP_STATUS_UPDATED,
        RealtimeEventType.STORE_READY,
        RealtimeEventType.STORE_CANCELLED,
        RealtimeEventType.ITEMS_UPDATED,
    ], RealtimeEventDomain.STORE_WORKFLOW),
    **dict.fromkeys([
        RealtimeEventType.COD_OTP_SENT,
        RealtimeEventType.COD_OTP_CONFIRMED,
        RealtimeEventType.COD_OTP_EXPIRED,
        RealtimeEventType.PARCEL_COD_COLLECTED,
        RealtimeEventType.PARCEL_COD_REMIT_REQUIRED,
        RealtimeEventType.PARCEL_COD_REMITTED,
        RealtimeEventType.PARCEL_COD_REMIT_REJECTED,
    ], RealtimeEventDomain.COD_OTP),
    **dict.fromkeys([
        RealtimeEventType.CHAT_MESSAGE,
        RealtimeEventType.CHAT_CONVERSATION_UPDATED,
        RealtimeEventType.SUPPORT_ASSIGNED,
    ], RealtimeEventDomain.CHAT_SUPPORT),
    **dict.fromkeys([
        RealtimeEventType.DRIVER_STATUS_CHANGED,
        RealtimeEventType.DRIVER_LOCATION_UPDATED,
        RealtimeEventType.DRIVER_TRUST_SCORE_UPDATED,
    ], RealtimeEventDomain.DRIVER_STATE),
}
