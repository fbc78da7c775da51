from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator


class OrderSnapshotDTO(BaseModel):
    """
    Point-in-time view of an order as handed over by the API layer.

    Every field is optional and untyped on purpose: values are coerced
    (str -> strip -> lower) at comparison time in services/order_stage.py,
    never here. Unknown fields are ignored.
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    status: Any = None
    store_status: Any = None
    payment_status: Any = None
    payment_method: Any = None
    dispatch_status: Any = None
    store_id: Any = None
    driver_id: Any = None
    cancelled_by: Any = None
    cancel_reason: Any = None
    requires_quote_confirmation: Any = None
    request_kind: Any = None
    quote_status: Any = None
    near_you: Any = None

    @model_validator(mode='before')
    @classmethod
    def accept_any_shape(cls, data):
        """Accept dicts, ORM rows or plain objects; anything else is an empty snapshot."""
        if data is None:
            return {}
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if isinstance(k, str)}
        # Object input (ORM row, SimpleNamespace, ...) - read known attributes only
        result = {}
        for field_name in cls.model_fields:
            try:
                value = getattr(data, field_name, None)
            except Exception:
                value = None
            if value is not None:
                result[field_name] = value
        return result

    @classmethod
    def from_raw(cls, raw) -> 'OrderSnapshotDTO':
        """Build a snapshot from whatever the caller has. Never raises."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError:
            return cls()
