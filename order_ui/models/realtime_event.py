from typing import Any

from pydantic import BaseModel, ConfigDict


class RealtimeEventDTO(BaseModel):
    """
    Realtime notification payload as delivered by the socket transport.

    The shape is not owned by us: only `type` and `data` are named, every
    other key (order_id, job_id, orderId, ...) is kept as an extra field so
    utils/realtime_events.extract_order_id can look it up.
    """
    model_config = ConfigDict(extra='allow')

    type: Any = None
    data: Any = None
