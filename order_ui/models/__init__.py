"""
Models Package

Structural DTOs for the inputs (order snapshots, realtime events) and
outputs (stage copy) of the order UI layer.
"""

from order_ui.models.order_snapshot import OrderSnapshotDTO
from order_ui.models.realtime_event import RealtimeEventDTO
from order_ui.models.stage_copy import StageCopyDTO
