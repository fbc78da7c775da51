"""
Unit tests for OrderStageService.copy_for.

Tests cover:
- Totality over UiStage
- Cancelled copy variants
- Unknown stage / language fallbacks
"""

import logging

import pytest

from order_ui.enums.ui_stage import UiStage
from order_ui.models.stage_copy import StageCopyDTO
from order_ui.services.order_stage import OrderStageService, copy_for_stage


class TestCopyTotality:

    @pytest.mark.parametrize("stage", list(UiStage))
    def test_every_stage_has_copy(self, stage):
        copy = OrderStageService.copy_for(stage)
        assert isinstance(copy, StageCopyDTO)
        assert copy.title.strip()
        assert copy.subtitle.strip()

    def test_stages_have_distinct_titles(self):
        titles = {OrderStageService.copy_for(stage).title for stage in UiStage}
        assert len(titles) == len(UiStage)

    def test_string_stage(self):
        assert OrderStageService.copy_for("picked_up").title == "Picked up"

    def test_fixed_copy(self):
        copy = OrderStageService.copy_for(UiStage.NO_RIDERS)
        assert copy.title == "No riders available right now"
        assert copy.subtitle == "Try again, or adjust pickup/dropoff."


class TestCancelledCopy:

    def test_system_no_driver_copy(self, system_no_driver_cancelled_order):
        stage = OrderStageService.classify(system_no_driver_cancelled_order)
        copy = copy_for_stage(stage, system_no_driver_cancelled_order)
        assert "match a rider" in copy.title
        assert copy.title.startswith("Couldn")
        assert copy.subtitle == "No penalty. You can try again anytime."

    def test_generic_cancel_copy(self, user_cancelled_order):
        copy = OrderStageService.copy_for(UiStage.CANCELLED, user_cancelled_order)
        assert copy.title == "Booking cancelled"
        assert copy.subtitle == "No penalty. You can book again anytime."

    def test_cancelled_without_order(self):
        assert OrderStageService.copy_for(UiStage.CANCELLED).title == "Booking cancelled"

    def test_order_ignored_for_other_stages(self, system_no_driver_cancelled_order):
        copy = OrderStageService.copy_for(UiStage.DELIVERED, system_no_driver_cancelled_order)
        assert copy.title == "Delivered"


class TestCopyFallbacks:

    def test_unknown_stage_uses_assigning_rider(self, caplog):
        with caplog.at_level(logging.WARNING, logger="order_ui.services.order_stage"):
            copy = OrderStageService.copy_for("teleporting")
        assert copy == OrderStageService.copy_for(UiStage.ASSIGNING_RIDER)
        assert "teleporting" in caplog.text

    def test_none_stage(self):
        assert OrderStageService.copy_for(None).title == "Assigning your rider…"

    def test_unknown_language_falls_back_to_english(self):
        assert OrderStageService.copy_for(UiStage.PREPARING, lang="xx").title == "Preparing"
