import sys
from typing import Optional

from order_ui.enums.ui_stage import UiStage


class Localizator:
    # Stage copy map (key → language → (title, subtitle))
    # Keys are UiStage values plus the cancellation variant for
    # system-initiated no-driver cancellations.
    # Only English copy is shipped; other languages fall back to it.
    SYSTEM_NO_DRIVER_CANCEL_KEY = "cancelled_system_no_driver"

    STAGE_COPY_I18N_MAP = {
        UiStage.CHECKING_DRIVERS.value: {
            "en": ("Checking rider availability…",
                   "We’ll assign the best nearby rider (usually 1–2 minutes)."),
        },
        UiStage.NO_RIDERS.value: {
            "en": ("No riders available right now",
                   "Try again, or adjust pickup/dropoff."),
        },
        UiStage.ASSIGNING_RIDER.value: {
            "en": ("Assigning your rider…",
                   "We’ll match you with the best nearby rider."),
        },
        UiStage.WAITING_STORE_CONFIRM.value: {
            "en": ("Waiting for store confirmation…",
                   "Payment only proceeds after the store confirms your order."),
        },
        UiStage.WAITING_QUOTE.value: {
            "en": ("Reviewing your request…",
                   "A pharmacist/store staff will review your request and prepare a quote."),
        },
        UiStage.QUOTE_READY.value: {
            "en": ("Quote ready",
                   "Please confirm the quote and pay by wallet to dispatch."),
        },
        UiStage.WAITING_PAYMENT.value: {
            "en": ("Payment window is open",
                   "Payment only proceeds after the store confirms."),
        },
        UiStage.PREPARING.value: {
            "en": ("Preparing",
                   "The store is preparing your order."),
        },
        UiStage.RIDER_ON_THE_WAY.value: {
            "en": ("Rider on the way",
                   "Your fare & ETA are locked."),
        },
        UiStage.PICKED_UP.value: {
            "en": ("Picked up",
                   "Rider is heading to you."),
        },
        UiStage.NEAR_YOU.value: {
            "en": ("Near you",
                   "Please be ready to receive your order."),
        },
        UiStage.DELIVERED.value: {
            "en": ("Delivered",
                   "Please confirm when received."),
        },
        UiStage.COMPLETED.value: {
            "en": ("Completed",
                   "Thanks for using GOBAI."),
        },
        UiStage.CANCELLED.value: {
            "en": ("Booking cancelled",
                   "No penalty. You can book again anytime."),
        },
        SYSTEM_NO_DRIVER_CANCEL_KEY: {
            "en": ("Couldn’t match a rider this time",
                   "No penalty. You can try again anytime."),
        },
    }

    @staticmethod
    def get_stage_copy(key: str, lang: Optional[str] = None) -> tuple[str, str] | None:
        """
        Get (title, subtitle) for a stage copy key.

        Args:
            key: UiStage value or SYSTEM_NO_DRIVER_CANCEL_KEY
            lang: Optional language code (e.g., "en").
                  If None, uses config.COPY_LANGUAGE when the host
                  has loaded order_ui.config, otherwise "en".

        Returns:
            (title, subtitle) tuple, or None for an unknown key

        Example:
            title, subtitle = Localizator.get_stage_copy("picked_up", lang="en")
        """
        translation_map = Localizator.STAGE_COPY_I18N_MAP.get(key)
        if translation_map is None:
            return None

        language = lang if lang is not None else Localizator.default_language()
        language = str(language or "en").strip().lower()

        # Return localized version, fallback to EN
        return translation_map.get(language, translation_map["en"])

    @staticmethod
    def default_language() -> str:
        """
        COPY_LANGUAGE from order_ui.config if the host already imported it, else "en".

        Importing order_ui.config reads .env and may exit on bad settings,
        so stage copy lookups never trigger that import themselves.
        """
        config = sys.modules.get("order_ui.config")
        return getattr(config, "COPY_LANGUAGE", None) or "en"

    @staticmethod
    def supported_languages() -> set[str]:
        """Languages with a complete stage copy set."""
        languages = None
        for translation_map in Localizator.STAGE_COPY_I18N_MAP.values():
            keys = set(translation_map)
            languages = keys if languages is None else languages & keys
        return languages or set()
