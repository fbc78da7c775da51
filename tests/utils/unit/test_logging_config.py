"""
Unit tests for utils/logging_config.py

Tests cover:
- Secret masking (tokens, OTP codes, PII)
- setup_logging() handler wiring
"""

import logging
import logging.handlers

import pytest

from order_ui.utils.logging_config import SecretMaskingFilter, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


class TestSecretMaskingFilter:

    def test_masks_bearer_token(self):
        assert "abc.def.ghi" not in SecretMaskingFilter.mask("Authorization: Bearer abc.def.ghi")

    def test_masks_otp_code(self):
        masked = SecretMaskingFilter.mask("COD_OTP_SENT payload otp=482913 order_id=42")
        assert "482913" not in masked
        assert "[REDACTED_OTP]" in masked
        assert "order_id=42" in masked

    def test_masks_email(self):
        assert SecretMaskingFilter.mask("rider jane@example.com") == "rider [REDACTED_EMAIL]"

    def test_masks_phone(self):
        assert "555-123-4567" not in SecretMaskingFilter.mask("call 555-123-4567")

    def test_leaves_event_types_alone(self):
        message = "Unknown realtime event type passed through: SOMETHING_NEW"
        assert SecretMaskingFilter.mask(message) == message

    def test_filter_masks_args_and_keeps_record(self):
        record = make_record("payload %s", ("token=abcdefghijklmnopqrstuvwxyz",))
        assert SecretMaskingFilter().filter(record) is True
        assert "abcdefghijklmnopqrstuvwxyz" not in record.getMessage()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:

    def test_handlers_installed(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setattr("order_ui.config.LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setattr("order_ui.config.LOG_LEVEL", "DEBUG")
        monkeypatch.setattr("order_ui.config.LOG_MASK_SECRETS", True)

        setup_logging()

        root = restore_root_logger
        assert root.level == logging.DEBUG
        file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.TimedRotatingFileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / "logs" / "order_ui.log").exists()
        assert all(
            any(isinstance(f, SecretMaskingFilter) for f in h.filters)
            for h in root.handlers
        )

    def test_masking_disabled(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setattr("order_ui.config.LOG_DIR", str(tmp_path))
        monkeypatch.setattr("order_ui.config.LOG_MASK_SECRETS", False)

        setup_logging()

        assert all(not h.filters for h in restore_root_logger.handlers)
