"""
Test that wallet_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from wallet_logging and use the logger."""
    from wallet_core.wallet_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", recipient="1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")


def test_mask_recipient_shortens_long_values():
    """Recipients longer than 8 chars are truncated for logs."""
    from wallet_core.wallet_logging import mask_recipient

    assert mask_recipient("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa") == "1A1zP1eP..."
    assert mask_recipient("$bob") == "$bob"
    assert mask_recipient(None) == ""
    assert mask_recipient(mask_recipient("alice@example.com")) == "alice@ex..."


def test_event_dict_processing():
    """Recipient keys are masked and event becomes event_type."""
    from wallet_core.wallet_logging.logger import _mask_recipients, _normalize_event

    event_dict = {"event": "route_planned", "recipient": "alice@example.com", "to": "$bob", "amount": "1"}
    event_dict = _normalize_event(None, "info", _mask_recipients(None, "info", event_dict))
    assert event_dict == {
        "event_type": "route_planned",
        "message": "route_planned",
        "recipient": "alice@ex...",
        "to": "$bob",
        "amount": "1",
    }
