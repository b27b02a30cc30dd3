"""
Structured logging for Wallet Core.

JSON logs with timestamp, event_type and routing/asset context.
Use get_logger() in all modules.
"""

from wallet_core.wallet_logging.logger import get_logger, mask_recipient

__all__ = ["get_logger", "mask_recipient"]
