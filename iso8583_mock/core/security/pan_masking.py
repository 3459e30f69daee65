"""PCI helpers for log output.

Request and response messages are logged in full for debugging, except for
the PAN (DE2), which is reduced to its BIN and last four digits.

Usage:
    masker = PanMasker()
    logger.info("authorization_request", **masker.mask_message(payload))
"""

from __future__ import annotations

from typing import Any

PAN_FIELD = "de2"

# First six (BIN) and last four digits stay visible
VISIBLE_PREFIX = 6
VISIBLE_SUFFIX = 4


def mask_pan(pan: str) -> str:
    """Mask the middle digits of a PAN.

    Values too short to carry a BIN and last four are masked entirely.
    """
    if len(pan) <= VISIBLE_PREFIX + VISIBLE_SUFFIX:
        return "*" * len(pan)
    hidden = len(pan) - VISIBLE_PREFIX - VISIBLE_SUFFIX
    return pan[:VISIBLE_PREFIX] + "*" * hidden + pan[-VISIBLE_SUFFIX:]


class PanMasker:
    """Produces log-safe copies of ISO 8583 messages.

    Attributes:
        enabled: When False, messages are returned unchanged (local debugging).
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def mask_message(self, message: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of ``message`` with the PAN masked."""
        masked = dict(message)
        if self.enabled and isinstance(masked.get(PAN_FIELD), str):
            masked[PAN_FIELD] = mask_pan(masked[PAN_FIELD])
        return masked


def create_pan_masker(enabled: bool = True) -> PanMasker:
    """Factory function to create a PanMasker instance."""
    return PanMasker(enabled=enabled)
