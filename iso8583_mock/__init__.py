"""Mock ISO 8583 Authorization Service.

This service simulates a Mastercard-style issuer host over JSON:
- Authorization requests (MTI 0100) answered with MTI 0110
- Reversal requests (MTI 0400) answered with MTI 0410
- Approved authorizations kept in memory for reversal lookups
"""

__version__ = "0.1.0"
