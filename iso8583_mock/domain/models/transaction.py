"""Authorized transaction record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    """An approved authorization, kept so later reversals can find it."""

    pan: str
    amount: str
    stan: str
    timestamp: str
    response_code: str
