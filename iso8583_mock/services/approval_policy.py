"""Issuer approval policies.

The mock issuer has no account data, so the approve/decline decision is a
stand-in rule over the request. Policies are injected into
AuthorizationService; the default approves PANs starting with "4".
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from iso8583_mock.core.config import Settings
from iso8583_mock.schemas.messages import AuthorizationRequest

DEFAULT_APPROVED_PREFIXES = ("4",)


class ApprovalPolicy(Protocol):
    """Decides whether a well-formed authorization request is approved."""

    def approves(self, request: AuthorizationRequest) -> bool: ...


class PanPrefixPolicy:
    """Approves when the PAN (DE2) starts with one of the configured prefixes."""

    def __init__(self, prefixes: Iterable[str] = DEFAULT_APPROVED_PREFIXES):
        self.prefixes = tuple(prefixes)
        if not self.prefixes:
            raise ValueError("PanPrefixPolicy requires at least one prefix")
        # An empty prefix would match every PAN
        if any(not prefix.strip() for prefix in self.prefixes):
            raise ValueError("PanPrefixPolicy prefixes must not be blank")

    def approves(self, request: AuthorizationRequest) -> bool:
        return request.de2.startswith(self.prefixes)

    def __repr__(self) -> str:
        return f"PanPrefixPolicy(prefixes={self.prefixes!r})"


def create_approval_policy(settings: Settings) -> ApprovalPolicy:
    """Build the approval policy described by the issuer settings."""
    return PanPrefixPolicy(settings.issuer.prefixes_list)
