"""
FastAPI dependency injection utilities.

The transaction store, approval policy and PAN masker are created once by
``create_app`` and kept on ``app.state``; these dependencies hand them to
the route handlers wrapped in request-scoped services.
"""

from typing import Annotated

from fastapi import Depends, Request

from iso8583_mock.core.errors import ConfigurationError
from iso8583_mock.core.security.pan_masking import PanMasker
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.services.approval_policy import ApprovalPolicy
from iso8583_mock.services.authorization_service import AuthorizationService
from iso8583_mock.services.reversal_service import ReversalService


def get_transaction_store(request: Request) -> TransactionStore:
    """Return the process-wide transaction store.

    Raises:
        ConfigurationError: If the application was built without a store
    """
    store = getattr(request.app.state, "transaction_store", None)
    if store is None:
        raise ConfigurationError("Transaction store is not configured")
    return store


def get_approval_policy(request: Request) -> ApprovalPolicy:
    """Return the approval policy configured for this application."""
    policy = getattr(request.app.state, "approval_policy", None)
    if policy is None:
        raise ConfigurationError("Approval policy is not configured")
    return policy


def get_pan_masker(request: Request) -> PanMasker:
    return getattr(request.app.state, "pan_masker", None) or PanMasker()


def get_authorization_service(
    store: TransactionStore = Depends(get_transaction_store),
    policy: ApprovalPolicy = Depends(get_approval_policy),
    masker: PanMasker = Depends(get_pan_masker),
) -> AuthorizationService:
    return AuthorizationService(store, policy=policy, masker=masker)


def get_reversal_service(
    store: TransactionStore = Depends(get_transaction_store),
    masker: PanMasker = Depends(get_pan_masker),
) -> ReversalService:
    return ReversalService(store, masker=masker)


TransactionStoreDep = Annotated[TransactionStore, Depends(get_transaction_store)]
AuthorizationServiceDep = Annotated[AuthorizationService, Depends(get_authorization_service)]
ReversalServiceDep = Annotated[ReversalService, Depends(get_reversal_service)]
