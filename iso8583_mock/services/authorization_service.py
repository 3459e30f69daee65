"""Authorization (MTI 0100 -> 0110) handling."""

from iso8583_mock.core.logging import LoggerMixin
from iso8583_mock.core.security.pan_masking import PanMasker
from iso8583_mock.domain.models.transaction import Transaction
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.schemas.messages import (
    AUTHORIZATION_MESSAGES,
    AuthorizationRequest,
    AuthorizationResponse,
    MessageType,
    ResponseCode,
    build_response,
)
from iso8583_mock.services.approval_policy import ApprovalPolicy, PanPrefixPolicy


class AuthorizationService(LoggerMixin):
    """Answers authorization requests and records approvals for later reversal."""

    def __init__(
        self,
        store: TransactionStore,
        policy: ApprovalPolicy | None = None,
        masker: PanMasker | None = None,
    ):
        self.store = store
        self.policy = policy or PanPrefixPolicy()
        self.masker = masker or PanMasker()

    def authorize(self, request: AuthorizationRequest) -> AuthorizationResponse:
        """Process an authorization request.

        Every request yields a response: an unexpected MTI is answered with
        "03" without touching the store, otherwise the approval policy picks
        "00" or "05". Only approvals are stored, keyed by STAN (DE11).
        """
        self.logger.info("authorization_request", **self.masker.mask_message(request.model_dump()))

        if request.mti != MessageType.AUTHORIZATION_REQUEST.value:
            code = ResponseCode.INVALID_MTI
        elif self.policy.approves(request):
            code = ResponseCode.APPROVED
        else:
            code = ResponseCode.NOT_AUTHORIZED

        if code == ResponseCode.APPROVED:
            self.store.put(
                request.de11,
                Transaction(
                    pan=request.de2,
                    amount=request.de4,
                    stan=request.de11,
                    timestamp=request.de7,
                    response_code=code.value,
                ),
            )

        response = build_response(
            AuthorizationResponse,
            request,
            MessageType.AUTHORIZATION_RESPONSE,
            code,
            AUTHORIZATION_MESSAGES,
        )
        self.logger.info("authorization_response", **self.masker.mask_message(response.model_dump()))
        return response
