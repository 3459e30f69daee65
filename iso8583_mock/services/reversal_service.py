"""Reversal (MTI 0400 -> 0410) handling."""

from iso8583_mock.core.logging import LoggerMixin
from iso8583_mock.core.security.pan_masking import PanMasker
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.schemas.messages import (
    REVERSAL_MESSAGES,
    MessageType,
    ResponseCode,
    ReversalRequest,
    ReversalResponse,
    build_response,
)


class ReversalService(LoggerMixin):
    """Answers reversal requests by looking up the original authorization."""

    def __init__(self, store: TransactionStore, masker: PanMasker | None = None):
        self.store = store
        self.masker = masker or PanMasker()

    def reverse(self, request: ReversalRequest) -> ReversalResponse:
        """Process a reversal request.

        The original authorization is looked up by the reversal's STAN (DE11).
        The stored entry is left in place, so reversing the same STAN again
        is approved again.
        """
        self.logger.info("reversal_request", **self.masker.mask_message(request.model_dump()))

        if request.mti != MessageType.REVERSAL_REQUEST.value:
            code = ResponseCode.INVALID_MTI
        elif self.store.exists(request.de11):
            code = ResponseCode.APPROVED
        else:
            code = ResponseCode.DUPLICATE_OR_NOT_FOUND

        response = build_response(
            ReversalResponse,
            request,
            MessageType.REVERSAL_RESPONSE,
            code,
            REVERSAL_MESSAGES,
        )
        self.logger.info("reversal_response", **self.masker.mask_message(response.model_dump()))
        return response
