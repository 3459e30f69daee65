"""Reversal API routes.

Endpoints:
- POST /reversal - Reversal request (MTI 0400)
"""

from fastapi import APIRouter, status

from iso8583_mock.core.dependencies import ReversalServiceDep
from iso8583_mock.schemas.messages import ReversalRequest, ReversalResponse

router = APIRouter()


@router.post(
    "/reversal",
    response_model=ReversalResponse,
    status_code=status.HTTP_200_OK,
    tags=["Reversal"],
    summary="Reverse a transaction",
    description=(
        "Answer an ISO 8583 reversal request (MTI 0400) with MTI 0410. "
        "DE39 is 00 when the STAN was previously authorized, 94 otherwise."
    ),
    responses={
        200: {"description": "Reversal response (DE39 00, 94 or 03)"},
        422: {"description": "Message could not be deserialized"},
    },
)
async def reverse(
    message: ReversalRequest,
    service: ReversalServiceDep,
) -> ReversalResponse:
    """Look up the original authorization by STAN."""
    return service.reverse(message)
