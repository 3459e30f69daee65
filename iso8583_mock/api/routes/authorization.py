"""Authorization API routes.

Endpoints:
- POST /authorize - Authorization request (MTI 0100)
"""

from fastapi import APIRouter, status

from iso8583_mock.core.dependencies import AuthorizationServiceDep
from iso8583_mock.schemas.messages import AuthorizationRequest, AuthorizationResponse

router = APIRouter()


@router.post(
    "/authorize",
    response_model=AuthorizationResponse,
    status_code=status.HTTP_200_OK,
    tags=["Authorization"],
    summary="Authorize a transaction",
    description=(
        "Answer an ISO 8583 authorization request (MTI 0100) with MTI 0110. "
        "The business outcome is carried in DE39; the HTTP status is always 200."
    ),
    responses={
        200: {"description": "Authorization response (DE39 00, 05 or 03)"},
        422: {"description": "Message could not be deserialized"},
    },
)
async def authorize(
    message: AuthorizationRequest,
    service: AuthorizationServiceDep,
) -> AuthorizationResponse:
    """Approve PANs accepted by the issuer policy and record them for reversal."""
    return service.authorize(message)
