"""ISO 8583 message schemas (JSON rendition).

Data elements travel as JSON string fields named after their DE number
(``de2`` = PAN, ``de11`` = STAN, ...). No bitmap or length-prefixed encoding
is involved; every value is an opaque string.
"""

from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field


class MessageType(str, Enum):
    """Message Type Indicators handled by the mock issuer."""

    AUTHORIZATION_REQUEST = "0100"
    AUTHORIZATION_RESPONSE = "0110"
    REVERSAL_REQUEST = "0400"
    REVERSAL_RESPONSE = "0410"


class ResponseCode(str, Enum):
    """DE39 response codes returned by the mock issuer."""

    APPROVED = "00"
    INVALID_MTI = "03"
    NOT_AUTHORIZED = "05"
    DUPLICATE_OR_NOT_FOUND = "94"


AUTHORIZATION_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.APPROVED: "Transaction Approved",
    ResponseCode.NOT_AUTHORIZED: "Transaction Not Authorized",
    ResponseCode.INVALID_MTI: "Invalid MTI for Authorization Request",
}

REVERSAL_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.APPROVED: "Reversal Approved",
    ResponseCode.DUPLICATE_OR_NOT_FOUND: "Duplicate Reversal or Original Not Found",
    ResponseCode.INVALID_MTI: "Invalid MTI for Reversal Request",
}

UNKNOWN_RESPONSE_MESSAGE = "Unknown Response"


class DataElements(BaseModel):
    """Data elements shared by every message and echoed back in responses."""

    model_config = ConfigDict(extra="forbid")

    de2: str = Field(..., description="Primary Account Number (PAN)")
    de3: str = Field(..., description="Processing code")
    de4: str = Field(..., description="Amount, transaction")
    de7: str = Field(..., description="Transmission date & time (MMDDhhmmss UTC)")
    de11: str = Field(..., description="Systems Trace Audit Number (STAN)")
    de18: str = Field(..., description="Merchant type")
    de32: str = Field(..., description="Acquiring institution ID")
    de48: str = Field(..., description="Additional data (private use)")
    de49: str = Field(..., description="Currency code, transaction")
    de61: str = Field(..., description="POS data")


class ReversalDataElements(DataElements):
    """Shared elements plus the reference to the original transaction."""

    de90: str = Field(..., description="Original data elements")


class AuthorizationRequest(DataElements):
    """Authorization request (MTI 0100)."""

    mti: str = Field(..., description="Message Type Indicator, expected 0100")


class AuthorizationResponse(DataElements):
    """Authorization response (MTI 0110)."""

    mti: str = Field(..., description="Message Type Indicator (0110)")
    de39: str = Field(..., description="Response code")
    response_message: str = Field(..., description="Human-readable response")


class ReversalRequest(ReversalDataElements):
    """Reversal request (MTI 0400)."""

    mti: str = Field(..., description="Message Type Indicator, expected 0400")
    de22: str = Field(..., description="Point of service entry mode")
    de39: str = Field(..., description="Original response code")


class ReversalResponse(ReversalDataElements):
    """Reversal response (MTI 0410)."""

    mti: str = Field(..., description="Message Type Indicator (0410)")
    de39: str = Field(..., description="Response code")
    response_message: str = Field(..., description="Human-readable response")


ResponseT = TypeVar("ResponseT", AuthorizationResponse, ReversalResponse)


def echo_fields(request: BaseModel, response_cls: type[BaseModel]) -> dict[str, str]:
    """Collect the request values the response echoes back verbatim.

    Only data elements declared on the response's echo base are copied, so
    request-only fields (``de22`` and the original ``de39`` on reversals)
    never leak into the response.
    """
    echo_base = ReversalDataElements if issubclass(response_cls, ReversalDataElements) else DataElements
    return request.model_dump(include=set(echo_base.model_fields))


def build_response(
    response_cls: type[ResponseT],
    request: BaseModel,
    mti: MessageType,
    code: ResponseCode,
    messages: dict[ResponseCode, str],
) -> ResponseT:
    """Build an echo response carrying ``code`` and its human-readable text."""
    return response_cls(
        **echo_fields(request, response_cls),
        mti=mti.value,
        de39=code.value,
        response_message=messages.get(code, UNKNOWN_RESPONSE_MESSAGE),
    )
