"""Schemas package for request/response models."""

from iso8583_mock.schemas.messages import (
    AuthorizationRequest,
    AuthorizationResponse,
    DataElements,
    MessageType,
    ResponseCode,
    ReversalDataElements,
    ReversalRequest,
    ReversalResponse,
    build_response,
)

__all__ = [
    "AuthorizationRequest",
    "AuthorizationResponse",
    "DataElements",
    "MessageType",
    "ResponseCode",
    "ReversalDataElements",
    "ReversalRequest",
    "ReversalResponse",
    "build_response",
]
