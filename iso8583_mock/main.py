"""Mock ISO 8583 Authorization Service.

This service answers Mastercard-style authorization (0100/0110) and reversal
(0400/0410) messages exchanged as JSON, keeping approved authorizations in
memory so that reversals can find them.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from iso8583_mock.api.routes import api_router
from iso8583_mock.core.config import AppEnvironment, Settings, get_settings
from iso8583_mock.core.errors import MessageValidationError, MockIssuerError, get_status_code
from iso8583_mock.core.logging import setup_logging
from iso8583_mock.core.security.pan_masking import create_pan_masker
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.services.approval_policy import ApprovalPolicy, create_approval_policy

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    prefix = settings.app.api_prefix
    logger.info(
        "Mock ISO 8583 issuer listening on %s:%s (POST %s/authorize MTI 0100, POST %s/reversal MTI 0400)",
        settings.server.host,
        settings.server.port,
        prefix,
        prefix,
        extra={
            "app": settings.app.name,
            "env": settings.app.env,
            "version": settings.app.version,
        },
    )

    yield

    logger.info(
        "Mock ISO 8583 issuer stopped",
        extra={"stored_transactions": len(app.state.transaction_store)},
    )


def create_app(
    store: TransactionStore | None = None,
    policy: ApprovalPolicy | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Transaction store shared by the handlers; a fresh one is
            created when omitted.
        policy: Approval policy for authorizations; built from the issuer
            settings when omitted.
    """
    settings = get_settings()

    app = FastAPI(
        title="Mock ISO 8583 Authorization API",
        description=(
            "Mastercard-style ISO 8583 authorization (0100/0110) and reversal (0400/0410) "
            "simulator using JSON data elements."
        ),
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.env != AppEnvironment.PROD else None,
        redoc_url="/redoc" if settings.app.env != AppEnvironment.PROD else None,
        openapi_url="/openapi.json" if settings.app.env != AppEnvironment.PROD else None,
    )

    app.state.settings = settings
    app.state.transaction_store = store if store is not None else TransactionStore()
    app.state.approval_policy = policy if policy is not None else create_approval_policy(settings)
    app.state.pan_masker = create_pan_masker(enabled=settings.observability.mask_pan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_allowed_origins,
        allow_credentials=settings.security.cors_allow_credentials,
        allow_methods=settings.security.cors_allow_methods,
        allow_headers=settings.security.cors_allow_headers,
    )

    app.include_router(api_router, prefix=settings.app.api_prefix)

    setup_telemetry(app, settings)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render undeserializable messages as a domain validation error."""
        # Raw input is dropped so rejected PANs do not reach responses or logs
        errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
        error = MessageValidationError("Invalid ISO 8583 message", jsonable_encoder(errors))
        logger.warning(
            "Rejected undeserializable message",
            extra={"path": request.url.path, "errors": error.details},
        )
        return await domain_error_handler(request, error)

    @app.exception_handler(MockIssuerError)
    async def domain_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: MockIssuerError
    ) -> JSONResponse:
        """Handle domain-specific errors and return appropriate HTTP responses."""
        status_code = get_status_code(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, **({"errors": exc.details} if exc.details else {})},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions and return 500 error responses."""
        logger.exception(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Setup OpenTelemetry instrumentation."""
    if not settings.observability.otlp_endpoint:
        return

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.observability.service_name,
        }
    )

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.observability.otlp_endpoint,
        insecure=settings.observability.otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "iso8583_mock.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.env == AppEnvironment.LOCAL and settings.app.debug,
        workers=settings.server.workers,
        log_level=settings.app.log_level.value.lower(),
    )


if __name__ == "__main__":
    run()
