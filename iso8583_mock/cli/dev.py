def main() -> None:
    """Run development server with auto-reload."""
    import uvicorn

    from iso8583_mock.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "iso8583_mock.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=True,
        log_level="info",
    )
