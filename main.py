"""
Main entrypoint: serve the TON inspector web app.

Env: TONAPI_BASE_URL, TONAPI_API_KEY, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn ton_inspector.api_server.app:app --host 0.0.0.0 --port 8000
"""

from ton_inspector.config import get_settings
from ton_inspector.inspector_logging import get_logger

logger = get_logger("main")


def main() -> None:
    settings = get_settings()

    from ton_inspector.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        tonapi_base_url=settings.tonapi_base_url,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
