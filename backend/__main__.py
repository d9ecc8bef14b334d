#!/usr/bin/env python3
"""
Main entry point for the envelope energy backend
Reports the engine self-check, then starts the server
"""
import logging
import sys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def report_self_check() -> bool:
    """Log each self-check result; False when any failed"""
    from services.self_check import SELF_CHECK_RESULTS

    for result in SELF_CHECK_RESULTS:
        status = "PASS" if result.passed else "FAIL"
        logger.info(f"[{status}] {result.name}")
    return all(r.passed for r in SELF_CHECK_RESULTS)


def start_server():
    """Start the uvicorn server"""
    try:
        import uvicorn
        from app.config import get_settings
        from app.main import app

        settings = get_settings()
        logger.info(f"Starting envelope energy API on port {settings.port}")
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info"
        )

    except Exception as e:
        logger.exception(f"Server startup failed: {e}")
        sys.exit(1)


def main():
    """Main entry point"""
    if not report_self_check():
        logger.warning("Engine self-check reported failures; results may be unreliable")
    start_server()


if __name__ == "__main__":
    main()
