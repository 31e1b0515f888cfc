import logging, sys
from app.settings import settings


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    for noisy_logger in ("httpx", "httpcore"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
    if not settings.GEMINI_API_KEY:
        logging.getLogger("app").warning(
            "GEMINI_API_KEY is not set. Analysis and upload endpoints will fail "
            "and course discovery will serve the static catalog until it is configured.")
