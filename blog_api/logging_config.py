import logging.config

from blog_api.config import get_settings

# Server loggers stay at INFO even when the app runs at DEBUG
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging():
    """
    Send blog_api, uvicorn and root logs to one stdout handler.
    DEBUG=true lowers blog_api and root to DEBUG.
    """
    log_level = "DEBUG" if get_settings().DEBUG else "INFO"

    def console(level: str, propagate: bool = False) -> dict:
        return {"handlers": ["console"], "level": level, "propagate": propagate}

    loggers = {name: console("INFO") for name in UVICORN_LOGGERS}
    loggers["blog_api"] = console(log_level)
    loggers["root"] = console(log_level, propagate=True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": loggers,
        }
    )
