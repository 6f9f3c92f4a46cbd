import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init(app_name: str = "autorefresh", log_level: str = "INFO") -> None:
    """Initialize logging configuration.

    Args:
        app_name: Name of the application logger
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    # Console only; file handling is left to the process supervisor.
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ]
    )

    logging.getLogger(app_name).setLevel(numeric_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
