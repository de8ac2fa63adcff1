"""Logging configuration."""

import logging

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)

# Transport libraries log every request at INFO/DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(
    verbose: bool = False,
    json_format: bool = False,
) -> None:
    """Configure logging for the application.

    Logs go to stderr so that ``--json`` output on stdout stays parseable.

    Args:
        verbose: Enable debug level logging.
        json_format: Emit one JSON object per log line.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format=JSON_FORMAT if json_format else TEXT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
