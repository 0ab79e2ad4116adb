import logging
import sys

from loguru import logger

# Stdlib loggers that are chatty at DEBUG and carry nothing the analyzer needs
NOISY_LIBRARIES = ("httpx", "httpcore", "web3", "urllib3")


def setup_logger(
    *,
    json_logs: bool = False,
    level: str = "INFO",
    log_file: str | None = None,
) -> None:
    """Configure loguru sinks for the analyzer.

    Console goes to stderr so the rendered report on stdout stays clean.
    When ``log_file`` is set it always captures DEBUG, which keeps provider
    retries and chain probes traceable after the fact.
    """
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, serialize=True, level=level.upper())
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan> - "
                "<level>{message}</level>"
            ),
            level=level.upper(),
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            rotation="20 MB",
            retention="7 days",
            compression="gz",
            level="DEBUG",
            serialize=json_logs,
        )

    for name in NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
