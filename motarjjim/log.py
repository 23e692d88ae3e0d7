import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """Send log records to stderr; stdout is kept for translation output."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    for noisy in ("google", "grpc", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
