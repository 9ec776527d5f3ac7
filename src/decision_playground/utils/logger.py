import logging

# ---------------------------------------------------------------------

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# ---------------------------------------------------------------------

logger = logging.getLogger("decision_playground")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def setup_logging(level: str = "INFO") -> None:
    """Set the package logger level by name."""
    logger.setLevel(getattr(logging, level))
