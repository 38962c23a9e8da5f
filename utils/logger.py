# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO, name: str = "shopping_cart"):
    """
    Configure the shared logger for the shopping cart.

    Features:
    - Daily rotating log files (one file per day, 7 kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates the log directory automatically

    models.cart and services.pricing_service log through child loggers
    ("shopping_cart.cart", "shopping_cart.pricing"), so their records end
    up here once this has been called.
    """

    # Create log directory if not exists
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"{name}.log"

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
