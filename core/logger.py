# core/logger.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
ROOT_NAME = "freddies"


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the game's root logger once; later calls only change the level.
    """
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    # world.session -> freddies.world.session
    return logging.getLogger(f"{ROOT_NAME}.{name}")
