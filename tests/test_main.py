import logging

from core.logger import get_logger, setup_logger
from core.settings import HEIGHT, WIDTH
from main import parse_args


def test_defaults():
    args = parse_args([])
    assert (args.width, args.height) == (WIDTH, HEIGHT)
    assert args.seed is None
    assert args.compact is None
    assert args.log_level == "INFO"


def test_flags():
    args = parse_args(["--seed", "5", "--width", "480", "--compact", "--log-level", "DEBUG"])
    assert args.seed == 5
    assert args.width == 480
    assert args.compact is True


def test_logger_names_and_level():
    root = setup_logger(logging.DEBUG)
    assert root.level == logging.DEBUG
    assert get_logger("world.session").name == "freddies.world.session"
    # calling again does not stack handlers
    setup_logger(logging.WARNING)
    assert len(root.handlers) == 1
